from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from app.deps import post_service
from app.models.post import Post
from app.models.response import Success
from app.schemas.post_schema import CreatePost, UpdatePost, VotePost
from app.services.post_service import PostService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_post(
    create_model: CreatePost,
    response: Response,
    service: PostService = Depends(post_service),
) -> Post:
    post = service.create_post(create_model.model_dump())
    response.headers["Location"] = f"/api/v1/posts/{post.id}"
    return post


@router.get("", status_code=status.HTTP_200_OK)
def get_posts(
    user_id: str | None = Query(None, alias="userId"),
    drama_slug: str | None = Query(None, alias="dramaSlug"),
    service: PostService = Depends(post_service),
) -> list[Post]:
    return service.get_posts(user_id, drama_slug)


@router.post("/vote", status_code=status.HTTP_200_OK)
def vote(vote_model: VotePost, service: PostService = Depends(post_service)) -> Post:
    return service.vote(vote_model.post_id, vote_model.user_id, vote_model.vote)


@router.delete("/{post_id}", status_code=status.HTTP_200_OK)
def delete_post(post_id: str, service: PostService = Depends(post_service)) -> Success:
    service.delete_post(post_id)
    return Success()


@router.get("/{post_id}", status_code=status.HTTP_200_OK)
def get_post(post_id: str, service: PostService = Depends(post_service)) -> Post:
    return service.get_post(post_id)


@router.put("/{post_id}", status_code=status.HTTP_200_OK)
def update_post(
    update_model: UpdatePost,
    post_id: str,
    service: PostService = Depends(post_service),
) -> Success:
    service.update_post(post_id, update_model.model_dump())
    return Success()
