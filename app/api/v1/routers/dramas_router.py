from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from app.deps import drama_service
from app.models.drama import Drama, Membership
from app.models.response import MembershipStatus, Success
from app.schemas.drama_schema import CreateDrama, JoinDrama
from app.services.drama_service import DramaService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_drama(
    create_model: CreateDrama,
    response: Response,
    service: DramaService = Depends(drama_service),
) -> Drama:
    drama = service.create_drama(create_model.model_dump())
    response.headers["Location"] = f"/api/v1/dramas/{drama.slug}"
    return drama


@router.get("", status_code=status.HTTP_200_OK)
def get_dramas(service: DramaService = Depends(drama_service)) -> list[Drama]:
    return service.get_dramas()


@router.get("/{slug}", status_code=status.HTTP_200_OK)
def get_drama(slug: str, service: DramaService = Depends(drama_service)) -> Drama:
    return service.get_drama(slug)


@router.get("/{slug}/membership", status_code=status.HTTP_200_OK)
def get_membership(
    slug: str,
    user_id: str = Query(alias="userId", min_length=1),
    service: DramaService = Depends(drama_service),
) -> MembershipStatus:
    return service.get_membership(slug, user_id)


@router.put("/{slug}/membership", status_code=status.HTTP_200_OK)
def join_drama(
    slug: str,
    join_model: JoinDrama,
    service: DramaService = Depends(drama_service),
) -> Membership:
    return service.join_drama(slug, join_model.user_id, join_model.color)


@router.delete("/{slug}/membership", status_code=status.HTTP_200_OK)
def leave_drama(
    slug: str,
    user_id: str = Query(alias="userId", min_length=1),
    service: DramaService = Depends(drama_service),
) -> Success:
    service.leave_drama(slug, user_id)
    return Success()
