from typing import Any

import pendulum
from aws_lambda_powertools import Logger
from bson import ObjectId

from app import settings
from app.exceptions import (DramaNotFoundException, PostNotFoundException,
                            VoteConflictException)
from app.models.post import Post, VoteValue
from app.repositories.drama_repository import DramaRepository
from app.repositories.post_repository import PostRepository
from app.utils import to_object_id


class PostService:
    ERROR_DRAMA_NOT_FOUND = "The requested drama was not found"
    ERROR_POST_NOT_FOUND = "The requested post was not found"
    ERROR_VOTE_CONFLICT = "The vote could not be applied, please try again"

    def __init__(self):
        self._logger = Logger(service=settings.app_name, utc=True)
        self._repo = PostRepository()
        self._drama_repo = DramaRepository()

    def _get_post(self, post_id: ObjectId) -> Post:
        item = self._repo.get_post_by_id(post_id)
        if not item:
            self._logger.warning(f"Post not found: {post_id=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        return Post.model_validate(item)

    def create_post(self, data: dict[str, Any]) -> Post:
        drama_slug = data.get("drama_slug")
        drama_title = None
        if drama_slug:
            drama = self._drama_repo.get_drama_by_slug(drama_slug)
            if not drama:
                self._logger.warning(f"Drama not found: {drama_slug=}")
                raise DramaNotFoundException(self.ERROR_DRAMA_NOT_FOUND)
            drama_title = drama["title"]
        document = {
            "title": data["title"],
            "content": data["content"],
            "author": data["author"],
            "dramaSlug": drama_slug,
            "dramaTitle": drama_title,
            "votes": 0,
            "voters": [],
            "createdAt": pendulum.now("UTC"),
            "editedAt": None,
        }
        post_id = self._repo.create_post(document)
        self._logger.info(f"Post created: {post_id=}")
        document.pop("_id", None)
        return Post.model_validate({**document, "id": post_id})

    def delete_post(self, post_id: str):
        if not self._repo.delete_post(to_object_id(post_id)):
            self._logger.warning(f"Post not found: {post_id=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        self._logger.info(f"Post deleted: {post_id=}")

    def get_post(self, post_id: str) -> Post:
        return self._get_post(to_object_id(post_id))

    def get_posts(
        self, user_id: str | None = None, drama_slug: str | None = None
    ) -> list[Post]:
        query = {}
        if user_id:
            query["author.id"] = user_id
        if drama_slug:
            query["dramaSlug"] = drama_slug
        return [Post.model_validate(item) for item in self._repo.get_posts(query)]

    def update_post(self, post_id: str, data: dict[str, Any]):
        updated = self._repo.update_post(
            to_object_id(post_id),
            {
                "title": data["title"],
                "content": data["content"],
                "editedAt": pendulum.now("UTC"),
            },
        )
        if not updated:
            self._logger.warning(f"Post not found: {post_id=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        self._logger.info(f"Post updated: {post_id=}")

    def vote(self, post_id: str, user_id: str, vote: VoteValue | None) -> Post:
        """
        Record ``vote`` as the user's vote on the post.

        ``None`` retracts the user's vote, a value equal to the recorded one is
        a no-op. Every write is conditional on the voter record read just
        before it, so a concurrent change to the same record makes the write
        miss and the whole step is repeated from a fresh read.
        """
        object_id = to_object_id(post_id)
        for attempt in range(1, settings.vote_max_attempts + 1):
            post = self._get_post(object_id)
            current = post.vote_of(user_id)
            if vote == current:
                self._logger.debug(f"Vote unchanged: {post_id=} {user_id=} {vote=}")
                return post
            if vote is None:
                applied = self._repo.remove_voter(object_id, user_id, current)
            elif current is None:
                applied = self._repo.add_voter(object_id, user_id, vote)
            else:
                applied = self._repo.change_voter(object_id, user_id, current, vote)
            if applied:
                self._logger.info(
                    f"Vote recorded: {post_id=} {user_id=} {current=} {vote=}"
                )
                return self._get_post(object_id)
            self._logger.warning(
                f"Voter record changed concurrently: {post_id=} {user_id=} {attempt=}"
            )
        raise VoteConflictException(self.ERROR_VOTE_CONFLICT)
