"""
Client-side state for a list of posts.

The controller never patches its state locally after a mutation: every
edit, delete or vote is followed by a full re-fetch, and the displayed vote
counts and highlights always come from the server's answer.
"""

import asyncio
from typing import Callable, Literal

import httpx
from aws_lambda_powertools import Logger

from app import settings
from app.client.api_client import ForumApiClient
from app.models.auth import CurrentUser
from app.models.camel_model import CamelModel
from app.models.post import Post, VoteValue

ViewMode = Literal["all", "my-posts", "drama"]

CONFIRM_DELETE_MESSAGE = "Are you sure you want to delete this post?"
ERROR_MESSAGE_DELETE_FAILED = "Failed to delete post"
ERROR_MESSAGE_UPDATE_FAILED = "Failed to update post"

# ValueError covers undecodable JSON bodies and pydantic ValidationError.
RESPONSE_ERRORS = (httpx.HTTPError, ValueError)


class EditDraft(CamelModel):
    post_id: str
    title: str
    content: str


class PostView(CamelModel):
    post: Post
    user_vote: VoteValue | None = None
    drama_color: str | None = None
    can_edit: bool = False
    is_editing: bool = False


class PostListController:
    def __init__(
        self,
        api: ForumApiClient,
        current_user: CurrentUser,
        view_mode: ViewMode = "all",
        drama_slug: str | None = None,
        confirm: Callable[[str], bool] = lambda message: False,
        alert: Callable[[str], None] = lambda message: None,
    ):
        self._logger = Logger(service=settings.app_name, utc=True)
        self._api = api
        self._confirm = confirm
        self._alert = alert
        self.current_user = current_user
        self.view_mode = view_mode
        self.drama_slug = drama_slug
        self.loading = True
        self.posts: list[Post] = []
        self.user_votes: dict[str, VoteValue] = {}
        self.drama_colors: dict[str, str] = {}
        self.draft: EditDraft | None = None
        self.pending_votes: set[str] = set()

    def _filters(self) -> dict[str, str | None]:
        if self.view_mode == "my-posts":
            return {"user_id": self.current_user.id}
        if self.view_mode == "drama" and self.drama_slug:
            return {"drama_slug": self.drama_slug}
        return {}

    async def _fetch_drama_color(self, slug: str) -> str | None:
        try:
            membership = await self._api.get_membership(slug, self.current_user.id)
        except RESPONSE_ERRORS as exc:
            self._logger.error(f"Error fetching drama color {slug=}", exc_info=exc)
            return None
        return membership.color

    async def _fetch_drama_colors(self, posts: list[Post]) -> dict[str, str]:
        slugs = list(dict.fromkeys(post.drama_slug for post in posts if post.drama_slug))
        colors = await asyncio.gather(*(self._fetch_drama_color(slug) for slug in slugs))
        return {slug: color for slug, color in zip(slugs, colors) if color}

    async def fetch_posts(self):
        try:
            posts = await self._api.get_posts(**self._filters())
            self.posts = posts
            if self.view_mode == "all":
                self.drama_colors = await self._fetch_drama_colors(posts)
            self.user_votes = {
                post.id: vote
                for post in posts
                if (vote := post.vote_of(self.current_user.id)) is not None
            }
        except RESPONSE_ERRORS as exc:
            self._logger.error("Error fetching posts", exc_info=exc)
        finally:
            self.loading = False

    async def vote(self, post_id: str, direction: VoteValue):
        """
        Toggle the current user's vote on a post.

        Repeating the recorded direction retracts the vote, the opposite
        direction flips it. While a vote on the same post is in flight,
        further votes on it are ignored.
        """
        if post_id in self.pending_votes:
            self._logger.debug(f"Vote already in flight, ignoring {post_id=}")
            return
        self.pending_votes.add(post_id)
        try:
            new_vote = None if self.user_votes.get(post_id) == direction else direction
            try:
                await self._api.vote(post_id, self.current_user.id, new_vote)
            except RESPONSE_ERRORS as exc:
                self._logger.error(f"Error voting {post_id=}", exc_info=exc)
            await self.fetch_posts()
        finally:
            self.pending_votes.discard(post_id)

    def start_edit(self, post: Post):
        self.draft = EditDraft(post_id=post.id, title=post.title, content=post.content)

    def cancel_edit(self):
        self.draft = None

    async def save_edit(self) -> bool:
        if self.draft is None:
            return False
        try:
            await self._api.update_post(
                self.draft.post_id, self.draft.title, self.draft.content
            )
        except httpx.HTTPError as exc:
            self._logger.error(
                f"Error updating post {self.draft.post_id=}", exc_info=exc
            )
            self._alert(ERROR_MESSAGE_UPDATE_FAILED)
            return False
        self.draft = None
        await self.fetch_posts()
        return True

    async def delete(self, post_id: str) -> bool:
        if not self._confirm(CONFIRM_DELETE_MESSAGE):
            return False
        try:
            await self._api.delete_post(post_id)
        except httpx.HTTPError as exc:
            self._logger.error(f"Error deleting post {post_id=}", exc_info=exc)
            self._alert(ERROR_MESSAGE_DELETE_FAILED)
            return False
        await self.fetch_posts()
        return True

    def post_views(self) -> list[PostView]:
        return [
            PostView(
                post=post,
                user_vote=self.user_votes.get(post.id),
                drama_color=(
                    self.drama_colors.get(post.drama_slug)
                    if self.view_mode == "all" and post.drama_slug
                    else None
                ),
                can_edit=bool(post.author and post.author.id == self.current_user.id),
                is_editing=bool(self.draft and self.draft.post_id == post.id),
            )
            for post in self.posts
        ]
