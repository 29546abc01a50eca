import httpx
from aws_lambda_powertools import Logger

from app import settings
from app.middlewares import X_CORRELATION_ID, correlation_id
from app.models.post import Post, VoteValue
from app.models.response import MembershipStatus


class ForumApiClient:
    """Thin async client for the forum HTTP API.

    Non-2xx responses are raised as :class:`httpx.HTTPStatusError`.
    """

    def __init__(self, base_url: str | None = None):
        self._logger = Logger(service=settings.app_name, utc=True)
        self._base_url = f"{(base_url or settings.api_base_url).rstrip('/')}/api/v1"

    def _headers(self) -> dict[str, str]:
        return {X_CORRELATION_ID: value} if (value := correlation_id.get()) else {}

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = f"{self._base_url}{path}"
        self._logger.debug(f"{method} {url=}")
        async with httpx.AsyncClient() as client:
            response = await client.request(
                method, url, headers=self._headers(), **kwargs
            )
        response.raise_for_status()
        return response

    async def get_posts(
        self, user_id: str | None = None, drama_slug: str | None = None
    ) -> list[Post]:
        params = {}
        if user_id:
            params["userId"] = user_id
        if drama_slug:
            params["dramaSlug"] = drama_slug
        response = await self._request("GET", "/posts", params=params)
        return [Post.model_validate(item) for item in response.json()]

    async def update_post(self, post_id: str, title: str, content: str):
        await self._request(
            "PUT", f"/posts/{post_id}", json={"title": title, "content": content}
        )

    async def delete_post(self, post_id: str):
        await self._request("DELETE", f"/posts/{post_id}")

    async def vote(self, post_id: str, user_id: str, vote: VoteValue | None) -> Post:
        response = await self._request(
            "POST",
            "/posts/vote",
            json={"postId": post_id, "userId": user_id, "vote": vote},
        )
        return Post.model_validate(response.json())

    async def get_membership(self, drama_slug: str, user_id: str) -> MembershipStatus:
        response = await self._request(
            "GET", f"/dramas/{drama_slug}/membership", params={"userId": user_id}
        )
        return MembershipStatus.model_validate(response.json())
