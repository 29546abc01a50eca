from typing import Any

import pendulum
from aws_lambda_powertools import Logger
from slugify import slugify

from app import settings
from app.exceptions import (DramaAlreadyExistsException, DramaNotFoundException,
                            MembershipNotFoundException)
from app.models.drama import Drama, Membership
from app.models.response import MembershipStatus
from app.repositories.drama_repository import DramaRepository
from app.repositories.membership_repository import MembershipRepository


class DramaService:
    ERROR_DRAMA_EXISTS = "There is already a drama with this title"
    ERROR_DRAMA_NOT_FOUND = "The requested drama was not found"
    ERROR_MEMBERSHIP_NOT_FOUND = "The user is not a member of this drama"

    def __init__(self):
        self._logger = Logger(service=settings.app_name, utc=True)
        self._repo = DramaRepository()
        self._membership_repo = MembershipRepository()

    def create_drama(self, data: dict[str, Any]) -> Drama:
        slug = slugify(data["title"])
        if self._repo.get_drama_by_slug(slug):
            raise DramaAlreadyExistsException(self.ERROR_DRAMA_EXISTS)
        drama = Drama(
            slug=slug,
            title=data["title"],
            description=data.get("description"),
            created_at=pendulum.now("UTC"),
        )
        self._repo.create_drama(drama.model_dump(by_alias=True))
        self._logger.info(f"Drama created: {slug=}")
        return drama

    def get_drama(self, slug: str) -> Drama:
        item = self._repo.get_drama_by_slug(slug)
        if not item:
            self._logger.warning(f"Drama not found: {slug=}")
            raise DramaNotFoundException(self.ERROR_DRAMA_NOT_FOUND)
        return Drama.model_validate(item)

    def get_dramas(self) -> list[Drama]:
        return [Drama.model_validate(item) for item in self._repo.get_dramas()]

    def get_membership(self, slug: str, user_id: str) -> MembershipStatus:
        self.get_drama(slug)
        item = self._membership_repo.get_membership(slug, user_id)
        if not item:
            return MembershipStatus(is_member=False)
        return MembershipStatus(is_member=True, color=item["color"])

    def join_drama(self, slug: str, user_id: str, color: str) -> Membership:
        self.get_drama(slug)
        self._membership_repo.upsert_membership(
            slug, user_id, color, pendulum.now("UTC")
        )
        self._logger.info(f"Membership saved: {slug=} {user_id=} {color=}")
        return Membership.model_validate(
            self._membership_repo.get_membership(slug, user_id)
        )

    def leave_drama(self, slug: str, user_id: str):
        self.get_drama(slug)
        if not self._membership_repo.delete_membership(slug, user_id):
            self._logger.warning(f"Membership not found: {slug=} {user_id=}")
            raise MembershipNotFoundException(self.ERROR_MEMBERSHIP_NOT_FOUND)
        self._logger.info(f"Membership removed: {slug=} {user_id=}")
