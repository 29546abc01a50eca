from datetime import datetime
from typing import Any

from app.database import get_database


class MembershipRepository:
    COLLECTION = "memberships"

    def __init__(self):
        self._collection = get_database()[self.COLLECTION]

    def delete_membership(self, drama_slug: str, user_id: str) -> bool:
        result = self._collection.delete_one(
            {"dramaSlug": drama_slug, "userId": user_id}
        )
        return result.deleted_count > 0

    def get_membership(self, drama_slug: str, user_id: str) -> dict[str, Any] | None:
        return self._collection.find_one(
            {"dramaSlug": drama_slug, "userId": user_id}, {"_id": 0}
        )

    def upsert_membership(
        self, drama_slug: str, user_id: str, color: str, joined_at: datetime
    ):
        self._collection.update_one(
            {"dramaSlug": drama_slug, "userId": user_id},
            {"$set": {"color": color}, "$setOnInsert": {"joinedAt": joined_at}},
            upsert=True,
        )
