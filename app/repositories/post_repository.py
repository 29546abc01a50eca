from typing import Any

from bson import ObjectId
from pymongo import DESCENDING

from app.database import get_database
from app.utils import serialize


class PostRepository:
    COLLECTION = "posts"

    def __init__(self):
        self._collection = get_database()[self.COLLECTION]

    def create_post(self, data: dict[str, Any]) -> str:
        result = self._collection.insert_one(data)
        return str(result.inserted_id)

    def delete_post(self, post_id: ObjectId) -> bool:
        result = self._collection.delete_one({"_id": post_id})
        return result.deleted_count > 0

    def get_post_by_id(self, post_id: ObjectId) -> dict[str, Any] | None:
        return serialize(self._collection.find_one({"_id": post_id}))

    def get_posts(self, query: dict[str, Any]) -> list[dict[str, Any]]:
        cursor = self._collection.find(query).sort("createdAt", DESCENDING)
        return [serialize(document) for document in cursor]

    def update_post(self, post_id: ObjectId, data: dict[str, Any]) -> bool:
        result = self._collection.update_one({"_id": post_id}, {"$set": data})
        return result.matched_count > 0

    # Each vote update pins the user's prior voter record in its filter and
    # changes the voter list and the count in the same document update.

    def add_voter(self, post_id: ObjectId, user_id: str, vote: int) -> bool:
        result = self._collection.update_one(
            {"_id": post_id, "voters.userId": {"$ne": user_id}},
            {
                "$push": {"voters": {"userId": user_id, "vote": vote}},
                "$inc": {"votes": vote},
            },
        )
        return result.modified_count == 1

    def change_voter(
        self, post_id: ObjectId, user_id: str, old_vote: int, new_vote: int
    ) -> bool:
        result = self._collection.update_one(
            {
                "_id": post_id,
                "voters": {"$elemMatch": {"userId": user_id, "vote": old_vote}},
            },
            {
                "$set": {"voters.$.vote": new_vote},
                "$inc": {"votes": new_vote - old_vote},
            },
        )
        return result.modified_count == 1

    def remove_voter(self, post_id: ObjectId, user_id: str, old_vote: int) -> bool:
        result = self._collection.update_one(
            {
                "_id": post_id,
                "voters": {"$elemMatch": {"userId": user_id, "vote": old_vote}},
            },
            {
                "$pull": {"voters": {"userId": user_id}},
                "$inc": {"votes": -old_vote},
            },
        )
        return result.modified_count == 1
