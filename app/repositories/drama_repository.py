from typing import Any

from pymongo import ASCENDING

from app.database import get_database


class DramaRepository:
    COLLECTION = "dramas"

    def __init__(self):
        self._collection = get_database()[self.COLLECTION]

    def create_drama(self, data: dict[str, Any]):
        self._collection.insert_one(data)

    def get_drama_by_slug(self, slug: str) -> dict[str, Any] | None:
        return self._collection.find_one({"slug": slug}, {"_id": 0})

    def get_dramas(self) -> list[dict[str, Any]]:
        return list(self._collection.find({}, {"_id": 0}).sort("title", ASCENDING))
