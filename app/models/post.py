from datetime import datetime
from typing import Literal

from app.models.camel_model import CamelModel

VoteValue = Literal[1, -1]


class Author(CamelModel):
    id: str
    username: str


class Voter(CamelModel):
    user_id: str
    vote: VoteValue


class Post(CamelModel):
    id: str
    title: str
    content: str
    author: Author | None = None
    drama_slug: str | None = None
    drama_title: str | None = None
    votes: int = 0
    voters: list[Voter] = []
    created_at: datetime
    edited_at: datetime | None = None

    def vote_of(self, user_id: str) -> VoteValue | None:
        return next(
            (voter.vote for voter in self.voters if voter.user_id == user_id), None
        )
