from pydantic import ConfigDict, constr, field_validator

from app.models.camel_model import CamelModel
from app.models.post import Author, VoteValue


class CreatePost(CamelModel):
    title: constr(strip_whitespace=True, min_length=1)
    content: constr(strip_whitespace=True, min_length=1)
    author: Author
    drama_slug: constr(strip_whitespace=True, min_length=1) | None = None

    model_config = ConfigDict(extra="ignore")


class UpdatePost(CamelModel):
    title: constr(strip_whitespace=True, min_length=1)
    content: constr(strip_whitespace=True, min_length=1)

    model_config = ConfigDict(extra="ignore")


class VotePost(CamelModel):
    post_id: constr(strip_whitespace=True, min_length=1)
    user_id: constr(strip_whitespace=True, min_length=1)
    vote: VoteValue | None

    model_config = ConfigDict(extra="ignore")

    @field_validator("vote", mode="before")
    @classmethod
    def reject_booleans(cls, value):
        # bool is an int subclass, so lax Literal[1, -1] would accept true
        if isinstance(value, bool):
            raise ValueError("vote must be 1, -1 or null")
        return value
