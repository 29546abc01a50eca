from datetime import datetime

from app.models.camel_model import CamelModel


class Drama(CamelModel):
    slug: str
    title: str
    description: str | None = None
    created_at: datetime


class Membership(CamelModel):
    drama_slug: str
    user_id: str
    color: str
    joined_at: datetime
