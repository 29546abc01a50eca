from app.models.camel_model import CamelModel


class MembershipStatus(CamelModel):
    is_member: bool
    color: str | None = None


class Success(CamelModel):
    success: bool = True
