from pydantic import ConfigDict, constr

from app.models.camel_model import CamelModel

HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class CreateDrama(CamelModel):
    title: constr(strip_whitespace=True, min_length=1)
    description: str | None = None

    model_config = ConfigDict(extra="ignore")


class JoinDrama(CamelModel):
    user_id: constr(strip_whitespace=True, min_length=1)
    color: constr(strip_whitespace=True, pattern=HEX_COLOR_PATTERN)

    model_config = ConfigDict(extra="ignore")
