from app.models.camel_model import CamelModel


class CurrentUser(CamelModel):
    id: str
    username: str
