from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    debug: bool = False
    app_name: str = "drama-forum"
    stage: str = "dev"
    mongodb_uri: str = "mongodb://localhost:27017"
    database_name: str = "reddit-clone"
    vote_max_attempts: int = 3
    api_base_url: str = "http://localhost:8080"
