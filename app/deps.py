from app.services.drama_service import DramaService
from app.services.post_service import PostService


def drama_service() -> DramaService:
    return DramaService()


def post_service() -> PostService:
    return PostService()
