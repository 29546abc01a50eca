import pytest

from app.repositories.drama_repository import DramaRepository
from app.repositories.membership_repository import MembershipRepository
from app.repositories.post_repository import PostRepository
from app.services.drama_service import DramaService
from app.services.post_service import PostService


@pytest.fixture
def drama_repository() -> DramaRepository:
    return DramaRepository()


@pytest.fixture
def drama_service() -> DramaService:
    return DramaService()


@pytest.fixture
def membership_repository() -> MembershipRepository:
    return MembershipRepository()


@pytest.fixture
def post_repository() -> PostRepository:
    return PostRepository()


@pytest.fixture
def post_service() -> PostService:
    return PostService()
