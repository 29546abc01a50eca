import mongomock
import pendulum
import pytest
from bson import ObjectId

from app import database, settings as app_settings
from app.models.auth import CurrentUser
from app.models.drama import Drama
from app.models.post import Post
from app.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return app_settings


@pytest.fixture(autouse=True)
def mongo_client(monkeypatch) -> mongomock.MongoClient:
    client = mongomock.MongoClient(tz_aware=True)
    monkeypatch.setattr(database, "_client", client)
    return client


@pytest.fixture
def db(mongo_client: mongomock.MongoClient, settings: Settings):
    return mongo_client[settings.database_name]


@pytest.fixture
def posts_collection(db):
    return db["posts"]


@pytest.fixture
def dramas_collection(db):
    return db["dramas"]


@pytest.fixture
def memberships_collection(db):
    return db["memberships"]


@pytest.fixture
def current_user(faker) -> CurrentUser:
    return CurrentUser(id=str(ObjectId()), username=faker.user_name())


@pytest.fixture
def make_drama(faker, dramas_collection):
    def make(slug: str | None = None) -> Drama:
        title = faker.unique.catch_phrase()
        drama = Drama(
            slug=slug or f"{faker.unique.slug()}",
            title=title,
            description=faker.sentence(),
            created_at=pendulum.now("UTC"),
        )
        dramas_collection.insert_one(drama.model_dump(by_alias=True))
        return drama

    return make


@pytest.fixture
def make_post(faker, posts_collection):
    def make(
        author_id: str | None = None,
        drama: Drama | None = None,
        voters: list[dict] | None = None,
    ) -> Post:
        voters = voters or []
        document = {
            "title": faker.sentence(),
            "content": faker.text(),
            "author": {"id": author_id or str(ObjectId()), "username": faker.user_name()},
            "dramaSlug": drama.slug if drama else None,
            "dramaTitle": drama.title if drama else None,
            "votes": sum(voter["vote"] for voter in voters),
            "voters": voters,
            "createdAt": pendulum.now("UTC"),
            "editedAt": None,
        }
        result = posts_collection.insert_one(document)
        document.pop("_id")
        return Post.model_validate({**document, "id": str(result.inserted_id)})

    return make


@pytest.fixture
def dramas(make_drama) -> list[Drama]:
    return [make_drama() for _ in range(3)]


@pytest.fixture
def posts(make_post, dramas: list[Drama]) -> list[Post]:
    return [make_post(drama=dramas[i % len(dramas)]) for i in range(9)]
