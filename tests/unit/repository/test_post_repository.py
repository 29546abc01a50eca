import pendulum
from bson import ObjectId

from app.models.post import Post
from app.repositories.post_repository import PostRepository


class TestPostRepository:
    def test_successfully_create_post(self, post_repository: PostRepository, posts_collection):
        post_id = post_repository.create_post(
            {
                "title": "Title",
                "content": "Content",
                "votes": 0,
                "voters": [],
                "createdAt": pendulum.now("UTC"),
            }
        )

        document = posts_collection.find_one({"_id": ObjectId(post_id)})

        assert document["title"] == "Title"
        assert document["voters"] == []

    def test_successfully_get_post_by_id(
        self, posts: list[Post], post_repository: PostRepository
    ):
        item = post_repository.get_post_by_id(ObjectId(posts[0].id))

        assert item["id"] == posts[0].id
        assert "_id" not in item
        assert item["title"] == posts[0].title

    def test_get_post_by_id_returns_none_when_missing(
        self, post_repository: PostRepository
    ):
        assert post_repository.get_post_by_id(ObjectId()) is None

    def test_successfully_get_posts_filtered_by_drama(
        self, posts: list[Post], post_repository: PostRepository
    ):
        drama_slug = posts[0].drama_slug

        items = post_repository.get_posts({"dramaSlug": drama_slug})

        assert {item["id"] for item in items} == {
            post.id for post in posts if post.drama_slug == drama_slug
        }

    def test_successfully_update_post(
        self, posts: list[Post], post_repository: PostRepository, posts_collection
    ):
        updated = post_repository.update_post(
            ObjectId(posts[0].id), {"title": "New title", "content": "New content"}
        )

        document = posts_collection.find_one({"_id": ObjectId(posts[0].id)})
        assert updated is True
        assert document["title"] == "New title"
        assert document["content"] == "New content"

    def test_update_post_returns_false_when_missing(
        self, post_repository: PostRepository
    ):
        assert post_repository.update_post(ObjectId(), {"title": "x"}) is False

    def test_successfully_delete_post(
        self, posts: list[Post], post_repository: PostRepository, posts_collection
    ):
        assert post_repository.delete_post(ObjectId(posts[0].id)) is True
        assert posts_collection.find_one({"_id": ObjectId(posts[0].id)}) is None

    def test_delete_post_returns_false_when_missing(
        self, post_repository: PostRepository
    ):
        assert post_repository.delete_post(ObjectId()) is False


class TestPostRepositoryVoters:
    def test_add_voter_pushes_record_and_increments_votes(
        self, make_post, post_repository: PostRepository, posts_collection
    ):
        post = make_post()

        applied = post_repository.add_voter(ObjectId(post.id), "user-1", -1)

        document = posts_collection.find_one({"_id": ObjectId(post.id)})
        assert applied is True
        assert document["votes"] == -1
        assert document["voters"] == [{"userId": "user-1", "vote": -1}]

    def test_add_voter_is_rejected_when_user_already_voted(
        self, make_post, post_repository: PostRepository, posts_collection
    ):
        post = make_post(voters=[{"userId": "user-1", "vote": 1}])

        applied = post_repository.add_voter(ObjectId(post.id), "user-1", 1)

        document = posts_collection.find_one({"_id": ObjectId(post.id)})
        assert applied is False
        assert document["votes"] == 1
        assert len(document["voters"]) == 1

    def test_change_voter_flips_record_and_adjusts_votes(
        self, make_post, post_repository: PostRepository, posts_collection
    ):
        post = make_post(
            voters=[{"userId": "user-1", "vote": 1}, {"userId": "user-2", "vote": 1}]
        )

        applied = post_repository.change_voter(ObjectId(post.id), "user-2", 1, -1)

        document = posts_collection.find_one({"_id": ObjectId(post.id)})
        assert applied is True
        assert document["votes"] == 0
        assert document["voters"] == [
            {"userId": "user-1", "vote": 1},
            {"userId": "user-2", "vote": -1},
        ]

    def test_change_voter_is_rejected_when_prior_vote_differs(
        self, make_post, post_repository: PostRepository, posts_collection
    ):
        post = make_post(voters=[{"userId": "user-1", "vote": -1}])

        applied = post_repository.change_voter(ObjectId(post.id), "user-1", 1, -1)

        document = posts_collection.find_one({"_id": ObjectId(post.id)})
        assert applied is False
        assert document["votes"] == -1

    def test_remove_voter_pulls_record_and_restores_votes(
        self, make_post, post_repository: PostRepository, posts_collection
    ):
        post = make_post(
            voters=[{"userId": "user-1", "vote": -1}, {"userId": "user-2", "vote": 1}]
        )

        applied = post_repository.remove_voter(ObjectId(post.id), "user-1", -1)

        document = posts_collection.find_one({"_id": ObjectId(post.id)})
        assert applied is True
        assert document["votes"] == 1
        assert document["voters"] == [{"userId": "user-2", "vote": 1}]

    def test_remove_voter_is_rejected_without_record(
        self, make_post, post_repository: PostRepository
    ):
        post = make_post()

        assert post_repository.remove_voter(ObjectId(post.id), "user-1", 1) is False
