import uuid
from datetime import datetime

import pytest

from fixturekit.models import (
    Article,
    ArticleTag,
    Comment,
    FavoritedArticle,
    Follower,
    Operation,
    OperationKind,
    Tag,
    User,
)


def _user(n=1):
    password = "password"
    return User(
        email=f"email{n}",
        username=f"username{n}",
        password=password,
        bio="bio",
        image="image",
    )


def test_user_fields_and_unique_ids():
    first = _user(1)
    second = _user(1)
    assert first.email == "email1"
    assert first.username == "username1"
    assert first.password == "password"
    assert first.id != second.id
    assert isinstance(first.id, uuid.UUID)


def test_user_defaults_are_none():
    password = "password"
    user = User(email="a@example.com", username="a", password=password)
    assert user.bio is None
    assert user.image is None


def test_user_is_frozen():
    user = _user()
    with pytest.raises(AttributeError):
        user.email = "other@example.com"
    assert user.email == "email1"


def test_user_equality_uses_all_fields():
    user = _user()
    password = "password"
    same = User(
        email=user.email,
        username=user.username,
        password=password,
        bio=user.bio,
        image=user.image,
        id=user.id,
    )
    assert user == same


def test_article_and_comment_links():
    author = _user()
    now = datetime(2023, 10, 30, 12, 0, 0)
    article = Article(
        slug="title1",
        title="title1",
        description="description",
        body="body",
        author_id=author.id,
        created_at=now,
        updated_at=now,
    )
    comment = Comment(
        body="comment1",
        author_id=author.id,
        article_id=article.id,
        created_at=now,
        updated_at=now,
    )
    assert article.author_id == author.id
    assert comment.article_id == article.id
    assert comment.created_at == now
    assert article.slug == article.title


def test_link_records():
    user = _user(1)
    other = _user(2)
    tag = Tag(tag_name="tag_name1")
    article = Article(
        slug="title1", title="title1", description="description", body="body", author_id=user.id
    )
    assert article.created_at is None
    assert ArticleTag(article.id, tag.id).tag_id == tag.id
    assert Follower(user.id, other.id).follower_id == other.id
    assert FavoritedArticle(article.id, other.id) == FavoritedArticle(article.id, other.id)


def test_operation_constructors_set_kind():
    assert Operation.insert(2).kind is OperationKind.INSERT
    assert Operation.create(2).kind is OperationKind.CREATE
    assert Operation.migration().kind is OperationKind.MIGRATION
    assert Operation.insert(2).payload == 2
    assert Operation.migration().payload is None


def test_operation_equality():
    assert Operation.insert([1, 2, 2]) == Operation.insert([1, 2, 2])
    assert Operation.insert([1]) != Operation.create([1])
    assert Operation.migration() == Operation.migration()


@pytest.mark.parametrize("make", [Operation.insert, Operation.create])
def test_map_keeps_kind_and_transforms_payload(make):
    op = make(3)
    mapped = op.map(lambda qty: [f"tag_name{x}" for x in range(1, qty + 1)])
    assert mapped.kind is op.kind
    assert mapped.payload == ["tag_name1", "tag_name2", "tag_name3"]


def test_map_on_migration_skips_function():
    calls = []

    def record(payload):
        calls.append(payload)
        return payload

    mapped = Operation.migration().map(record)
    assert mapped == Operation.migration()
    assert calls == []


def test_migration_with_payload_rejected():
    with pytest.raises(ValueError):
        Operation(OperationKind.MIGRATION, [1])


@pytest.mark.parametrize("kind", [OperationKind.INSERT, OperationKind.CREATE])
def test_missing_payload_rejected(kind):
    with pytest.raises(ValueError):
        Operation(kind)


def test_zero_payload_is_allowed():
    assert Operation.insert(0).payload == 0
    assert Operation.create([]).payload == []