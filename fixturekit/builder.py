"""Fluent builder that assembles related seed rows for tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Iterable, Optional, Sequence, Tuple, TypeVar

from .errors import (
    BuilderError,
    EmptyRelError,
    OutOfRangeError,
    WrongOrderError,
    ZeroQtyError,
)
from .models import (
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

T = TypeVar("T")

PASSWORD = "password"

_Pair = Tuple[int, int]


@dataclass
class SeedData:
    """The rows produced by a builder, one list per table, or None when unset."""

    users: Optional[list[User]] = None
    articles: Optional[list[Article]] = None
    comments: Optional[list[Comment]] = None
    tags: Optional[list[Tag]] = None
    article_tags: Optional[list[ArticleTag]] = None
    followers: Optional[list[Follower]] = None
    favorited_articles: Optional[list[FavoritedArticle]] = None


def _deps_allow(kind: OperationKind, deps: Iterable[Optional[Operation]]) -> bool:
    """Tell whether an operation of ``kind`` may follow the given dependencies."""
    deps = list(deps)
    if any(dep is None for dep in deps):
        return False
    if kind is OperationKind.INSERT:
        return all(dep.kind is OperationKind.INSERT for dep in deps)
    if kind is OperationKind.CREATE:
        return all(dep.kind is not OperationKind.MIGRATION for dep in deps)
    return True


def _in_range(values: Iterable[int], high: int) -> bool:
    return all(1 <= value <= high for value in values)


def _timestamp(idx: int) -> datetime:
    return datetime.now() + timedelta(seconds=idx + 1)


def _is_empty_rel(operation: Operation) -> bool:
    return operation.kind is not OperationKind.MIGRATION and len(operation.payload) == 0


def _check_qty(operation: Operation[int]) -> Optional[BuilderError]:
    if operation.kind is OperationKind.MIGRATION:
        return None
    if operation.payload == 0:
        return ZeroQtyError()
    if operation.payload < 0:
        raise ValueError("qty must not be negative")
    return None


@dataclass
class DataBuilder:
    """Collects table operations and keeps the first configuration error met.

    Every method returns the builder itself so calls can be chained. Row
    numbers in relations are 1-based positions in the related table.
    """

    users_op: Optional[Operation[Tuple[User, ...]]] = None
    articles_op: Optional[Operation[Tuple[Article, ...]]] = None
    comments_op: Optional[Operation[Tuple[Comment, ...]]] = None
    tags_op: Optional[Operation[Tuple[Tag, ...]]] = None
    article_tags_op: Optional[Operation[Tuple[ArticleTag, ...]]] = None
    followers_op: Optional[Operation[Tuple[Follower, ...]]] = None
    favorited_articles_op: Optional[Operation[Tuple[FavoritedArticle, ...]]] = None
    error: Optional[BuilderError] = field(default=None)

    def _fail(self, err: BuilderError) -> "DataBuilder":
        if self.error is None:
            self.error = err
        return self

    def users(self, operation: Operation[int]) -> "DataBuilder":
        """Generate ``qty`` users named email1.., username1.."""
        err = _check_qty(operation)
        if err is not None:
            return self._fail(err)

        def gen(qty: int) -> Tuple[User, ...]:
            return tuple(
                User(
                    email=f"email{x}",
                    username=f"username{x}",
                    password=PASSWORD,
                    bio="bio",
                    image="image",
                )
                for x in range(1, qty + 1)
            )

        self.users_op = operation.map(gen)
        return self

    def articles(self, operation: Operation[Sequence[int]]) -> "DataBuilder":
        """Generate one article per author number given."""
        if _is_empty_rel(operation):
            return self._fail(EmptyRelError())
        if not _deps_allow(operation.kind, [self.users_op]):
            return self._fail(WrongOrderError("users", "articles"))

        if operation.kind is not OperationKind.MIGRATION:
            users = self.users_op.payload
            if not _in_range(operation.payload, len(users)):
                return self._fail(OutOfRangeError("user", len(users)))

        def gen(rels: Sequence[int]) -> Tuple[Article, ...]:
            users = self.users_op.payload
            articles = []
            for idx, author in enumerate(rels):
                now = _timestamp(idx)
                articles.append(
                    Article(
                        slug=f"title{idx + 1}",
                        title=f"title{idx + 1}",
                        description="description",
                        body="body",
                        author_id=users[author - 1].id,
                        created_at=now,
                        updated_at=now,
                    )
                )
            return tuple(articles)

        self.articles_op = operation.map(gen)
        return self

    def comments(self, operation: Operation[Sequence[_Pair]]) -> "DataBuilder":
        """Generate one comment per (author, article) pair."""
        if _is_empty_rel(operation):
            return self._fail(EmptyRelError())
        if not _deps_allow(operation.kind, [self.users_op, self.articles_op]):
            return self._fail(WrongOrderError("articles", "comments"))

        if operation.kind is not OperationKind.MIGRATION:
            users = self.users_op.payload
            articles = self.articles_op.payload
            if not _in_range((a for a, _ in operation.payload), len(users)):
                return self._fail(OutOfRangeError("author", len(users)))
            if not _in_range((b for _, b in operation.payload), len(articles)):
                return self._fail(OutOfRangeError("article", len(articles)))

        def gen(rels: Sequence[_Pair]) -> Tuple[Comment, ...]:
            users = self.users_op.payload
            articles = self.articles_op.payload
            comments = []
            for idx, (author, article) in enumerate(rels):
                now = _timestamp(idx)
                comments.append(
                    Comment(
                        body=f"comment{idx + 1}",
                        author_id=users[author - 1].id,
                        article_id=articles[article - 1].id,
                        created_at=now,
                        updated_at=now,
                    )
                )
            return tuple(comments)

        self.comments_op = operation.map(gen)
        return self

    def tags(self, operation: Operation[int]) -> "DataBuilder":
        """Generate ``qty`` tags named tag_name1.."""
        err = _check_qty(operation)
        if err is not None:
            return self._fail(err)

        def gen(qty: int) -> Tuple[Tag, ...]:
            return tuple(Tag(tag_name=f"tag_name{x}") for x in range(1, qty + 1))

        self.tags_op = operation.map(gen)
        return self

    def article_tags(self, operation: Operation[Sequence[_Pair]]) -> "DataBuilder":
        """Link articles to tags from (article, tag) pairs."""
        if _is_empty_rel(operation):
            return self._fail(EmptyRelError())
        if not _deps_allow(operation.kind, [self.articles_op, self.tags_op]):
            if self.tags_op is None:
                return self._fail(WrongOrderError("tags", "article_tags"))
            return self._fail(WrongOrderError("articles", "article_tags"))

        if operation.kind is not OperationKind.MIGRATION:
            articles = self.articles_op.payload
            tags = self.tags_op.payload
            if not _in_range((a for a, _ in operation.payload), len(articles)):
                return self._fail(OutOfRangeError("article", len(articles)))
            if not _in_range((t for _, t in operation.payload), len(tags)):
                return self._fail(OutOfRangeError("tag", len(tags)))

        def gen(rels: Sequence[_Pair]) -> Tuple[ArticleTag, ...]:
            articles = self.articles_op.payload
            tags = self.tags_op.payload
            return tuple(
                ArticleTag(article_id=articles[a - 1].id, tag_id=tags[t - 1].id)
                for a, t in rels
            )

        self.article_tags_op = operation.map(gen)
        return self

    def followers(self, operation: Operation[Sequence[_Pair]]) -> "DataBuilder":
        """Record follows from (user, follower) pairs."""
        if _is_empty_rel(operation):
            return self._fail(EmptyRelError())
        if not _deps_allow(operation.kind, [self.users_op]):
            return self._fail(WrongOrderError("users", "followers"))

        if operation.kind is not OperationKind.MIGRATION:
            users = self.users_op.payload
            if not _in_range((u for u, _ in operation.payload), len(users)):
                return self._fail(OutOfRangeError("user", len(users)))
            if not _in_range((f for _, f in operation.payload), len(users)):
                return self._fail(OutOfRangeError("follower", len(users)))

        def gen(rels: Sequence[_Pair]) -> Tuple[Follower, ...]:
            users = self.users_op.payload
            return tuple(
                Follower(user_id=users[u - 1].id, follower_id=users[f - 1].id)
                for u, f in rels
            )

        self.followers_op = operation.map(gen)
        return self

    def favorited_articles(self, operation: Operation[Sequence[_Pair]]) -> "DataBuilder":
        """Record favourites from (article, user) pairs."""
        if _is_empty_rel(operation):
            return self._fail(EmptyRelError())
        if not _deps_allow(operation.kind, [self.articles_op, self.users_op]):
            return self._fail(WrongOrderError("articles", "favorited_articles"))

        if operation.kind is not OperationKind.MIGRATION:
            articles = self.articles_op.payload
            users = self.users_op.payload
            if not _in_range((a for a, _ in operation.payload), len(articles)):
                return self._fail(OutOfRangeError("article", len(articles)))
            if not _in_range((u for _, u in operation.payload), len(users)):
                return self._fail(OutOfRangeError("user", len(users)))

        def gen(rels: Sequence[_Pair]) -> Tuple[FavoritedArticle, ...]:
            articles = self.articles_op.payload
            users = self.users_op.payload
            return tuple(
                FavoritedArticle(article_id=articles[a - 1].id, user_id=users[u - 1].id)
                for a, u in rels
            )

        self.favorited_articles_op = operation.map(gen)
        return self

    def check(self) -> None:
        """Raise the first configuration error recorded, if any."""
        if self.error is not None:
            raise self.error

    def data(self) -> SeedData:
        """Return the generated rows, raising the first recorded error instead."""
        self.check()

        def rows(op: Optional[Operation[Tuple[T, ...]]]) -> Optional[list[T]]:
            if op is None or op.kind is OperationKind.MIGRATION:
                return None
            return list(op.payload)

        return SeedData(
            users=rows(self.users_op),
            articles=rows(self.articles_op),
            comments=rows(self.comments_op),
            tags=rows(self.tags_op),
            article_tags=rows(self.article_tags_op),
            followers=rows(self.followers_op),
            favorited_articles=rows(self.favorited_articles_op),
        )


Mapper = Callable[[object], object]