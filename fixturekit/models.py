"""Record types for the seeded tables and the operation that wraps them."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class User:
    """A row of the user table."""

    email: str
    username: str
    password: str
    bio: Optional[str] = None
    image: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class Article:
    """A row of the article table."""

    slug: str
    title: str
    description: str
    body: str
    author_id: uuid.UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class Comment:
    """A row of the comment table."""

    body: str
    author_id: uuid.UUID
    article_id: uuid.UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class Tag:
    """A row of the tag table."""

    tag_name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class ArticleTag:
    """Link between an article and a tag."""

    article_id: uuid.UUID
    tag_id: uuid.UUID


@dataclass(frozen=True)
class Follower:
    """Link saying that ``follower_id`` follows ``user_id``."""

    user_id: uuid.UUID
    follower_id: uuid.UUID


@dataclass(frozen=True)
class FavoritedArticle:
    """Link saying that ``user_id`` favorited ``article_id``."""

    article_id: uuid.UUID
    user_id: uuid.UUID


class OperationKind(enum.Enum):
    """What to do with a table when the data is built."""

    INSERT = "insert"
    CREATE = "create"
    MIGRATION = "migration"


@dataclass(frozen=True)
class Operation(Generic[T]):
    """A table operation, carrying a payload unless it is a bare migration.

    ``INSERT`` creates the table and stores the payload, ``CREATE`` only keeps
    the payload in memory, and ``MIGRATION`` creates the table with no rows.
    """

    kind: OperationKind
    payload: Optional[T] = None

    def __post_init__(self) -> None:
        if self.kind is OperationKind.MIGRATION:
            if self.payload is not None:
                raise ValueError("a migration operation carries no payload")
        elif self.payload is None:
            raise ValueError(f"a {self.kind.value} operation needs a payload")

    @classmethod
    def insert(cls, payload: T) -> "Operation[T]":
        """Build an insert operation."""
        return cls(OperationKind.INSERT, payload)

    @classmethod
    def create(cls, payload: T) -> "Operation[T]":
        """Build a create operation."""
        return cls(OperationKind.CREATE, payload)

    @classmethod
    def migration(cls) -> "Operation[T]":
        """Build a migration-only operation."""
        return cls(OperationKind.MIGRATION)

    def map(self, func: Callable[[T], U]) -> "Operation[U]":
        """Return an operation of the same kind with ``func`` applied to the payload."""
        if self.kind is OperationKind.MIGRATION:
            return Operation(OperationKind.MIGRATION)
        return Operation(self.kind, func(self.payload))