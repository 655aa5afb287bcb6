"""Errors raised while assembling seed data."""

from __future__ import annotations


class BuilderError(Exception):
    """Base class for every error the data builder reports."""

    message = "builder error"

    def __init__(self, *args: object) -> None:
        super().__init__(*args)

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BuilderError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class ZeroQtyError(BuilderError):
    """A quantity of zero was requested."""

    message = "qty parameter should be greater then zero"


class EmptyRelError(BuilderError):
    """An empty list of relations was given."""

    message = "relations parameter should be not empty"


class WrongOrderError(BuilderError):
    """A table was configured before one it depends on."""

    def __init__(self, before: str, after: str) -> None:
        super().__init__(before, after)
        self.before = before
        self.after = after
        self.message = f"{before} should be set before {after}"


class OutOfRangeError(BuilderError):
    """A relation refers to a row number that does not exist."""

    def __init__(self, entity: str, high: int) -> None:
        super().__init__(entity, high)
        self.entity = entity
        self.high = high
        self.message = f"{entity} number should be between 1 and {high} inclusive"


class _CausedError(BuilderError):
    """A builder error wrapping a lower-level database error."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)
        self.cause = cause
        self.__cause__ = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BuilderError):
            return NotImplemented
        if type(self) is not type(other):
            return False
        mine, theirs = self.cause, other.cause  # type: ignore[attr-defined]
        return type(mine) is type(theirs) and mine.args == theirs.args

    def __hash__(self) -> int:
        return hash((type(self), type(self.cause), self.cause.args))


class InsertError(_CausedError):
    """Rows could not be inserted."""

    message = "unable to insert data"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)


class ConnectionFailedError(_CausedError):
    """The database connection could not be established."""

    message = "no connection was established"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)


class OrmError(_CausedError):
    """Any other database failure."""

    message = "orm error"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)