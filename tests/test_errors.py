import pytest

from fixturekit.errors import (
    BuilderError,
    ConnectionFailedError,
    EmptyRelError,
    InsertError,
    OrmError,
    OutOfRangeError,
    WrongOrderError,
    ZeroQtyError,
)


class _DbFailure(Exception):
    pass


def test_display_zero_qty():
    assert str(ZeroQtyError()) == "qty parameter should be greater then zero"


def test_display_empty_rel():
    assert str(EmptyRelError()) == "relations parameter should be not empty"


def test_display_wrong_order():
    assert str(WrongOrderError("cat", "dog")) == "cat should be set before dog"


def test_display_out_of_range():
    assert (
        str(OutOfRangeError("cat", 95))
        == "cat number should be between 1 and 95 inclusive"
    )


def test_display_insert_error():
    err = InsertError(_DbFailure("None of the records are inserted"))
    assert str(err) == "unable to insert data"


def test_display_connection_error():
    err = ConnectionFailedError(_DbFailure("Connection Error: not connected"))
    assert str(err) == "no connection was established"


def test_display_orm_error():
    err = OrmError(_DbFailure("Execution Error: error text"))
    assert str(err) == "orm error"


@pytest.mark.parametrize(
    "cls, text",
    [
        (InsertError, "None of the records are inserted"),
        (ConnectionFailedError, "Connection Error: not connected"),
        (OrmError, "Execution Error: error text"),
    ],
)
def test_source_error(cls, text):
    cause = _DbFailure(text)
    err = cls(cause)
    assert err.__cause__ is cause
    assert str(err.__cause__) == text
    assert err.cause is cause


def test_plain_errors_have_no_cause():
    assert ZeroQtyError().__cause__ is None
    assert EmptyRelError().__cause__ is None
    assert WrongOrderError("a", "b").__cause__ is None
    assert OutOfRangeError("a", 1).__cause__ is None


@pytest.mark.parametrize(
    "err, text",
    [
        (ZeroQtyError(), "qty parameter should be greater then zero"),
        (EmptyRelError(), "relations parameter should be not empty"),
        (WrongOrderError("a", "b"), "a should be set before b"),
        (OutOfRangeError("a", 1), "a number should be between 1 and 1 inclusive"),
        (InsertError(_DbFailure("x")), "unable to insert data"),
        (ConnectionFailedError(_DbFailure("x")), "no connection was established"),
        (OrmError(_DbFailure("x")), "orm error"),
    ],
)
def test_all_are_builder_errors(err, text):
    with pytest.raises(BuilderError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == text


def test_equality():
    assert WrongOrderError("users", "articles") == WrongOrderError("users", "articles")
    assert WrongOrderError("users", "articles") != WrongOrderError("tags", "articles")
    assert OutOfRangeError("user", 2) == OutOfRangeError("user", 2)
    assert OutOfRangeError("user", 2) != OutOfRangeError("author", 2)
    assert ZeroQtyError() == ZeroQtyError()
    assert ZeroQtyError() != EmptyRelError()


def test_caused_equality():
    assert InsertError(_DbFailure("x")) == InsertError(_DbFailure("x"))
    assert InsertError(_DbFailure("x")) != OrmError(_DbFailure("x"))
    assert OrmError(_DbFailure("x")) != OrmError(_DbFailure("y"))


def test_attributes_kept():
    err = OutOfRangeError("tag", 7)
    assert (err.entity, err.high) == ("tag", 7)
    order = WrongOrderError("tags", "article_tags")
    assert (order.before, order.after) == ("tags", "article_tags")