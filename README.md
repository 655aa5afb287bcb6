# fixturekit

fixturekit builds related seed records for a small blogging domain. You say how
many users and tags you want, and you give the relations between articles,
comments, tags, followers and favourites. The builder then produces matching
records with fresh UUIDs and timestamps. When the input is bad, the builder
records an error and raises it when you ask for the records.

## Install

```
pip install fixturekit
```

To run the tests:

```
pip install "fixturekit[test]"
pytest
```

## Records

`fixturekit.models` defines these frozen dataclasses:

| Record | Fields |
| --- | --- |
| `User` | `email`, `username`, `password`, `bio`, `image`, `id` |
| `Article` | `slug`, `title`, `description`, `body`, `author_id`, `created_at`, `updated_at`, `id` |
| `Comment` | `body`, `author_id`, `article_id`, `created_at`, `updated_at`, `id` |
| `Tag` | `tag_name`, `id` |
| `ArticleTag` | `article_id`, `tag_id` |
| `Follower` | `user_id`, `follower_id` |
| `FavoritedArticle` | `article_id`, `user_id` |

When `id` is not given, it defaults to a new `uuid.uuid4()`.

## Operations

Each step of the builder takes an `Operation`. Its `kind` is an
`OperationKind`: `INSERT`, `CREATE` or `MIGRATION`.

- `Operation.insert(payload)` and `Operation.create(payload)` both carry a
  payload: a quantity or a list of relations.
- `Operation.migration()` carries no payload.

Constructing an operation raises `ValueError` if an insert or create has no
payload, or if a migration has one. `Operation.map(func)` returns an operation
of the same kind with `func` applied to the payload. A migration passes through
`map` unchanged.

## Building data

```python
from fixturekit.builder import DataBuilder
from fixturekit.models import Operation

builder = (
    DataBuilder()
    .users(Operation.insert(2))
    .articles(Operation.insert([1, 2, 2]))
    .comments(Operation.insert([(1, 1), (2, 3)]))
    .tags(Operation.insert(2))
    .article_tags(Operation.insert([(1, 1), (3, 2)]))
    .followers(Operation.insert([(1, 2)]))
    .favorited_articles(Operation.insert([(2, 1)]))
)

data = builder.data()      # a SeedData
print(len(data.articles))  # 3
print(data.users[0].email) # email1
```

`users(qty)` and `tags(qty)` generate that many records. Users get the values
`email1`, `username1`, the password `password`, the bio `bio` and the image
`image`, and the numbering continues for later users. Tags get `tag_name1`,
`tag_name2` and so on. A negative quantity raises `ValueError` at once.

Each of the other steps takes a list of 1-based positions into the records of
earlier steps:

| Step | Each element | Needs |
| --- | --- | --- |
| `articles` | author (user) position | `users` |
| `comments` | `(author, article)` | `users`, `articles` |
| `article_tags` | `(article, tag)` | `articles`, `tags` |
| `followers` | `(user, follower)` | `users` |
| `favorited_articles` | `(article, user)` | `articles`, `users` |

Articles are given the titles and slugs `title1`, `title2` and so on. Comments
are given the bodies `comment1`, `comment2` and so on. The record at index `i`
of a step gets a `created_at` and `updated_at` of the current local time plus
`i + 1` seconds.

Operation kinds have to match along the chain:

- An insert step needs insert dependencies.
- A create step accepts insert or create dependencies.
- A migration step only needs its dependencies to have been set.

## Errors

The builder keeps the first problem it meets and still accepts further calls.
`check()` raises the stored error. `data()` raises it before returning
anything. The stored error is also available as `builder.error`.

All errors live in `fixturekit.errors` and derive from `BuilderError`:

| Error | Message |
| --- | --- |
| `ZeroQtyError` | `qty parameter should be greater then zero` |
| `EmptyRelError` | `relations parameter should be not empty` |
| `WrongOrderError(before, after)` | `<before> should be set before <after>` |
| `OutOfRangeError(entity, high)` | `<entity> number should be between 1 and <high> inclusive` |
| `InsertError(cause)` | `unable to insert data` |
| `ConnectionFailedError(cause)` | `no connection was established` |
| `OrmError(cause)` | `orm error` |

The last three wrap the exception given as `cause`, which is also set as their
`__cause__`. Two errors compare equal when they have the same type and the same
arguments.

```python
from fixturekit.errors import WrongOrderError

try:
    DataBuilder().articles(Operation.insert([1])).check()
except WrongOrderError as err:
    print(err)  # users should be set before articles
```

## Result

`data()` returns a `SeedData` with the lists `users`, `articles`, `comments`,
`tags`, `article_tags`, `followers` and `favorited_articles`. A list is `None`
when its step was never called or was a migration.

## What it does not do

fixturekit does not connect to a database, create tables or store rows. Insert
and create operations both just produce records in memory. A migration
produces nothing. The builder itself never raises `InsertError`,
`ConnectionFailedError` or `OrmError`. They exist so that code which stores the
records can report its failures as builder errors.