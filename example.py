"""Example usage of jsonapi_assert."""

import re
from dataclasses import dataclass

from jsonapi_assert import (
    JsonApiAssertionError,
    assert_data,
    assert_included,
    assert_jsonapi,
    assert_links,
    assert_meta,
    assert_relationship,
    refute_included,
    s,
)


@dataclass
class Author:
    id: int
    first_name: str
    last_name: str


@dataclass
class Post:
    id: int
    title: str


author = Author(id=1, first_name="Douglas", last_name="Engelbart")
post = Post(id=1, title="Mother of all demos")

# Response from a JSON:API endpoint
document = {
    "jsonapi": {"version": "1.0"},
    "meta": {"copyright": "Copyright 2016"},
    "links": {"self": "http://example.com/posts/1"},
    "data": {
        "id": "1",
        "type": "post",
        "attributes": {"title": "Mother of all demos"},
        "relationships": {
            "author": {
                "links": {"related": "http://example.com/posts/1/author"},
                "data": {"type": "author", "id": "1"},
            }
        },
    },
    "included": [
        {
            "id": "1",
            "type": "author",
            "attributes": {"first-name": "Douglas", "last-name": "Engelbart"},
        }
    ],
}

# Every assertion returns the document, so calls nest
assert_relationship(
    assert_included(
        assert_data(
            assert_jsonapi(document, version="1.0"),
            s(post),
        ),
        s(author),
    ),
    s(author),
    as_="author",
    for_=["data", s(post)],
)

assert_meta(document, {"copyright": re.compile(r"\d{4}$")})
assert_links(document, path=[{"links": {"self": re.compile(r"/posts/1$")}}])
assert_links(
    document,
    path=["data", "relationships", "author", {"links": {"related": re.compile("author$")}}],
)
refute_included(document, s(post))

print("All assertions passed")

# Failures are AssertionError subclasses carrying the message and a diff
try:
    assert_data(document, s(Post(id=1, title="Father of all demos")))
except JsonApiAssertionError as e:
    print(f"\n{type(e).__name__}: {e.message}")
    print(f"  actual:   {e.left}")
    print(f"  expected: {e.right}")
