"""Shared JSON:API documents and resources for the test suite."""

import copy

import pytest


def pytest_configure(config):
    # The pytest11 entry point only exists once the package is installed
    if not config.pluginmanager.has_plugin("jsonapi_assert"):
        config.pluginmanager.import_plugin("jsonapi_assert.pytest_plugin")


POST = {
    "id": "1",
    "type": "post",
    "attributes": {"title": "Mother of all demos"},
}

POST_2 = {
    "id": "2",
    "type": "post",
    "attributes": {"title": "Father of all demos"},
}

AUTHOR = {
    "id": "1",
    "type": "author",
    "attributes": {"first-name": "Douglas", "last-name": "Engelbart"},
}

COMMENTS = [
    {"id": "1", "type": "comment", "attributes": {"body": "This is great!"}},
    {"id": "2", "type": "comment", "attributes": {"body": "This is horrible!"}},
    {"id": "3", "type": "comment", "attributes": {"body": "This is great!"}},
    {"id": "4", "type": "comment", "attributes": {"body": "This is horrible!"}},
    {"id": "5", "type": "comment", "attributes": {"body": "This is OK"}},
]


def _included_comment(comment: dict, post_id: str) -> dict:
    included = copy.deepcopy(comment)
    included["relationships"] = {"post": {"data": {"type": "post", "id": post_id}}}
    return included


def _linkage(*resources) -> list:
    return [{"type": r["type"], "id": r["id"]} for r in resources]


SINGLE_DOCUMENT = {
    "jsonapi": {"version": "1.0"},
    "data": {
        **POST,
        "relationships": {
            "author": {"data": {"type": "author", "id": "1"}},
            "comments": {"data": _linkage(COMMENTS[0], COMMENTS[1], COMMENTS[4])},
        },
    },
    "included": [
        {**AUTHOR, "relationships": {"posts": {"data": [{"type": "post", "id": "1"}]}}},
        _included_comment(COMMENTS[0], "1"),
        _included_comment(COMMENTS[1], "1"),
    ],
}

COLLECTION_DOCUMENT = {
    "jsonapi": {"version": "1.0"},
    "data": [
        {
            **POST,
            "relationships": {
                "author": {"data": {"type": "author", "id": "1"}},
                "comments": {"data": _linkage(COMMENTS[0], COMMENTS[1])},
            },
        },
        {
            **POST_2,
            "relationships": {
                "author": {"data": {"type": "author", "id": "1"}},
                "comments": {"data": _linkage(COMMENTS[2], COMMENTS[3])},
            },
        },
    ],
    "included": [
        {
            **AUTHOR,
            "relationships": {
                "posts": {"data": [{"type": "post", "id": "1"}, {"type": "post", "id": "2"}]}
            },
        },
        _included_comment(COMMENTS[0], "1"),
        _included_comment(COMMENTS[1], "1"),
        _included_comment(COMMENTS[2], "2"),
        _included_comment(COMMENTS[3], "2"),
    ],
}


@pytest.fixture
def payload():
    """A document whose `data` is a single post."""
    return copy.deepcopy(SINGLE_DOCUMENT)


@pytest.fixture
def payload_2():
    """A document whose `data` is a list of two posts."""
    return copy.deepcopy(COLLECTION_DOCUMENT)


@pytest.fixture
def post():
    return copy.deepcopy(POST)


@pytest.fixture
def post_2():
    return copy.deepcopy(POST_2)


@pytest.fixture
def author():
    return copy.deepcopy(AUTHOR)


@pytest.fixture
def comments():
    return copy.deepcopy(COMMENTS)
