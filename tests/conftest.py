"""Pytest configuration and fixtures."""

import pytest

from ember_rest.models import InMemoryModelRegistry


MODEL_DEFINITIONS = {
    "post": {
        "globalId": "Post",
        "associations": [
            {"alias": "comments", "type": "collection", "collection": "comment",
             "via": "post", "include": "record"},
            {"alias": "author", "type": "model", "model": "author", "include": "record"},
            {"alias": "tags", "type": "collection", "collection": "tag",
             "via": "posts", "through": "posttag", "include": "index"},
            {"alias": "revisions", "type": "collection", "collection": "revision",
             "via": "post", "include": "link"},
        ],
    },
    "comment": {
        "globalId": "Comment",
        "associations": [
            {"alias": "post", "type": "model", "model": "post"},
            {"alias": "votes", "type": "collection", "collection": "vote", "via": "comment"},
        ],
    },
    "author": {
        "globalId": "Author",
        "associations": [
            {"alias": "posts", "type": "collection", "collection": "post", "via": "author"},
        ],
    },
    "tag": {
        "globalId": "Tag",
        "associations": [
            {"alias": "posts", "type": "collection", "collection": "post",
             "via": "tags", "through": "posttag"},
        ],
    },
    "posttag": {"globalId": "PostTag"},
    "revision": {"globalId": "Revision"},
    "vote": {"globalId": "Vote"},
    "blogpost": {"globalId": "BlogPost"},
}


@pytest.fixture
def registry():
    """Registry with posts, comments, authors and tags."""
    return InMemoryModelRegistry.from_definitions(MODEL_DEFINITIONS)


@pytest.fixture
def post_model(registry):
    """Descriptor of the post model."""
    return registry.resolve("post")


@pytest.fixture
def sample_post():
    """Post with embedded author and comments, as returned by a populated query."""
    return {
        "id": 1,
        "title": "Hello",
        "author": {"id": 3, "name": "Ann"},
        "comments": [
            {"id": 7, "body": "First"},
            {"id": 8, "body": "Second"},
        ],
        "revisions": [{"id": 40}],
    }


@pytest.fixture
def sample_posts(sample_post):
    """Two posts sharing an author and a comment."""
    return [
        sample_post,
        {
            "id": 2,
            "title": "Again",
            "author": {"id": 3, "name": "Ann"},
            "comments": [
                {"id": 8, "body": "Second"},
                {"id": 9, "body": "Third"},
            ],
        },
    ]


@pytest.fixture
def tag_index():
    """Join rows of the post/tag through-association."""
    return {
        "tags": [
            {"post": 1, "tag": 9},
            {"post": 1, "tag": 10},
            {"post": 2, "tag": 9},
        ],
    }
