"""Tests for relationship hyperlinks."""

from ember_rest.models import ModelDescriptor
from ember_rest.naming import HookNaming
from ember_rest.transform.links import attach_hyperlinks, build_link


class TestBuildLink:
    """Tests for link formatting."""

    def test_build_link(self):
        """Test URL layout."""
        assert build_link("/api", "posts", 1, "comments") == "/api/posts/1/comments"

    def test_build_link_without_prefix(self):
        """Test empty blueprint prefix."""
        assert build_link("", "posts", 1, "comments") == "/posts/1/comments"


class TestAttachHyperlinks:
    """Tests for attaching links to records."""

    def test_single_record(self, registry):
        """Test a single record is linked in place and returned in a list."""
        author = {"id": 3, "name": "Ann"}
        result = attach_hyperlinks(registry.resolve("author"), author, prefix="/api")

        assert result == [author]
        assert author["links"] == {"posts": "/api/authors/3/posts"}

    def test_batch(self, post_model):
        """Test every collection association of every record is linked."""
        posts = [{"id": 1}, {"id": 2}]
        attach_hyperlinks(post_model, posts, prefix="/api")

        assert posts[1]["links"] == {
            "comments": "/api/posts/2/comments",
            "tags": "/api/posts/2/tags",
            "revisions": "/api/posts/2/revisions",
        }

    def test_no_collections_no_links(self, registry):
        """Test models without collection associations get no links field."""
        votes = [{"id": 5}]
        attach_hyperlinks(registry.resolve("vote"), votes)

        assert "links" not in votes[0]

    def test_uses_model_identity_key(self):
        """Test link path uses the pluralized identity."""
        model = ModelDescriptor.from_definition("blogpost", {
            "globalId": "BlogPost",
            "associations": [
                {"alias": "entries", "type": "collection", "collection": "entry"},
            ],
        })
        records = attach_hyperlinks(model, {"id": 1})

        assert records[0]["links"] == {"entries": "/blogposts/1/entries"}

    def test_custom_naming(self, registry):
        """Test link path follows the naming strategy."""
        naming = HookNaming(convert_model_name=lambda identity, pluralize: f"{identity}-list")
        records = attach_hyperlinks(registry.resolve("author"), {"id": 3}, naming=naming)

        assert records[0]["links"] == {"posts": "/author-list/3/posts"}
