"""Tests for model naming conventions."""

import pytest

from ember_rest.naming import (
    HookNaming,
    InflectorNaming,
    camel_case,
    convert_model_name,
    kebab_case,
    reverse_model_name,
)


class TestCaseHelpers:
    """Tests for kebab-case and camelCase conversion."""

    def test_kebab_case_camel(self):
        """Test camelCase and PascalCase input."""
        assert kebab_case("blogPost") == "blog-post"
        assert kebab_case("BlogPost") == "blog-post"

    def test_kebab_case_separators(self):
        """Test underscores, spaces and repeated separators."""
        assert kebab_case("blog_post") == "blog-post"
        assert kebab_case("blog post") == "blog-post"
        assert kebab_case("__blog--post__") == "blog-post"

    def test_kebab_case_acronym(self):
        """Test runs of capitals."""
        assert kebab_case("HTTPRequest") == "http-request"

    def test_camel_case(self):
        """Test kebab-case input."""
        assert camel_case("blog-posts") == "blogPosts"
        assert camel_case("BlogPost") == "blogPost"


class TestConvertModelName:
    """Tests for identity to document key conversion."""

    def test_pluralized_kebab_key(self):
        """Test default pluralization."""
        assert convert_model_name("blogPost") == "blog-posts"

    def test_without_pluralize(self):
        """Test singular key."""
        assert convert_model_name("blogPost", pluralize=False) == "blog-post"

    def test_irregular_plurals(self):
        """Test inflection rules beyond appending 's'."""
        assert convert_model_name("category") == "categories"
        assert convert_model_name("person") == "people"


class TestReverseModelName:
    """Tests for document key to identity conversion."""

    def test_singular_lowercase_identity(self):
        """Test default singularization."""
        assert reverse_model_name("blog-posts") == "blogpost"
        assert reverse_model_name("categories") == "category"

    def test_without_singularize(self):
        """Test keeping the plural form."""
        assert reverse_model_name("blog-posts", singularize=False) == "blogposts"

    @pytest.mark.parametrize(
        "identity, expected",
        [
            ("blogPost", "blogpost"),
            ("BlogPost", "blogpost"),
            ("user", "user"),
            ("category", "category"),
            ("commentReply", "commentreply"),
        ],
    )
    def test_round_trip(self, identity, expected):
        """Test identity survives conversion modulo case and plural."""
        assert reverse_model_name(convert_model_name(identity)) == expected


class TestHookNaming:
    """Tests for host application naming hooks."""

    def test_convert_hook_replaces_default(self):
        """Test hook receives identical arguments and its result is returned."""
        calls = []

        def convert(identity, pluralize):
            calls.append((identity, pluralize))
            return f"custom_{identity}"

        naming = HookNaming(convert_model_name=convert)

        assert naming.to_document_key("BlogPost") == "custom_BlogPost"
        assert naming.to_document_key("BlogPost", False) == "custom_BlogPost"
        assert calls == [("BlogPost", True), ("BlogPost", False)]

    def test_reverse_hook_replaces_default(self):
        """Test reverse hook."""
        naming = HookNaming(reverse_model_name=lambda key, singularize: key.upper())

        assert naming.to_model_identity("blog-posts") == "BLOG-POSTS"

    def test_missing_hook_falls_back(self):
        """Test directions without a hook use the inflector."""
        naming = HookNaming(convert_model_name=lambda identity, pluralize: identity)

        assert naming.to_model_identity("blog-posts") == "blogpost"

    def test_hook_errors_propagate(self):
        """Test exceptions raised by a hook are not swallowed."""
        def broken(identity, pluralize):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            convert_model_name("post", naming=HookNaming(convert_model_name=broken))

    def test_module_functions_accept_strategy(self):
        """Test explicit strategy argument."""
        assert convert_model_name("post", naming=InflectorNaming()) == "posts"
