"""Tests for the defaults() merge and the Context model."""

import pytest

from hymark.config.models import BuildOptions
from hymark.pipeline.context import Context, defaults


# ---------------------------------------------------------------------------
# defaults()
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_copies_missing_keys(self):
        dest = {"foo": "bar"}
        defaults(dest, {"bam": "baz"})
        assert dest == {"foo": "bar", "bam": "baz"}

    def test_does_not_overwrite_existing_keys(self):
        assert defaults({"foo": "bar"}, {"foo": "baz"}) == {"foo": "bar"}

    def test_earlier_source_wins(self):
        dest = {"foo": "bar"}
        got = defaults(dest, {"bam": "bam1"}, {"bam": "bam2", "baz": "baz2"})
        assert got == {"foo": "bar", "bam": "bam1", "baz": "baz2"}

    def test_returns_destination_object(self):
        dest: dict = {}
        assert defaults(dest, {}) is dest

    def test_existing_none_is_not_replaced(self):
        """Presence, not truthiness, decides."""
        assert defaults({"engine": None}, {"engine": "jinja2"}) == {"engine": None}

    def test_no_sources(self):
        assert defaults({"a": 1}) == {"a": 1}


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------


@pytest.fixture
def opts():
    return BuildOptions(
        input="src",
        output="out",
        templates="tpl",
        engine="handlebars",
        template="default.html",
    )


class TestContextCreate:
    def test_attributes_win_over_options(self, opts):
        ctx = Context.create("a.md", "body", {"template": "page.html"}, opts)
        assert ctx.template == "page.html"

    def test_options_fill_gaps(self, opts):
        ctx = Context.create("a.md", "body", {"title": "Hi"}, opts)
        assert ctx.title == "Hi"
        assert ctx.engine == "handlebars"
        assert ctx.templates == "tpl"
        assert ctx.input == "src"
        assert ctx.output == "out"
        assert ctx.match == list(opts.match)

    def test_path_and_content_not_overridden_by_attributes(self, opts):
        ctx = Context.create("a.md", "body", {"path": "evil.md", "content": "x"}, opts)
        assert ctx.path == "a.md"
        assert ctx.content == "body"

    def test_keeps_raw_attributes(self, opts):
        attrs = {"title": "Hi", "tags": ["a", "b"], "meta": {"n": 1}}
        ctx = Context.create("a.md", "body", attrs, opts)
        assert ctx.attributes == attrs
        assert ctx.meta == {"n": 1}

    def test_match_is_not_shared_with_options(self, opts):
        ctx = Context.create("a.md", "body", {}, opts)
        ctx.match.append("**/*.txt")
        assert "**/*.txt" not in opts.match


class TestContextAccess:
    def test_get_declared_and_extra(self):
        ctx = Context(path="a.md", content="x", title="T")
        assert ctx.get("path") == "a.md"
        assert ctx.get("title") == "T"
        assert ctx.get("missing") is None
        assert ctx.get("missing", "dflt") == "dflt"

    def test_as_dict_is_flat(self):
        ctx = Context(path="a.md", content="x", title="T")
        data = ctx.as_dict()
        assert data["path"] == "a.md"
        assert data["content"] == "x"
        assert data["title"] == "T"
        assert data["attributes"] == {}
