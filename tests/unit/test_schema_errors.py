"""Unit tests for ErrorCollector report rendering."""

from __future__ import annotations

from data_validator.schema.errors import ErrorCollector


class TestErrorCollector:
    """Test line accumulation and rendering."""

    def test_empty_collector(self) -> None:
        """A fresh collector has no errors and renders empty."""
        errors = ErrorCollector()
        assert errors.has_errors() is False
        assert errors.render() == ""

    def test_add_preserves_order(self) -> None:
        """Lines render newline-joined in insertion order."""
        errors = ErrorCollector()
        errors.add("missing description:")
        errors.add("no properties defined")

        assert errors.has_errors() is True
        assert errors.render() == "missing description:\nno properties defined"

    def test_render_with_introduction(self) -> None:
        """An introduction indents every line by two spaces."""
        errors = ErrorCollector()
        errors.add("first")
        errors.add("second")
        errors.introduction = "Invalid schema:"

        assert errors.render() == "Invalid schema:\n  first\n  second"
        assert str(errors) == errors.render()

    def test_concat_nests_one_level(self) -> None:
        """concat adds the introduction then the indented incoming lines."""
        incoming = ErrorCollector()
        incoming.add("type: should be of type String, but is of type Integer")

        errors = ErrorCollector()
        errors.add("no properties defined")
        errors.concat("malformed property name:", incoming)

        assert errors.errors == [
            "no properties defined",
            "malformed property name:",
            "  type: should be of type String, but is of type Integer",
        ]

    def test_concat_compounds_indentation(self) -> None:
        """Each concat adds two more spaces to already nested lines."""
        inner = ErrorCollector()
        inner.add("leaf")

        middle = ErrorCollector()
        middle.concat("middle:", inner)

        outer = ErrorCollector(introduction="top:")
        outer.concat("outer:", middle)

        assert outer.render() == "top:\n  outer:\n    middle:\n      leaf"

    def test_concat_does_not_modify_incoming(self) -> None:
        """The merged collector keeps its own lines unchanged."""
        incoming = ErrorCollector()
        incoming.add("leaf")

        ErrorCollector().concat("intro:", incoming)

        assert incoming.errors == ["leaf"]

    def test_collectors_do_not_share_state(self) -> None:
        """Separate collectors keep separate line lists."""
        first = ErrorCollector()
        first.add("only here")

        assert ErrorCollector().errors == []
