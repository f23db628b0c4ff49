#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for parser and renderer options."""

from dataclasses import FrozenInstanceError

import pytest

from md2tex.options import LatexRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Test Markdown parser options."""

    def test_defaults(self):
        options = MarkdownParserOptions()
        assert options.encoding == "utf-8"
        assert options.parse_tables is True
        assert options.parse_math is True
        assert options.parse_strikethrough is True
        assert options.parse_html is True
        assert options.block_separator == "\n"

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            MarkdownParserOptions().parse_math = False  # type: ignore[misc]

    def test_create_updated(self):
        original = MarkdownParserOptions()
        updated = original.create_updated(parse_math=False)
        assert updated.parse_math is False
        assert original.parse_math is True

    def test_create_updated_validates(self):
        with pytest.raises(ValueError, match="Unknown encoding"):
            MarkdownParserOptions().create_updated(encoding="not-a-codec")

    def test_unknown_encoding(self):
        with pytest.raises(ValueError):
            MarkdownParserOptions(encoding="not-a-codec")

    def test_field_names(self):
        assert MarkdownParserOptions.field_names() == [
            "encoding",
            "parse_tables",
            "parse_math",
            "parse_strikethrough",
            "parse_html",
            "block_separator",
        ]


@pytest.mark.unit
class TestLatexRendererOptions:
    """Test LaTeX renderer options."""

    def test_defaults(self):
        options = LatexRendererOptions()
        assert options.escape_special is True
        assert options.restore_math is True
        assert options.figure_placement == "h"
        assert options.image_width == "1\\textwidth"
        assert options.table_placement == "h"
        assert options.column_spec == " c "

    @pytest.mark.parametrize("field_name", ["column_spec", "image_width"])
    def test_blank_values_rejected(self, field_name):
        with pytest.raises(ValueError, match=field_name):
            LatexRendererOptions(**{field_name: "  "})

    def test_equality(self):
        assert LatexRendererOptions(column_spec="l") == LatexRendererOptions().create_updated(column_spec="l")

    def test_cli_metadata(self):
        from dataclasses import fields

        cli_names = {f.name: f.metadata.get("cli_name") for f in fields(LatexRendererOptions)}
        assert cli_names["escape_special"] == "no-escape-special"
        assert cli_names["restore_math"] == "no-restore-math"
