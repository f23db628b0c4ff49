#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_markdown_parser.py
"""Unit tests for the Markdown to document tree parser.

Tests cover:
- Block structure (headings, paragraphs, lists, code, tables, quotes)
- Inline structure (emphasis, links, images, breaks, strikethrough)
- Math elements and the parse_math option
- Raw HTML handling
- Input types and option validation

"""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from md2tex.ast import Element, ElementKind, Text, extract_text, find_all
from md2tex.exceptions import InvalidOptionsError, ValidationError
from md2tex.options.latex import LatexRendererOptions
from md2tex.options.markdown import MarkdownParserOptions
from md2tex.parsers.markdown import MarkdownToTreeParser, markdown_to_tree


def blocks(root: Element) -> list[Element]:
    return list(root.element_children())


@pytest.mark.unit
class TestBlockStructure:
    """Test block-level conversion."""

    def test_document_root(self):
        root = markdown_to_tree("Hello")
        assert root.kind is ElementKind.GENERIC
        assert root.tag == "document"

    def test_empty_document(self):
        assert markdown_to_tree("").children == []

    @pytest.mark.parametrize(
        "markdown,kind",
        [
            ("# One", ElementKind.HEADING_1),
            ("## Two", ElementKind.HEADING_2),
            ("### Three", ElementKind.HEADING_3),
            ("#### Four", ElementKind.HEADING_4),
        ],
    )
    def test_heading_levels(self, markdown, kind):
        heading = blocks(markdown_to_tree(markdown))[0]
        assert heading.kind is kind
        assert extract_text(heading) == markdown.lstrip("# ")

    @pytest.mark.parametrize("markdown,tag", [("##### Five", "h5"), ("###### Six", "h6")])
    def test_deep_headings_are_generic(self, markdown, tag):
        heading = blocks(markdown_to_tree(markdown))[0]
        assert heading.kind is ElementKind.GENERIC
        assert heading.tag == tag

    def test_blocks_separated_by_newline_text(self):
        root = markdown_to_tree("# Title\n\nSome text.")
        assert len(root.children) == 3
        assert root.children[1] == Text("\n")
        assert [b.kind for b in blocks(root)] == [ElementKind.HEADING_1, ElementKind.PARAGRAPH]

    def test_custom_block_separator(self):
        root = MarkdownToTreeParser(MarkdownParserOptions(block_separator="")).parse("a\n\nb")
        assert all(isinstance(child, Element) for child in root.children)

    def test_paragraph_text(self):
        paragraph = blocks(markdown_to_tree("Some text."))[0]
        assert paragraph.kind is ElementKind.PARAGRAPH
        assert extract_text(paragraph) == "Some text."

    def test_blockquote_is_generic(self):
        quote = blocks(markdown_to_tree("> quoted"))[0]
        assert quote.kind is ElementKind.GENERIC
        assert quote.tag == "blockquote"
        assert blocks(quote)[0].kind is ElementKind.PARAGRAPH

    def test_thematic_break(self):
        root = markdown_to_tree("a\n\n---\n\nb")
        assert [b.tag for b in blocks(root)] == ["p", "hr", "p"]


@pytest.mark.unit
class TestLists:
    """Test list conversion."""

    def test_unordered_list(self):
        lst = blocks(markdown_to_tree("- A\n- B"))[0]
        assert lst.kind is ElementKind.UNORDERED_LIST
        items = list(lst.element_children())
        assert [item.kind for item in items] == [ElementKind.LIST_ITEM, ElementKind.LIST_ITEM]
        assert [extract_text(item) for item in items] == ["A", "B"]

    def test_tight_item_text_has_no_paragraph(self):
        item = next(blocks(markdown_to_tree("- A"))[0].element_children())
        assert item.children == [Text("A")]

    def test_items_separated_by_newline_text(self):
        lst = blocks(markdown_to_tree("- A\n- B"))[0]
        assert lst.children[1] == Text("\n")

    def test_ordered_list(self):
        lst = blocks(markdown_to_tree("1. first\n2. second"))[0]
        assert lst.kind is ElementKind.ORDERED_LIST
        assert "start" not in lst.attributes

    def test_ordered_list_start(self):
        lst = blocks(markdown_to_tree("3. third\n4. fourth"))[0]
        assert lst.get("start") == "3"

    def test_nested_list(self):
        lst = blocks(markdown_to_tree("- parent\n  - child"))[0]
        nested = find_all(lst, ElementKind.UNORDERED_LIST)
        assert len(nested) == 1
        assert extract_text(nested[0]) == "child"


@pytest.mark.unit
class TestCodeBlocks:
    """Test code block conversion."""

    def test_fenced_code_keeps_raw_content(self):
        code = blocks(markdown_to_tree("```python\nx = a_b & c\n```"))[0]
        assert code.kind is ElementKind.CODE_BLOCK
        assert code.children == [Text("x = a_b & c")]
        assert code.get("language") == "python"

    def test_code_without_language(self):
        code = blocks(markdown_to_tree("```\nplain\n```"))[0]
        assert "language" not in code.attributes

    def test_inline_code(self):
        paragraph = blocks(markdown_to_tree("Use `a_b` here"))[0]
        code = find_all(paragraph, ElementKind.INLINE_CODE)
        assert extract_text(code[0]) == "a_b"


@pytest.mark.unit
class TestTables:
    """Test table conversion."""

    TABLE = "| Name | Score |\n|------|:-----:|\n| Ann | 10 |\n| Bob | 7 |"

    def test_table_rows(self):
        table = blocks(markdown_to_tree(self.TABLE))[0]
        assert table.kind is ElementKind.TABLE
        rows = find_all(table, ElementKind.TABLE_ROW)
        assert [[extract_text(c).strip() for c in row.element_children()] for row in rows] == [
            ["Name", "Score"],
            ["Ann", "10"],
            ["Bob", "7"],
        ]

    def test_header_cells_tagged_th(self):
        table = blocks(markdown_to_tree(self.TABLE))[0]
        header, body = find_all(table, ElementKind.TABLE_ROW)[:2]
        assert {cell.tag for cell in header.element_children()} == {"th"}
        assert {cell.tag for cell in body.element_children()} == {"td"}

    def test_cell_alignment(self):
        table = blocks(markdown_to_tree(self.TABLE))[0]
        header = find_all(table, ElementKind.TABLE_ROW)[0]
        assert [cell.get("align") for cell in header.element_children()] == ["", "center"]

    def test_tables_disabled(self):
        root = MarkdownToTreeParser(MarkdownParserOptions(parse_tables=False)).parse(self.TABLE)
        assert find_all(root, ElementKind.TABLE) == []


@pytest.mark.unit
class TestInline:
    """Test inline conversion."""

    def test_bold_and_italic(self):
        paragraph = blocks(markdown_to_tree("**b** and *i*"))[0]
        kinds = [child.kind for child in paragraph.element_children()]
        assert kinds == [ElementKind.BOLD, ElementKind.ITALIC]

    def test_link(self):
        paragraph = blocks(markdown_to_tree('[docs](https://example.com "Home")'))[0]
        link = find_all(paragraph, ElementKind.LINK)[0]
        assert link.get("href") == "https://example.com"
        assert link.get("title") == "Home"
        assert extract_text(link) == "docs"

    def test_image(self):
        paragraph = blocks(markdown_to_tree("![Plot *one*](plot.png)"))[0]
        image = find_all(paragraph, ElementKind.IMAGE)[0]
        assert image.get("src") == "plot.png"
        assert image.get("alt") == "Plot one"
        assert image.children == []

    def test_linked_image(self):
        link = find_all(markdown_to_tree("[![Logo](logo.png)](https://example.com)"), ElementKind.LINK)[0]
        assert find_all(link, ElementKind.IMAGE)[0].get("src") == "logo.png"

    def test_softbreak_is_newline_text(self):
        paragraph = blocks(markdown_to_tree("line one\nline two"))[0]
        assert Text("\n") in paragraph.children
        assert extract_text(paragraph) == "line one\nline two"

    def test_hard_break(self):
        paragraph = blocks(markdown_to_tree("a  \nb"))[0]
        assert [child.tag for child in paragraph.element_children()] == ["br"]

    def test_strikethrough(self):
        paragraph = blocks(markdown_to_tree("~~gone~~"))[0]
        deleted = next(paragraph.element_children())
        assert deleted.kind is ElementKind.GENERIC
        assert deleted.tag == "del"

    def test_strikethrough_disabled(self):
        root = MarkdownToTreeParser(MarkdownParserOptions(parse_strikethrough=False)).parse("~~kept~~")
        assert extract_text(root) == "~~kept~~"

    def test_text_is_not_escaped(self):
        assert extract_text(markdown_to_tree("100% & #1")) == "100% & #1"

    def test_character_references_decoded(self):
        assert extract_text(markdown_to_tree("A &amp; B, 5 &lt; 6 &#36;")) == "A & B, 5 < 6 $"

    def test_character_references_decoded_in_link_and_alt(self):
        paragraph = blocks(markdown_to_tree("[R&amp;D](x) ![a &gt; b](p.png)"))[0]
        assert extract_text(find_all(paragraph, ElementKind.LINK)[0]) == "R&D"
        assert find_all(paragraph, ElementKind.IMAGE)[0].get("alt") == "a > b"

    def test_character_references_kept_in_code(self):
        root = markdown_to_tree("`&amp;`\n\n```\n&lt;tag&gt;\n```")
        assert extract_text(find_all(root, ElementKind.INLINE_CODE)[0]) == "&amp;"
        assert extract_text(find_all(root, ElementKind.CODE_BLOCK)[0]) == "&lt;tag&gt;"


@pytest.mark.unit
class TestMath:
    """Test math element conversion."""

    def test_inline_math(self):
        paragraph = blocks(markdown_to_tree("Energy $E=mc^2$ here"))[0]
        math = find_all(paragraph, ElementKind.MATH_INLINE)
        assert [extract_text(m) for m in math] == ["E=mc^2"]

    def test_block_math(self):
        math = blocks(markdown_to_tree("$$\na + b\n$$"))[0]
        assert math.kind is ElementKind.MATH_BLOCK
        assert extract_text(math).strip() == "a + b"

    def test_math_disabled(self):
        root = MarkdownToTreeParser(MarkdownParserOptions(parse_math=False)).parse("Costs $5 and $6")
        assert find_all(root, ElementKind.MATH_INLINE) == []
        assert extract_text(root) == "Costs $5 and $6"


@pytest.mark.unit
class TestRawHtml:
    """Test raw HTML handling."""

    def test_block_html_parsed(self):
        root = markdown_to_tree('<table>\n<tr><td>a</td><td>b</td></tr>\n</table>\n\nafter')
        table = blocks(root)[0]
        assert table.kind is ElementKind.TABLE
        assert len(find_all(table, ElementKind.TABLE_CELL)) == 2

    def test_block_html_edges_trimmed(self):
        root = markdown_to_tree("<div>\n<b>hi</b>\n</div>")
        assert isinstance(root.children[0], Element)
        assert isinstance(root.children[-1], Element)

    def test_inline_container_tags_dropped(self):
        paragraph = blocks(markdown_to_tree("Text <span>inner</span> end"))[0]
        assert list(paragraph.element_children()) == []
        assert extract_text(paragraph) == "Text inner end"

    def test_inline_void_element_kept(self):
        paragraph = blocks(markdown_to_tree('See <img src="a.png" alt="A"> here'))[0]
        image = find_all(paragraph, ElementKind.IMAGE)[0]
        assert image.get("src") == "a.png"
        assert image.get("alt") == "A"

    def test_html_disabled(self):
        parser = MarkdownToTreeParser(MarkdownParserOptions(parse_html=False))
        root = parser.parse('<div>\n<b>hi</b>\n</div>\n\nSee <img src="a.png"> here')
        assert find_all(root, ElementKind.IMAGE) == []
        assert [b.kind for b in blocks(root)] == [ElementKind.PARAGRAPH]


@pytest.mark.unit
class TestInputTypes:
    """Test the accepted input types."""

    def test_bytes(self):
        assert blocks(MarkdownToTreeParser().parse("# Titré".encode("utf-8")))[0].kind is ElementKind.HEADING_1

    def test_bytes_with_bom(self):
        root = MarkdownToTreeParser().parse(b"\xef\xbb\xbf# Title")
        assert blocks(root)[0].kind is ElementKind.HEADING_1

    def test_path(self, temp_dir):
        path = temp_dir / "doc.md"
        path.write_text("## Section", encoding="utf-8")
        assert blocks(MarkdownToTreeParser().parse(path))[0].kind is ElementKind.HEADING_2

    def test_string_path(self, temp_dir):
        path = temp_dir / "doc.md"
        path.write_text("## Section", encoding="utf-8")
        assert blocks(MarkdownToTreeParser().parse(str(path)))[0].kind is ElementKind.HEADING_2

    def test_string_that_is_not_a_file_is_content(self):
        assert extract_text(MarkdownToTreeParser().parse("missing.md")) == "missing.md"

    def test_text_stream(self):
        assert blocks(MarkdownToTreeParser().parse(StringIO("- a")))[0].kind is ElementKind.UNORDERED_LIST

    def test_binary_stream(self):
        assert blocks(MarkdownToTreeParser().parse(BytesIO(b"- a")))[0].kind is ElementKind.UNORDERED_LIST

    def test_custom_encoding(self):
        parser = MarkdownToTreeParser(MarkdownParserOptions(encoding="latin-1"))
        assert extract_text(parser.parse("café".encode("latin-1"))) == "café"

    def test_unsupported_type(self):
        with pytest.raises(ValidationError):
            MarkdownToTreeParser().parse(42)  # type: ignore[arg-type]

    def test_missing_path(self, temp_dir):
        from md2tex.exceptions import FileNotFoundError as Md2TexFileNotFoundError

        with pytest.raises(Md2TexFileNotFoundError):
            MarkdownToTreeParser().parse(Path(temp_dir) / "absent.md")

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            MarkdownToTreeParser(LatexRendererOptions())  # type: ignore[arg-type]
