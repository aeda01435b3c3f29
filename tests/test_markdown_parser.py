"""Tests for the markdown catalog parser."""

import pytest

from catalog_browser.adapters.parsing import MarkdownCatalogParser
from catalog_browser.core import Catalog, Category, Item


@pytest.fixture
def parser():
    return MarkdownCatalogParser()


def titles(catalog: Catalog) -> list[tuple[str, list[str]]]:
    return [(c.title, [i.title for i in c.items]) for c in catalog.categories]


def test_parse_two_groups(parser):
    """Test the basic heading/list structure."""
    document = "## Group A\n- [Foo](http://x) - desc one\n## Group B\n- [Bar](http://y)\n"
    
    catalog = parser.parse(document)
    
    assert catalog.categories == (
        Category(
            title="Group A",
            items=(Item(title="Foo", url="http://x", category="Group A", description="desc one"),),
        ),
        Category(
            title="Group B",
            items=(Item(title="Bar", url="http://y", category="Group B", description=""),),
        ),
    )


def test_parse_skips_malformed_entry(parser):
    """Entries not starting with a link produce no item and no error."""
    document = "## A\n- plain text entry\n- [Ok](https://ok.dev) - fine\n"
    
    catalog = parser.parse(document)
    
    assert titles(catalog) == [("A", ["Ok"])]


def test_parse_skips_entry_starting_with_code(parser):
    document = "## A\n- `code` then [Link](https://l.dev)\n"
    
    assert titles(parser.parse(document)) == [("A", [])]


def test_parse_ignores_list_before_first_category(parser):
    """Table of contents before any level-2 heading is ignored."""
    document = (
        "# Title\n\n"
        "- [Components](#components)\n"
        "- [Tools](#tools)\n\n"
        "## Components\n\n"
        "- [Button](https://b.dev)\n"
    )
    
    assert titles(parser.parse(document)) == [("Components", ["Button"])]


def test_parse_keeps_empty_category(parser):
    document = "## Empty\n\nJust prose.\n\n## Full\n- [X](https://x.dev)\n"
    
    assert titles(parser.parse(document)) == [("Empty", []), ("Full", ["X"])]


def test_parse_trailing_empty_category(parser):
    document = "## A\n- [X](https://x.dev)\n## Contributors\n"
    
    assert titles(parser.parse(document)) == [("A", ["X"]), ("Contributors", [])]


def test_parse_deeper_headings_do_not_split_category(parser):
    """Items under a level-3 heading belong to the enclosing level-2 category."""
    document = (
        "## A\n"
        "- [X](https://x.dev)\n"
        "### Sub\n"
        "- [Y](https://y.dev)\n"
        "#### Deeper\n"
        "- [Z](https://z.dev)\n"
    )
    
    catalog = parser.parse(document)
    
    assert titles(catalog) == [("A", ["X", "Y", "Z"])]
    assert all(item.category == "A" for item in catalog.items)


def test_parse_level_one_heading_does_not_close_category(parser):
    document = "## A\n- [X](https://x.dev)\n# Big\n- [Y](https://y.dev)\n"
    
    assert titles(parser.parse(document)) == [("A", ["X", "Y"])]


def test_parse_keeps_document_order_and_duplicates(parser):
    document = (
        "## A\n"
        "- [Zeta](https://z.dev)\n"
        "- [Alpha](https://a.dev)\n"
        "- [Zeta](https://z2.dev)\n"
    )
    
    catalog = parser.parse(document)
    
    assert [i.title for i in catalog.items] == ["Zeta", "Alpha", "Zeta"]
    assert [i.url for i in catalog.items] == ["https://z.dev", "https://a.dev", "https://z2.dev"]


def test_parse_is_idempotent(parser, sample_readme):
    assert parser.parse(sample_readme) == parser.parse(sample_readme)


def test_parse_ordered_list(parser):
    document = "## A\n1. [One](https://1.dev) - first\n2. [Two](https://2.dev)\n"
    
    catalog = parser.parse(document)
    
    assert titles(catalog) == [("A", ["One", "Two"])]
    assert catalog.items[0].description == "first"


def test_parse_nested_list_is_not_an_entry(parser):
    document = "## A\n- [X](https://x.dev)\n  - [Nested](https://n.dev)\n"
    
    catalog = parser.parse(document)
    
    assert titles(catalog) == [("A", ["X"])]
    assert catalog.items[0].description == ""


def test_parse_description_separators(parser):
    document = (
        "## A\n"
        "- [Colon](https://c.dev): after colon\n"
        "- [Bare](https://b.dev) no separator\n"
        "- [Dash](https://d.dev) — em dash\n"
    )
    
    descriptions = [i.description for i in parser.parse(document).items]
    
    assert descriptions == ["after colon", "no separator", "em dash"]


def test_parse_multiline_description_keeps_continuation(parser):
    document = "## A\n- [X](https://x.dev) - first line\n  continued line\n"
    
    assert parser.parse(document).items[0].description == "first line\ncontinued line"


def test_parse_description_stops_at_formatted_run(parser):
    document = "## A\n- [X](https://x.dev) - plain start\n  more **bold** tail\n"
    
    assert parser.parse(document).items[0].description == "plain start\nmore"


def test_parse_keeps_leading_sign_in_description(parser):
    document = (
        "## A\n"
        "- [Offset](https://o.dev) -1 offset\n"
        "- [Ratio](https://r.dev) :ratio helper\n"
    )
    
    descriptions = [i.description for i in parser.parse(document).items]
    
    assert descriptions == ["-1 offset", ":ratio helper"]


def test_parse_keeps_link_target_as_written(parser):
    document = (
        "## A\n"
        "- [Cafe](https://example.com/café)\n"
        "- [Bucher](https://bücher.de/a)\n"
    )
    
    urls = [i.url for i in parser.parse(document).items]
    
    assert urls == ["https://example.com/café", "https://bücher.de/a"]


def test_parse_rejects_unsafe_link_scheme(parser):
    document = "## A\n- [Bad](javascript:alert(1)) - nope\n"
    
    assert titles(parser.parse(document)) == [("A", [])]


def test_parse_link_text_with_formatting(parser):
    document = "## A\n- [**Bold** name](https://b.dev) - desc\n"
    
    item = parser.parse(document).items[0]
    
    assert item.title == "Bold name"
    assert item.description == "desc"


def test_parse_heading_with_link(parser):
    document = "## [Components](#components)\n- [X](https://x.dev)\n"
    
    assert titles(parser.parse(document)) == [("Components", ["X"])]


def test_parse_setext_level_two_heading(parser):
    document = "Components\n----------\n\n- [X](https://x.dev)\n"
    
    assert titles(parser.parse(document)) == [("Components", ["X"])]


def test_parse_empty_document(parser):
    assert parser.parse("") == Catalog()


def test_parse_sample_readme(parser, sample_readme):
    catalog = parser.parse(sample_readme)
    
    assert titles(catalog) == [
        ("Components", ["Button Kit", "Card Stack", "Zebra Table"]),
        ("Tools", ["CLI Helper", "Star History"]),
        ("Contributors", []),
    ]
    assert catalog.items[0].url == "https://example.com/button"
    assert catalog.items[1].description == "Stacked cards with motion"
