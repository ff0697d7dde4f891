import pytest

from fragments import (
    Em,
    EmbedBlock,
    Heading,
    Hyperlink,
    ImageBlock,
    LabelSpan,
    ListItem,
    Paragraph,
    Preformatted,
    StructuredText,
    Strong,
    WebLink,
    parse_fragment,
)


@pytest.fixture()
def blocks():
    return [
        {"type": "heading1", "text": "Title", "spans": []},
        {
            "type": "paragraph",
            "text": "Bold and linked text",
            "spans": [
                {"start": 0, "end": 4, "type": "strong"},
                {"start": 9, "end": 15, "type": "em"},
                {
                    "start": 9,
                    "end": 15,
                    "type": "hyperlink",
                    "data": {"type": "Link.web", "value": {"url": "https://example.com"}},
                },
                {"start": 16, "end": 20, "type": "label", "data": {"label": "note"}},
                {"start": 0, "type": "strong"},
                {"start": 0, "end": 2, "type": "hyperlink", "data": {"type": "Link.web", "value": {}}},
                {"start": 0, "end": 2, "type": "underline"},
            ],
            "label": "intro",
        },
        {"type": "heading3", "text": "Sub", "spans": []},
        {"type": "list-item", "text": "one", "spans": []},
        {"type": "o-list-item", "text": "first", "spans": []},
        {"type": "preformatted", "text": "code()", "spans": []},
        {"type": "image", "url": "https://cdn.example.com/a.png", "dimensions": {"width": 4, "height": 2}},
        {"type": "embed", "oembed": {"type": "video", "embed_url": "https://youtu.be/x"}},
        {"type": "mystery", "text": "???"},
        {"type": "image", "url": "https://cdn.example.com/no-dimensions.png"},
        "junk",
    ]


def test_blocks_are_parsed_in_order(blocks):
    text = parse_fragment({"type": "StructuredText", "value": blocks})

    assert isinstance(text, StructuredText)
    assert [type(block) for block in text.blocks] == [
        Heading,
        Paragraph,
        Heading,
        ListItem,
        ListItem,
        Preformatted,
        ImageBlock,
        EmbedBlock,
    ]


def test_heading_levels_and_list_ordering(blocks):
    text = StructuredText.parse(blocks)

    assert text.blocks[0].level == 1
    assert text.blocks[2].level == 3
    assert text.blocks[3].ordered is False
    assert text.blocks[4].ordered is True


def test_paragraph_spans_keep_offsets_and_drop_malformed(blocks):
    paragraph = StructuredText.parse(blocks).get_first_paragraph()

    assert paragraph.label == "intro"
    assert list(paragraph.spans) == [
        Strong(start=0, end=4),
        Em(start=9, end=15),
        Hyperlink(start=9, end=15, link=WebLink(url="https://example.com")),
        LabelSpan(start=16, end=20, label="note"),
    ]


def test_shortcuts_find_first_blocks(blocks):
    text = StructuredText.parse(blocks)

    assert text.get_title().text == "Title"
    assert text.get_first_preformatted().text == "code()"
    assert text.get_first_image().url == "https://cdn.example.com/a.png"
    assert text.blocks[7].embed.url == "https://youtu.be/x"


def test_plain_text_joins_text_blocks(blocks):
    text = StructuredText.parse(blocks)

    assert text.as_text() == "Title\nBold and linked text\nSub\none\nfirst\ncode()"


def test_empty_structured_text_has_no_shortcuts():
    text = StructuredText.parse([])

    assert text.blocks == ()
    assert text.get_title() is None
    assert text.get_first_image() is None


def test_blocks_with_coerced_values_are_dropped():
    text = StructuredText.parse(
        [
            {"type": "paragraph", "text": 5, "spans": []},
            {"type": "paragraph", "text": "Kept", "spans": [{"start": "0", "end": 4, "type": "strong"}]},
        ]
    )

    assert [block.text for block in text.blocks] == ["Kept"]
    assert text.blocks[0].spans == ()
