from fragments import Group, GroupDoc, Number, StructuredText, Text, parse_fragment


def _group(value):
    return parse_fragment({"type": "Group", "value": value})


def test_group_items_are_fragment_bags():
    group = _group(
        [
            {"title": {"type": "Text", "value": "First"}, "rank": {"type": "Number", "value": 1}},
            {"title": {"type": "Text", "value": "Second"}},
        ]
    )

    assert isinstance(group, Group)
    assert len(group) == 2
    assert isinstance(group[0], GroupDoc)
    assert group[0].get_text("title") == "First"
    assert group[0].get_number("rank") == Number(1)
    assert [doc.get_text("title") for doc in group] == ["First", "Second"]


def test_group_items_skip_unknown_fields_and_non_objects():
    group = _group(
        [
            {"title": {"type": "Text", "value": "Kept"}, "slice": {"type": "SliceZone", "value": []}},
            "junk",
            42,
        ]
    )

    assert len(group) == 1
    assert set(group[0].fragments) == {"title"}


def test_groups_nest_recursively():
    group = _group(
        [
            {
                "body": {"type": "StructuredText", "value": [{"type": "paragraph", "text": "Body", "spans": []}]},
                "children": {
                    "type": "Group",
                    "value": [{"name": {"type": "Text", "value": "Child"}}],
                },
            }
        ]
    )

    children = group[0].get_group("children")
    assert isinstance(group[0].get_structured_text("body"), StructuredText)
    assert children[0].get("name") == Text("Child")


def test_group_plain_text():
    group = _group([{"a": {"type": "Text", "value": "x"}}, {"b": {"type": "Text", "value": "y"}}, {}])

    assert group.as_text() == "x\ny"
    assert len(group) == 3
