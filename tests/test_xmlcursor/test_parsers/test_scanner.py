"""Tests for depth-aware scanning primitives."""

import logging

from xmlcursor.events import (
    END_DOCUMENT,
    Attribute,
    Characters,
    EndElement,
    EventType,
    StartElement,
)
from xmlcursor.parsers import (
    EventCursor,
    check_end_element,
    create,
    gather_root_attributes,
    skip_children,
    skip_until,
)


def open_first(xml, count=1):
    """Create a cursor and consume the first `count` events."""
    cursor = create(xml)
    for _ in range(count):
        cursor.next()
    return cursor


class TestSkipUntil:
    """Tests for skip_until."""

    def test_finds_first_start_element(self):
        """The root start tag is returned and left unconsumed."""
        cursor = create('<?xml version="1.0"?>\n<!-- header --><root a="1"><b/></root>')

        event = skip_until(cursor, EventType.START_ELEMENT)

        assert event == StartElement("root", (Attribute("a", "1"),))
        assert cursor.peek() == event

    def test_skips_over_other_events(self):
        """Events before the requested type are discarded."""
        cursor = create("<a>text<b/></a>")
        cursor.next()

        event = skip_until(cursor, EventType.END_ELEMENT)

        assert event == EndElement("b")
        assert cursor.next() == EndElement("b")

    def test_returns_end_document_when_missing(self):
        """A missing event type ends at END_DOCUMENT without raising."""
        cursor = create("<a><b>x</b></a>")

        event = skip_until(cursor, EventType.COMMENT)

        assert event is END_DOCUMENT
        assert not cursor.has_next()

    def test_logs_when_end_is_reached(self, caplog):
        """Reaching the end without a match is logged at debug level."""
        cursor = EventCursor([Characters("x")])

        with caplog.at_level(logging.DEBUG, logger="xmlcursor.parsers.scanner"):
            skip_until(cursor, EventType.START_ELEMENT)

        assert "Reached end of document" in caplog.text

    def test_end_document_request(self):
        """Asking for END_DOCUMENT drains the stream."""
        cursor = create("<a><b/></a>")

        assert skip_until(cursor, EventType.END_DOCUMENT) is END_DOCUMENT


class TestGatherRootAttributes:
    """Tests for gather_root_attributes."""

    def test_returns_root_attributes(self):
        """The root's attributes come back in document order."""
        cursor = create('<row id="7" kind="x"><b c="1"/></row>')

        assert gather_root_attributes(cursor) == (
            Attribute("id", "7"),
            Attribute("kind", "x"),
        )
        assert cursor.peek().name == "row"

    def test_no_attributes(self):
        """A root without attributes gives an empty tuple."""
        assert gather_root_attributes(create("<row/>")) == ()

    def test_no_element(self):
        """A stream without elements gives an empty tuple."""
        assert gather_root_attributes(EventCursor([Characters("x")])) == ()


class TestCheckEndElement:
    """Tests for check_end_element."""

    def test_end_element_is_end(self):
        """An end tag right away means the element is finished."""
        cursor = open_first("<a></a>")

        assert check_end_element(cursor) is True
        assert cursor.peek() == EndElement("a")

    def test_whitespace_before_end_is_consumed(self):
        """Whitespace-only text before an end tag is skipped."""
        cursor = open_first("<a>\n   \t</a>")

        assert check_end_element(cursor) is True
        assert cursor.peek() == EndElement("a")

    def test_whitespace_between_siblings_is_not_an_end(self):
        """Whitespace followed by a start tag is not mistaken for the end."""
        cursor = open_first("<a><b/>\n  <c/></a>", count=3)

        assert check_end_element(cursor) is False
        assert cursor.peek() == StartElement("c")

    def test_text_is_not_consumed(self):
        """Non-whitespace text is left for the caller."""
        cursor = open_first("<a>  value  </a>")

        assert check_end_element(cursor) is False
        assert cursor.peek() == Characters("  value  ")

    def test_split_text_is_never_partially_consumed(self):
        """Text delivered in pieces is merged before the whitespace check."""
        cursor = EventCursor(
            [StartElement("a"), Characters("\n"), Characters("  value"), EndElement("a")]
        )
        cursor.next()

        assert check_end_element(cursor) is False
        assert cursor.peek() == Characters("\n  value")

    def test_end_document_is_end(self):
        """The end of the stream counts as an end."""
        cursor = EventCursor([Characters(" "), Characters("\n")])

        assert check_end_element(cursor) is True
        assert cursor.peek() is END_DOCUMENT

    def test_never_consumes_start_element(self):
        """A start tag is peeked but stays in place."""
        cursor = open_first("<a><b/></a>")

        check_end_element(cursor)
        check_end_element(cursor)

        assert cursor.next() == StartElement("b")


class TestSkipChildren:
    """Tests for skip_children."""

    def test_stops_at_matching_end(self):
        """After skipping, the element's own end tag is next."""
        cursor = open_first("<a><b>1</b><c><d/></c></a>")

        skip_children(cursor)

        assert cursor.next() == EndElement("a")
        assert not cursor.has_next()

    def test_empty_element(self):
        """Nothing is consumed for an empty element."""
        cursor = open_first("<a></a>")

        skip_children(cursor)

        assert cursor.peek() == EndElement("a")

    def test_text_only_element(self):
        """Text content is skipped."""
        cursor = open_first("<root><a>just text</a><z/></root>", count=2)

        skip_children(cursor)

        assert cursor.next() == EndElement("a")
        assert cursor.next() == StartElement("z")

    def test_indented_children(self):
        """Whitespace between siblings and around children is skipped."""
        xml = "<root>\n  <a>\n    <b>1</b>\n    <b>\n      <c/>\n    </b>\n  </a>\n  <z/>\n</root>"
        cursor = create(xml)
        cursor.next()
        skip_until(cursor, EventType.START_ELEMENT)
        cursor.next()

        skip_children(cursor)

        assert cursor.next() == EndElement("a")
        assert skip_until(cursor, EventType.START_ELEMENT) == StartElement("z")

    def test_same_named_descendants(self):
        """Deeper elements with the same name do not end the skip early."""
        cursor = open_first("<root><a><a><a/></a><b>x</b></a><next/></root>", count=2)

        skip_children(cursor)

        assert cursor.next() == EndElement("a")
        assert cursor.next() == StartElement("next")

    def test_mixed_content(self):
        """Text around child elements is part of the skipped subtree."""
        cursor = open_first("<root><a>head<b/>middle<c>x</c>tail</a><z/></root>", count=2)

        skip_children(cursor)

        assert cursor.next() == EndElement("a")
        assert cursor.next() == StartElement("z")

    def test_text_after_nested_child(self):
        """Trailing text inside a child does not end the skip early."""
        cursor = open_first("<root><a><b><c/>tail</b></a><z/></root>", count=2)

        skip_children(cursor)

        assert cursor.next() == EndElement("a")
        assert cursor.next() == StartElement("z")

    def test_deep_nesting(self):
        """Very deep nesting is handled without recursion."""
        depth = 100_000
        cursor = open_first("<a>" * depth + "</a>" * depth)

        skip_children(cursor)

        assert cursor.next() == EndElement("a")
        assert not cursor.has_next()

    def test_truncated_stream(self):
        """An early end of document stops the skip without raising."""
        cursor = EventCursor([StartElement("b"), Characters("x")])

        skip_children(cursor)

        assert cursor.peek() is END_DOCUMENT
