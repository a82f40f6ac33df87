"""Depth-aware traversal primitives over an EventCursor."""

import logging
from typing import Tuple

from ..events import (
    Attribute,
    EndDocument,
    EndElement,
    EventType,
    StartElement,
    is_whitespace_characters,
)
from .cursor import EventCursor

logger = logging.getLogger(__name__)


def skip_until(cursor: EventCursor, event_type: EventType):
    """
    Skip events until one of the given type is next.

    Args:
        cursor: Cursor to advance
        event_type: Event type to stop at

    Returns:
        The matching event, left unconsumed, or END_DOCUMENT if none was found
    """
    event = cursor.peek()
    while event.event_type is not event_type and not isinstance(event, EndDocument):
        cursor.next()
        event = cursor.peek()

    if isinstance(event, EndDocument) and event_type is not EventType.END_DOCUMENT:
        logger.debug(f"Reached end of document while looking for {event_type.value}")
    return event


def gather_root_attributes(cursor: EventCursor) -> Tuple[Attribute, ...]:
    """Return the attributes of the first start tag, leaving it unconsumed."""
    root = skip_until(cursor, EventType.START_ELEMENT)
    if isinstance(root, StartElement):
        return root.attributes
    return ()


def check_end_element(cursor: EventCursor) -> bool:
    """Check if the cursor points at an end tag, skipping whitespace-only text."""
    while True:
        event = cursor.peek()
        if isinstance(event, (EndElement, EndDocument)):
            return True
        if is_whitespace_characters(event):
            cursor.next()
            continue
        return False


def skip_children(cursor: EventCursor) -> None:
    """
    Skip the children of the element whose start tag was just consumed.

    On return the next event is that element's own end tag. Nesting is
    tracked with a counter rather than recursion, so arbitrarily deep
    documents are safe.
    """
    depth = 0
    max_depth = 0

    should_stop = check_end_element(cursor)
    while not should_stop:
        event = cursor.next()
        if isinstance(event, StartElement):
            depth += 1
            max_depth = max(max_depth, depth)
            # Whitespace right after a start tag may just separate it from
            # its first child; real text is left for the next iteration.
            if is_whitespace_characters(cursor.peek()):
                cursor.next()
        elif isinstance(event, EndElement):
            depth -= 1
        elif isinstance(event, EndDocument):
            break

        # Back at the element's own level (or just past an end tag), look
        # past insignificant whitespace to see whether another sibling follows.
        if depth <= 0 or isinstance(event, EndElement):
            should_stop = check_end_element(cursor) and depth <= 0

    logger.debug(f"Skipped children down to depth {max_depth}")
