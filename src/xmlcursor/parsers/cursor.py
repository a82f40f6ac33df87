"""Pull cursor over a filtered, coalesced event stream."""

from typing import Iterable, Iterator

from ..events import END_DOCUMENT, Characters, EndDocument, EventType

IGNORED_EVENT_TYPES = (EventType.COMMENT, EventType.PROCESSING_INSTRUCTION)


def is_relevant_event(event) -> bool:
    """Ignore comments and processing instructions."""
    return event.event_type not in IGNORED_EVENT_TYPES


def coalesce_characters(events: Iterable) -> Iterator:
    """Merge runs of adjacent character events into one event."""
    pending = []
    for event in events:
        if isinstance(event, Characters):
            pending.append(event.text)
            continue
        if pending:
            text = "".join(pending)
            pending = []
            if text:
                yield Characters(text)
        yield event

    text = "".join(pending)
    if text:
        yield Characters(text)


class EventCursor:
    """
    Cursor with one event of lookahead over a tokenized document.

    Comments and processing instructions are dropped as the cursor is built,
    so callers only ever see start tags, end tags, text and the end of the
    document. A cursor is owned by a single traversal and must not be shared.
    """

    def __init__(self, events: Iterable):
        """
        Initialize cursor over an event source.

        Args:
            events: Events in document order, e.g. from TokenizerFactory.tokenize
        """
        self._events = iter(coalesce_characters(filter(is_relevant_event, events)))
        self._lookahead = None

    def peek(self):
        """Return the next event without consuming it (END_DOCUMENT once exhausted)."""
        if self._lookahead is None:
            self._lookahead = next(self._events, END_DOCUMENT)
        return self._lookahead

    def next(self):
        """Return the next event and advance past it."""
        event = self.peek()
        # End of document is sticky so callers can keep asking.
        if not isinstance(event, EndDocument):
            self._lookahead = None
        return event

    def has_next(self) -> bool:
        return not isinstance(self.peek(), EndDocument)
