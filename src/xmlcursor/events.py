"""Event types produced by the pull tokenizer and consumed through a cursor."""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, NamedTuple, Tuple

XML_WHITESPACE = " \t\r\n"


class EventType(Enum):
    """Kinds of events in a tokenized document."""

    START_ELEMENT = "start_element"
    END_ELEMENT = "end_element"
    CHARACTERS = "characters"
    END_DOCUMENT = "end_document"
    COMMENT = "comment"
    PROCESSING_INSTRUCTION = "processing_instruction"


class Attribute(NamedTuple):
    """Attribute of a start tag, in document order."""

    name: str
    value: str

    @property
    def local_name(self) -> str:
        # Namespace processing is off, so the raw name is the local name.
        return self.name


@dataclass(frozen=True)
class StartElement:
    name: str
    attributes: Tuple[Attribute, ...] = field(default_factory=tuple)

    event_type: ClassVar[EventType] = EventType.START_ELEMENT


@dataclass(frozen=True)
class EndElement:
    name: str

    event_type: ClassVar[EventType] = EventType.END_ELEMENT


@dataclass(frozen=True)
class Characters:
    text: str

    event_type: ClassVar[EventType] = EventType.CHARACTERS

    @property
    def is_whitespace(self) -> bool:
        """True when the text is non-empty and made only of XML whitespace."""
        return bool(self.text) and not self.text.strip(XML_WHITESPACE)


@dataclass(frozen=True)
class EndDocument:
    event_type: ClassVar[EventType] = EventType.END_DOCUMENT


@dataclass(frozen=True)
class Comment:
    text: str

    event_type: ClassVar[EventType] = EventType.COMMENT


@dataclass(frozen=True)
class ProcessingInstruction:
    target: str
    data: str

    event_type: ClassVar[EventType] = EventType.PROCESSING_INSTRUCTION


END_DOCUMENT = EndDocument()


def is_whitespace_characters(event) -> bool:
    """Check if an event is a whitespace-only text node."""
    return isinstance(event, Characters) and event.is_whitespace
