"""Pull cursor, tokenizer and structural scanning primitives."""

from .cursor import EventCursor, coalesce_characters, is_relevant_event
from .scanner import check_end_element, gather_root_attributes, skip_children, skip_until
from .tokenizer import DEFAULT_FACTORY, TokenizerFactory, create

__all__ = [
    "EventCursor",
    "TokenizerFactory",
    "DEFAULT_FACTORY",
    "create",
    "is_relevant_event",
    "coalesce_characters",
    "skip_until",
    "gather_root_attributes",
    "check_end_element",
    "skip_children",
]
