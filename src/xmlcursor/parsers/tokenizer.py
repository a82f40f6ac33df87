"""Expat-backed tokenizer producing pull events."""

import logging
from typing import List, Optional, Union
from xml.parsers import expat

from ..config import TokenizerConfig
from ..errors import MalformedXmlError
from ..events import (
    Attribute,
    Characters,
    Comment,
    EndElement,
    ProcessingInstruction,
    StartElement,
)
from .cursor import EventCursor

logger = logging.getLogger(__name__)


class _EventCollector:
    """Expat handler target that records events in document order."""

    def __init__(self):
        self.events = []

    def start_element(self, name, attributes):
        # ordered_attributes gives a flat [name, value, name, value, ...] list
        pairs = tuple(
            Attribute(attributes[i], attributes[i + 1]) for i in range(0, len(attributes), 2)
        )
        self.events.append(StartElement(name, pairs))

    def end_element(self, name):
        self.events.append(EndElement(name))

    def characters(self, data):
        self.events.append(Characters(data))

    def comment(self, data):
        self.events.append(Comment(data))

    def processing_instruction(self, target, data):
        self.events.append(ProcessingInstruction(target, data))


class TokenizerFactory:
    """Immutable factory for tokenizers and cursors.

    The factory holds only a frozen TokenizerConfig and builds a fresh expat
    parser for every document, so one instance can serve any number of
    documents concurrently.
    """

    def __init__(self, config: Optional[TokenizerConfig] = None):
        self._config = config or TokenizerConfig()

    @property
    def config(self) -> TokenizerConfig:
        return self._config

    def _create_parser(self, collector: _EventCollector):
        # No namespace separator: names are reported exactly as written.
        parser = expat.ParserCreate()
        parser.ordered_attributes = True
        parser.buffer_size = self._config.buffer_size
        parser.buffer_text = True
        parser.StartElementHandler = collector.start_element
        parser.EndElementHandler = collector.end_element
        parser.CharacterDataHandler = collector.characters
        parser.CommentHandler = collector.comment
        parser.ProcessingInstructionHandler = collector.processing_instruction

        if self._config.forbid_entity_declarations:

            def _forbid_entities(entity_name, *_args):
                raise MalformedXmlError(
                    f"entity declarations are forbidden: {entity_name}",
                    line=parser.CurrentLineNumber,
                    column=parser.CurrentColumnNumber,
                )

            parser.EntityDeclHandler = _forbid_entities

        return parser

    def tokenize(self, xml_text: Union[str, bytes]) -> List:
        """
        Lex a complete document into events.

        Args:
            xml_text: The whole document (or single-rooted fragment)

        Returns:
            Events in document order, comments and processing instructions included

        Raises:
            MalformedXmlError: If expat cannot lex the input
        """
        collector = _EventCollector()
        parser = self._create_parser(collector)

        try:
            parser.Parse(xml_text, True)
        except expat.ExpatError as e:
            logger.debug(f"Tokenizer failed at line {e.lineno}, column {e.offset}: {e}")
            raise MalformedXmlError(
                expat.ErrorString(e.code), line=e.lineno, column=e.offset, code=e.code
            ) from e

        logger.debug(f"Tokenized {len(collector.events)} events")
        return collector.events

    def create_cursor(self, xml_text: Union[str, bytes]) -> EventCursor:
        """Tokenize a document and wrap it in a new cursor."""
        return EventCursor(self.tokenize(xml_text))


DEFAULT_FACTORY = TokenizerFactory()


def create(xml_text: Union[str, bytes]) -> EventCursor:
    """
    Create a cursor over a document using the default tokenizer settings.

    Raises:
        MalformedXmlError: If the document cannot be lexed
    """
    return DEFAULT_FACTORY.create_cursor(xml_text)
