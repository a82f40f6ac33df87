"""xmlcursor - Cursor utilities over a pull XML tokenizer for record extraction."""

__version__ = "0.1.0"

from .main import (
    root_attributes,
    root_structure_as_string,
)
from .config import (
    Options,
    TokenizerConfig,
)
from .errors import MalformedXmlError, XmlCursorError
from .events import (
    END_DOCUMENT,
    Attribute,
    Characters,
    EndDocument,
    EndElement,
    EventType,
    StartElement,
)
from .parsers import (
    EventCursor,
    TokenizerFactory,
    check_end_element,
    create,
    gather_root_attributes,
    skip_children,
    skip_until,
)
from .serializers import current_structure_as_string
from .attributes import convert_attributes_to_values_map

__all__ = [
    "root_attributes",
    "root_structure_as_string",
    # Configuration
    "Options",
    "TokenizerConfig",
    # Errors
    "XmlCursorError",
    "MalformedXmlError",
    # Events
    "EventType",
    "Attribute",
    "StartElement",
    "EndElement",
    "Characters",
    "EndDocument",
    "END_DOCUMENT",
    # Cursor and traversal
    "EventCursor",
    "TokenizerFactory",
    "create",
    "skip_until",
    "gather_root_attributes",
    "check_end_element",
    "skip_children",
    "current_structure_as_string",
    "convert_attributes_to_values_map",
]
