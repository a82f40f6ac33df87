"""Main API composing the cursor primitives for common lookups."""

from typing import Dict, Optional, Union

from .attributes import convert_attributes_to_values_map
from .config import Options
from .events import EventType
from .parsers import create, gather_root_attributes, skip_until
from .serializers import current_structure_as_string


def root_attributes(
    xml_text: Union[str, bytes], options: Optional[Options] = None
) -> Dict[str, Optional[str]]:
    """
    Map the root element's attributes of a document to record values.

    Args:
        xml_text: Complete XML document
        options: Attribute mapping options

    Returns:
        Dictionary of prefixed attribute names to values
    """
    cursor = create(xml_text)
    return convert_attributes_to_values_map(gather_root_attributes(cursor), options)


def root_structure_as_string(xml_text: Union[str, bytes]) -> str:
    """
    Return the inner markup of a document's root element.

    Args:
        xml_text: Complete XML document

    Returns:
        Markup between the root's start and end tags

    Raises:
        MalformedXmlError: If the document cannot be lexed, including when it has no element
    """
    cursor = create(xml_text)
    root = skip_until(cursor, EventType.START_ELEMENT)
    cursor.next()
    return current_structure_as_string(cursor, root)
