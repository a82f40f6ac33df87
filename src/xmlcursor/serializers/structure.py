"""Rebuild the inner markup of a subtree while consuming it."""

import logging
from typing import Union

from ..events import Characters, EndElement, StartElement
from ..parsers.cursor import EventCursor

logger = logging.getLogger(__name__)


def _open_tag(element: StartElement) -> str:
    # Attributes are written as "name"="value"; consumers depend on this form.
    parts = [f"<{element.name}"]
    for attribute in element.attributes:
        parts.append(f' "{attribute.local_name}"="{attribute.value}"')
    return "".join(parts)


def current_structure_as_string(cursor: EventCursor, field: Union[StartElement, str]) -> str:
    """
    Convert the rest of the current field's subtree to an XML string.

    The caller must already have consumed the field's start tag. The field's
    own start and end tags are not included, and its end tag is left
    unconsumed.

    Args:
        cursor: Cursor positioned just inside the field
        field: The field's start tag, or its name

    Returns:
        Inner markup of the field. If the document ends first, whatever was
        gathered up to that point.
    """
    field_name = field.name if isinstance(field, StartElement) else field
    buffer = []
    depth = 1

    while depth > 0:
        event = cursor.peek()

        if isinstance(event, StartElement):
            cursor.next()
            buffer.append(_open_tag(event))
            following = cursor.peek()
            if isinstance(following, EndElement) and following.name == event.name:
                cursor.next()
                buffer.append("/>")
            else:
                buffer.append(">")
                if event.name == field_name:
                    depth += 1

        elif isinstance(event, EndElement):
            if event.name == field_name and depth <= 1:
                break
            cursor.next()
            if event.name == field_name:
                depth -= 1
            buffer.append(f"</{event.name}>")

        elif isinstance(event, Characters):
            cursor.next()
            buffer.append(event.text)

        else:
            logger.warning(
                f"Document ended inside field '{field_name}'; returning partial structure"
            )
            break

    return "".join(buffer)
