"""Map start-tag attributes to record values."""

from typing import Dict, Iterable, Optional, Tuple, Union

from .config import Options
from .events import XML_WHITESPACE, Attribute

AttributeLike = Union[Attribute, Tuple[str, str]]


def convert_attributes_to_values_map(
    attributes: Iterable[AttributeLike], options: Optional[Options] = None
) -> Dict[str, Optional[str]]:
    """
    Produce a values map from the given attributes.

    Keys are the attribute prefix followed by the attribute's local name.
    When two attributes produce the same key, the later one wins.

    Args:
        attributes: Attributes in document order, or plain (name, value) pairs
        options: Mapping options (defaults to Options())

    Returns:
        Dictionary of prefixed names to values, with None for blank values
        when treat_empty_values_as_nulls is set
    """
    options = options or Options()
    if options.exclude_attribute_flag:
        return {}

    values = {}
    for pair in attributes:
        attribute = Attribute(*pair)
        value = attribute.value
        if options.treat_empty_values_as_nulls and not value.strip(XML_WHITESPACE):
            value = None
        values[options.attribute_prefix + attribute.local_name] = value
    return values
