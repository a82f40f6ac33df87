"""Serializers that turn cursor events back into text."""

from .structure import current_structure_as_string

__all__ = [
    "current_structure_as_string",
]
