"""Configuration models for attribute mapping and tokenization using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, Field


class Options(BaseModel):
    """Options controlling how attributes become record values.

    Field names also accept the camelCase option names used by the
    record-building engine (``attributePrefix`` and so on).
    """

    attribute_prefix: str = Field(
        default="_",
        alias="attributePrefix",
        description="Prefix prepended to attribute-derived keys",
    )

    exclude_attribute_flag: bool = Field(
        default=False,
        alias="excludeAttributeFlag",
        description="Drop all attributes instead of mapping them",
    )

    treat_empty_values_as_nulls: bool = Field(
        default=False,
        alias="treatEmptyValuesAsNulls",
        description="Map blank attribute values to None",
    )

    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}

    @classmethod
    def from_yaml(cls, path: Path):
        import yaml

        with open(path) as f:
            return cls(**(yaml.safe_load(f) or {}))

    def save_yaml(self, path: Path):
        import yaml

        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f)


class TokenizerConfig(BaseModel):
    """Settings for the underlying expat tokenizer.

    Instances are immutable and may be shared between documents and threads.
    Namespace processing is always off: element and attribute names are
    reported exactly as written.
    """

    buffer_size: int = Field(
        default=65536,
        ge=1024,
        le=2**24,
        description="Size of the expat character data buffer",
    )

    forbid_entity_declarations: bool = Field(
        default=False,
        description="Reject documents that declare DTD entities",
    )

    model_config = {"frozen": True, "extra": "forbid"}
