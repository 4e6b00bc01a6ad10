"""
Data model and attribute contract models.

Data models are end-user defined schemas (a lightweight table/column
definition). Validation and storage of records happen on the platform; the
rules here only guard the editor before a request is issued.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from admin_core.models.enums import AttributeDataType, SourceType


class AttributeOption(BaseModel):
    """Choice of a SELECT / MULTI_SELECT attribute."""

    value: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    color: str | None = None
    order: int = 0


class AutoIncrementPolicy(BaseModel):
    """Generated identifier format, e.g. ``CUS-00042``."""

    prefix: str = ""
    suffix: str = ""
    start: int = Field(default=1, ge=0)
    padding: int = Field(default=0, ge=0, le=20)

    def format(self, number: int) -> str:
        """
        Render the identifier for a sequence number.

        Example:
            >>> AutoIncrementPolicy(prefix="CUS-", padding=5).format(42)
            'CUS-00042'
        """
        return f"{self.prefix}{str(number).zfill(self.padding)}{self.suffix}"

    def first(self) -> str:
        return self.format(self.start)


class _AttributeRules(BaseModel):
    """Cross-field checks applied before an attribute request is sent."""

    data_type: AttributeDataType = AttributeDataType.TEXT
    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)
    options: list[AttributeOption] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_rules(self):
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ValueError("min_length cannot be greater than max_length")
        values = [option.value for option in self.options]
        if len(values) != len(set(values)):
            raise ValueError("Option values must be unique")
        return self


class Attribute(BaseModel):
    """Attribute (column) of a data model as stored by the platform."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    data_model_id: str | None = None
    name: str
    display_name: str
    description: str | None = None
    is_required: bool = False
    is_unique: bool = False
    default_value: Any = None
    data_type: AttributeDataType = AttributeDataType.TEXT
    min_length: int | None = None
    max_length: int | None = None
    options: list[AttributeOption] = Field(default_factory=list)
    auto_increment: AutoIncrementPolicy | None = None
    order: int = 0


class AttributeCreate(_AttributeRules):
    """Request to add an attribute to a data model."""

    name: str = Field(..., min_length=1, max_length=100, pattern=r"^[a-zA-Z_][a-zA-Z0-9_]*$")
    display_name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    is_required: bool = False
    is_unique: bool = False
    default_value: Any = None
    auto_increment: AutoIncrementPolicy | None = None

    @model_validator(mode="after")
    def _options_for_choice_types(self):
        if self.data_type.has_options and not self.options:
            raise ValueError(f"{self.data_type.value} attributes need at least one option")
        return self


class DataModel(BaseModel):
    """Data model entity."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    slug: str | None = None
    display_name: str | None = None
    description: str | None = None
    icon: str | None = None
    tags: list[str] = Field(default_factory=list)
    source_type: SourceType = SourceType.INTERNAL
    is_pinned: bool = False
    sort_order: int = 0
    space_ids: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DataModelCreate(BaseModel):
    """Request to create a data model."""

    name: str = Field(..., min_length=1, max_length=100)
    slug: str | None = Field(default=None, pattern=r"^[a-z0-9]+(?:[-_][a-z0-9]+)*$")
    display_name: str | None = None
    description: str | None = None
    icon: str | None = None
    tags: list[str] = Field(default_factory=list)
    source_type: SourceType = SourceType.INTERNAL
    space_ids: list[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _strip_tags(cls, tags: list[str]) -> list[str]:
        return [tag.strip() for tag in tags if tag.strip()]


class DataModelUpdate(BaseModel):
    """Partial data model update."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    display_name: str | None = None
    description: str | None = None
    icon: str | None = None
    tags: list[str] | None = None
    source_type: SourceType | None = None
    is_pinned: bool | None = None
    sort_order: int | None = None
