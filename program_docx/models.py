#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Program Models - validated inputs of the DOCX compiler.

The web editor stores programs as camelCase JSON; every model here accepts
both the camelCase keys and the snake_case field names.
"""

from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from config.constants import SECTION_ORDER, TITLE_PAGE_KEY


Alignment = Literal['left', 'center', 'justified']


class FormattingProfile(BaseModel):
    """
    User-controlled print formatting, immutable per export.

    Every field is required: defaults belong to the caller
    (see config.settings.Settings.default_formatting).
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra='ignore',
    )

    font_family: str = Field(..., min_length=1)
    font_size: float = Field(..., gt=0, description="Body size in points")
    heading_font_size: float = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices('heading_font_size', 'headingFontSize', 'headingSize'),
        description="Heading size in points",
    )
    heading_bold: bool
    line_spacing: float = Field(..., gt=0, description="Multiplier, 1 = single")
    alignment: Alignment
    margin_top: float = Field(..., gt=0, description="Centimeters")
    margin_bottom: float = Field(..., gt=0, description="Centimeters")
    margin_left: float = Field(..., gt=0, description="Centimeters")
    margin_right: float = Field(..., gt=0, description="Centimeters")
    show_page_numbers: bool

    @classmethod
    def with_defaults(
        cls,
        overrides: Optional[Mapping[str, Any]],
        defaults: Mapping[str, Any],
    ) -> "FormattingProfile":
        """Validate `overrides` layered over a complete set of `defaults`."""
        base = cls.model_validate(dict(defaults))
        data = base.model_dump()
        if overrides:
            partial = cls.model_fields.keys()
            for key, value in overrides.items():
                name = _field_name(key, partial)
                if name is not None:
                    data[name] = value
        return cls.model_validate(data)


def _field_name(key: str, names) -> Optional[str]:
    """Map a snake_case or camelCase key onto a model field name."""
    if key in names:
        return key
    for name in names:
        if to_camel(name) == key:
            return name
    if key == 'headingSize':
        return 'heading_font_size'
    return None


class ProgramSections(BaseModel):
    """Raw text of the eight program sections."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra='ignore',
    )

    title_page: str = ''
    explanatory_note: str = ''
    goal: str = ''
    tasks: str = ''
    results: str = ''
    curriculum: str = ''
    assessment: str = ''
    literature: str = ''

    @field_validator('*', mode='before')
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return '' if value is None else value

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Optional[str]]) -> "ProgramSections":
        """Build from a mapping keyed by snake_case or camelCase section keys."""
        return cls.model_validate(dict(mapping))

    def get(self, key: str) -> str:
        """Return the text of a section by its snake_case key."""
        if key != TITLE_PAGE_KEY and key not in SECTION_ORDER:
            raise KeyError(key)
        return getattr(self, key)

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump()


class Program(BaseModel):
    """A program record as persisted by the editor."""
    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra='ignore',
        protected_namespaces=(),
    )

    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    hours: int = 0
    level: str = ''
    institution_code: str = ''
    author: str = ''
    model_id: Optional[str] = None
    sections: ProgramSections = Field(default_factory=ProgramSections)
    # Stored as-is; resolved against defaults with FormattingProfile.with_defaults
    formatting: Dict[str, Any] = Field(default_factory=dict)
