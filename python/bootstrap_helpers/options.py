"""Option bags: default merging, key normalisation and typed option models.

Helpers take their options as keyword arguments. Nothing here mutates the
mapping a caller passed in; every function returns a new dict.
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bootstrap_helpers.errors import OptionsError

__all__ = [
    'reverse_merge',
    'normalize_keys',
    'parse_options',
    'IconOptions',
    'LabelOptions',
    'LabelStyle',
]

M = TypeVar('M', bound=BaseModel)


def reverse_merge(options: Mapping | None, defaults: Mapping) -> dict:
    """Fill in defaults without overwriting keys the caller supplied.

    Example:
        >>> reverse_merge({"rel": "popover"}, {"rel": "tooltip", "tip": ""})
        {'rel': 'popover', 'tip': ''}
    """
    merged = dict(options or {})
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = value
    return merged


def normalize_keys(options: Mapping | None) -> dict:
    """Strip one trailing underscore from each key (``class_`` -> ``class``)."""
    return {
        (key[:-1] if key.endswith('_') and len(key) > 1 else key): value
        for key, value in (options or {}).items()
    }


def parse_options(model: type[M], options: Mapping | None, *, helper: str) -> M:
    """Validate an option bag against a helper's options model.

    Raises:
        OptionsError: If a value can't be coerced to the declared type.
    """
    try:
        return model.model_validate(normalize_keys(options))
    except ValidationError as e:
        invalid = {
            '.'.join(str(part) for part in err['loc']) or '<options>': err['msg']
            for err in e.errors()
        }
        accepted = {
            field.alias or name: field for name, field in model.model_fields.items()
        }
        raise OptionsError(
            "Invalid options",
            helper=helper,
            invalid=invalid,
            accepted=accepted,
            original_error=e,
        ) from e


class LabelStyle(StrEnum):
    """Bootstrap 2 label styles. Any other string is accepted as well."""

    SUCCESS = 'success'
    WARNING = 'warning'
    IMPORTANT = 'important'
    INFO = 'info'
    INVERSE = 'inverse'


class IconOptions(BaseModel):
    """Options for icon_tag()."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    white: bool = False

    @field_validator('white', mode='before')
    @classmethod
    def none_means_default(cls, v):
        return False if v is None else v


class LabelOptions(BaseModel):
    """Options for label(). Unrecognised keys are kept as HTML attributes."""

    model_config = ConfigDict(extra='allow', frozen=True)

    css_class: str | None = Field(default=None, alias='class')
    label_style: str | None = None

    @field_validator('label_style', mode='before')
    @classmethod
    def style_as_string(cls, v):
        # Unchecked: any value lands in the class list as its string form
        return None if v is None else str(v)

    @property
    def html_attrs(self) -> dict[str, Any]:
        return dict(self.model_extra or {})
