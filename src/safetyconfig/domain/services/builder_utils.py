"""Attribute validation shared by the configuration builders.

Every builder stores raw values in its setters and defers all checks to
``build()``, which calls into these helpers. Each helper either returns the
normalized value or raises an ``InvalidConfigError`` naming the attribute.
"""

from collections.abc import Iterable
from typing import Any

from safetyconfig.domain.exceptions import InvalidConfigError, ValidationReason

# Resource id meaning "no resource", as used by the platform resource system
NULL_RES_ID = 0


def validate_attribute(
    value: Any,
    name: str,
    *,
    required: bool,
    prohibited: bool = False,
    allow_empty: bool = True,
    default: Any = None,
) -> None:
    """Validate presence rules for a single attribute.

    Args:
        value: The value stored by the builder, or None if never set.
        name: Attribute name used in error messages.
        required: Whether the attribute must be set.
        prohibited: Whether setting a non-default value is an error.
        allow_empty: Whether an empty string is an acceptable value.
        default: The value considered equivalent to "not set" for
            prohibited attributes.

    Raises:
        InvalidConfigError: If any of the rules above is broken.
    """
    if value is None:
        if required:
            raise InvalidConfigError(name, ValidationReason.MISSING)
        return

    if not allow_empty and isinstance(value, str) and not value:
        raise InvalidConfigError(name, ValidationReason.EMPTY)

    if prohibited and value != default:
        raise InvalidConfigError(name, ValidationReason.PROHIBITED)


def validate_res_id(
    value: int | None,
    name: str,
    *,
    required: bool,
    prohibited: bool = False,
) -> int:
    """Validate a resource reference and return it, or NULL_RES_ID if unset.

    Only presence and the int type are checked here. Whether the reference
    resolves to an actual resource is up to the resource system that owns it.
    """
    validate_attribute(
        value, name, required=required, prohibited=prohibited, default=NULL_RES_ID
    )
    if value is None:
        return NULL_RES_ID
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidConfigError(name, ValidationReason.INVALID)
    if required and value == NULL_RES_ID:
        raise InvalidConfigError(name, ValidationReason.INVALID)
    return value


def validate_int_def(
    value: int | None,
    name: str,
    *,
    required: bool,
    prohibited: bool = False,
    default: int,
    valid_values: Iterable[int],
) -> int:
    """Validate an enumerated int attribute against its legal values.

    Returns ``default`` when the attribute is unset. ``IntEnum`` members and
    plain ints are both accepted; the returned value is whatever matched.
    """
    validate_attribute(value, name, required=required, prohibited=prohibited, default=default)
    if value is None:
        return default
    # bool is an int subclass but never a legal enumerated value
    if isinstance(value, int) and not isinstance(value, bool):
        for valid_value in valid_values:
            if value == valid_value:
                return valid_value
    raise InvalidConfigError(name, ValidationReason.OUT_OF_RANGE)


def validate_bool(
    value: bool | None,
    name: str,
    *,
    required: bool,
    prohibited: bool = False,
    default: bool,
) -> bool:
    """Validate a boolean attribute, returning ``default`` when unset."""
    validate_attribute(value, name, required=required, prohibited=prohibited, default=default)
    if value is None:
        return default
    return value
