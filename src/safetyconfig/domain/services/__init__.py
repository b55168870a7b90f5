"""Domain services for safetyconfig.

Attribute validation shared by all builders.
"""

from safetyconfig.domain.services.builder_utils import (
    NULL_RES_ID,
    validate_attribute,
    validate_bool,
    validate_int_def,
    validate_res_id,
)

__all__ = [
    "NULL_RES_ID",
    "validate_attribute",
    "validate_bool",
    "validate_int_def",
    "validate_res_id",
]
