"""Safety source entity.

A safety source is a single entry shown by the safety center, provided
either statically by the configuration or dynamically by an app.
"""

from dataclasses import dataclass
from enum import IntEnum

from safetyconfig.domain.services.builder_utils import (
    validate_attribute,
    validate_bool,
    validate_int_def,
    validate_res_id,
)


class SafetySourceType(IntEnum):
    """How a safety source provides its data."""

    STATIC = 1
    DYNAMIC = 2
    ISSUE_ONLY = 3


class SafetySourceProfile(IntEnum):
    """Which user profiles a safety source applies to."""

    PRIMARY = 1
    ALL = 2


@dataclass(frozen=True)
class SafetySource:
    """Immutable safety source definition.

    Attributes:
        type: How the source provides its data.
        id: Identifier, unique across the whole configuration.
        package_name: Package providing data; None for static sources.
        title_res_id: Resource id of the title; 0 when not applicable.
        summary_res_id: Resource id of the summary; 0 when not set.
        intent_action: Action launched when the entry is tapped; None for
            issue-only sources.
        profile: Profiles the source applies to.
        logging_allowed: Whether the source may be logged.
    """

    type: SafetySourceType
    id: str
    package_name: str | None
    title_res_id: int
    summary_res_id: int
    intent_action: str | None
    profile: SafetySourceProfile
    logging_allowed: bool = True

    @classmethod
    def builder(cls) -> "SafetySourceBuilder":
        """Return a new builder for a safety source."""
        return SafetySourceBuilder()


class SafetySourceBuilder:
    """Builder for ``SafetySource``.

    Setters store raw values without checking them and return the builder
    so calls can be chained. All validation happens in ``build()``.
    """

    def __init__(self) -> None:
        self._type: int | None = None
        self._id: str | None = None
        self._package_name: str | None = None
        self._title_res_id: int | None = None
        self._summary_res_id: int | None = None
        self._intent_action: str | None = None
        self._profile: int | None = None
        self._logging_allowed: bool | None = None

    def set_type(self, source_type: int | None) -> "SafetySourceBuilder":
        self._type = source_type
        return self

    def set_id(self, source_id: str | None) -> "SafetySourceBuilder":
        self._id = source_id
        return self

    def set_package_name(self, package_name: str | None) -> "SafetySourceBuilder":
        self._package_name = package_name
        return self

    def set_title_res_id(self, title_res_id: int | None) -> "SafetySourceBuilder":
        self._title_res_id = title_res_id
        return self

    def set_summary_res_id(self, summary_res_id: int | None) -> "SafetySourceBuilder":
        self._summary_res_id = summary_res_id
        return self

    def set_intent_action(self, intent_action: str | None) -> "SafetySourceBuilder":
        self._intent_action = intent_action
        return self

    def set_profile(self, profile: int | None) -> "SafetySourceBuilder":
        self._profile = profile
        return self

    def set_logging_allowed(self, logging_allowed: bool | None) -> "SafetySourceBuilder":
        self._logging_allowed = logging_allowed
        return self

    def build(self) -> SafetySource:
        """Validate the accumulated attributes and create the safety source.

        Raises:
            InvalidConfigError: If an attribute is missing, empty, prohibited
                for the source type, or out of range.
        """
        source_type = SafetySourceType(
            validate_int_def(
                self._type,
                "type",
                required=True,
                default=SafetySourceType.STATIC,
                valid_values=SafetySourceType,
            )
        )
        is_static = source_type == SafetySourceType.STATIC
        is_issue_only = source_type == SafetySourceType.ISSUE_ONLY

        validate_attribute(self._id, "id", required=True, allow_empty=False)
        validate_attribute(
            self._package_name,
            "packageName",
            required=not is_static,
            prohibited=is_static,
            allow_empty=False,
        )
        title_res_id = validate_res_id(
            self._title_res_id, "title", required=not is_issue_only, prohibited=is_issue_only
        )
        summary_res_id = validate_res_id(
            self._summary_res_id, "summary", required=False, prohibited=is_issue_only
        )
        validate_attribute(
            self._intent_action,
            "intentAction",
            required=not is_issue_only,
            prohibited=is_issue_only,
            allow_empty=False,
        )
        profile = SafetySourceProfile(
            validate_int_def(
                self._profile,
                "profile",
                required=True,
                default=SafetySourceProfile.PRIMARY,
                valid_values=SafetySourceProfile,
            )
        )
        logging_allowed = validate_bool(
            self._logging_allowed,
            "loggingAllowed",
            required=False,
            prohibited=is_static,
            default=True,
        )

        return SafetySource(
            type=source_type,
            id=self._id,
            package_name=self._package_name,
            title_res_id=title_res_id,
            summary_res_id=summary_res_id,
            intent_action=self._intent_action,
            profile=profile,
            logging_allowed=logging_allowed,
        )
