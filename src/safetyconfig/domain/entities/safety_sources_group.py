"""Safety sources group entity.

A group collects related safety sources under a shared title and summary.
Groups are usually created through ``SafetySourcesGroupBuilder``. Every
attribute is validated when the record is constructed, so a half-configured
group can never exist regardless of how it was created.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from enum import IntEnum

from safetyconfig.domain.exceptions import IllegalStateError, InvalidArgumentError
from safetyconfig.domain.services.builder_utils import (
    validate_attribute,
    validate_int_def,
    validate_res_id,
)


class StatelessIconType(IntEnum):
    """Icon shown for a group when all of its sources are stateless."""

    NONE = 0
    PRIVACY = 1


def _require_hashable(safety_source: Hashable) -> None:
    try:
        hash(safety_source)
    except TypeError as e:
        raise InvalidArgumentError(
            f"Safety source must be hashable, got {type(safety_source).__name__}"
        ) from e


@dataclass(frozen=True)
class SafetySourcesGroup:
    """Immutable group of safety sources.

    Instances compare and hash by value. The sources are copied into a tuple
    on construction, so neither the caller nor the builder that created the
    group can change them later. Sources must be hashable.

    Attributes:
        id: Non-empty group identifier.
        title_res_id: Resource id of the group title.
        summary_res_id: Resource id of the group summary.
        stateless_icon_type: Icon used when all sources are stateless.
        safety_sources: Sources in this group, in insertion order.
    """

    id: str
    title_res_id: int
    summary_res_id: int
    stateless_icon_type: StatelessIconType
    safety_sources: tuple[Hashable, ...]

    def __post_init__(self) -> None:
        """Validate group data after initialization.

        Raises:
            InvalidConfigError: If id, title, summary or statelessIconType is
                missing, empty or out of range.
            InvalidArgumentError: If a safety source is None or unhashable.
            IllegalStateError: If there are no safety sources.
        """
        validate_attribute(self.id, "id", required=True, allow_empty=False)
        validate_res_id(self.title_res_id, "title", required=True)
        validate_res_id(self.summary_res_id, "summary", required=True)
        stateless_icon_type = StatelessIconType(
            validate_int_def(
                self.stateless_icon_type,
                "statelessIconType",
                required=False,
                default=StatelessIconType.NONE,
                valid_values=StatelessIconType,
            )
        )
        safety_sources = tuple(self.safety_sources)
        for safety_source in safety_sources:
            if safety_source is None:
                raise InvalidArgumentError("Safety source may not be None")
            _require_hashable(safety_source)
        if not safety_sources:
            raise IllegalStateError("Safety sources group empty")

        object.__setattr__(self, "stateless_icon_type", stateless_icon_type)
        object.__setattr__(self, "safety_sources", safety_sources)

    @classmethod
    def builder(cls) -> "SafetySourcesGroupBuilder":
        """Return a new builder for a safety sources group."""
        return SafetySourcesGroupBuilder()


class SafetySourcesGroupBuilder:
    """Single-use builder for ``SafetySourcesGroup``.

    Not thread safe; confine an instance to the code building one group.
    """

    def __init__(self) -> None:
        self._id: str | None = None
        self._title_res_id: int | None = None
        self._summary_res_id: int | None = None
        self._stateless_icon_type: int | None = None
        self._safety_sources: list[Hashable] = []

    def set_id(self, group_id: str | None) -> "SafetySourcesGroupBuilder":
        """Set the id of the group."""
        self._id = group_id
        return self

    def set_title_res_id(self, title_res_id: int | None) -> "SafetySourcesGroupBuilder":
        """Set the resource id of the group title."""
        self._title_res_id = title_res_id
        return self

    def set_summary_res_id(self, summary_res_id: int | None) -> "SafetySourcesGroupBuilder":
        """Set the resource id of the group summary."""
        self._summary_res_id = summary_res_id
        return self

    def set_stateless_icon_type(
        self, stateless_icon_type: int | None
    ) -> "SafetySourcesGroupBuilder":
        """Set the icon type used when all sources are stateless."""
        self._stateless_icon_type = stateless_icon_type
        return self

    def add_safety_source(self, safety_source: Hashable) -> "SafetySourcesGroupBuilder":
        """Append a safety source to the group.

        Raises:
            InvalidArgumentError: If safety_source is None or unhashable.
        """
        if safety_source is None:
            raise InvalidArgumentError("Safety source may not be None")
        _require_hashable(safety_source)
        self._safety_sources.append(safety_source)
        return self

    def build(self) -> SafetySourcesGroup:
        """Create the group from the accumulated attributes.

        Validation runs in ``SafetySourcesGroup.__post_init__``; see there for
        the errors raised.
        """
        return SafetySourcesGroup(
            id=self._id,
            title_res_id=self._title_res_id,
            summary_res_id=self._summary_res_id,
            stateless_icon_type=self._stateless_icon_type,
            safety_sources=tuple(self._safety_sources),
        )
