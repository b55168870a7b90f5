"""Safety center configuration entity.

The top-level record holding every safety sources group loaded from a
configuration document.
"""

from collections.abc import Hashable
from dataclasses import dataclass

from safetyconfig.core.logging import get_logger
from safetyconfig.domain.entities.safety_source import SafetySource
from safetyconfig.domain.entities.safety_sources_group import SafetySourcesGroup
from safetyconfig.domain.exceptions import IllegalStateError, InvalidArgumentError

logger = get_logger(__name__)


@dataclass(frozen=True)
class SafetyCenterConfig:
    """Immutable safety center configuration.

    Attributes:
        safety_sources_groups: Groups in document order.
    """

    safety_sources_groups: tuple[SafetySourcesGroup, ...]

    def __post_init__(self) -> None:
        """Freeze the group sequence passed in by the caller."""
        object.__setattr__(self, "safety_sources_groups", tuple(self.safety_sources_groups))

    @classmethod
    def builder(cls) -> "SafetyCenterConfigBuilder":
        """Return a new builder for a safety center configuration."""
        return SafetyCenterConfigBuilder()

    def get_group(self, group_id: str) -> SafetySourcesGroup | None:
        """Return the group with the given id, or None."""
        for group in self.safety_sources_groups:
            if group.id == group_id:
                return group
        return None

    def safety_sources(self) -> list[Hashable]:
        """Return the sources of every group, flattened in order."""
        return [
            source
            for group in self.safety_sources_groups
            for source in group.safety_sources
        ]


class SafetyCenterConfigBuilder:
    """Builder for ``SafetyCenterConfig``."""

    def __init__(self) -> None:
        self._safety_sources_groups: list[SafetySourcesGroup] = []

    def add_safety_sources_group(
        self, safety_sources_group: SafetySourcesGroup
    ) -> "SafetyCenterConfigBuilder":
        """Append a group to the configuration.

        Raises:
            InvalidArgumentError: If safety_sources_group is None.
        """
        if safety_sources_group is None:
            raise InvalidArgumentError("Safety sources group may not be None")
        self._safety_sources_groups.append(safety_sources_group)
        return self

    def build(self) -> SafetyCenterConfig:
        """Validate the groups and create the configuration.

        Raises:
            IllegalStateError: If no group was added, or if a group id or a
                safety source id appears more than once.
        """
        if not self._safety_sources_groups:
            raise IllegalStateError("Safety sources groups empty")

        group_ids: set[str] = set()
        source_ids: set[str] = set()
        for group in self._safety_sources_groups:
            if group.id in group_ids:
                raise IllegalStateError(f"Duplicate id {group.id} among safety sources groups")
            group_ids.add(group.id)
            for source in group.safety_sources:
                # Opaque members carry no id to check
                if not isinstance(source, SafetySource):
                    continue
                if source.id in source_ids:
                    raise IllegalStateError(f"Duplicate id {source.id} among safety sources")
                source_ids.add(source.id)

        config = SafetyCenterConfig(safety_sources_groups=tuple(self._safety_sources_groups))
        logger.debug(
            "safety_center_config_built",
            group_count=len(group_ids),
            source_count=len(config.safety_sources()),
        )
        return config
