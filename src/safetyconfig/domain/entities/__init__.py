"""Domain entities for safetyconfig.

Entities are frozen dataclasses created through builders that validate
every attribute before construction.
"""

from safetyconfig.domain.entities.safety_center_config import (
    SafetyCenterConfig,
    SafetyCenterConfigBuilder,
)
from safetyconfig.domain.entities.safety_source import (
    SafetySource,
    SafetySourceBuilder,
    SafetySourceProfile,
    SafetySourceType,
)
from safetyconfig.domain.entities.safety_sources_group import (
    SafetySourcesGroup,
    SafetySourcesGroupBuilder,
    StatelessIconType,
)

__all__ = [
    "SafetyCenterConfig",
    "SafetyCenterConfigBuilder",
    "SafetySource",
    "SafetySourceBuilder",
    "SafetySourceProfile",
    "SafetySourceType",
    "SafetySourcesGroup",
    "SafetySourcesGroupBuilder",
    "StatelessIconType",
]
