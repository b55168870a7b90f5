"""safetyconfig - validated, immutable safety center configuration objects.

Configuration parsers feed raw attribute values into builders; the builders
validate everything at once and produce immutable, value-comparable records.
"""

__version__ = "0.1.0"

from safetyconfig.domain.entities import (
    SafetyCenterConfig,
    SafetyCenterConfigBuilder,
    SafetySource,
    SafetySourceBuilder,
    SafetySourceProfile,
    SafetySourcesGroup,
    SafetySourcesGroupBuilder,
    SafetySourceType,
    StatelessIconType,
)
from safetyconfig.domain.exceptions import (
    ConfigError,
    IllegalStateError,
    InvalidArgumentError,
    InvalidConfigError,
    ValidationReason,
)

__all__ = [
    "ConfigError",
    "IllegalStateError",
    "InvalidArgumentError",
    "InvalidConfigError",
    "SafetyCenterConfig",
    "SafetyCenterConfigBuilder",
    "SafetySource",
    "SafetySourceBuilder",
    "SafetySourceProfile",
    "SafetySourceType",
    "SafetySourcesGroup",
    "SafetySourcesGroupBuilder",
    "StatelessIconType",
    "ValidationReason",
    "__version__",
]
