"""Engine configuration.

Every tunable constant lives here. ``timeout_ms`` and ``retry_attempts`` are
carried for callers that want them; the analysis core does not consult them.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from recordlens.core.errors import ConfigurationError


@dataclass(frozen=True)
class AnalysisThresholds:
    """Thresholds used by the insight and recommendation stages."""

    # Fewer records than this triggers the "increase data collection" advice
    min_records: int = 100

    # Records newer than now - recent_window_seconds count as recent
    recent_window_seconds: float = 24 * 60 * 60
    min_recent_fraction: float = 0.10

    # value > mean * multiplier counts as a high-value outlier
    high_value_multiplier: float = 1.5

    category_key: str = "category"
    unknown_category: str = "Unknown"

    def __post_init__(self) -> None:
        if self.min_records < 0:
            raise ConfigurationError(f"min_records must be >= 0, got {self.min_records}")
        if self.recent_window_seconds <= 0:
            raise ConfigurationError(
                f"recent_window_seconds must be > 0, got {self.recent_window_seconds}"
            )
        if not 0.0 <= self.min_recent_fraction <= 1.0:
            raise ConfigurationError(
                f"min_recent_fraction must be in [0, 1], got {self.min_recent_fraction}"
            )
        if self.high_value_multiplier <= 0:
            raise ConfigurationError(
                f"high_value_multiplier must be > 0, got {self.high_value_multiplier}"
            )


# camelCase keys mapped to EngineConfig field names
_MAPPING_KEYS = {
    "batchSize": "batch_size",
    "timeout": "timeout_ms",
    "retryAttempts": "retry_attempts",
    "enableLogging": "enable_logging",
    "maxWorkers": "max_workers",
    "sampleSize": "sample_size",
    "shutdownTimeout": "shutdown_timeout",
}


@dataclass(frozen=True)
class EngineConfig:
    """Complete engine configuration. Pass to ProcessingSystem to override defaults."""

    batch_size: int = 1000
    timeout_ms: int = 30000
    retry_attempts: int = 3
    enable_logging: bool = True
    max_workers: int = 10
    sample_size: int = 1000
    shutdown_timeout: float = 60.0
    thresholds: AnalysisThresholds = field(default_factory=AnalysisThresholds)

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.batch_size < 1:
            raise ConfigurationError(f"batch_size must be >= 1, got {self.batch_size}")
        if self.sample_size < 0:
            raise ConfigurationError(f"sample_size must be >= 0, got {self.sample_size}")
        if self.timeout_ms < 0 or self.retry_attempts < 0:
            raise ConfigurationError("timeout_ms and retry_attempts must be >= 0")
        if self.shutdown_timeout < 0:
            raise ConfigurationError(
                f"shutdown_timeout must be >= 0, got {self.shutdown_timeout}"
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "EngineConfig":
        """Build a config from a camelCase mapping.

        Unknown keys raise ConfigurationError. Missing keys keep their
        defaults.
        """
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            if key not in _MAPPING_KEYS:
                raise ConfigurationError(f"Unknown configuration key: {key!r}")
            kwargs[_MAPPING_KEYS[key]] = value
        return cls(**kwargs)

    def as_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping form of this config."""
        return {key: getattr(self, attr) for key, attr in _MAPPING_KEYS.items()}
