"""Core domain models for record analysis."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

MetadataValue = str | int | float | bool

SUMMARY_KEYS = ("totalRecords", "averageValue", "maxValue", "minValue")


@dataclass(frozen=True)
class Record:
    """A single timestamped numeric measurement.

    Attributes:
        id: Opaque unique identifier.
        timestamp: Unix timestamp in seconds.
        value: The measured value.
        metadata: Additional loosely-typed fields. Copied on construction
            and exposed read-only.
    """

    id: str
    timestamp: float
    value: float
    metadata: Mapping[str, MetadataValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def metadata_copy(self) -> dict[str, MetadataValue]:
        """Return a mutable copy of the metadata."""
        return dict(self.metadata)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "value": self.value,
            "metadata": self.metadata_copy(),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis run.

    Attributes:
        summary: Metric name to value. Always holds the keys in SUMMARY_KEYS.
        insights: Observations in generation order.
        recommendations: Advisory strings, never empty for a completed run.
        processing_time_ms: Wall-clock time spent computing the result.
    """

    summary: Mapping[str, float]
    insights: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    processing_time_ms: float = 0.0

    def __post_init__(self) -> None:
        if self.processing_time_ms < 0:
            raise ValueError(
                f"processing_time_ms must be non-negative, got {self.processing_time_ms}"
            )
        object.__setattr__(self, "summary", MappingProxyType(dict(self.summary)))
        object.__setattr__(self, "insights", tuple(self.insights))
        object.__setattr__(self, "recommendations", tuple(self.recommendations))

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase wire form of the result."""
        return {
            "summary": dict(self.summary),
            "insights": list(self.insights),
            "recommendations": list(self.recommendations),
            "processingTimeMs": self.processing_time_ms,
        }
