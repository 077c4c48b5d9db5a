"""Tests for Record and AnalysisResult models."""

import dataclasses

import pytest

from recordlens.core.models import SUMMARY_KEYS, AnalysisResult, Record

pytestmark = [pytest.mark.core, pytest.mark.tier(0)]


class TestRecord:
    """Tests for Record."""

    def test_fields_are_stored(self) -> None:
        """Record keeps id, timestamp, value and metadata."""
        record = Record(
            id="id1", timestamp=1000.0, value=100.0, metadata={"key": "value"}
        )

        assert record.id == "id1"
        assert record.timestamp == 1000.0
        assert record.value == 100.0
        assert record.metadata["key"] == "value"

    def test_metadata_defaults_to_empty(self) -> None:
        """Metadata defaults to an empty mapping."""
        record = Record(id="id1", timestamp=1000.0, value=1.0)

        assert dict(record.metadata) == {}

    def test_record_is_frozen(self) -> None:
        """Fields cannot be reassigned."""
        record = Record(id="id1", timestamp=1000.0, value=1.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.value = 2.0  # type: ignore[misc]

    def test_metadata_is_copied_on_construction(self) -> None:
        """Mutating the caller's dict does not affect the record."""
        source = {"category": "A"}
        record = Record(id="id1", timestamp=1000.0, value=1.0, metadata=source)

        source["category"] = "B"
        source["extra"] = 1

        assert dict(record.metadata) == {"category": "A"}

    def test_metadata_view_is_read_only(self) -> None:
        """The exposed metadata mapping rejects writes."""
        record = Record(id="id1", timestamp=1000.0, value=1.0, metadata={"a": 1})

        with pytest.raises(TypeError):
            record.metadata["a"] = 2  # type: ignore[index]

    def test_metadata_copy_is_independent(self) -> None:
        """metadata_copy returns a dict whose mutation is not reflected back."""
        record = Record(id="id1", timestamp=1000.0, value=1.0, metadata={"a": 1})

        copy = record.metadata_copy()
        copy["a"] = 99

        assert record.metadata["a"] == 1

    def test_records_with_same_fields_are_equal(self) -> None:
        """Equality compares all fields including metadata."""
        a = Record(id="x", timestamp=1.0, value=2.0, metadata={"k": "v"})
        b = Record(id="x", timestamp=1.0, value=2.0, metadata={"k": "v"})

        assert a == b

    def test_to_dict(self) -> None:
        """to_dict returns plain JSON-ready values."""
        record = Record(id="x", timestamp=1.5, value=2.5, metadata={"priority": 3})

        assert record.to_dict() == {
            "id": "x",
            "timestamp": 1.5,
            "value": 2.5,
            "metadata": {"priority": 3},
        }


class TestAnalysisResult:
    """Tests for AnalysisResult."""

    def test_fields_are_stored(self) -> None:
        """AnalysisResult keeps all four fields."""
        result = AnalysisResult(
            summary={"totalRecords": 10.0},
            insights=("insight1",),
            recommendations=("recommendation1",),
            processing_time_ms=100.0,
        )

        assert result.summary["totalRecords"] == 10.0
        assert result.insights[0] == "insight1"
        assert result.recommendations[0] == "recommendation1"
        assert result.processing_time_ms == 100.0

    def test_summary_is_copied_and_read_only(self) -> None:
        """Summary cannot be changed through the caller's dict or the result."""
        summary = {"totalRecords": 1.0}
        result = AnalysisResult(summary=summary)

        summary["totalRecords"] = 5.0

        assert result.summary["totalRecords"] == 1.0
        with pytest.raises(TypeError):
            result.summary["totalRecords"] = 2.0  # type: ignore[index]

    def test_lists_are_stored_as_tuples(self) -> None:
        """Insights and recommendations passed as lists become tuples."""
        insights = ["a"]
        result = AnalysisResult(
            summary={}, insights=insights, recommendations=["b"]  # type: ignore[arg-type]
        )

        insights.append("c")

        assert result.insights == ("a",)
        assert result.recommendations == ("b",)

    def test_negative_processing_time_raises(self) -> None:
        """processing_time_ms must be non-negative."""
        with pytest.raises(ValueError, match="non-negative"):
            AnalysisResult(summary={}, processing_time_ms=-1.0)

    def test_to_dict_uses_camel_case(self) -> None:
        """to_dict emits the wire form."""
        summary = {key: 0.0 for key in SUMMARY_KEYS}
        result = AnalysisResult(
            summary=summary,
            insights=("i",),
            recommendations=("r",),
            processing_time_ms=1.25,
        )

        assert result.to_dict() == {
            "summary": summary,
            "insights": ["i"],
            "recommendations": ["r"],
            "processingTimeMs": 1.25,
        }
