"""BDD step definitions for record analysis features."""

from concurrent.futures import Future
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from recordlens.adapters.scheduling import InlineScheduler
from recordlens.core.analyzer import Analyzer
from recordlens.core.errors import ProcessingError
from recordlens.core.models import AnalysisResult, Record

SCENARIO_NOW = 1_702_300_000.0


@dataclass
class AnalysisScenarioContext:
    """Shared state between the steps of one scenario."""

    analyzer: Analyzer | None = None
    records: list[Record] = field(default_factory=list)
    result: AnalysisResult | None = None
    error: BaseException | None = None

    def add(self, value: float, age_hours: float = 0.0, **metadata: object) -> None:
        self.records.append(
            Record(
                id=f"rec-{len(self.records) + 1}",
                timestamp=SCENARIO_NOW - age_hours * 3600,
                value=value,
                metadata=metadata,  # type: ignore[arg-type]
            )
        )


@pytest.fixture
def ctx() -> AnalysisScenarioContext:
    """Fresh scenario context for each test."""
    return AnalysisScenarioContext()


# === Background Steps ===
@given("an analyzer with a synchronous scheduler")
def step_inline_analyzer(ctx: AnalysisScenarioContext) -> None:
    ctx.analyzer = Analyzer(InlineScheduler(), clock=lambda: SCENARIO_NOW)


# === Record Steps ===
@given(parsers.parse("records with values {values}"))
def step_records_with_values(ctx: AnalysisScenarioContext, values: str) -> None:
    for raw in values.split(","):
        ctx.add(float(raw))


@given(parsers.parse('a record with value {value} in category "{category}"'))
def step_record_in_category(
    ctx: AnalysisScenarioContext, value: str, category: str
) -> None:
    ctx.add(float(value), category=category)


@given(parsers.parse("{count:d} records stamped {hours:d} hours ago"))
def step_records_stamped(ctx: AnalysisScenarioContext, count: int, hours: int) -> None:
    for _ in range(count):
        ctx.add(100.0, age_hours=hours)


@given("a record with a list as its category")
def step_record_with_list_category(ctx: AnalysisScenarioContext) -> None:
    ctx.add(1.0, category=["A", "B"])


# === Action Steps ===
@when("the snapshot is analyzed")
def step_analyze(ctx: AnalysisScenarioContext) -> None:
    assert ctx.analyzer is not None
    future: Future[AnalysisResult] = ctx.analyzer.process(tuple(ctx.records))
    ctx.error = future.exception()
    if ctx.error is None:
        ctx.result = future.result()


# === Outcome Steps ===
@then(parsers.parse('the summary "{key}" is {expected}'))
def step_summary_value(ctx: AnalysisScenarioContext, key: str, expected: str) -> None:
    assert ctx.result is not None
    assert ctx.result.summary[key] == float(expected)


@then(parsers.parse('the insights include "{text}"'))
def step_insight_included(ctx: AnalysisScenarioContext, text: str) -> None:
    assert ctx.result is not None
    assert text in ctx.result.insights


@then("there are no insights")
def step_no_insights(ctx: AnalysisScenarioContext) -> None:
    assert ctx.result is not None
    assert ctx.result.insights == ()


@then(parsers.parse('the recommendations include "{text}"'))
def step_recommendation_included(ctx: AnalysisScenarioContext, text: str) -> None:
    assert ctx.result is not None
    assert text in ctx.result.recommendations


@then(parsers.parse('the only recommendation is "{text}"'))
def step_only_recommendation(ctx: AnalysisScenarioContext, text: str) -> None:
    assert ctx.result is not None
    assert ctx.result.recommendations == (text,)


@then("the analysis fails with a processing error")
def step_processing_error(ctx: AnalysisScenarioContext) -> None:
    assert isinstance(ctx.error, ProcessingError)
    assert isinstance(ctx.error.cause, TypeError)


@then("no result is produced")
def step_no_result(ctx: AnalysisScenarioContext) -> None:
    assert ctx.result is None
