"""BDD step definitions for gauge recording features."""

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from instrumentpy.core.gauge import GaugeDouble, GaugeInstrument
from instrumentpy.core.timeseries import TimeSeries


@dataclass
class GaugeScenarioContext:
    """State shared between the steps of one scenario."""

    gauge: GaugeInstrument | None = None
    observed: list[TimeSeries] = field(default_factory=list)

    def series(self, label: str) -> TimeSeries:
        assert self.gauge is not None, "Background did not create a gauge"
        return self.gauge.get_or_create_time_series([label])


@pytest.fixture
def ctx() -> GaugeScenarioContext:
    """Fresh scenario context for each test."""
    return GaugeScenarioContext()


@given(parsers.parse('a double gauge "{name}" with label keys "{keys}"'))
def given_double_gauge(ctx: GaugeScenarioContext, name: str, keys: str) -> None:
    """Create the gauge under test."""
    ctx.gauge = GaugeDouble(name, keys.split(","))


@when(parsers.parse('{amount:g} is added to the series for "{label}"'))
def when_added(ctx: GaugeScenarioContext, amount: float, label: str) -> None:
    """Add a delta to one series."""
    ctx.series(label).add(amount)


@when(parsers.parse('the series for "{label}" is set to {value:g}'))
def when_set(ctx: GaugeScenarioContext, label: str, value: float) -> None:
    """Overwrite one series."""
    ctx.series(label).set(value)


@when(parsers.parse('{n:d} threads look up the series for "{label}" at once'))
def when_threads_race(ctx: GaugeScenarioContext, n: int, label: str) -> None:
    """Race n threads on the first lookup of a label."""
    barrier = threading.Barrier(n)

    def lookup(_: int) -> TimeSeries:
        barrier.wait()
        return ctx.series(label)

    with ThreadPoolExecutor(max_workers=n) as pool:
        ctx.observed = list(pool.map(lookup, range(n)))


@then(parsers.parse('the series for "{label}" reads {value:g}'))
def then_reads(ctx: GaugeScenarioContext, label: str, value: float) -> None:
    """Assert the current value of one series."""
    assert ctx.series(label).value == value


@then(parsers.parse("collecting the gauge yields {n:d} samples"))
def then_collect_count(ctx: GaugeScenarioContext, n: int) -> None:
    """Assert how many series the gauge reports."""
    assert ctx.gauge is not None
    assert len(ctx.gauge.collect()) == n


@then("every thread received the same series")
def then_same_series(ctx: GaugeScenarioContext) -> None:
    """Assert all racing threads observed one instance."""
    assert ctx.observed
    assert all(series is ctx.observed[0] for series in ctx.observed)
