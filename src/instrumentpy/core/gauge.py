"""Gauge instruments: values that are set or moved up and down."""

import time
from collections.abc import Callable, Sequence

from instrumentpy.core.models import MetricSample
from instrumentpy.core.timeseries import TimeSeries, TimeSeriesRegistry

DEFAULT_UNIT = "1"


class GaugeInstrument:
    """A gauge whose series are selected by label values.

    Label values passed to ``get_or_create_time_series`` must follow the
    order of ``label_keys``; their count is not checked here.

    Example:
        ```python
        queue_depth = GaugeDouble("queue_depth", label_keys=["queue"])
        queue_depth.get_or_create_time_series(["emails"]).add(3)
        queue_depth.get_or_create_time_series(["emails"]).add(-1)
        ```

    Args:
        name: Instrument name (e.g., "queue_depth").
        label_keys: Ordered label keys the label values bind to.
        description: Human readable description.
        unit: Unit of the measured value (default: "1").
        value_type: float for double gauges, int for long gauges.
    """

    def __init__(
        self,
        name: str,
        label_keys: Sequence[str] = (),
        description: str = "",
        unit: str = DEFAULT_UNIT,
        value_type: Callable[[float], float] = float,
    ) -> None:
        self.name = name
        self.label_keys = tuple(label_keys)
        self.description = description
        self.unit = unit
        self._registry = TimeSeriesRegistry(value_type)

    def get_or_create_time_series(self, label_values: Sequence[str]) -> TimeSeries:
        """Return the series for label_values, creating it on first use."""
        return self._registry.get_or_create(label_values)

    def get_default_time_series(self) -> TimeSeries:
        """Return the series used for recordings without label values."""
        return self._registry.get_default()

    def collect(self) -> list[MetricSample]:
        """Read every series created so far.

        Returns:
            One MetricSample per series, all sharing one timestamp.
        """
        timestamp = time.time()
        return [
            MetricSample(
                name=self.name,
                timestamp=timestamp,
                value=series.value,
                labels=dict(zip(self.label_keys, label_values)),
            )
            for label_values, series in self._registry.items()
        ]


class GaugeDouble(GaugeInstrument):
    """Gauge recording floating point values."""

    def __init__(
        self,
        name: str,
        label_keys: Sequence[str] = (),
        description: str = "",
        unit: str = DEFAULT_UNIT,
    ) -> None:
        super().__init__(name, label_keys, description, unit, value_type=float)


class GaugeLong(GaugeInstrument):
    """Gauge recording integer values.

    Inputs are converted with int(), so fractions are truncated toward zero.
    NaN raises ValueError and infinities raise OverflowError; use GaugeDouble
    for measurements that can be non-finite.
    """

    def __init__(
        self,
        name: str,
        label_keys: Sequence[str] = (),
        description: str = "",
        unit: str = DEFAULT_UNIT,
    ) -> None:
        super().__init__(name, label_keys, description, unit, value_type=int)
