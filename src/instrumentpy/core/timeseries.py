"""Label-keyed time series storage for gauge instruments.

A registry maps each distinct sequence of label values to exactly one
TimeSeries. Lookups of existing series do not take the registry lock;
creation is a double-checked insert under it, so concurrent first access to
the same labels still constructs a single series.
"""

import logging
import numbers
import threading
from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)

LabelValues = tuple[str, ...]


class TimeSeries:
    """Mutable value of one gauge series.

    ``add`` and ``set`` are atomic with respect to each other on the same
    series. Values and deltas may be negative.

    Args:
        value_type: Coercion applied to every stored value (float or int).

    Raises:
        TypeError: From add() or set() when given something other than a
            real number (strings are not parsed).
        ValueError: From add() or set() when value_type is int and the
            input is NaN; OverflowError for infinities.
    """

    def __init__(self, value_type: Callable[[float], float] = float) -> None:
        self._value_type = value_type
        self._value = value_type(0)
        self._lock = threading.Lock()

    def _coerce(self, value: float) -> float:
        if not isinstance(value, numbers.Real):
            raise TypeError(
                f"Gauge values must be real numbers, got {type(value).__name__}"
            )
        return self._value_type(value)

    def add(self, amount: float) -> None:
        """Add amount to the current value."""
        delta = self._coerce(amount)
        with self._lock:
            self._value += delta

    def set(self, value: float) -> None:
        """Replace the current value."""
        new_value = self._coerce(value)
        with self._lock:
            self._value = new_value

    @property
    def value(self) -> float:
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"TimeSeries(value={self._value!r})"


class TimeSeriesRegistry:
    """Owns the TimeSeries of one instrument, keyed by label values.

    Args:
        value_type: Value coercion handed to every series this registry creates.
    """

    def __init__(self, value_type: Callable[[float], float] = float) -> None:
        self._value_type = value_type
        self._series: dict[LabelValues, TimeSeries] = {}
        self._lock = threading.Lock()

    def get_or_create(self, label_values: Sequence[str]) -> TimeSeries:
        """Return the series bound to label_values, creating it on first use.

        Args:
            label_values: Label values in the instrument's label key order.

        Returns:
            The same TimeSeries instance for every equal label sequence.
        """
        key = tuple(label_values)
        series = self._series.get(key)
        if series is not None:
            return series
        with self._lock:
            series = self._series.get(key)
            if series is None:
                series = TimeSeries(self._value_type)
                self._series[key] = series
                logger.debug("Created time series for labels %s", key)
        return series

    def get_default(self) -> TimeSeries:
        """Return the series for recordings without label values."""
        return self.get_or_create(())

    def items(self) -> list[tuple[LabelValues, TimeSeries]]:
        """Snapshot of (label values, series) pairs created so far."""
        with self._lock:
            return list(self._series.items())

    def __len__(self) -> int:
        return len(self._series)
