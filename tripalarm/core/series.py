# tripalarm/core/series.py
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .exceptions import InvalidChannelSeries


# band_states() codes
IN_BAND = 0
ABOVE_MAX = 1
BELOW_MIN = -1


@dataclass(frozen=True, slots=True)
class ChannelSeries:
    """Immutable raw readings of one channel: 1D time vector + 1D values vector."""

    name: str
    time: np.ndarray = field(repr=False)
    values: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidChannelSeries("ChannelSeries.name must be a string.")

        t = np.asarray(self.time, dtype=float)
        v = np.asarray(self.values, dtype=float)

        if t.ndim != 1:
            raise InvalidChannelSeries(f"`time` must be 1D, got shape {t.shape}")
        if v.ndim != 1:
            raise InvalidChannelSeries(f"`values` must be 1D, got shape {v.shape}")
        if t.size != v.size:
            raise InvalidChannelSeries(
                f"`time` and `values` must have same length, got {t.size} vs {v.size}"
            )

        if t.size > 0:
            if not np.isfinite(t).all():
                raise InvalidChannelSeries("`time` contains non-finite values (NaN/Inf).")
            if np.any(np.diff(t) < 0):
                raise InvalidChannelSeries("`time` must be monotonic non-decreasing.")

        object.__setattr__(self, "time", t)
        object.__setattr__(self, "values", v)

    @property
    def n(self) -> int:
        return int(self.time.size)

    @property
    def last_value(self) -> float:
        return 0.0 if self.n == 0 else float(self.values[-1])

    def band_states(self, min_value: float, max_value: float) -> np.ndarray:
        """
        Classify every reading against the [min, max] band.

        Readings equal to a threshold count as in alarm, and `max` is checked
        first, so with a degenerate band (min == max) nothing is in band.
        """
        return np.where(
            self.values >= max_value,
            ABOVE_MAX,
            np.where(self.values <= min_value, BELOW_MIN, IN_BAND),
        ).astype(np.int8)
