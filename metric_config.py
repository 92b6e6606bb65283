from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from metric_scaler import AUTO_SCALE_THRESHOLD


@dataclass(frozen=True)
class MetricConfig:
    base_unit: str = ""
    threshold: float = AUTO_SCALE_THRESHOLD
    log_level: str = "WARNING"

    def __post_init__(self):
        if not self.threshold > 0:
            raise ValueError(f"Auto-scale threshold must be positive, got {self.threshold!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> MetricConfig:
        if environ is None:
            environ = os.environ
        threshold = environ.get("METRIC_AUTO_SCALE_THRESHOLD")
        try:
            threshold_value = float(threshold) if threshold else AUTO_SCALE_THRESHOLD
        except ValueError:
            raise ValueError(f"METRIC_AUTO_SCALE_THRESHOLD is not a number: {threshold!r}") from None
        return cls(
            base_unit=environ.get("METRIC_BASE_UNIT", ""),
            threshold=threshold_value,
            log_level=environ.get("METRIC_LOG_LEVEL", "WARNING").upper(),
        )

    def with_overrides(self, **overrides) -> MetricConfig:
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
