"""Summary statistics over one metric across a batch of files."""

from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np


@dataclass(frozen=True)
class MetricSummary:
    """Distribution of a metric over a batch."""

    count: int
    minimum: float
    maximum: float
    mean: float
    median: float
    p90: float


class BatchStatistics:
    """Descriptive statistics for ranked metric values."""

    @staticmethod
    def summarize(values: Union[List[float], np.ndarray]) -> Optional[MetricSummary]:
        """
        Summarize metric values.

        Args:
            values: Metric values, one per successfully analyzed file

        Returns:
            MetricSummary, or None for an empty batch
        """
        arr = np.asarray(values, dtype=float)
        if arr.size == 0:
            return None

        return MetricSummary(
            count=int(arr.size),
            minimum=float(np.min(arr)),
            maximum=float(np.max(arr)),
            mean=float(np.mean(arr)),
            median=float(np.median(arr)),
            p90=float(np.percentile(arr, 90)),
        )

    @staticmethod
    def outliers(values: Union[List[float], np.ndarray], multiplier: float = 1.5) -> List[bool]:
        """
        Flag values above Q3 + k*IQR.

        Only the upper fence matters here: unusually complex files.

        Args:
            values: Metric values
            multiplier: IQR multiplier (default 1.5)

        Returns:
            List of booleans, one per value
        """
        arr = np.asarray(values, dtype=float)
        if arr.size < 4:
            return [False] * int(arr.size)

        q1 = float(np.percentile(arr, 25))
        q3 = float(np.percentile(arr, 75))
        upper_bound = q3 + multiplier * (q3 - q1)
        return [bool(x > upper_bound) for x in arr]
