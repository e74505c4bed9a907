"""Sampling convergence tracking for creative distribution checks."""

from typing import Dict, Mapping

from adserver_acceptance.errors import InvalidConfiguration, UnknownCategory, ZeroTargetViolation
from adserver_acceptance.utils import get_logger

logger = get_logger("convergence")


class SampleConvergenceTracker:
    """
    Accumulates categorical outcomes and decides when they match a target distribution.

    The tracker is satisfied once at least `minimum_hits` observations were
    recorded and, for every target category (observed or not), the observed
    proportion is within `precision_threshold` of its target.
    """

    def __init__(
        self,
        minimum_hits: int,
        precision_threshold: float,
        target_probabilities: Mapping[str, float],
    ) -> None:
        if not target_probabilities:
            raise InvalidConfiguration("Target probabilities can't be empty")
        negative = sorted(name for name, target in target_probabilities.items() if target < 0)
        if negative:
            raise InvalidConfiguration(f"Target probabilities must be non-negative, got {negative}")
        if minimum_hits < 0:
            raise InvalidConfiguration("minimum_hits must be non-negative")
        if precision_threshold < 0:
            raise InvalidConfiguration("precision_threshold must be non-negative")

        self.minimum_hits = int(minimum_hits)
        self.precision_threshold = float(precision_threshold)
        self.target_probabilities: Dict[str, float] = dict(target_probabilities)
        self.hits = 0
        self._buckets: Dict[str, int] = {}

    @property
    def bucket_counts(self) -> Dict[str, int]:
        """Copy of the recorded counts, in first-seen order."""
        return dict(self._buckets)

    def count(self, label: str) -> int:
        return self._buckets.get(label, 0)

    def proportion(self, label: str) -> float:
        if self.hits == 0:
            return 0.0
        return self.count(label) / self.hits

    def record(self, label: str) -> None:
        """
        Record one observation.

        Raises:
            UnknownCategory: label is not a target category.
            ZeroTargetViolation: label is a target category expected never to occur.
        """
        if label not in self.target_probabilities:
            raise UnknownCategory(label, self.target_probabilities.keys())
        if self.target_probabilities[label] == 0:
            raise ZeroTargetViolation(label)

        self.hits += 1
        self._buckets[label] = self.count(label) + 1

    def deviations(self) -> Dict[str, float]:
        return {
            name: abs(self.proportion(name) - target)
            for name, target in self.target_probabilities.items()
        }

    def is_satisfied(self) -> bool:
        if self.hits < self.minimum_hits:
            return False
        for name, target in self.target_probabilities.items():
            if abs(self.proportion(name) - target) > self.precision_threshold:
                return False
        return True

    def describe(self) -> str:
        parts = [f"[{self.hits}/{self.minimum_hits} records"]
        for name, count in self._buckets.items():
            parts.append(
                f", `{name}` {count}/{round(self.proportion(name), 4)} "
                f"need {self.target_probabilities[name]}"
            )
        parts.append("]")
        return "".join(parts)

    def __str__(self) -> str:
        return self.describe()

    __repr__ = __str__
