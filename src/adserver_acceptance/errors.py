"""Error taxonomy for acceptance runs. Every error is fatal to its scenario."""

from __future__ import annotations

from typing import Iterable, List


class AcceptanceError(Exception):
    """Base class for all acceptance failures."""


class InvalidConfiguration(AcceptanceError, ValueError):
    """Missing, blank or malformed configuration."""


class UnknownCategory(AcceptanceError, ValueError):
    """A label outside the configured target set was observed."""

    def __init__(self, label: str, expected: Iterable[str]) -> None:
        self.label = label
        self.expected: List[str] = list(expected)
        super().__init__(f"Unexpected bucket name, `{label}`. Want one of {self.expected}")


class ZeroTargetViolation(AcceptanceError, RuntimeError):
    """A label configured with probability 0 was observed."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"bucket `{label}` got a hit, none expected")


class ConvergenceTimeout(AcceptanceError, RuntimeError):
    """The request ceiling was reached before the targets were satisfied."""

    def __init__(self, requests_limit: int, snapshot: str) -> None:
        self.requests_limit = requests_limit
        self.snapshot = snapshot
        super().__init__(f"Targets are not satisfied in {requests_limit} hits. {snapshot}")


class AdServerError(AcceptanceError, RuntimeError):
    """Transport or protocol failure while talking to the ad server."""
