"""
Driving loop for acceptance scenarios.

Each scenario resolves its zone's creative URL, then keeps requesting
creatives and recording their banner ids until the observed distribution
matches the targets or the request ceiling is exceeded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional

import httpx

from adserver_acceptance.client import AdServerApi, CreativeFetcher, merge_headers
from adserver_acceptance.config import ScenarioConfig, SuiteConfig
from adserver_acceptance.convergence import SampleConvergenceTracker
from adserver_acceptance.errors import ConvergenceTimeout
from adserver_acceptance.utils import get_logger

logger = get_logger("runner")

FetcherFactory = Callable[[Mapping[str, str]], CreativeFetcher]


@dataclass
class ScenarioResult:
    """A converged scenario. Failures raise instead of producing a result."""

    label: str
    requests: int
    snapshot: str


def _default_fetcher_factory(timeout: float, transport: Optional[httpx.BaseTransport]) -> FetcherFactory:
    def factory(headers: Mapping[str, str]) -> CreativeFetcher:
        return CreativeFetcher(headers=headers, timeout=timeout, transport=transport)

    return factory


def run_scenario(
    scenario: ScenarioConfig,
    suite: SuiteConfig,
    api: AdServerApi,
    fetcher_factory: Optional[FetcherFactory] = None,
) -> ScenarioResult:
    """
    Run one scenario to convergence.

    The tracker is built before any request is made, so bad targets fail
    without touching the network.

    Raises:
        ConvergenceTimeout: more than `suite.requests_limit` hits were recorded
            without satisfying the targets.
        UnknownCategory / ZeroTargetViolation: the server returned a banner the
            scenario does not allow.
        AdServerError: the API or creative URL could not be fetched.
    """
    factory = fetcher_factory or _default_fetcher_factory(suite.api.timeout, None)
    headers = merge_headers({}, scenario.platform)
    tracker = SampleConvergenceTracker(
        suite.minimum_hits, suite.precision_threshold, scenario.targets
    )
    vast_url = api.zone_link(scenario.publisher, scenario.zone)
    logger.info(
        f"Scenario {scenario.label}: zone {scenario.publisher}/{scenario.zone} "
        f"platform={scenario.platform.value} url={vast_url}"
    )

    requests = 0
    with factory(headers) as fetcher:
        while not tracker.is_satisfied():
            if tracker.hits > suite.requests_limit:
                logger.error(f"Scenario {scenario.label} did not converge: {tracker.describe()}")
                raise ConvergenceTimeout(suite.requests_limit, tracker.describe())

            banner_id = fetcher.fetch_banner_id(vast_url)
            requests += 1
            tracker.record(banner_id)

            logger.info(f"{scenario.label} {tracker.describe()}")
            logger.debug(f"{scenario.label} deviations: {tracker.deviations()}")

    logger.info(f"Scenario {scenario.label} converged after {requests} requests")
    return ScenarioResult(
        label=scenario.label,
        requests=requests,
        snapshot=tracker.describe(),
    )


def run_suite(
    suite: SuiteConfig,
    scenario_labels: Optional[List[str]] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> List[ScenarioResult]:
    """Run the selected scenarios in order, stopping at the first failure."""
    scenarios = suite.select(scenario_labels)
    suite.api.require_credentials()
    factory = _default_fetcher_factory(suite.api.timeout, transport)
    results: List[ScenarioResult] = []
    with AdServerApi.from_config(suite.api, transport=transport) as api:
        for scenario in scenarios:
            results.append(run_scenario(scenario, suite, api, factory))
    return results
