"""
Live acceptance scenarios against the real ad server.

Skipped unless API_KEY is set; API_URL optionally points at another environment.
"""

import os
from pathlib import Path

import pytest

from adserver_acceptance.config import SuiteConfig
from adserver_acceptance.runner import run_suite

SAMPLE_CONFIG = Path(__file__).resolve().parents[2] / "config" / "scenarios.sample.json"

pytestmark = [
    pytest.mark.live,
    pytest.mark.skipif(not os.getenv("API_KEY"), reason="API_KEY not set"),
]


@pytest.mark.parametrize("label", ["z1", "z2_desktop", "z2_mobile"])
def test_zone_distribution_converges(label) -> None:
    suite = SuiteConfig.from_file(SAMPLE_CONFIG)
    (result,) = run_suite(suite, [label])
    assert result.label == label
    assert result.requests >= suite.minimum_hits
