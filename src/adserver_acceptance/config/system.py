"""Locating the suite configuration file."""

import os
from pathlib import Path
from typing import Optional, Tuple

from adserver_acceptance.errors import InvalidConfiguration

from .models import SuiteConfig

SUITE_CONFIG_FILENAME = "scenarios.json"
SUITE_CONFIG_ENV_VAR = "ADSERVER_ACCEPTANCE_CONFIG"


def resolve_suite_config_path(path: Optional[Path] = None) -> Path:
    """
    Resolve the suite config path.

    An explicit path wins, then the ADSERVER_ACCEPTANCE_CONFIG environment
    variable, then config/scenarios.json under the working directory.
    Relative paths are resolved against the working directory.
    """
    if path is not None:
        candidate = Path(path)
    else:
        env_value = os.getenv(SUITE_CONFIG_ENV_VAR)
        candidate = Path(env_value) if env_value else Path("config") / SUITE_CONFIG_FILENAME
    if not candidate.is_absolute():
        candidate = Path.cwd() / candidate
    return candidate.resolve()


def load_suite_config(path: Optional[Path] = None) -> Tuple[SuiteConfig, Path]:
    """
    Load the suite configuration.

    Returns:
        (suite_config, resolved_path)

    Raises:
        InvalidConfiguration: if the file is missing or malformed.
    """
    resolved = resolve_suite_config_path(path)
    if not resolved.exists():
        raise InvalidConfiguration(f"Suite config not found at {resolved}")
    return SuiteConfig.from_file(resolved), resolved
