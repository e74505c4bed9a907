from .models import (
    API_KEY_ENV_VAR,
    API_URL_ENV_VAR,
    DEFAULT_MINIMUM_HITS,
    DEFAULT_PRECISION_THRESHOLD,
    DEFAULT_REQUESTS_LIMIT,
    ApiConfig,
    ScenarioConfig,
    SuiteConfig,
)
from .system import SUITE_CONFIG_ENV_VAR, load_suite_config, resolve_suite_config_path

__all__ = [
    "API_KEY_ENV_VAR",
    "API_URL_ENV_VAR",
    "DEFAULT_MINIMUM_HITS",
    "DEFAULT_PRECISION_THRESHOLD",
    "DEFAULT_REQUESTS_LIMIT",
    "ApiConfig",
    "ScenarioConfig",
    "SuiteConfig",
    "SUITE_CONFIG_ENV_VAR",
    "load_suite_config",
    "resolve_suite_config_path",
]
