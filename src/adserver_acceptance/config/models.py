import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from adserver_acceptance.client.api import DEFAULT_API_URL
from adserver_acceptance.client.platform import Platform
from adserver_acceptance.errors import InvalidConfiguration

API_URL_ENV_VAR = "API_URL"
API_KEY_ENV_VAR = "API_KEY"

DEFAULT_PRECISION_THRESHOLD = 0.02
DEFAULT_MINIMUM_HITS = 20
DEFAULT_REQUESTS_LIMIT = 5000


@dataclass
class ApiConfig:
    api_url: str = DEFAULT_API_URL
    api_key: str = ""
    timeout: float = 10.0

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ApiConfig":
        """Build from a mapping; API_URL and API_KEY environment variables take precedence."""
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise InvalidConfiguration(f"API config must be a mapping, got {data!r}")
        api_url = os.getenv(API_URL_ENV_VAR) or data.get("api_url") or DEFAULT_API_URL
        api_key = os.getenv(API_KEY_ENV_VAR) or data.get("api_key") or ""
        try:
            timeout = float(data.get("timeout", 10.0))
        except (TypeError, ValueError) as exc:
            raise InvalidConfiguration(f"API timeout must be a number, got {data.get('timeout')!r}") from exc
        if timeout <= 0:
            raise InvalidConfiguration("API timeout must be positive")
        return cls(api_url=str(api_url), api_key=str(api_key), timeout=timeout)

    def require_credentials(self) -> None:
        if not self.api_url.strip():
            raise InvalidConfiguration("API URL can't be empty")
        if not self.api_key.strip():
            raise InvalidConfiguration(f"API key can't be empty; set {API_KEY_ENV_VAR}")


@dataclass
class ScenarioConfig:
    label: str
    publisher: str
    zone: str
    targets: Dict[str, float]
    platform: Platform = Platform.NONE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScenarioConfig":
        if not isinstance(data, Mapping):
            raise InvalidConfiguration(f"Scenario must be a mapping, got {data!r}")
        try:
            label = str(data["label"]).strip()
            publisher = str(data["publisher"]).strip()
            zone = str(data["zone"]).strip()
            raw_targets = data["targets"]
        except KeyError as exc:
            raise InvalidConfiguration(f"Scenario missing required field {exc}") from exc
        for key, value in (("label", label), ("publisher", publisher), ("zone", zone)):
            if not value:
                raise InvalidConfiguration(f"Scenario field '{key}' cannot be empty")
        if not isinstance(raw_targets, Mapping) or not raw_targets:
            raise InvalidConfiguration(f"Scenario '{label}' must define at least one target")
        targets: Dict[str, float] = {}
        for name, value in raw_targets.items():
            try:
                probability = float(value)
            except (TypeError, ValueError) as exc:
                raise InvalidConfiguration(
                    f"Scenario '{label}' target '{name}' is not a number: {value!r}"
                ) from exc
            if probability < 0:
                raise InvalidConfiguration(f"Scenario '{label}' target '{name}' must be non-negative")
            targets[str(name)] = probability
        return cls(
            label=label,
            publisher=publisher,
            zone=zone,
            targets=targets,
            platform=Platform.parse(data.get("platform")),
        )


@dataclass
class SuiteConfig:
    scenarios: List[ScenarioConfig] = field(default_factory=list)
    api: ApiConfig = field(default_factory=ApiConfig)
    precision_threshold: float = DEFAULT_PRECISION_THRESHOLD
    minimum_hits: int = DEFAULT_MINIMUM_HITS
    requests_limit: int = DEFAULT_REQUESTS_LIMIT

    @classmethod
    def from_file(cls, path: Path) -> "SuiteConfig":
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidConfiguration(f"Cannot read suite config at {path}: {exc}") from exc
        try:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(text)
            else:
                data = json.loads(text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise InvalidConfiguration(f"Invalid suite config at {path}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise InvalidConfiguration(f"Suite config at {path} must be a mapping")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SuiteConfig":
        try:
            precision_threshold = float(data.get("precision_threshold", DEFAULT_PRECISION_THRESHOLD))
            minimum_hits = int(data.get("minimum_hits", DEFAULT_MINIMUM_HITS))
            requests_limit = int(data.get("requests_limit", DEFAULT_REQUESTS_LIMIT))
        except (TypeError, ValueError) as exc:
            raise InvalidConfiguration(f"Invalid suite thresholds: {exc}") from exc
        if precision_threshold < 0:
            raise InvalidConfiguration("precision_threshold must be non-negative")
        if minimum_hits < 0:
            raise InvalidConfiguration("minimum_hits must be non-negative")
        if requests_limit <= 0:
            raise InvalidConfiguration("requests_limit must be positive")
        raw_scenarios = data.get("scenarios") or []
        if not isinstance(raw_scenarios, list):
            raise InvalidConfiguration("Suite scenarios must be a list")
        scenarios = [ScenarioConfig.from_dict(item) for item in raw_scenarios]
        labels = [scenario.label for scenario in scenarios]
        if len(set(labels)) != len(labels):
            raise InvalidConfiguration("Scenario labels must be unique")
        return cls(
            scenarios=scenarios,
            api=ApiConfig.from_mapping(data.get("api")),
            precision_threshold=precision_threshold,
            minimum_hits=minimum_hits,
            requests_limit=requests_limit,
        )

    def select(self, labels: Optional[List[str]] = None) -> List[ScenarioConfig]:
        """Return the scenarios named by `labels` in the requested order, or all of them."""
        if not labels:
            return list(self.scenarios)
        by_label = {scenario.label: scenario for scenario in self.scenarios}
        missing = [label for label in labels if label not in by_label]
        if missing:
            raise InvalidConfiguration(
                f"Unknown scenario(s) {missing}; configured: {sorted(by_label)}"
            )
        return [by_label[label] for label in labels]
