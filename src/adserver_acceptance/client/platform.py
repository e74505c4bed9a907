"""Request header overlays for the platform a creative request impersonates."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from adserver_acceptance.errors import InvalidConfiguration

USER_AGENT_HEADER = "User-Agent"

DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/42.0.2311.135 Safari/537.36 Edge/12.246"
)
MOBILE_USER_AGENT = "Mozilla/5.0 (Android 9; Mobile; rv:65.0) Gecko/65.0 Firefox/65.0"


class Platform(str, Enum):
    NONE = "none"
    DESKTOP = "desktop"
    MOBILE = "mobile"

    @classmethod
    def parse(cls, value: Optional[Union[str, "Platform"]]) -> "Platform":
        """Accept None/blank as NONE; raise InvalidConfiguration for anything unrecognized."""
        if isinstance(value, Platform):
            return value
        if value is None:
            return cls.NONE
        normalized = str(value).strip().lower()
        if not normalized:
            return cls.NONE
        try:
            return cls(normalized)
        except ValueError as exc:
            raise InvalidConfiguration(
                f"Platform could be desktop or mobile, got {value!r}"
            ) from exc


_OVERLAYS: Dict[Platform, Mapping[str, str]] = {
    Platform.NONE: MappingProxyType({}),
    Platform.DESKTOP: MappingProxyType({USER_AGENT_HEADER: DESKTOP_USER_AGENT}),
    Platform.MOBILE: MappingProxyType({USER_AGENT_HEADER: MOBILE_USER_AGENT}),
}


def platform_headers(platform: Optional[Union[str, Platform]]) -> Mapping[str, str]:
    return _OVERLAYS[Platform.parse(platform)]


def merge_headers(
    base: Optional[Mapping[str, str]], platform: Optional[Union[str, Platform]]
) -> Dict[str, str]:
    """
    Build request headers for a platform on top of `base`.

    Any User-Agent in `base` is dropped so the platform alone decides it;
    `base` itself is left untouched.
    """
    overlay = platform_headers(platform)
    headers = {
        key: value
        for key, value in (base or {}).items()
        if key.lower() != USER_AGENT_HEADER.lower()
    }
    headers.update(overlay)
    return headers
