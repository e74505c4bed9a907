from .api import API_KEY_HEADER, DEFAULT_API_URL, AdServerApi
from .creative import CreativeFetcher, extract_banner_id
from .platform import Platform, merge_headers, platform_headers

__all__ = [
    "API_KEY_HEADER",
    "DEFAULT_API_URL",
    "AdServerApi",
    "CreativeFetcher",
    "extract_banner_id",
    "Platform",
    "merge_headers",
    "platform_headers",
]
