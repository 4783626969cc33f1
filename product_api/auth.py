from typing import Mapping, Optional

from .errors import AppError

API_KEY_HEADER = "x-api-key"
API_KEY_FALLBACK_HEADER = "api-key"


def read_api_key(headers: Mapping[str, str]) -> Optional[str]:
    """Credential from x-api-key, or api-key when the first is missing or empty."""
    return headers.get(API_KEY_HEADER) or headers.get(API_KEY_FALLBACK_HEADER) or None


def authenticate(header_value: Optional[str], configured_secret: str) -> Optional[AppError]:
    if not header_value or header_value != configured_secret:
        return AppError.auth("Missing or invalid API key")
    return None
