"""URL checks shared by the price sources and the custom URL settings."""
from __future__ import annotations

from urllib.parse import urlsplit

from .errors import PriceErrorKind, PriceSourceError

ALLOWED_SCHEMES = ("http", "https")


def check_http_url(url: str) -> None:
    """Raise ``invalid_url`` unless *url* is an absolute http(s) URL with a host."""
    if not url or any(ch.isspace() for ch in url):
        raise PriceSourceError(PriceErrorKind.INVALID_URL, repr(url))
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise PriceSourceError(PriceErrorKind.INVALID_URL, repr(url)) from exc
    if parts.scheme.lower() not in ALLOWED_SCHEMES or not parts.netloc:
        raise PriceSourceError(PriceErrorKind.INVALID_URL, repr(url))


def validate_custom_url(text: str) -> str:
    """Normalise user input into a custom price URL.

    Surrounding whitespace is dropped; anything that is not an absolute
    ``http``/``https`` URL is rejected with ``invalid_url``.
    """
    url = text.strip()
    check_http_url(url)
    return url
