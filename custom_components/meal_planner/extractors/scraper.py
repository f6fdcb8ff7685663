"""
Web scraper utilities for fetching recipe pages.

This module handles validating recipe URLs and downloading their markup.
Fetching is attempted once; failures are reported to the caller as
MarkupUnavailable without retrying.
"""
from __future__ import annotations

import ipaddress
import logging
from urllib.parse import urlparse

import cloudscraper
import requests

from ..const import DEFAULT_MAX_REDIRECTS, DEFAULT_MAX_RESPONSE_SIZE, DEFAULT_TIMEOUT
from ..exceptions import MarkupUnavailable

_LOGGER = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = ('text/html', 'application/xhtml', 'application/xml')


def validate_url(url: str) -> None:
    """Validate URL scheme and reject literal internal IP addresses.

    Args:
        url: The URL to validate

    Raises:
        ValueError: If the URL is empty, not HTTP(S), or targets an internal
            network address
    """
    if not url or not url.strip():
        raise ValueError("URL cannot be empty")

    parsed = urlparse(url.strip())
    if parsed.scheme not in ('http', 'https'):
        raise ValueError("Only HTTP/HTTPS protocols allowed")
    if not parsed.hostname:
        raise ValueError("URL has no host")

    try:
        ip = ipaddress.ip_address(parsed.hostname)
    except ValueError:
        return  # Hostname is not an IP

    if ip.is_private or ip.is_loopback or ip.is_link_local:
        raise ValueError("Cannot access internal IP addresses")


def _download(session: requests.Session, url: str, timeout: float) -> bytes:
    """Download a page, enforcing content type and size limits.

    Raises:
        requests.exceptions.RequestException: If the request fails
        ValueError: If the response is too large or not HTML
    """
    # Use stream=True to check headers before downloading
    response = session.get(
        url,
        timeout=timeout,
        allow_redirects=True,
        stream=True
    )
    response.raise_for_status()

    content_type = response.headers.get('content-type', '').lower()
    if not any(allowed in content_type for allowed in ALLOWED_CONTENT_TYPES):
        raise ValueError(
            f"Invalid content type: {content_type}. Only HTML/XHTML content is allowed.")

    content_length = response.headers.get('content-length')
    if content_length and int(content_length) > DEFAULT_MAX_RESPONSE_SIZE:
        raise ValueError(
            f"Response size ({content_length} bytes) exceeds maximum allowed size ({DEFAULT_MAX_RESPONSE_SIZE} bytes)")

    content = b''
    for chunk in response.iter_content(chunk_size=8192):
        content += chunk
        if len(content) > DEFAULT_MAX_RESPONSE_SIZE:
            raise ValueError(
                f"Response size exceeds maximum allowed size ({DEFAULT_MAX_RESPONSE_SIZE} bytes)")

    return content


def fetch_recipe_html(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """Fetch the raw markup of a recipe page.

    Args:
        url: The URL of the recipe website
        timeout: Request timeout in seconds

    Returns:
        The page body as bytes

    Raises:
        ValueError: If the URL is invalid
        MarkupUnavailable: If the page could not be fetched
    """
    validate_url(url)
    _LOGGER.info("Fetching recipe from %s", url)

    # Use cloudscraper for better anti-bot protection
    session = cloudscraper.create_scraper(
        browser={
            'browser': 'chrome',
            'platform': 'windows',
            'desktop': True
        }
    )
    session.max_redirects = DEFAULT_MAX_REDIRECTS

    try:
        html = _download(session, url, timeout)
    except (requests.exceptions.RequestException, ValueError) as e:
        _LOGGER.error("Failed to fetch %s: %s", url, str(e))
        raise MarkupUnavailable(url, str(e)) from e

    _LOGGER.debug("Successfully fetched %d bytes from %s", len(html), url)
    return html
