"""HTML fetching and URL validation utilities."""

import ipaddress
import logging
from urllib.parse import urlparse

import httpx

from baking_assistant.app.core.config import get_settings
from baking_assistant.app.services.url_parsing.errors import FetchError

logger = logging.getLogger(__name__)


def is_private_host(host: str) -> bool:
    """Check if a host (optionally with a port, or a bare IPv6 address) is private/localhost."""
    candidates = [host.strip("[]")]
    if host.startswith("["):
        candidates.append(host[1:].split("]")[0])
    elif host.count(":") == 1:
        candidates.append(host.split(":")[0])
    for candidate in candidates:
        try:
            ip = ipaddress.ip_address(candidate)
            return ip.is_private or ip.is_loopback
        except ValueError:
            continue
    hostname = candidates[-1].lower()
    if hostname.endswith("."):
        hostname = hostname[:-1]
    return hostname in {"localhost"}


def validate_url(url: str) -> None:
    parsed_url = urlparse(url)
    if parsed_url.scheme not in {"http", "https"} or not parsed_url.netloc:
        raise FetchError(f"Invalid URL: {url}")
    if is_private_host(parsed_url.hostname or ""):
        raise FetchError("URL points to a private or disallowed host")


async def fetch_html(url: str) -> str:
    """Fetch a page's HTML. Transport errors and non-2xx responses raise FetchError; no retries."""
    validate_url(url)

    settings = get_settings()
    headers = {
        "User-Agent": settings.scraper_user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }
    timeout = httpx.Timeout(
        settings.fetch_timeout_seconds, connect=settings.fetch_connect_timeout_seconds
    )

    try:
        async with httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, headers=headers
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning("Fetching %s returned status %s", url, exc.response.status_code)
        raise FetchError(f"Site returned status {exc.response.status_code}.") from exc
    except httpx.TimeoutException as exc:
        logger.warning("Timed out fetching %s: %s", url, exc)
        raise FetchError("Timed out fetching the page.") from exc
    except httpx.HTTPError as exc:
        logger.warning("Network error fetching %s: %s", url, exc)
        raise FetchError(f"Network error: {exc}") from exc

    try:
        text = response.text
    except (UnicodeDecodeError, LookupError) as exc:
        raise FetchError(f"HTML content encoding error: {exc}") from exc
    logger.info("Fetched %s (%d chars)", url, len(text))
    return text
