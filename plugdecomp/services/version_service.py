"""
Version Service - Minecraft versions known to Spigot

Scrapes the Spigot BuildTools version index. Every release has a
"<version>.json" link on that page; snapshots, pre-releases and named
builds are filtered out by VERSION_PATTERN.
"""
import logging
import re
from typing import List, Optional

import requests

from plugdecomp.config import VERSIONS_URL, VERSION_PATTERN, USER_AGENT, DOWNLOAD_TIMEOUT

logger = logging.getLogger(__name__)

HREF_PATTERN = re.compile(r"""<a\s[^>]*?href\s*=\s*["']([^"']*)["']""", re.IGNORECASE)


class VersionFetchError(Exception):
    """Raised when the version list cannot be retrieved"""
    pass


def is_valid(version: str) -> bool:
    """True if the string looks like a Minecraft release version (1.x or 1.x.y)"""
    return re.fullmatch(VERSION_PATTERN, version) is not None


def filter_versions(html: str) -> List[str]:
    """
    Extract release versions from the index page

    Args:
        html: Index page markup

    Returns:
        Versions in page order
    """
    versions = []
    for href in HREF_PATTERN.findall(html):
        if href.endswith(".json"):
            href = href[:-len(".json")]
        if is_valid(href):
            versions.append(href)
    return versions


def fetch_versions(url: str = VERSIONS_URL, session: Optional[requests.Session] = None) -> List[str]:
    """
    Download the index page and return the release versions on it

    Raises:
        VersionFetchError: On transport errors or non-2xx responses
    """
    http = session or requests.Session()
    try:
        response = http.get(url, headers={"User-Agent": USER_AGENT}, timeout=DOWNLOAD_TIMEOUT)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise VersionFetchError(f"Failed fetching versions from {url}: {e}") from e
    finally:
        if session is None:
            http.close()

    versions = filter_versions(response.text)
    logger.info(f"[Versions] Found {len(versions)} versions at {url}")
    return versions


__all__ = ["fetch_versions", "filter_versions", "is_valid", "VersionFetchError"]
