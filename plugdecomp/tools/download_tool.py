"""
Download Tool - Streams an HTTP resource to a file

The response body is written chunk by chunk in arrival order, so large
artifacts never need to fit in memory.
"""
import logging
from pathlib import Path
from typing import Optional

import requests

from plugdecomp.config import DOWNLOAD_CHUNK_SIZE, DOWNLOAD_TIMEOUT

logger = logging.getLogger(__name__)


class DownloadError(Exception):
    """Raised when a download cannot be completed"""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def download_url(
    url: str,
    path: Path,
    chunk_size: int = DOWNLOAD_CHUNK_SIZE,
    timeout: float = DOWNLOAD_TIMEOUT,
    session: Optional[requests.Session] = None
) -> Path:
    """
    Download a URL to a file

    The destination is created (or truncated) before the first chunk is
    written, so it may be left empty or partial when the transfer fails.

    Args:
        url: Resource to fetch
        path: Destination file
        chunk_size: Bytes per read from the response stream
        timeout: Connect/read timeout in seconds
        session: Optional requests session (a fresh one is used otherwise)

    Returns:
        The destination path

    Raises:
        DownloadError: On transport errors, non-2xx responses, or write errors
    """
    path = Path(path)
    http = session or requests.Session()

    logger.info(f"[Download] GET {url}")
    try:
        with http.get(url, stream=True, timeout=timeout) as response:
            try:
                response.raise_for_status()
            except requests.exceptions.HTTPError as e:
                raise DownloadError(
                    f"Download of {url} failed with HTTP {response.status_code}",
                    url=url,
                    status_code=response.status_code
                ) from e

            written = 0
            with open(path, "wb") as f:
                for chunk in response.iter_content(chunk_size=chunk_size):
                    if chunk:
                        f.write(chunk)
                        written += len(chunk)

    except requests.exceptions.RequestException as e:
        raise DownloadError(f"Download of {url} failed: {e}", url=url) from e
    except OSError as e:
        raise DownloadError(f"Could not write {path}: {e}", url=url) from e
    finally:
        if session is None:
            http.close()

    logger.info(f"[Download] Wrote {written} bytes to {path}")
    return path


__all__ = ["download_url", "DownloadError"]
