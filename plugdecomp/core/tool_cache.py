"""
Tool Cache - Local copy of the Vineflower jar

Responsibilities:
- Resolve the cached jar path under the data directory
- Download the jar once, the first time it is needed
- Never leave a partial file at the cached path

A file at the cached path is always treated as valid: there is no checksum
or version check, so a stale jar must be deleted by hand.
"""
import logging
import os
from pathlib import Path
from typing import Callable, Optional

from plugdecomp.config import DATA_DIR, VINEFLOWER_DOWNLOAD_URL, VINEFLOWER_JAR_NAME
from plugdecomp.tools.download_tool import download_url

logger = logging.getLogger(__name__)

PARTIAL_SUFFIX = ".part"


class ToolCacheError(Exception):
    """Raised when the cache directory cannot be prepared"""
    pass


class ToolCache:
    """
    ToolCache - Fetches an external tool once per data directory
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        url: str = VINEFLOWER_DOWNLOAD_URL,
        filename: str = VINEFLOWER_JAR_NAME,
        downloader: Callable[[str, Path], Path] = download_url
    ):
        self.data_dir = Path(data_dir) if data_dir else DATA_DIR
        self.url = url
        self.filename = filename
        self.downloader = downloader

    @property
    def path(self) -> Path:
        return self.data_dir / self.filename

    def is_cached(self) -> bool:
        return self.path.exists()

    def acquire(self) -> Path:
        """
        Return the cached tool, downloading it if missing

        The download goes to a sibling ".part" file which is renamed onto
        the cached path only after the transfer completed.

        Returns:
            Path to the tool file

        Raises:
            ToolCacheError: If the data directory cannot be created
            DownloadError: If the download fails
        """
        target = self.path
        if target.exists():
            logger.debug(f"[ToolCache] Using cached {target}")
            return target

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ToolCacheError(f"Could not create data directory {target.parent}: {e}") from e

        partial = target.with_name(target.name + PARTIAL_SUFFIX)
        logger.info(f"[ToolCache] Downloading {self.url}")

        try:
            self.downloader(self.url, partial)
        except Exception:
            partial.unlink(missing_ok=True)
            raise

        try:
            os.replace(partial, target)
        except OSError as e:
            partial.unlink(missing_ok=True)
            raise ToolCacheError(f"Could not move download into place at {target}: {e}") from e

        logger.info(f"[ToolCache] Cached {target}")
        return target


__all__ = ["ToolCache", "ToolCacheError"]
