"""
Tests for ToolCache

The cache downloads Vineflower once and reuses the file afterwards.
"""
import pytest
import tempfile
import shutil
from pathlib import Path
from unittest.mock import Mock, patch

from plugdecomp.core.tool_cache import ToolCache, ToolCacheError
from plugdecomp.tools.download_tool import DownloadError


class TestToolCache:
    """Test suite for ToolCache"""

    @pytest.fixture
    def temp_dir(self):
        """Create temporary data directory"""
        temp = Path(tempfile.mkdtemp())
        yield temp
        if temp.exists():
            shutil.rmtree(temp)

    @staticmethod
    def fake_downloader(content: bytes = b"PK\x03\x04jar"):
        def download(url, path):
            Path(path).write_bytes(content)
            return path
        return Mock(side_effect=download)

    def test_cache_path(self, temp_dir):
        """Test that the cached file lives directly under the data dir"""
        cache = ToolCache(data_dir=temp_dir, filename="vineflower.jar")
        assert cache.path == temp_dir / "vineflower.jar"
        assert not cache.is_cached()

    def test_acquire_downloads_when_missing(self, temp_dir):
        """Test first acquire downloads into nested, missing directories"""
        data_dir = temp_dir / "nested" / "plugdecomp"
        downloader = self.fake_downloader(b"jar-bytes")
        cache = ToolCache(data_dir=data_dir, url="https://example.invalid/vf.jar", downloader=downloader)

        path = cache.acquire()

        assert path == data_dir / "vineflower.jar"
        assert path.read_bytes() == b"jar-bytes"
        assert downloader.call_count == 1
        assert downloader.call_args[0][0] == "https://example.invalid/vf.jar"
        assert not (data_dir / "vineflower.jar.part").exists()

    def test_acquire_is_idempotent(self, temp_dir):
        """Test that a second acquire performs no download"""
        downloader = self.fake_downloader()
        cache = ToolCache(data_dir=temp_dir, downloader=downloader)

        first = cache.acquire()
        second = cache.acquire()

        assert first == second
        assert downloader.call_count == 1

    def test_existing_file_is_a_cache_hit(self, temp_dir):
        """Test that any existing file is reused without validation"""
        (temp_dir / "vineflower.jar").write_bytes(b"")
        downloader = self.fake_downloader()
        cache = ToolCache(data_dir=temp_dir, downloader=downloader)

        path = cache.acquire()

        assert path == temp_dir / "vineflower.jar"
        downloader.assert_not_called()

    def test_failed_download_leaves_no_cached_file(self, temp_dir):
        """Test that a failure mid-download does not poison the cache"""
        def failing(url, path):
            Path(path).write_bytes(b"partial")
            raise DownloadError("connection reset", url=url)

        cache = ToolCache(data_dir=temp_dir, downloader=Mock(side_effect=failing))

        with pytest.raises(DownloadError):
            cache.acquire()

        assert not cache.is_cached()
        assert not (temp_dir / "vineflower.jar.part").exists()

    def test_retry_after_failure_downloads_again(self, temp_dir):
        """Test that the next acquire after a failure fetches again"""
        calls = []

        def flaky(url, path):
            calls.append(url)
            if len(calls) == 1:
                raise DownloadError("timeout", url=url)
            Path(path).write_bytes(b"ok")
            return path

        cache = ToolCache(data_dir=temp_dir, downloader=flaky)

        with pytest.raises(DownloadError):
            cache.acquire()
        path = cache.acquire()

        assert path.read_bytes() == b"ok"
        assert len(calls) == 2

    def test_move_into_place_fails(self, temp_dir):
        """Test that a failed rename raises ToolCacheError and removes the .part file"""
        cache = ToolCache(data_dir=temp_dir, downloader=self.fake_downloader())

        with patch("plugdecomp.core.tool_cache.os.replace", side_effect=PermissionError("denied")):
            with pytest.raises(ToolCacheError) as exc_info:
                cache.acquire()

        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert not (temp_dir / "vineflower.jar.part").exists()
        assert not cache.is_cached()

    def test_data_dir_cannot_be_created(self, temp_dir):
        """Test that a file in place of the data dir raises ToolCacheError"""
        blocker = temp_dir / "blocker"
        blocker.write_text("not a directory")
        cache = ToolCache(data_dir=blocker / "plugdecomp", downloader=self.fake_downloader())

        with pytest.raises(ToolCacheError):
            cache.acquire()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
