"""
Tests for workspace setup
"""
import pytest
import tempfile
import shutil
from pathlib import Path

from plugdecomp.tools.workspace_tool import setup_workspace, write_text_file, WorkspaceError


class TestWorkspaceTool:
    """Test workspace setup tool"""

    @pytest.fixture
    def temp_dir(self):
        """Create temporary directory"""
        temp = Path(tempfile.mkdtemp())
        yield temp
        if temp.exists():
            shutil.rmtree(temp)

    def test_setup_workspace(self, temp_dir):
        """Test creating both source sets"""
        result = setup_workspace(temp_dir / "out")

        assert result["status"] == "success"
        assert result["java_sourceset"] == temp_dir / "out" / "src" / "main" / "java"
        assert result["resources_sourceset"] == temp_dir / "out" / "src" / "main" / "resources"
        assert result["java_sourceset"].is_dir()
        assert result["resources_sourceset"].is_dir()

    def test_setup_workspace_is_idempotent(self, temp_dir):
        """Test that existing directories and their files are kept"""
        setup_workspace(temp_dir)
        marker = temp_dir / "src" / "main" / "java" / "Keep.java"
        marker.write_text("class Keep {}")

        setup_workspace(temp_dir)

        assert marker.read_text() == "class Keep {}"

    def test_setup_workspace_blocked(self, temp_dir):
        """Test that a file in the way raises WorkspaceError"""
        (temp_dir / "src").write_text("not a directory")

        with pytest.raises(WorkspaceError):
            setup_workspace(temp_dir)

    def test_write_text_file_uses_lf(self, temp_dir):
        """Test that content is written byte-for-byte with LF endings"""
        path = write_text_file(temp_dir / "a.kts", "line1\nline2")
        assert path.read_bytes() == b"line1\nline2"

    def test_write_text_file_error(self, temp_dir):
        """Test that write failures raise WorkspaceError"""
        with pytest.raises(WorkspaceError):
            write_text_file(temp_dir / "missing" / "a.kts", "x")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
