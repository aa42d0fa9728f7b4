"""
Workspace Setup Tool - Creates the Gradle source sets

This tool creates the directory structure the decompiler and the
reconciler write into.
"""
from pathlib import Path
from typing import Dict, Any


class WorkspaceError(Exception):
    """Raised when the workspace cannot be created or written"""
    pass


def setup_workspace(output_dir: Path) -> Dict[str, Any]:
    """
    Create the java and resources source sets

    Existing directories are left as they are.

    Args:
        output_dir: Workspace root

    Returns:
        Dictionary with the two source set paths

    Raises:
        WorkspaceError: If a directory cannot be created
    """
    output_dir = Path(output_dir)
    java_sourceset = output_dir / "src" / "main" / "java"
    resources_sourceset = output_dir / "src" / "main" / "resources"

    for directory in (java_sourceset, resources_sourceset):
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WorkspaceError(f"Could not create {directory}: {e}") from e

    return {
        "status": "success",
        "java_sourceset": java_sourceset,
        "resources_sourceset": resources_sourceset
    }


def write_text_file(path: Path, content: str) -> Path:
    """Write (or overwrite) a UTF-8 text file with LF line endings"""
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        raise WorkspaceError(f"Could not write {path}: {e}") from e
    return path


__all__ = ["setup_workspace", "write_text_file", "WorkspaceError"]
