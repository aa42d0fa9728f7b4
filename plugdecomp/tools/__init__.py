"""
Tools used by the decompile pipeline

- Artifact download
- Workspace setup
- Gradle build file generation

Renderers are deterministic: same PluginData, same text.
"""
from .download_tool import download_url, DownloadError
from .workspace_tool import setup_workspace, write_text_file, WorkspaceError
from .gradle_tool import create_buildscript, create_buildsettings, generate_gradle_files

__all__ = [
    "download_url",
    "DownloadError",
    "setup_workspace",
    "write_text_file",
    "WorkspaceError",
    "create_buildscript",
    "create_buildsettings",
    "generate_gradle_files",
]
