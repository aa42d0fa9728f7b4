"""
Decompile Pipeline - Turns a plugin jar into a Gradle workspace

This module wires together all pipeline components:
ToolCache → Decompiler → TreeReconciler → Gradle files

Usage:
    pipeline = DecompilePipeline()
    result = pipeline.run(plugin_data)

Stages run strictly in order and the first failure aborts the run. The
failing stage's exception reaches the caller unchanged.
"""
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from plugdecomp.schemas import PluginData
from plugdecomp.core.tool_cache import ToolCache
from plugdecomp.core.decompiler import Decompiler, VineflowerDecompiler
from plugdecomp.core.reconciler import TreeReconciler
from plugdecomp.tools.workspace_tool import setup_workspace
from plugdecomp.tools.gradle_tool import generate_gradle_files

logger = logging.getLogger(__name__)


class DecompilePipeline:
    """
    Complete decompile pipeline

    Args:
        tool_cache: Source of the Vineflower jar (defaults to the configured data dir)
        decompiler_factory: Builds a Decompiler from the cached tool path
        reconciler: Splits the decompiled tree
    """

    def __init__(
        self,
        tool_cache: Optional[ToolCache] = None,
        decompiler_factory: Callable[[Path], Decompiler] = VineflowerDecompiler,
        reconciler: Optional[TreeReconciler] = None
    ):
        self.tool_cache = tool_cache or ToolCache()
        self.decompiler_factory = decompiler_factory
        self.reconciler = reconciler or TreeReconciler()

        self.execution_log = []

    def run(
        self,
        data: PluginData,
        progress_callback: Optional[Callable[[str], None]] = None
    ) -> Dict[str, Any]:
        """
        Scaffold a workspace for one plugin

        Args:
            data: Validated plugin description
            progress_callback: Optional callback for progress updates (msg: str) -> None

        Returns:
            Dictionary with the workspace paths and reconcile counts

        Raises:
            ToolCacheError, DownloadError: Acquiring Vineflower failed
            WorkspaceError: Directories or build files could not be written
            DecompilerLaunchError, DecompileError: Vineflower failed
            ReconcileError: The decompiled tree could not be split
        """
        self.execution_log = []

        def log(msg: str):
            self.execution_log.append(msg)
            if progress_callback:
                progress_callback(msg)
            logger.info(f"[Pipeline] {msg}")

        stage = "acquire"
        try:
            tool_path = self.tool_cache.acquire()

            stage = "workspace"
            workspace = setup_workspace(data.output_dir)
            java_sourceset = workspace["java_sourceset"]
            resources_sourceset = workspace["resources_sourceset"]

            stage = "decompile"
            log("Decompiling...")
            self.decompiler_factory(tool_path).decompile(data.jarfile, java_sourceset)

            stage = "reconcile"
            log("Filtering resources...")
            report = self.reconciler.reconcile(java_sourceset, resources_sourceset)

            stage = "gradle"
            log("Generating build scripts...")
            gradle_result = generate_gradle_files(data)

        except Exception as e:
            logger.error(f"[Pipeline] Stage '{stage}' failed: {e}")
            raise

        return {
            "status": "success",
            "output_dir": str(data.output_dir),
            "java_sourceset": str(java_sourceset),
            "resources_sourceset": str(resources_sourceset),
            "build_gradle_path": gradle_result["build_gradle_path"],
            "settings_gradle_path": gradle_result["settings_gradle_path"],
            "renamed_files": len(report.renamed),
            "relocated_files": len(report.relocated),
            "execution_log": self.execution_log.copy()
        }


def run(data: PluginData, progress_callback: Optional[Callable[[str], None]] = None) -> Dict[str, Any]:
    """Run the pipeline with the default components"""
    return DecompilePipeline().run(data, progress_callback=progress_callback)


__all__ = ["DecompilePipeline", "run"]
