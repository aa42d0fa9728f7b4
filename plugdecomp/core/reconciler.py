"""
Reconciler - Splits decompiler output into java and resources source sets

Vineflower writes every entry of the jar into a single folder. Sources stay
in src/main/java; everything else (plugin.yml, configs, assets) is moved into
src/main/resources at the same relative path.

Rules:
- Files named *.java~ are Vineflower placeholders and are renamed to *.java
- Files whose extension is in ALLOWED_SOURCE_EXTENSIONS stay put
- Files without an extension stay put
- Everything else is moved (not copied)

There is no rollback. A failure partway through leaves some files moved
and others not, and a second run will not find the moved ones again.
"""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from plugdecomp.config import ALLOWED_SOURCE_EXTENSIONS, PLACEHOLDER_SOURCE_EXTENSION

logger = logging.getLogger(__name__)

COLLISION_POLICIES = ("overwrite", "error")


class ReconcileError(Exception):
    """Raised when a file cannot be renamed or moved"""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


@dataclass(frozen=True)
class Relocation:
    """A single rename decided by the reconciler"""
    source: Path
    destination: Path


@dataclass
class ReconcileReport:
    """What a reconcile pass did"""
    renamed: List[Relocation] = field(default_factory=list)
    relocated: List[Relocation] = field(default_factory=list)
    kept: int = 0


def file_extension(name: str) -> Optional[str]:
    """
    Extension of a file name: the text after the last dot

    Returns None for names without a dot and for dotfiles like ".gitignore".
    """
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


class TreeReconciler:
    """
    TreeReconciler - Moves non-source files out of the java source set

    Args:
        allowed_extensions: Extensions that stay under the source root
        on_collision: "overwrite" replaces an existing destination file,
            "error" raises ReconcileError instead
    """

    def __init__(
        self,
        allowed_extensions: Iterable[str] = ALLOWED_SOURCE_EXTENSIONS,
        on_collision: str = "overwrite"
    ):
        if on_collision not in COLLISION_POLICIES:
            raise ValueError(f"on_collision must be one of {COLLISION_POLICIES}, got {on_collision!r}")
        self.allowed_extensions = frozenset(allowed_extensions)
        self.on_collision = on_collision

    def reconcile(self, source_root: Path, resources_root: Path) -> ReconcileReport:
        """
        Reconcile one decompiled tree

        Args:
            source_root: Directory Vineflower wrote into (src/main/java)
            resources_root: Directory that receives non-source files

        Returns:
            ReconcileReport listing renames and moves

        Raises:
            ReconcileError: If a directory cannot be listed or a file cannot be moved
        """
        source_root = Path(source_root)
        resources_root = Path(resources_root)
        report = ReconcileReport()

        self._process_directory(source_root, source_root, resources_root, report)

        logger.info(
            f"[Reconciler] Kept {report.kept} files, repaired {len(report.renamed)}, "
            f"moved {len(report.relocated)} to {resources_root}"
        )
        return report

    def _process_directory(
        self,
        current_dir: Path,
        source_root: Path,
        resources_root: Path,
        report: ReconcileReport
    ):
        try:
            entries = sorted(os.scandir(current_dir), key=lambda entry: entry.name)
        except OSError as e:
            raise ReconcileError(f"Could not list {current_dir}: {e}", path=current_dir) from e

        for entry in entries:
            path = Path(entry.path)

            if entry.is_dir(follow_symlinks=False):
                self._process_directory(path, source_root, resources_root, report)
                continue

            extension = file_extension(entry.name)
            if extension is None:
                report.kept += 1
                continue

            if extension == PLACEHOLDER_SOURCE_EXTENSION:
                repaired = path.with_name(entry.name[:-1])
                self._move(Relocation(path, repaired))
                report.renamed.append(Relocation(path, repaired))
                path = repaired
                extension = extension[:-1]

            if extension in self.allowed_extensions:
                report.kept += 1
                continue

            destination = resources_root / path.relative_to(source_root)
            relocation = Relocation(path, destination)
            self._move(relocation, create_parents=True)
            report.relocated.append(relocation)

    def _move(self, relocation: Relocation, create_parents: bool = False):
        destination = relocation.destination

        if self.on_collision == "error" and destination.exists():
            raise ReconcileError(f"Refusing to overwrite {destination}", path=destination)

        try:
            if create_parents:
                destination.parent.mkdir(parents=True, exist_ok=True)
            os.replace(relocation.source, destination)
        except OSError as e:
            raise ReconcileError(
                f"Could not move {relocation.source} to {destination}: {e}",
                path=relocation.source
            ) from e

        logger.debug(f"[Reconciler] {relocation.source} -> {destination}")


def filter_resources(java_sourceset: Path, resources_sourceset: Path) -> ReconcileReport:
    """Reconcile with the default allow-list and overwrite policy"""
    return TreeReconciler().reconcile(java_sourceset, resources_sourceset)


__all__ = [
    "TreeReconciler",
    "ReconcileReport",
    "Relocation",
    "ReconcileError",
    "file_extension",
    "filter_resources",
]
