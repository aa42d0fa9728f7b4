"""
Decompiler - Runs Vineflower on a plugin jar

Responsibilities:
- Build the java -jar command line
- Run it, discarding stdout and passing stderr through
- Translate the exit status into success or DecompileError

The pipeline depends on the Decompiler protocol only, so tests can swap in
an implementation that writes a synthetic tree.
"""
import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Protocol

from plugdecomp.config import VINEFLOWER_FLAGS, JAVA_EXECUTABLE, DECOMPILE_TIMEOUT

logger = logging.getLogger(__name__)


class DecompilerLaunchError(Exception):
    """Raised when the decompiler process cannot be started"""
    pass


class DecompileError(Exception):
    """Raised when the decompiler exits unsuccessfully"""

    def __init__(self, message: str, exit_code: Optional[int] = None, timed_out: bool = False):
        super().__init__(message)
        self.exit_code = exit_code
        self.timed_out = timed_out


class Decompiler(Protocol):
    def decompile(self, jarfile: Path, output_dir: Path) -> None:
        ...


def build_command(
    jarfile: Path,
    output_dir: Path,
    vf_jarfile: Path,
    java_executable: str = JAVA_EXECUTABLE
) -> List[str]:
    """Command line for one Vineflower run"""
    return [
        java_executable,
        "-jar",
        str(vf_jarfile),
        *VINEFLOWER_FLAGS,
        str(jarfile),
        str(output_dir),
    ]


def run_vineflower(
    jarfile: Path,
    output_dir: Path,
    vf_jarfile: Path,
    java_executable: str = JAVA_EXECUTABLE,
    timeout: Optional[float] = DECOMPILE_TIMEOUT
) -> None:
    """
    Decompile a jar into a directory

    Blocks until Vineflower exits. Without a timeout a hung decompiler
    blocks forever.

    Args:
        jarfile: Jar to decompile
        output_dir: Directory Vineflower writes sources into
        vf_jarfile: Vineflower jar
        java_executable: Java launcher
        timeout: Seconds before the process is killed (None waits forever)

    Raises:
        DecompilerLaunchError: If the process cannot be spawned
        DecompileError: If the process exits with a non-zero status or times out
    """
    cmd = build_command(jarfile, output_dir, vf_jarfile, java_executable)
    logger.info(f"[Decompiler] Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.DEVNULL,
            timeout=timeout
        )
    except subprocess.TimeoutExpired as e:
        raise DecompileError(
            f"Vineflower timed out after {timeout} seconds",
            timed_out=True
        ) from e
    except OSError as e:
        raise DecompilerLaunchError(f"Could not start {java_executable}: {e}") from e

    if result.returncode != 0:
        logger.error(f"[Decompiler] Vineflower exited with code {result.returncode}")
        raise DecompileError(
            f"Vineflower exited with exit code {result.returncode}",
            exit_code=result.returncode
        )

    logger.info("[Decompiler] Decompilation finished")


class VineflowerDecompiler:
    """
    VineflowerDecompiler - Decompiler backed by a local Vineflower jar
    """

    def __init__(
        self,
        vf_jarfile: Path,
        java_executable: str = JAVA_EXECUTABLE,
        timeout: Optional[float] = DECOMPILE_TIMEOUT
    ):
        self.vf_jarfile = Path(vf_jarfile)
        self.java_executable = java_executable
        self.timeout = timeout

    def decompile(self, jarfile: Path, output_dir: Path) -> None:
        run_vineflower(
            jarfile,
            output_dir,
            self.vf_jarfile,
            java_executable=self.java_executable,
            timeout=self.timeout
        )


__all__ = [
    "Decompiler",
    "VineflowerDecompiler",
    "run_vineflower",
    "build_command",
    "DecompileError",
    "DecompilerLaunchError",
]
