"""
plugdecomp - Command line entry point

Usage:
    plugdecomp <jarfile> <output_dir>

Asks a few questions about the plugin, then decompiles the jar into
<output_dir> and writes the Gradle build files.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from plugdecomp.config import LOG_LEVEL
from plugdecomp.core import (
    DecompilePipeline,
    ToolCacheError,
    DecompileError,
    DecompilerLaunchError,
    ReconcileError,
)
from plugdecomp.services import fetch_versions, PromptSession, VersionFetchError
from plugdecomp.tools import DownloadError, WorkspaceError

HANDLED_ERRORS = (
    VersionFetchError,
    ValidationError,
    ToolCacheError,
    DownloadError,
    WorkspaceError,
    DecompilerLaunchError,
    DecompileError,
    ReconcileError,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plugdecomp",
        description="A tool for setting up gradle workspaces for decompiled Minecraft plugins."
    )
    parser.add_argument("jarfile", type=Path, help="The input jar file.")
    parser.add_argument("output_dir", type=Path, help="The output directory.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    try:
        versions = fetch_versions()
        data = PromptSession().collect_plugin_data(args.jarfile, args.output_dir, versions)
        print()
        DecompilePipeline().run(data, progress_callback=print)
    except HANDLED_ERRORS as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        return 130

    print(f"Workspace ready at {data.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
