"""
Core Pipeline Components

These components form the decompile pipeline:
1. ToolCache - Fetches Vineflower once
2. Decompiler - Runs Vineflower on the plugin jar
3. Reconciler - Splits sources from resources
4. Pipeline - Sequences the stages and writes the Gradle files
"""
from .tool_cache import ToolCache, ToolCacheError
from .decompiler import (
    Decompiler,
    VineflowerDecompiler,
    run_vineflower,
    DecompileError,
    DecompilerLaunchError,
)
from .reconciler import TreeReconciler, ReconcileReport, Relocation, ReconcileError, filter_resources
from .pipeline import DecompilePipeline

__all__ = [
    "ToolCache",
    "ToolCacheError",
    "Decompiler",
    "VineflowerDecompiler",
    "run_vineflower",
    "DecompileError",
    "DecompilerLaunchError",
    "TreeReconciler",
    "ReconcileReport",
    "Relocation",
    "ReconcileError",
    "filter_resources",
    "DecompilePipeline",
]
