"""
Schemas for the decompile pipeline

PluginData is the contract between the prompt layer and the pipeline.
"""
from .plugin_schema import Mapping, MappingError, Internals, PluginData

__all__ = [
    "Mapping",
    "MappingError",
    "Internals",
    "PluginData",
]
