"""
Services that feed the pipeline: the Spigot version index and the
interactive prompt that produces PluginData.
"""
from .version_service import fetch_versions, filter_versions, is_valid, VersionFetchError
from .prompt_service import PromptSession

__all__ = [
    "fetch_versions",
    "filter_versions",
    "is_valid",
    "VersionFetchError",
    "PromptSession",
]
