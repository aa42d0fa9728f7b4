"""
Gradle Tool - Generates Gradle Kotlin DSL build files

build.gradle.kts depends on how the plugin reaches the server API:
- No internals: compile against paper-api
- Spigot internals: compile against the obfuscated spigot server jar
- Mojang internals: paperweight userdev with the Paper dev bundle

Both renderers are pure; generate_gradle_files is the only function here
that touches the filesystem.
"""
from pathlib import Path
from typing import Dict, Any

from plugdecomp.config import (
    PAPER_REPOSITORY,
    PAPERWEIGHT_PLUGIN_ID,
    PAPERWEIGHT_VERSION,
    FOOJAY_RESOLVER_VERSION,
    SNAPSHOT_SUFFIX
)
from plugdecomp.schemas import PluginData, Mapping
from plugdecomp.tools.workspace_tool import write_text_file

BUILD_SCRIPT_NAME = "build.gradle.kts"
SETTINGS_NAME = "settings.gradle.kts"

INDENT = "    "


def _dependency_line(data: PluginData) -> str:
    version = f"{data.version}{SNAPSHOT_SUFFIX}"

    if data.internals is None:
        return f'compileOnly("io.papermc.paper:paper-api:{version}")'
    if data.internals.mapping == Mapping.MOJANG:
        return f'paperweight.paperDevBundle("{version}")'
    return f'compileOnly("org.spigotmc:spigot:{version}")'


def create_buildscript(data: PluginData) -> str:
    """
    Render build.gradle.kts

    Args:
        data: Plugin description

    Returns:
        Build script text (no trailing newline)
    """
    lines = ["plugins {", f"{INDENT}java"]
    if data.internals is not None and data.internals.mapping == Mapping.MOJANG:
        lines.append(f'{INDENT}id("{PAPERWEIGHT_PLUGIN_ID}") version "{PAPERWEIGHT_VERSION}"')
    lines.append("}")

    lines += [
        "repositories {",
        f'{INDENT}maven("{PAPER_REPOSITORY}")',
        "}",
    ]

    lines += [
        "dependencies {",
        f"{INDENT}{_dependency_line(data)}",
        "}",
    ]

    lines += [
        "java {",
        f"{INDENT}toolchain.languageVersion.set(JavaLanguageVersion.of({data.java_version}))",
        "}",
    ]

    return "\n".join(lines)


def create_buildsettings(data: PluginData) -> str:
    """
    Render settings.gradle.kts

    The project name is inserted as-is; quotes in it are not escaped.
    """
    lines = [
        f'rootProject.name = "{data.name}"',
        "plugins {",
        f'{INDENT}id("org.gradle.toolchains.foojay-resolver") version "{FOOJAY_RESOLVER_VERSION}"',
        "}",
    ]
    return "\n".join(lines)


def generate_gradle_files(data: PluginData) -> Dict[str, Any]:
    """
    Write build.gradle.kts and settings.gradle.kts into the workspace

    Existing files are overwritten.

    Args:
        data: Plugin description (output_dir must exist)

    Returns:
        Dictionary with paths to the written files

    Raises:
        WorkspaceError: If a file cannot be written
    """
    output_dir = Path(data.output_dir)

    build_gradle_path = write_text_file(output_dir / BUILD_SCRIPT_NAME, create_buildscript(data))
    settings_gradle_path = write_text_file(output_dir / SETTINGS_NAME, create_buildsettings(data))

    return {
        "status": "success",
        "build_gradle_path": str(build_gradle_path),
        "settings_gradle_path": str(settings_gradle_path)
    }


__all__ = [
    "create_buildscript",
    "create_buildsettings",
    "generate_gradle_files",
    "BUILD_SCRIPT_NAME",
    "SETTINGS_NAME",
]
