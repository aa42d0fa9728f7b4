"""
Configuration for the plugdecomp workspace generator
"""
import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

APP_NAME = "plugdecomp"


def default_data_dir() -> Path:
    """Per-user application data directory for the current platform"""
    if sys.platform == "win32":
        base = os.getenv("APPDATA")
        if base:
            return Path(base)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".local" / "share"


# Paths
DATA_DIR = Path(os.getenv("PLUGDECOMP_DATA_DIR") or default_data_dir() / APP_NAME)

# Vineflower decompiler
VINEFLOWER_VERSION = os.getenv("VINEFLOWER_VERSION", "1.10.1")
VINEFLOWER_DOWNLOAD_URL = os.getenv(
    "VINEFLOWER_DOWNLOAD_URL",
    f"https://github.com/Vineflower/vineflower/releases/download/{VINEFLOWER_VERSION}/vineflower-{VINEFLOWER_VERSION}.jar"
)
VINEFLOWER_JAR_NAME = "vineflower.jar"
VINEFLOWER_FLAGS = ("--folder", "--kt-decompile-kotlin=false")

JAVA_EXECUTABLE = os.getenv("JAVA_EXECUTABLE", "java")

# Unset means the decompiler may run indefinitely
_decompile_timeout = os.getenv("DECOMPILE_TIMEOUT")
DECOMPILE_TIMEOUT = float(_decompile_timeout) if _decompile_timeout else None

# Downloads
DOWNLOAD_TIMEOUT = float(os.getenv("DOWNLOAD_TIMEOUT", "30"))
DOWNLOAD_CHUNK_SIZE = 64 * 1024

# Spigot version index
VERSIONS_URL = "https://hub.spigotmc.org/versions"
VERSION_PATTERN = r"^1\.\d{1,2}(?:\.\d{1,2})?$"
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:131.0) Gecko/20100101 Firefox/131.0"

JAVA_VERSIONS = (8, 11, 17, 21, 22, 23)

# Extensions Vineflower emits that belong in src/main/java
ALLOWED_SOURCE_EXTENSIONS = ("sql", "java", "html", "proto")
PLACEHOLDER_SOURCE_EXTENSION = "java~"

# Gradle descriptor constants
PAPER_REPOSITORY = "https://repo.papermc.io/repository/maven-public"
PAPERWEIGHT_PLUGIN_ID = "io.papermc.paperweight.userdev"
PAPERWEIGHT_VERSION = "2.0.0-beta.8"
FOOJAY_RESOLVER_VERSION = "0.9.0"
SNAPSHOT_SUFFIX = "-R0.1-SNAPSHOT"

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
