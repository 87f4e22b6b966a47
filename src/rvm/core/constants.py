"""Constants shared by the rvm core."""

# Repository hosting the per-platform list.json manifests
REPO_URL = "https://raw.githubusercontent.com/paritytech/resolc-bin/refs/heads/main"

# Oldest solc release any Resolc build is known to handle correctly
MIN_SOLC_VERSION = "0.8.0"

# On-disk layout under the rvm root directory
BUILD_METADATA_FILENAME = "build.json"
DEFAULT_VERSION_FILENAME = ".default_version"
LOCK_FILE_PREFIX = ".lock-"
CONFIG_FILENAME = "config.toml"

# Lock key guarding the default-version pointer
GLOBAL_LOCK_KEY = "0.0.0"

# Binary downloads can be large; manifests share the same client
DOWNLOAD_TIMEOUT_SECONDS = 300.0

# Pause before re-verifying an install another process won the race for
INSTALL_RACE_BACKOFF_SECONDS = 0.5
