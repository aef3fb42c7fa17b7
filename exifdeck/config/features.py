"""Module: exifdeck.config.features

Author: Michael Economou
Date: 2026-01-01

ExifTool integration settings: argument sets, group rules, search paths.
"""

# =====================================
# EXIFTOOL ARGUMENTS
# =====================================

# JSON output, family 1 group names, allow duplicates, short names, tag ids
EXIFTOOL_READ_ARGS = ["-json", "-G1", "-a", "-s", "-D", "-charset", "filename=UTF8"]

# Used when only selected tags are requested
EXIFTOOL_READ_TAGS_ARGS = ["-json", "-G1", "-s", "-charset", "filename=UTF8"]

EXIFTOOL_STRIP_ALL_ARG = "-all="
EXIFTOOL_RESTORE_ARG = "-restore_original"
EXIFTOOL_COPY_ARG = "-tagsFromFile"
EXIFTOOL_VERSION_ARG = "-ver"

# Key of the JSON object that names the file, not a tag
EXIFTOOL_SOURCE_FILE_KEY = "SourceFile"

# Group used for keys without a "Group:" prefix
FALLBACK_GROUP = "Other"

# Lowercased group names that are never written
READ_ONLY_GROUPS = frozenset({"system", "file", "composite"})

# =====================================
# EXIFTOOL DISCOVERY
# =====================================

EXIFTOOL_SYSTEM_PATHS = [
    "/opt/homebrew/bin/exiftool",  # Apple Silicon Homebrew
    "/usr/local/bin/exiftool",  # Intel Homebrew / manual install
    "/usr/bin/exiftool",  # System install
    "/opt/local/bin/exiftool",  # MacPorts
]

EXIFTOOL_VERSION_TIMEOUT = 5  # seconds, only for the version probe

# =====================================
# WRITE DEFAULTS
# =====================================

# False keeps ExifTool's "<file>_original" backup
DEFAULT_OVERWRITE_ORIGINAL = False
