import os
import logging
from logging import Logger


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)).strip())
    except Exception:
        return default


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


# ───────────────────────────────────────
# 📂 Search Roots & Traversal
# ───────────────────────────────────────
SEARCH_ROOT_NAMES = ("documents", "pictures", "videos", "desktop", "downloads")

# Root is depth 0; three levels of subfolders below it are visited.
MAX_SCAN_DEPTH = 3

# ───────────────────────────────────────
# 🗂️ Categories (overlapping on purpose)
# ───────────────────────────────────────
CATEGORIES = {
    "Documents": [
        "*.pdf", "*.doc", "*.docx", "*.txt", "*.rtf", "*.odt",
        "*.xls", "*.xlsx", "*.ppt", "*.pptx",
    ],
    "Images": [
        "*.jpg", "*.jpeg", "*.png", "*.gif", "*.bmp", "*.tiff", "*.heic", "*.raw",
    ],
    "Videos": ["*.mp4", "*.avi", "*.mov", "*.mkv", "*.wmv", "*.flv"],
    "Spreadsheets": ["*.xlsx", "*.xls", "*.csv", "*.ods"],
    "Audio": ["*.mp3", "*.wav", "*.flac", "*.m4a", "*.aac"],
    "Archives": ["*.zip", "*.rar", "*.7z", "*.tar", "*.gz"],
}

# ───────────────────────────────────────
# 🚫 Excluded Folders (substring match on folder name)
# ───────────────────────────────────────
EXCLUDED_FOLDERS = (
    # cloud sync
    "OneDrive",
    "OneDrive - Personal",
    "OneDrive - Business",
    "Google Drive",
    "Dropbox",
    "iCloud",
    "SkyDrive",
    "box",
    "MicrosoftEdgeBackups",
    # system
    "AppData",
    "RECYCLE.BIN",
    "Windows",
    "ProgramData",
    "Program Files",
    "ProgramFiles(x86)",
    "System32",
    "SysWOW64",
    "Boot",
    "Recovery",
    # dev / build
    ".git",
    "node_modules",
    ".cache",
    "Temp",
    "tmp",
    ".vscode",
    "__pycache__",
    ".nuget",
    ".m2",
    ".gradle",
    "packages",
    "vendor",
    ".dvc",
)

# Matched against the whole path, not just the folder name.
CLOUD_PATH_MARKERS = ("OneDrive", "Google Drive", "Dropbox")

# ───────────────────────────────────────
# 🧾 Reporting
# ───────────────────────────────────────
WRITE_MANIFEST = _env_bool("RECOVERY_WRITE_MANIFEST", True)
MANIFEST_NAME = os.getenv("RECOVERY_MANIFEST_NAME", "recovery_manifest.csv")
MAX_FAILURES_SHOWN = _env_int("RECOVERY_MAX_FAILURES_SHOWN", 20)

# ───────────────────────────────────────
# 📋 Logging
# ───────────────────────────────────────
LOG_LEVEL = os.getenv("RECOVERY_LOG_LEVEL", "INFO").strip().upper()

logger: Logger = logging.getLogger("recovery")
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

handler = logging.StreamHandler()
formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
handler.setFormatter(formatter)

if not logger.hasHandlers():
    logger.addHandler(handler)
