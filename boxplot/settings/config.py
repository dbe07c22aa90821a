"""Runtime configuration loaded from the environment."""

import os
from pathlib import Path

from dotenv import load_dotenv

# ========================
# Environment and paths
# ========================

# Project root; relative paths (logs, .env) are resolved from here.
BASE_DIR = Path(__file__).resolve().parents[2]

# Typical .env content:
#   BOXPLOT_LOG_DIR=/var/log/boxplot
#   BOXPLOT_DEBUG_LOGGING=true
#   BOXPLOT_DEFAULT_WIDTH=800
load_dotenv(BASE_DIR / ".env")

LOG_DIR = Path(os.getenv("BOXPLOT_LOG_DIR", str(BASE_DIR / "logs")))

# Lowers the render logger to DEBUG so scale fallbacks and option
# normalization show up in the render log.
DEBUG_LOGGING = os.getenv("BOXPLOT_DEBUG_LOGGING", "false").lower() == "true"

# ========================
# Render defaults
# ========================

# Used when the host reports a zero-sized container.
DEFAULT_CONTAINER_WIDTH = int(os.getenv("BOXPLOT_DEFAULT_WIDTH", "800"))
DEFAULT_CONTAINER_HEIGHT = int(os.getenv("BOXPLOT_DEFAULT_HEIGHT", "600"))

# Beyond this many groups the boxes start to overlap.
MAX_GROUPS_WARNING = int(os.getenv("BOXPLOT_MAX_GROUPS_WARNING", "100"))
