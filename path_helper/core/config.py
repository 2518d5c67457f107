"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    PATH_HELPER_SEPARATOR          — Default directory separator (default: os.sep)
    PATH_HELPER_RELATIVE_STRATEGY  — Default relative-path diff (default: common_prefix)
    LOG_LEVEL                      — Root log level (default: INFO)
    LOG_DIR                        — Directory for the daily log file (default: logs)
    LOG_TO_FILE                    — Write logs to LOG_DIR as well (default: false)
    API_HOST / API_PORT            — uvicorn bind address (default: 127.0.0.1:8000)

Separator:
    An empty or unset PATH_HELPER_SEPARATOR falls back to the host
    separator, the same policy applied to per-call separator arguments.
"""
import os
from dotenv import load_dotenv

from path_helper.core.constants import RELATIVE_STRATEGIES, STRATEGY_COMMON_PREFIX

load_dotenv()

DEFAULT_SEPARATOR = os.getenv("PATH_HELPER_SEPARATOR") or os.sep

RELATIVE_STRATEGY = os.getenv("PATH_HELPER_RELATIVE_STRATEGY", STRATEGY_COMMON_PREFIX).strip().lower()
if RELATIVE_STRATEGY not in RELATIVE_STRATEGIES:
    RELATIVE_STRATEGY = STRATEGY_COMMON_PREFIX

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"

# HTTP server
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", 8000))
