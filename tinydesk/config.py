import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

SHOW_NAME = "Tiny Desk Concerts"

ARCHIVE_URL = os.environ.get(
    "TINYDESK_ARCHIVE_URL", "https://www.npr.org/series/tiny-desk-concerts/archive"
)
ARCHIVE_MAX_PAGES = int(os.environ.get("TINYDESK_ARCHIVE_MAX_PAGES", "20"))
ARCHIVE_DELAY = float(os.environ.get("TINYDESK_ARCHIVE_DELAY", "0"))

REQUEST_TIMEOUT = float(os.environ.get("TINYDESK_REQUEST_TIMEOUT", "30"))
STRICT_STATUS = os.environ.get("TINYDESK_STRICT_STATUS", "false").lower() == "true"

OUTPUT_DIR = Path(os.environ.get("TINYDESK_OUTPUT_DIR", "."))
OUTPUT_SUFFIX = "_info.json"

LOG_PATH = Path(os.environ["TINYDESK_LOG_PATH"]) if os.environ.get("TINYDESK_LOG_PATH") else None
LOG_RETENTION_DAYS = int(os.environ.get("TINYDESK_LOG_RETENTION_DAYS", "14"))
