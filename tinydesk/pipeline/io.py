import json
import re
from datetime import datetime, timedelta
from pathlib import Path

from tinydesk import config
from tinydesk.errors import WriteError
from tinydesk.utils.text import sanitize_filename

LOG_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_ENTRY_RE = re.compile(r"\[(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\]")


def write_record(record, output_dir=None):
    """
    Save a concert record as <sanitized_artist>_info.json.
    Existing files with the same name are overwritten.
    Returns the path written.
    """
    directory = Path(output_dir) if output_dir is not None else config.OUTPUT_DIR
    path = directory / sanitize_filename(record.artist)

    try:
        directory.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(record.to_dict(), f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise WriteError(f"Failed to write JSON file {path}: {e}") from e

    return path


def save_run_log(log_path, log_lines, retention_days=None):
    """
    Rewrite the log file as its unexpired entries followed by this run's lines.
    Continuation lines (tracebacks, blank separators) live and die with the
    timestamped entry above them.
    """
    retention_days = config.LOG_RETENTION_DAYS if retention_days is None else retention_days
    cutoff = (datetime.utcnow() - timedelta(days=retention_days)).strftime(LOG_TIME_FORMAT)
    log_path = Path(log_path)

    try:
        kept = []
        if log_path.exists():
            keep = False
            with open(log_path, encoding="utf-8") as f:
                for line in f:
                    match = LOG_ENTRY_RE.match(line)
                    if match:
                        keep = match.group(1) >= cutoff
                    if keep:
                        kept.append(line)

        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "w", encoding="utf-8") as f:
            f.writelines(kept)
            f.write("\n--- New Run ---\n")
            f.writelines(line + "\n" for line in log_lines)
    except OSError as e:
        raise WriteError(f"Failed to write log file {log_path}: {e}") from e
