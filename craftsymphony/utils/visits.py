import json
import logging
import os

from flask import current_app

logger = logging.getLogger(__name__)


def _visits_file():
    return current_app.config["VISITS_FILE"]


def read_count():
    path = _visits_file()
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        if not os.path.exists(path):
            write_count(0)
            return 0
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        count = data.get("count") if isinstance(data, dict) else None
        return count if isinstance(count, int) and not isinstance(count, bool) else 0
    except (OSError, ValueError) as exc:
        logger.error("Could not read visits file %s: %s", path, exc)
        return 0


def write_count(count):
    path = _visits_file()
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"count": count}, f, indent=2)
    except OSError as exc:
        logger.error("Could not write visits file %s: %s", path, exc)


def register_visit():
    """Increment the persisted counter. Read-then-write, no locking."""
    current = read_count()
    count = current + 1
    write_count(count)
    logger.debug("Visit %s -> %s", current, count)
    return count
