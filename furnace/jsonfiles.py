"""Reading JSON documents from disk."""

from __future__ import annotations

import json
import os
from typing import Any

from furnace.logs import LogManager, get_log_manager

STATUS_KEY = "read_json_status"
FILE_NOT_EXISTS = "file_not_exists"
FILE_READ_ERROR = "file_read_error"
FILE_PARSE_ERROR = "file_parse_error"


def read_json_file(path: str | os.PathLike[str], log: LogManager | None = None) -> Any:
    """Read and parse the JSON file at ``path``.

    On failure the problem is logged and a mapping holding a single
    ``read_json_status`` entry is returned in place of the document.
    """
    log = log if log is not None else get_log_manager()
    name = os.fspath(path)

    if not os.path.exists(name):
        log.warn(f"Json file ({name}) not exists")
        return {STATUS_KEY: FILE_NOT_EXISTS}

    try:
        with open(name, encoding="utf-8") as handle:
            text = handle.read()
    except UnicodeDecodeError:
        log.error(f"Json file ({name}) not parsable")
        return {STATUS_KEY: FILE_PARSE_ERROR}
    except OSError:
        log.warn(f"Json file ({name}) not readable")
        return {STATUS_KEY: FILE_READ_ERROR}

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        log.error(f"Json file ({name}) not parsable")
        return {STATUS_KEY: FILE_PARSE_ERROR}