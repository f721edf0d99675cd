from __future__ import annotations

import json
import pathlib
import time

# Default location of the run log
LOG_PATH = pathlib.Path("logs") / "life.log"


def log_event(event: str, *, log_file: pathlib.Path | str | None = LOG_PATH, **fields) -> None:
    """Append one record of a run event to the log file.

    Each line is a JSON object with the keys:
      - ts: ISO timestamp (UTC)
      - event: short event name (start, finish, error, interrupted)
      - any extra keyword fields passed by the caller
    An empty or None `log_file` disables logging.
    """
    if not log_file:
        return
    log_file = pathlib.Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    entry = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "event": event,
        **fields,
    }
    with log_file.open("a", encoding="utf-8") as fp:
        fp.write(json.dumps(entry, ensure_ascii=False, default=str) + "\n")
