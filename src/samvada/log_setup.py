# src/samvada/log_setup.py

import logging
import sys
from pathlib import Path

DEFAULT_LOG_FILE = "samvada.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_path_for(file_path: str | Path | None) -> Path:
    """`notes/chat.md` logs to `notes/chat.log`; no file logs to `samvada.log`."""
    if file_path is None:
        return Path(DEFAULT_LOG_FILE)
    path = Path(file_path)
    return path.with_name(f"{path.stem}.log")


def setup_logging(file_path: str | Path | None = None, verbose: bool = False) -> Path:
    """Send DEBUG records of this run to a log file next to the chat file.

    Returns:
        Path of the log file.
    """
    log_path = log_path_for(file_path)
    handlers: list[logging.Handler] = [logging.FileHandler(log_path, mode="w", encoding="utf-8")]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=logging.DEBUG,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
    # keep SDK transport chatter out of chat logs
    for name in ("httpx", "httpcore", "openai"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug("Logging to %s", log_path)
    return log_path
