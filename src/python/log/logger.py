import pathlib
import sys
from datetime import datetime, timezone
from typing import BinaryIO, Optional

_LOG_DIRECTORY = pathlib.Path.home() / ".drivekit" / "logs"


class Logger:
    """A simple class for logging. The log file is opened on the first write so that
    importing a module that logs has no side effects.
    """

    def __init__(self, log_directory: pathlib.Path = _LOG_DIRECTORY) -> None:
        self._log_directory = log_directory
        self._log_file: Optional[BinaryIO] = None

    @property
    def file_path(self) -> pathlib.Path:
        filepath = pathlib.Path(sys.argv[0])
        # If sys.argv returns an empty string e.g. when in a python3 shell, we assign a
        # generic filename.
        filename = filepath.stem if filepath.stem else "unknown"
        return (self._log_directory / filename).with_suffix(".log")

    def _open_log_file(self) -> BinaryIO:
        self._log_directory.mkdir(parents=True, exist_ok=True)
        return open(self.file_path, "ab", buffering=0)

    def debug(self, msg: str) -> None:
        self._write_to_log("DEBUG", msg)

    def info(self, msg: str) -> None:
        self._write_to_log("INFO", msg)

    def error(self, msg: str) -> None:
        self._write_to_log("ERROR", msg)

    def warning(self, msg: str) -> None:
        self._write_to_log("WARNING", msg)

    def set_log_directory(self, log_directory: pathlib.Path) -> None:
        """Points future writes at a new directory, closing the current file."""
        self.close()
        self._log_directory = log_directory

    def close(self) -> None:
        if self._log_file is not None:
            self._log_file.close()
            self._log_file = None

    def _write_to_log(self, level: str, msg: str) -> None:
        if self._log_file is None:
            self._log_file = self._open_log_file()

        log_str = f"{_iso_time()} {level.upper()}: {msg}\n"
        self._log_file.write(log_str.encode("utf-8"))


def _iso_time() -> str:
    """Current timestamp as a string."""
    return datetime.now(tz=timezone.utc).isoformat()
