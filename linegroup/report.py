from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, Iterator, Optional

from .record_data import GroupingResult

logger = logging.getLogger(__name__)


def render_report(result: GroupingResult) -> Iterator[str]:
    yield f"Total groups: {result.total_groups}"
    yield f"Total groups with size over 1: {result.groups_over_one}"
    for number, lines in result:
        yield f"Group №{number}"
        yield from lines


class ReportWriter:
    """Line sink over stdout or a file.

    Failed writes are logged and counted, never raised, so one bad write
    does not lose the lines after it.
    """

    def __init__(self, path: str | Path | None = None, *, stream: Optional[IO[str]] = None,
                 encoding: str = "utf-8"):
        self.path = Path(path) if path is not None else None
        self.failures = 0
        self._owned = False
        self._stream = stream
        if self.path is not None:
            self._open(encoding)
        elif self._stream is None:
            self._stream = sys.stdout

    def _open(self, encoding: str) -> None:
        created = not self.path.exists()
        try:
            self._stream = open(self.path, "w", encoding=encoding)
        except OSError as e:
            self.failures += 1
            logger.error("An error occurred opening %s: %s, writing to stdout", self.path, e)
            self._stream = sys.stdout
            return
        self._owned = True
        if created:
            logger.info("Created %s", self.path)

    def write_line(self, line: str) -> bool:
        try:
            self._stream.write(line + "\n")
        except (OSError, ValueError) as e:
            self.failures += 1
            logger.error("An error occurred during writing: %s", e)
            return False
        return True

    def close(self) -> None:
        if not self._owned:
            return
        self._owned = False
        try:
            self._stream.close()
        except (OSError, ValueError) as e:
            self.failures += 1
            logger.error("An error occurred closing %s: %s", self.path, e)

    def __enter__(self) -> ReportWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def write_report(result: GroupingResult, writer: ReportWriter) -> int:
    """Write the rendered report line by line.

    Returns:
        int: Number of failed writes on the sink so far.
    """
    for line in render_report(result):
        writer.write_line(line)
    return writer.failures
