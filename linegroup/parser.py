from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List
import pandas as pd

from .errors import InputUnavailableError, ParseError
from .record_data import Record

logger = logging.getLogger(__name__)

LINE_PATTERN = r'(?P<f0>".*");(?P<f1>".*");(?P<f2>".*")'


def parse_lines(lines: Iterable[str]) -> List[Record]:
    """Parse all lines, dropping the malformed ones.

    A line is kept only when LINE_PATTERN matches it whole; partial matches
    are dropped. Accepted lines get contiguous origin indices in input order; rejected
    lines consume none.
    """
    raw = pd.Series([line.rstrip("\r\n") for line in lines], dtype=object)
    accepted = raw.str.fullmatch(LINE_PATTERN).astype(bool)

    rejected = (raw.index[~accepted.to_numpy()] + 1).tolist()
    if rejected:
        logger.debug("Rejected %d malformed lines: %s", len(rejected), rejected)

    fields = raw[accepted].str.extract(LINE_PATTERN)
    records = [
        Record(i, (row.f0, row.f1, row.f2))
        for i, row in enumerate(fields.itertuples(index=False))
    ]
    logger.debug("Accepted %d of %d lines", len(records), len(raw))
    return records


def read_records(path: str | Path, *, encoding: str = "utf-8") -> List[Record]:
    path = Path(path)
    if not path.is_file():
        raise InputUnavailableError("Input file does not exist", path=str(path))
    try:
        with open(path, "r", encoding=encoding) as fh:
            lines = list(fh)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise ParseError(f"Failed to read input: {e}", path=str(path), cause=e)
    return parse_lines(lines)
