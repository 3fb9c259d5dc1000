"""Line-oriented readers for the word list and number list."""
from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_lines(path: str | Path, *, skip_blank: bool = False) -> list[str]:
    """Read ``path`` fully and return its decoded lines.

    Lines are split on ``\\n`` with one trailing ``\\r`` removed, and each line
    is decoded as UTF-8 on its own so a single bad line is skipped instead of
    failing the whole file. ``OSError`` from opening or reading propagates.
    """
    data = Path(path).read_bytes()
    raw_lines = data.split(b"\n")
    if raw_lines and raw_lines[-1] == b"":
        raw_lines.pop()

    lines: list[str] = []
    skipped = 0
    for index, raw in enumerate(raw_lines, start=1):
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            skipped += 1
            logger.debug("Skipping undecodable line", extra={"path": str(path), "line": index})
            continue
        if skip_blank and not line:
            continue
        lines.append(line)

    if skipped:
        logger.debug("Skipped %d undecodable line(s) in %s", skipped, path)
    return lines
