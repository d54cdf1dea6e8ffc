"""Random line selection for the exclamation and quote resources."""

from __future__ import annotations

import json
import logging
import os
import random
from pathlib import Path
from typing import Iterable, List, Optional

__all__ = [
    "LineSourceError",
    "random_line",
    "random_line_of_file",
    "resolve_strings_dir",
    "available_resources",
    "random_exclamation",
    "random_quote",
]

LOGGER = logging.getLogger(__name__)

DEFAULT_STRINGS_DIR = Path(__file__).resolve().parent / "strings"
EXCLAMATIONS_FILENAME = "exclamations.txt"
QUOTES_FILENAME = "quotes.txt"
RESOURCE_FILENAMES = (EXCLAMATIONS_FILENAME, QUOTES_FILENAME)


class LineSourceError(RuntimeError):
    """Raised when a text resource cannot be read."""


def random_line(lines: Iterable[str], rng: Optional[random.Random] = None) -> Optional[str]:
    """Pick one line of *lines* uniformly at random in a single pass.

    Line *i* (counting from zero) replaces the current pick with probability
    ``1 / (i + 1)``, so the source may be a stream of unknown length.

    Returns
    -------
    str or None
        The chosen line, or ``None`` when *lines* is empty.
    """

    draw = rng.random if rng is not None else random.random
    chosen: Optional[str] = None
    for index, line in enumerate(lines):
        if draw() < 1.0 / (index + 1):
            chosen = line
    return chosen


def random_line_of_file(path: Path, rng: Optional[random.Random] = None) -> Optional[str]:
    """Stream the file at *path* and return a random line without its newline."""

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            line = random_line(handle, rng)
    except (OSError, UnicodeDecodeError) as exc:
        raise LineSourceError(f"Failed to read lines from '{path}': {exc}") from exc
    if line is None:
        LOGGER.warning(json.dumps({"event": "empty_line_source", "path": str(path)}))
        return None
    return line.rstrip("\r\n")


def resolve_strings_dir() -> Path:
    """Directory holding the text resources, honouring ``MOONPHASE_STRINGS_DIR``."""

    override = os.environ.get("MOONPHASE_STRINGS_DIR")
    if override:
        return Path(override).expanduser()
    return DEFAULT_STRINGS_DIR


def available_resources(strings_dir: Optional[Path] = None) -> List[str]:
    """Names of the expected resource files present in *strings_dir*.

    Raises
    ------
    LineSourceError
        If the directory does not exist.
    """

    directory = Path(strings_dir) if strings_dir is not None else resolve_strings_dir()
    if not directory.is_dir():
        raise LineSourceError(f"Strings directory not found: {directory}")
    return [name for name in RESOURCE_FILENAMES if (directory / name).is_file()]


def _resource_path(filename: str, strings_dir: Optional[Path]) -> Path:
    directory = Path(strings_dir) if strings_dir is not None else resolve_strings_dir()
    return directory / filename


def random_exclamation(
    strings_dir: Optional[Path] = None, rng: Optional[random.Random] = None
) -> Optional[str]:
    return random_line_of_file(_resource_path(EXCLAMATIONS_FILENAME, strings_dir), rng)


def random_quote(
    strings_dir: Optional[Path] = None, rng: Optional[random.Random] = None
) -> Optional[str]:
    return random_line_of_file(_resource_path(QUOTES_FILENAME, strings_dir), rng)
