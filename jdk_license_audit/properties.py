"""
Read Java runtime ``.properties`` dumps into raw runtime records.

The companion collector stores ``System.getProperty`` values for a fixed set
of ``java.*`` keys, writing ``unavailable`` for keys the runtime does not
define.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from tqdm import tqdm

from .builder import build_observation
from .models import RuntimeObservation


logger = logging.getLogger(__name__)

PROPERTY_KEYS = {
    "java.version": "version",
    "java.runtime.version": "runtimeVersion",
    "java.vm.version": "vmVersion",
    "java.vendor": "vendor",
    "java.vm.vendor": "vmVendor",
    "java.vendor.version": "vendorVersion",
    "java.version.date": "buildDate",
}
UNAVAILABLE = "unavailable"
# Placeholders here must not reach the license rules; other keys keep them.
OPTIONAL_KEYS = ("vendorVersion", "buildDate")
PROPERTIES_SUFFIX = ".properties"
# java.util.Properties reads and writes ISO 8859-1 by default.
PROPERTIES_ENCODING = "latin-1"

_ESCAPE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _unescape(value: str) -> str:
    def replace(match: "re.Match[str]") -> str:
        token = match.group(1)
        if len(token) == 5:
            return chr(int(token[1:], 16))
        return _SIMPLE_ESCAPES.get(token, token)
    text = _ESCAPE.sub(replace, value)
    # Characters outside the BMP are stored as two \uXXXX surrogate escapes.
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def _logical_lines(text: str) -> Iterable[str]:
    """Join backslash-continued lines and drop blanks and comments."""
    pending = None
    for raw in text.splitlines():
        line = raw.lstrip()
        if pending is None and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending is not None:
        yield pending


def _split_entry(line: str) -> Tuple[str, str]:
    index = 0
    while index < len(line):
        ch = line[index]
        if ch == "\\":
            index += 2
            continue
        if ch in "=:" or ch.isspace():
            break
        index += 1
    rest = line[index:].lstrip()
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip()
    return line[:index], rest


def parse_properties(text: str) -> Dict[str, str]:
    """Parse Java ``.properties`` text. Later duplicates override earlier keys."""
    properties = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        properties[_unescape(key)] = _unescape(value)
    return properties


def to_raw_record(properties: Mapping[str, str]) -> Dict[str, str]:
    """Map ``java.*`` property names to raw record keys.

    ``unavailable`` build dates and vendor versions are dropped so the
    license rules fall back as for missing data. Other fields keep the
    collector's value.
    """
    record = {}
    for prop, key in PROPERTY_KEYS.items():
        value = properties.get(prop)
        if value is None:
            continue
        if key in OPTIONAL_KEYS and value.strip().lower() == UNAVAILABLE:
            continue
        record[key] = value
    return record


def read_properties_file(path: Union[str, Path]) -> Dict[str, str]:
    """Read a runtime dump from disk and return its raw record."""
    text = Path(path).read_text(encoding=PROPERTIES_ENCODING)
    return to_raw_record(parse_properties(text))


def find_properties_files(paths: Sequence[Union[str, Path]]) -> List[Tuple[Path, str]]:
    """Expand files and directories into ``(path, source_name)`` pairs.

    Directories are searched recursively and their files named relative to
    the directory; explicitly listed files keep their file name.
    """
    found = []
    for entry in paths:
        entry = Path(entry)
        if entry.is_dir():
            for path in sorted(entry.rglob(f"*{PROPERTIES_SUFFIX}")):
                if path.is_file():
                    found.append((path, path.relative_to(entry).as_posix()))
        elif entry.is_file():
            found.append((entry, entry.name))
        else:
            logger.warning("Skipping %s: no such file or directory", entry)
    return found


def collect_observations(
    paths: Sequence[Union[str, Path]], progress: bool = True
) -> Tuple[List[RuntimeObservation], int]:
    """Classify every runtime dump under ``paths``.

    Returns:
        Tuple of (observations, number of files scanned). Files without a
        ``java.version`` are scanned but produce no observation.
    """
    files = find_properties_files(paths)
    observations = []
    for path, source_name in tqdm(files, desc="Reading runtime dumps", disable=not progress):
        try:
            record = read_properties_file(path)
        except OSError as e:
            logger.warning("Skipping %s: %s", path, e)
            continue
        observation = build_observation(record, source_name)
        if observation is not None:
            observations.append(observation)
    logger.info("Classified %d runtimes from %d files", len(observations), len(files))
    return observations, len(files)
