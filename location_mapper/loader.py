"""Threat source loader."""

import json
import logging
from pathlib import Path
from typing import Any, Union

from location_mapper.models import ThreatSource

logger = logging.getLogger("location_mapper.loader")

SECTION_KEY = "Threat Sources"
COUNT_KEY = "Count"
SOURCE_KEY = "Source"


# Counts are unsigned 32-bit values
MAX_COUNT = 2**32 - 1


class ThreatSourceError(ValueError):
    """The input document does not have the expected structure."""


def _is_count(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a count
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_COUNT


def parse_threat_sources(document: Any) -> list[ThreatSource]:
    """
    Extract threat sources from a decoded JSON document.

    The document must hold a "Threat Sources" object with two parallel arrays,
    "Count" and "Source". Element i of each belongs to the same source. IP
    strings are not checked here.

    Args:
        document: Decoded JSON value

    Returns:
        Threat sources in array order

    Raises:
        ThreatSourceError: If the structure is missing or malformed
    """
    if not isinstance(document, dict):
        raise ThreatSourceError("Threat source document must be a JSON object")

    section = document.get(SECTION_KEY)
    if section is None:
        raise ThreatSourceError(f"Missing '{SECTION_KEY}' section")
    if not isinstance(section, dict):
        raise ThreatSourceError(f"'{SECTION_KEY}' must be a JSON object")

    counts = section.get(COUNT_KEY)
    sources = section.get(SOURCE_KEY)
    for key, value in ((COUNT_KEY, counts), (SOURCE_KEY, sources)):
        if not isinstance(value, list):
            raise ThreatSourceError(f"'{SECTION_KEY}.{key}' must be an array")

    if len(counts) != len(sources):
        raise ThreatSourceError(
            f"'{COUNT_KEY}' has {len(counts)} entries but "
            f"'{SOURCE_KEY}' has {len(sources)}"
        )

    threat_sources: list[ThreatSource] = []
    for index, (count, source) in enumerate(zip(counts, sources)):
        if not _is_count(count):
            raise ThreatSourceError(
                f"Invalid count at index {index}: {count!r} "
                f"(expected an integer from 0 to {MAX_COUNT})"
            )
        if not isinstance(source, str):
            raise ThreatSourceError(
                f"Invalid source at index {index}: {source!r} (expected a string)"
            )
        threat_sources.append(ThreatSource(index=index, source=source, count=count))

    return threat_sources


def load_threat_sources(file_path: Union[str, Path]) -> list[ThreatSource]:
    """
    Read and parse the threat source file.

    Args:
        file_path: Path to the JSON input file

    Returns:
        Threat sources in array order

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        ThreatSourceError: If the document structure is wrong
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Threat source file not found: {file_path}")

    with path.open("r", encoding="utf-8") as f:
        document = json.load(f)

    threat_sources = parse_threat_sources(document)
    logger.info(f"Loaded {len(threat_sources)} threat sources from {file_path}")
    return threat_sources
