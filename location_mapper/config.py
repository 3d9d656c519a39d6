"""Configuration loader for the location mapper."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

THREAT_SOURCES_FILE = "threat_sources.json"
GEOIP_DATABASE_FILE = os.path.join("geoip2", "city.mmdb")
LOCATIONS_CSV_FILE = "locations.csv"
DISPLAY_LOCALE = "en"


def _bool_from_str(value: str, default: bool = False) -> bool:
    """Convert string to boolean."""
    return value.lower() in ("true", "1", "yes") if value else default


@dataclass
class PipelineConfig:
    """Paths and settings for a single mapper run."""

    threat_sources_path: Path = Path(THREAT_SOURCES_FILE)
    geoip_db_path: Path = Path(GEOIP_DATABASE_FILE)
    output_csv_path: Path = Path(LOCATIONS_CSV_FILE)

    # Locale key used for city and country display names
    locale: str = DISPLAY_LOCALE

    debug: bool = False


def load_config(base_dir: Optional[Union[str, Path]] = None) -> PipelineConfig:
    """
    Build the run configuration.

    File names are fixed; they are resolved against ``base_dir`` when given,
    otherwise against the current working directory.

    Args:
        base_dir: Directory holding the input, database and output files

    Returns:
        Populated PipelineConfig
    """
    root = Path(base_dir) if base_dir is not None else Path.cwd()

    return PipelineConfig(
        threat_sources_path=root / THREAT_SOURCES_FILE,
        geoip_db_path=root / GEOIP_DATABASE_FILE,
        output_csv_path=root / LOCATIONS_CSV_FILE,
        locale=DISPLAY_LOCALE,
        debug=_bool_from_str(os.environ.get("LOCATION_MAPPER_DEBUG", "")),
    )
