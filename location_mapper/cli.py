"""CLI entrypoint for the threat location mapper."""

import json
import logging
import sys
from typing import Optional

import maxminddb

from location_mapper.aggregator import aggregate_threat_sources
from location_mapper.config import PipelineConfig, load_config
from location_mapper.geolocation.base import GeoLocator
from location_mapper.geolocation.maxmind import MaxMindLocator
from location_mapper.loader import ThreatSourceError, load_threat_sources
from location_mapper.logging_setup import setup_logging
from location_mapper.writer import write_locations_csv

logger = logging.getLogger("location_mapper.cli")


def run_pipeline(config: PipelineConfig, locator: Optional[GeoLocator] = None) -> int:
    """
    Load threat sources, geolocate them, aggregate by location and write CSV.

    Any error raised here is fatal for the run. Sources that cannot be
    geolocated are skipped without error.

    Args:
        config: Run configuration
        locator: Geolocation database to use instead of opening
            ``config.geoip_db_path``; the caller keeps ownership

    Returns:
        Number of location rows written
    """
    sources = load_threat_sources(config.threat_sources_path)

    if locator is None:
        with MaxMindLocator(config.geoip_db_path) as db:
            locations = aggregate_threat_sources(sources, db, config.locale)
    else:
        locations = aggregate_threat_sources(sources, locator, config.locale)

    return write_locations_csv(locations, config.output_csv_path)


def main() -> None:
    """Main CLI entrypoint."""
    config = load_config()
    setup_logging(config.debug)

    try:
        run_pipeline(config)
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(2)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Malformed JSON in {config.threat_sources_path}: {e}")
        sys.exit(1)
    except ThreatSourceError as e:
        logger.error(f"Invalid threat source file {config.threat_sources_path}: {e}")
        sys.exit(1)
    except maxminddb.InvalidDatabaseError as e:
        logger.error(f"Invalid GeoIP database {config.geoip_db_path}: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(str(e))
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
