"""CSV output of aggregated locations."""

import csv
import logging
from pathlib import Path
from typing import Mapping, Union

from location_mapper.models import CityAggregate, LocationKey

logger = logging.getLogger("location_mapper.writer")

CSV_HEADER = ["City Name", "Country Name", "Count", "Lat", "Lon"]


def write_locations_csv(
    locations: Mapping[LocationKey, CityAggregate],
    csv_path: Union[str, Path],
) -> int:
    """
    Write aggregated locations to CSV, replacing any existing file.

    The header row is always written, even with no locations.

    Args:
        locations: Mapping of location key to aggregate
        csv_path: Destination CSV path

    Returns:
        Number of data rows written
    """
    path = Path(csv_path)

    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(CSV_HEADER)

        for key, aggregate in locations.items():
            writer.writerow([
                aggregate.city_name,
                aggregate.country_name,
                str(aggregate.total_count),
                key.lat,
                key.lon,
            ])

    logger.info(f"Wrote {len(locations)} locations to {csv_path}")
    return len(locations)
