"""MaxMind GeoIP2/GeoLite2 City database lookups."""

import logging
from pathlib import Path
from typing import Union

import geoip2.database
import geoip2.errors
import maxminddb

from location_mapper.geolocation.base import GeoLocator, GeoLookupError
from location_mapper.models import CityRecord

logger = logging.getLogger("location_mapper.maxmind")


class MaxMindLocator(GeoLocator):
    """City lookups against a local ``.mmdb`` file."""

    def __init__(self, db_path: Union[str, Path]):
        """
        Open the database.

        Raises:
            FileNotFoundError: If the database file does not exist
            maxminddb.InvalidDatabaseError: If the file is not a MaxMind DB
        """
        self.db_path = Path(db_path)
        if not self.db_path.exists():
            raise FileNotFoundError(f"GeoIP database not found: {db_path}")

        self.reader = geoip2.database.Reader(str(self.db_path))
        logger.debug(
            f"Opened {self.reader.metadata().database_type} database {self.db_path}"
        )

    def lookup(self, address: str) -> CityRecord:
        """Look up an address in the City database."""
        try:
            response = self.reader.city(address)
        except geoip2.errors.AddressNotFoundError as e:
            raise GeoLookupError(f"{address} not found") from e
        except (maxminddb.InvalidDatabaseError, ValueError, TypeError) as e:
            raise GeoLookupError(f"Lookup failed for {address}: {e}") from e

        location = response.location
        return CityRecord(
            city_names=dict(response.city.names or {}),
            country_names=dict(response.country.names or {}),
            latitude=location.latitude if location else None,
            longitude=location.longitude if location else None,
        )

    def close(self) -> None:
        """Close the database reader."""
        self.reader.close()
