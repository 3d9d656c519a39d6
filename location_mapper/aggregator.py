"""Threat count aggregation by rounded location."""

import logging
from typing import Iterable

from location_mapper.config import DISPLAY_LOCALE
from location_mapper.geolocation.base import GeoLocator
from location_mapper.geolocation.resolver import resolve
from location_mapper.models import CityAggregate, GeoLocation, LocationKey, ThreatSource

logger = logging.getLogger("location_mapper.aggregator")

# Decimal places kept in the grouping key (~1 m at the equator)
COORDINATE_PRECISION = 5


def location_key(latitude: float, longitude: float) -> LocationKey:
    """
    Build the grouping key for a coordinate pair.

    Each value is formatted with Python's fixed-point formatter, which rounds
    the exact binary value to the nearest decimal and breaks exact ties to
    even (40.015625 -> "40.01562", 40.046875 -> "40.04688").

    Args:
        latitude: Latitude in degrees
        longitude: Longitude in degrees

    Returns:
        LocationKey with both values as strings
    """
    return LocationKey(
        lat=f"{latitude:.{COORDINATE_PRECISION}f}",
        lon=f"{longitude:.{COORDINATE_PRECISION}f}",
    )


def aggregate_locations(
    resolved: Iterable[tuple[GeoLocation, int]],
) -> dict[LocationKey, CityAggregate]:
    """
    Sum counts per rounded location.

    The first location seen for a key fixes the city and country names; later
    ones only add to the count, even when their names differ.

    Args:
        resolved: (location, count) pairs in processing order

    Returns:
        Mapping of location key to aggregate. Iteration order is not part of
        the contract.
    """
    locations: dict[LocationKey, CityAggregate] = {}

    for location, count in resolved:
        key = location_key(location.latitude, location.longitude)
        aggregate = locations.get(key)
        if aggregate is None:
            locations[key] = CityAggregate(
                city_name=location.city_name,
                country_name=location.country_name,
                total_count=count,
            )
        else:
            aggregate.total_count += count

    return locations


def aggregate_threat_sources(
    sources: Iterable[ThreatSource],
    locator: GeoLocator,
    locale: str = DISPLAY_LOCALE,
) -> dict[LocationKey, CityAggregate]:
    """
    Resolve every threat source and aggregate the ones that resolve.

    Args:
        sources: Threat sources in index order
        locator: Geolocation database
        locale: Locale key for the display names

    Returns:
        Mapping of location key to aggregate
    """

    def _resolved():
        for source in sources:
            location = resolve(source, locator, locale)
            if location is not None:
                yield location, source.count

    locations = aggregate_locations(_resolved())
    logger.debug(f"Aggregated threat sources into {len(locations)} locations")
    return locations
