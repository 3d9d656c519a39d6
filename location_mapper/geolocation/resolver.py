"""Resolve threat sources to city locations."""

from typing import Optional

import validators

from location_mapper.config import DISPLAY_LOCALE
from location_mapper.geolocation.base import GeoLocator, GeoLookupError
from location_mapper.models import GeoLocation, ThreatSource


def parse_ip(value: str) -> Optional[str]:
    """
    Check that a source string is a single IPv4 or IPv6 address.

    Networks in CIDR notation and IPv6 zone IDs (fe80::1%eth0) are rejected.

    Returns:
        The address string, or None if it is not an IP address
    """
    if "%" in value:
        return None
    if validators.ipv4(value, cidr=False) or validators.ipv6(value, cidr=False):
        return value
    return None


def resolve(
    source: ThreatSource,
    locator: GeoLocator,
    locale: str = DISPLAY_LOCALE,
) -> Optional[GeoLocation]:
    """
    Resolve one threat source to a city location.

    A source is skipped (None) when its IP does not parse, the lookup fails,
    or the record lacks a city name, a country name, a latitude or a
    longitude. Skips are silent: no logging and no error.

    Args:
        source: The threat source to resolve
        locator: Geolocation database
        locale: Locale key for the display names

    Returns:
        Resolved location, or None if the source is skipped
    """
    address = parse_ip(source.source)
    if address is None:
        return None

    try:
        record = locator.lookup(address)
    except GeoLookupError:
        return None

    city_name = record.city_names.get(locale)
    country_name = record.country_names.get(locale)
    if city_name is None or country_name is None:
        return None
    if record.latitude is None or record.longitude is None:
        return None

    return GeoLocation(
        city_name=city_name,
        country_name=country_name,
        latitude=record.latitude,
        longitude=record.longitude,
    )
