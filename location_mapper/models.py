"""Data models for threat source geolocation."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ThreatSource:
    """A single threat source loaded from the input document."""

    index: int
    source: str
    count: int


@dataclass
class CityRecord:
    """Raw city lookup result. Any part may be missing."""

    city_names: dict[str, str] = field(default_factory=dict)
    country_names: dict[str, str] = field(default_factory=dict)
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass
class GeoLocation:
    """A fully resolved location for one threat source."""

    city_name: str
    country_name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class LocationKey:
    """Grouping key: latitude and longitude as fixed-precision strings."""

    lat: str
    lon: str


@dataclass
class CityAggregate:
    """Aggregated threat count for one location.

    The names are taken from the first source seen at the location and are
    never updated afterwards.
    """

    city_name: str
    country_name: str
    total_count: int = 0
