"""Pytest configuration and shared fixtures."""

import json

import pytest

from location_mapper.geolocation.base import GeoLocator, GeoLookupError
from location_mapper.models import CityRecord


class StubLocator(GeoLocator):
    """In-memory geolocation database.

    ``records`` maps an address to a CityRecord, an exception to raise, or a
    list of CityRecords returned one per call (the last one repeats).
    """

    def __init__(self, records=None):
        self.records = dict(records or {})
        self.calls: list[str] = []
        self.closed = False

    def lookup(self, address):
        self.calls.append(address)
        entry = self.records.get(address)
        if entry is None:
            raise GeoLookupError(f"{address} not found")
        if isinstance(entry, Exception):
            raise entry
        if isinstance(entry, list):
            return entry.pop(0) if len(entry) > 1 else entry[0]
        return entry

    def close(self):
        self.closed = True


def make_record(city="Mountain View", country="United States", lat=37.40599, lon=-122.07845):
    """Create a CityRecord with English names; pass None to leave a part out."""
    return CityRecord(
        city_names={"en": city} if city is not None else {},
        country_names={"en": country} if country is not None else {},
        latitude=lat,
        longitude=lon,
    )


@pytest.fixture
def stub_locator():
    """Stub locator resolving Google DNS and a few other addresses."""
    return StubLocator({
        "8.8.8.8": make_record(),
        "8.8.4.4": make_record(),
        "2001:4860:4860::8888": make_record(),
        "1.1.1.1": make_record("Sydney", "Australia", -33.8688, 151.209),
        "9.9.9.9": make_record("Berkeley", "United States", 37.8716, -122.2727),
    })


@pytest.fixture
def write_threat_sources(tmp_path):
    """Return a helper that writes threat_sources.json into tmp_path."""

    def _write(counts, sources, path=None):
        path = path or tmp_path / "threat_sources.json"
        document = {"Threat Sources": {"Count": counts, "Source": sources}}
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
