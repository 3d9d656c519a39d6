"""Base class for IP geolocation sources."""

from abc import ABC, abstractmethod

from location_mapper.models import CityRecord


class GeoLookupError(Exception):
    """A single address could not be looked up."""


class GeoLocator(ABC):
    """Base class for read-only IP to city lookups."""

    @abstractmethod
    def lookup(self, address: str) -> CityRecord:
        """
        Look up the city record for an IP address.

        Args:
            address: A valid IPv4 or IPv6 address string

        Returns:
            City record; any part of it may be missing

        Raises:
            GeoLookupError: If the address is not found or the lookup fails
        """
        ...

    def close(self) -> None:
        """Release the underlying database, if any."""

    def __enter__(self) -> "GeoLocator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
