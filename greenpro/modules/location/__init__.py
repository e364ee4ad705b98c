"""Location module: country/state reference lookups and plant location checks."""

from greenpro.modules.location.matchers import STATE_COUNTRY_MATCHERS, StateCountryMatcher
from greenpro.modules.location.service import LocationService, LocationValidator

__all__ = [
    "STATE_COUNTRY_MATCHERS",
    "LocationService",
    "LocationValidator",
    "StateCountryMatcher",
]
