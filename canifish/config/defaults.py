"""Default location for the fishing check."""

from canifish.config.schema import LocationConfig

DEFAULT_LOCATION = LocationConfig(
    name="Norah Head",
    latitude=-33.28225,
    longitude=151.57825,
)
