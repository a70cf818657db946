"""Sample UK cities inserted when the cities table is empty."""
from typing import NamedTuple


class SeedCity(NamedTuple):
    name: str
    longitude: float
    latitude: float


SEED_CITIES: tuple[SeedCity, ...] = (
    SeedCity("Bristol", -2.5879, 51.4545),
    SeedCity("Bath", -2.3590, 51.3758),
    SeedCity("Exeter", -3.5339, 50.7184),
    SeedCity("Cardiff", -3.1746, 51.4816),
    SeedCity("Edinburgh", -3.1883, 55.9533),
    SeedCity("Leeds", -1.5491, 53.8008),
)
