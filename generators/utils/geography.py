"""Location labels used by the synthetic transaction source."""

import random
from typing import NamedTuple


class Location(NamedTuple):
    city: str
    country_code: str

    @property
    def label(self) -> str:
        return f"{self.city}, {self.country_code}"


HOME_LOCATIONS = [
    Location("Boston", "US"),
    Location("Miami", "US"),
    Location("New York", "US"),
    Location("Chicago", "US"),
    Location("Atlanta", "US"),
    Location("Los Angeles", "US"),
    Location("Seattle", "US"),
    Location("Toronto", "CA"),
]

FOREIGN_LOCATIONS = [
    Location("Lagos", "NG"),
    Location("Bucharest", "RO"),
    Location("Manila", "PH"),
    Location("Sao Paulo", "BR"),
    Location("Jakarta", "ID"),
    Location("Kyiv", "UA"),
]


def random_home_location(rng: random.Random) -> Location:
    return rng.choice(HOME_LOCATIONS)


def random_foreign_location(rng: random.Random, exclude: set[str] | None = None) -> Location:
    choices = [loc for loc in FOREIGN_LOCATIONS if loc.label not in (exclude or set())]
    return rng.choice(choices or FOREIGN_LOCATIONS)
