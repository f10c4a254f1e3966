"""Plant data loaded from JSON, and the growth of plants over time."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

CARROT = "Carrot"
"""Plant type identifier of carrots."""

PLANT_DATA_PATH = "plant_data.json"
"""Asset path the plant data is read from."""

_CARROT_START_BIOMASS = 10
_TICK_SECONDS = 5
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _number(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"{what} is out of range: {value}")
    return value


@dataclass(frozen=True)
class PlantItem:
    """One plant entry of the plant data file."""

    name: str
    growth_per_tick_in_grams: int
    growth_stages_biomass_limits_in_grams: tuple[int, ...]

    @classmethod
    def from_dict(cls, raw: object) -> PlantItem:
        """Build an item from its decoded JSON object; limits become sorted and unique."""
        if not isinstance(raw, Mapping):
            raise ValueError(f"plant entry must be an object, got {raw!r}")
        try:
            name = raw["name"]
            growth = raw["growth_per_tick_in_grams"]
            limits = raw["growth_stages_biomass_limits_in_grams"]
        except KeyError as missing:
            raise ValueError(f"plant entry is missing field {missing}") from None
        if not isinstance(name, str):
            raise ValueError(f"plant name must be a string, got {name!r}")
        if not isinstance(limits, list):
            raise ValueError(f"growth stage limits must be a list, got {limits!r}")
        stages = {_number(limit, "growth stage limit") for limit in limits}
        return cls(
            name=name,
            growth_per_tick_in_grams=_number(growth, "growth per tick"),
            growth_stages_biomass_limits_in_grams=tuple(sorted(stages)),
        )


@dataclass
class PlantData:
    """Growth rate and growth stage limits of every known plant type."""

    growth_per_tick_in_grams: dict[str, int] = field(default_factory=dict)
    growth_stages_biomass_limits_in_grams: dict[str, tuple[int, ...]] = field(
        default_factory=dict
    )

    def load_json(self, text: str | bytes) -> list[PlantItem]:
        """Add the plants described by a plant data document; return the items read.

        Entries for an already known plant replace its previous values.
        """
        try:
            document = json.loads(text)
        except json.JSONDecodeError as error:
            raise ValueError(f"invalid plant data: {error}") from error
        if not isinstance(document, Mapping) or "plants" not in document:
            raise ValueError("plant data must be an object with a 'plants' list")
        plants = document["plants"]
        if not isinstance(plants, list):
            raise ValueError("'plants' must be a list")
        items = [PlantItem.from_dict(raw) for raw in plants]
        for item in items:
            self.growth_per_tick_in_grams[item.name] = item.growth_per_tick_in_grams
            self.growth_stages_biomass_limits_in_grams[item.name] = (
                item.growth_stages_biomass_limits_in_grams
            )
        return items


@dataclass(order=True)
class Plant:
    """A growing plant and its current biomass."""

    biomass_in_grams: int
    plant_type: str


def new_carrot() -> Plant:
    """A freshly planted carrot."""
    return Plant(biomass_in_grams=_CARROT_START_BIOMASS, plant_type=CARROT)


def growth_ticks(delta_secs: float, elapsed_secs: float) -> int:
    """Number of growth ticks due in a frame.

    One tick falls on every whole second divisible by five, plus one for each
    full five seconds the frame itself lasted.
    """
    missed = int(int(delta_secs) / _TICK_SECONDS)
    on_tick = 1 if int(elapsed_secs) % _TICK_SECONDS == 0 else 0
    return on_tick + missed


def grow_plants(
    plants: Iterable[Plant],
    plant_data: PlantData,
    delta_secs: float,
    elapsed_secs: float,
) -> None:
    """Grow each plant by its rate, up to its last growth stage, when a tick is due."""
    if growth_ticks(delta_secs, elapsed_secs) <= 0:
        return
    for plant in plants:
        limits = plant_data.growth_stages_biomass_limits_in_grams.get(plant.plant_type)
        max_biomass = max(limits) if limits else None
        growth = plant_data.growth_per_tick_in_grams.get(plant.plant_type)
        if growth is None or max_biomass is None:
            continue
        if plant.biomass_in_grams < max_biomass:
            plant.biomass_in_grams = min(plant.biomass_in_grams + growth, max_biomass)