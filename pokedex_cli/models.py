"""Data types for the PokeAPI resources the Pokedex uses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _get(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"field {key!r} has the wrong type: {value!r}")
    if kind is list and not all(isinstance(item, Mapping) for item in value):
        raise ValueError(f"items of {key!r} must be objects")
    return value


@dataclass
class Stat:
    name: str = ""


@dataclass
class PokemonStat:
    stat: Stat = field(default_factory=Stat)
    base_stat: int = 0


@dataclass
class PokemonType:
    name: str = ""


@dataclass
class Pokemon:
    name: str = ""
    url: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Pokemon:
        """Build a Pokemon from a decoded PokeAPI JSON object."""
        return cls(
            name=_get(data, "name", str, ""),
            url=_get(data, "url", str, ""),
            base_experience=_get(data, "base_experience", int, 0),
            height=_get(data, "height", int, 0),
            weight=_get(data, "weight", int, 0),
            stats=[
                PokemonStat(
                    Stat(_get(_get(item, "stat", Mapping, {}), "name", str, "")),
                    _get(item, "base_stat", int, 0),
                )
                for item in _get(data, "stats", list, [])
            ],
            types=[
                PokemonType(_get(_get(item, "type", Mapping, {}), "name", str, ""))
                for item in _get(data, "types", list, [])
            ],
        )

    def details(self) -> str:
        """Return a human-readable description of the Pokemon."""
        lines = [
            f"Name: {self.name}",
            f"Height: {self.height * 10} cm",
            f"Weight: {int(self.weight / 10)} kg",
            "Stats:",
            *(f"  -{stat.stat.name}: {stat.base_stat}" for stat in self.stats),
            "Types:",
            *(f"  -{kind.name}" for kind in self.types),
        ]
        return "\n".join(lines)


@dataclass
class PokemonEncounter:
    pokemon: Pokemon = field(default_factory=Pokemon)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PokemonEncounter:
        """Build an encounter from a decoded PokeAPI JSON object."""
        return cls(Pokemon.from_dict(_get(data, "pokemon", Mapping, {})))


@dataclass
class LocationArea:
    id: int = 0
    url: str = ""
    name: str = ""
    game_index: int = 0
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LocationArea:
        """Build a location area from a decoded PokeAPI JSON object."""
        return cls(
            id=_get(data, "id", int, 0),
            url=_get(data, "url", str, ""),
            name=_get(data, "name", str, ""),
            game_index=_get(data, "game_index", int, 0),
            pokemon_encounters=[
                PokemonEncounter.from_dict(item)
                for item in _get(data, "pokemon_encounters", list, [])
            ],
        )


@dataclass
class LocationAreaList:
    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[LocationArea] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LocationAreaList:
        """Build a page of location areas from a decoded PokeAPI JSON object."""
        return cls(
            count=_get(data, "count", int, 0),
            next=_get(data, "next", str, None),
            previous=_get(data, "previous", str, None),
            results=[
                LocationArea.from_dict(item) for item in _get(data, "results", list, [])
            ],
        )