"""The commands the Pokedex prompt understands."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

from .catch import create_tension, try_catch
from .client import Client
from .pokedex import Pokedex


class CommandError(Exception):
    """Raised when a command cannot be carried out as given."""


@dataclass
class Config:
    """State shared by the commands across one session."""

    client: Client
    pokedex: Pokedex = field(default_factory=Pokedex)
    next_page_url: Optional[str] = None
    previous_page_url: Optional[str] = None
    out: TextIO = field(default_factory=lambda: sys.stdout)
    rng: Optional[object] = None
    tension_delay: float = 0.5

    def say(self, text: str = "") -> None:
        print(text, file=self.out)


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    callback: Callable[[Config, str], None]


def get_commands() -> dict[str, Command]:
    """Return every command, keyed by the word that starts it."""
    return {
        "help": Command(
            "help", "Print the instructions of Pokedex", command_help
        ),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
        "map": Command(
            "map",
            "Display next 20 location areas. Use multiple times to view more areas",
            command_map_forward,
        ),
        "mapb": Command(
            "mapb",
            "Display previous 20 locations areas. Use multiple times to view more areas",
            command_map_back,
        ),
        "explore": Command(
            "explore {location name}",
            "Explore the Pokemons in the location area (e.g 'canalave-city-area')",
            command_explore,
        ),
        "catch": Command(
            "catch {pokemon name}",
            "Try to catch pokemon by their name (e.g 'wartortle')",
            command_catch,
        ),
        "list": Command("list", "List all caught Pokemons in Pokedex", command_list),
        "inspect": Command(
            "inspect {pokemon name}",
            "Inspect the properties of a Pokemon",
            command_inspect,
        ),
    }


def command_exit(config: Config, argument: str) -> None:
    """Say goodbye and end the program."""
    config.say("Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def command_help(config: Config, argument: str) -> None:
    """Print the usage of every command."""
    config.say("Welcome to the Pokedex!")
    config.say("Usage")
    config.say()
    for command in get_commands().values():
        config.say(f"{command.name}: {command.description}")


def _show_page(config: Config, page_url: Optional[str]) -> None:
    page = config.client.list_location_areas(page_url)
    config.next_page_url = page.next
    config.previous_page_url = page.previous
    for area in page.results:
        config.say(area.name)


def command_map_forward(config: Config, argument: str) -> None:
    """Print the next page of location areas."""
    _show_page(config, config.next_page_url)


def command_map_back(config: Config, argument: str) -> None:
    """Print the previous page of location areas."""
    if config.previous_page_url is None:
        config.say("Can't move back. You are on first page!")
        raise CommandError("unable to move back, there is no previous page")
    _show_page(config, config.previous_page_url)


def command_explore(config: Config, argument: str) -> None:
    """Print the Pokemon that can be met in a location area."""
    if not argument:
        raise CommandError("location area name is missing")
    area = config.client.get_location_area(argument)
    config.say(f"Pokemons in {area.name}:")
    for number, encounter in enumerate(area.pokemon_encounters, start=1):
        config.say(f"{number}. {encounter.pokemon.name}")


def command_catch(config: Config, argument: str) -> None:
    """Throw a Pokeball at a Pokemon and add it to the Pokedex if it is caught."""
    if not argument:
        raise CommandError("pokemon name is missing")
    config.say(f"Throwing a Pokeball at {argument}...")
    pokemon = config.client.get_pokemon(argument)

    create_tension(config.out, delay=config.tension_delay)

    if try_catch(pokemon.base_experience, config.rng):
        config.pokedex.add(pokemon)
        config.say(f"{pokemon.name} was caught!")
        config.say("You can now inspect it's details by using the 'inspect' command")
    else:
        config.say(f"{pokemon.name} escaped!")


def command_list(config: Config, argument: str) -> None:
    """Print every caught Pokemon."""
    caught = config.pokedex.list()
    if not caught:
        config.say("No Pokemons in Pokedex")
        return
    config.say("Pokemons in Pokedex:")
    for number, pokemon in enumerate(caught, start=1):
        config.say(f"{number}. {pokemon.name}")


def command_inspect(config: Config, argument: str) -> None:
    """Print the details of a caught Pokemon."""
    if not argument:
        raise CommandError("pokemon name is missing")
    pokemon = config.pokedex.get(argument)
    if pokemon is None:
        config.say(f"You haven't caught Pokemon: {argument}")
        return
    config.say(pokemon.details())