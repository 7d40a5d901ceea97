import io

import pytest

from pokedex_cli.client import PokeApiError
from pokedex_cli.commands import (
    CommandError,
    Config,
    command_catch,
    command_exit,
    command_explore,
    command_help,
    command_inspect,
    command_list,
    command_map_back,
    command_map_forward,
    get_commands,
)
from pokedex_cli.models import (
    LocationArea,
    LocationAreaList,
    Pokemon,
    PokemonEncounter,
)
from pokedex_cli.pokedex import Pokedex

PAGE_ONE = "https://pokeapi.co/api/v2/location-area"
PAGE_TWO = "https://pokeapi.co/api/v2/location-area?offset=20&limit=20"


class FakeClient:
    def __init__(self):
        self.requested_pages = []
        self.pages = {
            None: LocationAreaList(
                count=2,
                next=PAGE_TWO,
                previous=None,
                results=[LocationArea(name="canalave-city-area")],
            ),
            PAGE_TWO: LocationAreaList(
                count=2,
                next=None,
                previous=PAGE_ONE,
                results=[LocationArea(name="mt-coronet-1f")],
            ),
            PAGE_ONE: LocationAreaList(
                count=2,
                next=PAGE_TWO,
                previous=None,
                results=[LocationArea(name="canalave-city-area")],
            ),
        }
        self.pokemon = {
            "wartortle": Pokemon(name="wartortle", base_experience=142),
            "mewtwo": Pokemon(name="mewtwo", base_experience=400),
        }

    def list_location_areas(self, page_url=None):
        self.requested_pages.append(page_url)
        return self.pages[page_url]

    def get_location_area(self, name):
        if name != "canalave-city-area":
            raise PokeApiError("API responded with not OK: 404 Not Found")
        return LocationArea(
            name=name,
            pokemon_encounters=[
                PokemonEncounter(Pokemon(name="tentacool")),
                PokemonEncounter(Pokemon(name="staryu")),
            ],
        )

    def get_pokemon(self, name):
        if name not in self.pokemon:
            raise PokeApiError("API responded with not OK: 404 Not Found")
        return self.pokemon[name]


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def make_config(rng_value=0.0):
    return Config(
        client=FakeClient(),
        pokedex=Pokedex(),
        out=io.StringIO(),
        rng=FixedRandom(rng_value),
        tension_delay=0.0,
    )


def lines(config):
    return config.out.getvalue().splitlines()


def test_get_commands_keys_and_callbacks():
    commands = get_commands()
    assert set(commands) == {
        "help", "exit", "map", "mapb", "explore", "catch", "list", "inspect"
    }
    assert commands["catch"].callback is command_catch
    assert commands["explore"].name == "explore {location name}"


def test_help_lists_every_command():
    config = make_config()
    command_help(config, "")
    output = lines(config)
    assert output[:3] == ["Welcome to the Pokedex!", "Usage", ""]
    for command in get_commands().values():
        assert f"{command.name}: {command.description}" in output


def test_exit_says_goodbye_and_exits():
    config = make_config()
    with pytest.raises(SystemExit) as info:
        command_exit(config, "")
    assert info.value.code == 0
    assert lines(config) == ["Closing the Pokedex... Goodbye!"]


def test_map_forward_then_back():
    config = make_config()
    command_map_forward(config, "")
    assert lines(config) == ["canalave-city-area"]
    assert config.next_page_url == PAGE_TWO
    assert config.previous_page_url is None

    command_map_forward(config, "")
    assert lines(config)[-1] == "mt-coronet-1f"
    assert config.previous_page_url == PAGE_ONE
    assert config.next_page_url is None

    command_map_back(config, "")
    assert lines(config)[-1] == "canalave-city-area"
    assert config.client.requested_pages == [None, PAGE_TWO, PAGE_ONE]


def test_map_back_on_first_page_fails():
    config = make_config()
    with pytest.raises(CommandError):
        command_map_back(config, "")
    assert lines(config) == ["Can't move back. You are on first page!"]
    assert config.client.requested_pages == []


def test_explore_lists_encounters():
    config = make_config()
    command_explore(config, "canalave-city-area")
    assert lines(config) == [
        "Pokemons in canalave-city-area:",
        "1. tentacool",
        "2. staryu",
    ]


def test_explore_requires_name():
    config = make_config()
    with pytest.raises(CommandError, match="location area name is missing"):
        command_explore(config, "")


def test_explore_passes_client_error():
    config = make_config()
    with pytest.raises(PokeApiError):
        command_explore(config, "nowhere")


def test_catch_success_adds_to_pokedex():
    config = make_config(rng_value=0.0)
    command_catch(config, "wartortle")
    output = lines(config)
    assert output[0] == "Throwing a Pokeball at wartortle..."
    assert "wartortle was caught!" in output
    assert "wartortle" in config.pokedex


def test_catch_failure_leaves_pokedex_empty():
    config = make_config(rng_value=0.99)
    command_catch(config, "mewtwo")
    assert lines(config)[-1] == "mewtwo escaped!"
    assert len(config.pokedex) == 0


def test_catch_requires_name():
    config = make_config()
    with pytest.raises(CommandError, match="pokemon name is missing"):
        command_catch(config, "")


def test_list_empty_and_filled():
    config = make_config()
    command_list(config, "")
    assert lines(config) == ["No Pokemons in Pokedex"]

    config = make_config()
    config.pokedex.add(Pokemon(name="zubat"))
    config.pokedex.add(Pokemon(name="bulbasaur"))
    command_list(config, "")
    output = lines(config)
    assert output[0] == "Pokemons in Pokedex:"
    assert sorted(line.split(". ", 1)[1] for line in output[1:]) == [
        "bulbasaur",
        "zubat",
    ]


def test_inspect_caught_pokemon_prints_details():
    config = make_config()
    pokemon = Pokemon(name="zubat", height=8, weight=75)
    config.pokedex.add(pokemon)
    command_inspect(config, "zubat")
    assert config.out.getvalue() == pokemon.details() + "\n"


def test_inspect_unknown_pokemon():
    config = make_config()
    command_inspect(config, "zubat")
    assert lines(config) == ["You haven't caught Pokemon: zubat"]


def test_inspect_requires_name():
    config = make_config()
    with pytest.raises(CommandError):
        command_inspect(config, "")