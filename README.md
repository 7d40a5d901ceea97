# pokedex-cli

An interactive Pokedex that runs in your terminal. Browse location areas,
see which Pokemon live there, throw Pokeballs at them and inspect the ones
you manage to catch. Data comes from the public PokeAPI; response bodies are
kept in an in-memory cache for five minutes so repeated lookups are fast.

## Installation

```
pip install .
```

Python 3.10 or newer is required. No third-party libraries are needed.

## Usage

Start the Pokedex:

```
pokedex-cli
```

You get a `Pokedex > ` prompt. Surrounding spaces are trimmed and the line is
lower-cased and split on single spaces; the first word is the command and the
second word, if any, is its argument. Any further words are ignored. An
unrecognised word is answered with `Unknown command: <word>`. The session ends
with the `exit` command or at the end of input.

| Command | What it does |
| --- | --- |
| `help` | Print the available commands |
| `exit` | Close the Pokedex |
| `map` | Show the next 20 location areas; repeat to page forward |
| `mapb` | Show the previous 20 location areas; repeat to page back |
| `explore {location name}` | List the Pokemon found in a location area, e.g. `explore canalave-city-area` |
| `catch {pokemon name}` | Try to catch a Pokemon, e.g. `catch wartortle` |
| `list` | List every Pokemon you have caught |
| `inspect {pokemon name}` | Show name, height, weight, stats and types of a caught Pokemon |

Errors such as a missing argument, having no previous page for `mapb`, or a
failed request to PokeAPI are printed and the prompt continues.

Example session:

```
Pokedex > explore canalave-city-area
Pokemons in canalave-city-area:
1. tentacool
2. tentacruel
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
....
tentacool was caught!
You can now inspect it's details by using the 'inspect' command
Pokedex > inspect tentacool
Name: tentacool
...
```

Caught Pokemon are kept only for the running session; nothing is saved to disk.

## Catching

The chance of a catch depends on the Pokemon's base experience: it starts at
100% and drops by one percentage point per 10 base experience, bottoming out
at 60% for base experience of 400 or more. Negative base experience gives 100%.

## Using it as a library

The pieces can be used on their own:

- `pokedex_cli.client.Client` fetches location areas and Pokemon
  (`list_location_areas`, `get_location_area`, `get_pokemon`) and raises
  `PokeApiError` on failure. It is a context manager; `close()` stops the
  cache's background thread.
- `pokedex_cli.cache.Cache` is a thread-safe byte cache whose entries are
  dropped once they reach the given lifetime in seconds.
- `pokedex_cli.pokedex.Pokedex` holds caught Pokemon by name.
- `pokedex_cli.catch.calculate_catch_chance` and `try_catch` compute and roll
  the catch chance.
- `pokedex_cli.models` has the dataclasses for the PokeAPI resources, each
  with a `from_dict` constructor; `Pokemon.details()` returns the text shown
  by `inspect`.

```python
from pokedex_cli.client import Client
from pokedex_cli.pokedex import Pokedex
from pokedex_cli.catch import calculate_catch_chance

with Client(timeout=5.0, cache_lifetime=300.0) as client:
    pokemon = client.get_pokemon("wartortle")
    print(calculate_catch_chance(pokemon.base_experience))

    dex = Pokedex()
    dex.add(pokemon)
    print([p.name for p in dex.list()])
```

## Running the tests

```
pip install ".[test]"
pytest
```