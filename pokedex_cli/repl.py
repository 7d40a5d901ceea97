"""The interactive prompt of the Pokedex."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .client import Client, PokeApiError
from .commands import CommandError, Config, get_commands
from .pokedex import Pokedex

_PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Split *text* on spaces into lower-case words, ignoring outer spaces."""
    return [word.lower() for word in text.strip(" ").split(" ")]


def get_command_argument(words: Optional[Sequence[str]]) -> str:
    """Return the word following the command, or an empty string."""
    return words[1] if words and len(words) >= 2 else ""


def _prompt(config: Config) -> None:
    config.out.write(_PROMPT)
    config.out.flush()


def start_repl(config: Config, lines: Optional[Iterable[str]] = None) -> None:
    """Read commands from *lines* (standard input by default) and run them."""
    config.say("Welcome to Pokedex!")
    config.say("Type the command you want to do or write 'help' to view available commands")
    commands = get_commands()
    _prompt(config)
    for line in sys.stdin if lines is None else lines:
        words = clean_input(line.rstrip("\r\n"))
        command = commands.get(words[0])
        if command is None:
            config.say(f"Unknown command: {words[0]}")
        else:
            try:
                command.callback(config, get_command_argument(words))
            except (CommandError, PokeApiError) as err:
                config.say(str(err))
        _prompt(config)
    config.say()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive Pokedex."""
    with Client(5.0, 5 * 60.0) as client:
        start_repl(Config(client=client, pokedex=Pokedex()))
    return 0


if __name__ == "__main__":
    sys.exit(main())