"""CLI entry point: python -m tictactoe_history [--config session.yaml]

Reads one intent per line, from a script file or stdin, and prints the
view after each. Lines are JSON intents or shorthand commands:

    place 4      {"intent": "place_mark", "cell": 4}
    jump 2       {"intent": "jump_to", "step": 2}
    sort         {"intent": "toggle_sort"}
    quit
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

import yaml
from rich.console import Console

from tictactoe_history.config import SessionConfig, load_config
from tictactoe_history.core.errors import ConfigError, GameError
from tictactoe_history.core.parser import IntentParser
from tictactoe_history.game.controller import GameController
from tictactoe_history.game.view import ViewModel
from tictactoe_history.render import render

logger = logging.getLogger(__name__)

_QUIT_COMMANDS = {"quit", "exit", "q"}


def _emit(console: Console, view: ViewModel, config: SessionConfig, as_json: bool) -> None:
    if as_json:
        console.print(
            json.dumps(view.to_dict()), markup=False, highlight=False, soft_wrap=True
        )
    else:
        console.print(render(view, config.display))


def run_session(
    lines: Iterable[str],
    config: SessionConfig,
    console: Console,
    as_json: bool = False,
    interactive: bool = False,
) -> GameController:
    """Feed ``lines`` to a fresh controller, printing the view after each."""
    controller = GameController(ascending=config.ascending)
    parser = IntentParser()
    _emit(console, controller.view(), config, as_json)

    for line in lines:
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        if text.lower() in _QUIT_COMMANDS:
            break

        result = parser.parse(text)
        if not result.success:
            console.print(f"Error: {result.error}", style="bold red", markup=False)
            continue

        try:
            view = controller.dispatch(result.intent)
        except GameError as exc:
            console.print(f"Rejected: {exc}", style="bold red", markup=False)
            continue

        _emit(console, view, config, as_json)

    if interactive:
        console.print("Bye.", style="dim")
    return controller


def _read_lines(stream: TextIO, console: Console, interactive: bool):
    while True:
        if interactive:
            console.print("> ", end="")
        line = stream.readline()
        if not line:
            return
        yield line


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="tictactoe-history",
        description="Tic-tac-toe with move history and time travel",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to session YAML config file",
    )
    parser.add_argument(
        "-s", "--script",
        type=Path,
        default=None,
        help="File of intents to replay, one per line (default: stdin)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the view model as JSON instead of a board",
    )
    args = parser.parse_args(argv)

    if args.config is not None and not args.config.exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)
    if args.script is not None and not args.script.exists():
        print(f"Error: script file not found: {args.script}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config) if args.config else SessionConfig()
    except (ConfigError, yaml.YAMLError) as exc:
        print(f"Error: invalid config file {args.config}: {exc}", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console = Console(no_color=not config.display.color)

    if args.script is not None:
        logger.debug("Replaying %s", args.script)
        with open(args.script) as f:
            run_session(f, config, console, as_json=args.json)
    else:
        interactive = sys.stdin.isatty()
        run_session(
            _read_lines(sys.stdin, console, interactive),
            config,
            console,
            as_json=args.json,
            interactive=interactive,
        )


if __name__ == "__main__":
    main()
