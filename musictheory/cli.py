"""Command-line interface: build chords, scales and keys from their names."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from musictheory.chord import chord_forms_yaml, parse_chord
from musictheory.key import parse_key
from musictheory.scale import parse_scale, scale_modes_yaml

PROG = "music-theory"
VERSION = "0.0.3"


def _named(build: Callable[[str], str]) -> Callable[[argparse.Namespace], int]:
    def run(args: argparse.Namespace) -> int:
        if not args.name:
            args.command_parser.print_help()
            return 0
        sys.stdout.write(build(args.name))
        return 0

    return run


def _listing(render: Callable[[], str]) -> Callable[[argparse.Namespace], int]:
    def run(args: argparse.Namespace) -> int:
        sys.stdout.write(render())
        return 0

    return run


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG, description="Notes, Keys, Chords and Scales"
    )
    parser.add_argument("-v", "--version", action="version", version=f"{PROG} {VERSION}")
    commands = parser.add_subparsers(dest="command", title="commands")

    def add(name, aliases, help_text, description, handler, takes_name):
        sub = commands.add_parser(
            name, aliases=aliases, help=help_text, description=description
        )
        if takes_name:
            sub.add_argument("name", nargs="?", default="")
        sub.set_defaults(handler=handler, command_parser=sub)

    add(
        "chord",
        ["c"],
        "build a Chord",
        "Chord is a named harmonic set of three or more pitch classes "
        "specified by a name, e.g. C or Cm6 or D♭m679-5",
        _named(lambda name: parse_chord(name).to_yaml()),
        True,
    )
    add(
        "chords",
        [],
        "list all known Chords",
        "The Chord DNA is a sequential chain of rules to be executed by matching "
        "text in the chord name to its musical implications from the root of the chord.",
        _listing(chord_forms_yaml),
        False,
    )
    add(
        "scale",
        [],
        "build a Scale",
        "Scale is any set of musical notes ordered by fundamental frequency or "
        "pitch specified by a name, e.g. C or Cm6 or D♭m679-5",
        _named(lambda name: parse_scale(name).to_yaml()),
        True,
    )
    add(
        "scales",
        [],
        "list all known Scales",
        "The Scale DNA is a sequential chain of rules to be executed by matching "
        "text in the scale name to its musical implications from the root of the scale.",
        _listing(scale_modes_yaml),
        False,
    )
    add(
        "key",
        ["k"],
        "find a Key",
        "The key of a piece is a group of pitches, or scale upon which a music "
        "composition is created in classical, Western art, and Western pop music.",
        _named(lambda name: parse_key(name).to_yaml()),
        True,
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        code = exc.code
        if code is None:
            return 0
        return code if isinstance(code, int) else 1
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())