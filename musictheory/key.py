"""Musical keys: a root pitch class and a mode, with relative keys."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum

import yaml

from musictheory.note import AdjSymbol, PitchClass, adj_symbol_of, root_and_remaining


class Mode(Enum):
    """The mode of a key."""

    NIL = 0
    MAJOR = 1
    MINOR = 2

    def __str__(self) -> str:
        return self.name.capitalize()


_MAJOR = re.compile(r"^(M|maj|major)")
_MINOR = re.compile(r"^(m\b|min|minor|Minor)")


def mode_of(name: str) -> Mode:
    """The mode named at the start of the text; major unless it reads as minor."""
    if _MINOR.match(name):
        return Mode.MINOR
    return Mode.MAJOR


@dataclass(frozen=True)
class Key:
    """A key signature: root, accidental spelling and mode."""

    root: PitchClass = PitchClass.NIL
    adj_symbol: AdjSymbol = AdjSymbol.NO
    mode: Mode = Mode.NIL

    def diff(self, other: Key) -> int:
        """The shortest distance in semitones from this key's root to another's."""
        return self.root.diff(other.root)

    def relative_minor(self) -> Key:
        """The relative minor of a major key; other keys are returned unchanged."""
        if self.mode is not Mode.MAJOR:
            return self
        return replace(
            self,
            mode=Mode.MINOR,
            adj_symbol=AdjSymbol.FLAT,
            root=self.root.step(-3)[0],
        )

    def relative_major(self) -> Key:
        """The relative major of a minor key; other keys are returned unchanged."""
        if self.mode is not Mode.MINOR:
            return self
        return replace(
            self,
            mode=Mode.MAJOR,
            adj_symbol=AdjSymbol.SHARP,
            root=self.root.step(3)[0],
        )

    def to_yaml(self) -> str:
        """The key and its relative key as YAML."""
        relative = {"root": "", "mode": ""}
        if self.mode is Mode.MAJOR:
            rel = self.relative_minor()
        elif self.mode is Mode.MINOR:
            rel = self.relative_major()
        else:
            rel = None
        if rel is not None:
            relative = {
                "root": rel.root.spelled(self.adj_symbol),
                "mode": str(rel.mode),
            }
        data = {
            "root": self.root.spelled(self.adj_symbol),
            "mode": str(self.mode),
            "relative": relative,
        }
        return yaml.safe_dump(
            data, default_flow_style=False, sort_keys=False, allow_unicode=True
        )


def parse_key(name: str) -> Key:
    """Build a key from its name, e.g. "Db" or "A minor"."""
    adj = adj_symbol_of(name)
    root, remaining = root_and_remaining(name)
    return Key(root=root, adj_symbol=adj, mode=mode_of(remaining))