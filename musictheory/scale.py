"""Scales: ordered sets of pitch classes, built from a readable name."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import yaml

from musictheory.note import (
    AdjSymbol,
    Note,
    PitchClass,
    adj_symbol_of,
    of_class,
    root_and_remaining,
)

# Intervals within a scale, counted from 1 (the root) up to 16.
_INTERVAL_ORDER = tuple(range(1, 17))

# Glue between the parts of a mode expression.
_N = "[. ]*"

_MAJOR = "(M|maj|major)"
_MINOR_STRICT = "([^a-z ]|^)(m|min|minor)"
_MINOR = "(m|min|minor)"
_NATURAL = "(nat|natural)"
_MELODIC = "(mel|melodic)"
_ASCEND = "(asc|ascend)"
_DESCEND = "(desc|descend)"
_DIMINISHED = "(dim|dimin|diminished)"
_AUGMENTED = "(aug|augment|augmented)"
_HARMONIC = "(harm|harmonic)"
_LOCRIAN = "(loc|locrian)"
_IONIAN = "(ion|ionian)"
_DORIAN = "(dor|dorian)"
_PHRYGIAN = "(phr|phrygian)"
_LYDIAN = "(lyd|lydian)"
_MIXOLYDIAN = "(mix|mixolydian)"
_AEOLIAN = "(aeo|aeolian)"

_IONIAN_STEPS = (2, 2, 1, 2, 2, 2)
_DORIAN_STEPS = (2, 1, 2, 2, 2, 1)
_PHRYGIAN_STEPS = (1, 2, 2, 2, 1, 2)
_LYDIAN_STEPS = (2, 2, 2, 1, 2, 2)
_MIXOLYDIAN_STEPS = (2, 2, 1, 2, 2, 1)
_AEOLIAN_STEPS = (2, 1, 2, 2, 1, 2)
_LOCRIAN_STEPS = (1, 2, 2, 1, 2, 2)


@dataclass(frozen=True)
class ScaleMode:
    """A scale-building rule: when its pattern matches, lay out the scale.

    ``steps`` are the semitones between successive tones starting at the root;
    ``omit`` lists intervals to remove once all modes are applied. A mode
    without a pattern always matches.
    """

    name: str
    pattern: re.Pattern[str] | None = None
    steps: tuple[int, ...] = ()
    omit: tuple[int, ...] = ()

    def matches(self, text: str) -> bool:
        """Whether this mode applies to the given text."""
        return self.pattern is None or self.pattern.search(text) is not None


def _mode(name: str, expr: str | None, steps, omit=()) -> ScaleMode:
    return ScaleMode(
        name=name,
        pattern=re.compile(expr) if expr is not None else None,
        steps=tuple(steps),
        omit=tuple(omit),
    )


_MODES: tuple[ScaleMode, ...] = (
    _mode("Default (Major)", None, _IONIAN_STEPS),
    _mode("Minor", _MINOR_STRICT, _AEOLIAN_STEPS),
    _mode("Major", _MAJOR, _IONIAN_STEPS),
    _mode("Natural Minor", _NATURAL + _N + _MINOR, _AEOLIAN_STEPS),
    _mode("Diminished", _DIMINISHED, (2, 1, 2, 1, 2, 1, 2)),
    _mode("Augmented", _AUGMENTED, (3, 1, 3, 1, 3), omit=(7,)),
    _mode(
        "Melodic Minor Ascend",
        _MELODIC + _N + _MINOR + _N + _ASCEND,
        (2, 1, 2, 2, 2, 2),
    ),
    _mode(
        "Melodic Minor Descend",
        _MELODIC + _N + _MINOR + _N + _DESCEND,
        (2, 1, 2, 2, 1, 2),
    ),
    _mode("Harmonic Minor", _HARMONIC + _N + _MINOR, (2, 1, 2, 2, 1, 3)),
    _mode("Ionian", _IONIAN, _IONIAN_STEPS),
    _mode("Dorian", _DORIAN, _DORIAN_STEPS),
    _mode("Phrygian", _PHRYGIAN, _PHRYGIAN_STEPS),
    _mode("Lydian", _LYDIAN, _LYDIAN_STEPS),
    _mode("Mixolydian", _MIXOLYDIAN, _MIXOLYDIAN_STEPS),
    _mode("Aeolian", _AEOLIAN, _AEOLIAN_STEPS),
    _mode("Locrian", _LOCRIAN, _LOCRIAN_STEPS),
)


def _dump_yaml(data: object) -> str:
    return yaml.safe_dump(
        data, default_flow_style=False, sort_keys=False, allow_unicode=True
    )


@dataclass
class Scale:
    """A scale: a root, an accidental spelling and tones by interval."""

    root: PitchClass = PitchClass.NIL
    adj_symbol: AdjSymbol = AdjSymbol.NO
    tones: dict[int, PitchClass] = field(default_factory=dict)

    def notes(self) -> list[Note]:
        """The scale's notes, ordered from the root upward."""
        return [of_class(self.tones[i]) for i in _INTERVAL_ORDER if i in self.tones]

    def to_yaml(self) -> str:
        """The scale as YAML with its root and tones spelled out."""
        return _dump_yaml(
            {
                "root": self.root.spelled(self.adj_symbol),
                "tones": {
                    i: self.tones[i].spelled(self.adj_symbol)
                    for i in sorted(self.tones)
                },
            }
        )


def parse_scale(name: str) -> Scale:
    """Build a scale from its name, e.g. "C harmonic minor"."""
    adj = adj_symbol_of(name)
    root, remaining = root_and_remaining(name)
    tones: dict[int, PitchClass] = {}
    to_omit: list[int] = []
    for mode in _MODES:
        if not mode.matches(remaining):
            continue
        current = root
        tones[1] = current
        for interval, semitones in enumerate(mode.steps, start=2):
            current = current.step(semitones)[0]
            tones[interval] = current
        to_omit.extend(mode.omit)
    for interval in to_omit:
        tones.pop(interval, None)
    return Scale(root=root, adj_symbol=adj, tones=tones)


def scale_mode_names() -> list[str]:
    """The names of all scale-building rules, in the order they apply."""
    return [mode.name for mode in _MODES]


def scale_modes_yaml() -> str:
    """The names of all scale-building rules as a YAML list."""
    return _dump_yaml(scale_mode_names())