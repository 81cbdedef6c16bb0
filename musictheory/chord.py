"""Chords: harmonic sets of pitch classes, built from a readable name."""

from __future__ import annotations

import re
from collections.abc import Mapping
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

# Intervals within a chord, counted from 1 (the root) up to 16.
_INTERVAL_ORDER = tuple(range(1, 17))

# Glue between the parts of a form expression.
_N = "[. ]*"

_MAJOR = "(M|maj|major)"
_MINOR = "([^a-z]|^)(m|min|minor)"
_FLAT = "(f|flat|b|♭)"
_SHARP = "(#|s|sharp)"
_HALF = "half"
_OMIT = r"(omit|\-)"
_DOMINANT = "(^|dom|dominant)"
_NONDOMINANT = "(non|nondom|nondominant)"
_DIMINISHED = "(dim|dimin|diminished)"
_AUGMENTED = "(aug|augment|augmented)"
_SUSPENDED = "(sus|susp|suspend|suspended)"
_HARMONIC = "(harm|harmonic)"


@dataclass(frozen=True)
class Form:
    """A chord-building rule: when its pattern matches, add and omit intervals.

    ``add`` maps an interval from the chord root to a number of semitones above
    the root; ``omit`` lists intervals to remove once all forms are applied.
    A form without a pattern always matches.
    """

    name: str
    pattern: re.Pattern[str] | None = None
    add: Mapping[int, int] = field(default_factory=dict)
    omit: tuple[int, ...] = ()

    def matches(self, text: str) -> bool:
        """Whether this form applies to the given text."""
        return self.pattern is None or self.pattern.search(text) is not None


def _form(name: str, expr: str | None = None, add=None, omit=()) -> Form:
    return Form(
        name=name,
        pattern=re.compile(expr) if expr is not None else None,
        add=dict(add or {}),
        omit=tuple(omit),
    )


_FORMS: tuple[Form, ...] = (
    # Root
    _form("Basic", None, {1: 0, 3: 4, 5: 7}),
    _form("Nondominant", _NONDOMINANT, omit=(1,)),
    # Triads
    _form("Major Triad", "^" + _MAJOR + "([^a-z]|$)", {3: 4, 5: 7}),
    _form("Minor Triad", "^" + _MINOR + "([^a-z]|$)", {3: 3, 5: 7}),
    _form("Augmented Triad", "^" + _AUGMENTED, {3: 4, 5: 8}),
    _form("Diminished Triad", "^" + _DIMINISHED, {3: 3, 5: 6}),
    _form("Suspended Triad", "^" + _SUSPENDED, {4: 5, 5: 7}, omit=(3,)),
    # Fifth
    _form("Omit Fifth", _OMIT + _N + "5", omit=(5,)),
    _form("Flat Fifth", _FLAT + _N + "5", {5: 6}),
    # Sixth
    _form("Add Sixth", "6", {6: 9}),
    _form("Augmented Sixth", _AUGMENTED + _N + "6", {6: 10}),
    _form("Omit Sixth", _OMIT + _N + "6", omit=(6,)),
    # Seventh
    _form("Add Seventh", "7", {7: 10}),
    _form("Dominant Seventh", _DOMINANT + _N + "7", {7: 10}),
    _form("Major Seventh", _MAJOR + _N + "7", {7: 11}),
    _form("Minor Seventh", _MINOR + _N + "7", {7: 10}),
    _form("Diminished Seventh", _DIMINISHED + _N + "7", {7: 9}),
    _form(
        "Half Diminished Seventh",
        _HALF + _N + _DIMINISHED + _N + "7",
        {3: 3, 5: 6, 7: 10},
    ),
    _form("Diminished Major Seventh", _DIMINISHED + _N + _MAJOR + _N + "7"),
    _form("Augmented Major Seventh", _AUGMENTED + _N + _MAJOR + _N + "7"),
    _form("Augmented Minor Seventh", _AUGMENTED + _N + _MINOR + _N + "7"),
    _form("Harmonic Seventh", _HARMONIC + _N + "7", {3: 4, 5: 7}),
    _form("Omit Seventh", _OMIT + _N + "7", omit=(7,)),
    # Ninth
    _form("Add Ninth", "9", {9: 14}),
    _form("Dominant Ninth", _DOMINANT + _N + "9", {7: 10, 9: 14}),
    _form("Major Ninth", _MAJOR + _N + "9", {7: 11, 9: 14}),
    _form("Minor Ninth", _MINOR + _N + "9", {7: 10, 9: 14}),
    _form("Sharp Ninth", _SHARP + _N + "9", {9: 15}),
    _form("Omit Ninth", _OMIT + _N + "9", omit=(9,)),
    # Eleventh
    _form("Add Eleventh", "11", {11: 17}),
    _form(
        "Dominant Eleventh",
        _DOMINANT + _N + "11",
        {7: 10, 9: 14, 11: 17},
        omit=(3,),
    ),
    _form("Major Eleventh", _MAJOR + _N + "11", {7: 11, 9: 14, 11: 17}),
    _form("Minor Eleventh", _MINOR + _N + "11", {3: 3, 7: 10, 9: 14, 11: 17}),
    _form("Omit Eleventh", _OMIT + _N + "11", omit=(11,)),
    # Thirteenth
    _form("Add Thirteenth", "13", {13: 21}),
    _form(
        "Dominant Thirteenth",
        _DOMINANT + _N + "13",
        {7: 10, 9: 14, 11: 17, 13: 21},
        omit=(3,),
    ),
    _form(
        "Major Thirteenth",
        _MAJOR + _N + "13",
        {3: 4, 7: 11, 9: 14, 11: 17, 13: 21},
    ),
    _form(
        "Minor Thirteenth",
        _MINOR + _N + "13",
        {3: 3, 7: 10, 9: 14, 11: 17, 13: 21},
    ),
)


def _dump_yaml(data: object) -> str:
    return yaml.safe_dump(
        data, default_flow_style=False, sort_keys=False, allow_unicode=True
    )


@dataclass
class Chord:
    """A chord: a root, an accidental spelling and tones by interval."""

    root: PitchClass = PitchClass.NIL
    adj_symbol: AdjSymbol = AdjSymbol.NO
    tones: dict[int, PitchClass] = field(default_factory=dict)

    def notes(self) -> list[Note]:
        """The chord's notes, ordered from the root outward."""
        return [of_class(self.tones[i]) for i in _INTERVAL_ORDER if i in self.tones]

    def transpose(self, semitones: int) -> Chord:
        """A copy of this chord moved by +/- semitones."""
        return Chord(
            root=self.root.step(semitones)[0],
            adj_symbol=self.adj_symbol,
            tones={i: c.step(semitones)[0] for i, c in self.tones.items()},
        )

    def to_yaml(self) -> str:
        """The chord as YAML with its root and tones spelled out."""
        return _dump_yaml(
            {
                "root": self.root.spelled(self.adj_symbol),
                "tones": {
                    i: self.tones[i].spelled(self.adj_symbol)
                    for i in sorted(self.tones)
                },
            }
        )


def parse_chord(name: str) -> Chord:
    """Build a chord from its name, e.g. "Cm679-5"."""
    adj = adj_symbol_of(name)
    root, remaining = root_and_remaining(name)
    tones: dict[int, PitchClass] = {}
    to_omit: list[int] = []
    for form in _FORMS:
        if form.matches(remaining):
            for interval, semitones in form.add.items():
                tones[interval] = root.step(semitones)[0]
            to_omit.extend(form.omit)
    for interval in to_omit:
        tones.pop(interval, None)
    return Chord(root=root, adj_symbol=adj, tones=tones)


def chord_form_names() -> list[str]:
    """The names of all chord-building rules, in the order they apply."""
    return [form.name for form in _FORMS]


def chord_forms_yaml() -> str:
    """The names of all chord-building rules as a YAML list."""
    return _dump_yaml(chord_form_names())