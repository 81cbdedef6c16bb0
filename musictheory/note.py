"""Pitch classes, accidentals, octaves and notes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum


class AdjSymbol(Enum):
    """How accidental notes are spelled: with sharps or with flats."""

    NO = 0
    SHARP = 1
    FLAT = 2


_SHARP_IN = re.compile(r"[♯#]|major")
_FLAT_IN = re.compile(r"^F|[♭b]")
_SHARP_BEGIN = re.compile(r"^[♯#]")
_FLAT_BEGIN = re.compile(r"^[♭b]")
_SHARPISH_IN = re.compile(r"(M|maj|major|aug)")
_FLATTISH_IN = re.compile(r"([^a-z]|^)(m|min|minor|dim)")
_OCTAVE = re.compile(r"(-*[0-9]+)$")
_ROOT_SINGLE = re.compile(r"^[ABCDEFG]")
_ROOT_DOUBLE = re.compile(r"^[ABCDEFG][♯#♭b]")


def _count(pattern: re.Pattern[str], text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


def adj_symbol_of(name: str) -> AdjSymbol:
    """Choose sharps or flats for the name of a chord, scale or key."""
    sharps = _count(_SHARP_IN, name)
    flats = _count(_FLAT_IN, name)
    sharpish = _count(_SHARPISH_IN, name)
    flattish = _count(_FLATTISH_IN, name)
    # Explicit sharps/flats take precedence over sharpish/flattish hints.
    if sharps > 0 and sharps > flats:
        return AdjSymbol.SHARP
    if flats > 0:
        return AdjSymbol.FLAT
    if sharpish > 0 and sharpish > flattish:
        return AdjSymbol.SHARP
    if flattish > 0:
        return AdjSymbol.FLAT
    return AdjSymbol.SHARP


def adj_symbol_begin(name: str) -> AdjSymbol:
    """The accidental that begins the given text, if any."""
    if _SHARP_BEGIN.match(name):
        return AdjSymbol.SHARP
    if _FLAT_BEGIN.match(name):
        return AdjSymbol.FLAT
    return AdjSymbol.NO


_NATURAL_NAMES = {1: "C", 3: "D", 5: "E", 6: "F", 8: "G", 10: "A", 12: "B"}
_SHARP_NAMES = {2: "C#", 4: "D#", 7: "F#", 9: "G#", 11: "A#"}
_FLAT_NAMES = {2: "Db", 4: "Eb", 7: "Gb", 9: "Ab", 11: "Bb"}


class PitchClass(IntEnum):
    """A pitch class, the same pitch across all octaves."""

    NIL = 0
    C = 1
    CS = 2
    D = 3
    DS = 4
    E = 5
    F = 6
    FS = 7
    G = 8
    GS = 9
    A = 10
    AS = 11
    B = 12

    def step(self, inc: int) -> tuple[PitchClass, int]:
        """Step by +/- semitones; return the new class and the octave shift."""
        if self is PitchClass.NIL:
            return PitchClass.NIL, 0
        index = self.value - 1 + inc
        return PitchClass(index % 12 + 1), index // 12

    def spelled(self, adj: AdjSymbol) -> str:
        """The name of this class, spelled with sharps or flats."""
        natural = _NATURAL_NAMES.get(self.value)
        if natural is not None:
            return natural
        if adj is AdjSymbol.SHARP:
            return _SHARP_NAMES.get(self.value, "-")
        if adj is AdjSymbol.FLAT:
            return _FLAT_NAMES.get(self.value, "-")
        return "-"

    def diff(self, target: PitchClass) -> int:
        """The shortest distance in semitones to another class (ties go down)."""
        if self is PitchClass.NIL:
            raise ValueError("cannot step semitones from the Nil pitch class")
        if target is PitchClass.NIL:
            raise ValueError("cannot step semitones to the Nil pitch class")
        up = (target.value - self.value) % 12
        down = up - 12 if up else 0
        return up if abs(up) < abs(down) else down


_BASE_NAMES = {
    "C": PitchClass.C,
    "D": PitchClass.D,
    "E": PitchClass.E,
    "F": PitchClass.F,
    "G": PitchClass.G,
    "A": PitchClass.A,
    "B": PitchClass.B,
}


def _base_name_of(text: str) -> PitchClass:
    return _BASE_NAMES.get(text[:1], PitchClass.NIL)


def _base_step_of(text: str) -> int:
    if len(text) < 2:
        return 0
    symbol = adj_symbol_begin(text[1:])
    if symbol is AdjSymbol.SHARP:
        return 1
    if symbol is AdjSymbol.FLAT:
        return -1
    return 0


def name_of(text: str) -> tuple[PitchClass, int]:
    """The pitch class named by the text, and the octave shift its accidental causes."""
    return _base_name_of(text).step(_base_step_of(text))


def octave_of(text: str) -> int:
    """The octave number written at the end of the text, or 0."""
    found = _OCTAVE.search(text)
    if found is None:
        return 0
    try:
        return int(found.group(1))
    except ValueError:
        return 0


@dataclass
class Note:
    """A musical note."""

    pitch_class: PitchClass = PitchClass.NIL
    octave: int = 0
    performer: str = ""
    position: float = 0.0
    duration: float = 0.0
    code: str = ""


def named(text: str) -> Note:
    """A note from its name, e.g. "C#4"."""
    pitch_class, shift = name_of(text)
    return Note(pitch_class=pitch_class, octave=shift + octave_of(text))


def of_class(pitch_class: PitchClass) -> Note:
    """A note of the given pitch class."""
    return Note(pitch_class=pitch_class)


def class_named(text: str) -> PitchClass:
    """The pitch class of a named note."""
    return named(text).pitch_class


def root_and_remaining(name: str) -> tuple[PitchClass, str]:
    """Split a name into its root pitch class and the rest of the text."""
    for pattern in (_ROOT_DOUBLE, _ROOT_SINGLE):
        found = pattern.match(name)
        if found:
            root = found.group(0)
            return class_named(root), name[len(root):].strip()
    return PitchClass.NIL, name