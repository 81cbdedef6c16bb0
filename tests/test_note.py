import pytest

from musictheory.note import (
    AdjSymbol,
    Note,
    PitchClass,
    adj_symbol_begin,
    adj_symbol_of,
    class_named,
    name_of,
    named,
    octave_of,
    of_class,
    root_and_remaining,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("C", AdjSymbol.SHARP),
        ("CMb5b7", AdjSymbol.FLAT),
        ("C#", AdjSymbol.SHARP),
        ("Gb", AdjSymbol.FLAT),
        ("G♭M", AdjSymbol.FLAT),
        ("A#m", AdjSymbol.SHARP),
        ("A♯M♯5", AdjSymbol.SHARP),
        ("C minor", AdjSymbol.FLAT),
        ("C dim", AdjSymbol.FLAT),
        ("CM M9 m7", AdjSymbol.SHARP),
        ("Cm m9 M7", AdjSymbol.FLAT),
        ("C major", AdjSymbol.SHARP),
    ],
)
def test_adj_symbol_of(name, expected):
    assert adj_symbol_of(name) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("C", AdjSymbol.NO),
        ("CMb5b7", AdjSymbol.NO),
        ("C#", AdjSymbol.SHARP),
        ("Gb", AdjSymbol.FLAT),
        ("G♭M", AdjSymbol.FLAT),
        ("A#m", AdjSymbol.SHARP),
        ("A♯M♯5", AdjSymbol.SHARP),
    ],
)
def test_adj_symbol_begin(name, expected):
    assert adj_symbol_begin(name[1:]) == expected


@pytest.mark.parametrize(
    "name, cls, octave, sharp, flat",
    [
        ("C", PitchClass.C, 0, "C", "C"),
        ("C#", PitchClass.CS, 0, "C#", "Db"),
        ("Cb", PitchClass.B, -1, "B", "B"),
        ("D", PitchClass.D, 0, "D", "D"),
        ("D#", PitchClass.DS, 0, "D#", "Eb"),
        ("D♭", PitchClass.CS, 0, "C#", "Db"),
        ("E", PitchClass.E, 0, "E", "E"),
        ("E#", PitchClass.F, 0, "F", "F"),
        ("E♭", PitchClass.DS, 0, "D#", "Eb"),
        ("F", PitchClass.F, 0, "F", "F"),
        ("F#", PitchClass.FS, 0, "F#", "Gb"),
        ("F♭", PitchClass.E, 0, "E", "E"),
        ("G", PitchClass.G, 0, "G", "G"),
        ("G♯", PitchClass.GS, 0, "G#", "Ab"),
        ("Gb", PitchClass.FS, 0, "F#", "Gb"),
        ("A", PitchClass.A, 0, "A", "A"),
        ("A#", PitchClass.AS, 0, "A#", "Bb"),
        ("Ab", PitchClass.GS, 0, "G#", "Ab"),
        ("B", PitchClass.B, 0, "B", "B"),
        ("B#", PitchClass.C, 1, "C", "C"),
        ("Bb", PitchClass.AS, 0, "A#", "Bb"),
        ("z", PitchClass.NIL, 0, "-", "-"),
        ("zzzz", PitchClass.NIL, 0, "-", "-"),
    ],
)
def test_name_of(name, cls, octave, sharp, flat):
    got_cls, got_octave = name_of(name)
    assert got_octave == octave
    assert got_cls == cls
    assert got_cls.spelled(AdjSymbol.SHARP) == sharp
    assert got_cls.spelled(AdjSymbol.FLAT) == flat


@pytest.mark.parametrize(
    "text, expected",
    [("C# Major", PitchClass.C), ("GbM", PitchClass.G), ("XXX", PitchClass.NIL), ("", PitchClass.NIL)],
)
def test_base_name_via_class_named_without_accidental(text, expected):
    assert name_of(text[:1])[0] == expected


def test_spelled():
    assert PitchClass.CS.spelled(AdjSymbol.SHARP) == "C#"
    assert PitchClass.CS.spelled(AdjSymbol.FLAT) == "Db"
    assert PitchClass.CS.spelled(AdjSymbol.NO) == "-"


def test_step_wraps_octaves():
    assert PitchClass.B.step(1) == (PitchClass.C, 1)
    assert PitchClass.C.step(-1) == (PitchClass.B, -1)
    assert PitchClass.C.step(0) == (PitchClass.C, 0)
    assert PitchClass.NIL.step(5) == (PitchClass.NIL, 0)
    assert PitchClass.C.step(25) == (PitchClass.CS, 2)


@pytest.mark.parametrize(
    "start, target, expected",
    [
        (PitchClass.CS, PitchClass.FS, 5),
        (PitchClass.FS, PitchClass.CS, -5),
        (PitchClass.GS, PitchClass.AS, 2),
        (PitchClass.C, PitchClass.A, -3),
        (PitchClass.D, PitchClass.FS, 4),
        (PitchClass.F, PitchClass.B, -6),
    ],
)
def test_diff(start, target, expected):
    assert start.diff(target) == expected


def test_diff_from_nil_raises():
    with pytest.raises(ValueError):
        PitchClass.NIL.diff(PitchClass.FS)


def test_named():
    assert named("C") == Note(pitch_class=PitchClass.C)


def test_named_with_octave():
    assert named("B#4") == Note(pitch_class=PitchClass.C, octave=5)


def test_of_class():
    assert of_class(PitchClass.C) == Note(pitch_class=PitchClass.C)


def test_class_named():
    assert class_named("C") == PitchClass.C


@pytest.mark.parametrize(
    "text, expected", [("C4", 4), ("C-1", -1), ("C", 0), ("C--2", 0), ("A12", 12)]
)
def test_octave_of(text, expected):
    assert octave_of(text) == expected


@pytest.mark.parametrize(
    "name, root, remaining",
    [
        ("C", PitchClass.C, ""),
        ("Cmaj", PitchClass.C, "maj"),
        ("B♭min", PitchClass.AS, "min"),
        ("C#dim", PitchClass.CS, "dim"),
        ("JAMS", PitchClass.NIL, "JAMS"),
    ],
)
def test_root_and_remaining(name, root, remaining):
    assert root_and_remaining(name) == (root, remaining)