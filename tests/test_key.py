import pytest

from musictheory.key import Key, Mode, mode_of, parse_key
from musictheory.note import AdjSymbol, PitchClass


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("C#", "F#", 5),
        ("F#", "C#", -5),
        ("Gb", "Ab", 2),
        ("C", "A", -3),
        ("D", "F#", 4),
        ("F", "B", -6),
    ],
)
def test_diff(a, b, expected):
    assert parse_key(a).diff(parse_key(b)) == expected


def test_invalid_root_is_nil():
    assert parse_key("P-funk").root is PitchClass.NIL


@pytest.mark.parametrize(
    "name, root, mode",
    [
        ("C", PitchClass.C, Mode.MAJOR),
        ("Db", PitchClass.CS, Mode.MAJOR),
        ("A minor", PitchClass.A, Mode.MINOR),
        ("F#m", PitchClass.FS, Mode.MINOR),
        ("Bb major", PitchClass.AS, Mode.MAJOR),
    ],
)
def test_parse_key(name, root, mode):
    key = parse_key(name)
    assert key.root is root
    assert key.mode is mode


def test_mode_string():
    assert str(mode_of("major")) == "Major"
    assert str(mode_of("minor")) == "Minor"
    assert str(parse_key("C major").mode) == "Major"
    assert str(Key(PitchClass.C, AdjSymbol.SHARP, Mode.NIL).mode) == "Nil"


def test_unknown_mode_value_raises():
    with pytest.raises(ValueError):
        Mode(5)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Major", Mode.MAJOR),
        ("M", Mode.MAJOR),
        ("major", Mode.MAJOR),
        ("minor", Mode.MINOR),
        ("min", Mode.MINOR),
        ("m", Mode.MINOR),
        ("joe", Mode.MAJOR),
    ],
)
def test_mode_of(text, expected):
    assert mode_of(text) is expected


def test_relative_major():
    assert parse_key("A minor").relative_major() == parse_key("C major")


def test_relative_minor():
    assert parse_key("C major").relative_minor() == parse_key("A minor")


def test_relative_of_wrong_mode_is_unchanged():
    key = parse_key("C major")
    assert key.relative_major() == key
    minor = parse_key("A minor")
    assert minor.relative_minor() == minor


def test_relative_minor_fields():
    rel = Key(PitchClass.CS, AdjSymbol.FLAT, Mode.MAJOR).relative_minor()
    assert rel == Key(PitchClass.AS, AdjSymbol.FLAT, Mode.MINOR)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("C major", "root: C\nmode: Major\nrelative:\n  root: A\n  mode: Minor\n"),
        ("A minor", "root: A\nmode: Minor\nrelative:\n  root: C\n  mode: Major\n"),
        ("Db", "root: Db\nmode: Major\nrelative:\n  root: Bb\n  mode: Minor\n"),
    ],
)
def test_to_yaml(name, expected):
    assert parse_key(name).to_yaml() == expected