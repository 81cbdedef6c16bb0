# musictheory

Notes, keys, chords and scales, built from readable names such as `Cm769-5`,
`C natural minor` or `Db`.

## Install

    pip install .

This installs the library and the `music-theory` command. The only
dependency is PyYAML, which is used to write the results.

## Command line

`music-theory` prints its results as YAML. It has five commands:

| command  | alias | does                                          |
|----------|-------|-----------------------------------------------|
| `chord`  | `c`   | build a chord from its name                   |
| `chords` |       | list the chord-building rules, in order       |
| `scale`  |       | build a scale from its name                   |
| `scales` |       | list the scale-building rules, in order       |
| `key`    | `k`   | find a key and its relative key               |

`music-theory --version` (or `-v`) prints the version. With no name,
`chord`, `scale` and `key` print their help. With no command, the
overall help is printed.

Build a chord:

    $ music-theory chord "Cm nondominant -5 679"
    root: C
    tones:
      3: Eb
      6: A
      7: Bb
      9: D

List the chord-building rules:

    $ music-theory chords
    - Basic
    - Nondominant
    - Major Triad
    ...

Build a scale:

    $ music-theory scale "C aug"
    root: C
    tones:
      1: C
      2: D#
      3: E
      4: G
      5: G#
      6: B

List the scale-building rules:

    $ music-theory scales

Find a key and its relative:

    $ music-theory key Db
    root: Db
    mode: Major
    relative:
      root: Bb
      mode: Minor

## Library

The package has four modules.

- `musictheory.note`: `PitchClass` (an `IntEnum`, `NIL` and `C` to `B`, with
  `step`, `spelled` and `diff`), `AdjSymbol` (`NO`, `SHARP`, `FLAT`), the
  `Note` dataclass, and the functions `adj_symbol_of`, `adj_symbol_begin`,
  `name_of`, `octave_of`, `named`, `of_class`, `class_named` and
  `root_and_remaining`.
- `musictheory.chord`: `parse_chord`, the `Chord` dataclass (`notes`,
  `transpose`, `to_yaml`), the `Form` rule class, `chord_form_names` and
  `chord_forms_yaml`.
- `musictheory.scale`: `parse_scale`, the `Scale` dataclass (`notes`,
  `to_yaml`), the `ScaleMode` rule class, `scale_mode_names` and
  `scale_modes_yaml`.
- `musictheory.key`: `parse_key`, `mode_of`, the `Mode` enum and the `Key`
  dataclass (`diff`, `relative_minor`, `relative_major`, `to_yaml`).

```python
from musictheory.note import PitchClass, AdjSymbol, root_and_remaining
from musictheory.chord import parse_chord, chord_form_names
from musictheory.scale import parse_scale
from musictheory.key import parse_key

chord = parse_chord("Cm769-5")
print(chord.to_yaml())
print([n.pitch_class for n in chord.notes()])
print(chord.transpose(3).to_yaml())

scale = parse_scale("C natural minor")
print(scale.to_yaml())

key = parse_key("A minor")
print(key.relative_major().to_yaml())
print(parse_key("C#").diff(parse_key("F#")))  # 5

print(PitchClass.CS.spelled(AdjSymbol.FLAT))  # Db
print(root_and_remaining("B♭min"))            # (PitchClass.AS, 'min')
```

### How names are read

The root is the leading letter `A`–`G`, optionally followed by `#`, `♯`,
`b` or `♭`; the rest of the name is matched against the rules. A name
without a recognisable root gets the `NIL` pitch class.

Chords and scales are built by applying every matching rule in order:
later rules overwrite tones set by earlier ones, and omissions are applied
last. `Key` reads its mode from the start of the remaining text: minor for
`m`, `min`, `minor` or `Minor`, major otherwise.

Whether accidentals are written as sharps or flats comes from the name
itself: `b`, `♭` or a leading `F` choose flats, `#`, `♯` or `major` choose
sharps, and otherwise minor or diminished names lean to flats and the rest
to sharps.

`PitchClass.diff` returns the shortest distance in semitones (a tritone
comes out as `-6`) and raises `ValueError` when either class is `NIL`.

## Limits

- A few chord rules, such as "Diminished Major Seventh", "Augmented Major
  Seventh" and "Augmented Minor Seventh", are recognised and listed but add
  no tones of their own.
- Results are written as YAML only; there is no other output format, no
  audio and no MIDI.

## Tests

    pip install .[test]
    pytest