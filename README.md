# vidyut

Tools for working with Sanskrit text written in SLP1 transliteration.

- **Sandhi rules**: `vidyut.sandhi_generator.generate_rules()` returns an ordered list of
  `Rule(first, second, result)` objects covering the common sound changes between two
  words (`a + i -> e`, `as + g -> o g`, `t + S -> c C`, ...).
- **Sandhi splitting**: `vidyut.splitter.Splitter` undoes those changes and lists every
  way a string may be split at a given position.
- **Sandhi sound checks**: `vidyut.sandhi_sounds` has `is_sanskrit`, `is_ac` and `is_ghosha`.
- **Paninian sounds**: `vidyut.sounds` expands Paninian notation such as `ac`, `hal`,
  `iR2` or `ku~` into a `SoundSet`, maps one class of sounds onto another by phonetic
  closeness (`sound_map`), and offers small helpers such as `is_hrasva`, `to_guna`,
  `to_dirgha`, `is_savarna`, `is_samyogadi` and `is_samyoganta`.
- **Tags and terms**: `vidyut.tag.Tag` enumerates the annotations a morpheme can carry
  (`Tag.parse_it` maps an *it* sound to its tag and raises `UnknownItError` otherwise);
  `vidyut.term.Term` is a morpheme's text with its upadesha, tags, gana and lakshanas, and
  `vidyut.term.TermView` groups a term with the agamas before it.
- **Stem lists**: `vidyut.stem_gana` holds tuples of stems such as `SARVA_ADI`,
  `TYAD_ADI` and `PURVA_ADI`.

## Installation

```
pip install .
```

## Generating a rules file

```
vidyut-generate-rules > sandhi_rules.csv
```

This writes a CSV with the header `first,second,result` and one row per generated rule
to standard output. The same can be done with `python -m vidyut.generate_rules`, or from
Python with `vidyut.generate_rules.write_rules(rules, stream)`.

## Splitting text

```python
from vidyut.splitter import Splitter

splitter = Splitter.from_csv("sandhi_rules.csv")
for split in splitter.split_at("ceti", 1):
    if split.is_valid():
        print(split.first, split.second, split.kind, split.location)
```

Each `Split` has `first`, `second`, `location` (`Location.WITHIN_CHUNK` or
`Location.END_OF_CHUNK`) and `kind` (`Kind.PREFIX` for a plain slice of the input,
`Kind.STANDARD` for an undone rule). `split_all(text)` collects the splits at every
position of the first chunk of `text`. `is_recursive(remaining)` tells whether a split
leaves the remainder unchanged.

A splitter can also be built directly from a `SplitsMap`:

```python
from vidyut.splitter import Splitter, SplitsMap

splits_map = SplitsMap()
splits_map.insert("e", ("a", "i"))
splitter = Splitter(splits_map)
```

Building a splitter from an empty `SplitsMap` raises `ValueError`. Reading a missing file
raises `OSError`; a file without rules raises `vidyut.errors.EmptyFileError`; a malformed
CSV raises `vidyut.errors.CsvFormatError`. Both derive from `vidyut.errors.SandhiError`.

## Sound sets

```python
from vidyut.sounds import s, sound_map

print(s("iR"))                       # iIuU
print(sound_map("Jal", "jaS")["K"])  # g
```

## What this package does not do

`Term`, `TermView` and `Tag` are building blocks only: the package has no engine that
derives complete words (verb forms, nominal forms or participles) from roots and stems,
and no list of roots to draw from.

## Running the tests

```
pip install ".[test]"
pytest
```