"""Undoing sandhi changes between Sanskrit words.

*Sandhi* is the set of sound changes that words and morphemes undergo when
they come into contact, e.g. *ca iti* becoming *ceti*. The splitter here
handles the common changes that occur between two words.
"""

from __future__ import annotations

import csv
import os
from collections.abc import KeysView
from dataclasses import dataclass
from enum import Enum

from vidyut.errors import CsvFormatError, EmptyFileError
from vidyut.sandhi_sounds import is_sanskrit


class Kind(Enum):
    """How a split was produced."""

    #: The input was sliced with no sandhi rule applied.
    PREFIX = "prefix"
    #: A specific sandhi rule was undone.
    STANDARD = "standard"


class Location(Enum):
    """Where a split falls relative to chunk boundaries."""

    WITHIN_CHUNK = "within_chunk"
    END_OF_CHUNK = "end_of_chunk"


_AC = frozenset("aAiIuUfFxXeEoO")
_HAL = frozenset("kKgGNcCjJYwWqQRtTdDnpPbBmyrlvzSsh")
_SPARSHA = frozenset("kKgGNcCjJYwWqQRtTdDnpPbBm")
_YAN = frozenset("yrlv")
# Vowels, standard final consonants, and "s" and "r".
_VALID_FINALS = frozenset("aAiIuUfFxXeEoOHkNwRtpnmsr")


@dataclass(frozen=True)
class Split:
    """One way of splitting a text into two parts."""

    first: str
    second: str
    location: Location
    kind: Kind

    def is_end_of_chunk(self) -> bool:
        """Return whether this split crosses a chunk boundary."""
        return self.location is Location.END_OF_CHUNK

    def is_valid(self) -> bool:
        """Return whether the split passes some basic phonetic heuristics.

        Splitting overgenerates, so callers usually filter with this check.
        """
        return is_good_first(self.first) and is_good_second(self.second)

    def is_recursive(self, remaining: str) -> bool:
        """Return whether accepting this split would recurse forever.

        A split such as ``AnandaH -> a AnandaH`` leaves the remainder
        unchanged and so could be applied again and again.
        """
        return self.second == remaining


class SplitsMap:
    """Maps a sandhi combination to the (first, second) pairs that produce it."""

    def __init__(self) -> None:
        self._map: dict[str, list[tuple[str, str]]] = {}

    def insert(self, key: str, value: tuple[str, str]) -> None:
        """Add the pair `value` as a source of the combination `key`."""
        self._map.setdefault(key, []).append(value)

    def keys(self) -> KeysView[str]:
        """Return all combinations in the map."""
        return self._map.keys()

    def get(self, key: str) -> list[tuple[str, str]]:
        """Return the pairs for `key`, or an empty list if there are none."""
        return list(self._map.get(key, ()))

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __len__(self) -> int:
        return len(self._map)


class Splitter:
    """Splits Sanskrit words and expressions according to a set of rules."""

    def __init__(self, splits_map: SplitsMap) -> None:
        if len(splits_map) == 0:
            raise ValueError("sandhi map is empty")
        self._map = splits_map
        self._len_longest_key = max(len(k) for k in splits_map.keys())

    @classmethod
    def from_csv(cls, path: str | os.PathLike[str]) -> Splitter:
        """Load rules from a CSV with columns `first`, `second` and `result`.

        Raises OSError if the file cannot be read, CsvFormatError if it is
        malformed and EmptyFileError if it holds no rules.
        """
        rules = SplitsMap()
        with open(path, newline="", encoding="utf-8") as f:
            try:
                header: list[str] | None = None
                for line_no, row in enumerate(csv.reader(f), start=1):
                    if not row:
                        continue
                    if header is None:
                        header = row
                        continue
                    if len(row) != len(header):
                        raise CsvFormatError(
                            f"line {line_no}: found record with {len(row)} fields, "
                            f"but the header has {len(header)} fields"
                        )
                    if len(row) < 3:
                        raise CsvFormatError(
                            f"line {line_no}: expected 3 fields, found {len(row)}"
                        )
                    first, second, result = row[0], row[1], row[2]
                    rules.insert(result, (first, second))
                    no_spaces = result.replace(" ", "")
                    if no_spaces != result:
                        rules.insert(no_spaces, (first, second))
            except csv.Error as err:
                raise CsvFormatError(str(err)) from err
            except UnicodeDecodeError as err:
                raise CsvFormatError(str(err)) from err

        if len(rules) == 0:
            raise EmptyFileError()
        return cls(rules)

    def split_at(self, text: str, i: int) -> list[Split]:
        """Return every way to split `text` at index `i`.

        The `first` part of each split is non-empty.
        """
        rest = text[i + 1:]
        head = text[: i + 1]

        # The plain slice comes first and is marked separately, since callers
        # may prune on it differently from real sandhi splits.
        splits = [
            Split(
                first=head,
                second=rest.lstrip(),
                location=(
                    Location.WITHIN_CHUNK
                    if rest and is_sanskrit(rest[0])
                    else Location.END_OF_CHUNK
                ),
                kind=Kind.PREFIX,
            )
        ]

        if head in ("sa", "eza"):
            splits.append(
                Split(head + "s", rest.lstrip(), Location.END_OF_CHUNK, Kind.STANDARD)
            )

        # At the end of the input, a final visarga may stand for "s" or "r".
        if i + 1 == len(text) and text.endswith("H"):
            splits.append(Split(visarga_to_s(text), "", Location.END_OF_CHUNK, Kind.STANDARD))
            splits.append(Split(visarga_to_r(text), "", Location.END_OF_CHUNK, Kind.STANDARD))

        end = min(len(text), i + self._len_longest_key + 1)
        for j in range(i, end):
            combination = text[i:j]
            location = (
                Location.END_OF_CHUNK if " " in combination else Location.WITHIN_CHUNK
            )
            for f, s in self._map.get(combination):
                splits.append(
                    Split(
                        first=text[:i] + f,
                        # The remainder may still begin with whitespace,
                        # e.g. "kaH sa" with the rule "H" -> ("s", "").
                        second=(s + text[j:]).lstrip(),
                        location=location,
                        kind=Kind.STANDARD,
                    )
                )
        return splits

    def split_all(self, text: str) -> list[Split]:
        """Return every split of `text` within its first chunk."""
        splits: list[Split] = []
        for i, c in enumerate(text):
            # Stop at non-sounds so that `first` stays one continuous chunk.
            if not is_sanskrit(c):
                break
            splits.extend(self.split_at(text, i))
        return splits


def visarga_to_s(text: str) -> str:
    """Replace the final sound (a visarga) of `text` with "s"."""
    return text[:-1] + "s"


def visarga_to_r(text: str) -> str:
    """Replace the final sound (a visarga) of `text` with "r"."""
    return text[:-1] + "r"


def is_good_first(text: str) -> bool:
    """Return whether `text` is plausible as the first part of a split."""
    if len(text) >= 2:
        x, y = text[-2], text[-1]
        if (x in _AC and y in _AC) or (x in _HAL and y in _HAL):
            return False
    if not text:
        return True
    return text[-1] in _VALID_FINALS


def is_good_second(text: str) -> bool:
    """Return whether `text` is plausible as the second part of a split."""
    if len(text) < 2:
        return True
    x, y = text[0], text[1]
    if x in _AC and y in _AC:
        # A double initial vowel is invalid, but "afRin" is acceptable.
        return text.startswith("afR")
    # An initial semivowel must not be followed by a stop.
    return not (x in _YAN and y in _SPARSHA)