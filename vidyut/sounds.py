"""Sanskrit sounds in SLP1: sound sets, Paninian notation and sound mappings.

`s` builds a `SoundSet` from Paninian notation (pratyaharas, savarna
vowels and `u~` classes). `sound_map` pairs the sounds of one set with the
phonetically closest sounds of another. The remaining functions are small
predicates and conversions on single sounds.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache

#: All sounds in their traditional order.
ORDER = "aAiIuUfFxXeEoOMHkKgGNcCjJYwWqQRtTdDnpPbBmyrlvSzsh"


class SoundSet:
    """An immutable set of Sanskrit sounds."""

    __slots__ = ("_chars",)

    def __init__(self, chars: Iterable[str] = "") -> None:
        self._chars = frozenset(chars)

    def __contains__(self, c: object) -> bool:
        return c in self._chars

    def __str__(self) -> str:
        """Return the members in the traditional Sanskrit order."""
        return "".join(c for c in ORDER if c in self._chars)

    def __repr__(self) -> str:
        return f"SoundSet({str(self)!r})"

    def __iter__(self) -> Iterator[str]:
        return iter(str(self))

    def __len__(self) -> int:
        return len(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SoundSet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)


# The fourteen Shiva sutras: (sounds, it letter).
_SUTRAS: tuple[tuple[str, str], ...] = (
    ("aiu", "R"),
    ("fx", "k"),
    ("eo", "N"),
    ("EO", "c"),
    ("hyvr", "w"),
    ("l", "R"),
    ("YmNRn", "m"),
    ("JB", "Y"),
    ("GQD", "z"),
    ("jbgqd", "S"),
    ("KPCWTcwt", "v"),
    ("kp", "y"),
    ("Szs", "r"),
    ("h", "l"),
)

_AK = frozenset(["a", "A", "i", "I", "u", "U", "f", "F", "x", "X"])

_SAVARNA_GROUPS = ("aA", "iI", "uU", "fFxX", "kKgGN", "cCjJY", "wWqQR", "tTdDn", "pPbBm")

_GUNA = {"i": "e", "I": "e", "u": "o", "U": "o", "f": "ar", "F": "ar", "x": "al", "X": "al"}

_VRDDHI = {
    "a": "A", "A": "A",
    "i": "E", "I": "E",
    "u": "O", "U": "O",
    "f": "Ar", "F": "Ar",
    "x": "Al", "X": "Al",
    "e": "E", "E": "E",
    "o": "O", "O": "O",
}

_HRASVA = {
    "a": "a", "A": "a",
    "i": "i", "I": "i",
    "u": "u", "U": "u",
    "f": "f", "F": "f",
    "x": "x", "X": "x",
    "e": "i", "E": "i",
    "o": "u", "O": "u",
}

_DIRGHA = {
    "a": "A", "A": "A",
    "i": "I", "I": "I",
    "u": "U", "U": "U",
    "f": "F", "F": "F",
    "x": "X", "X": "X",
    "e": "e", "E": "E",
    "o": "o", "O": "O",
}


def is_hrasva(c: str) -> bool:
    """Return whether `c` is a short vowel."""
    return c in ("a", "i", "u", "f", "x")


def is_dirgha(c: str) -> bool:
    """Return whether `c` is a long vowel."""
    return c in ("A", "I", "U", "F", "X", "e", "E", "o", "O")


def is_guna(c: str) -> bool:
    """Return whether `c` is a guna vowel."""
    return c in ("a", "e", "o")


def is_vrddhi(c: str) -> bool:
    """Return whether `c` is a vrddhi vowel."""
    return c in ("A", "E", "O")


def to_guna(c: str) -> str | None:
    """Return the guna substitute of `c`, or None if it has none."""
    return _GUNA.get(c)


def to_vrddhi(c: str) -> str | None:
    """Return the vrddhi substitute of `c`, or None if it has none."""
    return _VRDDHI.get(c)


def to_hrasva(c: str) -> str | None:
    """Return the short form of the vowel `c` (1.1.48), or None."""
    return _HRASVA.get(c)


def to_dirgha(c: str) -> str | None:
    """Return the long form of the vowel `c`, or None."""
    return _DIRGHA.get(c)


def _savarna_str(c: str) -> str:
    return next((group for group in _SAVARNA_GROUPS if c in group), "")


def is_savarna(x: str, y: str) -> bool:
    """Return whether `x` and `y` are savarna to each other."""
    return _savarna_str(x) == _savarna_str(y)


def savarna(c: str) -> SoundSet:
    """Return the set of `c` and all sounds savarna with it."""
    return SoundSet(_savarna_str(c))


def _pratyahara(term: str) -> SoundSet:
    """Return the sounds of a pratyahara; `R2` names the second `R`."""
    first = term[0]
    use_second_n = term.endswith("R2")
    it = "R" if use_second_n else term[-1]

    started = False
    saw_first_n = False
    sounds: list[str] = []
    for sutra_sounds, sutra_it in _SUTRAS:
        for sound in sutra_sounds:
            if sound == first:
                started = True
            if started:
                sounds.append(sound)
                # Long vowels are not written in the Shiva sutras.
                if is_hrasva(sound):
                    sounds.append(_DIRGHA[sound])
        if started and it == sutra_it:
            if use_second_n and not saw_first_n:
                saw_first_n = True
            else:
                break

    if not sounds:
        raise ValueError(f"could not parse pratyahara {term!r}")
    return SoundSet(sounds)


@lru_cache(maxsize=None)
def s(terms: str) -> SoundSet:
    """Create a sound set from whitespace-separated Paninian terms."""
    chars: set[str] = set()
    for term in terms.split():
        if term.endswith("u~") or term in _AK:
            chars.update(_savarna_str(term[0]))
        elif len(term) == 1:
            chars.add(term)
        else:
            chars.update(_pratyahara(term))
    return SoundSet(chars)


_AC = s("ac")
_HAL = s("hal")


def is_ac(c: str) -> bool:
    """Return whether `c` is a vowel."""
    return c in _AC


def is_hal(c: str) -> bool:
    """Return whether `c` is a consonant."""
    return c in _HAL


def is_samyogadi(text: str) -> bool:
    """Return whether `text` starts with two consecutive consonants."""
    return len(text) >= 2 and text[0] in _HAL and text[1] in _HAL


def is_samyoganta(text: str) -> bool:
    """Return whether `text` ends with two consecutive consonants (or `C`)."""
    if len(text) < 2:
        return False
    last, before = text[-1], text[-2]
    return (last in _HAL and before in _HAL) or last == "C"


class _Sthana(Enum):
    KANTHA = auto()
    TALU = auto()
    MURDHA = auto()
    DANTA = auto()
    OSHTHA = auto()
    NASIKA = auto()
    KANTHA_TALU = auto()
    KANTHA_OSHTHA = auto()
    DANTA_OSHTHA = auto()


class _Ghosha(Enum):
    GHOSHAVAT = auto()
    AGHOSHA = auto()


class _Prana(Enum):
    MAHAPRANA = auto()
    ALPAPRANA = auto()


class _Prayatna(Enum):
    VIVRTA = auto()
    ISHAT = auto()
    SPRSHTA = auto()


@dataclass(frozen=True)
class _Uccarana:
    sthana: tuple[_Sthana, ...]
    ghosha: _Ghosha
    prana: _Prana
    prayatna: _Prayatna

    def distance(self, other: _Uccarana) -> int:
        """Return a heuristic distance; closer sounds have smaller values."""
        dist = sum(
            (
                self.ghosha != other.ghosha,
                self.prana != other.prana,
                self.prayatna != other.prayatna,
            )
        )
        sthana_dist = len(self.sthana) + len(other.sthana)
        sthana_dist -= 2 * sum(1 for x in self.sthana if x in other.sthana)
        return dist + sthana_dist


def _create_sound_props() -> dict[str, _Uccarana]:
    sthana: dict[str, list[_Sthana]] = {}
    for terms, value in (
        ("a ku~ h H", _Sthana.KANTHA),
        ("i cu~ y S", _Sthana.TALU),
        ("f wu~ r z", _Sthana.MURDHA),
        ("x tu~ l s", _Sthana.DANTA),
        ("u pu~", _Sthana.OSHTHA),
        ("e E", _Sthana.KANTHA_TALU),
        ("o O", _Sthana.KANTHA_OSHTHA),
        ("v", _Sthana.DANTA_OSHTHA),
        ("Yam M", _Sthana.NASIKA),
    ):
        for k in s(terms):
            sthana.setdefault(k, []).append(value)

    def flatten(data):
        return {k: value for terms, value in data for k in s(terms)}

    ghosha = flatten([("ac haS M", _Ghosha.GHOSHAVAT), ("Kar H", _Ghosha.AGHOSHA)])
    prana = flatten(
        [
            ("ac yam jaS car M", _Prana.ALPAPRANA),
            ("K G C J W Q T D P B h", _Prana.MAHAPRANA),
        ]
    )
    prayatna = flatten(
        [
            ("yaR Sar", _Prayatna.ISHAT),
            ("ac h", _Prayatna.VIVRTA),
            ("Yay", _Prayatna.SPRSHTA),
        ]
    )

    return {
        k: _Uccarana(
            sthana=tuple(sthana.get(k, ())),
            ghosha=ghosha.get(k, _Ghosha.AGHOSHA),
            prana=prana.get(k, _Prana.ALPAPRANA),
            prayatna=prayatna.get(k, _Prayatna.VIVRTA),
        )
        for k in s("al H M")
    }


_SOUND_PROPS = _create_sound_props()


def _props(c: str) -> _Uccarana:
    try:
        return _SOUND_PROPS[c]
    except KeyError:
        raise ValueError(f"no phonetic properties for {c!r}") from None


def sound_map(keys: str, values: str) -> dict[str, str]:
    """Map each sound in `keys` to the phonetically closest sound in `values`.

    Both arguments use the notation of `s`. Ties go to the value that comes
    first in the traditional order.
    """
    candidates = str(s(values))
    if not candidates:
        raise ValueError(f"no sounds in {values!r}")
    mapping: dict[str, str] = {}
    for key in s(keys):
        key_props = _props(key)
        mapping[key] = min(candidates, key=lambda v: _props(v).distance(key_props))
    return mapping