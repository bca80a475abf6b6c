"""Generation of the common sandhi rules that apply between two words."""

from __future__ import annotations

from dataclasses import dataclass

AC = "aAiIuUfFxXeEoO"
HAL = "kKgGNcCjJYwWqQRtTdDnpPbBmyrlvSzsh"

_GHOSHAVAT = frozenset("aAiIuUfFxXeEoOgGNjJYqQRdDnbBmyrlvh")
_ANUNASIKA = frozenset("NYRnm")

_DIRGHA = {
    "a": "A", "A": "A",
    "i": "I", "I": "I",
    "u": "U", "U": "U",
    "f": "F", "F": "F",
    "x": "X", "X": "X",
    "e": "e", "E": "E",
    "o": "o", "O": "O",
}

_YAN = {
    "i": "y", "I": "y",
    "u": "v", "U": "v",
    "f": "r", "F": "r",
    "x": "l", "X": "l",
}

_A_RESULTS = {
    "a": "A", "A": "A",
    "i": "e", "I": "e",
    "u": "o", "U": "o",
    "f": "ar", "F": "ar",
    "x": "al", "X": "al",
    "e": "E", "E": "E",
    "o": "O", "O": "O",
}


@dataclass(frozen=True)
class Rule:
    """A sandhi rule: `first` + `second` combine into `result`."""

    first: str
    second: str
    result: str


def is_savarna_ac(f: str, s: str) -> bool:
    """Return whether two vowels share the same point of pronunciation."""
    return f.lower() == s.lower()


def _is_ghoshavat(c: str) -> bool:
    return c in _GHOSHAVAT


def _to_dirgha(c: str) -> str:
    try:
        return _DIRGHA[c]
    except KeyError:
        raise ValueError(f"not a vowel: {c!r}") from None


def _to_yan(c: str) -> str:
    try:
        return _YAN[c]
    except KeyError:
        raise ValueError(f"not an ik vowel: {c!r}") from None


def _ru_khar(vowel: str, s: str) -> str:
    if s in "cC":
        tail = "S"
    elif s in "wW":
        tail = "z"
    elif s in "tT":
        tail = "s"
    else:
        tail = "H"
    return f"{vowel}{tail}"


def _a_sandhi(rules: list[Rule]) -> None:
    for f in "aA":
        for s in AC:
            rules.append(Rule(f, s, _A_RESULTS[s]))


def _ik_sandhi(rules: list[Rule]) -> None:
    for f in "iIuUfF":
        for s in AC:
            if is_savarna_ac(f, s):
                result = _to_dirgha(s)
            else:
                result = f"{_to_yan(f)} {s}"
            rules.append(Rule(f, s, result))


def _ec_sandhi(rules: list[Rule]) -> None:
    for s in AC:
        rules.append(Rule("e", s, "e '" if s == "a" else f"a {s}"))
    for s in AC:
        rules.append(Rule("E", s, f"A {s}"))
    for s in AC:
        rules.append(Rule("O", s, f"Av {s}"))


def _as_sandhi(rules: list[Rule]) -> None:
    first = "as"
    for s in AC:
        rules.append(Rule(first, s, "o '" if s == "a" else f"a {s}"))
    for s in HAL:
        head = "o" if _is_ghoshavat(s) else _ru_khar("a", s)
        rules.append(Rule(first, s, f"{head} {s}"))


def _aas_sandhi(rules: list[Rule]) -> None:
    first = "As"
    for s in AC:
        rules.append(Rule(first, s, f"A {s}"))
    for s in HAL:
        head = "A" if _is_ghoshavat(s) else _ru_khar("A", s)
        rules.append(Rule(first, s, f"{head} {s}"))


def _other_s_sandhi(rules: list[Rule]) -> None:
    for vowel in "aAiIuUfFeEoO":
        for cons in "rs":
            first = f"{vowel}{cons}"
            if first in ("as", "As"):
                continue
            for s in AC:
                rules.append(Rule(first, s, f"{vowel}r {s}"))
            for s in HAL:
                if _is_ghoshavat(s):
                    head = _to_dirgha(vowel) if s == "r" else f"{vowel}r"
                else:
                    head = _ru_khar(vowel, s)
                rules.append(Rule(first, s, f"{head} {s}"))


def _t_sandhi(rules: list[Rule]) -> None:
    first = "t"
    rules.extend(Rule(first, s, f"d {s}") for s in AC)
    rules.append(Rule(first, "S", "c C"))
    rules.append(Rule(first, "h", "d D"))
    rules.extend(Rule(first, s, f"n {s}") for s in "NYRnm")

    replacements = {"c": "c", "C": "c", "j": "j", "J": "j", "w": "w",
                    "W": "w", "q": "q", "Q": "q", "l": "l"}
    for s in "gGcCjJwWqQdDbByrlv":
        rules.append(Rule(first, s, f"{replacements.get(s, 'd')} {s}"))


def _n_sandhi(rules: list[Rule]) -> None:
    first = "n"
    for f in "ai":
        rules.extend(Rule(f"{f}n", s, f"{f}nn {s}") for s in AC)

    replacements = {
        "j": "Y", "J": "Y", "S": "Y",
        "q": "R", "Q": "R",
        "l": "~l",
        "c": "MS", "C": "MS",
        "w": "Mz", "W": "Mz",
        "t": "Ms", "T": "Ms",
    }
    for s in HAL:
        if s in replacements:
            rules.append(Rule(first, s, f"{replacements[s]} {s}"))

    # Fallback for encodings without nasal vowels.
    rules.append(Rule(first, "l", "Ml l"))
    rules.append(Rule(first, "S", "c C"))
    rules.append(Rule(first, "h", "d D"))
    rules.extend(Rule(first, s, f"n {s}") for s in "NYRnm")


def _m_sandhi(rules: list[Rule]) -> None:
    rules.extend(Rule("m", s, f"M {s}") for s in HAL)


def _other_cons_sandhi(rules: list[Rule]) -> None:
    nasal = {"k": "N", "w": "R", "p": "m"}
    voiced = {"k": "g", "w": "q", "p": "b"}
    aspirated = {"k": "G", "w": "Q", "p": "B"}
    for f in "kwp":
        for s in filter(_is_ghoshavat, HAL):
            head = nasal[f] if s in _ANUNASIKA else voiced[f]
            tail = aspirated[f] if s == "h" else s
            rules.append(Rule(f, s, f"{head} {tail}"))


def _ac_sandhi(rules: list[Rule]) -> None:
    _a_sandhi(rules)
    _ik_sandhi(rules)
    _ec_sandhi(rules)
    rules.extend(Rule(f, "C", f"{f} cC") for f in "aiufx")


def _visarga_sandhi(rules: list[Rule]) -> None:
    _as_sandhi(rules)
    _aas_sandhi(rules)
    _other_s_sandhi(rules)
    # Useful when sandhi is applied inconsistently, e.g. "pARqavAH cEva".
    rules.append(Rule("s", "", "H"))


def _hal_sandhi(rules: list[Rule]) -> None:
    _t_sandhi(rules)
    _n_sandhi(rules)
    _m_sandhi(rules)
    _other_cons_sandhi(rules)


def generate_rules() -> list[Rule]:
    """Create a comprehensive, ordered list of sandhi rules."""
    rules: list[Rule] = []
    _ac_sandhi(rules)
    _visarga_sandhi(rules)
    _hal_sandhi(rules)
    return rules