"""Predicates on Sanskrit sounds in SLP1, used for sandhi splitting."""

_SANSKRIT = frozenset("aAiIuUfFxXeEoOMHkKgGNcCjJYwWqQRtTdDnpPbBmyrlvSzshL'")
_AC = frozenset("aAiIuUfFxXeEoO")
_GHOSHA = frozenset("aAiIuUfFxXeEoOgGNjJYqQRdDnbBmyrlvh")


def is_sanskrit(c: str) -> bool:
    """Return whether `c` is a Sanskrit sound or an avagraha."""
    return c in _SANSKRIT


def is_ac(c: str) -> bool:
    """Return whether `c` is a vowel."""
    return c in _AC


def is_ghosha(c: str) -> bool:
    """Return whether `c` is voiced."""
    return c in _GHOSHA