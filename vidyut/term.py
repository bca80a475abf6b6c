"""Terms of a derivation and views over a term with its agamas."""

from __future__ import annotations

from collections.abc import Container, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from vidyut.tag import Tag

#: A sound pattern: a single sound, or any container of sounds.
Pattern = Union[str, Container[str]]


def _matches(c: str | None, pattern: Pattern) -> bool:
    if c is None:
        return False
    if isinstance(pattern, str):
        return c == pattern
    return c in pattern


@dataclass
class Term:
    """A text string with metadata, generalising an upadesha."""

    u: str | None
    text: str
    tags: set[Tag] = field(default_factory=set)
    gana: int | None = None
    antargana: Any = None
    lakshana: list[str] = field(default_factory=list)

    # Constructors

    @classmethod
    def make_upadesha(cls, s: str) -> Term:
        """Create a term whose upadesha and text are both `s`."""
        return cls(u=s, text=s)

    @classmethod
    def make_text(cls, s: str) -> Term:
        """Create a term with text `s` and no upadesha."""
        return cls(u=None, text=s)

    @classmethod
    def make_dhatu(cls, s: str, gana: int, antargana: Any) -> Term:
        """Create a dhatu in the given gana and antargana."""
        return cls(u=s, text=s, gana=gana, antargana=antargana)

    @classmethod
    def make_agama(cls, s: str) -> Term:
        """Create an agama."""
        return cls(u=s, text=s, tags={Tag.Agama})

    # Sound selectors

    def adi(self) -> str | None:
        """Return the first sound, if any."""
        return self.text[0] if self.text else None

    def antya(self) -> str | None:
        """Return the last sound, if any."""
        return self.text[-1] if self.text else None

    def upadha(self) -> str | None:
        """Return the penultimate sound, if any."""
        return self.text[-2] if len(self.text) >= 2 else None

    def get_at(self, i: int) -> str | None:
        """Return the sound at index `i`, if any."""
        return self.text[i] if 0 <= i < len(self.text) else None

    # Sound properties

    def has_adi(self, pattern: Pattern) -> bool:
        return _matches(self.adi(), pattern)

    def has_antya(self, pattern: Pattern) -> bool:
        return _matches(self.antya(), pattern)

    def has_upadha(self, pattern: Pattern) -> bool:
        return _matches(self.upadha(), pattern)

    def has_at(self, i: int, pattern: Pattern) -> bool:
        return _matches(self.get_at(i), pattern)

    def has_u(self, s: str) -> bool:
        return self.u is not None and self.u == s

    def has_u_in(self, items: Iterable[str]) -> bool:
        return self.u is not None and self.u in items

    def has_any_lakshana(self) -> bool:
        return bool(self.lakshana)

    def has_lakshana(self, u: str) -> bool:
        return u in self.lakshana

    def has_lakshana_in(self, us: Iterable[str]) -> bool:
        wanted = set(us)
        return any(x in wanted for x in self.lakshana)

    def has_text(self, text: str) -> bool:
        return self.text == text

    def has_text_in(self, items: Iterable[str]) -> bool:
        return self.text in items

    def has_prefix_in(self, prefixes: Iterable[str]) -> bool:
        return any(self.text.startswith(x) for x in prefixes)

    def ends_with(self, value: str) -> bool:
        return self.text.endswith(value)

    def has_gana(self, gana: int) -> bool:
        """Return whether the term belongs to the given root gana."""
        return self.gana is not None and self.gana == gana

    def has_antargana(self, antargana: Any) -> bool:
        return self.antargana is not None and self.antargana == antargana

    def is_empty(self) -> bool:
        """Return whether the term's text is empty."""
        return not self.text

    # Tags

    def all(self, tags: Iterable[Tag]) -> bool:
        """Return whether the term has every tag in `tags`."""
        return all(t in self.tags for t in tags)

    def has_tag_in(self, tags: Iterable[Tag]) -> bool:
        """Return whether the term has any tag in `tags`."""
        return any(t in self.tags for t in tags)

    def has_tag(self, tag: Tag) -> bool:
        return tag in self.tags

    # Mutators

    def set_adi(self, s: str) -> None:
        self.text = s + self.text[1:]

    def set_antya(self, s: str) -> None:
        if self.text:
            self.text = self.text[:-1] + s

    def set_upadha(self, s: str) -> None:
        n = len(self.text)
        if n >= 2:
            self.text = self.text[: n - 2] + s + self.text[n - 1:]

    def set_at(self, i: int, s: str) -> None:
        """Replace the sound at index `i` with `s`."""
        if not 0 <= i < len(self.text):
            raise IndexError(f"index {i} out of range for {self.text!r}")
        self.text = self.text[:i] + s + self.text[i + 1:]

    def set_u(self, s: str) -> None:
        self.u = s

    def set_text(self, s: str) -> None:
        self.text = s

    def find_and_replace_text(self, needle: str, sub: str) -> None:
        self.text = self.text.replace(needle, sub)

    def save_lakshana(self) -> None:
        """Remember the current upadesha as a lakshana."""
        if self.u is not None:
            self.lakshana.append(self.u)

    def add_tag(self, tag: Tag) -> None:
        self.tags.add(tag)

    def add_tags(self, tags: Iterable[Tag]) -> None:
        self.tags.update(tags)

    def remove_tag(self, tag: Tag) -> None:
        self.tags.discard(tag)

    def remove_tags(self, tags: Iterable[Tag]) -> None:
        self.tags.difference_update(tags)


class TermView:
    """A term bundled with the agamas that precede it.

    Examples: isIDvam [i + sIyu~w + Dvam], isya [i + sya].
    """

    def __init__(self, terms: Sequence[Term], start: int, end: int) -> None:
        self.terms = terms
        self.start = start
        self.end = end

    @classmethod
    def create(cls, terms: Sequence[Term], start: int) -> TermView | None:
        """Return a view starting at `start`, or None if there is none."""
        if start >= len(terms):
            return None
        end = start
        for i in range(start, len(terms)):
            t = terms[i]
            # A kit agama belongs to the term before it; iw is the exception.
            if i == start and t.all((Tag.Agama, Tag.kit)) and not t.has_u("iw"):
                return None
            if not t.has_tag(Tag.Agama):
                end = i
                break
        return cls(terms, start, end)

    def slice(self) -> list[Term]:
        return list(self.terms[self.start: self.end + 1])

    def first(self) -> Term | None:
        return self.terms[self.start] if self.start < len(self.terms) else None

    def last(self) -> Term | None:
        return self.terms[self.end] if self.end < len(self.terms) else None

    def get(self, i: int) -> Term | None:
        items = self.slice()
        return items[i] if 0 <= i < len(items) else None

    def is_padanta(self) -> bool:
        return self.is_empty() and self.ends_word()

    def is_empty(self) -> bool:
        """Return whether the view has no text."""
        return all(not t.text for t in self.slice())

    def ends_word(self) -> bool:
        """Return whether the view reaches the end of the word."""
        return self.end == len(self.terms) - 1

    def adi(self) -> str | None:
        return next((c for t in self.slice() if (c := t.adi()) is not None), None)

    def antya(self) -> str | None:
        return next(
            (c for t in reversed(self.slice()) if (c := t.antya()) is not None), None
        )

    def has_adi(self, pattern: Pattern) -> bool:
        return _matches(self.adi(), pattern)

    def has_antya(self, pattern: Pattern) -> bool:
        return _matches(self.antya(), pattern)

    def has_u(self, u: str) -> bool:
        items = self.slice()
        return bool(items) and items[0].has_u(u)

    def has_u_in(self, us: Iterable[str]) -> bool:
        items = self.slice()
        return bool(items) and items[0].has_u_in(us)

    def has_tag(self, tag: Tag) -> bool:
        return any(t.has_tag(tag) for t in self.slice())

    def has_lakshana(self, s: str) -> bool:
        return any(t.has_lakshana(s) for t in self.slice())

    def has_lakshana_in(self, items: Iterable[str]) -> bool:
        wanted = list(items)
        return any(t.has_lakshana_in(wanted) for t in self.slice())

    def all(self, tags: Iterable[Tag]) -> bool:
        """Return whether every tag is held by some term in the view."""
        return all(self.has_tag(tag) for tag in tags)

    def has_tag_in(self, tags: Iterable[Tag]) -> bool:
        return any(self.has_tag(tag) for tag in tags)

    def is_knit(self) -> bool:
        return self.has_tag_in((Tag.kit, Tag.Nit))