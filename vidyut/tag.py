"""Annotations carried by terms during a derivation."""

from __future__ import annotations

from enum import Enum, auto


class UnknownItError(ValueError):
    """A sound does not name any known *it* marker."""

    def __init__(self, it: str) -> None:
        super().__init__(f"unknown it sound: {it!r}")
        self.it = it


class Tag(Enum):
    """An annotation on a `Term`.

    Tags model traditional samjnas as well as other long-lived facts that a
    derivation needs to track, such as whether guna was applied earlier.
    """

    # Morpheme types
    Upasarga = auto()
    Dhatu = auto()
    Ghu = auto()
    Agama = auto()
    Pratyaya = auto()
    Pratipadika = auto()
    Vibhakti = auto()
    Sarvanama = auto()
    Sarvanamasthana = auto()
    Tin = auto()
    Nistha = auto()
    Krt = auto()
    Krtya = auto()
    Sup = auto()
    Taddhita = auto()
    Vikarana = auto()

    # it markers
    adit = auto()
    Adit = auto()
    idit = auto()
    Idit = auto()
    udit = auto()
    Udit = auto()
    fdit = auto()
    xdit = auto()
    edit = auto()
    odit = auto()
    kit = auto()
    Kit = auto()
    Git = auto()
    Nit = auto()
    cit = auto()
    Cit = auto()
    jit = auto()
    Jit = auto()
    Yit = auto()
    wit = auto()
    qit = auto()
    Qit = auto()
    Rit = auto()
    tit = auto()
    nit = auto()
    pit = auto()
    Pit = auto()
    mit = auto()
    rit = auto()
    lit = auto()
    Sit = auto()
    zit = auto()
    sit = auto()

    irit = auto()
    YIt = auto()
    wvit = auto()
    qvit = auto()

    # Deletion
    Luk = auto()
    Slu = auto()
    Lup = auto()

    # Accent
    Anudatta = auto()
    Svarita = auto()
    anudattet = auto()
    svaritet = auto()

    # Pada
    Parasmaipada = auto()
    Atmanepada = auto()

    # Artha
    Ashih = auto()
    Sanartha = auto()
    Yanartha = auto()

    # Dialect
    Chandasi = auto()

    # Prayoga
    Kartari = auto()
    Bhave = auto()
    Karmani = auto()

    # Purusha
    Prathama = auto()
    Madhyama = auto()
    Uttama = auto()

    # Vacana
    Ekavacana = auto()
    Dvivacana = auto()
    Bahuvacana = auto()

    # Vibhakti
    V1 = auto()
    V2 = auto()
    V3 = auto()
    V4 = auto()
    V5 = auto()
    V6 = auto()
    V7 = auto()

    # Linga
    Pum = auto()
    Stri = auto()
    Napumsaka = auto()

    # Stem types
    Nadi = auto()
    Ghi = auto()

    # Vibhakti conditions
    Sambodhana = auto()
    Amantrita = auto()
    Sambuddhi = auto()

    # Dvitva
    Abhyasa = auto()
    Abhyasta = auto()

    # Dhatuka
    Ardhadhatuka = auto()
    Sarvadhatuka = auto()

    # Flags on a term
    FlagGunaApavada = auto()
    FlagGuna = auto()

    # Flags on a derivation
    FlagAdeshadi = auto()
    FlagNoArdhadhatuka = auto()
    FlagHasAnitKsa = auto()
    FlagHagSetSic = auto()
    FlagAtAgama = auto()
    FlagAtLopa = auto()
    FlagNaLopa = auto()

    Sat = auto()
    Snam = auto()
    Cinvat = auto()

    StriNyap = auto()
    TrnTrc = auto()
    Pada = auto()
    Bha = auto()

    @classmethod
    def parse_it(cls, it: str) -> Tag:
        """Return the tag for the *it* sound `it`.

        Raises UnknownItError if `it` is not an *it* sound.
        """
        try:
            return cls[_IT_NAMES[it]]
        except KeyError:
            raise UnknownItError(it) from None


_IT_NAMES: dict[str, str] = {
    "a": "adit",
    "A": "Adit",
    "i": "idit",
    "I": "Idit",
    "u": "udit",
    "U": "Udit",
    "f": "fdit",
    "x": "xdit",
    "e": "edit",
    "o": "odit",
    "k": "kit",
    "K": "Kit",
    "G": "Git",
    "N": "Nit",
    "c": "cit",
    "C": "Cit",
    "j": "jit",
    "J": "Jit",
    "Y": "Yit",
    "w": "wit",
    "q": "qit",
    "Q": "Qit",
    "R": "Rit",
    "t": "tit",
    "n": "nit",
    "p": "pit",
    "P": "Pit",
    "m": "mit",
    "r": "rit",
    "l": "lit",
    "S": "Sit",
    "z": "zit",
    "s": "sit",
}