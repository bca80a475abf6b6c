import pytest

from vidyut.errors import CsvFormatError, EmptyFileError
from vidyut.splitter import (
    Kind,
    Location,
    Split,
    SplitsMap,
    Splitter,
    is_good_first,
    is_good_second,
    visarga_to_r,
    visarga_to_s,
)

W = Location.WITHIN_CHUNK
E = Location.END_OF_CHUNK
P = Kind.PREFIX
S = Kind.STANDARD


def make_splitter(rules):
    m = SplitsMap()
    for key, value in rules:
        m.insert(key, value)
    return Splitter(m)


def splits(items):
    return [Split(f, s, loc, kind) for f, s, loc, kind in items]


def test_visarga_to_s():
    assert visarga_to_s("naraH") == "naras"


def test_visarga_to_r():
    assert visarga_to_r("naraH") == "narar"


def test_split_at_start_of_chunk():
    sandhi = make_splitter([
        ("ar", ("a", "f")),
        ("ar", ("a", "F")),
        ("ar", ("A", "f")),
        ("ar", ("A", "F")),
    ])
    expected = splits([
        ("a", "rka", W, P),
        ("a", "fka", W, S),
        ("a", "Fka", W, S),
        ("A", "fka", W, S),
        ("A", "Fka", W, S),
    ])
    assert sandhi.split_at("arka", 0) == expected


def test_split_at_middle_of_chunk():
    sandhi = make_splitter([
        ("e", ("a", "i")),
        ("e", ("a", "I")),
        ("e", ("A", "i")),
        ("e", ("A", "I")),
    ])
    expected = splits([
        ("ce", "ti", W, P),
        ("ca", "iti", W, S),
        ("ca", "Iti", W, S),
        ("cA", "iti", W, S),
        ("cA", "Iti", W, S),
    ])
    assert sandhi.split_at("ceti", 1) == expected


def test_split_at_end_of_chunk_trims_whitespace():
    sandhi = make_splitter([("o", ("a", "u"))])
    expected = splits([("nare", "ca", E, P)])
    assert sandhi.split_at("nare ca", 3) == expected


def test_split_at_end_of_input():
    sandhi = make_splitter([("e", ("a", "i"))])
    expected = splits([
        ("devaH", "", E, P),
        ("devas", "", E, S),
        ("devar", "", E, S),
    ])
    assert sandhi.split_at("devaH", 4) == expected


def test_split_at_sa_special_case():
    sandhi = make_splitter([("e", ("a", "i"))])
    expected = splits([
        ("sa", "gacCati", E, P),
        ("sas", "gacCati", E, S),
    ])
    assert sandhi.split_at("sa gacCati", 1) == expected


def test_split_all():
    sandhi = make_splitter([("e", ("a", "i"))])
    result = [(x.first, x.second) for x in sandhi.split_all("ceti")]
    assert result == [
        ("c", "eti"),
        ("ce", "ti"),
        ("ca", "iti"),
        ("cet", "i"),
        ("ceti", ""),
    ]


def test_split_all_stops_at_non_sanskrit():
    sandhi = make_splitter([("e", ("a", "i"))])
    result = [x.first for x in sandhi.split_all("ca iti")]
    assert result == ["c", "ca"]


def test_split_flags():
    split = Split("rAma", "yogena", E, S)
    assert split.is_end_of_chunk() is True
    assert split.is_valid() is True
    assert split.is_recursive("yogena") is True
    assert split.is_recursive("gena") is False
    assert Split("vAc", "rAma", W, P).is_end_of_chunk() is False
    assert Split("vAc", "rAma", W, P).is_valid() is False
    assert Split("rAma", "lga", W, P).is_valid() is False


def test_splits_map():
    m = SplitsMap()
    m.insert("e", ("a", "i"))
    m.insert("e", ("A", "i"))
    m.insert("o", ("a", "u"))
    assert m.get("e") == [("a", "i"), ("A", "i")]
    assert m.get("x") == []
    assert sorted(m.keys()) == ["e", "o"]
    assert "o" in m
    assert len(m) == 2


def test_splitter_requires_rules():
    with pytest.raises(ValueError):
        Splitter(SplitsMap())


@pytest.mark.parametrize(
    "word",
    ["rAma", "rAjA", "iti", "nadI", "maDu", "gurU", "pitf", "F", "laBate", "vE",
     "aho", "narO", "naraH", "vAk", "rAw", "prAN", "vit", "narAn", "anuzWup", "naram"],
)
def test_is_good_first(word):
    assert is_good_first(word) is True


@pytest.mark.parametrize("word", ["PalaM", "zaz", "vAc"])
def test_is_not_good_first(word):
    assert is_good_first(word) is False


@pytest.mark.parametrize(
    "word",
    ["yogena", "rAma", "leKaH", "vE", "kArtsnyam", "vraja", "vyajanam", "afRin"],
)
def test_is_good_second(word):
    assert is_good_second(word) is True


@pytest.mark.parametrize("word", ["rmakzetre", "lga", "aitad", "fasya", "Fasya"])
def test_is_not_good_second(word):
    assert is_good_second(word) is False


def test_from_csv(tmp_path):
    path = tmp_path / "rules.csv"
    path.write_text("first,second,result\na,i,e\nas,a,o '\n", encoding="utf-8")
    sandhi = Splitter.from_csv(path)
    assert sandhi.split_at("ceti", 1) == splits([
        ("ce", "ti", W, P),
        ("ca", "iti", W, S),
    ])
    # The result without spaces is indexed too.
    assert ("kas", "atra") in [(x.first, x.second) for x in sandhi.split_at("ko'tra", 1)]


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Splitter.from_csv(tmp_path / "unknown")


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(EmptyFileError):
        Splitter.from_csv(path)


def test_read_header_only_file(tmp_path):
    path = tmp_path / "header.csv"
    path.write_text("first,second,result\n", encoding="utf-8")
    with pytest.raises(EmptyFileError):
        Splitter.from_csv(path)


def test_read_invalid_file(tmp_path):
    path = tmp_path / "invalid.csv"
    path.write_text("a,b,c\nx,y", encoding="utf-8")
    with pytest.raises(CsvFormatError):
        Splitter.from_csv(path)