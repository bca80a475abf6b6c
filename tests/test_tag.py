import pytest

from vidyut.tag import Tag, UnknownItError

IT_SOUNDS = "aAiIuUfxeokKGNcCjJYwqQRtnpPmrlSzs"


def test_parse_it_known_values():
    assert Tag.parse_it("k") is Tag.kit
    assert Tag.parse_it("N") is Tag.Nit
    assert Tag.parse_it("S") is Tag.Sit


def test_parse_it_is_case_sensitive():
    assert Tag.parse_it("a") is Tag.adit
    assert Tag.parse_it("A") is Tag.Adit
    assert Tag.parse_it("a") is not Tag.parse_it("A")


def test_parse_it_gives_distinct_tags():
    tags = {Tag.parse_it(c) for c in IT_SOUNDS}
    assert len(tags) == len(IT_SOUNDS)


@pytest.mark.parametrize("c", IT_SOUNDS)
def test_parse_it_names_end_with_it(c):
    assert Tag.parse_it(c).name.endswith("it")


@pytest.mark.parametrize("c", ["h", "F", "X", "E", "O", "1", ""])
def test_parse_it_unknown(c):
    with pytest.raises(UnknownItError):
        Tag.parse_it(c)


def test_unknown_it_is_value_error():
    with pytest.raises(ValueError):
        Tag.parse_it("h")