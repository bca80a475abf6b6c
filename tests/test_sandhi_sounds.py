import pytest

from vidyut.sandhi_sounds import is_ac, is_ghosha, is_sanskrit


@pytest.mark.parametrize("c", "aAiIuUfFxXeEoOMHkKgGNcCjJYwWqQRtTdDnpPbBmyrlvSzshL'")
def test_is_sanskrit_true(c):
    assert is_sanskrit(c)


@pytest.mark.parametrize("c", "0123456789,.![]|")
def test_is_sanskrit_false(c):
    assert not is_sanskrit(c)


@pytest.mark.parametrize("c", "aAiIuUfFxXeEoO")
def test_is_ac_true(c):
    assert is_ac(c)


@pytest.mark.parametrize("c", "kKgGnSzsh0123456789 '+")
def test_is_ac_false(c):
    assert not is_ac(c)


@pytest.mark.parametrize("c", "aAiIuUfFxXeEoOgGnjJYqQRdDnbBmyrlvh")
def test_is_ghosha_true(c):
    assert is_ghosha(c)


@pytest.mark.parametrize("c", "kKcCwWtTpPSzs")
def test_is_ghosha_false(c):
    assert not is_ghosha(c)