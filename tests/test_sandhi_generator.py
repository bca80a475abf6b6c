import pytest

from vidyut.sandhi_generator import AC, Rule, generate_rules, is_savarna_ac


@pytest.mark.parametrize(
    "f, s, expected",
    [
        ("a", "a", True),
        ("A", "a", True),
        ("a", "A", True),
        ("A", "A", True),
        ("a", "k", False),
        ("a", "i", False),
    ],
)
def test_is_savarna_ac(f, s, expected):
    assert is_savarna_ac(f, s) is expected


@pytest.fixture(scope="module")
def rules():
    return generate_rules()


def test_first_rule(rules):
    assert rules[0] == Rule("a", "a", "A")


def test_known_rules_present(rules):
    assert Rule("a", "i", "e") in rules
    assert Rule("e", "a", "e '") in rules
    assert Rule("as", "a", "o '") in rules
    assert Rule("t", "S", "c C") in rules
    assert Rule("n", "l", "Ml l") in rules
    assert Rule("s", "", "H") in rules


def test_results_are_nonempty(rules):
    assert all(r.first and r.result for r in rules)


def test_ik_savarna_results_are_long(rules):
    for r in rules:
        if r.first in "iIuUfF" and len(r.first) == 1 and r.second in AC and r.second:
            if is_savarna_ac(r.first, r.second):
                assert r.result == r.second.upper()
            else:
                assert r.result.endswith(" " + r.second)


def test_as_and_As_not_in_other_s(rules):
    as_rules = [r for r in rules if r.first == "as"]
    seconds = [r.second for r in as_rules]
    assert len(seconds) == len(set(seconds))


def test_generation_is_deterministic(rules):
    assert generate_rules() == rules