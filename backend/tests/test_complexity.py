import random

import pytest

from dicepass.limits import DEFAULT_COMPLEX_CHARS
from dicepass.services.builder import PassphraseBuilder
from dicepass.services.complexity import ComplexityTransformer, title_case
from dicepass.services.dice import DiceRoller


class ScriptedRandom:
    """Fixed draws for choice() and randint(), with bounds checked"""

    def __init__(self, choices=(), ints=()):
        self._choices = iter(choices)
        self._ints = iter(ints)
        self.randint_calls = []

    def choice(self, seq):
        value = next(self._choices)
        assert value in seq
        return value

    def randint(self, a, b):
        self.randint_calls.append((a, b))
        value = next(self._ints)
        assert a <= value <= b
        return value


def test_title_case():
    assert title_case("correct horse battery") == "Correct Horse Battery"
    assert title_case("mIxEd CASE") == "Mixed Case"
    assert title_case("1984 a&p") == "1984 A&p"


def test_title_case_only_touches_ascii():
    assert title_case("éclair ünder") == "éclair ünder"


def test_transform_replaces_delimiters_then_injects_digit():
    rng = ScriptedRandom(choices=["!", "7"], ints=[2, 9])

    result = ComplexityTransformer(rng).transform("able baker cat", DEFAULT_COMPLEX_CHARS)

    # "Able!Baker7Cat" with index 2 overwritten by 9
    assert result == "Ab9e!Baker7Cat"
    assert rng.randint_calls == [(1, 13), (0, 9)]


def test_transform_single_word_never_replaces_first_character():
    rng = ScriptedRandom(ints=[1, 0])

    assert ComplexityTransformer(rng).transform("able", "#") == "A0le"


def test_transform_single_character_appends_digit():
    rng = ScriptedRandom(ints=[5])

    assert ComplexityTransformer(rng).transform("a", "#") == "A5"


def test_transform_requires_complex_chars():
    with pytest.raises(ValueError):
        ComplexityTransformer().transform("able baker", "")


def test_transform_uses_only_given_characters_for_delimiters():
    transformer = ComplexityTransformer(random.Random(3))

    for _ in range(100):
        result = transformer.transform("aaa bbb ccc ddd", "#")
        assert result.count("#") + sum(c.isdigit() for c in result) >= 3
        assert set(result) <= set("AaBbCcDd#0123456789")


def test_transform_properties(full_wordlist):
    rng = random.Random(42)
    builder = PassphraseBuilder(DiceRoller(rng))
    transformer = ComplexityTransformer(rng)

    for _ in range(1000):
        plain = builder.build(19, full_wordlist)
        result = transformer.transform(plain, DEFAULT_COMPLEX_CHARS)

        assert any(char.isdigit() for char in result)
        assert " " not in result
        assert len(result) == len(plain)
        # Position 0 is never overwritten
        assert result[0] == plain[0].upper()
