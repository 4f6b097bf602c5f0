import random

import pytest

from dicepass.errors import ConfigurationError, MissingWord
from dicepass.limits import DEFAULT_COMPLEX_CHARS
from dicepass.services.builder import PassphraseBuilder
from dicepass.services.generator import (
    GenerationRequest,
    PassphraseGenerator,
    generate_passphrases,
)
from dicepass.services.telemetry import (
    GENERATION_FAILURES,
    PASSPHRASES_GENERATED,
    get_counters_snapshot,
)
from dicepass.services.wordlist import WordList


class CountingRandom(random.Random):
    """Seeded random source that records every draw"""

    def __init__(self, seed=0):
        super().__init__(seed)
        self.draws = 0

    def randint(self, a, b):
        self.draws += 1
        return super().randint(a, b)

    def choice(self, seq):
        self.draws += 1
        return super().choice(seq)


class ScriptedRoller:
    def __init__(self, codes):
        self._codes = iter(codes)

    def roll(self):
        return next(self._codes)


def test_request_defaults():
    request = GenerationRequest()

    assert request.min_chars == 19
    assert request.quantity == 1
    assert request.complex_mode is False
    assert request.complex_chars == DEFAULT_COMPLEX_CHARS
    assert set("0123456789") <= set(request.complex_chars)
    assert set("`~!@#$%^&*()-_=+[]{}\\|;:,.<>/?") <= set(request.complex_chars)


def test_request_is_immutable():
    request = GenerationRequest()

    with pytest.raises(AttributeError):
        request.min_chars = 40  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"min_chars": 11}, "min_chars must be >= 12"),
        ({"min_chars": "19"}, "min_chars must be an integer"),
        ({"quantity": 0}, "quantity must be >= 1"),
        ({"quantity": True}, "quantity must be an integer"),
        ({"complex_chars": ""}, "complex_chars must not be empty"),
        ({"complex_chars": "! ?"}, "complex_chars must not contain whitespace"),
    ],
)
def test_request_rejects_invalid_values(overrides, message):
    with pytest.raises(ConfigurationError) as exc:
        GenerationRequest(**overrides)

    assert message in str(exc.value)
    assert isinstance(exc.value, ValueError)


def test_request_reports_every_problem():
    with pytest.raises(ConfigurationError) as exc:
        GenerationRequest(min_chars=5, quantity=0)

    assert "min_chars" in str(exc.value)
    assert "quantity" in str(exc.value)


def test_invalid_min_chars_rejected_before_any_draw(full_wordlist):
    rng = CountingRandom()

    with pytest.raises(ConfigurationError):
        generate_passphrases(full_wordlist, min_chars=11, rng=rng)

    assert rng.draws == 0


def test_generate_returns_requested_quantity(full_wordlist):
    for quantity in (1, 2, 17):
        passphrases = generate_passphrases(full_wordlist, quantity=quantity, rng=random.Random(quantity))
        assert len(passphrases) == quantity


def test_generate_defaults_are_plain(full_wordlist):
    passphrases = generate_passphrases(full_wordlist, rng=random.Random(5))

    assert len(passphrases) == 1
    assert len(passphrases[0]) >= 19
    assert set(passphrases[0]) <= set("abcdef ")


def test_generate_minimum_length_over_many_runs(full_wordlist):
    passphrases = generate_passphrases(full_wordlist, min_chars=19, quantity=1000, rng=random.Random(11))

    assert all(len(passphrase) >= 19 for passphrase in passphrases)


def test_generate_complex_mode(full_wordlist):
    passphrases = generate_passphrases(
        full_wordlist, min_chars=12, quantity=1000, complex_mode=True, rng=random.Random(13)
    )

    for passphrase in passphrases:
        assert any(char.isdigit() for char in passphrase)
        assert " " not in passphrase
        assert passphrase[0].isupper()


def test_generate_is_reproducible_with_seeded_source(full_wordlist):
    first = generate_passphrases(full_wordlist, quantity=3, complex_mode=True, rng=random.Random(8))
    second = generate_passphrases(full_wordlist, quantity=3, complex_mode=True, rng=random.Random(8))

    assert first == second


def test_missing_word_aborts_batch_with_index():
    wordlist = WordList({"11111": "able"})
    # Passphrase 0 takes three rolls ("able able able" is 14 chars)
    roller = ScriptedRoller(["11111", "11111", "11111", "11111", "22222"])
    generator = PassphraseGenerator(wordlist, builder=PassphraseBuilder(roller))

    with pytest.raises(MissingWord) as exc:
        generator.generate(GenerationRequest(min_chars=12, quantity=3))

    assert exc.value.code == "22222"
    assert exc.value.index == 1
    assert "passphrase 1" in str(exc.value)
    assert get_counters_snapshot()[GENERATION_FAILURES] == 1


def test_iter_generate_yields_until_failure():
    wordlist = WordList({"11111": "able"})
    roller = ScriptedRoller(["11111", "11111", "11111", "22222"])
    generator = PassphraseGenerator(wordlist, builder=PassphraseBuilder(roller))
    results = []

    with pytest.raises(MissingWord):
        for passphrase in generator.iter_generate(GenerationRequest(min_chars=12, quantity=2)):
            results.append(passphrase)

    assert results == ["able able able"]


def test_generate_counts_passphrases(full_wordlist):
    generate_passphrases(full_wordlist, quantity=4, rng=random.Random(2))

    assert get_counters_snapshot()[PASSPHRASES_GENERATED] == 4


def test_generator_leaves_wordlist_untouched(full_wordlist):
    before = dict(full_wordlist)

    PassphraseGenerator(full_wordlist).generate(GenerationRequest(quantity=5, complex_mode=True))

    assert dict(full_wordlist) == before
