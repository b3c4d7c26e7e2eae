import random

import pytest

from challenge import ArithmeticChallenges, Challenge, WordChallenges, make_provider
from errors import InvalidSetting


def test_arithmetic_issue_and_solve():
    provider = ArithmeticChallenges(rng=random.Random(1))
    for _ in range(50):
        ch = provider.issue()
        a, symbol, b = ch.prompt.split()
        assert 1 <= int(a) <= 12 and 1 <= int(b) <= 12
        assert symbol in "+-*"
        assert provider.validate(ch, provider.solve(ch))


@pytest.mark.parametrize("response,expected", [
    ("7", True),
    (" 7 ", True),
    (7, True),
    ("8", False),
    ("", False),
    ("seven", False),
    (None, False),
    (True, False),
    ("+7", True),
    ("-7", False),
    ("0_7", False),
    ("\u0667", False),
    ("7.0", False),
    ("0x7", False),
])
def test_arithmetic_validate(response, expected):
    provider = ArithmeticChallenges()
    assert provider.validate(Challenge("3 + 4", 7), response) is expected


def test_arithmetic_guess_stays_near_solution():
    provider = ArithmeticChallenges()
    rng = random.Random(3)
    ch = Challenge("6 * 5", 30)
    for _ in range(100):
        assert 0 <= int(provider.guess(ch, rng)) <= 60


def test_arithmetic_same_seed_same_challenges():
    a = ArithmeticChallenges(rng=random.Random(42))
    b = ArithmeticChallenges(rng=random.Random(42))
    assert [a.issue() for _ in range(10)] == [b.issue() for _ in range(10)]


def test_arithmetic_rejects_empty_range():
    with pytest.raises(InvalidSetting):
        ArithmeticChallenges(low=5, high=1)


def test_words_fragment_comes_from_a_word():
    provider = WordChallenges(rng=random.Random(2), words=["rocket", "pocket", "planet"])
    for _ in range(20):
        ch = provider.issue()
        assert len(ch.solution) == 2
        assert ch.prompt == ch.solution.upper()
        assert any(ch.solution in w for w in provider.words)
        assert provider.validate(ch, provider.solve(ch))


def test_words_validate():
    provider = WordChallenges(words=["rocket", "pocket", "planet"])
    ch = Challenge("CK", "ck")
    assert provider.validate(ch, "Rocket")
    assert provider.validate(ch, " pocket ")
    assert not provider.validate(ch, "planet")
    assert not provider.validate(ch, "locket")  # not in the dictionary
    assert not provider.validate(ch, "")
    assert not provider.validate(ch, 12)


def test_words_rejects_bad_setup():
    with pytest.raises(InvalidSetting):
        WordChallenges(words=["a", "b"])
    with pytest.raises(InvalidSetting):
        WordChallenges(fragment_length=0)


def test_make_provider():
    assert isinstance(make_provider("arithmetic"), ArithmeticChallenges)
    assert isinstance(make_provider("words"), WordChallenges)
    with pytest.raises(InvalidSetting):
        make_provider("riddles")
