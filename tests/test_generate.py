import string
import pytest

from passdraw.random_source import RandomSource, GeneratorException
from passdraw.config import GenerationConfig
from passdraw.generate import PasswordGenerator
from conftest import SequenceReader

def generator(source, **dict_data):
    return PasswordGenerator(GenerationConfig(dict_data), source)

def test_resolve_length_fixed(seeded_source):
    gen = generator(seeded_source, fixed_length=12, min_length=3, max_length=40)
    for i in range(100):
        assert gen.resolve_length() == 12

def test_resolve_length_equal_bounds(seeded_source):
    gen = generator(seeded_source, min_length=5, max_length=5)
    for i in range(100):
        assert gen.resolve_length() == 5

def test_resolve_length_range(seeded_source):
    gen = generator(seeded_source, min_length=8, max_length=11)
    lengths = set(gen.resolve_length() for i in range(400))
    assert lengths == {8, 9, 10, 11}

def test_resolve_length_inverted(seeded_source):
    gen = generator(seeded_source, min_length=20, max_length=10)
    lengths = set(gen.resolve_length() for i in range(1000))
    assert lengths == set(range(10, 21))

def test_resolve_length_non_positive(seeded_source):
    gen = generator(seeded_source, min_length=-5, max_length=0)
    for i in range(100):
        assert gen.resolve_length() == 1

def test_meets_minimums():
    gen = generator(RandomSource(), modes="LUNS", min_upper_case=2, min_numeric=1)
    assert gen.meets_minimums("AB1")
    assert gen.meets_minimums("xAyB9!")
    assert not gen.meets_minimums("aB1")
    assert not gen.meets_minimums("ABC")

def test_meets_minimums_unconstrained():
    gen = generator(RandomSource())
    assert gen.meets_minimums("")

def test_meets_minimums_human_readable():
    # O and 0 are not part of the human-readable sets.
    gen = generator(RandomSource(), modes="LUNH", min_upper_case=1, min_numeric=1)
    assert not gen.meets_minimums("O0")
    assert gen.meets_minimums("P2")

def test_generate_two_letter_alphabet(seeded_source, monkeypatch):
    gen = generator(seeded_source, fixed_length=5)
    monkeypatch.setattr(gen, "char_range", lambda: "ab")
    seen = set()
    for i in range(1000):
        pw = gen.generate()
        assert len(pw) == 5
        assert set(pw) <= {"a", "b"}
        seen |= set(pw)
    assert seen == {"a", "b"}

def test_generate_min_upper(seeded_source):
    gen = generator(seeded_source, fixed_length=10, modes="LUN", min_upper_case=3)
    for i in range(200):
        pw = gen.generate()
        assert len(pw) == 10
        assert sum(1 for c in pw if c in string.ascii_uppercase) >= 3

def test_generate_all_minimums(seeded_source):
    gen = generator(seeded_source, fixed_length=12, modes="CH",
        min_lower_case=2, min_upper_case=2, min_numeric=2, min_special=2)
    for i in range(50):
        pw = gen.generate()
        assert gen.meets_minimums(pw)
        assert "0" not in pw and "O" not in pw

def test_generate_random_length(seeded_source):
    gen = generator(seeded_source, min_length=4, max_length=6, modes="N")
    for i in range(100):
        pw = gen.generate()
        assert 4 <= len(pw) <= 6
        assert pw.isdigit()

def test_generate_empty_alphabet(seeded_source):
    gen = generator(seeded_source, modes="")
    with pytest.raises(GeneratorException, match="GeneratorError.INVALID_CHAR_RANGE"):
        gen.generate()

def test_generate_empty_alphabet_consumes_no_entropy():
    reader = SequenceReader([])
    gen = generator(RandomSource(reader), modes="Cluns")
    with pytest.raises(GeneratorException, match="GeneratorError.INVALID_CHAR_RANGE"):
        gen.generate()
    assert reader.requests == []

def test_generate_minimum_for_disabled_class(seeded_source):
    gen = generator(seeded_source, fixed_length=10, modes="LU", min_special=1)
    with pytest.raises(GeneratorException, match="GeneratorError.INFEASIBLE_CONSTRAINTS"):
        gen.generate()

def test_generate_minimums_exceed_length(seeded_source):
    gen = generator(seeded_source, fixed_length=5, modes="LU",
        min_lower_case=3, min_upper_case=3)
    with pytest.raises(GeneratorException, match="GeneratorError.INFEASIBLE_CONSTRAINTS"):
        gen.generate()

def test_resolve_length_skips_too_short(seeded_source):
    gen = generator(seeded_source, min_length=1, max_length=10, modes="NS",
        min_numeric=3, min_special=3)
    lengths = set(gen.resolve_length() for i in range(500))
    assert lengths == set(range(6, 11))

def test_generate_range_partly_too_short(seeded_source):
    gen = generator(seeded_source, min_length=1, max_length=10, modes="NS",
        min_numeric=3, min_special=3)
    lengths = set()
    for i in range(200):
        pw = gen.generate()
        assert gen.meets_minimums(pw)
        lengths.add(len(pw))
    assert lengths == set(range(6, 11))

def test_generate_range_too_short(seeded_source):
    gen = generator(seeded_source, min_length=2, max_length=5, modes="LU",
        min_lower_case=3, min_upper_case=3)
    with pytest.raises(GeneratorException, match="GeneratorError.INFEASIBLE_CONSTRAINTS"):
        gen.generate()

def test_generate_attempts_exhausted():
    # An all-zero source always yields "aaaa", which never has an uppercase
    # letter.
    reads = []
    def zero_reader(n):
        reads.append(n)
        return bytes(n)

    gen = generator(RandomSource(zero_reader), fixed_length=4, modes="LU",
        min_upper_case=1, max_attempts=5)
    with pytest.raises(GeneratorException, match="GeneratorError.ATTEMPTS_EXHAUSTED"):
        gen.generate()
    assert reads == [8]*5

def test_generate_unlikely_minimums(seeded_source):
    # Feasible, but all 16 characters being special is too rare to hit.
    gen = generator(seeded_source, fixed_length=16, modes="C", min_special=16,
        max_attempts=20)
    with pytest.raises(GeneratorException, match="GeneratorError.ATTEMPTS_EXHAUSTED"):
        gen.generate()

def test_generate_sampling_error_propagates():
    gen = generator(RandomSource(lambda n: b""), fixed_length=8)
    with pytest.raises(GeneratorException, match="GeneratorError.LENGTH_MISMATCH"):
        gen.generate()

@pytest.mark.parametrize("byte,expected", [(b"\x01", "Heads"), (b"\x00", "Tails")])
def test_generate_coin_flip(byte, expected):
    gen = generator(RandomSource(SequenceReader([byte])), algorithm="coinflip")
    assert gen.generate() == expected

def test_generate_coin_flip_both(seeded_source):
    gen = generator(seeded_source, algorithm="coinflip")
    assert set(gen.generate() for i in range(100)) == {"Heads", "Tails"}

def test_generate_unsupported(seeded_source):
    gen = generator(seeded_source, algorithm="pronounceable")
    with pytest.raises(GeneratorException, match="GeneratorError.UNSUPPORTED_ALGORITHM"):
        gen.generate()

def test_generate_many(seeded_source):
    gen = generator(seeded_source, fixed_length=16, modes="C")
    pws = gen.generate_many(5)
    assert len(pws) == 5
    assert all(len(pw) == 16 for pw in pws)
    assert len(set(pws)) == 5

def test_generate_many_invalid(seeded_source):
    gen = generator(seeded_source)
    with pytest.raises(GeneratorException, match="GeneratorError.INVALID_LENGTH"):
        gen.generate_many(0)

def test_default_source():
    pw = PasswordGenerator(GenerationConfig.default()).generate()
    assert 12 <= len(pw) <= 20
    assert set(pw) <= set(string.ascii_letters + string.digits)
