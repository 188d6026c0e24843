"""Tests for seed expansion and the pseudo-random stream."""

from glyphsmith.engine.prng import (
    FNV_OFFSET_BASIS,
    Mulberry32,
    hash_seed,
    jitter,
    rand_int,
    seed_to_int,
    shuffle,
)


def test_hash_empty_string_is_offset_basis():
    assert hash_seed("") == FNV_OFFSET_BASIS


def test_hash_known_fnv1a_vectors():
    assert hash_seed("a") == 0xE40C292C
    assert hash_seed("foobar") == 0xBF9CF968


def test_hash_is_case_sensitive_and_32_bit():
    assert hash_seed("Apple") != hash_seed("apple")
    for word in ["Apple", "banana", "ünïcödé", "𝄞 clef"]:
        assert 0 <= hash_seed(word) <= 0xFFFFFFFF


def test_seed_to_int_numbers_used_directly():
    assert seed_to_int(42) == 42
    assert seed_to_int(42.9) == 42
    assert seed_to_int(2**32 + 5) == 5
    assert seed_to_int(-1) == 0xFFFFFFFF


def test_seed_to_int_floors_negative_fractions():
    assert seed_to_int(-1.5) == seed_to_int(-2) == 0xFFFFFFFE
    assert seed_to_int(1.5) == 1
    assert seed_to_int(float("nan")) == 0


def _raw(rng, n):
    return [round(rng() * 2**32) for _ in range(n)]


def test_hash_reference_values():
    assert hash_seed("0") == 890022063
    assert hash_seed("apple") == 280767167
    assert hash_seed("Apple") == 3061292127


def test_stream_reference_values():
    rng = Mulberry32(hash_seed("0"))
    assert rng() == 0.49139764392748475
    assert _raw(rng, 5) == [3774599083, 62149787, 3803885877, 3118456336, 2506953937]
    assert _raw(Mulberry32(1), 5) == [2693262067, 11749833, 2265367787, 4213581821, 4159151403]
    assert _raw(Mulberry32(hash_seed("apple")), 4) == [1528899069, 1013146201, 1811660805, 3764597050]


def test_negative_fractional_seed_stream():
    assert _raw(Mulberry32(seed_to_int(-1.5)), 3) == [677713132, 210922997, 3337126793]
    assert _raw(Mulberry32(seed_to_int(-1)), 3) == [3850105811, 813802916, 3073704848]


def test_seed_to_int_strings_hashed():
    assert seed_to_int("42") == hash_seed("42")
    assert seed_to_int("42") != 42


def test_stream_range():
    rng = Mulberry32(123)
    for _ in range(5000):
        v = rng()
        assert 0.0 <= v < 1.0


def test_same_seed_same_sequence():
    a = Mulberry32(hash_seed("glyph"))
    b = Mulberry32(hash_seed("glyph"))
    assert [a() for _ in range(200)] == [b() for _ in range(200)]


def test_different_seeds_diverge():
    a = Mulberry32(1)
    b = Mulberry32(2)
    assert [a() for _ in range(10)] != [b() for _ in range(10)]


def test_state_wraps_to_32_bits():
    a = Mulberry32(5)
    b = Mulberry32(2**32 + 5)
    assert [a() for _ in range(20)] == [b() for _ in range(20)]
    assert a.state <= 0xFFFFFFFF


def test_draw_counter():
    rng = Mulberry32(9)
    for _ in range(7):
        rng()
    assert rng.draws == 7


def test_rand_int_inclusive_bounds():
    rng = Mulberry32(77)
    seen = {rand_int(rng, 2, 4) for _ in range(500)}
    assert seen == {2, 3, 4}


def test_shuffle_is_permutation_and_consumes_n_minus_1():
    rng = Mulberry32(3)
    items = [1, 2, 3, 4]
    out = shuffle(rng, items)
    assert sorted(out) == items
    assert items == [1, 2, 3, 4]
    assert rng.draws == 3


def test_jitter_stays_in_range():
    rng = Mulberry32(11)
    for _ in range(500):
        v = jitter(rng, 10.0, 2.0)
        assert 8.0 <= v <= 12.0
