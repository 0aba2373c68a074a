from werlost.rng import LCGRandom, hash_to_int, stream

def test_hash_matches_string_hashcode():
    # Same recurrence as Java's String.hashCode, kept unsigned.
    assert hash_to_int("") == 0
    assert hash_to_int("a") == 97
    assert hash_to_int("abc") == 96354

def test_hash_wraps_to_32_bits():
    h = hash_to_int("a fairly long seed string:cluster:12:7")
    assert 0 <= h < 2**32

def test_hash_walks_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00 in UTF-16.
    assert hash_to_int("\U0001F600") == 0xD83D * 31 + 0xDE00
    assert hash_to_int("咖") == ord("咖")

def test_zero_state_is_remapped():
    rng = LCGRandom.from_key("")
    assert rng.state == 1
    assert rng.next32() == 1664525 + 1013904223

def test_stream_is_reproducible_and_in_range():
    a, b = stream("abc"), stream("abc")
    xs = [a() for _ in range(200)]
    assert xs == [b() for _ in range(200)]
    assert all(0.0 <= x < 1.0 for x in xs)

def test_streams_do_not_share_state():
    wall = stream("abc:wall")
    first = [wall() for _ in range(5)]
    other = stream("abc:start")
    for _ in range(50):
        other()
    again = stream("abc:wall")
    assert [again() for _ in range(5)] == first

def test_below_and_choice_bounds():
    rng = LCGRandom.from_key("bounds")
    for _ in range(500):
        assert 0 <= rng.below(7) < 7
    assert rng.choice(["x"]) == "x"
