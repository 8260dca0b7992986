from algolab.bloom import BloomFilter, main


def test_added_values_are_contained():
    bloom = BloomFilter()
    values = ["asd", "2222", "hello", "世界"]
    for v in values:
        bloom.add(v)
    assert all(bloom.contains(v) for v in values)


def test_empty_filter_contains_nothing():
    bloom = BloomFilter()
    assert not bloom.contains("asd")
    assert "anything" not in bloom


def test_in_operator_matches_contains():
    bloom = BloomFilter()
    bloom.add("asd")
    assert "asd" in bloom
    assert ("asd" in bloom) == bloom.contains("asd")
    assert 42 not in bloom


def test_single_byte_collision_is_false_positive():
    # "a" (97) and "q" (113) hash to the same bit for every seed.
    bloom = BloomFilter()
    bloom.add("a")
    assert bloom.contains("q") is True
    assert bloom.contains("b") is False


def test_adding_is_idempotent_for_membership():
    bloom = BloomFilter()
    bloom.add("x")
    before = bloom.contains("y")
    bloom.add("x")
    assert bloom.contains("y") == before
    assert bloom.contains("x")


def test_main_reports_added_values(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[:2] == ["true", "true"]
    assert lines[2] in {"true", "false"}