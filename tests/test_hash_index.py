import pytest

from hash_index import HashIndex, hash_clue


def test_hash_is_ordinal_sum_modulo_bucket_count():
    assert hash_clue("Rope", 10) == (82 + 111 + 112 + 101) % 10
    assert hash_clue("", 10) == 0
    assert hash_clue("Rope", 1) == 0


def test_lookup_returns_inserted_suspect():
    index = HashIndex()
    index.insert("Candlestick", "Col. Mustard")
    assert index.lookup("Candlestick") == "Col. Mustard"


def test_lookup_unknown_clue_returns_none():
    index = HashIndex.from_pairs({"Rope": "Mrs. White"})
    assert index.lookup("Dagger") is None
    assert index.lookup("rope") is None


def test_colliding_clues_share_a_bucket_and_both_resolve():
    # "ab" and "ba" have the same ordinal sum.
    index = HashIndex(bucket_count=10)
    index.insert("ab", "first")
    index.insert("ba", "second")
    assert hash_clue("ab", 10) == hash_clue("ba", 10)
    assert index.lookup("ab") == "first"
    assert index.lookup("ba") == "second"
    assert max(index.bucket_sizes()) == 2


def test_reinserted_clue_shadows_older_entry():
    index = HashIndex()
    index.insert("Rope", "Mrs. White")
    index.insert("Rope", "Prof. Plum")
    assert index.lookup("Rope") == "Prof. Plum"
    assert len(index) == 2


def test_from_pairs_accepts_tuples():
    index = HashIndex.from_pairs([("Poison", "Col. Mustard"), ("Dagger", "Prof. Plum")], bucket_count=3)
    assert index.bucket_count == 3
    assert sum(index.bucket_sizes()) == 2
    assert index.lookup("Dagger") == "Prof. Plum"


def test_bucket_count_must_be_positive():
    with pytest.raises(ValueError):
        HashIndex(bucket_count=0)
