import random

import pytest

from tagcloud.errors import EmptyInput, InvalidArgument
from tagcloud.ranking import CloudItem, RankedEntry, select_top_n


EXAMPLE = {"The": 2, "cat": 1, "sat": 1, "dog": 1, "ran": 1}


def test_example_top_three():
    ranking = select_top_n(EXAMPLE, 3)
    # Ties at count 1 are broken alphabetically: cat, dog win over ran, sat
    assert [e.word for e in ranking] == ["cat", "dog", "The"]
    assert ranking.max_count == 2
    assert list(ranking.cloud_items()) == [
        CloudItem("cat", 1, 29),
        CloudItem("dog", 1, 29),
        CloudItem("The", 2, 48),
    ]


def test_select_everyone():
    ranking = select_top_n(EXAMPLE, len(EXAMPLE))
    assert ranking.size == 5
    assert [e.word for e in ranking] == ["cat", "dog", "ran", "sat", "The"]


def test_single_word():
    ranking = select_top_n({"only": 4}, 1)
    assert ranking.entries == (RankedEntry("only", 4),)
    assert ranking.max_count == 4


def test_anchor_always_selected():
    table = {"zeta": 9, "alpha": 3, "beta": 3}
    ranking = select_top_n(table, 1)
    assert [e.word for e in ranking] == ["zeta"]


def test_tie_break_is_code_point_order():
    table = {"apple": 1, "Zebra": 1, "mango": 1}
    ranking = select_top_n(table, 1)
    assert [e.word for e in ranking] == ["Zebra"]


def test_case_variants_keep_count_order():
    table = {"the": 3, "The": 5, "THE": 1}
    ranking = select_top_n(table, 3)
    assert [e.word for e in ranking] == ["The", "the", "THE"]


def test_table_not_mutated():
    table = dict(EXAMPLE)
    select_top_n(table, 2)
    assert table == EXAMPLE


@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_size_rejected(n):
    with pytest.raises(InvalidArgument):
        select_top_n(EXAMPLE, n)


@pytest.mark.parametrize("n", [1.5, "3", True, None])
def test_non_integer_size_rejected(n):
    with pytest.raises(InvalidArgument):
        select_top_n(EXAMPLE, n)


def test_size_larger_than_vocabulary_rejected():
    with pytest.raises(InvalidArgument, match="exceeds"):
        select_top_n(EXAMPLE, 6)


def test_empty_table_raises_empty_input():
    with pytest.raises(EmptyInput):
        select_top_n({}, 1)
    # EmptyInput is a kind of InvalidArgument
    with pytest.raises(InvalidArgument):
        select_top_n({}, 1)


def test_random_tables_selection_properties():
    rng = random.Random(2024)
    vocab = ["a", "A", "b", "B", "apple", "Apple", "zoo", "Zoo", "m", "n", "q"]
    for _ in range(200):
        words = rng.sample(vocab, rng.randint(1, len(vocab)))
        table = {w: rng.randint(1, 6) for w in words}
        n = rng.randint(1, len(table))
        ranking = select_top_n(table, n)

        assert ranking.size == n
        assert ranking.max_count == max(table.values())
        keys = [e.word.lower() for e in ranking]
        assert keys == sorted(keys)

        # nothing left out has a higher count than anything chosen
        chosen = {e.word for e in ranking}
        lowest = min(e.count for e in ranking)
        assert all(c <= lowest for w, c in table.items() if w not in chosen)

        items = sorted(ranking.cloud_items(), key=lambda item: item.count)
        fonts = [item.font_class for item in items]
        assert fonts == sorted(fonts)
        # the most frequent word is always in the cloud
        assert items[-1].count == ranking.max_count
        assert items[-1].font_class == 48

        assert select_top_n(table, n) == ranking
