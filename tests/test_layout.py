import random
from collections import Counter

from cvtext.config import Settings
from cvtext.layout import SINGLE_COLUMN, classify, find_divider, split_columns


def test_sidebar_and_main_column_detected(two_column_fragments):
    layout = classify(two_column_fragments, 200)
    assert layout.is_multi_column
    # Widest qualifying gap is between x=40 and x=110
    assert layout.divider_x == 75.0


def test_few_fragments_stay_single_column(frag):
    frags = [frag(10, 10, "a"), frag(150, 10, "b"), frag(160, 20, "c")]
    assert classify(frags, 200) == SINGLE_COLUMN


def test_empty_page_is_single_column():
    assert classify([], 200) == SINGLE_COLUMN
    assert classify([], 0) == SINGLE_COLUMN


def test_unbalanced_columns_stay_single(frag):
    left = [frag(5, i, "l") for i in range(6)]
    right = [frag(150, i, "r") for i in range(50)]
    # 6 / 50 = 0.12 is below the balance ratio
    assert not classify(left + right, 200).is_multi_column


def test_narrow_sidebar_still_counts(frag):
    left = [frag(5, i, "l") for i in range(8)]
    right = [frag(150, i, "r") for i in range(50)]
    # 8 / 50 = 0.16
    assert classify(left + right, 200).is_multi_column


def test_zero_width_page_never_splits(two_column_fragments):
    assert classify(two_column_fragments, 0) == SINGLE_COLUMN


def test_thresholds_come_from_config(frag):
    frags = [frag(5, i, "l") for i in range(3)] + [frag(150, i, "r") for i in range(3)]
    assert not classify(frags, 200).is_multi_column
    assert classify(frags, 200, Settings(MIN_COLUMN_FRAGMENTS=2, MIN_LAYOUT_FRAGMENTS=4)).is_multi_column


def test_divider_fallback_without_qualifying_gap(frag):
    frags = [frag(120, 0, "a"), frag(150, 0, "b")]
    assert find_divider(frags, 200) == 40.0
    assert find_divider([frag(120, 0, "a")], 200) == 40.0


def test_split_is_exhaustive_and_disjoint(frag):
    rng = random.Random(7)
    frags = [frag(rng.uniform(0, 200), rng.uniform(0, 300), f"w{i}") for i in range(200)]
    for divider in (0.0, 37.5, 75.0, 199.0, 250.0):
        left, right = split_columns(frags, divider)
        assert Counter(left) + Counter(right) == Counter(frags)
        assert all(f.x < divider for f in left)
        assert all(f.x >= divider for f in right)


def test_fragment_on_divider_goes_right(frag):
    left, right = split_columns([frag(75.0, 0, "edge")], 75.0)
    assert left == [] and len(right) == 1


def test_fewer_than_ten_fragments_never_split(frag):
    # x between mid * 0.5 and mid * 0.7 counts on both sides
    frags = [frag(52, i, f"L{i}") for i in range(3)] + [frag(68, i, f"R{i}") for i in range(3)]
    assert classify(frags, 200) == SINGLE_COLUMN

    frags = [frag(52, i, f"L{i}") for i in range(5)] + [frag(68, i, f"R{i}") for i in range(4)]
    assert classify(frags, 200) == SINGLE_COLUMN
