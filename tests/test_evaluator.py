import random
from itertools import product

import pytest

from holdem_odds.helpers.cards import full_deck
from holdem_odds.helpers.evaluator import (
    CATEGORY,
    HandRank,
    best_hand,
    best_of,
    compare,
    compare_hands,
    evaluate_five,
    winners,
)


def _rank(codes):
    r = evaluate_five(codes)
    return r.category, list(r.tiebreaker)


class TestEvaluateFive:
    def test_royal_flush(self):
        assert _rank(["AS", "KS", "QS", "JS", "TS"]) == (8, [14])

    def test_steel_wheel(self):
        assert _rank(["AH", "2H", "3H", "4H", "5H"]) == (8, [5])

    def test_quads(self):
        assert _rank(["9S", "9H", "9D", "9C", "KD"]) == (7, [9, 13])

    def test_full_house(self):
        assert _rank(["7S", "7H", "7D", "2C", "2D"]) == (6, [7, 2])

    def test_flush(self):
        assert _rank(["KC", "9C", "7C", "4C", "2C"]) == (5, [13, 9, 7, 4, 2])

    def test_wheel_straight(self):
        assert _rank(["AS", "2H", "3D", "4C", "5S"]) == (4, [5])

    def test_broadway_straight(self):
        assert _rank(["AS", "KH", "QD", "JC", "TS"]) == (4, [14])

    def test_no_wraparound_straight(self):
        assert _rank(["QS", "KH", "AD", "2C", "3S"])[0] == CATEGORY["high_card"]

    def test_trips(self):
        assert _rank(["8S", "8H", "8D", "AC", "3S"]) == (3, [8, 14, 3])

    def test_two_pair(self):
        assert _rank(["4S", "4H", "JD", "JC", "9S"]) == (2, [11, 4, 9])

    def test_one_pair(self):
        assert _rank(["6S", "6H", "2D", "KC", "TS"]) == (1, [6, 13, 10, 2])

    def test_high_card(self):
        assert _rank(["2S", "3H", "4D", "5C", "9S"]) == (0, [9, 5, 4, 3, 2])

    def test_wrong_size(self):
        with pytest.raises(ValueError):
            evaluate_five(["2S", "3H", "4D", "5C"])

    def test_name(self):
        assert evaluate_five(["7S", "7H", "7D", "2C", "2D"]).name == "full_house"


class TestCompare:
    def test_category_decides(self):
        low_flush = HandRank(5, (7, 5, 4, 3, 2))
        top_straight = HandRank(4, (14,))
        assert compare(low_flush, top_straight) > 0
        assert compare(top_straight, low_flush) < 0

    def test_missing_trailing_is_zero(self):
        assert compare(HandRank(1, (5,)), HandRank(1, (5, 0, 0))) == 0
        assert compare(HandRank(1, (5,)), HandRank(1, (5, 2))) < 0
        assert HandRank(1, (5,)) == HandRank(1, (5, 0))
        assert hash(HandRank(1, (5,))) == hash(HandRank(1, (5, 0)))

    def test_kicker_breaks_tie(self):
        a = evaluate_five(["AS", "AH", "KD", "7C", "2S"])
        b = evaluate_five(["AD", "AC", "QD", "7H", "2H"])
        assert a > b
        assert compare(a, b) > 0

    def test_exact_tie(self):
        a = evaluate_five(["AS", "KS", "QS", "JS", "9S"])
        b = evaluate_five(["AH", "KH", "QH", "JH", "9H"])
        assert compare(a, b) == 0
        assert a == b

    def test_category_monotonicity(self):
        weakest = {k: HandRank(k, (2, 2, 2, 2, 2)) for k in range(1, 9)}
        strongest = {k: HandRank(k, (14, 14, 14, 14, 14)) for k in range(0, 8)}
        for k in range(1, 9):
            assert compare(weakest[k], strongest[k - 1]) > 0

    def test_total_order_on_random_hands(self):
        rng = random.Random(0)
        deck = full_deck()
        ranks = [evaluate_five(rng.sample(deck, 5)) for _ in range(40)]
        for a, b in product(ranks, repeat=2):
            ab, ba = compare(a, b), compare(b, a)
            assert (ab > 0) == (ba < 0)
            assert (ab == 0) == (ba == 0)
        for a, b, c in product(ranks[:15], repeat=3):
            if compare(a, b) >= 0 and compare(b, c) >= 0:
                assert compare(a, c) >= 0


class TestBestOf:
    def test_seven_cards_finds_flush(self):
        r = best_of(["AH", "KH", "2H", "7H", "9H", "AS", "AD"])
        assert r.category == CATEGORY["flush"]
        assert r.tiebreaker == (14, 13, 9, 7, 2)

    def test_best_hand_returns_five_cards(self):
        rank, best5 = best_hand(["AS", "AH", "7C", "8D", "9S", "TC", "JH"])
        assert rank.category == CATEGORY["straight"]
        assert rank.tiebreaker == (11,)
        assert len(best5) == 5
        assert [c.rank for c in best5] == [11, 10, 9, 8, 7]

    def test_six_cards(self):
        r = best_of(["2S", "2H", "2D", "5C", "5S", "KD"])
        assert r.category == CATEGORY["full_house"]

    @pytest.mark.parametrize("n", [4, 8])
    def test_size_bounds(self, n):
        with pytest.raises(ValueError):
            best_of(full_deck()[:n])


def test_straight_flush_beats_flush():
    board = ["QS", "JS", "TS", "2D", "3C"]
    hero = ["AS", "KS"]      # royal
    vill = ["AH", "KH"]      # just broadway straight
    assert compare_hands(hero, vill, board) == 1


def test_pair_vs_high_card():
    board = ["2S", "7D", "JH", "4C", "9C"]
    hero = ["JC", "3D"]
    vill = ["AH", "KD"]
    assert compare_hands(hero, vill, board) == 1
    assert compare_hands(vill, hero, board) == -1


def test_winners_split_pot():
    board = ["AS", "KD", "QH", "JC", "TS"]  # broadway on board
    assert winners([["2C", "3C"], ["4D", "5D"], ["6H", "7H"]], board) == [0, 1, 2]
