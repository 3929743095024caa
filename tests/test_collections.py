import pytest

from rustlings.solutions.collections import (
    Fruit,
    Team,
    build_scores_table,
    fruit_basket,
    vec_loop,
    vec_map,
)


def get_fruit_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def get_results():
    return (
        "England,France,4,2\n"
        "France,Italy,3,1\n"
        "Poland,Spain,2,0\n"
        "Germany,England,2,1\n"
    )


def test_given_fruits_are_not_modified():
    basket = get_fruit_basket()
    fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = get_fruit_basket()
    fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = get_fruit_basket()
    fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_all_fruit_types_in_basket():
    basket = get_fruit_basket()
    fruit_basket(basket)
    assert all(amount != 0 for amount in basket.values())
    assert set(basket) == set(Fruit)


def test_build_scores():
    scores = build_scores_table(get_results())
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    scores = build_scores_table(get_results())
    assert scores["England"] == Team(goals_scored=5, goals_conceded=4)


def test_validate_team_score_2():
    scores = build_scores_table(get_results())
    team = scores["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_scores_reject_bad_goal_count():
    with pytest.raises(ValueError):
        build_scores_table("England,France,four,2\n")


def test_scores_reject_short_line():
    with pytest.raises(ValueError):
        build_scores_table("England,France,4\n")


def test_vec_loop():
    values = [2, 4, 6, 8, 10]
    assert vec_loop(list(values)) == [4, 8, 12, 16, 20]


def test_vec_map():
    values = [2, 4, 6, 8, 10]
    assert vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]