import pytest

from rustlings.exercises.basics import (
    ChangeColor,
    Echo,
    Move,
    Package,
    Point,
    Quit,
    State,
    animal_habitat,
    bigger,
    build_scores_table,
    calculate_price_of_apples,
    compose_me,
    foo_if_fizz,
    is_even,
    replace_me,
    sale_price,
    trim_me,
)


@pytest.mark.parametrize("num, price", [(35, 70), (40, 80), (41, 41), (65, 65)])
def test_price_of_apples(num, price):
    assert calculate_price_of_apples(num) == price


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_equal_numbers():
    assert bigger(42, 42) == 42


@pytest.mark.parametrize(
    "word, expected", [("fizz", "foo"), ("fuzz", "bar"), ("literally anything", "baz")]
)
def test_foo_if_fizz(word, expected):
    assert foo_if_fizz(word) == expected


@pytest.mark.parametrize(
    "animal, habitat",
    [("gopher", "Burrow"), ("snake", "Desert"), ("crab", "Beach"), ("dinosaur", "Unknown")],
)
def test_animal_habitat(animal, habitat):
    assert animal_habitat(animal) == habitat


def test_sale_price():
    assert sale_price(51) == 48
    assert sale_price(50) == 40
    assert is_even(50) and not is_even(51)


def test_trim_a_string():
    assert trim_me("Hello!     ") == "Hello!"
    assert trim_me("  What's up!") == "What's up!"
    assert trim_me("   Hola!  ") == "Hola!"


def test_compose_a_string():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international()


def test_create_local_package():
    assert not Package("Canada", "Canada", 1200).is_international()


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(3) == 4500
    assert package.get_fees(6) == 9000


def test_match_message_call():
    state = State(color=(0, 0, 0), position=Point(0, 0), quit=False, message="hello world")
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("Hello world!"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())
    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert state.message == "Hello world!"


def test_unknown_message_is_rejected():
    with pytest.raises(TypeError):
        State().process("jump")


RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_bad_goal_count_is_rejected():
    with pytest.raises(ValueError):
        build_scores_table("England,France,four,2\n")