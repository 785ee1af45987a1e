"""Solutions to the introductory exercises on conditions, strings, structs and maps."""

from __future__ import annotations

from dataclasses import dataclass, field


def calculate_price_of_apples(num: int) -> int:
    """Apples cost 2 each, or 1 each when buying more than 40."""
    return num if num > 40 else num * 2


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def animal_habitat(animal: str) -> str:
    """Where the given animal lives."""
    return _HABITATS.get(animal, "Unknown")


def is_even(num: int) -> bool:
    """Whether a number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off even prices and 3 off odd ones."""
    return price - 10 if is_even(price) else price - 3


def trim_me(text: str) -> str:
    """Strip surrounding whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


@dataclass(frozen=True)
class Package:
    """A parcel sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < 10:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """State updated by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Message) -> None:
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                self.message = text
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    goals = int(text)
    if not 0 <= goals <= 255:
        raise ValueError(f"goal count out of range: {text!r}")
    return goals


def build_scores_table(results: str) -> dict[str, Team]:
    """Build per-team totals from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = _parse_goals(fields[2]), _parse_goals(fields[3])

        first = scores.setdefault(team_1, Team())
        first.goals_scored += goals_1
        first.goals_conceded += goals_2

        second = scores.setdefault(team_2, Team())
        second.goals_scored += goals_2
        second.goals_conceded += goals_1
    return scores