"""City cards, their derived attributes and attribute comparison."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class Attribute(Enum):
    """A card attribute that two cards can be compared on."""

    POPULATION = "População"
    AREA = "Área"
    GDP = "PIB"
    TOURIST_SPOTS = "Pontos Turisticos"
    DENSITY = "Densidade Populacional"
    PER_CAPITA = "Renda Per Capita"
    SUPER_POWER = "Super Poder"

    @property
    def label(self) -> str:
        return self.value

    @property
    def lower_wins(self) -> bool:
        """Whether the smaller value wins a comparison on this attribute."""
        return self is Attribute.DENSITY

    @property
    def is_integral(self) -> bool:
        return self in (Attribute.POPULATION, Attribute.TOURIST_SPOTS)


class Outcome(Enum):
    """Result of comparing two cards."""

    FIRST = 1
    SECOND = 2
    TIE = 0


def _ratio(numerator: float, denominator: float) -> float:
    """Divide following IEEE rules instead of raising on a zero divisor."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)


@dataclass(frozen=True)
class Card:
    """A city card with its registered properties."""

    code: str
    state: str
    city: str
    population: int
    area: float
    gdp: float
    tourist_spots: int

    def density(self) -> float:
        """Inhabitants per square kilometre."""
        return _ratio(self.population, self.area)

    def per_capita(self) -> float:
        """GDP divided by population."""
        return _ratio(self.gdp, self.population)

    def super_power(self) -> float:
        """Sum of the attributes, with density counted against the card."""
        return (
            self.population
            + self.area
            + self.gdp
            + self.per_capita()
            + self.tourist_spots
            - self.density()
        )

    def value(self, attribute: Attribute) -> float:
        """The card's value for ``attribute``."""
        getters: dict[Attribute, Callable[[], float]] = {
            Attribute.POPULATION: lambda: self.population,
            Attribute.AREA: lambda: self.area,
            Attribute.GDP: lambda: self.gdp,
            Attribute.TOURIST_SPOTS: lambda: self.tourist_spots,
            Attribute.DENSITY: self.density,
            Attribute.PER_CAPITA: self.per_capita,
            Attribute.SUPER_POWER: self.super_power,
        }
        return getters[attribute]()


def compare(attribute: Attribute, first: Card, second: Card) -> Outcome:
    """Decide which card wins on ``attribute``; lower density wins."""
    a, b = first.value(attribute), second.value(attribute)
    if attribute.lower_wins:
        a, b = b, a
    if a > b:
        return Outcome.FIRST
    if a < b:
        return Outcome.SECOND
    return Outcome.TIE


def _parse_population(token: str) -> int:
    population = int(token)
    if population < 0:
        raise ValueError(f"population must not be negative: {token!r}")
    return population


def prompt_card(read: Callable[[], str], write: Callable[[str], object], number: int) -> Card:
    """Ask for the properties of card ``number`` and build it.

    ``read`` returns the next whitespace-free input token; ``write`` shows text.
    Raises ValueError when a numeric field cannot be parsed.
    """
    write(f" °°° Adicionar Carta {number} °°°\n\n")

    def ask(prompt: str) -> str:
        write(f"{prompt}: \n")
        return read()

    code = ask("Codigo da carta")
    state = ask("Estado")
    city = ask("Nome da cidade")
    population = _parse_population(ask("População"))
    area = float(ask("Area"))
    gdp = float(ask("PIB"))
    tourist_spots = int(ask("Pontos Turisticos"))
    return Card(code, state, city, population, area, gdp, tourist_spots)


def format_card(card: Card, number: int) -> str:
    """Render the card panel for card ``number``."""
    lines = [
        f"°°° Carta {number} °°°",
        "",
        f"Estado: {card.state} ",
        f"Codigo da Carta: {card.code} ",
        f"Cidade: {card.city} ",
        f"População: {card.population} ",
        f"Area: {card.area:.2f} km² ",
        f"PIB: {card.gdp:.2f} reais",
        f"Pontos Turisticos: {card.tourist_spots}",
        f"Densidade populacional: {card.density():.2f} hab/km²",
        f"PIB per Capita: {card.per_capita():.2f} reais",
        f"Super Poder: {card.super_power():.2f} ",
    ]
    return "\n".join(lines) + "\n"