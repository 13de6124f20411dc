# supertrunfo

A small terminal game of city trumps. Each player enters one city card. The cards are then compared on an attribute that you choose. All prompts and messages are in Portuguese.

A card holds a code, a state, a city name, the population, the area in km², the GDP and the number of tourist attractions. From these the game works out three more values:

- population density: population divided by area
- GDP per capita: GDP divided by population
- "super power": population + area + GDP + GDP per capita + tourist attractions − density

A division by zero gives an infinite or NaN value. It does not stop the game.

## Installation

```
pip install .
```

## Playing

There are two game modes. Both read their input from standard input, one whitespace-separated value at a time. Names with spaces are therefore not possible. Each mode first asks for the data of two cards and then prints the card panel. If a number cannot be read, or if the population is negative, the game writes an error to standard error and exits with status 1.

### Single-attribute round

```
supertrunfo-adventurer
```

Pick one option from the menu:

- Option 1 only lists the two city names and their states.
- Options 2 to 8 compare population, area, GDP, tourist attractions, population density, GDP per capita or super power.

The higher value wins. For population density the lower value wins. Equal values give a draw ("EMPATE"). Any other option prints "Opção Inválida".

### Two-attribute match

```
supertrunfo-expert
```

In this mode the card codes must be whole numbers. Pick two attributes from the 7-option menu. The game names the winning card of each round by its code. Ties in a round go to the second card. It then adds each card's two attribute values together. The larger total wins the final round. Equal totals are a draw.

If you pick the same attribute twice, the game tells you to start again with different attributes. The final panel then counts only the first attribute. An option outside the menu prints "Atributo 1 inválido." or "Atributo 2 inválido." and ends the game with status 1.

## Using the library

```python
from supertrunfo.cards import Attribute, Card, Outcome, compare

first = Card(code="A01", state="SP", city="Campinas",
             population=1_200_000, area=795.7,
             gdp=65_000_000_000.0, tourist_spots=30)
second = Card(code="B01", state="RJ", city="Niteroi",
              population=480_000, area=133.9,
              gdp=25_000_000_000.0, tourist_spots=20)

compare(Attribute.POPULATION, first, second)   # Outcome.FIRST
first.value(Attribute.DENSITY)                 # same as first.density()
```

### `supertrunfo.cards`

- `Card` is a frozen dataclass. It has the methods `density()`, `per_capita()`, `super_power()` and `value(attribute)`.
- `Attribute` is the enumeration of comparable attributes.
- `Outcome` has the members `FIRST`, `SECOND` and `TIE`.
- `compare(attribute, first, second)` returns an `Outcome`. For density the lower value wins.
- `prompt_card(read, write, number)` builds a card from input tokens. `read` returns the next token and `write` displays text.
- `format_card(card, number)` returns the card's panel text.

### `supertrunfo.adventurer`

- `play_round(first, second, choice)` returns the text of a single-attribute round for a menu option from 1 to 8.

### `supertrunfo.expert`

- `round_winner(attribute, first, second)` returns the winning `Card`. A tie goes to the second card.
- `play_match(first, second, first_choice, second_choice)` returns a `MatchResult`. It raises `ValueError` for an option outside 1–7.
- `format_match(result, first, second)` returns the text for both rounds and the final panel.

`MatchResult` holds the following fields:

- the chosen attributes
- the round winners
- both scores
- the final `Outcome`
- `repeated`, which is true when the same attribute was chosen twice

## What it does not do

- Each game is played with exactly two cards entered by hand.
- Cards are not saved between games, and there is no deck or score history.
- The commands take no command-line options.

## Running the tests

```
pip install .[test]
pytest
```