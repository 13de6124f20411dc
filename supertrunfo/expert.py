"""Two-round card duel whose attribute sums decide the final winner."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from supertrunfo.cards import Attribute, Card, Outcome, format_card, prompt_card

BANNER = " ****** SUPER TRUNFO ******\n"

_OPTIONS = (
    "1. População\n"
    "2. Área\n"
    "3. PIB\n"
    "4. Pontos Turisticos\n"
    "5. Densidade Demográfica\n"
    "6. Renda Per Capita\n"
    "7. Super Poder\n"
    "Escolha: "
)

FIRST_MENU = (
    "   ****** SUPER TRUNFO ******\n"
    "°°° COMPETIÇÃO POR ATRIBUTOS °°°\n"
    "\n"
    "            RODADA 1  \n"
    " Escolha o primeiro atributo: \n" + _OPTIONS
)

SECOND_MENU = (
    "    ****** SUPER TRUNFO ******\n"
    "°°° COMPETIÇÃO POR ATRIBUTOS °°°\n"
    "\n"
    "             RODADA 2  \n"
    "  Escolha o segundo atributo: \n"
    "obs: escolha um atributo diferente da primeira rodada. \n" + _OPTIONS
)

REPEATED = "Você escolheu o mesmo atributo! Reinicie e escolha atributos diferentes!\n"

CHOICES: dict[int, Attribute] = {
    1: Attribute.POPULATION,
    2: Attribute.AREA,
    3: Attribute.GDP,
    4: Attribute.TOURIST_SPOTS,
    5: Attribute.DENSITY,
    6: Attribute.PER_CAPITA,
    7: Attribute.SUPER_POWER,
}

# Names shown on the final panel, spelled as the game shows them.
_PANEL_NAMES: dict[Attribute, str] = {
    Attribute.POPULATION: "População",
    Attribute.AREA: "Aréa",
    Attribute.GDP: "PIB",
    Attribute.TOURIST_SPOTS: "Pontos Turisticos",
    Attribute.DENSITY: "Densidade Populacional",
    Attribute.PER_CAPITA: "Renda Per Capita",
    Attribute.SUPER_POWER: "Super Poder",
}

_HEADINGS: dict[Attribute, str] = {
    Attribute.POPULATION: " POPULAÇÃO",
    Attribute.AREA: "  ÁREA",
    Attribute.GDP: "  PIB",
    Attribute.TOURIST_SPOTS: "  PONTOS TURISTICOS",
    Attribute.DENSITY: "  DENSIDADE POPULACIONAL",
    Attribute.PER_CAPITA: "  RENDA PER CAPITA",
    Attribute.SUPER_POWER: "  SUPER PODER",
}


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a two-round match.

    ``second_attribute`` and ``second_round_winner`` are None when the same
    attribute was chosen twice; the second round then adds nothing to the scores.
    """

    first_attribute: Attribute
    second_attribute: Attribute | None
    first_round_winner: Card
    second_round_winner: Card | None
    first_score: float
    second_score: float
    outcome: Outcome

    @property
    def repeated(self) -> bool:
        return self.second_attribute is None


def round_winner(attribute: Attribute, first: Card, second: Card) -> Card:
    """The card winning a round on ``attribute``; a tie goes to the second card."""
    a, b = first.value(attribute), second.value(attribute)
    first_wins = a < b if attribute.lower_wins else a > b
    return first if first_wins else second


def _attribute(choice: int, ordinal: int) -> Attribute:
    try:
        return CHOICES[choice]
    except KeyError:
        raise ValueError(f"Atributo {ordinal} inválido.") from None


def play_match(first: Card, second: Card, first_choice: int, second_choice: int) -> MatchResult:
    """Play both rounds and total the chosen attributes of each card.

    Raises ValueError when a choice is not one of the menu options.
    """
    first_attribute = _attribute(first_choice, 1)
    first_winner = round_winner(first_attribute, first, second)
    first_score = float(first.value(first_attribute))
    second_score = float(second.value(first_attribute))

    second_attribute: Attribute | None = None
    second_winner: Card | None = None
    if second_choice != first_choice:
        second_attribute = _attribute(second_choice, 2)
        second_winner = round_winner(second_attribute, first, second)
        first_score += first.value(second_attribute)
        second_score += second.value(second_attribute)

    if first_score > second_score:
        outcome = Outcome.FIRST
    elif second_score > first_score:
        outcome = Outcome.SECOND
    else:
        outcome = Outcome.TIE
    return MatchResult(
        first_attribute,
        second_attribute,
        first_winner,
        second_winner,
        first_score,
        second_score,
        outcome,
    )


def _round_text(ordinal: str, attribute: Attribute, winner: Card) -> str:
    heading = f"*'*'* {ordinal} Atributo:{_HEADINGS[attribute]} *'*'*:\n"
    round_label = "rodada 1" if attribute is Attribute.POPULATION else "rodada"
    return heading + f"A carta vencedora da {round_label} é: Carta {winner.code}\n"


def _second_round_text(result: MatchResult) -> str:
    if result.second_attribute is None or result.second_round_winner is None:
        return REPEATED
    return _round_text("Segundo", result.second_attribute, result.second_round_winner)


def _final_text(result: MatchResult, first: Card, second: Card) -> str:
    names = _PANEL_NAMES[result.first_attribute], (
        "" if result.second_attribute is None else _PANEL_NAMES[result.second_attribute]
    )
    if result.outcome is Outcome.FIRST:
        verdict = f"      *-*-*-*-*-* CARTA {first.code} VENCEU *-*-*-*-*-*  \n"
    elif result.outcome is Outcome.SECOND:
        verdict = f"     *-*-*-*-*-* CARTA {second.code} VENCEU *-*-*-*-*-* \n"
    else:
        verdict = "          ###### EMPATOU ###### !\n"
    return (
        "\n"
        "   °°° RODADA FINAL: A MAIOR CARTA VENCE °°°\n"
        f" Atributos escolhidos: {names[0]} e {names[1]}\n"
        "\n"
        f"Placar Carta {first.code}: {result.first_score:f}\n"
        f"Cidade {first.city}, Estado {first.state}\n"
        "\n"
        f"Placar Carta {second.code}: {result.second_score:.2f}\n"
        f"Cidade {second.city}, Estado {second.state}\n"
        "\n" + verdict
    )


def format_match(result: MatchResult, first: Card, second: Card) -> str:
    """Render both rounds and the final panel of a match."""
    return (
        _round_text("Primeiro", result.first_attribute, result.first_round_winner)
        + "\n"
        + _second_round_text(result)
        + _final_text(result, first, second)
    )


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _reader(lines: Iterable[str]) -> Callable[[], str]:
    tokens = _tokens(lines)

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("unexpected end of input") from None

    return read


def _read_choice(read: Callable[[], str]) -> int:
    try:
        return int(read())
    except (ValueError, EOFError):
        return 0


def _prompt_numbered_card(read: Callable[[], str], write: Callable[[str], object], number: int) -> Card:
    card = prompt_card(read, write, number)
    int(card.code)  # card codes are numbers in this game
    return card


def main(argv: list[str] | None = None) -> int:
    """Register two cards from standard input and play a two-round match."""
    read = _reader(sys.stdin)
    write = sys.stdout.write

    try:
        write(BANNER + "\n")
        first = _prompt_numbered_card(read, write, 1)
        write("\n" + BANNER + "\n")
        second = _prompt_numbered_card(read, write, 2)
    except (ValueError, EOFError) as error:
        sys.stderr.write(f"Entrada inválida: {error}\n")
        return 1

    write("\n" + BANNER + "     Painel de Cartas:\n\n")
    write(format_card(first, 1))
    write("\n")
    write(format_card(second, 2))
    write("\n")

    write(FIRST_MENU)
    first_choice = _read_choice(read)
    if first_choice not in CHOICES:
        write("Atributo 1 inválido.\n")
        return 1
    attribute = CHOICES[first_choice]
    write(_round_text("Primeiro", attribute, round_winner(attribute, first, second)))
    write("\n")

    write(SECOND_MENU)
    second_choice = _read_choice(read)
    try:
        result = play_match(first, second, first_choice, second_choice)
    except ValueError as error:
        write(f"{error}\n")
        return 1
    write(_second_round_text(result))
    write(_final_text(result, first, second))
    return 0


if __name__ == "__main__":
    sys.exit(main())