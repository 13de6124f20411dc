"""Single-attribute card duel chosen from a menu."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from supertrunfo.cards import Attribute, Card, Outcome, compare, format_card, prompt_card

BANNER = " ****** SUPER TRUNFO ******\n"

MENU = (
    "°°° COMPETIÇÃO POR ATRIBUTO °°°\n"
    "\n"
    " Escolha um atributo: \n"
    "1. Qual o nome dos países\n"
    "2. População\n"
    "3. Área\n"
    "4. PIB\n"
    "5. Pontos Turisticos\n"
    "6. Densidade Demográfica\n"
    "7. Renda Per Capita\n"
    "8. Super Poder\n"
    "Escolha: \n"
)

_CHOICES: dict[int, tuple[Attribute, str]] = {
    2: (Attribute.POPULATION, "POPULAÇÃO"),
    3: (Attribute.AREA, "ÁREA"),
    4: (Attribute.GDP, "PIB"),
    5: (Attribute.TOURIST_SPOTS, "PONTOS TURISTICOS"),
    6: (Attribute.DENSITY, "DENSIDADE POPULACIONAL"),
    7: (Attribute.PER_CAPITA, "RENDA PER CAPITA"),
    8: (Attribute.SUPER_POWER, "SUPER PODER"),
}

_VERDICTS = {
    Outcome.FIRST: "         °°° A carta 1 venceu!!! °°° \n",
    Outcome.SECOND: "         °°° A carta 2 venceu!!! °°° \n",
    Outcome.TIE: "                   ### EMPATE ###\n",
}

INVALID = "Opção Inválida\n"


def _format_value(attribute: Attribute, value: float) -> str:
    return str(value) if attribute.is_integral else f"{value:.2f}"


def play_round(first: Card, second: Card, choice: int) -> str:
    """Return the text of a duel on the menu option ``choice``."""
    if choice == 1:
        return (
            "*'*'* NOMES DAS CIDADES *'*'*:\n"
            f" Carta 1: {first.city} ({first.state})\n"
            f" Carta 2: {second.city} ({second.state})\n"
            f"    °°° {first.city} - {second.city} °°°\n"
        )
    if choice not in _CHOICES:
        return INVALID
    attribute, heading = _CHOICES[choice]
    lines = [f"*'*'* A carta vencedora da rodada pelo atributo {heading} *'*'*:\n"]
    for number, card in ((1, first), (2, second)):
        shown = _format_value(attribute, card.value(attribute))
        lines.append(f" Carta {number}: {card.city} ({card.state}): {shown}\n")
    lines.append(_VERDICTS[compare(attribute, first, second)])
    return "".join(lines)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _reader(lines: Iterable[str]):
    tokens = _tokens(lines)

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("unexpected end of input") from None

    return read


def main(argv: list[str] | None = None) -> int:
    """Register two cards from standard input and duel on one attribute."""
    read = _reader(sys.stdin)
    write = sys.stdout.write

    write(BANNER + "\n")
    try:
        first = prompt_card(read, write, 1)
        write("\n")
        second = prompt_card(read, write, 2)
    except (ValueError, EOFError) as error:
        sys.stderr.write(f"Entrada inválida: {error}\n")
        return 1

    write("\n" + BANNER + "     Painel de Cartas:\n\n")
    write(format_card(first, 1))
    write("\n")
    write(format_card(second, 2))
    write("\n")

    write(MENU)
    try:
        choice = int(read())
    except (ValueError, EOFError):
        choice = 0
    write(play_round(first, second, choice))
    return 0


if __name__ == "__main__":
    sys.exit(main())