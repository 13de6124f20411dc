import io

import pytest

from supertrunfo.cards import Attribute, Card, Outcome
from supertrunfo.expert import (
    CHOICES,
    REPEATED,
    MatchResult,
    format_match,
    main,
    play_match,
    round_winner,
)


def make_card(code="7", population=1000, area=10.0, gdp=5000.0, spots=3, city="Alpha", state="AA"):
    return Card(code, state, city, population, area, gdp, spots)


@pytest.fixture
def big():
    return make_card(code="7", population=2000, area=20.0, gdp=8000.0, spots=5, city="Big", state="BB")


@pytest.fixture
def small():
    return make_card(code="9", population=500, area=50.0, gdp=1000.0, spots=2, city="Small", state="SS")


def test_round_winner_higher_value_wins(big, small):
    assert round_winner(Attribute.POPULATION, big, small) is big
    assert round_winner(Attribute.POPULATION, small, big) is big


def test_round_winner_lower_density_wins(big, small):
    # big density 100, small density 10
    assert round_winner(Attribute.DENSITY, big, small) is small
    assert round_winner(Attribute.DENSITY, small, big) is small


def test_round_winner_tie_goes_to_second():
    a = make_card(code="1")
    b = make_card(code="2")
    assert round_winner(Attribute.AREA, a, b) is b
    assert round_winner(Attribute.DENSITY, a, b) is b


def test_play_match_sums_two_attributes(big, small):
    result = play_match(big, small, 1, 2)
    assert result.first_attribute is Attribute.POPULATION
    assert result.second_attribute is Attribute.AREA
    assert result.first_score == pytest.approx(big.population + big.area)
    assert result.second_score == pytest.approx(small.population + small.area)
    assert result.outcome is Outcome.FIRST
    assert result.first_round_winner is big
    assert result.second_round_winner is small


def test_play_match_second_wins_on_sum(big, small):
    result = play_match(small, big, 3, 4)
    assert result.outcome is Outcome.SECOND


def test_play_match_tie():
    a = make_card(code="1")
    b = make_card(code="2")
    result = play_match(a, b, 1, 3)
    assert result.outcome is Outcome.TIE
    assert result.first_score == result.second_score


def test_repeated_choice_counts_only_first_round(big, small):
    result = play_match(big, small, 4, 4)
    assert result.repeated
    assert result.second_attribute is None
    assert result.second_round_winner is None
    assert result.first_score == big.tourist_spots
    assert result.second_score == small.tourist_spots


def test_density_sum_higher_wins_final(big, small):
    # Rounds favour lower density, but the final favours the larger sum.
    result = play_match(big, small, 5, 4)
    assert result.first_round_winner is small
    assert result.outcome is Outcome.FIRST


@pytest.mark.parametrize("choice", [0, 8, -1])
def test_invalid_first_choice(big, small, choice):
    with pytest.raises(ValueError, match="Atributo 1"):
        play_match(big, small, choice, 1)


@pytest.mark.parametrize("choice", [0, 8])
def test_invalid_second_choice(big, small, choice):
    with pytest.raises(ValueError, match="Atributo 2"):
        play_match(big, small, 1, choice)


def test_choices_cover_seven_options():
    assert sorted(CHOICES) == list(range(1, 8))
    assert set(CHOICES.values()) == set(Attribute)


def test_format_match_panel(big, small):
    result = play_match(big, small, 1, 2)
    text = format_match(result, big, small)
    assert "*'*'* Primeiro Atributo: POPULAÇÃO *'*'*:" in text
    assert "*'*'* Segundo Atributo:  ÁREA *'*'*:" in text
    assert " Atributos escolhidos: População e Aréa" in text
    assert f"Cidade {big.city}, Estado {big.state}" in text
    assert "CARTA 7 VENCEU" in text


def test_format_match_score_precision():
    a = make_card(code="1", population=1000)
    b = make_card(code="2", population=400)
    result = play_match(a, b, 1, 1)
    text = format_match(result, a, b)
    assert "Placar Carta 1: 1000.000000\n" in text
    assert "Placar Carta 2: 400.00\n" in text
    assert REPEATED in text


def test_format_match_tie_message():
    a = make_card(code="1")
    b = make_card(code="2")
    text = format_match(play_match(a, b, 3, 4), a, b)
    assert "###### EMPATOU ###### !" in text
    assert "VENCEU" not in text


def test_match_result_repeated_flag(big, small):
    result = MatchResult(Attribute.GDP, None, big, None, 1.0, 2.0, Outcome.SECOND)
    assert result.repeated is True


CARD_INPUT = "7 BB Big 2000 20 8000 5\n9 SS Small 500 50 1000 2\n"


def test_main_full_match(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(CARD_INPUT + "1\n2\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "A carta vencedora da rodada 1 é: Carta 7" in out
    assert "CARTA 7 VENCEU" in out


def test_main_invalid_first_attribute(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(CARD_INPUT + "9\n"))
    assert main() == 1
    out = capsys.readouterr().out
    assert "Atributo 1 inválido." in out
    assert "RODADA 2" not in out


def test_main_invalid_second_attribute(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(CARD_INPUT + "1\nx\n"))
    assert main() == 1
    assert "Atributo 2 inválido." in capsys.readouterr().out


def test_main_repeated_attribute(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(CARD_INPUT + "3\n3\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert REPEATED in out
    assert "RODADA FINAL" in out


def test_main_rejects_non_numeric_code(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc BB Big 2000 20 8000 5\n"))
    assert main() == 1
    assert "Entrada inválida" in capsys.readouterr().err