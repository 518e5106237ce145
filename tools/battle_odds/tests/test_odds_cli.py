from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest
from loguru import logger

sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from tools.battle_odds.odds_cli import main


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    yield
    logger.remove()
    logger.add(sys.__stderr__)


def test_prints_odds_as_percentage(capsys: pytest.CaptureFixture[str]) -> None:
    main(["fp00", "0p00"])

    assert capsys.readouterr().out == "Odds of win: 97.33%\n"


def test_precision_flag(capsys: pytest.CaptureFixture[str]) -> None:
    main(["fp00", "0p00", "--precision", "4"])

    assert capsys.readouterr().out == "Odds of win: 97.3280%\n"


def test_breakdown_prints_powers_and_tally(capsys: pytest.CaptureFixture[str]) -> None:
    main(["1a22", "epf0", "--breakdown"])

    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "attack_power=2 defense_power=0"
    assert lines[1].startswith("wins=")
    assert lines[2].startswith("Odds of win: ")


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["zp00", "0p00"], "invalid attacker card: 'zp00'"),
        (["fp00", "0q00"], "invalid defender card: '0q00'"),
        (["fp00"], "the following arguments are required: defender"),
        ([], "the following arguments are required: attacker, defender"),
        (["fp00", "0p00", "--precision", "-1"], "--precision must be non-negative"),
    ],
)
def test_bad_input_exits_with_usage_error(
    argv: list[str], message: str, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 2
    assert message in capsys.readouterr().err


def test_verbose_logs_resolved_powers(capsys: pytest.CaptureFixture[str]) -> None:
    main(["8x00", "5m37", "--verbose"])

    captured = capsys.readouterr()
    assert captured.out == "Odds of win: 78.59%\n"
    assert "powers=(8, 3)" in captured.err
