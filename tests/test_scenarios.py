import pytest

from guarded_record.application.scenarios import (
    SCENARIOS,
    run_cart,
    run_selective_removal,
    run_validated_age,
)
from guarded_record.cli import main


def test_cart_scenario_lines():
    outcome = run_cart()

    assert outcome.lines[0] == "1000"
    assert outcome.lines[1] == "set total -> Field 'total' is computed and cannot be assigned"
    assert outcome.lines[2] == "1000"
    assert outcome.lines[3] == '{"items": [{"unit_cost": 500, "qty": 2}], "total": 1000}'


def test_validated_age_scenario_lines():
    outcome = run_validated_age()

    assert outcome.lines == [
        "set age 26 -> ok",
        "26",
        "set age 'chickenjoy' -> 'chickenjoy' is not a number",
        "26",
    ]
    assert outcome.record.get("age") == 26


def test_selective_removal_scenario_lines():
    outcome = run_selective_removal()

    assert outcome.lines == [
        "remove p -> Field 'p' is not removable",
        "p = 1",
        "remove r -> ok",
        "r: Field 'r' is not registered",
        '{"p": 1}',
    ]


def test_cli_runs_selected_scenarios(capsys):
    exit_code = main(["cart", "--csv"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.startswith("cart\n====\n1000\n")
    assert "name,kind,value,removable" in out
    assert "chickenjoy" not in out


def test_cli_runs_all_scenarios_by_default(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    for name in SCENARIOS:
        assert f"{name}\n" in out


def test_cli_rejects_unknown_scenario(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["nope"])

    assert excinfo.value.code == 2
    assert "unknown scenario(s): nope" in capsys.readouterr().err


def test_cli_log_level_is_case_insensitive_and_checked(capsys):
    assert main(["removal", "--log-level", "debug"]) == 0
    capsys.readouterr()

    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "BOGUS"])

    assert excinfo.value.code == 2
    assert "invalid choice: 'BOGUS'" in capsys.readouterr().err
