from __future__ import annotations
import logging
import pytest

from brdocs.cli import EXIT_INVALID, EXIT_OK, EXIT_USAGE, main
from brdocs.models import CNPJ, CPF, Plate

def test_validate_valid_document(capsys):
    assert main(["cpf", "45317828791"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "CPF 453.178.287-91 é válido ✅"
    assert main(["PLATE", " BRA.2023 "]) == EXIT_OK
    assert "Placa BRA-2023 é válido" in capsys.readouterr().out

def test_validate_invalid_document(capsys):
    assert main(["cpf", "453.178.287-81"]) == EXIT_INVALID
    assert capsys.readouterr().out.strip() == "CPF 453.178.287-81 é inválido 🚫"

def test_silent_mode_only_sets_exit_code(capsys):
    assert main(["--silent", "cnpj", "33.000.167/1002-46"]) == EXIT_OK
    assert main(["--silent", "cnpj", "33.000.167/1002-47"]) == EXIT_INVALID
    assert main(["--silent", "rg", "123"]) == EXIT_USAGE
    out = capsys.readouterr()
    assert out.out == "" and out.err == ""

def test_unknown_kind_is_usage_error(capsys):
    assert main(["rg", "123"]) == EXIT_USAGE
    err = capsys.readouterr().err
    assert "documento desconhecido: rg" in err and "usage" in err

def test_too_many_arguments_exits_2():
    with pytest.raises(SystemExit) as exc:
        main(["cpf", "1", "2"])
    assert exc.value.code == 2

def test_generate_prints_valid_document(capsys):
    assert main(["cpf"]) == EXIT_OK
    assert CPF.is_valid(capsys.readouterr().out.strip())
    assert main(["placa"]) == EXIT_OK
    assert Plate.is_valid(capsys.readouterr().out.strip())

def test_generate_with_seed_is_reproducible(capsys):
    main(["--seed", "11", "cns"])
    first = capsys.readouterr().out
    main(["--seed", "11", "cns"])
    assert capsys.readouterr().out == first

def test_numeric_cnpj_flag(capsys):
    assert main(["cnpj", "12.ABC.345/01DE-35"]) == EXIT_OK
    assert main(["--numeric-cnpj", "cnpj", "12.ABC.345/01DE-35"]) == EXIT_INVALID
    capsys.readouterr()
    for _ in range(20):
        main(["--numeric-cnpj", "cnpj"])
        assert CNPJ.parse(capsys.readouterr().out.strip()).is_numeric

def test_bad_log_level_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "verbose", "cpf", "123"])
    assert exc.value.code == EXIT_USAGE
    assert "--log-level" in capsys.readouterr().err

def test_log_level_option_sets_package_logger():
    assert main(["--silent", "--log-level", "debug", "cpf", "45317828791"]) == EXIT_OK
    assert logging.getLogger("brdocs").level == logging.DEBUG
    assert main(["--silent", "cpf", "45317828791"]) == EXIT_OK
    assert logging.getLogger("brdocs").level == logging.WARNING

def test_silent_usage_errors_print_nothing(capsys):
    for argv in (["--silent", "cpf", "1", "2"], ["--silent", "--log-level", "verbose", "cpf"], ["--silent"]):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == EXIT_USAGE
    out = capsys.readouterr()
    assert out.out == "" and out.err == ""
