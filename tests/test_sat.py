import itertools

import pytest

from algolab.sat import (
    CNF,
    Status,
    evaluate,
    format_result,
    main,
    parse_dimacs,
    read_cnf,
    solve,
)

SAMPLE = "c example\np cnf 3 2\n1 -3 0\n2 3 -1 0\n"


def test_parse_dimacs_sample():
    cnf = parse_dimacs(SAMPLE)
    assert cnf.num_variables == 3
    assert cnf.clauses == [(1, -3), (2, 3, -1)]


def test_parse_clause_count_comes_from_lines():
    cnf = parse_dimacs("p cnf 2 10\n1 0\n-2 0\n")
    assert len(cnf.clauses) == 2


def test_parse_stops_at_zero():
    cnf = parse_dimacs("p cnf 3 1\n1 2 0 3\n")
    assert cnf.clauses == [(1, 2)]


def test_blank_line_is_an_empty_clause():
    cnf = parse_dimacs("p cnf 1 1\n1 0\n\n")
    assert cnf.clauses == [(1,), ()]
    assert solve(cnf) is None


def test_evaluate_states():
    cnf = parse_dimacs(SAMPLE)
    assert evaluate(cnf, {}) is Status.UNDETERMINED
    assert evaluate(cnf, {1: True, 2: True, 3: False}) is Status.SATISFIED
    assert evaluate(cnf, {1: False, 3: True}) is Status.CONTRADICTION


def test_evaluate_empty_formula_is_satisfied():
    assert evaluate(CNF(num_variables=2), {}) is Status.SATISFIED


def test_solve_returns_satisfying_assignment():
    cnf = parse_dimacs(SAMPLE)
    solution = solve(cnf)
    assert solution is not None
    assert evaluate(cnf, solution) is Status.SATISFIED


def test_solve_prefers_true():
    cnf = parse_dimacs("p cnf 2 1\n1 2 0\n")
    assert solve(cnf) == {1: True}


def test_solve_unsatisfiable():
    cnf = parse_dimacs("p cnf 1 2\n1 0\n-1 0\n")
    assert solve(cnf) is None


def test_solve_variable_beyond_declared_count_is_unsat():
    cnf = parse_dimacs("p cnf 1 1\n2 0\n")
    assert solve(cnf) is None


@pytest.mark.parametrize(
    "clauses",
    [
        [(1, 2), (-1, 2), (1, -2), (-1, -2)],
        [(1, -2), (2, -3), (3, -1), (1, 2, 3)],
        [(-1,), (1, 2), (-2, 3), (-3,)],
        [(1, 2, 3), (-1, -2), (-2, -3), (-1, -3)],
    ],
)
def test_solve_agrees_with_exhaustive_check(clauses):
    cnf = CNF(num_variables=3, clauses=clauses)
    exists = any(
        evaluate(cnf, dict(zip((1, 2, 3), values))) is Status.SATISFIED
        for values in itertools.product((True, False), repeat=3)
    )
    solution = solve(cnf)
    assert (solution is not None) == exists
    if solution is not None:
        assert evaluate(cnf, solution) is Status.SATISFIED


def test_format_result_unsat():
    text = format_result(CNF(num_variables=1), None)
    assert "UNSAT!" in text


def test_format_result_sat_table():
    cnf = CNF(num_variables=2, clauses=[(1,)])
    text = format_result(cnf, {1: True})
    assert "SAT!" in text and "UNSAT!" not in text
    assert "|     1    |    1   |" in text
    assert "|     2    |    0   |" in text


def test_read_cnf(tmp_path):
    path = tmp_path / "entrada.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert read_cnf(path) == parse_dimacs(SAMPLE)


def test_main(tmp_path, capsys):
    path = tmp_path / "entrada.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    assert "SAT!" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "Erro ao abrir o arquivo" in capsys.readouterr().out