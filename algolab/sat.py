"""Brute-force backtracking SAT solver for DIMACS CNF input."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, Sequence

_PROBLEM_LINE = re.compile(r"p\s*cnf\s*([+-]?\d+)(?:\s*([+-]?\d+))?")

_GREEN = "\033[1;32m"
_RED = "\033[1;31m"
_WHITE = "\033[1;37m"
_RESET = "\033[0m"
_INDENT = "\t" * 5


class Status(Enum):
    """State of a formula under a partial assignment."""

    SATISFIED = 0
    CONTRADICTION = 1
    UNDETERMINED = 2


@dataclass
class CNF:
    """A formula in conjunctive normal form."""

    num_variables: int = 0
    clauses: list[tuple[int, ...]] = field(default_factory=list)


def _parse_clause(line: str) -> tuple[int, ...]:
    literals = []
    for token in line.split():
        try:
            literal = int(token)
        except ValueError:
            break
        if literal == 0:
            break
        literals.append(literal)
    return tuple(literals)


def parse_dimacs(text: str) -> CNF:
    """Parse DIMACS CNF text.

    Lines starting with ``c`` are comments; any other non-problem line,
    blank ones included, is read as a clause.
    """
    cnf = CNF()
    for line in text.splitlines():
        if line.startswith("c"):
            continue
        if line.startswith("p"):
            match = _PROBLEM_LINE.match(line)
            if match:
                cnf.num_variables = int(match.group(1))
            continue
        cnf.clauses.append(_parse_clause(line))
    return cnf


def read_cnf(path) -> CNF:
    """Read and parse a DIMACS CNF file."""
    return parse_dimacs(Path(path).read_text(encoding="utf-8"))


def evaluate(cnf: CNF, assignment: Mapping[int, bool]) -> Status:
    """Classify the formula under a partial assignment of variables."""
    all_satisfied = True
    for clause in cnf.clauses:
        satisfied = False
        undetermined = False
        for literal in clause:
            value = assignment.get(abs(literal))
            if value is None:
                undetermined = True
            elif (literal > 0) == value:
                satisfied = True
                break
        if not satisfied:
            if not undetermined:
                return Status.CONTRADICTION
            all_satisfied = False
    return Status.SATISFIED if all_satisfied else Status.UNDETERMINED


def solve(cnf: CNF) -> Optional[dict[int, bool]]:
    """Return a satisfying (possibly partial) assignment, or None if unsatisfiable.

    Variables are tried in order, true before false.
    """
    stack: list[dict[int, bool]] = [{}]
    while stack:
        assignment = stack.pop()
        status = evaluate(cnf, assignment)
        if status is Status.SATISFIED:
            return assignment
        if status is Status.CONTRADICTION:
            continue
        variable = next(
            (v for v in range(1, cnf.num_variables + 1) if v not in assignment),
            None,
        )
        if variable is None:
            continue
        stack.append({**assignment, variable: False})
        stack.append({**assignment, variable: True})
    return None


def format_result(cnf: CNF, solution: Optional[Mapping[int, bool]]) -> str:
    """Render the solver's verdict and, when satisfiable, the variable table."""
    if solution is None:
        return "\n".join([
            _RED,
            f"{_INDENT}========================",
            f"{_INDENT}||       UNSAT!       ||",
            f"{_INDENT}========================",
            "",
            _RESET,
        ])
    lines = [
        _GREEN,
        f"{_INDENT}========================",
        f"{_INDENT}||        SAT!        ||",
        f"{_INDENT}========================",
        "",
        _RESET + _WHITE,
        f"{_INDENT} +-------------------+",
        f"{_INDENT} | Variável |  Valor |",
        f"{_INDENT} +-------------------+",
    ]
    for variable in range(1, cnf.num_variables + 1):
        value = 1 if solution.get(variable) is True else 0
        lines.append(f"{_INDENT} |     {variable}    |    {value}   |")
    lines.append(f"{_INDENT} +-------------------+")
    lines.append(_RESET)
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a DIMACS CNF formula.")
    parser.add_argument("path", nargs="?", default="entrada.txt")
    args = parser.parse_args(argv)
    try:
        cnf = read_cnf(args.path)
    except OSError as exc:
        print(f"Erro ao abrir o arquivo: {exc}")
        return 1
    print(format_result(cnf, solve(cnf)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())