from functools import reduce

import pytest

from abstraction import equivalent
from logicnf.firstorder import (
    And, Clause, Literal, Not, Or, clauses_as_latex, distribute_or,
    eliminate_implications, extract_clauses, is_horn, nnf)
from logicnf.syntax import parse


def to_cnf(text):
    return distribute_or(nnf(eliminate_implications(parse(text))))


def literal_as_formula(literal: Literal):
    f = parse(literal.formula)
    return Not(f) if literal.negated else f


def rejoin(clauses):
    """Left-nested conjunction of left-nested disjunctions.
    """
    disjunctions = (reduce(Or, map(literal_as_formula, clause)) for clause in clauses)
    return reduce(And, disjunctions)


def test_number_of_clauses():
    assert len(extract_clauses(to_cnf('(A | B) & !C & (D | !E)'))) == 3
    assert len(extract_clauses(to_cnf('A | B'))) == 1
    assert len(extract_clauses(to_cnf('(A & B) | (C & D)'))) == 4


def test_literals_in_order():
    clause, = extract_clauses(parse('A | !B | C'))
    assert [(lit.negated, lit.formula) for lit in clause] == [
        (False, 'A'), (True, 'B'), (False, 'C')]
    assert clause.positive_count == 2


def test_rejoin_left_nested():
    f = parse('((A | B) & !C) & (D | !E)')
    clauses = extract_clauses(f)
    assert rejoin(clauses) == f
    assert clauses_as_latex(clauses) \
        == '(A \\lor B) \\land (\\lnot C) \\land (D \\lor \\lnot E)'


@pytest.mark.parametrize('text', [
    'P -> Q',
    '(A & B) -> C',
    '!(A <-> B) | C',
    '(A | (B & C)) & (D -> (A & !B))',
])
def test_clauses_are_equivalent(text):
    assert equivalent(parse(text), rejoin(extract_clauses(to_cnf(text))))


def test_predicate_literals():
    clauses = extract_clauses(to_cnf('!P(x, y) | Q(f(x))'))
    assert clauses == [Clause((Literal(True, 'P(x, y)'), Literal(False, 'Q(f(x))')))]


def test_horn_clauses():
    clauses = extract_clauses(to_cnf('((A & B) -> C) & !D & E'))
    assert [clause.positive_count for clause in clauses] == [1, 0, 1]
    assert is_horn(clauses)


def test_not_horn():
    clauses = extract_clauses(to_cnf('(A | B) & C'))
    assert [clause.is_horn() for clause in clauses] == [False, True]
    assert not is_horn(clauses)


def test_empty_sequence_is_horn():
    assert is_horn([])
    assert clauses_as_latex([]) == ''
