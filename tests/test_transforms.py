import pytest

from abstraction import equivalent
from logicnf.firstorder import (
    All, And, AtomicFormula, Equivalent, Ex, Formula, Implies, Not, Or,
    Predicate, Variable, distribute_and, distribute_or, eliminate_implications,
    nnf, pnf)
from logicnf.syntax import parse

A, B, C, D = (Variable(name) for name in 'ABCD')
x = Variable('x')


def P(*terms):
    return Predicate('P', terms)


def Q(*terms):
    return Predicate('Q', terms)


def is_literal(f: Formula) -> bool:
    return isinstance(f, AtomicFormula) \
        or isinstance(f, Not) and isinstance(f.arg, AtomicFormula)


def is_nnf(f: Formula) -> bool:
    match f:
        case And(left=lhs, right=rhs) | Or(left=lhs, right=rhs):
            return is_nnf(lhs) and is_nnf(rhs)
        case All(arg=arg) | Ex(arg=arg):
            return is_nnf(arg)
        case _:
            return is_literal(f)


def is_flat(f: Formula, op, dual) -> bool:
    """Test whether `f` is a nesting of `op` over nestings of `dual` over
    literals.
    """
    if isinstance(f, op):
        return is_flat(f.left, op, dual) and is_flat(f.right, op, dual)
    return is_flat_dual(f, dual)


def is_flat_dual(f: Formula, dual) -> bool:
    if isinstance(f, dual):
        return is_flat_dual(f.left, dual) and is_flat_dual(f.right, dual)
    return is_literal(f)


QUANTIFIER_FREE = [
    'P -> Q',
    'A <-> B',
    '!(A & B) | C',
    '(A | B) & !(C -> D)',
    '!(A <-> (B | !C))',
    '((A & B) | (C & D)) -> A',
    '!!!(A -> !B)',
]


def test_eliminate_implications():
    assert eliminate_implications(parse('P -> Q')) == Or(Not(Variable('P')), Variable('Q'))
    assert eliminate_implications(parse('A <-> B')) == And(Or(Not(A), B), Or(Not(B), A))
    assert eliminate_implications(parse('forall x (P(x) -> Q(x))')) \
        == All('x', Or(Not(P(x)), Q(x)))


def test_eliminate_implications_keeps_other_operators():
    f = parse('!(A & exists x P(x)) | B')
    assert eliminate_implications(f) == f


def test_eliminate_implications_is_pure():
    f = parse('A -> B')
    eliminate_implications(f)
    assert f == Implies(A, B)


def test_double_negation():
    assert nnf(parse('!!A')) == A
    assert nnf(parse('!!!A')) == Not(A)


def test_de_morgan():
    assert nnf(parse('!(A & B)')) == Or(Not(A), Not(B))
    assert nnf(parse('!(A | B)')) == And(Not(A), Not(B))


def test_nested_negations_below_de_morgan():
    assert nnf(parse('!(!A & !!B)')) == Or(A, Not(B))


def test_quantifier_duality():
    assert nnf(parse('!forall x P(x)')) == Ex('x', Not(P(x)))
    assert nnf(parse('!exists x P(x)')) == All('x', Not(P(x)))
    assert nnf(parse('!forall x !exists y Q(y)')) == Ex('x', Ex('y', Q(Variable('y'))))


@pytest.mark.parametrize('text', QUANTIFIER_FREE)
def test_nnf_is_equivalent(text):
    f = parse(text)
    g = nnf(eliminate_implications(f))
    assert is_nnf(g)
    assert equivalent(f, g)


def test_pnf_moves_quantifiers_in_order():
    f = parse('forall x P(x) & exists y Q(y)')
    assert pnf(f) == All('x', Ex('y', And(P(x), Q(Variable('y')))))
    f = parse('exists y Q(y) | forall x P(x)')
    assert pnf(f) == Ex('y', All('x', Or(Q(Variable('y')), P(x))))


def test_pnf_computes_nnf_unless_told_otherwise():
    f = parse('!forall x P(x)')
    assert pnf(f) == Ex('x', Not(P(x)))
    assert pnf(f, is_nnf=True) == Ex('x', Not(P(x)))


def test_pnf_of_quantifier_free_formula():
    f = nnf(parse('!(A & B)'))
    assert pnf(f, is_nnf=True) == f


@pytest.mark.parametrize('text', [
    'forall x P(x) & exists y (Q(y) | forall z R(z))',
    '!exists x forall y R(x, y)',
    'forall x (P(x) -> exists y R(x, y))',
])
def test_pnf_is_prenex(text):
    matrix, prefix = pnf(parse(text)).matrix()
    assert is_nnf(matrix)
    assert not list(matrix.qvars())
    assert prefix


def test_distribute_or():
    f = distribute_or(parse('(A & B) | (C & D)'))
    assert f == And(And(Or(A, C), Or(A, D)), And(Or(B, C), Or(B, D)))


def test_distribute_and():
    assert distribute_and(parse('(A | B) & C')) == Or(And(A, C), And(B, C))


def test_distribution_under_quantifiers():
    f = distribute_or(parse('forall x (P(x) | (A & B))'))
    assert f == All('x', And(Or(P(x), A), Or(P(x), B)))


def test_distribution_without_dual_is_identity():
    f = parse('(A | !B) & C')
    assert distribute_or(f) == f


@pytest.mark.parametrize('text', QUANTIFIER_FREE)
def test_cnf_is_equivalent(text):
    f = parse(text)
    g = distribute_or(nnf(eliminate_implications(f)))
    assert is_flat(g, And, Or)
    assert equivalent(f, g)


@pytest.mark.parametrize('text', QUANTIFIER_FREE)
def test_dnf_is_equivalent(text):
    f = parse(text)
    g = distribute_and(nnf(eliminate_implications(f)))
    assert is_flat(g, Or, And)
    assert equivalent(f, g)


def test_equivalence_check_detects_difference():
    assert not equivalent(parse('A -> B'), parse('B -> A'))
    assert equivalent(parse('A -> B'), parse('!B -> !A'))


def test_transformations_leave_implications_out():
    f = nnf(eliminate_implications(parse('(A <-> B) -> C')))
    assert not any(isinstance(g, (Implies, Equivalent)) for g in _subformulas(f))


def _subformulas(f: Formula):
    yield f
    match f:
        case And(left=lhs, right=rhs) | Or(left=lhs, right=rhs):
            yield from _subformulas(lhs)
            yield from _subformulas(rhs)
        case Not(arg=arg) | All(arg=arg) | Ex(arg=arg):
            yield from _subformulas(arg)


def test_pnf_pushes_negation_across_quantifiers():
    f = parse('!forall x exists y R(x, y)')
    R = Predicate('R', (x, Variable('y')))
    assert pnf(f, is_nnf=True) == Ex('x', All('y', Not(R)))


def test_is_quantified_formula():
    assert Formula.is_quantified_formula(parse('exists x P(x)'))
    assert not Formula.is_quantified_formula(parse('!exists x P(x)'))
