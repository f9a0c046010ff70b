from concurrent.futures import ThreadPoolExecutor

import pytest

from logicnf.firstorder import (
    All, And, Equivalent, Ex, Implies, Not, Or, Predicate, Variable)
from logicnf.syntax import (
    FormulaParser, FormulaSyntaxError, LexError, ParseError, TokenKind,
    normalize, parse, tokenize)

A, B, C = Variable('A'), Variable('B'), Variable('C')
x = Variable('x')


def P(*terms):
    return Predicate('P', terms)


def Q(*terms):
    return Predicate('Q', terms)


@pytest.mark.parametrize('text, expected', [
    ('A & B | C', Or(And(A, B), C)),
    ('A | B & C', Or(A, And(B, C))),
    ('A -> B | C', Implies(A, Or(B, C))),
    ('A <-> B -> C', Equivalent(A, Implies(B, C))),
    ('A -> B -> C', Implies(Implies(A, B), C)),
    ('A & B & C', And(And(A, B), C)),
    ('!A & B', And(Not(A), B)),
    ('!!A', Not(Not(A))),
    ('(A | B) & C', And(Or(A, B), C)),
])
def test_precedence_and_associativity(text, expected):
    assert parse(text) == expected


def test_quantifier_scope_is_narrow():
    assert parse('forall x P(x) -> Q(x)') == Implies(All('x', P(x)), Q(x))
    assert parse('forall x (P(x) -> Q(x))') == All('x', Implies(P(x), Q(x)))
    assert parse('exists x !P(x)') == Ex('x', Not(P(x)))


@pytest.mark.parametrize('text', [
    'exists x. P(x)',
    'exists x: P(x)',
    '∃x P(x)',
    r'\exists x P(x)',
    r'\exists x\,P(x)',
])
def test_quantifier_spellings(text):
    assert parse(text) == Ex('x', P(x))


@pytest.mark.parametrize('text', [
    r'$\neg (A \wedge B) \leftrightarrow (\lnot A \vee \lnot B)$',
    r'\\lnot (A \\land B) \\iff (\\neg A \\lor ~B)',
    '!(A & B) <-> (~A | !B)',
    '¬(A ∧ B) ↔ (¬A ∨ ¬B)',
])
def test_input_dialects(text):
    assert parse(text) == Equivalent(Not(And(A, B)), Or(Not(A), Not(B)))


def test_implication_spellings():
    for arrow in (r'\to', r'\rightarrow', r'\implies', r'\longrightarrow', '->', '→'):
        assert parse(f'A {arrow} B') == Implies(A, B)


def test_non_breaking_space():
    assert normalize('A\u00a0&\u00a0B') == 'A ∧ B'
    assert parse('A\u00a0&\u00a0B') == And(A, B)


def test_predicates():
    assert parse('R(x, y_1)') == Predicate('R', (x, Variable('y_1')))
    assert parse('P(f(x))') == P(Predicate('f', (x,)))
    assert parse('_p') == Variable('_p')


def test_tokenize_positions():
    tokens = tokenize('P ∧ Q(x)')
    assert [t.kind for t in tokens] == [
        TokenKind.NAME, TokenKind.AND, TokenKind.NAME, TokenKind.LPAREN,
        TokenKind.NAME, TokenKind.RPAREN]
    assert [t.position for t in tokens] == [0, 2, 4, 5, 6, 7]


def test_keywords_are_not_names():
    assert tokenize('forall foralls')[0].kind is TokenKind.FORALL
    assert tokenize('forall foralls')[1].kind is TokenKind.NAME


def test_lex_error():
    with pytest.raises(LexError) as excinfo:
        parse('P & #')
    assert excinfo.value.character == '#'
    assert excinfo.value.position == 4
    assert str(excinfo.value) == "unexpected character '#' at position 4"


@pytest.mark.parametrize('text, message', [
    ('', 'expected primary expression, found end of input'),
    ('P & & Q', 'expected primary expression, found and'),
    ('(P & Q', 'expected ), found end of input'),
    ('P)', 'expected end of input, found )'),
    ('P Q', 'expected end of input, found name'),
    ('forall (P)', 'expected name, found ('),
    ('P()', 'expected primary expression, found )'),
    ('P(x,)', 'expected primary expression, found )'),
])
def test_parse_errors(text, message):
    with pytest.raises(ParseError) as excinfo:
        parse(text)
    assert str(excinfo.value) == message


def test_errors_are_formula_syntax_errors():
    for text in ('P & #', 'P &'):
        with pytest.raises(FormulaSyntaxError):
            parse(text)


@pytest.mark.parametrize('text', [
    'forall x (P(x) -> Q(x))',
    '!(A & B) <-> C',
    'exists y forall x !R(x, y) | !!A',
    'A -> (B -> C)',
    '!forall x (P(x) & exists y Q(y))',
])
def test_latex_round_trip(text):
    f = parse(text)
    assert parse(f.as_latex()) == f
    assert parse(str(f)) == f


def test_parse_from_several_threads():
    conjunction = ' & '.join(f'A{i}' for i in range(150))
    disjunction = ' | '.join(f'B{i}' for i in range(150))
    expected = {conjunction: parse(conjunction), disjunction: parse(disjunction)}
    texts = [conjunction, disjunction] * 200
    with ThreadPoolExecutor(max_workers=4) as executor:
        trees = list(executor.map(parse, texts))
    assert all(tree == expected[text] for text, tree in zip(texts, trees))


def test_token_stream_is_per_call():
    parser = FormulaParser()
    assert parser.parse(tokenize('A ∧ B')) == And(A, B)
    assert parser.parse(tokenize('C')) == C
    assert not hasattr(parser, 'tokens')
