import pytest
from sympy.logic import boolalg
from sympy.logic.inference import satisfiable

from normalforms import (All, And, ContractError, eliminate_biconditional,
                         eliminate_implication, Equivalent, Ex, Formula, Implies, Not,
                         Or, parse, Predicate, Prefix, standardize_variables,
                         standardize_variables_with_renaming, to_nnf, to_prenex,
                         Variable)

x, y = Variable('x'), Variable('y')
x1, x2, x3, x4 = (Variable(f'x{i}') for i in range(1, 5))
P, Q, R = Predicate('P'), Predicate('Q'), Predicate('R')


def Px(*terms):
    return Predicate('P', terms)


def Qx(*terms):
    return Predicate('Q', terms)


def subformulas(f: Formula):
    yield f
    match f:
        case All() | Ex():
            yield from subformulas(f.arg)
        case And() | Or() | Not() | Implies() | Equivalent():
            for arg in f.args:
                yield from subformulas(arg)


def nnf(text: str) -> Formula:
    return to_nnf(eliminate_implication(eliminate_biconditional(parse(text))))


def equivalent(f: Formula, g: Formula) -> bool:
    return not satisfiable(boolalg.Not(boolalg.Equivalent(f.to_sympy(), g.to_sympy())))


FORMULAS = [
    '¬(P ∧ (Q ∨ ¬R))',
    '¬∀x ∃y (P(x) ∨ ¬Q(y))',
    '¬¬¬P',
    '∀x (P(x) ↔ ∃y Q(x, y))',
    '¬(P ↔ Q)',
    '(P → Q) → ¬(R ∨ ∃x ∀y ¬(P(x) → Q(y)))',
    '∀x P(x) ∧ ∀x (Q(x) ∨ ∃x R(x, x))',
]

PROPOSITIONAL = [
    '¬(P ∧ (Q ∨ ¬R))',
    '¬(P ↔ Q)',
    '(P → Q) ↔ (¬Q → ¬P)',
    '¬((A ∨ B) → (C ∧ ¬D))',
]


def test_eliminate_biconditional():
    assert eliminate_biconditional(parse('P ↔ Q')) == And(Implies(P, Q), Implies(Q, P))


def test_eliminate_biconditional_keeps_implications():
    f = eliminate_biconditional(parse('P → ∀x (Q ↔ R)'))
    assert f == Implies(P, All(x, And(Implies(Q, R), Implies(R, Q))))


def test_eliminate_implication():
    assert eliminate_implication(parse('P → Q')) == Or(Not(P), Q)


def test_eliminate_implication_keeps_biconditionals():
    f = eliminate_implication(parse('(P → Q) ↔ R'))
    assert f == Equivalent(Or(Not(P), Q), R)


@pytest.mark.parametrize('text', FORMULAS)
def test_elimination_removes_connectives(text):
    f = eliminate_implication(eliminate_biconditional(parse(text)))
    assert not any(isinstance(g, (Implies, Equivalent)) for g in subformulas(f))


def test_nnf():
    assert to_nnf(parse('¬(P ∧ Q)')) == Or(Not(P), Not(Q))
    assert to_nnf(parse('¬(P ∨ ¬Q)')) == And(Not(P), Q)
    assert to_nnf(parse('¬∃x P(x)')) == All(x, Not(Px(x)))
    assert to_nnf(parse('¬∀x ¬P(x)')) == Ex(x, Px(x))
    assert to_nnf(parse('¬¬P')) == P


@pytest.mark.parametrize('text', FORMULAS)
def test_nnf_postcondition(text):
    f = nnf(text)
    for g in subformulas(f):
        assert not isinstance(g, (Implies, Equivalent))
        if isinstance(g, Not):
            assert isinstance(g.arg, Predicate)


@pytest.mark.parametrize('text', FORMULAS)
def test_nnf_idempotent(text):
    f = nnf(text)
    assert to_nnf(f) == f


@pytest.mark.parametrize('text', PROPOSITIONAL)
def test_nnf_equivalent(text):
    assert equivalent(parse(text), nnf(text))


@pytest.mark.parametrize('text', ['P → Q', 'P ↔ Q', '¬(P → Q)', '∀x ¬(P(x) ↔ Q)'])
def test_nnf_rejects_implications(text):
    with pytest.raises(ContractError):
        to_nnf(parse(text))
    assert issubclass(ContractError, AssertionError)


def test_nnf_method():
    f = parse('¬(P ∨ Q)')
    assert f.to_nnf() == to_nnf(f)


def test_standardize_renames_every_quantifier():
    f = standardize_variables(parse('∀x P(x) ∧ ∀x Q(x)'))
    assert f == And(All(x1, Px(x1)), All(x2, Qx(x2)))


def test_standardize_keeps_free_variables():
    f = standardize_variables(parse('∀x P(x, y) ∧ Q(y)'))
    assert f == And(All(x1, Px(x1, y)), Qx(y))


def test_standardize_respects_shadowing():
    f = standardize_variables(parse('∀x (P(x) ∧ ∃x Q(x))'))
    assert f == All(x1, And(Px(x1), Ex(x2, Qx(x2))))


def test_standardize_counter_is_shared():
    f = standardize_variables(parse('∀x1 ∀x P(x, x1, x3)'))
    assert f == All(x2, All(x4, Px(x4, x2, x3)))


def test_standardize_base():
    v = Variable('v')
    assert standardize_variables(parse('∀x P(x)'), base='v') == All(v, Px(v))


def test_standardize_renaming():
    s = standardize_variables_with_renaming(parse('∀y ∃y P(y)'))
    assert s.formula == All(x, Ex(x1, Px(x1)))
    assert s.renaming == ((y, x), (y, x1))


@pytest.mark.parametrize('text', FORMULAS)
def test_standardize_properties(text):
    f = nnf(text)
    g = standardize_variables(f)
    names = [v.name for v in g.qvars()]
    assert len(names) == len(set(names)) == len(list(f.qvars()))
    assert set(g.fvars()) == set(f.fvars())
    assert [a.name for a in g.atoms()] == [a.name for a in f.atoms()]


def test_prenex():
    p = to_prenex(standardize_variables(nnf('∀x (P(x) ∧ ∃y Q(y))')))
    assert p.prefix == Prefix((All, x1), (Ex, x2))
    assert p.matrix == And(Px(x1), Qx(x2))
    assert str(p) == '∀x1 ∃x2 (P(x1) ∧ Q(x2))'
    assert p.to_formula() == All(x1, Ex(x2, And(Px(x1), Qx(x2))))


def test_prenex_order():
    f = standardize_variables(parse('∃x P(x) ∨ ∀y (Q(y) ∧ ∃z R(y, z))'))
    p = to_prenex(f)
    assert p.prefix == Prefix((Ex, x1), (All, x2), (Ex, x3))
    assert p.matrix == Or(Px(x1), And(Qx(x2), Predicate('R', [x2, x3])))


def test_prenex_without_quantifiers():
    p = to_prenex(parse('P ∧ ¬Q'))
    assert p.prefix == Prefix()
    assert p.matrix == And(P, Not(Q))
    assert str(p) == 'P ∧ ¬Q'


@pytest.mark.parametrize('text', FORMULAS)
def test_prenex_properties(text):
    f = standardize_variables(nnf(text))
    p = to_prenex(f)
    assert [v for _, v in p.prefix] == list(f.qvars())
    assert not list(p.matrix.qvars())


@pytest.mark.parametrize('text', ['P → Q', '¬∀x P(x)', '¬(P ∧ Q)'])
def test_prenex_rejects_non_nnf(text):
    with pytest.raises(ContractError):
        to_prenex(parse(text))
