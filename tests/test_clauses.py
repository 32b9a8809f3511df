import pytest

from normalforms import (All, And, Clause, ClauseSet, ContractError, Ex,
                         extract_clauses, FunctionApplication, is_horn, Literal, Not,
                         Or, parse, Predicate, Prefix, skolemize,
                         skolemize_with_substitution, to_prenex, Variable)

x = Variable('x')
x1, x2, x3, x4, x5 = (Variable(f'x{i}') for i in range(1, 6))
A, B, C, D, E = (Predicate(name) for name in 'ABCDE')


def Px(*terms):
    return Predicate('P', terms)


def Qx(*terms):
    return Predicate('Q', terms)


def Rx(*terms):
    return Predicate('R', terms)


def fn(name, *args):
    return FunctionApplication(name, args)


def test_skolemize():
    p = to_prenex(parse('∃x1 ∀x2 ∃x3 ∀x4 ∃x5 P(x1, x2, x3, x4, x5)'))
    f = skolemize(p.prefix, p.matrix)
    assert f == Px(fn('c1'), x2, fn('f1', x2), x4, fn('f2', x2, x4))


def test_skolem_constants():
    prefix = Prefix((Ex, x1), (Ex, x2))
    assert skolemize(prefix, Px(x1, x2)) == Px(fn('c1'), fn('c2'))


def test_skolem_prefixes():
    prefix = Prefix((Ex, x1), (All, x2), (Ex, x3))
    f = skolemize(prefix, Px(x1, x2, x3), constant_prefix='k', function_prefix='g')
    assert f == Px(fn('k1'), x2, fn('g1', x2))


def test_skolem_counters_are_per_call():
    prefix = Prefix((Ex, x1))
    assert skolemize(prefix, Px(x1)) == skolemize(prefix, Px(x1)) == Px(fn('c1'))


def test_skolem_universal_only():
    prefix = Prefix((All, x1), (All, x2))
    s = skolemize_with_substitution(prefix, Px(x1, x2))
    assert s.matrix == Px(x1, x2)
    assert s.substitution == ()


def test_skolem_respects_shadowing_and_drops_quantifiers():
    f = skolemize(Prefix((Ex, x)), And(Px(x), All(x, Qx(x))))
    assert f == And(Px(fn('c1')), Qx(x))


@pytest.mark.parametrize('text', [
    '∀x1 ∃x2 ∀x3 ∃x4 (P(x1, x2) ∨ Q(x3, x4))',
    '∃x1 ∃x2 ∀x3 ∀x4 ∃x5 R(x1, x2, x3, x4, x5)',
    '∀x1 ∀x2 ∃x3 ∃x4 (P(x3) ∧ Q(x4))',
])
def test_skolem_arguments_are_preceding_universals(text):
    p = to_prenex(parse(text))
    s = skolemize_with_substitution(p.prefix, p.matrix)
    existentials = [v for q, v in p.prefix if q is Ex]
    assert [v for v, _ in s.substitution] == existentials
    for v, term in s.substitution:
        index = [w for _, w in p.prefix].index(v)
        universals = tuple(w for q, w in p.prefix[:index] if q is All)
        assert term.args == universals
    constants = [t.name for _, t in s.substitution if not t.args]
    functions = [t.name for _, t in s.substitution if t.args]
    assert constants == [f'c{i}' for i in range(1, len(constants) + 1)]
    assert functions == [f'f{i}' for i in range(1, len(functions) + 1)]
    assert not list(s.matrix.qvars())


def test_extract_clauses():
    clauses = extract_clauses(parse('(¬P(x) ∨ Q(x)) ∧ R(x)'))
    assert clauses == ClauseSet([
        Clause([Literal(True, Px(x)), Literal(False, Qx(x))]),
        Clause([Literal(False, Rx(x))])])
    assert str(clauses) == '[{¬P(x), Q(x)}, {R(x)}]'


def test_extract_clauses_nested_and_nary():
    f = And(And(A, B), Or(C, Or(D, Not(E))))
    assert str(extract_clauses(f)) == '[{A}, {B}, {C, D, ¬E}]'
    g = And(A, B, Or(C, D, Not(E)))
    assert extract_clauses(f) == extract_clauses(g)


def test_extract_clauses_single_literal():
    assert extract_clauses(Not(A)) == ClauseSet([Clause([Literal(True, A)])])


@pytest.mark.parametrize('text', ['¬¬P', 'P ∨ (Q ∧ R)', '∀x P(x)', 'P → Q'])
def test_extract_clauses_rejects_non_cnf(text):
    with pytest.raises(ContractError):
        extract_clauses(parse(text))


def test_horn():
    horn = Clause([Literal(True, Px(x)), Literal(True, Qx(x)), Literal(False, Rx(x))])
    not_horn = Clause([Literal(False, Px(x)), Literal(False, Qx(x))])
    assert horn.is_horn() and is_horn(horn)
    assert not not_horn.is_horn() and not is_horn(not_horn)
    assert is_horn(ClauseSet([horn, horn]))
    assert not is_horn(ClauseSet([horn, not_horn]))


def test_horn_empty():
    assert is_horn(Clause())
    assert is_horn(ClauseSet())


def test_polarity():
    c = extract_clauses(parse('¬P(x) ∨ Q(x) ∨ ¬R(x)'))[0]
    assert [L.atom for L in c.positive()] == [Qx(x)]
    assert [L.atom for L in c.negative()] == [Px(x), Rx(x)]


def test_clause_to_formula():
    c = extract_clauses(parse('¬P(x) ∨ Q(x)'))[0]
    assert c.to_formula() == Or(Not(Px(x)), Qx(x))
    assert Clause([Literal(False, A)]).to_formula() == A


def test_clause_validation():
    with pytest.raises(ValueError):
        Clause([A])
    with pytest.raises(ValueError):
        ClauseSet([[Literal(False, A)]])
