import pytest
from sympy.logic import boolalg
from sympy.logic.inference import satisfiable

from normalforms import (And, ContractError, eliminate_biconditional,
                         eliminate_implication, Formula, Not, Or, parse, Predicate,
                         to_cnf_matrix, to_dnf_matrix, to_nnf)
from normalforms.firstorder import flatten, is_literal

A, B, C, D = (Predicate(name) for name in 'ABCD')
P, Q, R, S = (Predicate(name) for name in 'PQRS')


def nnf(text: str) -> Formula:
    return to_nnf(eliminate_implication(eliminate_biconditional(parse(text))))


def equivalent(f: Formula, g: Formula) -> bool:
    return not satisfiable(boolalg.Not(boolalg.Equivalent(f.to_sympy(), g.to_sympy())))


def spine(op, f: Formula) -> list[Formula]:
    return list(f.args) if isinstance(f, op) else [f]


def is_normal_form(outer, f: Formula) -> bool:
    inner = outer.dual()
    return all(is_literal(g) for arg in spine(outer, f) for g in spine(inner, arg))


MATRICES = [
    '(P ∧ Q) ∨ (R ∧ ¬S)',
    '(P ∨ Q) ∧ (R ∨ ¬S)',
    '¬(A ∧ (B ∨ ¬C)) ∨ (D ∧ A)',
    '(A ↔ B) ∨ (C ↔ D)',
    '((A ∧ B) ∨ C) ∧ ¬((B ∨ D) ∧ ¬A)',
    'P(x1, f(x2)) ∨ (¬Q(x1) ∧ R(x2))',
    'A',
    '¬A',
]


def test_cnf_raw_and_flat():
    f = parse('(P ∧ Q) ∨ (R ∧ ¬S)')
    assert to_cnf_matrix(f, flatten=False) == And(And(Or(P, R), Or(Q, R)),
                                                  And(Or(P, Not(S)), Or(Q, Not(S))))
    assert to_cnf_matrix(f) == And(Or(P, R), Or(Q, R), Or(P, Not(S)), Or(Q, Not(S)))


def test_cnf_distributes_over_right_operand_first():
    f = parse('P ∨ Q ∨ (R ∧ S)')
    assert to_cnf_matrix(f, flatten=False) == And(Or(Or(P, Q), R), Or(Or(P, Q), S))
    assert to_cnf_matrix(f) == And(Or(P, Q, R), Or(P, Q, S))


def test_cnf_folds_nary_disjunctions():
    assert to_cnf_matrix(Or(P, Q, And(R, S))) == to_cnf_matrix(parse('P ∨ Q ∨ (R ∧ S)'))


def test_cnf_keeps_conjunctions():
    assert to_cnf_matrix(parse('P ∧ (Q ∨ ¬R)')) == And(P, Or(Q, Not(R)))


def test_dnf():
    f = parse('P ∧ (Q ∨ R)')
    assert to_dnf_matrix(f) == Or(And(P, Q), And(P, R))
    assert to_dnf_matrix(parse('(P ∨ Q) ∧ (R ∨ ¬S)')) == \
        Or(And(P, R), And(Q, R), And(P, Not(S)), And(Q, Not(S)))


def test_literals_are_kept():
    assert to_cnf_matrix(P) == P
    assert to_cnf_matrix(Not(P)) == Not(P)
    assert to_dnf_matrix(Not(P)) == Not(P)


@pytest.mark.parametrize('text', MATRICES)
def test_cnf_shape_and_equivalence(text):
    f = nnf(text)
    g = to_cnf_matrix(f)
    assert is_normal_form(And, g)
    assert equivalent(f, g)
    assert equivalent(f, to_cnf_matrix(f, flatten=False))


@pytest.mark.parametrize('text', MATRICES)
def test_dnf_shape_and_equivalence(text):
    f = nnf(text)
    g = to_dnf_matrix(f)
    assert is_normal_form(Or, g)
    assert equivalent(f, g)


@pytest.mark.parametrize('text', MATRICES)
def test_flat_is_flattened_raw(text):
    f = nnf(text)
    assert to_cnf_matrix(f) == flatten(to_cnf_matrix(f, flatten=False))
    assert to_dnf_matrix(f) == flatten(to_dnf_matrix(f, flatten=False))


@pytest.mark.parametrize('text', ['∀x P(x)', '¬(P ∧ Q)', 'P → Q', 'P ∨ ∃x Q(x)'])
def test_matrix_rejects_non_matrices(text):
    with pytest.raises(ContractError):
        to_cnf_matrix(parse(text))
    with pytest.raises(ContractError):
        to_dnf_matrix(parse(text))
