"""Elimination of the connectives :math:`\\longleftrightarrow` and
:math:`\\longrightarrow`. The two passes are independent of each other.
Since :func:`eliminate_biconditional` introduces implications, it has to run
before :func:`eliminate_implication` when both connectives are to be removed.
"""

from .atomic import Predicate
from .boolean import And, Equivalent, Implies, Not, Or
from .formula import ContractError, Formula
from .quantified import All, Ex


def eliminate_biconditional(f: Formula) -> Formula:
    """Replace each ``Equivalent(A, B)`` with ``And(Implies(A, B),
    Implies(B, A))``. All other operators are kept.

    >>> from normalforms import parse
    >>> eliminate_biconditional(parse('P <-> (Q <-> R)'))
    And(Implies(P, And(Implies(Q, R), Implies(R, Q))),
        Implies(And(Implies(Q, R), Implies(R, Q)), P))
    """
    match f:
        case Equivalent():
            lhs = eliminate_biconditional(f.lhs)
            rhs = eliminate_biconditional(f.rhs)
            return And(Implies(lhs, rhs), Implies(rhs, lhs))
        case And() | Or() | Not() | Implies():
            return f.op(*(eliminate_biconditional(arg) for arg in f.args))
        case All() | Ex():
            return f.op(f.var, eliminate_biconditional(f.arg))
        case Predicate():
            return f.subs({})
        case _:
            raise ContractError(f'unexpected {type(f).__name__} in biconditional elimination')


def eliminate_implication(f: Formula) -> Formula:
    """Replace each ``Implies(A, B)`` with ``Or(Not(A), B)``. All other
    operators are kept.

    >>> from normalforms import parse
    >>> eliminate_implication(parse('(P -> Q) -> ∀x R(x)'))
    Or(Not(Or(Not(P), Q)), All(x, R(x)))
    """
    match f:
        case Implies():
            return Or(Not(eliminate_implication(f.lhs)), eliminate_implication(f.rhs))
        case And() | Or() | Not() | Equivalent():
            return f.op(*(eliminate_implication(arg) for arg in f.args))
        case All() | Ex():
            return f.op(f.var, eliminate_implication(f.arg))
        case Predicate():
            return f.subs({})
        case _:
            raise ContractError(f'unexpected {type(f).__name__} in implication elimination')
