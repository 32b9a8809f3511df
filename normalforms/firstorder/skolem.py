"""Skolemization of prenex formulas.

Existentially quantified variables are replaced by Skolem terms in the
order of the prefix, and the remaining quantifiers are dropped. The
resulting quantifier-free matrix is equisatisfiable with the prenex formula,
all of its variables being implicitly universal.

Skolem symbols are numbered per call, constants and functions with separate
counters. There is no check whether a generated name already occurs in the
matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .atomic import FunctionApplication, Predicate, Term, Variable
from .boolean import And, Not, Or
from .formula import ContractError, Formula
from .quantified import All, Ex


@dataclass(frozen=True)
class Skolemization:
    """The result of :func:`skolemize_with_substitution`.
    """

    matrix: Formula
    """The quantifier-free Skolemized matrix.
    """

    substitution: tuple[tuple[Variable, Term], ...]
    """The replaced existential variables along with their Skolem terms, in
    prefix order.
    """


def skolemize(prefix: Iterable[tuple[type[All | Ex], Variable]], matrix: Formula,
              constant_prefix: str = 'c', function_prefix: str = 'f') -> Formula:
    """Replace the existential variables of `prefix` in `matrix` by Skolem
    terms.

    An existential variable with no universal variable to its left is
    replaced by a new constant ``c1, c2, ...``. Otherwise it is replaced by
    a new function ``f1, f2, ...`` applied to all universal variables to its
    left.

    >>> from normalforms import parse, to_prenex
    >>> p = to_prenex(parse('∃x1 ∀x2 ∃x3 ∀x4 ∃x5 P(x1, x2, x3, x4, x5)'))
    >>> print(skolemize(p.prefix, p.matrix))
    P(c1, x2, f1(x2), x4, f2(x2, x4))
    """
    return skolemize_with_substitution(prefix, matrix, constant_prefix,
                                       function_prefix).matrix


def skolemize_with_substitution(prefix: Iterable[tuple[type[All | Ex], Variable]],
                                matrix: Formula, constant_prefix: str = 'c',
                                function_prefix: str = 'f') -> Skolemization:
    """Like :func:`skolemize`, but return also the substitution performed.

    >>> from normalforms import parse, to_prenex
    >>> p = to_prenex(parse('∀x1 ∃x2 (P(x1) ∧ Q(x2))'))
    >>> s = skolemize_with_substitution(p.prefix, p.matrix)
    >>> s.matrix
    And(P(x1), Q(f1(x1)))
    >>> s.substitution
    ((x2, f1(x1)),)
    """
    universals: list[Variable] = []
    substitution: list[tuple[Variable, Term]] = []
    constant_count = 1
    function_count = 1
    g = matrix
    for q, v in prefix:
        if q is All:
            universals.append(v)
            continue
        assert q is Ex, q
        term: Term
        if universals:
            term = FunctionApplication(f'{function_prefix}{function_count}', universals)
            function_count += 1
        else:
            term = FunctionApplication(f'{constant_prefix}{constant_count}')
            constant_count += 1
        substitution.append((v, term))
        g = g.subs({v: term})
    return Skolemization(matrix=_drop_quantifiers(g), substitution=tuple(substitution))


def _drop_quantifiers(f: Formula) -> Formula:
    match f:
        case All() | Ex():
            return _drop_quantifiers(f.arg)
        case And() | Or() | Not():
            return f.op(*(_drop_quantifiers(arg) for arg in f.args))
        case Predicate():
            return f
        case _:
            raise ContractError(f'unexpected {type(f).__name__} in Skolemization')
