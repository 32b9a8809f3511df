"""Clausal form of a conjunctive normal form, and classification of Horn
clauses.

A :class:`Clause` is a disjunction of literals, and a :class:`ClauseSet` is
a conjunction of clauses, all of whose variables are implicitly universally
quantified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .atomic import Predicate
from .boolean import And, connect, Not, Or
from .formula import ContractError, Formula


@dataclass(frozen=True)
class Literal:
    """An atomic formula or its negation.

    >>> from normalforms.firstorder import Variable
    >>> L = Literal(negated=True, atom=Predicate('P', [Variable('x')]))
    >>> print(L)
    ¬P(x)
    >>> L.to_formula()
    Not(P(x))
    """

    negated: bool
    atom: Predicate

    def __str__(self) -> str:
        return f'¬{self.atom}' if self.negated else str(self.atom)

    def to_formula(self) -> Formula:
        return Not(self.atom) if self.negated else self.atom


class Clause(tuple[Literal, ...]):
    """A disjunction of literals, in their order of occurrence. Duplicate
    literals are kept.

    >>> from normalforms import parse
    >>> c = extract_clauses(parse('¬P(x) ∨ ¬Q(x) ∨ R(x)'))[0]
    >>> print(c)
    {¬P(x), ¬Q(x), R(x)}
    >>> [str(L) for L in c.negative()]
    ['¬P(x)', '¬Q(x)']
    >>> c.is_horn()
    True
    """

    def __new__(cls, literals: Iterable[Literal] = ()) -> Clause:
        literals = tuple(literals)
        for L in literals:
            if not isinstance(L, Literal):
                raise ValueError(f'{L!r} is not a Literal')
        return super().__new__(cls, literals)

    def __repr__(self) -> str:
        return f'Clause({list(self)!r})'

    def __str__(self) -> str:
        return '{' + ', '.join(str(L) for L in self) + '}'

    def is_horn(self) -> bool:
        """Whether `self` contains at most one positive literal. The empty
        clause is a Horn clause.
        """
        return sum(1 for _ in self.positive()) <= 1

    def negative(self) -> Iterator[Literal]:
        """An iterator over the negative literals, in order.
        """
        return (L for L in self if L.negated)

    def positive(self) -> Iterator[Literal]:
        """An iterator over the positive literals, in order.
        """
        return (L for L in self if not L.negated)

    def to_formula(self) -> Formula:
        """The disjunction of the literals. A unit clause yields its only
        literal.
        """
        if not self:
            raise ValueError('the empty clause has no formula')
        return connect(Or, [L.to_formula() for L in self])


class ClauseSet(tuple[Clause, ...]):
    """A conjunction of clauses, in their order of occurrence.

    >>> from normalforms import parse
    >>> print(extract_clauses(parse('P(x) ∧ (Q(x) ∨ R(x))')))
    [{P(x)}, {Q(x), R(x)}]
    """

    def __new__(cls, clauses: Iterable[Clause] = ()) -> ClauseSet:
        clauses = tuple(clauses)
        for c in clauses:
            if not isinstance(c, Clause):
                raise ValueError(f'{c!r} is not a Clause')
        return super().__new__(cls, clauses)

    def __repr__(self) -> str:
        return f'ClauseSet({list(self)!r})'

    def __str__(self) -> str:
        return '[' + ', '.join(str(c) for c in self) + ']'

    def is_horn(self) -> bool:
        """Whether all clauses are Horn clauses.
        """
        return all(c.is_horn() for c in self)


def extract_clauses(matrix: Formula) -> ClauseSet:
    """Read the clauses off a quantifier-free formula in CNF. Both binary
    and n-ary operators are accepted.

    >>> from normalforms import parse
    >>> extract_clauses(parse('(¬P(x) ∨ Q(x)) ∧ R'))
    ClauseSet([Clause([Literal(negated=True, atom=P(x)), Literal(negated=False, atom=Q(x))]),
               Clause([Literal(negated=False, atom=R)])])
    >>> extract_clauses(parse('P ∨ (Q ∧ R)'))
    Traceback (most recent call last):
    ...
    normalforms.firstorder.formula.ContractError: invalid literal And in CNF
    """
    return ClauseSet([Clause(_literals(c)) for c in _spine(And, matrix)])


def is_horn(clauses: Clause | ClauseSet) -> bool:
    """Whether `clauses` is a Horn clause or a set of Horn clauses.

    >>> from normalforms import parse
    >>> is_horn(extract_clauses(parse('(¬P(x) ∨ ¬Q(x) ∨ R(x)) ∧ ¬S')))
    True
    >>> is_horn(extract_clauses(parse('P(x) ∨ Q(x)')))
    False
    """
    return clauses.is_horn()


def _spine(op: type[And | Or], f: Formula) -> list[Formula]:
    if f.op is op:
        return [g for arg in f.args for g in _spine(op, arg)]
    return [f]


def _literals(clause: Formula) -> list[Literal]:
    literals = []
    for f in _spine(Or, clause):
        match f:
            case Predicate():
                literals.append(Literal(negated=False, atom=f))
            case Not(arg=Predicate() as atom):
                literals.append(Literal(negated=True, atom=atom))
            case _:
                raise ContractError(f'invalid literal {type(f).__name__} in CNF')
    return literals

