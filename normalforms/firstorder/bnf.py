"""Boolean normal forms of quantifier-free matrices via the distributive
laws. There is no minimization of the number of clauses or cubes.

>>> from normalforms import parse
>>> f = parse('(P ∧ Q) ∨ (R ∧ ¬S)')
>>> to_cnf_matrix(f, flatten=False)
And(And(Or(P, R), Or(Q, R)), And(Or(P, Not(S)), Or(Q, Not(S))))
>>> to_cnf_matrix(f)
And(Or(P, R), Or(Q, R), Or(P, Not(S)), Or(Q, Not(S)))
>>> to_dnf_matrix(parse('(P ∨ Q) ∧ (R ∨ ¬S)'))
Or(And(P, R), And(Q, R), And(P, Not(S)), And(Q, Not(S)))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .atomic import Predicate
from .boolean import And, AndOr, Not, Or
from .boolean import flatten as _flatten
from .formula import ContractError, Formula


@dataclass(frozen=True)
class BooleanNormalForm:
    """Boolean normal form computation. The instance :data:`to_cnf_matrix`
    computes conjunctive normal forms, and the instance :data:`to_dnf_matrix`
    computes disjunctive normal forms.
    """

    outer: type[AndOr]
    """The outer operator of the normal form: :class:`.And` for CNF and
    :class:`.Or` for DNF.
    """

    _names: ClassVar[dict[type[AndOr], str]] = {And: 'CNF', Or: 'DNF'}

    @property
    def inner(self) -> type[AndOr]:
        """The inner operator of the normal form.
        """
        return self.outer.dual()

    def __call__(self, f: Formula, flatten: bool = True) -> Formula:
        """Compute the normal form of the quantifier-free formula `f`, which
        must be in NNF.

        If `flatten` is :obj:`False`, the result of the distribution is
        returned as is, with nested binary operators. Otherwise nested
        operators are flattened, which preserves the left-to-right order of
        clauses and literals.
        """
        g = self._step(f)
        return _flatten(g) if flatten else g

    def _step(self, f: Formula) -> Formula:
        match f:
            case Predicate() | Not(arg=Predicate()):
                return f.subs({})
            case And() | Or() if f.op is self.outer:
                return f.op(*(self._step(arg) for arg in f.args))
            case And() | Or():
                args = [self._step(arg) for arg in f.args]
                g = args[0]
                for arg in args[1:]:
                    g = self._distribute(g, arg)
                return g
            case _:
                raise ContractError(f'unexpected {type(f).__name__} in '
                                    f'{self._names[self.outer]} matrix')

    def _distribute(self, lhs: Formula, rhs: Formula) -> Formula:
        """Distribute ``inner(lhs, rhs)`` over :attr:`outer` operators in
        `rhs` first, then in `lhs`.
        """
        if rhs.op is self.outer:
            return self.outer(*(self._distribute(lhs, arg) for arg in rhs.args))
        if lhs.op is self.outer:
            return self.outer(*(self._distribute(arg, rhs) for arg in lhs.args))
        return self.inner(lhs, rhs)


to_cnf_matrix = BooleanNormalForm(outer=And)
"""Conjunctive normal form of a quantifier-free matrix.
"""

to_dnf_matrix = BooleanNormalForm(outer=Or)
"""Disjunctive normal form of a quantifier-free matrix.
"""
