"""Convert to Prenex Normal Form.

A Prenex Normal Form (PNF) is a Negation Normal Form (NNF) in which all
quantifiers :class:`.Ex` and :class:`.All` stand at the beginning of the
formula. Here, the quantifiers are pulled out in the left-to-right order of
their occurrence. No attempt is made to minimize quantifier alternations.
This is correct only when all quantified variables are distinct and
distinct from the free variables, which is guaranteed by
:func:`.standardize_variables`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .atomic import Predicate
from .boolean import And, Not, Or
from .formula import ContractError, Formula
from .quantified import All, Ex, Prefix


@dataclass(frozen=True)
class PrenexForm:
    """A quantifier prefix along with a quantifier-free matrix.

    >>> from normalforms import parse
    >>> p = to_prenex(parse('∀x1 (P(x1) ∧ ∃x2 Q(x2))'))
    >>> print(p)
    ∀x1 ∃x2 (P(x1) ∧ Q(x2))
    >>> p.to_formula()
    All(x1, Ex(x2, And(P(x1), Q(x2))))
    """

    prefix: Prefix
    """The quantifier prefix, outermost quantifier first.
    """

    matrix: Formula
    """The quantifier-free matrix.
    """

    def __str__(self) -> str:
        if not self.prefix:
            return str(self.matrix)
        return f'{self.prefix} ({self.matrix})'

    def to_formula(self) -> Formula:
        """The prenex formula obtained by quantifying the matrix with the
        prefix.
        """
        return self.prefix.quantify(self.matrix)


class PrenexNormalForm:

    def __call__(self, f: Formula) -> PrenexForm:
        """Separate `f` into a quantifier prefix and a matrix. `f` must be in
        NNF with standardized variables.

        >>> from normalforms import parse
        >>> to_prenex(parse('(∀x1 P(x1) ∨ ∃x2 ¬Q(x2)) ∧ ∀x3 ∃x4 R(x3, x4)'))
        PrenexForm(prefix=Prefix((All, x1), (Ex, x2), (All, x3), (Ex, x4)),
                   matrix=And(Or(P(x1), Not(Q(x2))), R(x3, x4)))
        """
        prefix, matrix = self.pnf(f)
        return PrenexForm(prefix=prefix, matrix=matrix)

    def pnf(self, f: Formula) -> tuple[Prefix, Formula]:
        match f:
            case All() | Ex():
                prefix, matrix = self.pnf(f.arg)
                return Prefix((f.op, f.var)) + prefix, matrix
            case And() | Or():
                prefix = Prefix()
                matrices = []
                for arg in f.args:
                    arg_prefix, arg_matrix = self.pnf(arg)
                    prefix += arg_prefix
                    matrices.append(arg_matrix)
                return prefix, f.op(*matrices)
            case Predicate() | Not(arg=Predicate()):
                return Prefix(), f.subs({})
            case _:
                raise ContractError(f'unexpected {type(f).__name__} in prenex extraction; '
                                    f'expecting NNF')


to_prenex = PrenexNormalForm()
