"""Standardization of variables apart.

*Every* quantifier is renamed, whether or not its variable clashes with any
other variable. The resulting bound variables are drawn from a single
alphabet ``x, x1, x2, ...``, so that later steps do not depend on the names
chosen by the user. Free variables are never renamed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .atomic import Predicate, Variable
from .boolean import And, Equivalent, Implies, Not, Or
from .formula import ContractError, Formula
from .quantified import All, Ex


@dataclass(frozen=True)
class Standardization:
    """The result of :func:`standardize_variables_with_renaming`.
    """

    formula: Formula
    """The standardized formula.
    """

    renaming: tuple[tuple[Variable, Variable], ...]
    """The renamings performed, as pairs of an old and a new variable, in the
    order in which the quantifiers were visited. One old variable can occur
    in several pairs when it is quantified more than once.
    """


@dataclass
class _Standardizer:

    used: set[str]
    base: str
    counter: int = 1
    renaming: list[tuple[Variable, Variable]] = field(default_factory=list)

    def fresh(self) -> Variable:
        name = self.base
        while name in self.used:
            name = f'{self.base}{self.counter}'
            self.counter += 1
        self.used.add(name)
        return Variable(name)

    def walk(self, f: Formula) -> Formula:
        match f:
            case All() | Ex():
                new_var = self.fresh()
                self.renaming.append((f.var, new_var))
                renamed_arg = f.arg.subs({f.var: new_var})
                return f.op(new_var, self.walk(renamed_arg))
            case And() | Or() | Not() | Implies() | Equivalent():
                return f.op(*(self.walk(arg) for arg in f.args))
            case Predicate():
                return f.subs({})
            case _:
                raise ContractError(f'unexpected {type(f).__name__} in standardization')


def standardize_variables(f: Formula, base: str = 'x') -> Formula:
    """Rename all quantified variables to fresh, pairwise distinct names.

    Fresh names are `base` followed by a counter, which is shared by the
    entire call. Names occurring anywhere in `f`, bound or free, are never
    used as fresh names.

    >>> from normalforms import parse
    >>> standardize_variables(parse('∀x (P(x) ∧ ∃y Q(y))'))
    All(x1, And(P(x1), Ex(x2, Q(x2))))
    >>> standardize_variables(parse('∀y P(y, x1) ∨ ∀y Q(y)'))
    Or(All(x, P(x, x1)), All(x2, Q(x2)))
    """
    return standardize_variables_with_renaming(f, base).formula


def standardize_variables_with_renaming(f: Formula, base: str = 'x') -> Standardization:
    """Like :func:`standardize_variables`, but return also the renamings
    performed.

    >>> from normalforms import parse
    >>> s = standardize_variables_with_renaming(parse('∀x P(x) ∧ ∃x Q(x)'))
    >>> s.formula
    And(All(x1, P(x1)), Ex(x2, Q(x2)))
    >>> s.renaming
    ((x, x1), (x, x2))
    """
    standardizer = _Standardizer(used={v.name for v in f.vars()}, base=base)
    formula = standardizer.walk(f)
    return Standardization(formula=formula, renaming=tuple(standardizer.renaming))
