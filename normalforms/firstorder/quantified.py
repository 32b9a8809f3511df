r"""We provide subclasses of :class:`Formula <.formula.Formula>` that implement
quantified formulas in the sense that their toplevel operator is one of the
quantifiers :math:`\exists` or :math:`\forall`.
"""
from __future__ import annotations

from typing import final, Iterable, Sequence

from .atomic import Variable
from .formula import Formula


class QuantifiedFormula(Formula):
    r"""A class whose instances are quantified formulas in the sense that their
    toplevel operator is one of the quantifiers :math:`\exists` or
    :math:`\forall`. Note that members of :class:`QuantifiedFormula` may have
    subformulas with other logical operators deeper in the expression tree.
    """

    @property
    def var(self) -> Variable:
        """The variable of the quantifier.

        >>> from normalforms import parse
        >>> parse('∀x ∃y P(x, y)').var
        x
        """
        return self.args[0]

    @property
    def arg(self) -> Formula:
        """The subformula in the scope of the :class:`QuantifiedFormula`.

        >>> from normalforms import parse
        >>> parse('∀x ∃y P(x, y)').arg
        Ex(y, P(x, y))
        """
        return self.args[1]

    def __init__(self, vars_: Variable | Sequence[Variable], arg: Formula) -> None:
        """Construct a quantified formula. A sequence of variables is a
        shorthand for nested quantifiers, the last variable innermost.

        >>> from normalforms.firstorder import Predicate
        >>> x, y = Variable('x'), Variable('y')
        >>> All((x, y), Predicate('P', [x, y]))
        All(x, All(y, P(x, y)))
        """
        assert self.op in (Ex, All)  # in lack of abstract class properties
        super().__init__()
        if not isinstance(arg, Formula):
            raise ValueError(f'{arg!r} is not a Formula')
        match vars_:
            case Variable():
                self._args = (vars_, arg)
            case (Variable(), *_):
                f = arg
                for v in reversed(vars_[1:]):
                    f = self.op(v, f)
                self._args = (vars_[0], f)
            case _:
                raise ValueError(f'{vars_!r} is not a Variable')


@final
class Ex(QuantifiedFormula):
    r"""A class whose instances are existentially quantified formulas in the
    sense that their toplevel operator represents the quantifier symbol
    :math:`\exists`.

    >>> from normalforms.firstorder import Predicate
    >>> x = Variable('x')
    >>> Ex(x, Predicate('P', [x]))
    Ex(x, P(x))
    """

    @classmethod
    def dual(cls) -> type[All]:
        r"""A class method yielding the class :class:`All`, which implements
        the dual operator :math:`\forall` of :math:`\exists`.
        """
        return All


@final
class All(QuantifiedFormula):
    r"""A class whose instances are universally quantified formulas in the
    sense that their toplevel operator represents the quantifier symbol
    :math:`\forall`.

    >>> from normalforms.firstorder import Predicate
    >>> x = Variable('x')
    >>> All(x, Predicate('P', [x]))
    All(x, P(x))
    """

    @classmethod
    def dual(cls) -> type[Ex]:
        """A class method yielding the dual class :class:`Ex` of class:`All`.
        """
        return Ex


class Prefix(tuple[tuple[type[All | Ex], Variable], ...]):
    """Holds a quantifier prefix of a formula: an immutable sequence of
    bindings, each a pair of a quantifier and a variable, outermost first.

    >>> x, y = Variable('x'), Variable('y')
    >>> p = Prefix((All, x), (Ex, y))
    >>> p
    Prefix((All, x), (Ex, y))
    >>> print(p)
    ∀x ∃y
    >>> p + Prefix((All, Variable('z')))
    Prefix((All, x), (Ex, y), (All, z))

    .. seealso::
        * :class:`.pnf.PrenexForm` -- a prefix along with a matrix
    """

    def __new__(cls, *bindings: tuple[type[All | Ex], Variable]) -> Prefix:
        for q, v in bindings:
            if q not in (All, Ex) or not isinstance(v, Variable):
                raise ValueError(f'{(q, v)!r} is not a quantifier binding')
        return super().__new__(cls, bindings)

    def __add__(self, other: Iterable[tuple[type[All | Ex], Variable]]) -> Prefix:  # type: ignore[override]
        return Prefix(*self, *other)

    def __getnewargs__(self) -> tuple[tuple[type[All | Ex], Variable], ...]:
        return tuple(self)

    def __repr__(self) -> str:
        return 'Prefix(' + ', '.join(f'({q.__name__}, {v!r})' for q, v in self) + ')'

    def __str__(self) -> str:
        SYMBOL = {All: '∀', Ex: '∃'}
        return ' '.join(f'{SYMBOL[q]}{v}' for q, v in self)

    def quantify(self, matrix: Formula) -> Formula:
        """Add this prefix to `matrix`.

        >>> from normalforms.firstorder import Predicate
        >>> x, y = Variable('x'), Variable('y')
        >>> Prefix((All, x), (Ex, y)).quantify(Predicate('P', [x, y]))
        All(x, Ex(y, P(x, y)))
        """
        f = matrix
        for q, v in reversed(self):
            f = q(v, f)
        return f
