"""We introduce formulas with Boolean toplevel operators as subclasses of
:class:`.Formula`.
"""
from __future__ import annotations

from typing import final

from .formula import Formula


def _check_formulas(*args: object) -> None:
    for arg in args:
        if not isinstance(arg, Formula):
            raise ValueError(f'{arg!r} is not a Formula')


class BooleanFormula(Formula):
    r"""A class whose instances are Boolean formulas in the sense that their
    toplevel operator is one of the Boolean operators :math:`\lnot`,
    :math:`\wedge`, :math:`\vee`, :math:`\longrightarrow`,
    :math:`\longleftrightarrow`.
    """
    pass


@final
class Equivalent(BooleanFormula):
    r"""A class whose instances are equivalences in the sense that their
    toplevel operator represents the Boolean operator
    :math:`\longleftrightarrow`.

    >>> from normalforms.firstorder import Predicate
    >>> Equivalent(Predicate('P'), Predicate('Q'))
    Equivalent(P, Q)
    """

    def __init__(self, lhs: Formula, rhs: Formula) -> None:
        super().__init__()
        _check_formulas(lhs, rhs)
        self._args = (lhs, rhs)

    @property
    def lhs(self) -> Formula:
        """The left-hand side of the equivalence.
        """
        return self.args[0]

    @property
    def rhs(self) -> Formula:
        """The right-hand side of the equivalence.
        """
        return self.args[1]


@final
class Implies(BooleanFormula):
    r"""A class whose instances are implications in the sense that their
    toplevel operator represents the Boolean operator :math:`\longrightarrow`.

    .. seealso::
        * :meth:`>>, __rshift__() <.formula.Formula.__rshift__>` -- \
            infix notation of :class:`Implies`
        * :meth:`\<\<, __lshift__() <.formula.Formula.__lshift__>` -- \
            infix notation of converse :class:`Implies`
    """

    def __init__(self, lhs: Formula, rhs: Formula) -> None:
        super().__init__()
        _check_formulas(lhs, rhs)
        self._args = (lhs, rhs)

    @property
    def lhs(self) -> Formula:
        """The left-hand side of the implication.
        """
        return self.args[0]

    @property
    def rhs(self) -> Formula:
        """The right-hand side of the implication.
        """
        return self.args[1]


class AndOr(BooleanFormula):
    """Common base class of :class:`And` and :class:`Or`. Instances have at
    least two arguments. Nested operators are *not* flattened on
    construction, so that ``And(And(a, b), c)`` and ``And(a, b, c)`` are
    different formulas.

    .. seealso::
        * :func:`flatten` -- flatten nested operators explicitly
    """

    def __init__(self, *args: Formula) -> None:
        super().__init__()
        if len(args) < 2:
            raise ValueError(f'{self.op.__name__} expects at least two arguments; '
                             f'got {len(args)}')
        _check_formulas(*args)
        self._args = tuple(args)

    @property
    def lhs(self) -> Formula:
        """The first argument.
        """
        return self.args[0]

    @property
    def rhs(self) -> Formula:
        """The last argument. For binary operators this is the right-hand
        side.
        """
        return self.args[-1]


@final
class And(AndOr):
    r"""A class whose instances are conjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\wedge`.

    >>> from normalforms.firstorder import Predicate
    >>> P, Q, R = Predicate('P'), Predicate('Q'), Predicate('R')
    >>> And(P, Q, R)
    And(P, Q, R)
    >>> And(P)
    Traceback (most recent call last):
    ...
    ValueError: And expects at least two arguments; got 1

    .. seealso::
        * :meth:`&, __and__() <.formula.Formula.__and__>` -- \
            infix notation of :class:`And`
    """

    @classmethod
    def dual(cls) -> type[Or]:
        r"""A class method yielding the class :class:`Or`, which implements
        the dual operator :math:`\vee` of :math:`\wedge`.
        """
        return Or


@final
class Or(AndOr):
    r"""A class whose instances are disjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\vee`.

    >>> from normalforms.firstorder import Predicate
    >>> Or(Predicate('P'), Predicate('Q'))
    Or(P, Q)

    .. seealso::
        * :meth:`|, __or__() <.formula.Formula.__or__>` -- \
            infix notation of :class:`Or`
    """

    @classmethod
    def dual(cls) -> type[And]:
        r"""A class method yielding the class :class:`And`, which implements
        the dual operator :math:`\wedge` of :math:`\vee`.
        """
        return And


@final
class Not(BooleanFormula):
    r"""A class whose instances are negated formulas in the sense that their
    toplevel operator is the Boolean operator :math:`\neg`.

    >>> from normalforms.firstorder import Predicate
    >>> Not(Predicate('P'))
    Not(P)

    .. seealso::
        * :meth:`~, __invert__() <.formula.Formula.__invert__>` -- \
            short notation of :class:`Not`
    """

    def __init__(self, arg: Formula) -> None:
        super().__init__()
        _check_formulas(arg)
        self._args = (arg, )

    @property
    def arg(self) -> Formula:
        """The one argument of the negation.
        """
        return self.args[0]


def connect(op: type[AndOr], args: list[Formula]) -> Formula:
    """Apply `op` to `args`. A single argument is returned as is.

    >>> from normalforms.firstorder import Predicate
    >>> connect(Or, [Predicate('P')])
    P
    >>> connect(Or, [Predicate('P'), Predicate('Q')])
    Or(P, Q)
    """
    if len(args) == 1:
        return args[0]
    return op(*args)


def flatten(f: Formula) -> Formula:
    """Flatten nested occurrences of :class:`And` within :class:`And`, and of
    :class:`Or` within :class:`Or`, into n-ary operators. The left-to-right
    order of arguments is preserved. Other operators are traversed but not
    changed.

    >>> from normalforms import parse
    >>> flatten(parse('(A & (B & C)) | ((D | E) & F)'))
    Or(And(A, B, C), And(Or(D, E), F))
    """
    match f:
        case And() | Or():
            args: list[Formula] = []
            for arg in f.args:
                flat_arg = flatten(arg)
                if flat_arg.op is f.op:
                    args.extend(flat_arg.args)
                else:
                    args.append(flat_arg)
            return f.op(*args)
        case Not() | Implies() | Equivalent():
            return f.op(*(flatten(arg) for arg in f.args))
        case QuantifiedFormula():
            return f.op(f.var, flatten(f.arg))
        case _:
            return f


from .quantified import QuantifiedFormula  # noqa: E402
