from __future__ import annotations

from abc import abstractmethod
from typing import Any, Final, Iterator, Optional, Self

from IPython.lib import pretty
from sympy.logic import boolalg


class ContractError(AssertionError):
    """Raised when a transformation receives a formula that its precondition
    excludes, e.g., an :class:`.Implies` reaching :func:`.to_nnf`. This
    always indicates a defect in an earlier transformation and never a
    problem with user input.
    """
    pass


class Formula:
    r"""This abstract base class implements representations of and methods on
    first-order formulas recursively built using first-order operators:

    1. Boolean operators:

       a. Negation :math:`\lnot`

       b. Conjunction :math:`\land` and disjunction :math:`\lor`

       c. Implication :math:`\longrightarrow`

       d. Bi-implication (syntactic equivalence) :math:`\longleftrightarrow`

    2. Quantifiers :math:`\exists x` and :math:`\forall x`, where :math:`x` is
       a variable.

    The leaves of the expression tree are instances of :class:`Predicate
    <.atomic.Predicate>`. Formulas are immutable. All transformations in
    :mod:`normalforms.firstorder` return new formulas and leave their input
    untouched.
    """

    _args: tuple[Any, ...]
    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property can be used with instances of subclasses of
        :class:`Formula`. It yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of a formula as a tuple.

        .. seealso::
            * :attr:`Implies.lhs <.boolean.Implies.lhs>` \
                -- left hand side of a logical :math:`\\longrightarrow`
            * :attr:`Not.arg <.boolean.Not.arg>` \
                -- argument formula of a logical :math:`\\neg`
            * :attr:`QuantifiedFormula.var <.quantified.QuantifiedFormula.var>` \
                -- variable of a quantifier :math:`\\exists` or :math:`\\forall`
        """
        return self._args

    def __and__(self, other: Formula) -> Formula:
        """Override the :obj:`& <object.__and__>` operator to apply
        :class:`.boolean.And`.

        >>> from normalforms.firstorder import Predicate
        >>> Predicate('P') & Predicate('Q')
        And(P, Q)
        """
        return And(self, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for structural equality of `self` and `other`.

        >>> from normalforms.firstorder import Predicate, Variable
        >>> x = Variable('x')
        >>> f1 = Ex(x, Predicate('P', [x]))
        >>> f2 = Ex(x, Predicate('P', [x]))
        >>> f1 == f2
        True
        >>> f1 is f2
        False
        """
        if self is other:
            return True
        if not isinstance(other, Formula):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        return self.args == other.args

    def __getnewargs__(self) -> tuple[Any, ...]:
        return self.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.op.__name__, self.args))
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        self._hash = None

    def __invert__(self) -> Formula:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :class:`.boolean.Not`.

        >>> from normalforms.firstorder import Predicate
        >>> ~ Predicate('P')
        Not(P)
        """
        return Not(self)

    def __lshift__(self, other: Formula) -> Formula:
        r"""Override the :obj:`\<\< <object.__lshift__>` operator to apply
        :class:`.boolean.Implies` with reversed sides.
        """
        return Implies(other, self)

    def __or__(self, other: Formula) -> Formula:
        """Override the :obj:`| <object.__or__>` operator to apply
        :class:`.boolean.Or`.
        """
        return Or(self, other)

    def __repr__(self) -> str:
        """A representation of the :class:`Formula` `self` that resembles the
        constructor calls building it.
        """
        r = self.op.__name__
        r += '('
        if self.args:
            r += self.args[0].__repr__()
            for a in self.args[1:]:
                r += ', ' + a.__repr__()
        r += ')'
        return r

    def __rshift__(self, other: Formula) -> Formula:
        """Override the :obj:`>> <object.__rshift__>` operator to apply
        :class:`.boolean.Implies`.

        >>> from normalforms.firstorder import Predicate
        >>> Predicate('P') >> Predicate('Q')
        Implies(P, Q)
        """
        return Implies(self, other)

    def __str__(self) -> str:
        """Symbolic representation of the formula used in printing. The output
        can be read back by :func:`normalforms.parse`.

        >>> from normalforms import parse
        >>> print(parse('∀x (P(x) -> ∃y ~Q(x, y)) & R'))
        ∀x (P(x) → ∃y ¬Q(x, y)) ∧ R
        """
        SYMBOL: Final = {
            All: '∀', Ex: '∃', And: '∧', Or: '∨', Implies: '→',
            Equivalent: '↔', Not: '¬'}
        PRECEDENCE: Final = {
            All: 99, Ex: 99, And: 50, Or: 50, Implies: 10, Equivalent: 10,
            Not: 99, Predicate: 100}
        SPACING: Final = ' '
        match self:
            case All() | Ex():
                arg_as_str = str(self.arg)
                if self.arg.op not in (Ex, All, Not, Predicate):
                    arg_as_str = f'({arg_as_str})'
                return f'{SYMBOL[self.op]}{self.var}{SPACING}{arg_as_str}'
            case And() | Or() | Equivalent() | Implies():
                L = []
                for arg in self.args:
                    arg_as_str = str(arg)
                    if PRECEDENCE[self.op] >= PRECEDENCE[arg.op]:
                        arg_as_str = f'({arg_as_str})'
                    L.append(arg_as_str)
                return f'{SPACING}{SYMBOL[self.op]}{SPACING}'.join(L)
            case Not():
                arg_as_str = str(self.arg)
                if self.arg.op not in (Ex, All, Not, Predicate):
                    arg_as_str = f'({arg_as_str})'
                return f'{SYMBOL[Not]}{arg_as_str}'
            case _:
                # Atomic formulas are caught by the implementation of
                # Predicate.__str__.
                assert False, repr(self)

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        op = self.__class__.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            for idx, arg in enumerate(self.args):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(arg)

    def atoms(self) -> Iterator[Predicate]:
        """An iterator over all instances of :class:`Predicate
        <.atomic.Predicate>` occurring in `self`, from left to right.

        >>> from normalforms import parse
        >>> list(parse('P(x) & (Q | ~P(x))').atoms())
        [P(x), Q, P(x)]
        """
        match self:
            case All() | Ex():
                yield from self.arg.atoms()
            case And() | Or() | Not() | Implies() | Equivalent():
                for arg in self.args:
                    yield from arg.atoms()
            case _:
                # Atomic formulas are caught by Predicate.atoms.
                assert False, type(self)

    def bvars(self, quantified: frozenset[Variable] = frozenset()) -> Iterator[Variable]:
        """An iterator over all bound occurrences of variables in `self`. Each
        variable is reported once for each term that it occurs in.

        >>> from normalforms import parse
        >>> list(parse('∀y (∃x P(a, x, y) & ∃z Q(x, y))').bvars())
        [x, y, y]

        .. seealso::
            * :meth:`fvars` -- all occurring free variables
            * :meth:`qvars` -- all quantified variables
        """
        match self:
            case All() | Ex():
                yield from self.arg.bvars(quantified.union({self.var}))
            case And() | Or() | Not() | Implies() | Equivalent():
                for arg in self.args:
                    yield from arg.bvars(quantified)
            case _:
                assert False, type(self)

    def depth(self) -> int:
        """The maximal length of a path from the root to a :class:`Predicate
        <.atomic.Predicate>` in the expression tree.

        >>> from normalforms import parse
        >>> parse('∃x (P(x) & ∀y ~Q(y))').depth()
        4
        """
        match self:
            case All() | Ex():
                return self.arg.depth() + 1
            case And() | Or() | Not() | Implies() | Equivalent():
                return max(arg.depth() for arg in self.args) + 1
            case _:
                assert False, type(self)

    def fvars(self, quantified: frozenset[Variable] = frozenset()) -> Iterator[Variable]:
        """An iterator over all free occurrences of variables in `self`. Each
        variable is reported once for each term that it occurs in.

        >>> from normalforms import parse
        >>> list(parse('∀y (∃x P(a, x, y) & ∃z Q(x, y))').fvars())
        [a, x]

        .. seealso::
            * :meth:`bvars` -- all occurring bound variables
            * :meth:`qvars` -- all quantified variables
        """
        match self:
            case All() | Ex():
                yield from self.arg.fvars(quantified.union({self.var}))
            case And() | Or() | Not() | Implies() | Equivalent():
                for arg in self.args:
                    yield from arg.fvars(quantified)
            case _:
                assert False, type(self)

    def qvars(self) -> Iterator[Variable]:
        """An iterator over all quantified variables in `self`, in the
        left-to-right order of their quantifiers.

        In the following example, ``z`` is a quantified variable but not a
        bound variable:

        >>> from normalforms import parse
        >>> list(parse('∀y (∃x P(a, y) & ∃z Q(a, y))').qvars())
        [y, x, z]
        """
        match self:
            case All() | Ex():
                yield self.var
                yield from self.arg.qvars()
            case And() | Or() | Not() | Implies() | Equivalent():
                for arg in self.args:
                    yield from arg.qvars()
            case _:
                assert False, type(self)

    def subs(self, substitution: dict[Variable, Term]) -> Self:
        """Simultaneous substitution of terms for variables.

        The substitution respects shadowing: it does not descend past a
        quantifier for a variable bound by that quantifier. Quantified
        variables themselves are never renamed, and there is no renaming to
        avoid capture. Callers are responsible for the freshness of the
        substituted terms.

        >>> from normalforms import parse
        >>> from normalforms.firstorder import FunctionApplication, Variable
        >>> x, y = Variable('x'), Variable('y')
        >>> f = parse('P(x) & ∀x Q(x, y)')
        >>> f.subs({x: FunctionApplication('c', [])})
        And(P(c), All(x, Q(x, y)))
        >>> f.subs({x: y, y: x})
        And(P(y), All(x, Q(x, x)))
        """
        match self:
            case All() | Ex():
                if self.var in substitution:
                    substitution = {v: t for v, t in substitution.items() if v != self.var}
                return self.op(self.var, self.arg.subs(substitution))
            case And() | Or() | Not() | Implies() | Equivalent():
                return self.op(*(arg.subs(substitution) for arg in self.args))
            case _:
                # Atomic formulas are caught by Predicate.subs.
                assert False, type(self)

    def to_nnf(self) -> Formula:
        """Convert to Negation Normal Form.

        .. seealso:: :func:`.nnf.to_nnf`
        """
        from .nnf import to_nnf
        return to_nnf(self)

    def to_sympy(self) -> boolalg.Boolean:
        """Boolean abstraction as a :mod:`sympy.logic` expression. Each atomic
        formula becomes a :class:`sympy.Symbol` named by its string
        representation. This is defined for quantifier-free formulas only.

        >>> from normalforms import parse
        >>> parse('P(x) -> Q').to_sympy()
        Implies(P(x), Q)
        >>> parse('∀x P(x)').to_sympy()
        Traceback (most recent call last):
        ...
        NotImplementedError: sympy does not know All
        """
        match self:
            case Not():
                return boolalg.Not(self.arg.to_sympy())
            case And():
                return boolalg.And(*(arg.to_sympy() for arg in self.args))
            case Or():
                return boolalg.Or(*(arg.to_sympy() for arg in self.args))
            case Implies():
                return boolalg.Implies(self.lhs.to_sympy(), self.rhs.to_sympy())
            case Equivalent():
                return boolalg.Equivalent(self.lhs.to_sympy(), self.rhs.to_sympy())
            case All() | Ex():
                raise NotImplementedError(f'sympy does not know {self.op.__name__}')
            case _:
                assert False, type(self)

    def vars(self) -> Iterator[Variable]:
        """An iterator over all variables in `self`, including quantified
        variables and free variables, with repetitions.

        >>> from normalforms import parse
        >>> sorted(set(v.name for v in parse('∀y (∃x P(a, y) & Q(f(b)))').vars()))
        ['a', 'b', 'x', 'y']
        """
        match self:
            case All() | Ex():
                yield self.var
                yield from self.arg.vars()
            case And() | Or() | Not() | Implies() | Equivalent():
                for arg in self.args:
                    yield from arg.vars()
            case _:
                assert False, type(self)


# The following imports are intentionally late to avoid circularity.
from .atomic import Predicate, Term, Variable
from .boolean import And, Equivalent, Implies, Not, Or
from .quantified import All, Ex
