"""Terms and atomic formulas. There is no fixed signature: predicate and
function symbols are identified by their names, and their arities are
whatever argument counts appear at their occurrences. No cross-occurrence
arity checking takes place.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Iterable, Iterator, Self
from typing_extensions import TypeIs

from IPython.lib import pretty
import sympy

from .formula import Formula


class Term:
    """This abstract class specifies the interface of terms required by
    :class:`.Formula`. Terms are immutable and compare structurally.
    """

    _name: str
    _args: tuple[Term, ...]

    @property
    def args(self) -> tuple[Term, ...]:
        """The argument terms. Variables have no arguments.
        """
        return self._args

    @property
    def name(self) -> str:
        """The name of the variable or function symbol.
        """
        return self._name

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Term):
            return False
        return (type(self) is type(other)
                and self.name == other.name and self.args == other.args)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name, self.args))

    def __repr__(self) -> str:
        return str(self)

    @abstractmethod
    def subs(self, substitution: dict[Variable, Term]) -> Term:
        """Simultaneous substitution of terms for variables.
        """
        ...

    @abstractmethod
    def vars(self) -> Iterator[Variable]:
        """An iterator over all occurrences of variables in `self`, from left
        to right.
        """
        ...


class Variable(Term):
    """A variable, uniquely identified by its name.

    >>> x = Variable('x')
    >>> x
    x
    >>> x == Variable('x')
    True
    """

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError(f'{name!r} is not a valid variable name')
        self._name = name
        self._args = ()

    def __str__(self) -> str:
        return self.name

    def subs(self, substitution: dict[Variable, Term]) -> Term:
        return substitution.get(self, self)

    def vars(self) -> Iterator[Variable]:
        yield self


class FunctionApplication(Term):
    """A function symbol applied to a tuple of argument terms. A function
    application without arguments is a constant.

    >>> x = Variable('x')
    >>> FunctionApplication('f', [x, FunctionApplication('c', [])])
    f(x, c)
    >>> FunctionApplication('f', ['x'])
    Traceback (most recent call last):
    ...
    ValueError: arguments must be terms; 'x' is <class 'str'>
    """

    def __init__(self, name: str, args: Iterable[Term] = ()) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError(f'{name!r} is not a valid function name')
        args = tuple(args)
        for arg in args:
            if not isinstance(arg, Term):
                raise ValueError(f'arguments must be terms; {arg!r} is {type(arg)}')
        self._name = name
        self._args = args

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f'{self.name}({", ".join(str(arg) for arg in self.args)})'

    def is_constant(self) -> bool:
        """Whether `self` has no arguments.
        """
        return not self.args

    def subs(self, substitution: dict[Variable, Term]) -> Term:
        return FunctionApplication(self.name, (arg.subs(substitution) for arg in self.args))

    def vars(self) -> Iterator[Variable]:
        for arg in self.args:
            yield from arg.vars()


class Predicate(Formula):
    """An atomic formula: a predicate symbol applied to a tuple of terms.
    Predicates without arguments are propositional atoms.

    >>> x, y = Variable('x'), Variable('y')
    >>> P = Predicate('P', [x, FunctionApplication('f', [y])])
    >>> P
    P(x, f(y))
    >>> P.name, P.terms
    ('P', (x, f(y)))
    >>> Predicate('Q')
    Q
    """

    @property
    def name(self) -> str:
        """The predicate symbol.
        """
        return self._name

    @property
    def terms(self) -> tuple[Term, ...]:
        """The argument terms. This is the same as :attr:`args`.
        """
        return self.args

    def __init__(self, name: str, terms: Iterable[Term] = ()) -> None:
        super().__init__()
        if not isinstance(name, str) or not name:
            raise ValueError(f'{name!r} is not a valid predicate name')
        terms = tuple(terms)
        for term in terms:
            if not isinstance(term, Term):
                raise ValueError(f'arguments must be terms; {term!r} is {type(term)}')
        self._name = name
        self._args = terms

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Predicate):
            return False
        return self.name == other.name and self.args == other.args

    def __getnewargs__(self) -> tuple[Any, ...]:
        return (self.name, self.args)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((Predicate.__name__, self.name, self.args))
        return self._hash

    def __repr__(self) -> str:
        return str(self)

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f'{self.name}({", ".join(str(term) for term in self.args)})'

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        p.text(str(self))

    def atoms(self) -> Iterator[Predicate]:
        yield self

    def bvars(self, quantified: frozenset[Variable] = frozenset()) -> Iterator[Variable]:
        for v in self.vars():
            if v in quantified:
                yield v

    def depth(self) -> int:
        return 0

    def fvars(self, quantified: frozenset[Variable] = frozenset()) -> Iterator[Variable]:
        for v in self.vars():
            if v not in quantified:
                yield v

    def qvars(self) -> Iterator[Variable]:
        yield from ()

    def subs(self, substitution: dict[Variable, Term]) -> Self:
        return self.op(self.name, (term.subs(substitution) for term in self.args))

    def to_sympy(self) -> sympy.Symbol:
        return sympy.Symbol(str(self))

    def vars(self) -> Iterator[Variable]:
        for term in self.args:
            yield from term.vars()


def is_literal(f: Formula) -> TypeIs[Predicate | Not]:
    """Whether `f` is an atomic formula or the negation of an atomic formula.

    >>> from normalforms.firstorder import Not
    >>> is_literal(Not(Predicate('P')))
    True
    >>> is_literal(Not(Not(Predicate('P'))))
    False
    """
    match f:
        case Predicate() | Not(arg=Predicate()):
            return True
        case _:
            return False


from .boolean import Not  # noqa: E402
