"""Convert to Negation Normal Form.

A Negation Normal Form (NNF) is an equivalent formula within which the
application of :class:`.Not` is restricted to atomic formulas. The only other
operators admitted are :class:`.And`, :class:`.Or`, :class:`.Ex`, and
:class:`.All`. The input must not contain :class:`.Implies` or
:class:`.Equivalent`; use :mod:`.elimination` first.
"""

from .atomic import Predicate
from .boolean import And, Equivalent, Implies, Not, Or
from .formula import ContractError, Formula
from .quantified import All, Ex


def to_nnf(f: Formula) -> Formula:
    """Push negations inward using double negation, De Morgan's laws, and
    the duality of quantifiers.

    >>> from normalforms import parse
    >>> to_nnf(parse('~(∀x P(x) | ~∃y ~Q(y))'))
    And(Ex(x, Not(P(x))), Ex(y, Not(Q(y))))
    >>> to_nnf(parse('~(P -> Q)'))
    Traceback (most recent call last):
    ...
    normalforms.firstorder.formula.ContractError: unexpected Implies in NNF conversion
    """
    match f:
        case Not(arg=arg):
            match arg:
                case Not():
                    return to_nnf(arg.arg)
                case And() | Or():
                    return arg.dual()(*(to_nnf(Not(a)) for a in arg.args))
                case All() | Ex():
                    return arg.dual()(arg.var, to_nnf(Not(arg.arg)))
                case Predicate():
                    return Not(arg.subs({}))
                case _:
                    raise ContractError(f'unexpected {type(arg).__name__} in NNF conversion')
        case And() | Or():
            return f.op(*(to_nnf(arg) for arg in f.args))
        case All() | Ex():
            return f.op(f.var, to_nnf(f.arg))
        case Predicate():
            return f.subs({})
        case Implies() | Equivalent():
            raise ContractError(f'unexpected {type(f).__name__} in NNF conversion')
        case _:
            assert False, type(f)
