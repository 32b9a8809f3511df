"""Normal forms of first-order formulas: negation normal form, prenex form,
conjunctive and disjunctive normal forms, Skolem normal form, and clausal
form along with a classification of Horn clauses.

>>> s = normal_forms(r'\\forall x (P(x) \\land \\exists y Q(y))')
>>> print(s.prenex)
∀x1 ∃x2 (P(x1) ∧ Q(x2))
>>> print(s.clauses)
[{P(x1)}, {Q(f1(x1))}]
"""

__version__ = '0.1.0'

from . import firstorder

from .firstorder import (Formula, Term, Variable, FunctionApplication,  # noqa
                         Predicate, Equivalent, Implies, And, Or, Not, Ex, All,
                         Prefix, ContractError,
                         eliminate_biconditional, eliminate_implication, to_nnf,
                         standardize_variables, standardize_variables_with_renaming,
                         Standardization, to_prenex, PrenexForm, to_cnf_matrix,
                         to_dnf_matrix, skolemize, skolemize_with_substitution,
                         Skolemization, extract_clauses, is_horn, Literal, Clause,
                         ClauseSet)

from . import parser

from .parser import normalize, tokenize, parse, Parser, Token, LexError, ParseError  # noqa

from .pipeline import NormalForms, normal_forms, Options, Steps  # noqa

__all__ = firstorder.__all__ + parser.__all__ + [
    'NormalForms', 'normal_forms', 'Options', 'Steps'
]
