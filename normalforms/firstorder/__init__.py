r"""First-order formulas without a fixed signature, and syntactic
transformations of such formulas into normal forms.

An abstract base class :class:`Formula` implements representations of and
methods on first-order formulas recursively built using first-order operators:

1. Boolean operators:

   a. Negation :math:`\lnot`

   b. Conjunction :math:`\land` and disjunction :math:`\lor`

   c. Implication :math:`\longrightarrow`

   d. Bi-implication (syntactic equivalence) :math:`\longleftrightarrow`

2. Quantifiers :math:`\exists x` and :math:`\forall x`, where :math:`x` is a
   variable.

Operators are mapped to classes as follows:

+---------------+---------------+--------------+-------------------------+-----------------------------+-----------------+-----------------+
| :math:`\lnot` | :math:`\land` | :math:`\lor` | :math:`\longrightarrow` | :math:`\longleftrightarrow` | :math:`\exists` | :math:`\forall` |
+---------------+---------------+--------------+-------------------------+-----------------------------+-----------------+-----------------+
| :class:`Not`  | :class:`And`  | :class:`Or`  | :class:`Implies`        | :class:`Equivalent`         | :class:`Ex`     | :class:`All`    |
+---------------+---------------+--------------+-------------------------+-----------------------------+-----------------+-----------------+

Atomic formulas are instances of :class:`Predicate`, whose arguments are
terms built from :class:`Variable` and :class:`FunctionApplication`:

>>> x, y = Variable('x'), Variable('y')
>>> f = All(x, Implies(Predicate('P', [x]), Ex(y, Predicate('Q', [x, y]))))
>>> f
All(x, Implies(P(x), Ex(y, Q(x, y))))
>>> print(f)
∀x (P(x) → ∃y Q(x, y))

The transformations are meant to be applied in the following order, each
step establishing the precondition of the next one:

>>> g = to_nnf(eliminate_implication(eliminate_biconditional(f)))
>>> g
All(x, Or(Not(P(x)), Ex(y, Q(x, y))))
>>> p = to_prenex(standardize_variables(g))
>>> print(p)
∀x1 ∃x2 (¬P(x1) ∨ Q(x1, x2))
>>> m = skolemize(p.prefix, to_cnf_matrix(p.matrix))
>>> print(extract_clauses(m))
[{¬P(x1), Q(x1, f1(x1))}]
"""  # noqa

from .formula import ContractError, Formula  # noqa

from .atomic import FunctionApplication, is_literal, Predicate, Term, Variable  # noqa

from .boolean import (AndOr, BooleanFormula, connect, Equivalent, flatten,  # noqa
                      Implies, And, Or, Not)

from .quantified import QuantifiedFormula, Ex, All, Prefix  # noqa

from .elimination import eliminate_biconditional, eliminate_implication  # noqa

from .nnf import to_nnf  # noqa

from .standardize import (Standardization, standardize_variables,  # noqa
                          standardize_variables_with_renaming)

from .pnf import PrenexForm, to_prenex  # noqa

from .bnf import to_cnf_matrix, to_dnf_matrix  # noqa

from .skolem import Skolemization, skolemize, skolemize_with_substitution  # noqa

from .clauses import Clause, ClauseSet, extract_clauses, is_horn, Literal  # noqa


__all__ = [
    'Formula', 'Predicate', 'Term', 'Variable', 'FunctionApplication',

    'Equivalent', 'Implies', 'And', 'Or', 'Not',

    'Ex', 'All', 'Prefix',

    'ContractError',

    'eliminate_biconditional', 'eliminate_implication', 'to_nnf',
    'standardize_variables', 'standardize_variables_with_renaming',
    'Standardization', 'to_prenex', 'PrenexForm', 'to_cnf_matrix',
    'to_dnf_matrix', 'skolemize', 'skolemize_with_substitution',
    'Skolemization', 'extract_clauses', 'is_horn', 'Literal', 'Clause',
    'ClauseSet'
]
