"""This module :mod:`normalforms.pipeline` composes the parser and the
transformations of :mod:`normalforms.firstorder` into a single callable,
which returns all intermediate results.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
import logging
import time

from .firstorder import (ClauseSet, eliminate_biconditional, eliminate_implication,
                         extract_clauses, Formula, PrenexForm, skolemize_with_substitution,
                         standardize_variables_with_renaming, Term, to_cnf_matrix,
                         to_dnf_matrix, to_nnf, to_prenex, Variable)
from .parser import normalize, Parser, Token, tokenize
from .support.logging import DeltaTimeFormatter, Timer

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    f'%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.addFilter(lambda record: record.msg.strip() != '')
logger.setLevel(logging.WARNING)


@dataclass
class Options:
    """This class holds options that can be provided to
    :meth:`.NormalForms.__call__`.
    """

    log_level: int = logging.WARNING
    """The `log_level` of the logger used by :class:`.NormalForms`.
    """

    variable_base: str = 'x'
    """The base name of standardized variables.
    """

    constant_prefix: str = 'c'
    """The prefix of the names of Skolem constants.
    """

    function_prefix: str = 'f'
    """The prefix of the names of Skolem functions.
    """


@dataclass(frozen=True)
class Steps:
    """All intermediate results of :class:`.NormalForms`, in the order of
    their computation.
    """

    text: str
    """The input text.
    """

    normalized: str
    """The input text with unified operator symbols.
    """

    tokens: tuple[Token, ...]

    formula: Formula
    """The parsed formula.
    """

    without_biconditionals: Formula

    without_implications: Formula

    nnf: Formula
    """The negation normal form.
    """

    standardized: Formula
    """The negation normal form with all quantified variables renamed apart.
    """

    renaming: tuple[tuple[Variable, Variable], ...]
    """The renamings of the standardization, as pairs of an old and a new
    variable.
    """

    prenex: PrenexForm

    cnf_raw: Formula
    """The conjunctive normal form of the prenex matrix, before
    flattening.
    """

    cnf: Formula

    dnf_raw: Formula
    """The disjunctive normal form of the prenex matrix, before
    flattening.
    """

    dnf: Formula

    skolemized: Formula
    """The Skolemized conjunctive normal form of the prenex matrix. All its
    variables are implicitly universally quantified.
    """

    skolem_substitution: tuple[tuple[Variable, Term], ...]

    clauses: ClauseSet

    horn: bool
    """Whether :attr:`clauses` are all Horn clauses.
    """

    def cnf_formula(self) -> Formula:
        """The prenex formula with the conjunctive normal form as matrix.
        """
        return self.prenex.prefix.quantify(self.cnf)

    def dnf_formula(self) -> Formula:
        """The prenex formula with the disjunctive normal form as matrix.
        """
        return self.prenex.prefix.quantify(self.dnf)


class NormalForms:
    """A callable class that computes the sequence of normal forms of a
    formula given as text. The module-level instance :data:`normal_forms`
    is the entry point.
    """

    def __call__(self, text: str, **options) -> Steps:
        """Parse `text` and compute the normal forms of the obtained
        formula.

        :param text:
          The input formula, in any of the spellings accepted by
          :func:`.normalize`.

        :param `**options`:
          Keyword arguments with keywords corresponding to attributes of
          :class:`.Options`.

        :returns:
          All intermediate results.

        >>> s = normal_forms('∀x (P(x) → Q(x))')
        >>> print(s.prenex)
        ∀x1 (¬P(x1) ∨ Q(x1))
        >>> print(s.clauses)
        [{¬P(x1), Q(x1)}]
        >>> s.horn
        True
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        opts = self.create_options(**options)
        save_level = logger.getEffectiveLevel()
        try:
            logger.setLevel(opts.log_level)
            logger.info(f'{opts}')
            steps = self.normal_forms(text, opts)
            logger.info(f'finished after {timer.get():.3f} s')
        finally:
            logger.setLevel(save_level)
        return steps

    def create_options(self, **options) -> Options:
        names = {f.name for f in fields(Options)}
        for key in options:
            if key not in names:
                raise ValueError(f'unknown option {key!r}')
        return Options(**options)

    def normal_forms(self, text: str, options: Options) -> Steps:
        logger.info(f'{self.normal_forms.__qualname__}: parsing')
        normalized = normalize(text)
        tokens = tuple(tokenize(normalized))
        formula = Parser(list(tokens)).parse()
        logger.info(f'{self.normal_forms.__qualname__}: eliminating ↔ and →')
        without_biconditionals = eliminate_biconditional(formula)
        without_implications = eliminate_implication(without_biconditionals)
        logger.info(f'{self.normal_forms.__qualname__}: NNF')
        nnf = to_nnf(without_implications)
        logger.info(f'{self.normal_forms.__qualname__}: standardizing variables')
        standardization = standardize_variables_with_renaming(
            nnf, base=options.variable_base)
        logger.info(f'{self.normal_forms.__qualname__}: prenex form')
        prenex = to_prenex(standardization.formula)
        logger.info(f'{self.normal_forms.__qualname__}: CNF and DNF')
        cnf_raw = to_cnf_matrix(prenex.matrix, flatten=False)
        dnf_raw = to_dnf_matrix(prenex.matrix, flatten=False)
        cnf = to_cnf_matrix(prenex.matrix)
        dnf = to_dnf_matrix(prenex.matrix)
        logger.info(f'{self.normal_forms.__qualname__}: Skolemization')
        skolemization = skolemize_with_substitution(
            prenex.prefix, cnf, constant_prefix=options.constant_prefix,
            function_prefix=options.function_prefix)
        logger.info(f'{self.normal_forms.__qualname__}: clauses')
        clauses = extract_clauses(skolemization.matrix)
        horn = clauses.is_horn()
        logger.info(f'{self.normal_forms.__qualname__}: '
                    f'{len(clauses)} clauses, {horn=}')
        return Steps(
            text=text,
            normalized=normalized,
            tokens=tokens,
            formula=formula,
            without_biconditionals=without_biconditionals,
            without_implications=without_implications,
            nnf=nnf,
            standardized=standardization.formula,
            renaming=standardization.renaming,
            prenex=prenex,
            cnf_raw=cnf_raw,
            cnf=cnf,
            dnf_raw=dnf_raw,
            dnf=dnf,
            skolemized=skolemization.matrix,
            skolem_substitution=skolemization.substitution,
            clauses=clauses,
            horn=horn)


normal_forms = NormalForms()
