"""A recursive-descent parser for first-order formulas.

The grammar, from lowest to highest precedence::

    iff      ::= implies ('↔' implies)*
    implies  ::= or ('→' or)*
    or       ::= and ('∨' and)*
    and      ::= unary ('∧' unary)*
    unary    ::= '¬' unary
               | ('∀' | '∃') name (',' name)* ['.' | ':'] unary
               | atomic
    atomic   ::= '(' iff ')' | name '(' term (',' term)* ')' | name
    term     ::= name '(' term (',' term)* ')' | name

All binary operators associate to the left. The scope of a quantifier is a
single unary formula, so that ``∀x P(x) ∧ Q(x)`` means ``(∀x P(x)) ∧ Q(x)``.
A bare name used as an atomic formula must start with an uppercase letter.
"""

from __future__ import annotations

from typing import Optional

from ..firstorder import (All, And, Equivalent, Ex, Formula, FunctionApplication,
                          Implies, Not, Or, Predicate, Term, Variable)
from ..support.excepthook import NoTraceException
from .lexer import Token, tokenize
from .normalizer import normalize


class ParseError(NoTraceException):
    pass


class Parser:
    """Parse a list of tokens as obtained from :func:`.tokenize`.

    >>> from normalforms.parser import tokenize
    >>> Parser(tokenize('∀x, y: (P(x) → Q(f(x, y)))')).parse()
    All(x, All(y, Implies(P(x), Q(f(x, y)))))
    """

    BINARY = (('iff', Equivalent), ('implies', Implies), ('or', Or), ('and', And))

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.i = 0

    def consume(self, kind: str) -> Token:
        t = self.peek()
        if t is None or t.kind != kind:
            raise ParseError(f'expected {kind}, got {"EOF" if t is None else t.kind}')
        self.i += 1
        return t

    def match(self, kind: str) -> bool:
        t = self.peek()
        if t is not None and t.kind == kind:
            self.i += 1
            return True
        return False

    def parse(self) -> Formula:
        f = self.parse_binary(0)
        t = self.peek()
        if t is not None:
            raise ParseError(f'leftover tokens after formula, starting with {t} '
                             f'at position {t.position}')
        return f

    def parse_atomic(self) -> Formula:
        if self.match('('):
            f = self.parse_binary(0)
            self.consume(')')
            return f
        name = self.consume('name').value
        if self.match('('):
            terms = self.parse_terms()
            self.consume(')')
            return Predicate(name, terms)
        if 'A' <= name[0] <= 'Z':
            return Predicate(name)
        raise ParseError(f'invalid atomic use of identifier {name}; use predicates '
                         f'like P(x) or a name starting with an uppercase letter')

    def parse_binary(self, level: int) -> Formula:
        if level == len(self.BINARY):
            return self.parse_unary()
        kind, op = self.BINARY[level]
        f = self.parse_binary(level + 1)
        while self.match(kind):
            f = op(f, self.parse_binary(level + 1))
        return f

    def parse_term(self) -> Term:
        name = self.consume('name').value
        if self.match('('):
            args = self.parse_terms()
            self.consume(')')
            return FunctionApplication(name, args)
        return Variable(name)

    def parse_terms(self) -> list[Term]:
        terms = [self.parse_term()]
        while self.match(','):
            terms.append(self.parse_term())
        return terms

    def parse_unary(self) -> Formula:
        t = self.peek()
        if t is None:
            raise ParseError('incomplete formula')
        if self.match('not'):
            return Not(self.parse_unary())
        if t.kind in ('forall', 'exists'):
            self.i += 1
            vars_ = [Variable(self.consume('name').value)]
            while self.match(','):
                vars_.append(Variable(self.consume('name').value))
            if not self.match('.'):
                self.match(':')
            arg = self.parse_unary()
            return (All if t.kind == 'forall' else Ex)(vars_, arg)
        return self.parse_atomic()

    def peek(self) -> Optional[Token]:
        if self.i < len(self.tokens):
            return self.tokens[self.i]
        return None


def parse(text: str) -> Formula:
    """Parse `text` as a first-order formula. Operators can be written in
    any of the spellings accepted by :func:`.normalize`.

    >>> parse(r'\\forall x (P(x) -> \\exists y Q(x, y))')
    All(x, Implies(P(x), Ex(y, Q(x, y))))
    >>> parse('∀x P(x) ∧ Q(x)')
    And(All(x, P(x)), Q(x))
    >>> parse('A ∧ B ∧ C → D → E')
    Implies(Implies(And(And(A, B), C), D), E)
    >>> parse('p')
    Traceback (most recent call last):
    ...
    normalforms.parser.parser.ParseError: invalid atomic use of identifier p; use
    predicates like P(x) or a name starting with an uppercase letter
    """
    return Parser(tokenize(normalize(text))).parse()
