"""
This module contains the class definition of a context-free grammar and its structural checks.
"""

import logging
from collections import namedtuple, OrderedDict
from enum import Enum
from itertools import chain
from . import analysis
from .symbol import Terminal, Nonterminal
from .rule import CFGProduction


class WarningKind(Enum):
    """Structural problems a grammar may have without being unusable."""

    UNREACHABLE = 'Grammar contains unreachable nonterminals'
    UNTERMINATED = 'Grammar contains nonterminals which can never reach terminals'
    UNDEFINED_START = 'Grammar has no production for its start symbol'
    UNDEFINED = 'Grammar contains nonterminals without productions'
    EXTRANEOUS_NORMALIZATION = 'Grammar lists normalization nonterminals which it does not use'

    def __str__(self):
        return self.value


class GrammarWarning(namedtuple('GrammarWarning', ['kind', 'nonterminals'])):
    """
    A non-fatal diagnostic about the structure of a grammar.

    :param kind: a WarningKind
    :param nonterminals: the offending nonterminals, sorted by label
    """

    __slots__ = ()

    def __str__(self):
        return '%s (%s)' % (self.kind, ', '.join(str(s) for s in self.nonterminals))


class Grammar(object):
    """
    A context-free grammar: an ordered sequence of productions and a start symbol.

    Productions sharing the same LHS are alternatives, thus the grammar may be ambiguous.
    For example, with the grammar below `a+a+a` can be recognised in two different ways.

    >>> E = Nonterminal('E')
    >>> G = Grammar([CFGProduction(E, [E, Terminal('+'), E]), CFGProduction(E, [Terminal('a')])], E)
    >>> print(G)
    <E> ::= <E> "+" <E> | "a"
    >>> len(G)
    2
    >>> G.n_terminals(), G.n_nonterminals()
    (2, 1)
    >>> G.is_in_chomsky_normal_form()
    False
    >>> G.validate()
    []

    A grammar is a value: it cannot be changed after construction,
    transformations return new grammars.

    >>> G.with_start(Nonterminal('X')).start
    Nonterminal('X')
    >>> G.start
    Nonterminal('E')
    """

    __slots__ = ('_productions', '_start', '_normalization', '_cache')

    def __init__(self, productions, start, check=True):
        """
        :param productions: an iterable over CFG productions
        :param start: the root Nonterminal
        :param check: whether to run the structural checks and log their warnings
        """
        self._setup(productions, start, ())
        if check:
            for warning in self.validate():
                logging.warning('%s', warning)

    @classmethod
    def normalized(cls, productions, start, normalization_nonterminals=()):
        """
        Create a grammar on behalf of a normalization pass.

        The nonterminals introduced by the normalization are stored as given and no structural check is run.

        :param productions: an iterable over CFG productions
        :param start: the root Nonterminal
        :param normalization_nonterminals: nonterminals generated during normalization
        """
        grammar = object.__new__(cls)
        grammar._setup(productions, start, normalization_nonterminals)
        return grammar

    def _setup(self, productions, start, normalization_nonterminals):
        if not isinstance(start, Nonterminal):
            raise TypeError('The start symbol must be a Nonterminal, got %r' % (start,))
        productions = tuple(productions)
        for r in productions:
            if not isinstance(r, CFGProduction):
                raise TypeError('Expected a CFGProduction, got %r' % (r,))
        normalization = frozenset(normalization_nonterminals)
        for sym in normalization:
            if not isinstance(sym, Nonterminal):
                raise TypeError('Normalization symbols must be nonterminals, got %r' % (sym,))
        object.__setattr__(self, '_productions', productions)
        object.__setattr__(self, '_start', start)
        object.__setattr__(self, '_normalization', normalization)
        object.__setattr__(self, '_cache', {})

    def __setattr__(self, key, value):
        raise AttributeError('Grammars are immutable, build a new one instead')

    def __reduce__(self):
        return type(self).normalized, (self._productions, self._start, self._normalization)

    def _memo(self, key, compute):
        try:
            return self._cache[key]
        except KeyError:
            value = self._cache[key] = compute()
            return value

    @property
    def productions(self):
        """Productions in the order in which they were given."""
        return self._productions

    @property
    def start(self):
        """Root nonterminal, all derivations start here."""
        return self._start

    @property
    def normalization_nonterminals(self):
        """Nonterminals generated by normalizing the grammar."""
        return self._normalization

    def is_normalization_nonterminal(self, symbol):
        return symbol in self._normalization

    # Transformations

    def with_productions(self, productions):
        """Return a new grammar with the same start symbol and a different set of productions."""
        productions = tuple(productions)
        used = frozenset(chain.from_iterable(chain([r.lhs], r.iternonterminals()) for r in productions))
        return type(self).normalized(productions, self._start, self._normalization & used)

    def with_start(self, start):
        """Return a new grammar with the same productions rewriting from a different start symbol."""
        return type(self).normalized(self._productions, start, self._normalization)

    # Container interface

    def __len__(self):
        """Count the total number of productions (duplicates included)."""
        return len(self._productions)

    def __iter__(self):
        """Iterate through productions in order."""
        return iter(self._productions)

    def _by_lhs(self):
        def group():
            groups = OrderedDict()
            for r in self._productions:
                groups.setdefault(r.lhs, []).append(r)
            return OrderedDict((lhs, tuple(rules)) for lhs, rules in groups.items())
        return self._memo('by_lhs', group)

    def __getitem__(self, lhs):
        """Return the productions (or an empty tuple) rewriting the given LHS symbol."""
        return self._by_lhs().get(lhs, ())

    def can_rewrite(self, lhs):
        """Whether a given nonterminal appears as the LHS of some production."""
        return lhs in self._by_lhs()

    def _terminals(self):
        return self._memo('terminals',
                          lambda: frozenset(chain.from_iterable(r.iterterminals() for r in self._productions)))

    def _nonterminals(self):
        return self._memo('nonterminals',
                          lambda: frozenset(chain.from_iterable(chain([r.lhs], r.iternonterminals())
                                                                for r in self._productions)))

    def is_terminal(self, terminal):
        """Whether or not a symbol is a terminal of the grammar."""
        return terminal in self._terminals()

    def is_nonterminal(self, nonterminal):
        """Whether or not a symbol is a nonterminal of the grammar."""
        return nonterminal in self._nonterminals()

    def iterterminals(self):
        """Iterate through terminal symbols in no particular order."""
        return iter(self._terminals())

    def iternonterminals(self):
        """Iterate through nonterminal symbols in no particular order."""
        return iter(self._nonterminals())

    def n_terminals(self):
        return len(self._terminals())

    def n_nonterminals(self):
        return len(self._nonterminals())

    def patterns(self):
        """The nonterminals that can be rewritten."""
        return frozenset(self._by_lhs().keys())

    def deadends(self):
        """The nonterminals used in some RHS but never rewritten."""
        return self._nonterminals() - self.patterns()

    # Structural checks

    def is_in_chomsky_normal_form(self):
        """
        Returns true, if the grammar is in Chomsky normal form.

        A grammar is in Chomsky normal form if all productions satisfy one of the following conditions:

            - the production generates exactly one terminal symbol
            - the production generates exactly two nonterminal symbols
            - the production generates the empty string and rewrites the start symbol

        Certain parsing algorithms, such as CKY, require the grammar to be in Chomsky normal form.
        """
        for r in self._productions:
            if r.is_final():
                continue
            if len(r.rhs) == 2 and r.n_nonterminals() == 2:
                continue
            if r.is_empty() and r.lhs == self._start:
                continue
            return False
        return True

    def unreachable_nonterminals(self):
        """The LHS symbols that cannot be reached from the start symbol."""
        return self._memo('unreachable',
                          lambda: analysis.unreachable_nonterminals(self._productions, self._start))

    def unterminated_nonterminals(self):
        """The LHS symbols that can never derive a string of terminals."""
        return self._memo('unterminated',
                          lambda: analysis.unterminated_nonterminals(self._productions))

    def validate(self):
        """
        Run the structural checks and return a list of GrammarWarning objects.

        None of these problems make the grammar unusable (symbols may be dormant on purpose),
        it is up to the caller to decide whether they are fatal.
        """
        warnings = []

        def report(kind, symbols):
            if symbols:
                warnings.append(GrammarWarning(kind, tuple(sorted(symbols))))

        if not self.can_rewrite(self._start):
            report(WarningKind.UNDEFINED_START, [self._start])
        report(WarningKind.UNREACHABLE, self.unreachable_nonterminals())
        report(WarningKind.UNTERMINATED, self.unterminated_nonterminals())
        report(WarningKind.UNDEFINED, self.deadends() - {self._start})
        report(WarningKind.EXTRANEOUS_NORMALIZATION, self._normalization - self._nonterminals())
        return warnings

    # Value semantics

    def _key(self):
        return self._memo('key', lambda: (self._start, frozenset(self._productions)))

    def __eq__(self, other):
        """Grammars are equal if they share the start symbol and the set of productions (order and repetitions do not matter)."""
        return isinstance(other, Grammar) and self._key() == other._key()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return '%s(%r, %r)' % (Grammar.__name__, list(self._productions), self._start)

    def __str__(self):
        """
        String representation of the grammar in BNF-like notation.

        Alternatives are grouped by LHS and groups are sorted by label.

        >>> S, A, B = Nonterminal('S'), Nonterminal('A'), Nonterminal('B')
        >>> G = Grammar([CFGProduction(B, [Terminal('y')]), CFGProduction(A, [Terminal('x')]), CFGProduction(A, [])], A, check=False)
        >>> print(G)
        <A> ::= "x" | ""
        <B> ::= "y"
        """
        lines = []
        for lhs, rules in sorted(self._by_lhs().items(), key=lambda pair: pair[0].label):
            lines.append('%s ::= %s' % (lhs, ' | '.join(r.rhs_str() for r in rules)))
        return '\n'.join(lines)
