"""
This module contains class definitions for rules, such as a context-free production.
"""

from .symbol import Terminal, Nonterminal, is_symbol


class CFGProduction(object):
    """
    Implements a context-free production, that is, a nonterminal (lhs) rewriting into a sequence of symbols (rhs).

    Productions are immutable and compared by value.

    >>> r = CFGProduction(Nonterminal('S'), [Terminal('<s>'), Nonterminal('X'), Terminal('</s>')])
    >>> r
    CFGProduction(Nonterminal('S'), (Terminal('<s>'), Nonterminal('X'), Terminal('</s>')))
    >>> print(r)
    <S> ::= "<s>" <X> "</s>"
    >>> r.n_terminals(), r.n_nonterminals()
    (2, 1)
    >>> r.is_final()
    False
    >>> CFGProduction(Nonterminal('X'), [Terminal('a')]).is_final()
    True
    >>> print(CFGProduction(Nonterminal('S'), []))
    <S> ::= ""
    """

    __slots__ = ('_lhs', '_rhs')

    def __init__(self, lhs, rhs):
        if not isinstance(lhs, Nonterminal):
            raise TypeError('The left-hand side of a production must be a Nonterminal, got %r' % (lhs,))
        rhs = tuple(rhs)
        for sym in rhs:
            if not is_symbol(sym):
                raise TypeError('The right-hand side of a production must contain symbols, got %r' % (sym,))
        object.__setattr__(self, '_lhs', lhs)
        object.__setattr__(self, '_rhs', rhs)

    def __setattr__(self, key, value):
        raise AttributeError('Productions are immutable')

    def __reduce__(self):
        return CFGProduction, (self._lhs, self._rhs)

    @property
    def lhs(self):
        """Return the LHS symbol (a Nonterminal) aka the pattern."""
        return self._lhs

    @property
    def rhs(self):
        """A tuple of symbols (terminals and nonterminals) representing the RHS aka the body."""
        return self._rhs

    def is_final(self):
        """Whether the production generates exactly one terminal and nothing else."""
        return len(self._rhs) == 1 and isinstance(self._rhs[0], Terminal)

    def is_empty(self):
        return not self._rhs

    def iterterminals(self):
        return filter(lambda s: isinstance(s, Terminal), self._rhs)

    def iternonterminals(self):
        return filter(lambda s: isinstance(s, Nonterminal), self._rhs)

    def n_terminals(self):
        return sum(1 for _ in self.iterterminals())

    def n_nonterminals(self):
        return sum(1 for _ in self.iternonterminals())

    def __eq__(self, other):
        return isinstance(other, CFGProduction) and self._lhs == other._lhs and self._rhs == other._rhs

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self._lhs, self._rhs))

    def __repr__(self):
        return '%s(%s, %s)' % (CFGProduction.__name__, repr(self._lhs), repr(self._rhs))

    def rhs_str(self):
        """Render the RHS in grammar notation, an empty RHS is rendered as an empty literal."""
        if not self._rhs:
            return '""'
        return ' '.join(str(s) for s in self._rhs)

    def __str__(self):
        return '%s ::= %s' % (self._lhs, self.rhs_str())
