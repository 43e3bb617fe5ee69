"""
Contains class definitions for symbols (e.g. Terminal and Nonterminal) and other utilitary functions involving them.

A symbol is either a Terminal or a Nonterminal, nothing else.
The two classes share no base class, code tells them apart with isinstance.
"""

from typing import Union


class Terminal(object):
    """
    Implements a terminal symbol, a literal string of the language.

    >>> Terminal('a') == Terminal('a')
    True
    >>> Terminal('a') != Terminal('b')
    True
    >>> hash(Terminal('a')) == hash(Terminal('a'))
    True
    >>> Terminal('a')
    Terminal('a')
    >>> print(Terminal('a'))
    "a"
    >>> print(Terminal('say "hi"'))
    'say "hi"'
    """

    __slots__ = ('_surface',)

    def __init__(self, surface):
        if not isinstance(surface, str):
            raise TypeError('A terminal wraps a string, got %s' % type(surface).__name__)
        object.__setattr__(self, '_surface', surface)

    def __setattr__(self, key, value):
        raise AttributeError('Terminal symbols are immutable')

    def __reduce__(self):
        return Terminal, (self._surface,)

    @property
    def surface(self):
        """The literal value represented by the symbol."""
        return self._surface

    @property
    def underlying(self):
        return self._surface

    def __eq__(self, other):
        return isinstance(other, Terminal) and self._surface == other._surface

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Terminal, self._surface))

    def __repr__(self):
        return '%s(%s)' % (Terminal.__name__, repr(self._surface))

    def __str__(self):
        """Return the literal quoted and escaped as in the grammar notation."""
        return quote_literal(self._surface)


class Nonterminal(object):
    """
    Implements a nonterminal symbol, identified by its label.

    >>> Nonterminal('S') == Nonterminal('S')
    True
    >>> Nonterminal('A') < Nonterminal('B')
    True
    >>> Nonterminal('X') == Terminal('X')
    False
    >>> Nonterminal('S')
    Nonterminal('S')
    >>> print(Nonterminal('S'))
    <S>
    """

    __slots__ = ('_label',)

    def __init__(self, label):
        if not isinstance(label, str):
            raise TypeError('A nonterminal is labelled by a string, got %s' % type(label).__name__)
        object.__setattr__(self, '_label', label)

    def __setattr__(self, key, value):
        raise AttributeError('Nonterminal symbols are immutable')

    def __reduce__(self):
        return Nonterminal, (self._label,)

    @property
    def label(self):
        """The name that uniquely identifies the symbol."""
        return self._label

    @property
    def underlying(self):
        return self._label

    def __eq__(self, other):
        return isinstance(other, Nonterminal) and self._label == other._label

    def __ne__(self, other):
        return not self == other

    def __lt__(self, other):
        if not isinstance(other, Nonterminal):
            return NotImplemented
        return self._label < other._label

    def __le__(self, other):
        if not isinstance(other, Nonterminal):
            return NotImplemented
        return self._label <= other._label

    def __gt__(self, other):
        if not isinstance(other, Nonterminal):
            return NotImplemented
        return self._label > other._label

    def __ge__(self, other):
        if not isinstance(other, Nonterminal):
            return NotImplemented
        return self._label >= other._label

    def __hash__(self):
        return hash((Nonterminal, self._label))

    def __repr__(self):
        return '%s(%s)' % (Nonterminal.__name__, repr(self._label))

    def __str__(self):
        """Return the label wrapped with angle brackets."""
        return '<{0}>'.format(self._label)


Symbol = Union[Terminal, Nonterminal]


def is_terminal(symbol):
    return isinstance(symbol, Terminal)


def is_nonterminal(symbol):
    return isinstance(symbol, Nonterminal)


def is_symbol(symbol):
    return isinstance(symbol, (Terminal, Nonterminal))


_CONTROL_ESCAPES = {'\n': '\\n', '\r': '\\r', '\t': '\\t'}


def literal_escaped(text, delimiter='"'):
    """
    Escape a literal so that it can be wrapped with the given delimiter.

    Backslashes, the delimiter and control characters (newline, carriage return, tab) are escaped.

    >>> print(literal_escaped('a\\\\b'))
    a\\\\b
    >>> print(literal_escaped("it's", "'"))
    it\\'s
    >>> print(literal_escaped('x\\ny'))
    x\\ny
    """
    chars = []
    for ch in text:
        if ch == '\\' or ch == delimiter:
            chars.append('\\' + ch)
        else:
            chars.append(_CONTROL_ESCAPES.get(ch, ch))
    return ''.join(chars)


def quote_literal(text):
    """
    Quote a literal for the grammar notation.

    Double quotes are the default delimiter, literals that contain a double quote are wrapped with single quotes.

    >>> print(quote_literal('a'))
    "a"
    >>> print(quote_literal(''))
    ""
    >>> print(quote_literal('"'))
    '"'
    """
    delimiter = "'" if '"' in text else '"'
    return '{0}{1}{0}'.format(delimiter, literal_escaped(text, delimiter))
