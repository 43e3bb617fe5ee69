"""
Errors reported by parsers and tokenizers built on top of a Grammar.

An InputSyntaxError pinpoints the offending part of the input (a half-open range),
categorises the failure (a Reason) and lists the nonterminals that were expected there.
"""

from collections import namedtuple
from enum import Enum
from .symbol import Nonterminal


class Reason(Enum):
    """Why an input was rejected."""

    EMPTY_NOT_ALLOWED = 'Empty string not accepted'
    UNKNOWN_TOKEN = 'Unknown token'
    UNMATCHED_PATTERN = 'Unmatched pattern'
    UNEXPECTED_TOKEN = 'Unexpected token'

    def __str__(self):
        return self.value


class SourceRange(namedtuple('SourceRange', ['start', 'end'])):
    """
    A half-open span [start, end) over a string, rendered as {start, length}.

    >>> r = SourceRange(2, 5)
    >>> r.length
    3
    >>> print(r)
    {2, 3}
    >>> 'abcdefg'[r.slice()]
    'cde'
    """

    __slots__ = ()

    def __new__(cls, start, end):
        if start < 0 or end < start:
            raise ValueError('Invalid range: [%d, %d)' % (start, end))
        return super(SourceRange, cls).__new__(cls, start, end)

    @property
    def length(self):
        return self.end - self.start

    def slice(self):
        return slice(self.start, self.end)

    def __str__(self):
        return '{%d, %d}' % (self.start, self.length)


class InputSyntaxError(ValueError):
    """
    A syntax error which was generated during parsing or tokenization.

    >>> e = InputSyntaxError(SourceRange(1, 2), 'axb', Reason.UNKNOWN_TOKEN)
    >>> print(e)
    Error: Unknown token at {1, 1}: 'x'
    >>> e = InputSyntaxError((1, 2), 'axb', Reason.UNEXPECTED_TOKEN, [Nonterminal('A'), Nonterminal('B')])
    >>> print(e)
    Error: Unexpected token at {1, 1}: 'x', expected: <A> | <B>
    """

    def __init__(self, range, string, reason, context=()):
        """
        :param range: a SourceRange (or a pair of offsets) in which the syntax error occurred
        :param string: the string which was unsuccessfully parsed
        :param reason: a Reason
        :param context: nonterminals which were expected at the location of the error
        """
        if not isinstance(range, SourceRange):
            range = SourceRange(*range)
        if range.end > len(string):
            raise ValueError('Range %s exceeds the input of length %d' % (range, len(string)))
        if not isinstance(reason, Reason):
            raise TypeError('Expected a Reason, got %r' % (reason,))
        context = tuple(context)
        for sym in context:
            if not isinstance(sym, Nonterminal):
                raise TypeError('The context of a syntax error consists of nonterminals, got %r' % (sym,))
        super(InputSyntaxError, self).__init__(range, string, reason, context)

    @property
    def range(self):
        """Range in which the error occurred."""
        return self.args[0]

    @property
    def string(self):
        """The string for which parsing was unsuccessful."""
        return self.args[1]

    @property
    def reason(self):
        return self.args[2]

    @property
    def context(self):
        """Nonterminals which were expected at the location of the error."""
        return self.args[3]

    @property
    def fragment(self):
        """The offending substring."""
        return self.string[self.range.slice()]

    def __eq__(self, other):
        return isinstance(other, InputSyntaxError) and self.args == other.args

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.args)

    def __str__(self):
        main = "Error: %s at %s: '%s'" % (self.reason, self.range, self.fragment)
        if self.context:
            return '%s, expected: %s' % (main, ' | '.join(str(s) for s in self.context))
        return main
