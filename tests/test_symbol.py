"""
This module contains unit tests for classes and functions in gramma.cfg.symbol
"""

import copy
import pickle
import unittest

from gramma.cfg.symbol import Terminal, Nonterminal, is_terminal, is_nonterminal, literal_escaped, quote_literal


class TerminalTestCase(unittest.TestCase):

    def setUp(self):
        self.a = Terminal('a')
        self.a2 = Terminal('a')

    def test_surface(self):
        self.assertEqual(self.a.surface, 'a')
        self.assertEqual(self.a.underlying, self.a.surface)

    def test_equality(self):
        self.assertEqual(self.a, self.a2)
        self.assertEqual(hash(self.a), hash(self.a2))
        self.assertNotEqual(self.a, Terminal('b'))

    def test_str(self):
        self.assertEqual(str(self.a), '"a"')

    def test_repr(self):
        self.assertEqual(repr(self.a), "Terminal('a')")

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            self.a._surface = 'b'

    def test_construct(self):
        with self.assertRaises(TypeError):
            Terminal(1)

    def test_copy(self):
        self.assertEqual(copy.deepcopy(self.a), self.a)
        self.assertEqual(copy.copy(self.a), self.a)
        self.assertEqual(pickle.loads(pickle.dumps(self.a)), self.a)


class NonterminalTestCase(unittest.TestCase):

    def setUp(self):
        self.X = Nonterminal('X')
        self.X2 = Nonterminal('X')

    def test_label(self):
        self.assertEqual(self.X.label, 'X')
        self.assertEqual(self.X.underlying, self.X.label)

    def test_equality(self):
        self.assertEqual(self.X, self.X2)
        self.assertEqual(hash(self.X), hash(self.X2))

    def test_ordering(self):
        self.assertLess(Nonterminal('A'), Nonterminal('B'))
        self.assertEqual(sorted([Nonterminal('b'), Nonterminal('B'), Nonterminal('a')]),
                         [Nonterminal('B'), Nonterminal('a'), Nonterminal('b')])

    def test_str(self):
        self.assertEqual(str(self.X), '<X>')

    def test_repr(self):
        self.assertEqual(repr(self.X), "Nonterminal('X')")

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            self.X.foo = 1

    def test_copy(self):
        self.assertEqual(copy.deepcopy(self.X), self.X)
        Y = pickle.loads(pickle.dumps(self.X))
        self.assertEqual(Y, self.X)
        self.assertEqual(Y.label, 'X')


class ComparisonTestCase(unittest.TestCase):

    def test_type_matters(self):
        self.assertNotEqual(Terminal('X'), Nonterminal('X'), msg='The specific type of the symbol matters to decide for equality.')
        self.assertEqual(len({Terminal('X'), Nonterminal('X')}), 2)

    def test_predicates(self):
        self.assertTrue(is_terminal(Terminal('x')))
        self.assertFalse(is_terminal(Nonterminal('x')))
        self.assertTrue(is_nonterminal(Nonterminal('x')))
        self.assertFalse(is_nonterminal('x'))


class LiteralTestCase(unittest.TestCase):

    def test_plain(self):
        self.assertEqual(quote_literal('abc'), '"abc"')

    def test_double_quote_switches_delimiter(self):
        self.assertEqual(quote_literal('a"b'), '\'a"b\'')

    def test_escape_delimiter(self):
        self.assertEqual(literal_escaped('a"b'), 'a\\"b')
        self.assertEqual(literal_escaped("a'b", "'"), "a\\'b")
        self.assertEqual(literal_escaped("a'b"), "a'b")

    def test_escape_backslash(self):
        self.assertEqual(literal_escaped('\\'), '\\\\')

    def test_escape_control(self):
        self.assertEqual(literal_escaped('\t\r\n'), '\\t\\r\\n')


if __name__ == '__main__':
    unittest.main()
