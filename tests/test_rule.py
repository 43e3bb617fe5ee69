import unittest
import copy
import pickle
from gramma.cfg.symbol import Terminal, Nonterminal
from gramma.cfg.rule import CFGProduction


class CFGProductionTestCase(unittest.TestCase):

    def setUp(self):
        self.S_SX = CFGProduction(Nonterminal('S'), [Nonterminal('S'), Nonterminal('X')])
        self.S_X = CFGProduction(Nonterminal('S'), [Nonterminal('X')])
        self.X_a = CFGProduction(Nonterminal('X'), [Terminal('a')])
        self.S_aXb = CFGProduction(Nonterminal('S'), [Terminal('a'), Nonterminal('X'), Terminal('b')])
        self.S_ = CFGProduction(Nonterminal('S'), [])

    def test_lhs(self):
        self.assertEqual(self.S_SX.lhs, Nonterminal('S'))
        self.assertEqual(self.X_a.lhs, Nonterminal('X'))

    def test_rhs(self):
        self.assertEqual(self.S_SX.rhs, (Nonterminal('S'), Nonterminal('X')))
        self.assertEqual(self.S_X.rhs, (Nonterminal('X'),))
        self.assertEqual(self.X_a.rhs, (Terminal('a'),))
        self.assertEqual(self.S_.rhs, ())

    def test_is_final(self):
        self.assertTrue(self.X_a.is_final())
        self.assertFalse(self.S_X.is_final())
        self.assertFalse(self.S_.is_final())
        self.assertFalse(CFGProduction(Nonterminal('X'), [Terminal('a'), Terminal('a')]).is_final())

    def test_counts(self):
        self.assertEqual((self.S_aXb.n_terminals(), self.S_aXb.n_nonterminals()), (2, 1))
        self.assertEqual((self.S_.n_terminals(), self.S_.n_nonterminals()), (0, 0))
        self.assertEqual(list(self.S_aXb.iterterminals()), [Terminal('a'), Terminal('b')])
        self.assertEqual(list(self.S_aXb.iternonterminals()), [Nonterminal('X')])

    def test_equality(self):
        self.assertEqual(self.S_X, CFGProduction(Nonterminal('S'), (Nonterminal('X'),)))
        self.assertEqual(hash(self.S_X), hash(CFGProduction(Nonterminal('S'), [Nonterminal('X')])))
        self.assertNotEqual(self.S_SX, CFGProduction(Nonterminal('S'), [Nonterminal('X'), Nonterminal('S')]))

    def test_str(self):
        self.assertEqual(str(self.S_aXb), '<S> ::= "a" <X> "b"')
        self.assertEqual(str(self.S_), '<S> ::= ""')

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            self.S_X._lhs = Nonterminal('X')

    def test_copy(self):
        self.assertEqual(copy.deepcopy(self.S_aXb), self.S_aXb)
        r = pickle.loads(pickle.dumps(self.S_aXb))
        self.assertEqual(r, self.S_aXb)
        self.assertEqual(r.rhs, (Terminal('a'), Nonterminal('X'), Terminal('b')))

    def test_construct(self):
        with self.assertRaises(TypeError):
            CFGProduction(Terminal('S'), [])
        with self.assertRaises(TypeError):
            CFGProduction(Nonterminal('S'), ['a'])


if __name__ == '__main__':
    unittest.main()
