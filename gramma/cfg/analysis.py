"""
Fixpoint analyses over the productions of a context-free grammar.

Dependencies between nonterminals are read off the productions:
a production `A -> alpha` makes every nonterminal in `alpha` a successor of `A`.

Both analyses are pure functions over a sequence of productions.
"""

import logging
from collections import defaultdict, deque
from .symbol import Nonterminal


def patterns(productions):
    """Return the set of nonterminals that appear as the LHS of some production."""
    return frozenset(r.lhs for r in productions)


def successors(productions):
    """
    Map each LHS to the set of nonterminals appearing in its productions.

    >>> from gramma.cfg.rule import CFGProduction
    >>> from gramma.cfg.symbol import Terminal
    >>> S, A = Nonterminal('S'), Nonterminal('A')
    >>> succ = successors([CFGProduction(S, [A, Terminal('x')]), CFGProduction(A, [])])
    >>> succ[S] == {A}, succ[A] == set()
    (True, True)
    """
    succ = defaultdict(set)
    for r in productions:
        succ[r.lhs].update(r.iternonterminals())
    return succ


def reachable_nonterminals(productions, start):
    """
    Compute the nonterminals reachable from the start symbol (the start symbol included).

    :param productions: a sequence of CFGProduction objects
    :param start: the start Nonterminal
    :returns: a frozenset of nonterminals

    >>> from gramma.cfg.rule import CFGProduction
    >>> from gramma.cfg.symbol import Terminal
    >>> S, A, B = Nonterminal('S'), Nonterminal('A'), Nonterminal('B')
    >>> rules = [CFGProduction(S, [A]), CFGProduction(B, [Terminal('z')])]
    >>> sorted(reachable_nonterminals(rules, S))
    [Nonterminal('A'), Nonterminal('S')]
    """
    succ = successors(productions)
    reached = {start}
    agenda = deque([start])
    while agenda:
        lhs = agenda.popleft()
        for sym in succ.get(lhs, ()):
            if sym not in reached:
                reached.add(sym)
                agenda.append(sym)
    logging.debug('Reachability: %d nonterminals reachable from %s', len(reached), start)
    return frozenset(reached)


def productive_nonterminals(productions):
    """
    Compute the nonterminals that derive at least one finite string of terminals.

    A production whose RHS nonterminals are all productive makes its LHS productive,
    in particular productions without nonterminals (including empty ones).
    Each production keeps a count of the distinct nonterminals it still waits for,
    a LHS becomes productive when the count of one of its productions drops to zero.

    :param productions: a sequence of CFGProduction objects
    :returns: a frozenset of nonterminals

    >>> from gramma.cfg.rule import CFGProduction
    >>> from gramma.cfg.symbol import Terminal
    >>> S, A, L = Nonterminal('S'), Nonterminal('A'), Nonterminal('L')
    >>> rules = [CFGProduction(S, [A, A]), CFGProduction(A, [Terminal('a')]), CFGProduction(L, [L])]
    >>> sorted(productive_nonterminals(rules))
    [Nonterminal('A'), Nonterminal('S')]
    """
    productions = tuple(productions)
    pending = []
    waiting = defaultdict(list)
    agenda = deque()
    for i, r in enumerate(productions):
        deps = frozenset(r.iternonterminals())
        pending.append(len(deps))
        for sym in deps:
            waiting[sym].append(i)
        if not deps:
            agenda.append(r.lhs)

    productive = set()
    while agenda:
        lhs = agenda.popleft()
        if lhs in productive:
            continue
        productive.add(lhs)
        for i in waiting.get(lhs, ()):
            pending[i] -= 1
            if pending[i] == 0:
                agenda.append(productions[i].lhs)
    logging.debug('Productivity: %d productive nonterminals', len(productive))
    return frozenset(productive)


def unreachable_nonterminals(productions, start):
    """The LHS symbols that cannot be reached from the start symbol."""
    return patterns(productions) - reachable_nonterminals(productions, start)


def unterminated_nonterminals(productions):
    """The LHS symbols that can never derive a string of terminals."""
    return patterns(productions) - productive_nonterminals(productions)
