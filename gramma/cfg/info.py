"""
Reports information about grammars.
"""

from tabulate import tabulate


def summary(grammar):
    """
    Tabulate the size of a grammar and whether it is in Chomsky normal form.

    :param grammar: a Grammar
    :returns: a string
    """
    header = ['start', 'terminals', 'nonterminals', 'productions', 'normalization', 'CNF']
    row = [str(grammar.start),
           grammar.n_terminals(),
           grammar.n_nonterminals(),
           len(grammar),
           len(grammar.normalization_nonterminals),
           'yes' if grammar.is_in_chomsky_normal_form() else 'no']
    return tabulate([row], header)


def warnings_table(grammar):
    """
    Tabulate the structural warnings of a grammar (one row per kind of problem).

    :param grammar: a Grammar
    :returns: a string
    """
    warnings = grammar.validate()
    if not warnings:
        return 'no warnings'
    rows = [[w.kind.name.lower(), len(w.nonterminals), ' '.join(str(s) for s in w.nonterminals)]
            for w in warnings]
    return tabulate(rows, ['warning', 'count', 'nonterminals'])
