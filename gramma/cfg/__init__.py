"""
Context-free grammars: symbols, productions, validation and diagnostics.
"""

from .symbol import Terminal, Nonterminal, Symbol
from .rule import CFGProduction
from .cfg import Grammar, GrammarWarning, WarningKind
from .diagnostics import InputSyntaxError, Reason, SourceRange
