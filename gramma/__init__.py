"""
Representation and validation of context-free grammars.
"""
