"""Concrete grammar content fed to the generic lexer/automaton."""
