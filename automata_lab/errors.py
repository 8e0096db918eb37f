"""Exceptions raised by the automaton engine and its surroundings.

A rejected symbol is a normal outcome and is returned as a value; only
misconfiguration ends up here.
"""

from dataclasses import dataclass


class AutomatonError(Exception):
    """Base class for automaton errors."""


class InvalidAutomatonError(AutomatonError):
    """The state/transition tables of an automaton are malformed."""


class AutomatonNotReadyError(AutomatonError):
    """A step was requested before the automaton was reset."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"{name} has no current state; call reset() first")


class UnknownAutomatonError(AutomatonError):
    """No definition is registered for the requested kind."""

    def __init__(self, kind, known):
        self.kind = kind
        self.known = tuple(known)
        super().__init__(f"Unknown automaton kind '{kind}'. Expected one of: {', '.join(self.known)}")


@dataclass(eq=False)
class ConfigError(Exception):
    """Error in configuration."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"Config error in '{self.field}': {self.message}"
