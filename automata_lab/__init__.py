"""Step-by-step DFA simulator with natural-language verdicts."""

__version__ = "0.1.0"

from automata_lab.definitions import AutomatonKind, available_kinds, create_automaton
from automata_lab.engine import (
    ALPHA,
    ALPHANUM,
    DIGIT,
    Automaton,
    Notification,
    NotificationLog,
    Severity,
    State,
    StepRecord,
    StepRejection,
    Transition,
    matches_symbol,
)
from automata_lab.errors import (
    AutomatonError,
    AutomatonNotReadyError,
    ConfigError,
    InvalidAutomatonError,
    UnknownAutomatonError,
)
from automata_lab.runner import RunOutcome, Verdict, animate, validate

__all__ = [
    "ALPHA",
    "ALPHANUM",
    "DIGIT",
    "Automaton",
    "AutomatonError",
    "AutomatonKind",
    "AutomatonNotReadyError",
    "ConfigError",
    "InvalidAutomatonError",
    "Notification",
    "NotificationLog",
    "RunOutcome",
    "Severity",
    "State",
    "StepRecord",
    "StepRejection",
    "Transition",
    "UnknownAutomatonError",
    "Verdict",
    "animate",
    "available_kinds",
    "create_automaton",
    "matches_symbol",
    "validate",
]
