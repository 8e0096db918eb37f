"""Registry of the automata the simulator ships with."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from automata_lab.definitions import email, remainder
from automata_lab.engine import Automaton, Severity, State, Transition, matches_symbol
from automata_lab.errors import UnknownAutomatonError
from automata_lab.logging import get_logger

logger = get_logger("definitions")


class AutomatonKind(str, Enum):
    EMAIL = "email"
    REMAINDER = "remainder"


@dataclass(frozen=True)
class AutomatonDefinition:
    """Tables, grammar and diagnostics for one kind of automaton."""

    kind: AutomatonKind
    name: str
    states: tuple[State, ...]
    transitions: tuple[Transition, ...]
    grammar: str
    conclude: Callable[[str, bool, State], str]
    matcher: Callable[[str, str], bool] = matches_symbol

    def build(self, observer=None):
        return Automaton(
            self.name,
            self.states,
            self.transitions,
            matcher=self.matcher,
            conclude=self.conclude,
            grammar=self.grammar,
            observer=observer,
        )


DEFINITIONS = {
    AutomatonKind.EMAIL: AutomatonDefinition(
        kind=AutomatonKind.EMAIL,
        name=email.NAME,
        states=email.STATES,
        transitions=email.TRANSITIONS,
        grammar=email.GRAMMAR,
        conclude=email.conclude,
        matcher=email.match_symbol,
    ),
    AutomatonKind.REMAINDER: AutomatonDefinition(
        kind=AutomatonKind.REMAINDER,
        name=remainder.NAME,
        states=remainder.STATES,
        transitions=remainder.TRANSITIONS,
        grammar=remainder.GRAMMAR,
        conclude=remainder.conclude,
    ),
}


def available_kinds():
    return [kind.value for kind in DEFINITIONS]


def get_definition(kind):
    try:
        return DEFINITIONS[AutomatonKind(kind)]
    except (ValueError, KeyError):
        raise UnknownAutomatonError(kind, available_kinds()) from None


def create_automaton(kind, observer=None):
    """Build a fresh automaton of ``kind``; call ``reset()`` before stepping."""
    definition = get_definition(kind)
    automaton = definition.build(observer)
    logger.debug("automaton_created", kind=definition.kind.value)
    automaton.notify(f"Switched to {automaton.name}", Severity.SYSTEM)
    return automaton


__all__ = [
    "AutomatonDefinition",
    "AutomatonKind",
    "DEFINITIONS",
    "available_kinds",
    "create_automaton",
    "get_definition",
]
