"""Shared fixtures for the simulator tests."""

import pytest

from automata_lab.definitions import AutomatonKind, create_automaton
from automata_lab.engine import ALPHA, DIGIT, Automaton, State, Transition
from automata_lab.logging import configure_logging


class NotificationCollector:
    """Observer that keeps every notification in memory."""

    def __init__(self):
        self.notifications = []

    def __call__(self, notification):
        self.notifications.append(notification)

    @property
    def messages(self):
        return [n.message for n in self.notifications]

    @property
    def severities(self):
        return [n.severity.value for n in self.notifications]

    def clear(self):
        self.notifications.clear()


@pytest.fixture
def collector():
    return NotificationCollector()


@pytest.fixture
def email_automaton(collector):
    automaton = create_automaton(AutomatonKind.EMAIL, observer=collector)
    automaton.reset()
    return automaton


@pytest.fixture
def remainder_automaton(collector):
    automaton = create_automaton(AutomatonKind.REMAINDER, observer=collector)
    automaton.reset()
    return automaton


@pytest.fixture
def identifier_automaton(collector):
    """A letter followed by digits; 'end' has no outgoing transitions."""
    states = [
        State("s", "Start", is_start=True),
        State("id", "Ident", is_final=True),
        State("end", "End", is_final=True),
    ]
    transitions = [
        Transition("s", "id", ALPHA),
        Transition("id", "id", DIGIT),
        Transition("id", "end", ";"),
    ]
    return Automaton("Identifier", states, transitions, observer=collector)


@pytest.fixture
def debug_logging():
    """Let debug events through while a test runs."""
    configure_logging(level="debug")
    yield
    configure_logging()
