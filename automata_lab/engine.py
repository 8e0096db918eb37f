"""Deterministic finite automaton engine.

Holds the state and transition tables of one automaton, the current state
and the history of accepted steps. Symbol rules are either a literal
character or one of the category tokens in ``CATEGORIES``.
"""

import re
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from automata_lab.errors import AutomatonNotReadyError, InvalidAutomatonError
from automata_lab.logging import get_logger

logger = get_logger("engine")

DIGIT, ALPHA, ALPHANUM = "DIGIT", "ALPHA", "ALPHANUM"
CATEGORIES = {
    DIGIT: re.compile(r"[0-9]"),
    ALPHA: re.compile(r"[a-zA-Z]"),
    ALPHANUM: re.compile(r"[a-zA-Z0-9]"),
}

DEAD_END_REASON = "No further transitions are possible from this state (dead end)."


@dataclass(frozen=True)
class State:
    id: str
    label: str
    is_start: bool = False
    is_final: bool = False


@dataclass(frozen=True)
class Transition:
    source: str
    target: str
    rule: str


@dataclass(frozen=True)
class StepRecord:
    """A symbol that was consumed by a transition."""

    source: State
    target: State
    symbol: str
    valid: bool = True

    @property
    def success(self):
        return self.valid


@dataclass(frozen=True)
class StepRejection:
    """A symbol that no transition from ``state`` accepts."""

    state: State
    symbol: str
    message: str
    reason: str
    valid: bool = False

    @property
    def success(self):
        return self.valid


class Severity(str, Enum):
    INFO = "info"
    ERROR = "error"
    SUCCESS = "success"
    SYSTEM = "system"


@dataclass(frozen=True)
class Notification:
    message: str
    severity: Severity = Severity.INFO


class NotificationLog:
    """Observer keeping the most recent notifications, oldest dropped first."""

    def __init__(self, limit=50):
        self._entries = deque(maxlen=limit)

    def __call__(self, notification):
        self._entries.append(notification)

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def clear(self):
        self._entries.clear()


def matches_symbol(rule, symbol):
    """Literal equality, or membership of an ASCII character category."""
    if rule == symbol:
        return True
    pattern = CATEGORIES.get(rule)
    return pattern is not None and pattern.fullmatch(symbol) is not None


class Automaton:
    """Steps a fixed DFA over input symbols and reports what happened."""

    def __init__(
        self,
        name: str,
        states,
        transitions,
        matcher: Callable[[str, str], bool] = matches_symbol,
        conclude: Optional[Callable[[str, bool, State], str]] = None,
        grammar: str = "",
        observer: Optional[Callable[[Notification], None]] = None,
    ):
        self.name = name
        self._states = tuple(states)
        self._transitions = tuple(transitions)
        self._by_id = {}
        for state in self._states:
            if state.id in self._by_id:
                raise InvalidAutomatonError(f"{name}: state '{state.id}' is declared more than once.")
            self._by_id[state.id] = state
        for t in self._transitions:
            for state_id in (t.source, t.target):
                if state_id not in self._by_id:
                    raise InvalidAutomatonError(f"{name}: transition state '{state_id}' is not declared.")
        self._matcher = matcher
        self._conclude = conclude
        self._grammar = grammar
        self._observer = observer
        self._current: Optional[State] = None
        self._history: list[StepRecord] = []

    @property
    def states(self):
        return self._states

    @property
    def transitions(self):
        return self._transitions

    @property
    def current_state(self):
        return self._current

    @property
    def history(self):
        return list(self._history)

    @property
    def grammar(self):
        return self._grammar

    @property
    def start_state(self):
        """The unique start state; a definition error if there is not exactly one."""
        starts = [s for s in self._states if s.is_start]
        if not starts:
            raise InvalidAutomatonError(f"{self.name}: no start state is declared.")
        if len(starts) > 1:
            ids = ", ".join(s.id for s in starts)
            raise InvalidAutomatonError(f"{self.name}: more than one start state is declared ({ids}).")
        return starts[0]

    def state(self, state_id):
        return self._by_id[state_id]

    def transitions_from(self, state_id):
        return [t for t in self._transitions if t.source == state_id]

    def expected_rules(self, state_id):
        """Rules leaving ``state_id``, without repeats, in declaration order."""
        return list(dict.fromkeys(t.rule for t in self.transitions_from(state_id)))

    def matches(self, rule, symbol):
        return self._matcher(rule, symbol)

    def notify(self, message, severity=Severity.INFO):
        logger.info("automaton_notification", automaton=self.name, severity=severity.value, message=message)
        if self._observer is None:
            return
        try:
            self._observer(Notification(message, severity))
        except Exception as e:
            logger.error("observer_failed", automaton=self.name, error=str(e))

    def reset(self):
        start = self.start_state
        self._current = start
        self._history = []
        logger.debug("automaton_reset", automaton=self.name, state=start.id)
        self.notify(f"Reset to start state: {start.label}")

    def step(self, symbol):
        """Consume one symbol.

        Returns a StepRecord when a transition fired, otherwise a StepRejection
        and the current state is left untouched.
        """
        if self._current is None:
            raise AutomatonNotReadyError(self.name)

        current = self._current
        transition = next(
            (t for t in self.transitions_from(current.id) if self.matches(t.rule, symbol)),
            None,
        )
        if transition is not None:
            target = self._by_id[transition.target]
            record = StepRecord(source=current, target=target, symbol=symbol)
            self._current = target
            self._history.append(record)
            logger.debug("step_accepted", automaton=self.name, source=current.id, target=target.id, symbol=symbol)
            self.notify(f"Transition: {current.label} --({symbol})--> {target.label}")
            return record

        expected = self.expected_rules(current.id)
        if not expected:
            reason = DEAD_END_REASON
        else:
            reason = f"Expected: [{' or '.join(expected)}], but received: '{symbol}'."
        message = f"Error at {current.label}: {reason}"
        logger.debug("step_rejected", automaton=self.name, state=current.id, symbol=symbol)
        self.notify(message, Severity.ERROR)
        return StepRejection(state=current, symbol=symbol, message=message, reason=reason)

    def conclusion(self, text, valid, final_state):
        """Explain why ``text`` was accepted, rejected or left incomplete."""
        if self._conclude is not None:
            return self._conclude(text, valid, final_state)
        if valid and final_state.is_final:
            return f"Accepted: the input ends in the final state {final_state.label}."
        if not valid:
            return "Rejected: the input contains a symbol no transition accepts."
        return f"Rejected because it is incomplete (ended in state {final_state.label})."

    def __repr__(self):
        current = self._current.id if self._current else None
        return f"Automaton(name={self.name!r}, current={current!r}, steps={len(self._history)})"
