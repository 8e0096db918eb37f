"""Drives an automaton over a whole input string.

``validate`` runs at once; ``animate`` paces the same loop with a delay
between steps for presentation. Both stop at the first rejected symbol.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum

from automata_lab.engine import Severity
from automata_lab.logging import get_logger

logger = get_logger("runner")


class Verdict(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    INCOMPLETE = "incomplete"


@dataclass
class RunOutcome:
    text: str
    verdict: Verdict
    final_state: object
    conclusion: str
    steps: list = field(default_factory=list)

    @property
    def accepted(self):
        return self.verdict is Verdict.ACCEPTED

    @property
    def valid(self):
        """Whether every symbol was consumed without a rejection."""
        return self.verdict is not Verdict.REJECTED


def _finish(automaton, text, steps):
    valid = all(result.valid for result in steps)
    final_state = automaton.current_state
    if not valid:
        verdict = Verdict.REJECTED
    elif final_state.is_final:
        verdict = Verdict.ACCEPTED
    else:
        verdict = Verdict.INCOMPLETE

    conclusion = automaton.conclusion(text, valid, final_state)
    severity = Severity.SUCCESS if verdict is Verdict.ACCEPTED else Severity.ERROR
    label = "ACCEPTED" if verdict is Verdict.ACCEPTED else "REJECTED"
    automaton.notify(f'String "{text}" {label}.', severity)
    automaton.notify(f"Conclusion: {conclusion}", severity)

    logger.info(
        "run_finished",
        automaton=automaton.name,
        verdict=verdict.value,
        final_state=final_state.id,
        steps=len(steps),
    )
    return RunOutcome(text=text, verdict=verdict, final_state=final_state, conclusion=conclusion, steps=steps)


def validate(automaton, text):
    """Reset ``automaton`` and feed it ``text`` one character at a time."""
    automaton.reset()
    steps = []
    for char in text:
        result = automaton.step(char)
        steps.append(result)
        if not result.valid:
            break
    return _finish(automaton, text, steps)


async def animate(automaton, text, delay=0.5, on_step=None):
    """Like ``validate`` but waits ``delay`` seconds before each step.

    ``on_step`` is called with every step result, e.g. to redraw a diagram.
    """
    if delay < 0:
        raise ValueError(f"delay must be >= 0, got {delay}")

    automaton.reset()
    steps = []
    for char in text:
        await asyncio.sleep(delay)
        result = automaton.step(char)
        steps.append(result)
        if on_step is not None:
            on_step(result)
        if not result.valid:
            break
    return _finish(automaton, text, steps)
