"""Multiple-of-3 recognizer for decimal numbers.

Since 10 % 3 == 1, appending digit d to a number with remainder r leaves
remainder (r + d) % 3, so three states are enough and the remainder equals
the digit sum modulo 3.
"""

import re

from automata_lab.engine import State, Transition

NAME = "Modulo 3 Calculator"
MODULUS = 3

STATES = tuple(
    State(f"q{r}", f"Rem {r}", is_start=r == 0, is_final=r == 0) for r in range(MODULUS)
)

# One literal transition per digit keeps the table deterministic.
TRANSITIONS = tuple(
    Transition(f"q{r}", f"q{(r + d) % MODULUS}", str(d))
    for r in range(MODULUS)
    for d in range(10)
)

GRAMMAR = """
S -> [0369] S | [147] A | [258] B | ε
A -> [0369] A | [147] B | [258] S
B -> [0369] B | [147] S | [258] A
(Where S=q0, A=q1, B=q2)
""".strip()

REMAINDER_HINT = {
    "q1": "one more 2 (or 5, 8) would make it a multiple of 3",
    "q2": "one more 1 (or 4, 7) would make it a multiple of 3",
}


def digit_sum(text):
    return sum(int(char) for char in text if char.isascii() and char.isdigit())


def conclude(text, valid, final_state):
    total = digit_sum(text)
    if not valid:
        bad = re.search(r"[^0-9]", text)
        if bad:
            return f"Rejected because '{bad.group()}' is not a digit; only the digits 0-9 are allowed."
        return "Rejected because it contains characters that are not digits."

    if final_state.is_final:
        return f"Accepted because the sum of its digits is {total}, which is a multiple of 3."

    remainder = total % MODULUS
    hint = REMAINDER_HINT.get(final_state.id)
    if hint is None:
        return f"Rejected because it ended in state {final_state.label}, which is not accepting."
    return (
        f"Not accepted because the sum of its digits is {total} (remainder {remainder}), "
        f"and to be a multiple of 3 the remainder must be 0; {hint}."
    )
