"""Email address validator.

    Start --ALPHANUM--> Local --[._-]--> Sep --ALPHANUM--> Local
    Local --@--> @ --ALPHANUM--> Dom --'-'--> Sep --ALPHANUM--> Dom
    Dom --.--> Dot --ALPHANUM--> Ext --.--> Dot

Separators may only sit between alphanumerics, so no part can start or end
on one.
"""

import re

from automata_lab.engine import ALPHANUM, State, Transition, matches_symbol

NAME = "Email Validator"

STATES = (
    State("q0", "Start", is_start=True),
    State("q1", "Local"),
    State("q1s", "Sep"),
    State("q2", "@"),
    State("q3", "Dom"),
    State("q3s", "Sep"),
    State("q4", "Dot"),
    State("q5", "Ext", is_final=True),
)

TRANSITIONS = (
    Transition("q0", "q1", ALPHANUM),
    Transition("q1", "q1", ALPHANUM),
    Transition("q1", "q1s", "."),
    Transition("q1", "q1s", "-"),
    Transition("q1", "q1s", "_"),
    Transition("q1s", "q1", ALPHANUM),
    Transition("q1", "q2", "@"),
    Transition("q2", "q3", ALPHANUM),
    Transition("q3", "q3", ALPHANUM),
    Transition("q3", "q3s", "-"),
    Transition("q3s", "q3", ALPHANUM),
    Transition("q3", "q4", "."),
    Transition("q4", "q5", ALPHANUM),
    Transition("q5", "q5", ALPHANUM),
    Transition("q5", "q4", "."),
)

GRAMMAR = """
S -> [a-zA-Z0-9] A
A -> [a-zA-Z0-9] A | [._-] B | @ C
B -> [a-zA-Z0-9] A
C -> [a-zA-Z0-9] D
D -> [a-zA-Z0-9] D | - E | . F
E -> [a-zA-Z0-9] D
F -> [a-zA-Z0-9] G
G -> [a-zA-Z0-9] G | . F | ε
""".strip()

# Punctuation that must never fall through to a category rule.
LITERAL_ONLY = frozenset(".-_@")

_DISALLOWED = re.compile(r"[^a-zA-Z0-9._@-]")

INCOMPLETE = {
    "q0": "Rejected because it is empty.",
    "q1": "Rejected because the '@' symbol and the domain are missing.",
    "q1s": "Rejected because the local part cannot end with a separator ('.', '-' or '_'), and the '@' and domain are missing.",
    "q2": "Rejected because the domain is missing after the '@'.",
    "q3": "Rejected because the domain extension is missing (e.g. .com).",
    "q3s": "Rejected because the domain cannot end with a hyphen, and the extension is missing.",
    "q4": "Rejected because the domain cannot end with a dot.",
}


def match_symbol(rule, symbol):
    if symbol in LITERAL_ONLY:
        return rule == symbol
    return matches_symbol(rule, symbol)


def _explain_rejection(text):
    if re.match(r"[^a-zA-Z0-9]", text):
        return "Rejected because an email must start with a letter or a digit."
    if "," in text:
        return "Rejected because it contains a comma (','), which is not valid in an email."
    if text.count("@") > 1:
        return "Rejected because it contains more than one '@' symbol."
    bad = _DISALLOWED.search(text)
    if bad:
        return f"Rejected because the character '{bad.group()}' is not allowed."
    if ".." in text:
        return "Rejected because it contains two consecutive dots ('..')."
    if re.search(r"[._-]{2}", text):
        return "Rejected because two separators ('.', '-' or '_') cannot appear next to each other."
    if re.search(r"[._-]@|@[._-]", text):
        return "Rejected because a separator cannot appear right before or after the '@'."

    _, at, domain = text.partition("@")
    if at and "_" in domain:
        return "Rejected because the domain cannot contain an underscore ('_')."
    if at and "." in domain:
        extension = domain.split(".", 1)[1]
        if re.search(r"[^a-zA-Z0-9.]", extension):
            return "Rejected because the domain extension may only contain letters and digits."
    return "Rejected because it contains invalid characters or an incorrect structure."


def conclude(text, valid, final_state):
    if valid and final_state.is_final:
        return "Valid email: it follows the local@domain.ext structure."
    if not valid:
        return _explain_rejection(text)
    return INCOMPLETE.get(
        final_state.id,
        f"Rejected because it is incomplete (ended in state {final_state.label}).",
    )
