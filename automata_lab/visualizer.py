"""Graphviz and pandas views of an automaton, for the UI and the CLI."""

import pandas as pd
from graphviz import Digraph

ACTIVE_COLOR = "#00f3ff"
FINAL_COLOR = "#00b36b"


class Visualizer:
    """Creates a state diagram with the current state highlighted."""

    def __init__(self, automaton):
        self.automaton = automaton

    def render(self):
        dot = Digraph(comment=self.automaton.name)
        dot.attr(rankdir="LR")
        current = self.automaton.current_state
        for state in self.automaton.states:
            attrs = {"shape": "doublecircle" if state.is_final else "circle"}
            if state.is_final:
                attrs["color"] = FINAL_COLOR
            if current is not None and state.id == current.id:
                attrs.update(style="filled", fillcolor=ACTIVE_COLOR)
            dot.node(state.id, state.label, **attrs)

        start = self.automaton.start_state
        dot.node("__start__", "", shape="none", width="0", height="0")
        dot.edge("__start__", start.id)

        # Parallel edges share one arrow with all their rules on the label.
        labels = {}
        for t in self.automaton.transitions:
            labels.setdefault((t.source, t.target), []).append(t.rule)
        for (source, target), rules in labels.items():
            dot.edge(source, target, label=", ".join(rules))
        return dot


def render(automaton):
    return Visualizer(automaton).render()


def history_frame(automaton):
    """Accepted steps as a table indexed by step number."""
    rows = [
        {"Step": i + 1, "From State": r.source.label, "Input": r.symbol, "To State": r.target.label}
        for i, r in enumerate(automaton.history)
    ]
    df = pd.DataFrame(rows, columns=["Step", "From State", "Input", "To State"])
    return df.set_index("Step")
