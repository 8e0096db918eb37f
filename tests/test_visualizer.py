"""Tests for the diagram and trace table views."""

from automata_lab.definitions import create_automaton
from automata_lab.runner import validate
from automata_lab.visualizer import ACTIVE_COLOR, history_frame, render


class TestRender:
    """Tests for the Graphviz diagram."""

    def test_nodes_and_shapes(self):
        automaton = create_automaton("email")
        automaton.reset()

        source = render(automaton).source

        assert "rankdir=LR" in source
        assert source.count("doublecircle") == 1
        assert "label=Ext" in source
        assert "__start__ -> q0" in source

    def test_parallel_edges_are_merged(self):
        automaton = create_automaton("email")
        automaton.reset()

        source = render(automaton).source

        assert 'q1 -> q1s [label="., -, _"]' in source

    def test_current_state_is_highlighted(self):
        automaton = create_automaton("remainder")
        validate(automaton, "1")

        lines = [line for line in render(automaton).source.splitlines() if ACTIVE_COLOR in line]

        assert len(lines) == 1
        assert lines[0].strip().startswith("q1 ")


class TestHistoryFrame:
    """Tests for the step table."""

    def test_rows(self):
        automaton = create_automaton("remainder")
        validate(automaton, "12")

        df = history_frame(automaton)

        assert list(df.columns) == ["From State", "Input", "To State"]
        assert list(df.index) == [1, 2]
        assert df.loc[2, "To State"] == "Rem 0"

    def test_empty_history(self):
        automaton = create_automaton("email")
        automaton.reset()

        assert history_frame(automaton).empty
