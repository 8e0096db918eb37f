# app.py
# Streamlit front end for the DFA simulator
import asyncio
from pathlib import Path

import streamlit as st

from automata_lab.config import load_settings
from automata_lab.definitions import available_kinds, create_automaton, get_definition
from automata_lab.engine import NotificationLog
from automata_lab.logging import configure_logging
from automata_lab.runner import Verdict, animate, validate
from automata_lab.visualizer import history_frame, render

settings = load_settings(Path("automata.yaml"))
configure_logging(level=settings.log_level, format_type=settings.log_format)

#STREAMLIT USER INTERFACE
st.set_page_config(
    layout="wide",
    page_title="DFA Simulator",
    initial_sidebar_state="expanded"
)
st.title("Deterministic Finite Automaton Simulator")

# Initialize session state
if 'log' not in st.session_state: st.session_state.log = NotificationLog(limit=50)
if 'outcome' not in st.session_state: st.session_state.outcome = None


def switch(kind):
    st.session_state.kind = kind
    st.session_state.automaton = create_automaton(kind, observer=st.session_state.log)
    st.session_state.automaton.reset()
    st.session_state.outcome = None


if 'automaton' not in st.session_state: switch(settings.default_kind)

# --- Sidebar (Left Column) ---
with st.sidebar:
    st.header("1. Choose Automaton")
    kinds = available_kinds()
    kind = st.radio("Automaton", kinds, index=kinds.index(st.session_state.kind), format_func=lambda k: get_definition(k).name)
    if kind != st.session_state.kind: switch(kind)
    automaton = st.session_state.automaton

    st.markdown("##### Grammar")
    st.code(automaton.grammar, language=None)

    st.markdown("---") # Separator

    st.header("2. Test Input")
    input_string = st.text_input("Enter input:", "a@b.com" if kind == "email" else "123")
    speed = st.slider("Animation delay (s)", 0.0, 2.0, min(float(settings.animation_delay), 2.0), 0.1)
    col_validate, col_animate, col_reset = st.columns(3)
    validate_button = col_validate.button("Validate")
    animate_button = col_animate.button("Animate")
    reset_button = col_reset.button("Reset")
    if st.button("Clear log"): st.session_state.log.clear()

# --- Main Area ---
col_diagram, col_results = st.columns(2)

with col_diagram:
    st.subheader("Automaton Structure")
    diagram_slot = st.empty()
    status_slot = st.empty()

if reset_button:
    automaton.reset(); st.session_state.outcome = None
if validate_button:
    st.session_state.outcome = validate(automaton, input_string)
if animate_button:
    def redraw(result):
        diagram_slot.graphviz_chart(render(automaton))
        status_slot.caption(f"Processing: '{result.symbol}'")
    diagram_slot.graphviz_chart(render(automaton))
    st.session_state.outcome = asyncio.run(animate(automaton, input_string, delay=speed, on_step=redraw))
    status_slot.empty()

diagram_slot.graphviz_chart(render(automaton))

# --- Right Column: Simulation Results ---
with col_results:
    st.subheader("Simulation Results")
    outcome = st.session_state.outcome
    if outcome is None:
        st.info("Enter an input and click 'Validate' or 'Animate'.")
    else:
        if outcome.verdict is Verdict.ACCEPTED:
            st.success(f"**Result:** Input '{outcome.text}' is **Accepted**.")
        elif outcome.verdict is Verdict.INCOMPLETE:
            st.error(f"**Result:** Input '{outcome.text}' is **Incomplete**.")
        else:
            st.error(f"**Result:** Input '{outcome.text}' is **Rejected**.")
            st.caption(outcome.steps[-1].message)
        st.write(f"**Conclusion:** {outcome.conclusion}")

        if automaton.history:
            st.markdown("##### Execution Trace")
            st.table(history_frame(automaton))
        st.write(f"**End:** Finished in state **`{outcome.final_state.label}`**.")

    st.markdown("##### Log")
    lines = [f"[{n.severity.value}] > {n.message}" for n in st.session_state.log]
    st.text("\n".join(lines) if lines else "(empty)")
