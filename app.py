import logging

import pandas as pd
import streamlit as st

from nfa2dfa import (
    ConstructionReplay,
    InvalidInputError,
    TransitionRow,
    build_automaton,
    epsilon_closure,
    minimize_dfa,
    run_dfa,
    to_digraph,
    transition_table,
)
from nfa2dfa.constants import DEFAULT_MINIMIZE_MODE, EPSILON, MINIMIZE_MODES
from nfa2dfa.settings import log_level

logging.basicConfig(
    level=log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

EMPTY_ROWS = pd.DataFrame([{"State": "", "Symbol": "", "Next States": ""}])

# (initial state, final states, rows, description)
EXAMPLES = [
    ("A", "C", [("A", "0", "A,B"), ("A", "1", "A"), ("B", "1", "C")],
     "Binary strings ending with '01'"),
    ("A", "C", [("A", "", "B"), ("B", "1", "C")],
     "Lambda transition followed by '1'"),
    ("q0", "q2", [("q0", "a", "q0"), ("q0", "b", "q0"), ("q0", "a", "q1"), ("q1", "b", "q2")],
     "Strings over {a, b} ending with 'ab'"),
    ("S", "S", [("S", "a", "T"), ("T", "a", "S")],
     "Strings of even length containing only a's"),
]

MODE_HELP = {
    "single": "One pass over every pair of states (merges obviously equivalent states).",
    "converge": "Repeats single passes until no more states merge.",
    "partition": "Partition refinement: produces the minimal DFA.",
}


def rows_from_editor(frame):
    """Convert the edited transition table into transition rows."""
    frame = frame.fillna("")
    return [
        TransitionRow(str(r["State"]), str(r["Symbol"]), str(r["Next States"]))
        for _, r in frame.iterrows()
    ]


def reset_form():
    st.session_state.initial_state = ""
    st.session_state.final_states = ""
    st.session_state.rows = EMPTY_ROWS.copy()
    st.session_state.editor_version = st.session_state.get("editor_version", 0) + 1


def load_example(example):
    initial_state, final_states, rows, _ = example
    st.session_state.initial_state = initial_state
    st.session_state.final_states = final_states
    st.session_state.rows = pd.DataFrame(
        [{"State": s, "Symbol": a, "Next States": n} for s, a, n in rows])
    st.session_state.editor_version = st.session_state.get("editor_version", 0) + 1


def show_automaton(automaton, title, caption):
    col1, col2 = st.columns([1, 2])
    with col1:
        st.markdown(f"### {title} Transition Table:")
        st.table(transition_table(automaton, mark_states=True))
    with col2:
        st.markdown(f"### {title} Visualization:")
        st.graphviz_chart(to_digraph(automaton, title))
        st.caption(caption)


def main():
    st.set_page_config(
        page_title="NFA to DFA Converter",
        page_icon="🧠",
        layout="wide"
    )

    if "rows" not in st.session_state:
        reset_form()

    st.title("NFA to Minimal DFA Converter")
    st.markdown(f"""
    Enter a nondeterministic finite automaton, possibly with lambda transitions, and follow its conversion:
    NFA-λ → NFA → DFA (subset construction) → Minimized DFA.

    Leave the symbol empty (or type `{EPSILON}`) for a lambda transition. Separate several next states with commas.
    """)

    with st.sidebar:
        st.header("Examples")
        descriptions = [example[3] for example in EXAMPLES]
        selected = st.selectbox("Select an example:", options=range(len(EXAMPLES)),
                                format_func=lambda i: descriptions[i])
        st.button("Use Selected Example", on_click=load_example, args=(EXAMPLES[selected],))

        mode = st.radio("Minimization mode:", MINIMIZE_MODES, index=MINIMIZE_MODES.index(DEFAULT_MINIMIZE_MODE))
        st.caption(MODE_HELP[mode])

    col1, col2 = st.columns(2)
    with col1:
        st.text_input("Initial State:", key="initial_state", placeholder="e.g., A")
    with col2:
        st.text_input("Final States (comma-separated):", key="final_states", placeholder="e.g., C")

    st.markdown("### Transitions")
    edited_rows = st.data_editor(
        st.session_state.rows,
        num_rows="dynamic",
        use_container_width=True,
        key=f"rows_editor_{st.session_state.editor_version}",
    )

    st.button("Reset", on_click=reset_form)

    try:
        nfa = build_automaton(
            st.session_state.initial_state,
            st.session_state.final_states,
            rows_from_editor(edited_rows),
        )
    except InvalidInputError as e:
        st.info(f"Waiting for a complete automaton: {e}")
        return
    except (TypeError, ValueError) as e:
        st.error(f"Error: {e}")
        return

    logger.debug("Input automaton: %r", nfa)

    # Step 1: the automaton as entered
    st.subheader("Step 1: Input NFA")
    show_automaton(nfa, "NFA", "Double circles are accepting states. Arrows labeled λ are lambda transitions.")

    with st.expander("Show λ-closures"):
        closure_data = {"State": [], "λ-closure": []}
        for state in nfa.states:
            closure_data["State"].append(str(state))
            closure_data["λ-closure"].append(', '.join(str(s) for s in epsilon_closure(state, nfa.transitions)))
        st.table(pd.DataFrame(closure_data))

    # Step 2: subset construction, replayable step by step
    st.subheader("Step 2: Convert NFA to DFA")
    replay = ConstructionReplay(nfa)
    steps = list(replay.step_numbers())
    step = st.select_slider("Construction step:", options=steps, value=steps[-1])
    result = replay.at(step)

    if result.interrupted:
        st.info(f"Construction interrupted before processing step {step} of {replay.completed_steps}.")
    show_automaton(result.automaton, "DFA",
                   "Composite states are sets of NFA states. TRAP absorbs every missing transition.")

    # Step 3: minimization, shown once the construction is complete
    if replay.is_final_step(step):
        st.subheader("Step 3: Minimize DFA")
        original_states = len(result.automaton.states)
        min_dfa = minimize_dfa(result.automaton.copy(), mode=mode)
        show_automaton(min_dfa, "Minimized DFA", "Equivalent states have been merged.")

        minimized_states = len(min_dfa.states)
        if original_states > minimized_states:
            reduction = ((original_states - minimized_states) / original_states) * 100
            st.success(f"State reduction: {reduction:.1f}% (from {original_states} to {minimized_states} states)")
        else:
            st.info("No equivalent states were found - no state reduction possible.")

        st.subheader("Test DFA with String")
        test_string = st.text_input("Enter a string to test:",
                                    help="Use only symbols from the alphabet. Leave empty to test the empty string.")
        accepted, trace = run_dfa(min_dfa, test_string)
        if accepted:
            st.success(f"String '{test_string}' is ACCEPTED by the DFA.")
        else:
            st.error(f"String '{test_string}' is REJECTED by the DFA.")
        with st.expander("Show Processing Trace"):
            st.code("\n".join(trace), language="text")


if __name__ == "__main__":
    main()
