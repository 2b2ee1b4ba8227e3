"""
ReadingRoom - Reading Assignment Authoring

Streamlit application for tutors: turn a paragraph into an interactive
reading exercise by tagging words with Define, Illustrate or Fill actions.

Usage:
    streamlit run app.py
"""

import asyncio

import streamlit as st

from readingroom.authoring import (
    AuthoringSession,
    get_word,
    hideable_letters,
    obscure_word,
    shuffle_definition,
)
from readingroom.config import load_settings, setup_logging
from readingroom.schemas import (
    AuthoringStep,
    DefineAction,
    FillAction,
    IllustrateAction,
    ImageChoice,
    REQUIRED_IMAGE_COUNT,
)
from readingroom.storage import SQLiteAssignmentStore, filter_by_due_date
from readingroom.viewer import build_exercise, render_exercise


STEP_LABELS = {
    AuthoringStep.TITLE: "Assignment Title",
    AuthoringStep.PARAGRAPH: "Load Paragraph",
    AuthoringStep.ACTIONS: "Assign Word Actions",
    AuthoringStep.METADATA: "Assignment Details",
    AuthoringStep.REVIEW: "Review Assignment",
}

st.set_page_config(
    page_title="ReadingRoom",
    page_icon="📖",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "settings" not in st.session_state:
        st.session_state.settings = load_settings()
        setup_logging(st.session_state.settings)

    if "store" not in st.session_state:
        st.session_state.store = SQLiteAssignmentStore(st.session_state.settings.db_path)

    if "authoring" not in st.session_state:
        st.session_state.authoring = AuthoringSession(st.session_state.store)

    if "selected_address" not in st.session_state:
        st.session_state.selected_address = None

    if "view_mode" not in st.session_state:
        st.session_state.view_mode = "author"  # author, assignments


# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with view selection and draft progress."""
    st.sidebar.title("📖 ReadingRoom")

    view_mode = st.sidebar.radio(
        "Select view",
        ["Author", "Assignments"],
        index=["author", "assignments"].index(st.session_state.view_mode),
        horizontal=True,
        label_visibility="collapsed",
    )
    st.session_state.view_mode = view_mode.lower()

    if st.session_state.view_mode == "author":
        session = st.session_state.authoring
        pos, total = session.step_position()
        st.sidebar.divider()
        st.sidebar.markdown(f"**Step {pos} of {total}:** {STEP_LABELS[session.step]}")
        st.sidebar.progress(pos / total)

        summary = session.summary()
        st.sidebar.markdown(f"**Actions:** {summary['actions']['label']}")
        if st.sidebar.button("Discard draft", use_container_width=True):
            session.reset()
            st.session_state.selected_address = None
            st.rerun()


def show_result(result):
    """Rerun on success, show the error otherwise."""
    if result.ok:
        st.rerun()
    st.error(result.error.message)


def render_back_button():
    if st.button("← Back"):
        show_result(st.session_state.authoring.go_back())


# -----------------------------------------------------------------------------
# Authoring Steps
# -----------------------------------------------------------------------------

def render_title_step(session: AuthoringSession):
    title = st.text_input("Title", value=session.title, placeholder="e.g., The Lost Kitten")
    session.set_title(title)
    if st.button("Next: Load Paragraph", type="primary"):
        show_result(session.advance())


def render_paragraph_step(session: AuthoringSession):
    default = session.document.original_paragraph if session.document else ""
    paragraph = st.text_area("Paragraph", value=default, height=200)

    if session.document:
        st.caption(
            f"{len(session.document.sentences)} sentences, {session.document.word_count} words loaded"
        )

    col1, col2, col3 = st.columns([1, 2, 2])
    with col1:
        render_back_button()
    with col2:
        if st.button("Load paragraph", use_container_width=True):
            result = session.load_paragraph(paragraph)
            st.session_state.selected_address = None
            show_result(result)
    with col3:
        if st.button("Next: Assign Actions", type="primary", use_container_width=True):
            show_result(session.advance())


def render_word_grid(session: AuthoringSession):
    """Render every sentence as a row of word buttons."""
    for sentence in session.document.sentences:
        cols = st.columns(min(len(sentence.words), 8))
        for idx, word in enumerate(sentence.words):
            marker = {"define": "📘", "illustrate": "🖼️", "fill": "✏️"}.get(
                word.action.type if word.action else "", ""
            )
            with cols[idx % len(cols)]:
                if st.button(f"{marker} {word.text}".strip(), key=f"word_{word.address}"):
                    st.session_state.selected_address = word.address
                    st.rerun()


def render_action_configurator(session: AuthoringSession, address: str):
    """Configure the action of the selected word."""
    word_result = get_word(session.document, address)
    if not word_result.ok:
        st.session_state.selected_address = None
        return
    word = word_result.value

    st.subheader(f"Configure “{word.text}” ({address})")
    current = word.action.type if word.action else "define"
    kind = st.radio(
        "Action", ["define", "illustrate", "fill"],
        index=["define", "illustrate", "fill"].index(current),
        horizontal=True,
    )

    if kind == "define":
        definition = st.text_area(
            "Definition",
            value=word.action.definition if isinstance(word.action, DefineAction) else "",
        )
        if definition.strip():
            st.caption("Student will see (randomized): " + " · ".join(shuffle_definition(definition)))
        if st.button("Save definition", type="primary"):
            show_result(session.set_action(address, DefineAction(definition=definition)))

    elif kind == "illustrate":
        existing = word.action.images if isinstance(word.action, IllustrateAction) else ()
        urls = []
        for idx in range(REQUIRED_IMAGE_COUNT):
            value = existing[idx].url if idx < len(existing) else ""
            urls.append(st.text_input(f"Image {idx + 1} URL", value=value, key=f"img_{address}_{idx}"))
        images = [
            ImageChoice(url=url.strip(), source="url", alt_text=f"Image {idx + 1} for word: {word.text}")
            for idx, url in enumerate(urls) if url.strip()
        ]
        if st.button("Save illustrations", type="primary"):
            show_result(session.set_action(address, IllustrateAction(images=images)))

    elif kind == "fill":
        existing = word.action.letters_to_hide if isinstance(word.action, FillAction) else ()
        letters = st.multiselect("Letters to hide", hideable_letters(word.text), default=list(existing))
        st.markdown(" ".join(obscure_word(word.text, letters, st.session_state.settings.hidden_letter_placeholder)))
        if st.button("Save fill configuration", type="primary"):
            show_result(session.set_action(address, FillAction(letters_to_hide=letters)))

    if word.action and st.button("Remove action"):
        show_result(session.clear_action(address))


def render_actions_step(session: AuthoringSession):
    st.markdown("Tap a word to assign an action.")
    render_word_grid(session)

    address = st.session_state.selected_address
    if address:
        st.divider()
        render_action_configurator(session, address)

    st.divider()
    st.markdown(f"**{session.summary()['actions']['label']}**")
    col1, col2 = st.columns([1, 4])
    with col1:
        render_back_button()
    with col2:
        if st.button("Next: Assignment Details", type="primary"):
            show_result(session.advance())


def render_metadata_step(session: AuthoringSession):
    meta = session.metadata
    description = st.text_area("Description (optional)", value=meta.description or "")
    due_date = st.date_input("Due date (optional)", value=meta.due_date)
    duration = st.number_input("Duration (minutes)", min_value=0, value=meta.duration_minutes or 0)
    tools = st.text_input(
        "Tools needed",
        value=", ".join(meta.tools),
        placeholder="e.g., Dictionary, Google Images (comma-separated)",
    )
    encouragement = st.text_area("Parent encouragement message", value=meta.parent_encouragement or "")

    session.set_metadata(
        description=description or None,
        tools=tools,
        duration_minutes=int(duration) or None,
        parent_encouragement=encouragement or None,
        due_date=due_date,
    )

    col1, col2 = st.columns([1, 4])
    with col1:
        render_back_button()
    with col2:
        if st.button("Next: Review & Save", type="primary"):
            show_result(session.advance())


def render_review_step(session: AuthoringSession):
    summary = session.summary()
    st.markdown(f"### {summary['title']}")
    st.markdown(
        f"{summary['sentences']} sentences, {summary['words']} words, "
        f"{summary['actions']['total']} word{'s' if summary['actions']['total'] != 1 else ''} assigned"
    )
    if summary["tools"]:
        st.markdown("**Tools:** " + ", ".join(summary["tools"]))

    st.markdown(render_exercise(session.document), unsafe_allow_html=True)

    if session.error:
        st.error(session.error)

    col1, col2 = st.columns([1, 4])
    with col1:
        render_back_button()
    with col2:
        if st.button("Create assignment", type="primary", disabled=session.is_submitting):
            result = asyncio.run(session.submit())
            if result.ok:
                st.session_state.selected_address = None
                st.success("Assignment created successfully!")
            else:
                st.error(result.error.message)


def render_author_view():
    """Render the current authoring step."""
    session = st.session_state.authoring
    st.title(STEP_LABELS[session.step])

    renderers = {
        AuthoringStep.TITLE: render_title_step,
        AuthoringStep.PARAGRAPH: render_paragraph_step,
        AuthoringStep.ACTIONS: render_actions_step,
        AuthoringStep.METADATA: render_metadata_step,
        AuthoringStep.REVIEW: render_review_step,
    }
    renderers[session.step](session)


# -----------------------------------------------------------------------------
# Assignments View
# -----------------------------------------------------------------------------

def render_assignments_view():
    """List stored assignments with an optional due-date filter."""
    st.title("Assignments")

    col1, col2, col3 = st.columns(3)
    with col1:
        year = st.number_input("Due year", min_value=0, value=0)
    with col2:
        month = st.number_input("Due month", min_value=0, max_value=12, value=0)
    with col3:
        day = st.number_input("Due day", min_value=0, max_value=31, value=0)

    assignments = asyncio.run(st.session_state.store.list_assignments())
    assignments = filter_by_due_date(assignments, int(year) or None, int(month) or None, int(day) or None)

    st.markdown(f"Showing {len(assignments)} assignments")

    for assignment in assignments:
        due = assignment.due_date.isoformat() if assignment.due_date else "no due date"
        with st.expander(f"{assignment.title} ({due})"):
            if assignment.description:
                st.markdown(assignment.description)
            items = build_exercise(assignment.content, st.session_state.settings.hidden_letter_placeholder)
            st.markdown(
                render_exercise(assignment.content, items, st.session_state.settings.hidden_letter_placeholder),
                unsafe_allow_html=True,
            )


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()

    if st.session_state.view_mode == "assignments":
        render_assignments_view()
    else:
        render_author_view()


if __name__ == "__main__":
    main()
