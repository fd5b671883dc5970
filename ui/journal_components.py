"""
Logic:
- Provides UI components for journal entries
- Renders the entry list, entry cards and the create/edit form
- All data changes go through the JournalController kept in session state
"""

import html

import streamlit as st

from state.card_state import DeleteConfirmation
from state.controller import ListStatus
from state.form_state import EntryFormState
from utils.helpers import run_async, truncate_text

TITLE_DISPLAY_LIMIT = 80
BODY_DISPLAY_LIMIT = 220
GRID_COLUMNS = 3

def open_entry_form(entry=None):
    """
    Input: entry to edit, or None for a new entry
    Process: Replaces any open form with a fresh one
    Output: None
    """
    clear_form_widgets()
    st.session_state.form_state = EntryFormState(entry)
    st.session_state.needs_rerun = True

def close_entry_form():
    clear_form_widgets()
    st.session_state.form_state = None
    st.session_state.needs_rerun = True

def clear_form_widgets():
    for key in list(st.session_state.keys()):
        if key.startswith('form_'):
            del st.session_state[key]

def get_card_state(entry_id):
    """
    Input: entry id
    Process: Returns the card's delete confirmation, creating it on first use
    Output: DeleteConfirmation
    """
    card_states = st.session_state.card_states
    if entry_id not in card_states:
        card_states[entry_id] = DeleteConfirmation(entry_id)
    return card_states[entry_id]

def display_entry_form(controller):
    """
    Input: JournalController
    Process: Renders the open create/edit form, saves on submit and closes on success
    Output: None
    """
    form_state = st.session_state.get('form_state')
    if form_state is None:
        return

    form_key = 'new' if form_state.is_new else form_state.entry.id

    with st.container(border=True):
        head_cols = st.columns([6, 1])
        with head_cols[0]:
            st.subheader("New Journal Entry" if form_state.is_new else "Edit Entry")
        with head_cols[1]:
            if st.button("✕", key=f"form_close_{form_key}", help="Close", disabled=form_state.is_saving):
                close_entry_form()
                return

        # Error message box
        if form_state.error:
            st.error(form_state.error)

        form_state.title = st.text_input(
            "Title",
            value=form_state.title,
            key=f"form_title_{form_key}",
            placeholder="Title (e.g., A Day in the City)",
        )
        form_state.body = st.text_area(
            "Entry",
            value=form_state.body,
            key=f"form_body_{form_key}",
            height=200,
            placeholder="What's on your mind today? Write your entry here...",
        )

        label = "Create Entry" if form_state.is_new else "Update Entry"
        if st.button(label, key=f"form_submit_{form_key}", type="primary",
                     disabled=not form_state.can_submit):
            with st.spinner("Saving..."):
                saved = run_async(form_state.submit(controller.save))
            if saved:
                close_entry_form()
            else:
                st.session_state.needs_rerun = True

def display_entry_list(controller):
    """
    Input: JournalController
    Process: Renders loading indicator, error panel, empty state or the card grid
    Output: None
    """
    if controller.is_loading:
        with st.spinner("Loading journal entries..."):
            run_async(controller.load())

    if controller.status == ListStatus.ERRORED:
        st.error(controller.error)
        if st.button("Try again", key="retry_load"):
            with st.spinner("Loading journal entries..."):
                run_async(controller.load())
            st.session_state.needs_rerun = True
        return

    # Delete failure notice
    if controller.notice:
        notice_cols = st.columns([6, 1])
        with notice_cols[0]:
            st.warning(controller.notice)
        with notice_cols[1]:
            if st.button("Dismiss", key="dismiss_notice"):
                controller.dismiss_notice()
                st.session_state.needs_rerun = True

    if not controller.entries:
        st.markdown("""
        <div class="empty-state">
            <h3>No Journal Entries Found</h3>
            <p>Click "New Entry" to start writing your first thought!</p>
        </div>
        """, unsafe_allow_html=True)
        return

    cols = st.columns(GRID_COLUMNS)
    for index, entry in enumerate(controller.entries):
        with cols[index % GRID_COLUMNS]:
            display_entry_card(entry, controller)

def display_entry_card(entry, controller):
    """
    Input: JournalEntry, JournalController
    Process: Renders a card with importance toggle, edit and two-step delete
    Output: None
    """
    card_state = get_card_state(entry.id)
    important = controller.is_important(entry.id)
    card_class = "entry-card important" if important else "entry-card"

    with st.container(border=True):
        st.markdown(f"""
        <div class="{card_class}">
            <div class="entry-title">{html.escape(truncate_text(entry.title, TITLE_DISPLAY_LIMIT))}</div>
            <div class="entry-meta">User ID: {entry.user_id} | Post ID: {entry.id}</div>
            <div class="entry-body">{html.escape(truncate_text(entry.body, BODY_DISPLAY_LIMIT))}</div>
        </div>
        """, unsafe_allow_html=True)

        # Importance toggle
        star_help = "Unmark as important" if important else "Mark as important"
        if st.button("★" if important else "☆", key=f"important_{entry.id}", help=star_help):
            controller.toggle_important(entry.id)
            st.session_state.needs_rerun = True

        if card_state.is_confirming:
            st.markdown(
                '<div class="confirm-box">Are you sure you want to delete this entry?</div>',
                unsafe_allow_html=True,
            )
            confirm_cols = st.columns(2)
            with confirm_cols[0]:
                if st.button("Cancel", key=f"cancel_delete_{entry.id}"):
                    card_state.cancel()
                    st.session_state.needs_rerun = True
            with confirm_cols[1]:
                if st.button("Confirm Delete", key=f"confirm_delete_{entry.id}", type="primary"):
                    with st.spinner("Deleting..."):
                        deleted = run_async(card_state.confirm(
                            lambda entry_id: controller.delete(entry_id, confirmed=True)
                        ))
                    if deleted:
                        st.session_state.card_states.pop(entry.id, None)
                    st.session_state.needs_rerun = True
            return

        action_cols = st.columns(2)
        with action_cols[0]:
            if st.button("✎ Edit", key=f"edit_{entry.id}", use_container_width=True):
                open_entry_form(entry)
        with action_cols[1]:
            if st.button("🗑 Delete", key=f"delete_{entry.id}", use_container_width=True):
                card_state.request()
                st.session_state.needs_rerun = True
