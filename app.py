"""
Logic:
- Read API settings from Streamlit secrets (defaults to the JSONPlaceholder posts endpoint)
- Load the first 10 journal entries on start and show them as cards
- Create, edit and delete entries against the remote endpoint with retrying requests
- Flag entries as important for this session only (never sent to the server)
- Delete asks for confirmation on the card before anything is sent
- Sidebar with simple statistics
"""

import logging

import streamlit as st
from api.client_init import get_api_settings, get_http_session
from state.controller import JournalController
from ui.styles import apply_custom_css
from ui.sidebar import render_sidebar
from ui.journal_components import display_entry_form, display_entry_list, open_entry_form

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Page config
st.set_page_config(
    page_title="My Simple Journal",
    page_icon="📖",
    layout="wide"
)

# Apply custom CSS
apply_custom_css()

# Initialize session state variables
def initialize_session_state():
    """
    Input: None
    Process: Initialize all session state variables if they don't exist
    Output: None
    """
    if 'controller' not in st.session_state:
        settings = get_api_settings()
        st.session_state.controller = JournalController(
            base_url=settings['base_url'],
            session=get_http_session(),
            timeout=settings['timeout'],
            list_limit=settings['list_limit'],
        )
    if 'form_state' not in st.session_state:
        st.session_state.form_state = None
    if 'card_states' not in st.session_state:
        st.session_state.card_states = {}
    if 'needs_rerun' not in st.session_state:
        st.session_state.needs_rerun = False

try:
    initialize_session_state()
    controller = st.session_state.controller

    # Header
    col1, col2 = st.columns([5, 1])
    with col1:
        st.title("📖 My Simple Journal")
    with col2:
        if st.button("＋ New Entry", key="new_entry", type="primary",
                     disabled=st.session_state.form_state is not None):
            open_entry_form()

    # Create/edit form (conditionally displayed)
    display_entry_form(controller)

    # Entry list
    display_entry_list(controller)

    # Render sidebar after the list so it reflects this run's changes
    render_sidebar(controller)

    # Perform a single rerun at the very end if needed
    if st.session_state.needs_rerun:
        st.session_state.needs_rerun = False
        st.rerun()

except Exception as e:
    st.error(f"An unexpected error occurred: {str(e)}")
    st.info("Please try refreshing the page. If the problem persists, contact support.")
