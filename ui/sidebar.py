"""
Logic:
- Renders the sidebar with journal statistics and debug information
"""

import streamlit as st
import pandas as pd

def entries_to_dataframe(entries, important_ids=()):
    """
    Input: list of JournalEntry, ids flagged important
    Process: Builds one row per entry with an is_important column and body length
    Output: DataFrame
    """
    df = pd.DataFrame(
        [{'id': e.id, 'title': e.title, 'body': e.body, 'user_id': e.user_id} for e in entries],
        columns=['id', 'title', 'body', 'user_id'],
    )
    df['is_important'] = df['id'].isin(list(important_ids))
    df['body_length'] = df['body'].str.len()
    return df

def summarize_entries(df):
    """
    Input: DataFrame from entries_to_dataframe
    Process: Counts entries and important entries, averages body length
    Output: Dict with total, important and avg_body_length
    """
    if df.empty:
        return {'total': 0, 'important': 0, 'avg_body_length': 0}
    return {
        'total': len(df),
        'important': int(df['is_important'].sum()),
        'avg_body_length': int(round(df['body_length'].mean())),
    }

def render_sidebar(controller):
    """
    Input: JournalController
    Process: Renders sidebar with statistics and debug information
    Output: None
    """
    with st.sidebar:
        st.title("📊 Statistics")

        df = entries_to_dataframe(controller.entries, controller.important_ids)
        stats = summarize_entries(df)

        if stats['total']:
            st.markdown(f"""
            <div class="stat-card">
                <h3>Entries</h3>
                <p>Total: {stats['total']} | Important: {stats['important']}</p>
                <p>Average length: {stats['avg_body_length']} characters</p>
            </div>
            """, unsafe_allow_html=True)
        else:
            st.info("No entries yet. Add some entries to see statistics.")

        # Debug information in an expander
        with st.expander("Debug Info"):
            st.write(f"Status: {controller.status.value}")
            st.write(f"Endpoint: {controller.base_url}")
            st.write(f"Important ids: {sorted(controller.important_ids)}")
            if not df.empty:
                st.dataframe(df[['id', 'title', 'user_id', 'is_important']], hide_index=True)
