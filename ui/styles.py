"""
Logic:
- Provides CSS styling for the Journal app
- Includes styles for entry cards, the importance highlight, the form and the sidebar
"""

import streamlit as st

def apply_custom_css():
    """
    Input: None
    Process: Applies custom CSS styling to the Streamlit app
    Output: None
    """
    st.markdown("""
    <style>
        /* Main container styling */
        .main .block-container {
            padding-top: 1rem;
            padding-bottom: 1rem;
        }

        /* Entry card */
        .entry-card {
            padding: 0.75rem 0.25rem 0.25rem 0.25rem;
            border-radius: 8px;
            animation: fadeIn 0.3s ease-out;
        }
        .entry-card.important {
            background-color: rgba(250, 204, 21, 0.15);
            box-shadow: 0 0 0 3px rgba(250, 204, 21, 0.5);
            padding-left: 0.75rem;
            padding-right: 0.75rem;
        }
        .entry-title {
            font-size: 1.2rem;
            font-weight: 600;
            margin-bottom: 0.25rem;
            word-break: break-word;
        }
        .entry-meta {
            font-size: 0.8rem;
            color: #888;
            margin-bottom: 0.75rem;
        }
        .entry-body {
            line-height: 1.5;
            word-break: break-word;
        }

        /* Delete confirmation */
        .confirm-box {
            background-color: rgba(239, 68, 68, 0.12);
            border: 1px solid rgba(239, 68, 68, 0.4);
            border-radius: 6px;
            padding: 0.5rem;
            font-size: 0.85rem;
            margin-bottom: 0.5rem;
        }

        /* Empty state */
        .empty-state {
            text-align: center;
            padding: 3rem;
            border: 4px dashed rgba(128, 128, 128, 0.3);
            border-radius: 12px;
            color: #888;
        }

        /* Statistics cards */
        .stat-card {
            background-color: rgba(255, 255, 255, 0.05);
            border-radius: 6px;
            padding: 0.75rem;
            margin-bottom: 0.75rem;
        }
        .stat-card h3 {
            font-size: 1rem;
            margin: 0 0 0.5rem 0;
        }
        .stat-card p {
            margin: 0.2rem 0;
            font-size: 0.85rem;
        }

        /* Animation for new entries */
        @keyframes fadeIn {
            from { opacity: 0; transform: translateY(5px); }
            to { opacity: 1; transform: translateY(0); }
        }
    </style>
    """, unsafe_allow_html=True)
