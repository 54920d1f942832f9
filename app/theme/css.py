"""Custom CSS for the F1-inspired dark theme."""

from __future__ import annotations

import streamlit as st


def inject_theme() -> None:
    """Inject all custom CSS into the Streamlit page."""
    st.markdown(
        """
    <style>
    /* ---- Page background ---- */
    .stApp {
        background: #121212;
        color: #E0E0E0;
    }
    .block-container {
        padding-top: 1rem;
        padding-bottom: 2rem;
        max-width: 1500px;
    }

    /* ---- Hide default Streamlit header/footer ---- */
    header[data-testid="stHeader"] { background: transparent; }
    footer { display: none; }

    /* ---- Header row ---- */
    .app-title {
        font-size: 1.6rem;
        font-weight: 700;
        color: #E5E7EB;
        margin: 0.2rem 0 0.6rem 0;
    }

    /* ---- Controls ---- */
    .form-button-spacer { height: 1.75rem; }
    div[data-testid="stFormSubmitButton"] button {
        background: #E10600;
        border: none;
        color: #FFFFFF;
    }
    div[data-testid="stTextInput"] input,
    div[data-testid="stNumberInput"] input {
        background: #222222;
        color: #FFFFFF;
        border: 1px solid #444444;
    }

    /* ---- Error banner ---- */
    .fetch-error {
        background: #4A1010;
        padding: 0.6rem 0.9rem;
        margin-top: 0.6rem;
        border-radius: 6px;
    }

    /* ---- Driver legend ---- */
    .driver-legend {
        display: flex;
        flex-wrap: wrap;
        gap: 0.5rem;
        margin: 0.6rem 0 0.4rem 0;
    }
    .driver-chip {
        display: inline-flex;
        align-items: center;
        gap: 0.45rem;
        padding: 0.3rem 0.7rem;
        border: 1px solid;
        border-radius: 999px;
        font-size: 0.85rem;
    }
    .driver-swatch {
        width: 0.7rem;
        height: 0.7rem;
        border-radius: 50%;
    }
    .driver-lap {
        color: #9CA3AF;
        font-variant-numeric: tabular-nums;
    }

    /* ---- Chart caption ---- */
    .chart-caption {
        color: #9CA3AF;
        font-size: 0.88rem;
        margin-bottom: 0.4rem;
        line-height: 1.5;
    }

    /* ---- Section sub-header ---- */
    .section-header {
        color: #E5E7EB;
        font-size: 1.05rem;
        font-weight: 700;
        margin-top: 1.0rem;
        margin-bottom: 0.3rem;
        padding-bottom: 0.3rem;
        border-bottom: 1px solid rgba(255,255,255,0.08);
    }

    /* ---- Footer ---- */
    .app-footer {
        text-align: center;
        color: #4B5563;
        font-size: 0.75rem;
        margin-top: 2rem;
        padding-top: 1rem;
        border-top: 1px solid #1F2937;
    }
    </style>
    """,
        unsafe_allow_html=True,
    )
