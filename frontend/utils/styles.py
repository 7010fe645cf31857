"""
Global styles and CSS for the console UI.
Dark theme with MongoDB green accents.
"""

COLORS = {
    "bg_primary": "#0d1117",
    "bg_secondary": "#161b22",
    "bg_card": "#21262d",
    "bg_hover": "#30363d",
    "border": "#30363d",
    "text_primary": "#f0f6fc",
    "text_secondary": "#8b949e",
    "text_muted": "#6e7681",
    "accent_green": "#3fb950",
    "accent_red": "#f85149",
    "accent_blue": "#58a6ff",
}


def get_global_css() -> str:
    """Return global CSS for dark theme styling."""
    return f"""
    <style>
        .status-indicator {{
            display: inline-block;
            width: 10px;
            height: 10px;
            border-radius: 50%;
            margin-right: 8px;
            background: {COLORS['accent_red']};
        }}

        .status-indicator.connected {{
            background: {COLORS['accent_green']};
        }}

        .status-text {{
            color: {COLORS['text_secondary']};
            font-size: 13px;
            font-weight: 600;
        }}

        .db-size {{
            color: {COLORS['text_muted']};
            font-size: 11px;
        }}

        .current-path {{
            color: {COLORS['text_secondary']};
            font-size: 14px;
            margin-bottom: 12px;
        }}

        .current-path strong {{
            color: {COLORS['text_primary']};
        }}

        .no-data {{
            color: {COLORS['text_muted']};
            font-style: italic;
            padding: 8px 0;
        }}
    </style>
    """


def status_badge(connected: bool, label: str) -> str:
    """Connection status indicator markup."""
    css_class = "status-indicator connected" if connected else "status-indicator"
    return f"<span class='{css_class}'></span><span class='status-text'>{label}</span>"


def inject_styles():
    """Inject global styles into the Streamlit app."""
    import streamlit as st
    st.markdown(get_global_css(), unsafe_allow_html=True)
