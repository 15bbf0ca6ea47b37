"""
Coursework Toolkit main application
Step tracker, attendee registry, movie catalog, username checker
"""
import logging
import streamlit as st

from src.services.fitness_tracker import WeeklyStepTracker
from src.services.sample_data import build_sample_catalog, build_sample_registry
from src.ui.attendee_page import render_attendee_page
from src.ui.movie_page import render_movie_page
from src.ui.reducers_page import render_reducers_page
from src.ui.tracker_page import render_tracker_page
from src.ui.username_page import render_username_page

logger = logging.getLogger(__name__)

PAGES = {
    "tracker": "🏃 Steps",
    "attendees": "🎟️ Attendees",
    "movies": "🎬 Movies",
    "usernames": "🧑‍🎓 Usernames",
    "reducers": "🐞 Reducers",
}


# Streamlit page configuration
st.set_page_config(
    page_title="Coursework Toolkit",
    page_icon="📋",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def initialize_session_state():
    """Initialize session state defaults."""
    if "current_page" not in st.session_state:
        st.session_state.current_page = "tracker"

    if "tracker" not in st.session_state:
        st.session_state.tracker = WeeklyStepTracker()

    if "registry" not in st.session_state:
        st.session_state.registry = build_sample_registry()

    if "catalog" not in st.session_state:
        st.session_state.catalog = build_sample_catalog()

    # Handle URL query parameter for direct page link
    if "url_params_processed" not in st.session_state:
        page = st.query_params.get("page")
        if page in PAGES:
            st.session_state.current_page = page
        st.session_state.url_params_processed = True


def apply_custom_css():
    """Apply custom CSS styles."""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        .stButton > button {
            border-radius: 12px;
            font-weight: 600;
        }

        .stButton > button[kind="primary"] {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
        }
        </style>
    """, unsafe_allow_html=True)


def render_navigation():
    """Render the navigation bar."""
    nav_cols = st.columns(len(PAGES), gap="small")

    for col, (page, label) in zip(nav_cols, PAGES.items()):
        with col:
            if st.button(label, use_container_width=True, key=f"nav_{page}"):
                st.session_state.current_page = page


def render_current_page():
    """Render the page selected in session state."""
    try:
        page = st.session_state.current_page

        if page == "tracker":
            render_tracker_page(st.session_state.tracker)

        elif page == "attendees":
            render_attendee_page(st.session_state.registry)

        elif page == "movies":
            render_movie_page(st.session_state.catalog)

        elif page == "usernames":
            render_username_page()

        elif page == "reducers":
            render_reducers_page()

        else:
            st.error(f"Unknown page: {page}")
            if st.button("Back"):
                st.session_state.current_page = "tracker"
                st.rerun()

    except Exception as e:
        # Error boundary
        logger.exception("Unhandled exception while rendering page")
        st.error("Something went wrong, please try again")

        with st.expander("🔍 Error details"):
            st.code(str(e))


def main():
    """Application entry point."""
    try:
        initialize_session_state()
        apply_custom_css()
        render_navigation()
        render_current_page()
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("The application hit an error, please reload the page")
        st.code(str(e))

        if st.button("🔄 Reset"):
            st.session_state.clear()
            st.rerun()


if __name__ == "__main__":
    main()
