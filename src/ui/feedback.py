"""One-shot status messages that survive st.rerun()."""
import streamlit as st


def set_feedback(key: str, level: str, message: str) -> None:
    """Store a message to show on the next run of the page owning key."""
    st.session_state[key] = {"type": level, "message": message}


def render_feedback(key: str) -> None:
    """Show and clear the message stored under key, if any."""
    feedback = st.session_state.pop(key, None)
    if not feedback:
        return

    level = feedback.get("type")
    message = feedback.get("message", "")
    if level == "success":
        st.success(message)
    elif level == "error":
        st.error(message)
    elif message:
        st.info(message)
