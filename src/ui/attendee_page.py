"""Conference attendee management page."""
import streamlit as st

from src.models.attendee import TicketType
from src.services.attendee_service import AttendeeRegistry
from src.ui.feedback import render_feedback, set_feedback
from src.ui.html_utils import stat_card
from src.utils.exceptions import (
    CapacityExceededError,
    DuplicateError,
    NotFoundError,
    ValidationError,
)

FEEDBACK_KEY = "attendee_feedback"


def _render_statistics(registry: AttendeeRegistry) -> None:
    stats = registry.statistics()

    cols = st.columns(3, gap="small")
    with cols[0]:
        st.markdown(
            stat_card("Total Attendees", f"{stats['total']}/{stats['capacity']}"),
            unsafe_allow_html=True,
        )
    with cols[1]:
        st.markdown(stat_card("Remaining Capacity", stats["remaining"], "#22d3ee"), unsafe_allow_html=True)
    with cols[2]:
        status = "FULL" if stats["is_full"] else "ACCEPTING REGISTRATIONS"
        st.markdown(stat_card("Conference Status", status, "#fbbf24"), unsafe_allow_html=True)

    st.markdown("### Ticket Type Breakdown")
    st.table([
        {"ticket type": ticket_type, "count": entry["count"], "percentage": f"{entry['percentage']:.1f}%"}
        for ticket_type, entry in stats["breakdown"].items()
    ])


def _render_registration_form(registry: AttendeeRegistry) -> None:
    with st.form("attendee_register_form", clear_on_submit=True):
        name = st.text_input("Full name")
        email = st.text_input("Email")
        ticket_type = st.selectbox("Ticket type", options=TicketType.values())
        submitted = st.form_submit_button("Register", type="primary")

    if not submitted:
        return

    try:
        attendee = registry.register(name.strip(), email.strip(), ticket_type)
    except (ValidationError, CapacityExceededError, DuplicateError) as e:
        st.error(f"❌ {e}")
    else:
        set_feedback(
            FEEDBACK_KEY,
            "success",
            f"✓ Successfully registered: {attendee.name} ({attendee.ticket_type.value} Ticket)",
        )
        st.rerun()


def render_attendee_page(registry: AttendeeRegistry) -> None:
    """Render statistics, attendee list and registration/removal forms."""
    st.markdown("## 🎟️ Conference Attendees")

    render_feedback(FEEDBACK_KEY)

    _render_statistics(registry)

    st.markdown("### Registered Attendees")
    attendees = registry.list_attendees()
    if not attendees:
        st.info("No attendees registered yet.")
    else:
        st.table([
            {
                "id": attendee.id,
                "name": attendee.name,
                "email": attendee.email,
                "ticket type": attendee.ticket_type.value,
                "registered": attendee.registered_at,
            }
            for attendee in attendees
        ])

    st.markdown("### Register Attendee")
    _render_registration_form(registry)

    if attendees:
        st.markdown("### Remove Attendee")
        email = st.selectbox("Email", options=[attendee.email for attendee in attendees], key="attendee_remove_email")
        if st.button("Remove", key="attendee_remove_button"):
            try:
                removed = registry.remove_attendee(email)
            except NotFoundError as e:
                st.error(f"❌ {e}")
            else:
                set_feedback(FEEDBACK_KEY, "success", f"✓ Removed: {removed.name}")
                st.rerun()
