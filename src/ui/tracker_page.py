"""Weekly step tracker page."""
import streamlit as st

from src.models.day_record import DAYS_OF_WEEK
from src.services.fitness_tracker import WeeklyStepTracker
from src.ui.feedback import render_feedback, set_feedback
from src.ui.html_utils import stat_card
from src.utils.exceptions import ValidationError

FEEDBACK_KEY = "tracker_feedback"


def render_tracker_page(tracker: WeeklyStepTracker) -> None:
    """Render daily steps, weekly statistics and the update form."""
    st.markdown("## 🏃 Weekly Fitness Tracker")

    render_feedback(FEEDBACK_KEY)

    summary = tracker.summary()

    cols = st.columns(3, gap="small")
    with cols[0]:
        st.markdown(stat_card("Highest Steps", summary["highest"], "#22d3ee"), unsafe_allow_html=True)
    with cols[1]:
        st.markdown(stat_card("Lowest Steps", summary["lowest"], "#f87171"), unsafe_allow_html=True)
    with cols[2]:
        st.markdown(stat_card("Average Steps", summary["average"]), unsafe_allow_html=True)

    st.markdown("### Daily Steps")
    st.table([{"day": day, "steps": steps} for day, steps in summary["days"]])

    st.markdown(f"### Days Above Average ({summary['average']:.2f} steps)")
    if summary["above_average"]:
        for entry in summary["above_average"]:
            st.write(f"{entry.label}: {entry.value} steps")
    else:
        st.info("No days exceeded the average.")

    st.markdown("### Update Steps")
    with st.form("tracker_update_form"):
        day_index = st.selectbox(
            "Day",
            options=list(range(len(DAYS_OF_WEEK))),
            format_func=lambda index: DAYS_OF_WEEK[index],
        )
        steps = st.number_input("Steps", min_value=0, step=100, value=0)
        submitted = st.form_submit_button("Update", type="primary")

    if submitted:
        try:
            day = tracker.update_steps(int(day_index), int(steps))
        except ValidationError as e:
            st.error(f"❌ {e}")
        else:
            set_feedback(FEEDBACK_KEY, "success", f"Updated {day.day_name}: {day.steps} steps")
            st.rerun()
