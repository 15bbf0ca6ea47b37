"""Username formatter and validator page."""
import streamlit as st

from src.services.username_service import (
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    process_username,
    summarize_usernames,
)


def render_username_page() -> None:
    """Render single-username checker and batch summary."""
    st.markdown("## 🧑‍🎓 Username Formatter & Validator")
    st.caption(
        f"Rules: {USERNAME_MIN_LENGTH}–{USERNAME_MAX_LENGTH} characters, starts with a letter, "
        "only letters, numbers and underscores."
    )

    raw = st.text_input("Username", key="username_input")
    if st.button("Check", key="username_check", type="primary"):
        result = process_username(raw)
        st.write(f'Cleaned: "{result.cleaned}"')
        if result.is_valid:
            st.success("✓ Valid username")
        else:
            for error in result.errors:
                st.error(error)

    st.markdown("### Batch Check")
    batch = st.text_area("One username per line", key="username_batch")
    if st.button("Check all", key="username_batch_check"):
        lines = [line for line in batch.splitlines() if line != ""]
        if not lines:
            st.warning("Enter at least one username.")
            return

        st.table([
            {
                "original": result.original,
                "cleaned": result.cleaned,
                "valid": "✓" if result.is_valid else "✗",
                "errors": " ".join(result.errors),
            }
            for result in (process_username(line) for line in lines)
        ])
        summary = summarize_usernames(lines)
        st.caption(
            f"Valid: {summary['valid']} / {summary['total']} "
            f"(success rate {summary['success_rate']:.1f}%)"
        )
