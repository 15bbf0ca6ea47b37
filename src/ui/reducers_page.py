"""Playground for the corrected reducer functions."""
import streamlit as st

from src.utils.exceptions import EmptyInputError
from src.utils.reducers import check_pass, longest_word, sum_average


def parse_numbers(text: str):
    """Parse comma-separated numbers; raises ValueError on bad input."""
    return [float(part) for part in text.split(",") if part.strip()]


def render_reducers_page() -> None:
    st.markdown("## 🐞 Corrected Reducers")

    st.markdown("### Average")
    numbers_text = st.text_input("Numbers (comma-separated)", value="10,20,30", key="reducers_numbers")
    try:
        st.write(f"Average: {sum_average(parse_numbers(numbers_text))}")
    except (EmptyInputError, ValueError) as e:
        st.error(f"❌ {e}")

    st.markdown("### Longest Word")
    sentence = st.text_input("Sentence", value="JavaScript is very powerful language", key="reducers_sentence")
    st.write(f"Longest word: {longest_word(sentence)}")

    st.markdown("### Pass / Fail")
    marks_text = st.text_input("Marks (comma-separated)", value="20,30,40", key="reducers_marks")
    pass_mark = st.number_input("Pass mark", value=50, key="reducers_pass_mark")
    try:
        marks = parse_numbers(marks_text)
    except ValueError as e:
        st.error(f"❌ {e}")
    else:
        st.write(f"Result: {check_pass(marks, pass_mark)}")
