"""Movie collection page."""
import streamlit as st

from src.services.movie_service import MovieCatalog
from src.ui.feedback import render_feedback, set_feedback
from src.ui.html_utils import breakdown_rows, stat_card
from src.utils.exceptions import DuplicateError, NotFoundError, ValidationError

FEEDBACK_KEY = "movie_feedback"


def _movie_rows(movies):
    return [
        {"title": movie.title, "year": movie.year, "director": movie.director, "genre": movie.genre}
        for movie in movies
    ]


def _render_statistics(catalog: MovieCatalog) -> None:
    min_year, max_year = catalog.year_range()

    cols = st.columns(2, gap="small")
    with cols[0]:
        st.markdown(stat_card("Total Movies", len(catalog)), unsafe_allow_html=True)
    with cols[1]:
        st.markdown(stat_card("Year Range", f"{min_year} - {max_year}", "#22d3ee"), unsafe_allow_html=True)

    st.markdown("### Movies by Genre")
    st.table(breakdown_rows(catalog.genre_counts()))

    st.markdown("### Directors with Multiple Films")
    multiple = catalog.directors_with_multiple_films()
    if multiple:
        st.table([{"director": director, "movies": count} for director, count in multiple.items()])
    else:
        st.info("None (each director has only one film)")


def _render_search(catalog: MovieCatalog) -> None:
    st.markdown("### Search")
    search_field = st.radio("Search by", options=["director", "genre"], horizontal=True)
    term = st.text_input("Search term", key="movie_search_term")
    if st.button("Search", key="movie_search_button"):
        try:
            results = catalog.search_by_field(search_field, term)
        except ValidationError as e:
            st.error(f"❌ {e}")
            return
        if results:
            st.caption(f"Found: {len(results)} movie(s)")
            st.table(_movie_rows(results))
        else:
            st.info(f'No movies found by {search_field}: "{term}"')


def _render_add_form(catalog: MovieCatalog) -> None:
    st.markdown("### Add Movie")
    with st.form("movie_add_form", clear_on_submit=True):
        title = st.text_input("Title")
        director = st.text_input("Director")
        genre = st.text_input("Genre")
        year = st.text_input("Year")
        submitted = st.form_submit_button("Add", type="primary")

    if not submitted:
        return

    try:
        movie = catalog.add_movie(title.strip(), director.strip(), genre.strip(), year)
    except (ValidationError, DuplicateError) as e:
        st.error(f"❌ {e}")
    else:
        set_feedback(
            FEEDBACK_KEY,
            "success",
            f'✓ Added: "{movie.title}" ({movie.year}) - Director: {movie.director}',
        )
        st.rerun()


def render_movie_page(catalog: MovieCatalog) -> None:
    """Render the catalog listing, statistics, search and edit forms."""
    st.markdown("## 🎬 Movie Collection")

    render_feedback(FEEDBACK_KEY)

    movies = catalog.list_movies()
    if not movies:
        st.info("No movies in your collection yet.")
    else:
        _render_statistics(catalog)
        st.markdown("### All Movies")
        st.table(_movie_rows(movies))
        _render_search(catalog)

    _render_add_form(catalog)

    if movies:
        st.markdown("### Remove Movie")
        title = st.selectbox("Title", options=[movie.title for movie in movies], key="movie_remove_title")
        if st.button("Remove", key="movie_remove_button"):
            try:
                removed = catalog.remove_movie(title)
            except NotFoundError as e:
                st.error(f"❌ {e}")
            else:
                set_feedback(FEEDBACK_KEY, "success", f'✓ Removed: "{removed.title}"')
                st.rerun()
