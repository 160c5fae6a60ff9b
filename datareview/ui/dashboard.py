"""Streamlit dashboard to search, inspect, and export records with validation findings."""
from pathlib import Path

import streamlit as st

# Allow running via "streamlit run datareview/ui/dashboard.py" without installing the package
# by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from datareview.core.logging import configure_logging
from datareview.ingestion.loader import fetch_records, resolve_source
from datareview.review.interaction import DismissTarget
from datareview.review.session import ReviewSession
from datareview.review.store import LoadPhase
from datareview.ui.review import TABLE_COLUMNS, detail_entries, issue_count, records_to_rows


def _session() -> ReviewSession:
    """Create the review session once per browser session and fetch the records."""

    if "review_session" not in st.session_state:
        session = ReviewSession()
        source = resolve_source()
        with st.spinner("Loading..."):
            session.load(lambda: fetch_records(source))
        st.session_state.review_session = session
    return st.session_state.review_session


def _rerun_app() -> None:
    """Trigger a Streamlit rerun, compatible with newer and older APIs."""

    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if not rerun:
        raise RuntimeError("Streamlit does not expose a rerun helper.")
    rerun()


def _detail_panel(session: ReviewSession) -> None:
    """Render the open record's findings with a close control."""

    record = session.interaction.active_detail_record
    if record is None:
        return

    with st.container(border=True):
        st.subheader(f"Errors for {record.name}")
        entries = detail_entries(record)
        if entries:
            st.dataframe(entries, use_container_width=True, hide_index=True)
        else:
            st.caption("No validation findings for this record.")
        if st.button("Close", key="close_detail"):
            session.click_detail(DismissTarget.CLOSE_BUTTON)
            _rerun_app()


def main() -> None:
    """Launch the data review page."""

    configure_logging()
    st.set_page_config(page_title="Data Review", layout="wide")
    st.title("Data Review")

    session = _session()
    if st.button("Reload data", type="secondary"):
        source = resolve_source()
        with st.spinner("Loading..."):
            session.reload(lambda: fetch_records(source))
        _rerun_app()

    if session.store.phase is LoadPhase.FETCH_FAILED:
        st.error(session.store.error)
        return
    if session.store.phase is LoadPhase.LOADING:
        st.info("Loading...")
        return

    query = st.text_input("Search", value=session.query, placeholder="Search records")
    if query != session.query:
        session.search(query)

    visible = session.visible_records
    artifact = session.export()
    st.download_button(
        "Export CSV",
        data=artifact.content,
        file_name=artifact.filename,
        mime=artifact.mime,
    )
    st.caption(f"Showing {len(visible)} of {len(session.store.records)} records")

    if not visible:
        st.info("No records match the current search.")
        _detail_panel(session)
        return

    st.dataframe(
        records_to_rows(visible),
        use_container_width=True,
        hide_index=True,
        column_order=TABLE_COLUMNS,
    )

    labels = {record.id: f"#{record.id} {record.name} ({issue_count(record)} issues)" for record in visible}
    picker_cols = st.columns([3, 1])
    with picker_cols[0]:
        selected_id = st.selectbox(
            "Record",
            options=list(labels),
            format_func=labels.get,
            label_visibility="collapsed",
        )
    with picker_cols[1]:
        if st.button("View errors", type="primary"):
            session.open_detail(selected_id)

    _detail_panel(session)


if __name__ == "__main__":
    main()
