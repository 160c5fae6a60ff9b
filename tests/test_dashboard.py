"""Streamlit page behaviour driven through the app testing harness."""
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

ROOT = Path(__file__).resolve().parents[1]
DASHBOARD = ROOT / "datareview" / "ui" / "dashboard.py"


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch, dummy_source: Path) -> AppTest:
    monkeypatch.setenv("DATA_REVIEW_SOURCE", str(dummy_source))
    at = AppTest.from_file(str(DASHBOARD), default_timeout=30)
    at.run()
    return at


def _button(at: AppTest, label: str):
    return next(button for button in at.button if button.label == label)


def _subheaders(at: AppTest) -> list[str]:
    return [element.value for element in at.subheader]


def _captions(at: AppTest) -> list[str]:
    return [element.value for element in at.caption]


def test_page_lists_all_records(app: AppTest):
    assert not app.exception
    assert "Showing 6 of 6 records" in _captions(app)


def test_detail_panel_stays_open_when_search_matches_nothing(app: AppTest):
    _button(app, "View errors").click().run()
    assert "Errors for John Doe" in _subheaders(app)

    app.text_input[0].input("no-such-record").run()

    assert "Showing 0 of 6 records" in _captions(app)
    assert "Errors for John Doe" in _subheaders(app)


def test_reload_keeps_search_and_open_detail(app: AppTest):
    app.text_input[0].input("doe").run()
    _button(app, "View errors").click().run()

    _button(app, "Reload data").click().run()

    assert not app.exception
    assert "Showing 1 of 6 records" in _captions(app)
    assert "Errors for John Doe" in _subheaders(app)
    session = app.session_state["review_session"]
    assert session.interaction.active_detail_record in session.store.records


def test_table_includes_issue_messages(app: AppTest):
    table = app.dataframe[0].value
    assert "Issues" in table.columns
    assert "⚠️ email: Invalid email format" in list(table["Issues"])
