from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from services.swapi_service import SwapiService, SwapiError

APP_PATH = str(Path(__file__).resolve().parent.parent / "streamlit_app.py")


@pytest.fixture
def fake_fetch(monkeypatch):
    """Replace the network call; returns the list of recorded calls."""
    calls = []

    def install(result=(), error=None):
        async def fetch_people(self):
            calls.append(self.url)
            if error is not None:
                raise error
            return result

        monkeypatch.setattr(SwapiService, "fetch_people", fetch_people)
        return calls

    return install


def _headers(at):
    return [h.value for h in at.header]


def test_renders_loaded_characters(fake_fetch, people):
    fake_fetch(result=people)

    at = AppTest.from_file(APP_PATH).run()

    assert not at.exception
    assert _headers(at) == ["Star Wars App", "List of Characters"]
    assert [t.value for t in at.text] == [
        "Name: Luke Skywalker, birth_year 19BBY",
        "Name: C-3PO, birth_year 112BBY",
    ]


def test_empty_results_render_heading_only(fake_fetch):
    fake_fetch(result=())

    at = AppTest.from_file(APP_PATH).run()

    assert not at.exception
    assert _headers(at) == ["Star Wars App", "List of Characters"]
    assert len(at.text) == 0


def test_failed_fetch_shows_no_list(fake_fetch):
    fake_fetch(error=SwapiError("Could not reach SWAPI"))

    at = AppTest.from_file(APP_PATH).run()

    assert not at.exception
    assert _headers(at) == ["Star Wars App"]
    assert len(at.text) == 0


def test_rerun_does_not_fetch_again(fake_fetch, people):
    calls = fake_fetch(result=people)

    at = AppTest.from_file(APP_PATH).run()
    at.run()

    assert len(calls) == 1
    assert _headers(at) == ["Star Wars App", "List of Characters"]


def _special_characters_script():
    from models.character import CharacterRecord
    from views.components.character_list import render_character_list

    render_character_list([
        CharacterRecord(name="Han $x^2$ Solo | ~~pilot~~", birth_year="&amp; :star: 29BBY"),
        CharacterRecord(name="Kylo_Ren *", birth_year="5ABY"),
    ])


def test_list_lines_render_verbatim():
    at = AppTest.from_function(_special_characters_script).run()

    assert not at.exception
    assert len(at.markdown) == 0
    assert [t.value for t in at.text] == [
        "Name: Han $x^2$ Solo | ~~pilot~~, birth_year &amp; :star: 29BBY",
        "Name: Kylo_Ren *, birth_year 5ABY",
    ]
