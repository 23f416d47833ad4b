import pytest

from skincoach import gemini
from skincoach.app import app as flask_app


class FakeResponse:
    """Stands in for a GenerateContentResponse; ``text`` may be an exception to raise."""

    def __init__(self, text):
        self._text = text
        self.prompt_feedback = None

    @property
    def text(self):
        if isinstance(self._text, Exception):
            raise self._text
        return self._text


class FakeModel:
    model_name = "models/gemini-1.5-flash"

    def __init__(self, text="{}"):
        self.text = text
        self.calls = []

    def generate_content(self, parts, request_options=None):
        self.calls.append({"parts": parts, "request_options": request_options})
        return FakeResponse(self.text)


@pytest.fixture(autouse=True)
def reset_gemini_handle():
    gemini.reset_gemini_model()
    yield
    gemini.reset_gemini_model()


@pytest.fixture
def fake_model(monkeypatch):
    model = FakeModel()
    monkeypatch.setattr(gemini, "_model", model)
    return model


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setitem(flask_app.config, "TESTING", True)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
