import pytest

from app import create_app
from config import Config
from errors import SummarizationError


class FakeSummarizer:
    """Stands in for the hosted model; records every prompt it receives."""

    def __init__(self, summary="Two companies reported total revenue of 3000.", error=None):
        self.summary = summary
        self.error = error
        self.prompts = []

    def summarize(self, text):
        self.prompts.append(text)
        if self.error is not None:
            raise self.error
        return self.summary


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def config(upload_dir):
    return Config(hf_api_key="test-key", upload_folder=str(upload_dir))


@pytest.fixture
def fake_summarizer():
    return FakeSummarizer()


@pytest.fixture
def client(config, fake_summarizer):
    app = create_app(config, summarizer=fake_summarizer)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def failing_client(config):
    summarizer = FakeSummarizer(error=SummarizationError("Unexpected response from summarization provider"))
    app = create_app(config, summarizer=summarizer)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def make_summarizer():
    return FakeSummarizer


@pytest.fixture
def make_client(config):
    def _make(summarizer):
        app = create_app(config, summarizer=summarizer)
        app.config["TESTING"] = True
        return app.test_client()
    return _make
