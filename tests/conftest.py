import json

import pytest

from hypercli.core.config import Settings


class FakeFetch:
    """Stands in for core.http.get_json: records URLs, replays a response or raises."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.kwargs = []

    def __call__(self, url, timeout=None, **kwargs):
        self.calls.append((url, timeout))
        self.kwargs.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def write_config(tmp_path):
    path = tmp_path / ".hyper.json"

    def _write(data):
        path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def settings(tmp_path):
    return Settings(
        config_path=tmp_path / ".hyper.json",
        registry_url="https://registry.example.com/",
        search_api_base="https://search.example.com/v2/search",
        app_path=str(tmp_path / "hyper-bin"),
        cwd=tmp_path,
    )


@pytest.fixture
def fake_fetch():
    return FakeFetch
