import pytest

from graph_store.config import BACKEND_ENV_VAR, DOT_PREFIX_ENV_VAR


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    # Tests must not depend on the caller's shell configuration
    monkeypatch.delenv(BACKEND_ENV_VAR, raising=False)
    monkeypatch.delenv(DOT_PREFIX_ENV_VAR, raising=False)


@pytest.fixture(params=["list", "matrix"])
def backend(request):
    return request.param
