import pytest

from graph_store.config import (
    BACKEND_ENV_VAR, BackendKind, default_backend, dot_node_prefix, parse_backend
)
from graph_store.graph import Graph


class TestBackendConfig:
    def test_default_is_list(self):
        assert default_backend() is BackendKind.LIST
        assert Graph.with_default_weights(2, True).backend_kind is BackendKind.LIST

    def test_environment_selects_matrix(self, monkeypatch):
        monkeypatch.setenv(BACKEND_ENV_VAR, "Matrix")
        assert default_backend() is BackendKind.MATRIX
        assert Graph.with_default_weights(2, True).backend_kind is BackendKind.MATRIX

    def test_explicit_backend_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv(BACKEND_ENV_VAR, "matrix")
        assert Graph.with_default_weights(2, True, backend="list").backend_kind is BackendKind.LIST

    def test_empty_environment_value_uses_default(self, monkeypatch):
        monkeypatch.setenv(BACKEND_ENV_VAR, "")
        assert default_backend() is BackendKind.LIST

    def test_invalid_environment_value_raises(self, monkeypatch):
        monkeypatch.setenv(BACKEND_ENV_VAR, "hash")
        with pytest.raises(ValueError, match="Unknown backend 'hash'; expected one of: list, matrix."):
            Graph.with_default_weights(2, True)

    @pytest.mark.parametrize("value,expected", [
        ("list", BackendKind.LIST),
        (" MATRIX ", BackendKind.MATRIX),
        (BackendKind.MATRIX, BackendKind.MATRIX),
    ])
    def test_parse_backend(self, value, expected):
        assert parse_backend(value) is expected


class TestDotPrefixConfig:
    def test_default_prefix(self):
        assert dot_node_prefix() == "n"
