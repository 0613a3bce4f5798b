"""Tests for compiler configuration."""

import pytest

from cygen.config import CompilerConfig


def test_defaults():
    config = CompilerConfig()
    assert config.indent == "  "
    assert config.diagnostic_threshold == 10
    assert config.include_reference_types is True


def test_from_env(monkeypatch):
    monkeypatch.setenv("CYGEN_INDENT_WIDTH", "4")
    monkeypatch.setenv("CYGEN_DIAGNOSTIC_THRESHOLD", "3")
    monkeypatch.setenv("CYGEN_REFERENCE_TYPES", "false")
    
    config = CompilerConfig.from_env()
    assert config.indent == "    "
    assert config.diagnostic_threshold == 3
    assert config.include_reference_types is False


def test_from_env_defaults(monkeypatch):
    for var in ("CYGEN_INDENT_WIDTH", "CYGEN_DIAGNOSTIC_THRESHOLD", "CYGEN_REFERENCE_TYPES"):
        monkeypatch.delenv(var, raising=False)
    assert CompilerConfig.from_env() == CompilerConfig()


def test_from_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("CYGEN_DIAGNOSTIC_THRESHOLD", "ten")
    with pytest.raises(ValueError):
        CompilerConfig.from_env()
