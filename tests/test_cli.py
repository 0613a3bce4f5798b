"""
Tests for the cygen command line.
"""

import json

import pytest

from cygen.cli import main


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / "login.json"
    path.write_text(json.dumps({
        "name": "Login flow",
        "given": "<visit_url http://x>",
        "when": ["<input_username value bob>", "<click_#go>"],
        "then": ["<assert_#title has text Hi>"],
    }))
    return path


def test_compile_to_file(scenario_file, tmp_path, capsys):
    out = tmp_path / "out" / "login.spec.ts"
    assert main(["compile", str(scenario_file), "-o", str(out)]) == 0
    
    assert "cy.get('#go').click()" in out.read_text(encoding="utf-8")
    assert "[PASS] Login flow" in capsys.readouterr().out


def test_compile_many_into_directory(tmp_path):
    source = tmp_path / "suite.json"
    source.write_text(json.dumps([
        {"name": "One", "given": "<visit_url http://a>", "when": "<click_#a>", "then": "<assert_#a is checked>"},
        {"name": "Two", "given": "<visit_url http://b>", "when": "<click_#b>", "then": "<assert_#b is unchecked>"},
    ]))
    out_dir = tmp_path / "specs"
    
    assert main(["compile", str(source), "-o", str(out_dir)]) == 0
    assert (out_dir / "one.spec.ts").exists()
    assert (out_dir / "two.spec.ts").exists()


def test_compile_stdout(scenario_file, capsys):
    assert main(["compile", str(scenario_file), "--stdout"]) == 0
    assert "describe('Login flow', () => {" in capsys.readouterr().out


def test_compile_invalid_placeholder(tmp_path, capsys):
    source = tmp_path / "bad.json"
    source.write_text(json.dumps({
        "name": "Bad",
        "given": "<visit_url http://x>",
        "when": ["<clck_#go>"],
        "then": ["<assert_#t has text Hi>"],
    }))
    
    assert main(["compile", str(source), "--stdout"]) == 1
    assert "[FAIL] Bad: Invalid" in capsys.readouterr().out


def test_compile_continues_after_invalid_scenario(tmp_path, capsys):
    source = tmp_path / "suite.json"
    source.write_text(json.dumps([
        {"name": "Bad", "given": "<visit_url http://a>", "when": "<clck_#go>", "then": "<assert_#a is checked>"},
        {"name": "Good", "given": "<visit_url http://b>", "when": "<click_#b>", "then": "<assert_#b is unchecked>"},
    ]))
    out_dir = tmp_path / "specs"
    
    assert main(["compile", str(source), "-o", str(out_dir)]) == 1
    
    output = capsys.readouterr().out
    assert "[FAIL] Bad:" in output
    assert "[PASS] Good" in output
    assert not (out_dir / "bad.spec.ts").exists()
    assert (out_dir / "good.spec.ts").exists()


def test_check_reports_suggestion(tmp_path, capsys):
    source = tmp_path / "typo.json"
    source.write_text(json.dumps({
        "name": "Typo",
        "given": "<visit_url http://x>",
        "when": ["<asert_[css_name] has text [text]>"],
        "then": ["<assert_#t has text Hi>"],
    }))
    
    assert main(["check", str(source)]) == 1
    output = capsys.readouterr().out
    assert "[FAIL] Typo (when)" in output
    assert "<assert_[css_name] has text [text]>" in output


def test_check_valid(scenario_file, capsys):
    assert main(["check", str(scenario_file)]) == 0
    assert "[PASS] 1 scenario(s) valid" in capsys.readouterr().out


def test_templates(capsys):
    assert main(["templates"]) == 0
    output = capsys.readouterr().out
    assert "<click_[selector]>" in output
    assert "<alert_contains text [text]>" in output


def test_missing_file(capsys):
    assert main(["compile", "nonexistent.json"]) == 1
    assert "not found" in capsys.readouterr().out.lower()


def test_empty_when_is_structural_error(tmp_path, capsys):
    source = tmp_path / "empty.json"
    source.write_text(json.dumps({
        "name": "Empty", "given": "<visit_url http://x>", "when": [], "then": ["<click_#a>"],
    }))
    assert main(["compile", str(source), "--stdout"]) == 1
    assert capsys.readouterr().out == ""
