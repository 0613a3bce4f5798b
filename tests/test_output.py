"""Tests for spec writers."""

from cygen.output import FileSpecWriter, InMemoryWriter, SpecWriter, spec_filename


def test_file_writer_creates_directories(tmp_path):
    target = tmp_path / "cypress" / "integration" / "login.spec.ts"
    FileSpecWriter().write(target, "describe();\n")
    assert target.read_text(encoding="utf-8") == "describe();\n"


def test_writers_satisfy_protocol():
    assert isinstance(FileSpecWriter(), SpecWriter)
    assert isinstance(InMemoryWriter(), SpecWriter)


def test_spec_filename():
    assert spec_filename("Log in!") == "log-in.spec.ts"
    assert spec_filename("visit example website") == "visit-example-website.spec.ts"
    assert spec_filename("???") == "scenario.spec.ts"
