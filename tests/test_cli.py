"""Tests for the structmark command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from structmark.cli import build_parser, main


@pytest.fixture
def article_file(tmp_path: Path) -> Path:
    path = tmp_path / "article.json"
    path.write_text(json.dumps({
        "@type": "Article",
        "headline": "CLI article",
        "url": "https://example.org/a",
        "author": {"@type": "Person", "name": "Jane"},
    }), encoding="utf-8")
    return path


@pytest.fixture
def invalid_file(tmp_path: Path) -> Path:
    path = tmp_path / "invalid.yaml"
    path.write_text("'@type': Article\nurl: not-a-url\ncolour: red\n", encoding="utf-8")
    return path


class TestRender:
    def test_json_ld_default(self, article_file: Path, capsys):
        main(["render", str(article_file)])
        data = json.loads(capsys.readouterr().out)
        assert data["@type"] == "Article"
        assert data["author"]["name"] == "Jane"

    def test_no_pretty(self, article_file: Path, capsys):
        main(["render", str(article_file), "--no-pretty"])
        out = capsys.readouterr().out
        assert out.startswith('{"@context":"https://schema.org","@type":"Article"')

    def test_script_tag(self, article_file: Path, capsys):
        main(["render", str(article_file), "--script-tag"])
        out = capsys.readouterr().out
        assert out.startswith('<script type="application/ld+json">')

    def test_microdata(self, article_file: Path, capsys):
        main(["render", str(article_file), "-f", "microdata", "--semantic"])
        out = capsys.readouterr().out
        assert out.startswith('<article itemscope itemtype="https://schema.org/Article">')
        assert '<h1 itemprop="headline">CLI article</h1>' in out

    def test_rdfa_with_container(self, article_file: Path, capsys):
        main(["render", str(article_file), "-f", "rdfa", "--container", "section"])
        assert capsys.readouterr().out.startswith('<section vocab="https://schema.org/" typeof="Article">')

    def test_strict_rejects_invalid(self, invalid_file: Path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["render", str(invalid_file), "--strict"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Refusing to render invalid Article" in err
        assert "Required property 'headline' is missing" in err

    def test_invalid_renders_without_strict(self, invalid_file: Path, capsys):
        main(["render", str(invalid_file)])
        assert json.loads(capsys.readouterr().out)["url"] == "not-a-url"

    def test_missing_file(self, tmp_path: Path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["render", str(tmp_path / "nope.json")])
        assert exc_info.value.code == 2
        assert "Entity file not found" in capsys.readouterr().err

    @pytest.mark.parametrize("name, content", [
        ("bad.json", "{not json"),
        ("bad.yaml", "a: [1, 2\n"),
    ])
    def test_malformed_file(self, tmp_path: Path, capsys, name: str, content: str):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        for command in ("render", "validate", "debug"):
            with pytest.raises(SystemExit) as exc_info:
                main([command, str(path)])
            assert exc_info.value.code == 2
            assert "Cannot parse entity file" in capsys.readouterr().err

    def test_unknown_format_is_rejected_by_parser(self, article_file: Path):
        with pytest.raises(SystemExit):
            main(["render", str(article_file), "-f", "turtle"])


class TestValidate:
    def test_valid(self, article_file: Path, capsys):
        main(["validate", str(article_file)])
        assert capsys.readouterr().out.startswith("Article: OK (0 error(s), 0 warning(s))")

    def test_invalid(self, invalid_file: Path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["validate", str(invalid_file)])
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert out.startswith("Article: INVALID (2 error(s), 1 warning(s))")
        assert "  error   [REQUIRED_PROPERTY_MISSING] Required property 'headline' is missing" in out
        assert "  warning [UNKNOWN_PROPERTY] Unknown property 'colour' for this schema type" in out

    def test_json_output(self, invalid_file: Path, capsys):
        with pytest.raises(SystemExit):
            main(["validate", str(invalid_file), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["valid"] is False
        assert data["errorCount"] == 2
        assert data["warningCount"] == 1

    def test_stop_on_first_error(self, invalid_file: Path, capsys):
        with pytest.raises(SystemExit):
            main(["validate", str(invalid_file), "--stop-on-first-error"])
        assert "(1 error(s), 0 warning(s))" in capsys.readouterr().out


class TestDebugAndTypes:
    def test_debug(self, article_file: Path, capsys):
        main(["debug", str(article_file)])
        out = capsys.readouterr().out
        assert out.startswith("=== Schema Debug Information ===")
        assert "  Nested Types: Person" in out

    def test_types(self, capsys):
        main(["types"])
        lines = capsys.readouterr().out.splitlines()
        assert [line.split()[0] for line in lines] == ["Article", "Organization", "Person", "Thing"]
        assert "required: headline" in lines[0]

    def test_no_command_prints_help(self, capsys):
        main([])
        assert "usage: structmark" in capsys.readouterr().out

    def test_parser_defaults(self):
        args = build_parser().parse_args(["render", "x.json"])
        assert args.format == "json-ld"
        assert args.strict is False
