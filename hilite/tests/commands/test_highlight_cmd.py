"""Tests for the highlight / guess / styledefs / listing commands."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import CLexer

from hilite.cli import main
from hilite.core.config import default_config, save_config

MAIN_C = Path(__file__).resolve().parents[1] / "fixtures" / "samples" / "main.c"


@pytest.fixture()
def config_path(tmp_path):
    return tmp_path / ".hilite" / "config.json"


def _run(config_path, *argv):
    main(["--config", str(config_path), *argv])


# ===========================================================================
# highlight
# ===========================================================================


class TestHighlight:
    def test_guesses_lexer_from_filename(self, config_path, capsys, read_sample):
        _run(config_path, "highlight", str(MAIN_C), "-f", "html")
        expected = pygments_highlight(read_sample("main.c"), CLexer(), HtmlFormatter())
        assert capsys.readouterr().out == expected

    def test_options_propagate(self, config_path, tmp_path, capsys):
        src = tmp_path / "tabs.txt"
        src.write_text("a\tb")
        _run(config_path, "highlight", str(src), "-l", "text", "-f", "text",
             "-O", "tabsize=4", "-P", "ensurenl=false")
        assert capsys.readouterr().out == "a   b"

    def test_config_defaults_apply(self, config_path, tmp_path, capsys):
        cfg = default_config()
        cfg["default_lexer"] = "text"
        cfg["default_formatter"] = "text"
        cfg["lexer_options"] = {"ensurenl": False, "tabsize": 2}
        save_config(cfg, config_path)
        src = tmp_path / "tabs.c"
        src.write_text("a\tb")
        _run(config_path, "highlight", str(src))
        assert capsys.readouterr().out == "a b"

    def test_flags_override_config_options(self, config_path, tmp_path, capsys):
        cfg = default_config()
        cfg["lexer_options"] = {"ensurenl": False, "tabsize": 2}
        save_config(cfg, config_path)
        src = tmp_path / "tabs.txt"
        src.write_text("a\tb")
        _run(config_path, "highlight", str(src), "-l", "text", "-f", "text", "-O", "tabsize=4")
        assert capsys.readouterr().out == "a   b"

    def test_output_file_picks_formatter(self, config_path, tmp_path, capsys, read_sample):
        out = tmp_path / "main.html"
        _run(config_path, "highlight", str(MAIN_C), "-o", str(out))
        expected = pygments_highlight(read_sample("main.c"), CLexer(), HtmlFormatter())
        assert out.read_text(encoding="utf-8") == expected
        assert "Wrote" in capsys.readouterr().err

    def test_stdin_is_guessed(self, config_path, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("#!/usr/bin/env python\nprint(1)\n"))
        _run(config_path, "highlight", "-", "-f", "text")
        assert capsys.readouterr().out == "#!/usr/bin/env python\nprint(1)\n"

    def test_unknown_extension_fails_without_guess(self, config_path, tmp_path, capsys):
        src = tmp_path / "notes.poopies"
        src.write_text("hello world")
        with pytest.raises(SystemExit) as excinfo:
            _run(config_path, "highlight", str(src), "-f", "text")
        assert excinfo.value.code == 1
        assert "Unknown lexer: 'notes.poopies'" in capsys.readouterr().err

    def test_unknown_extension_with_guess(self, config_path, tmp_path, capsys):
        src = tmp_path / "notes.poopies"
        src.write_text("hello world")
        _run(config_path, "highlight", str(src), "-f", "text", "--guess")
        assert capsys.readouterr().out.strip() == "hello world"

    def test_unknown_formatter(self, config_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _run(config_path, "highlight", str(MAIN_C), "-f", "poopies")
        assert excinfo.value.code == 1
        assert "Unknown formatter: 'poopies'" in capsys.readouterr().err

    def test_missing_input_file(self, config_path, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _run(config_path, "highlight", str(tmp_path / "missing.c"))
        assert excinfo.value.code == 1
        assert "could not read" in capsys.readouterr().err

    def test_numeric_list_option(self, config_path, capsys, read_sample):
        _run(config_path, "highlight", str(MAIN_C), "-f", "html", "-O", "hl_lines=3")
        out = capsys.readouterr().out
        expected = pygments_highlight(read_sample("main.c"), CLexer(), HtmlFormatter(hl_lines="3"))
        assert out == expected
        assert '<span class="hll">' in out

    @pytest.mark.parametrize("flag", ["-O", "-P"])
    def test_malformed_option_exits_1(self, config_path, capsys, flag):
        with pytest.raises(SystemExit) as excinfo:
            _run(config_path, "highlight", str(MAIN_C), "-f", "html", flag, "=x")
        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "Expected key=value option, got: '=x'" in err
        assert "Traceback" not in err

    def test_undecodable_input_exits_1(self, config_path, tmp_path, capsys):
        src = tmp_path / "latin.txt"
        src.write_bytes("café\n".encode("latin-1"))
        with pytest.raises(SystemExit) as excinfo:
            _run(config_path, "highlight", str(src), "-l", "text", "-f", "text")
        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        assert "could not decode" in captured.err
        assert "inencoding" in captured.err
        assert captured.out == ""

    def test_inencoding_option_decodes_input(self, config_path, tmp_path, capsys):
        src = tmp_path / "latin.txt"
        src.write_bytes("café\n".encode("latin-1"))
        _run(config_path, "highlight", str(src), "-l", "text", "-f", "text",
             "-P", "inencoding=latin-1")
        assert capsys.readouterr().out == "café\n"

    def test_unknown_input_encoding(self, config_path, tmp_path, capsys):
        src = tmp_path / "plain.txt"
        src.write_text("plain\n")
        with pytest.raises(SystemExit) as excinfo:
            _run(config_path, "highlight", str(src), "-l", "text", "-f", "text",
                 "-P", "inencoding=poopies")
        assert excinfo.value.code == 1
        assert "could not read" in capsys.readouterr().err


# ===========================================================================
# guess / styledefs / listings
# ===========================================================================


class TestGuess:
    def test_file(self, config_path, capsys):
        _run(config_path, "guess", str(MAIN_C))
        assert capsys.readouterr().out.strip() == "C"

    def test_unknown_extension_falls_back_to_content(self, config_path, tmp_path, capsys):
        src = tmp_path / "script.poopies"
        src.write_text("#!/usr/bin/env python\nprint(1)\n")
        _run(config_path, "guess", str(src))
        assert capsys.readouterr().out.strip() == "Python"

    def test_empty_stdin_never_fails(self, config_path, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        _run(config_path, "guess", "-")
        assert capsys.readouterr().out.strip()


class TestStyleDefs:
    def test_html_css(self, config_path, capsys):
        _run(config_path, "styledefs", "-f", "html", "-a", ".code")
        assert ".code" in capsys.readouterr().out

    def test_defaults_to_config_formatter(self, config_path, capsys):
        _run(config_path, "styledefs", "-O", "cssclass=src")
        assert ".src" in capsys.readouterr().out


class TestListings:
    def test_lexers_json(self, config_path, capsys):
        _run(config_path, "lexers", "--json")
        rows = json.loads(capsys.readouterr().out)
        c_row = next(row for row in rows if row["name"] == "C")
        assert "c" in c_row["aliases"]

    def test_lexers_table(self, config_path, capsys):
        _run(config_path, "lexers")
        out = capsys.readouterr().out
        assert "Lexer" in out
        assert "lexers" in out

    def test_formatters_table(self, config_path, capsys):
        _run(config_path, "formatters")
        out = capsys.readouterr().out
        assert "HTML" in out
        assert "formatters" in out

    def test_formatters_json(self, config_path, capsys):
        _run(config_path, "formatters", "--json")
        names = [row["name"] for row in json.loads(capsys.readouterr().out)]
        assert "HTML" in names
