# tests/core/test_handlers.py
import json

import pandas as pd
import pytest

from seo_shell import app as shell_app
from seo_shell.core.context.shell_context import ShellContext
from seo_shell.core.handlers import serve_handler
from seo_shell.core.handlers.analyze_handler import handle_analyze, split_csv
from seo_shell.core.handlers.batch_handler import handle_batch
from seo_shell.core.managers.config_manager import ConfigManager
from seo_shell.core.utils.path_utils import PathUtils

ARTICLE = """
<h1>Garden care</h1>
<p>Garden care starts with good soil. Water the plants in the morning.</p>
<h2>Tools for the garden</h2>
<p>A sharp spade makes the work easier. However, gloves protect your hands.
Read <a href="/about">about us</a> or the <a href="https://example.org/guide">guide</a>.</p>
<img src="spade.jpg" alt="Garden spade">
"""

MOCK_SETTINGS = {
    "debug": {"level": "WARNING"},
    "analyzer": {"site_domain": ""},
    "server": {"host": "127.0.0.1", "port": 5000, "debug": False},
    "batch": {"pattern": "*.html", "export_format": "csv"},
}


@pytest.fixture
def ctx(tmp_path, monkeypatch):
    """Een ShellContext met een geïsoleerde configuratie."""
    package_root = tmp_path / "seo_shell"
    package_root.mkdir()
    (package_root / "settings.json").write_text(json.dumps(MOCK_SETTINGS))
    monkeypatch.setattr(PathUtils, 'get_shell_package_root', lambda: package_root)

    manager = ConfigManager()
    manager.reset()
    return ShellContext(manager)


@pytest.fixture
def article_file(tmp_path):
    path = tmp_path / "article.html"
    path.write_text(ARTICLE, encoding="utf-8")
    return path


# --- analyze ---

def test_split_csv():
    assert split_csv("a, b,,c ") == ["a", "b", "c"]
    assert split_csv(None) == []


def test_analyze_prints_report(ctx, article_file, capsys):
    exit_code = handle_analyze([str(article_file), "--keyword", "garden"], ctx)
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "SEO score:" in output
    assert "Readability score:" in output
    assert "E-A-T:" in output
    assert "[keyword-density]" in output
    assert "[flesch-reading-ease]" in output


def test_analyze_json_output(ctx, article_file, capsys):
    """De JSON-uitvoer moet de camelCase vorm van het resultaat zijn."""
    exit_code = handle_analyze(
        [str(article_file), "-k", "garden", "-t", "Garden care guide", "--json"], ctx
    )
    result = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert 0 <= result["seoScore"] <= 100
    assert 0 <= result["readabilityScore"] <= 100
    assert result["statistics"]["linkCount"] == {"internal": 1, "external": 1}
    assert result["statistics"]["imageCount"] == 1


def test_analyze_without_keyword_skips_keyword_rules(ctx, article_file, capsys):
    handle_analyze([str(article_file), "--json"], ctx)
    result = json.loads(capsys.readouterr().out)

    ids = {a["id"] for a in result["assessments"]}
    assert "keyword-density" not in ids
    assert "seo-title-length" in ids


def test_analyze_stats_only(ctx, article_file, capsys):
    exit_code = handle_analyze([str(article_file), "-k", "garden", "--stats-only", "--json"], ctx)
    stats = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert "seoScore" not in stats
    assert stats["keywordCount"] >= 3
    assert stats["headingCount"]["h1"] == 1


def test_analyze_stats_only_table(ctx, article_file, capsys):
    assert handle_analyze([str(article_file), "--stats-only"], ctx) == 0
    assert "Content statistics" in capsys.readouterr().out


def test_analyze_uses_piped_input(ctx, capsys):
    """Met _stdin wordt de bron niet gelezen."""
    exit_code = handle_analyze(["-", "--json"], ctx, _stdin="The cat sat on the mat.")
    result = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert result["statistics"]["wordCount"] == 6


def test_analyze_missing_file(ctx, tmp_path, capsys):
    exit_code = handle_analyze([str(tmp_path / "nope.html")], ctx)

    assert exit_code == 1
    assert "Could not read" in capsys.readouterr().out


def test_analyze_invalid_arguments(ctx):
    """argparse fouten mogen de shell niet afsluiten."""
    assert handle_analyze([], ctx) == 1


# --- batch ---

def test_batch_exports_csv(ctx, tmp_path, article_file, capsys):
    (tmp_path / "empty.html").write_text("", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("Not matched by the pattern.", encoding="utf-8")
    output_file = tmp_path / "out" / "results.csv"

    exit_code = handle_batch([str(tmp_path), "-k", "garden", "-o", str(output_file)], ctx)
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Analyzed 2 of 2 files" in output

    df = pd.read_csv(output_file)
    assert len(df) == 2
    assert set(df["file"].map(lambda f: f.rsplit("/", 1)[-1].rsplit("\\", 1)[-1])) == {"article.html", "empty.html"}
    assert df["seo_score"].between(0, 100).all()


def test_batch_prints_table_without_output(ctx, tmp_path, article_file, capsys):
    assert handle_batch([str(tmp_path)], ctx) == 0
    assert "article.html" in capsys.readouterr().out


def test_batch_no_matching_files(ctx, tmp_path, capsys):
    exit_code = handle_batch([str(tmp_path), "--pattern", "*.md"], ctx)

    assert exit_code == 0
    assert "No files matching" in capsys.readouterr().out


def test_batch_not_a_directory(ctx, article_file, capsys):
    assert handle_batch([str(article_file)], ctx) == 1
    assert "is not a directory" in capsys.readouterr().out


def test_resolve_output_path(tmp_path, monkeypatch):
    monkeypatch.setattr(PathUtils, 'get_user_documents_dir', lambda: tmp_path)

    assert PathUtils.resolve_output_path("report", ".csv") == tmp_path / "report.csv"
    assert PathUtils.resolve_output_path("report.pdf", ".json") == tmp_path / "report.xlsx"
    absolute = tmp_path / "x" / "report.xlsx"
    assert PathUtils.resolve_output_path(str(absolute)) == absolute


# --- serve ---

def test_serve_uses_config_defaults(ctx, monkeypatch):
    """De server wordt niet echt gestart; we controleren alleen de argumenten."""
    calls = {}

    def fake_run_server(app, host, port, debug=False):
        calls.update(app=app, host=host, port=port, debug=debug)

    monkeypatch.setattr(serve_handler, "run_server", fake_run_server)

    assert serve_handler.handle_serve(["--site-domain", "www.example.com"], ctx) == 0
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 5000
    assert calls["debug"] is False
    assert calls["app"].config["SEO_ANALYZER"].config.site_domain == "example.com"


def test_serve_port_in_use(ctx, monkeypatch, capsys):
    def fake_run_server(app, host, port, debug=False):
        raise OSError("Address already in use")

    monkeypatch.setattr(serve_handler, "run_server", fake_run_server)

    assert serve_handler.handle_serve(["--port", "8080"], ctx) == 1
    assert "Could not start server" in capsys.readouterr().out


# --- main ---

@pytest.fixture
def no_logging_setup(monkeypatch):
    """main() mag de root logger handlers van pytest niet vervangen."""
    monkeypatch.setattr(shell_app, "configure_from_settings", lambda settings: None)


def test_main_help(no_logging_setup, capsys):
    assert shell_app.main(["help"]) == 0
    output = capsys.readouterr().out
    assert "analyze" in output
    assert "batch" in output


def test_main_without_arguments(no_logging_setup, capsys):
    assert shell_app.main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_unknown_command(no_logging_setup, capsys):
    assert shell_app.main(["explode"]) == 1
    assert "Unknown command" in capsys.readouterr().out


def test_main_dispatches_to_handler(no_logging_setup, capsys):
    assert shell_app.main(["config", "show"]) == 0
    assert isinstance(json.loads(capsys.readouterr().out), dict)
