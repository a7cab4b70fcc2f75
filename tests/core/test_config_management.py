# tests/core/test_config_management.py
import json

import pytest

from seo_analyzer.config import AnalyzerConfig
from seo_shell.core.context.shell_context import ShellContext
from seo_shell.core.handlers.config_handler import handle_config
from seo_shell.core.managers.config_manager import ConfigManager
from seo_shell.core.utils.path_utils import PathUtils

# Een standaard, voorspelbare configuratie voor onze tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "analyzer": {
        "site_domain": "www.example.com",
        "seo": {"content": {"min_words": 500}}
    },
    "server": {
        "port": 5000,
        "debug": False
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Een fixture die een geïsoleerde testomgeving opzet voor de ConfigManager:
    - Creëert een tijdelijke package root.
    - Plaatst daarin een nep 'settings.json' bestand.
    - Monkeypatched PathUtils om naar deze tijdelijke locatie te wijzen.
    """
    package_root = tmp_path / "seo_shell"
    package_root.mkdir()
    settings_file = package_root / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))

    # Zorg ervoor dat de ConfigManager ons testbestand vindt
    monkeypatch.setattr(PathUtils, 'get_shell_package_root', lambda: package_root)

    # De globale singleton kan al geladen zijn: forceer herladen vanuit ons nep-bestand
    config_manager_instance = ConfigManager()
    config_manager_instance.reset()

    return config_manager_instance, ShellContext(config_manager_instance)


# --- Tests voor de ConfigManager direct ---

def test_config_manager_load(config_env):
    """Test of de manager de configuratie correct laadt."""
    manager, _ = config_env
    config = manager.get_all()
    assert config["debug"]["level"] == "WARNING"
    assert config["server"]["port"] == 5000


def test_config_manager_is_singleton(config_env):
    manager, _ = config_env
    assert ConfigManager() is manager


def test_config_manager_get_nested(config_env):
    """Test het ophalen van geneste waarden."""
    manager, _ = config_env
    assert manager.get_nested("analyzer.seo.content.min_words") == 500
    assert manager.get_nested("non.existent.key", "default") == "default"


def test_config_manager_set_nested(config_env):
    """Test het aanpassen van waarden in het geheugen."""
    manager, _ = config_env

    # Test het aanpassen van een bestaande waarde
    manager.set_nested("debug.level", "INFO")
    assert manager.get_nested("debug.level") == "INFO"

    # Test het toevoegen van een nieuwe sleutel
    manager.set_nested("batch.pattern", "*.md")
    assert manager.get_nested("batch.pattern") == "*.md"

    # Type-casting: de originele waarde is een int, dus '8080' moet een int worden
    manager.set_nested("server.port", "8080")
    assert manager.get_nested("server.port") == 8080
    assert isinstance(manager.get_nested("server.port"), int)


def test_config_manager_set_nested_parses_booleans(config_env):
    """bool('false') is True; de manager moet 'false' als False opslaan."""
    manager, _ = config_env
    manager.set_nested("server.debug", "true")
    assert manager.get_nested("server.debug") is True
    manager.set_nested("server.debug", "false")
    assert manager.get_nested("server.debug") is False


def test_config_manager_refuses_to_overwrite_section(config_env):
    manager, _ = config_env
    assert manager.set_nested("analyzer.seo", "flat") is False
    assert manager.get_nested("analyzer.seo.content.min_words") == 500


def test_config_manager_reset(config_env):
    """Test of de reset-functie de configuratie herlaadt vanaf schijf."""
    manager, _ = config_env

    manager.set_nested("debug.level", "DEBUG")
    assert manager.get_nested("debug.level") == "DEBUG"

    manager.reset()

    assert manager.get_nested("debug.level") == "WARNING"


def test_config_manager_missing_settings_file(tmp_path, monkeypatch):
    """Zonder settings.json valt de manager terug op een lege configuratie."""
    monkeypatch.setattr(PathUtils, 'get_shell_package_root', lambda: tmp_path)
    manager = ConfigManager()
    manager.reset()

    assert manager.get_all() == {}
    assert manager.get_analyzer_config() == AnalyzerConfig()


def test_get_analyzer_config(config_env):
    manager, _ = config_env
    config = manager.get_analyzer_config()

    assert config.site_domain == "example.com"
    assert config.seo.content.min_words == 500
    # Niet geconfigureerde waarden houden hun standaard
    assert config.seo.content.cornerstone_min_words == 900


def test_shell_context_site_domain_override(config_env):
    _, ctx = config_env
    assert ctx.get_analyzer_config("https://Blog.Other.org/path").site_domain == "blog.other.org"
    assert ctx.create_analyzer().config.site_domain == "example.com"


# --- Tests voor de 'config' command handler ---

def test_handle_config_show(config_env, capsys):
    """Test 'config show'."""
    _, ctx = config_env
    assert handle_config(["show"], ctx) == 0
    captured = capsys.readouterr()

    output_json = json.loads(captured.out)
    assert output_json["server"]["port"] == 5000


def test_handle_config_get(config_env, capsys):
    _, ctx = config_env
    assert handle_config(["get", "server.port"], ctx) == 0
    assert capsys.readouterr().out.strip() == "5000"

    assert handle_config(["get", "nope.nope"], ctx) == 1


def test_handle_config_set(config_env, capsys):
    """Test 'config set <key> <value>'."""
    manager, ctx = config_env
    assert handle_config(["set", "analyzer.seo.content.min_words", "1234"], ctx) == 0
    captured = capsys.readouterr()

    assert "Config updated: analyzer.seo.content.min_words = 1234" in captured.out
    assert manager.get_analyzer_config().seo.content.min_words == 1234


def test_handle_config_reset(config_env, capsys):
    """Test 'config reset'."""
    manager, ctx = config_env

    handle_config(["set", "debug.level", "CRITICAL"], ctx)
    assert manager.get_nested("debug.level") == "CRITICAL"

    handle_config(["reset"], ctx)
    captured = capsys.readouterr()

    assert "Configuration has been reset" in captured.out
    assert manager.get_nested("debug.level") == "WARNING"


def test_handle_config_usage(config_env, capsys):
    _, ctx = config_env
    assert handle_config([], ctx) == 1
    assert handle_config(["explode"], ctx) == 1
    assert "Unknown command" in capsys.readouterr().out
