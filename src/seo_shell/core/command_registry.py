# src/seo_shell/core/command_registry.py
import logging
from typing import Callable, Dict

from seo_shell.core.handlers import analyze_handler, batch_handler, config_handler, serve_handler

logger = logging.getLogger(__name__)

# The central registries, populated by register_all_commands().
CommandRegistry: Dict[str, Callable[..., int]] = {}
COMMAND_HELP_TEXTS: Dict[str, str] = {}


def register_command(name: str, handler: Callable[..., int], help_text: str = "") -> None:
    """Adds a command, its handler function and its help text to the registry."""
    CommandRegistry[name] = handler
    COMMAND_HELP_TEXTS[name] = help_text
    logger.debug("Registered command '%s'", name)


def register_all_commands() -> None:
    """Registers the built-in commands. Safe to call more than once."""
    register_command("analyze", analyze_handler.handle_analyze, analyze_handler.HELP_TEXT)
    register_command("batch", batch_handler.handle_batch, batch_handler.HELP_TEXT)
    register_command("serve", serve_handler.handle_serve, serve_handler.HELP_TEXT)
    register_command("config", config_handler.handle_config, config_handler.HELP_TEXT)
    logger.debug("Successfully registered %d handlers.", len(CommandRegistry))
