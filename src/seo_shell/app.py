# src/seo_shell/app.py
from __future__ import annotations

import logging
import sys

from seo_shell.core.command_registry import COMMAND_HELP_TEXTS, CommandRegistry, register_all_commands
from seo_shell.core.context.shell_context import ShellContext
from seo_shell.core.managers.config_manager import config_manager
from seo_shell.core.utils.configure_logging import configure_from_settings

logger = logging.getLogger(__name__)


def print_usage() -> None:
    print("Usage: seo-shell <command> [options]\n")
    print("Commands:")
    for help_text in COMMAND_HELP_TEXTS.values():
        print(help_text)
        print()


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running a single shell command from the command line."""
    argv = list(sys.argv[1:] if argv is None else argv)

    configure_from_settings(config_manager.get_nested("debug"))
    register_all_commands()

    if not argv or argv[0] in ("-h", "--help", "help"):
        print_usage()
        return 0 if argv else 1

    name, args = argv[0], argv[1:]
    handler = CommandRegistry.get(name)
    if handler is None:
        print(f"❌ Unknown command: '{name}'. Run 'seo-shell help' for a list of commands.")
        return 1

    ctx = ShellContext()
    logger.debug("Running command '%s' with args %s", name, args)
    try:
        return handler(args, ctx)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
