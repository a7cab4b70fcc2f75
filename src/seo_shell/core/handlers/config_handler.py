# src/seo_shell/core/handlers/config_handler.py
import json
import logging
from typing import List, Optional

from seo_shell.core.context.shell_context import ShellContext

logger = logging.getLogger(__name__)

HELP_TEXT = """
  config show                Show the current configuration as JSON.
  config get <key>           Show one value (e.g., analyzer.seo.content.min_words).
  config set <key> <value>   Set a config value for this session (e.g., server.port 8080).
  config reset               Reload the configuration from settings.json.
""".strip()


def handle_config(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """Handles the 'config' command for viewing and modifying session configuration."""
    if not args:
        print(HELP_TEXT)
        return 1

    manager = ctx.config_manager
    command = args[0]

    if command in ("show", "list"):
        print(json.dumps(manager.get_all(), indent=2))
        return 0

    if command == "get":
        if len(args) != 2:
            print("Usage: config get <key>")
            return 1
        value = manager.get_nested(args[1])
        if value is None:
            print(f"❌ Error: Unknown config key '{args[1]}'.")
            return 1
        print(json.dumps(value, indent=2) if isinstance(value, (dict, list)) else value)
        return 0

    if command == "set":
        if len(args) < 3:
            print("Usage: config set <key> <value>")
            return 1
        key_path = args[1]
        value = " ".join(args[2:])

        if value.startswith('"') and value.endswith('"'):
            value = value[1:-1]

        if manager.set_nested(key_path, value):
            new_value = manager.get_nested(key_path)
            print(f"✅ Config updated: {key_path} = {new_value} (type: {type(new_value).__name__})")
            return 0
        print(f"❌ Error: Failed to set config value for key '{key_path}'.")
        return 1

    if command == "reset":
        manager.reset()
        print("✅ Configuration has been reset to the values from settings.json.")
        return 0

    print(f"Unknown command: 'config {command}'.")
    return 1
