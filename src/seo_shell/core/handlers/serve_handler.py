# src/seo_shell/core/handlers/serve_handler.py
import argparse
import logging
from typing import List, Optional

from seo_analyzer.server.app import create_app, run_server
from seo_shell.core.context.shell_context import ShellContext

logger = logging.getLogger(__name__)

HELP_TEXT = """
  serve [--host H] [--port P] [--site-domain D] [--debug]
                      Starts the JSON API server (POST /api/analyze, POST /api/statistics, GET /api/rules).
""".strip()


def handle_serve(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """Handles the 'serve' command. Blocks until the server stops."""
    manager = ctx.config_manager
    parser = argparse.ArgumentParser(prog="serve", description="Start the SEO Analyzer API server.")
    parser.add_argument("--host", default=manager.get_nested("server.host", "127.0.0.1"),
                        help="Host interface to bind to (use 0.0.0.0 for Docker/External access).")
    parser.add_argument("--port", type=int, default=manager.get_nested("server.port", 5000),
                        help="Port to bind the server to.")
    parser.add_argument("--site-domain", help="Domain whose links count as internal.")
    parser.add_argument("--debug", action="store_true", default=manager.get_nested("server.debug", False),
                        help="Enable Flask debug mode.")

    try:
        parsed_args = parser.parse_args(args)
    except SystemExit:
        return 1

    app = create_app(ctx.get_analyzer_config(parsed_args.site_domain))
    try:
        run_server(app, parsed_args.host, parsed_args.port, debug=parsed_args.debug)
    except OSError as e:
        # e.g. port already in use
        print(f"❌ Error: Could not start server on {parsed_args.host}:{parsed_args.port}: {e}")
        logger.error(f"Server failed to start: {e}", exc_info=True)
        return 1
    return 0
