"""
SEO Analyzer - API Server
Flask application exposing the content scoring engine over JSON.
"""

import argparse
import logging
from typing import Optional

from flask import Flask

from ..config import AnalyzerConfig
from ..engine import SEOAnalyzer
from .routers.analyzer_api_router import analyzer_api_router

logger = logging.getLogger(__name__)


def create_app(config: Optional[AnalyzerConfig] = None) -> Flask:
    """
    Application factory. The analyzer is created once and shared by all requests;
    it holds no per-request state.
    """
    flask_app = Flask(__name__)

    # 1. Initialize the engine with its thresholds and site domain
    flask_app.config['SEO_ANALYZER'] = SEOAnalyzer(config)

    # 2. Register Blueprints
    flask_app.register_blueprint(analyzer_api_router, url_prefix='/api')

    return flask_app


def run_server(app: Flask, host: str, port: int, debug: bool = False) -> None:
    """Prints the startup banner and runs the Flask development server."""
    print("\n" + "=" * 50)
    print("🚀  SEO ANALYZER | API Server")
    print("=" * 50)
    print(f"📡  Listening on: http://{host}:{port}")
    print("-" * 50)

    print("\n🔍 API ROUTE MAPPING:")
    for rule in app.url_map.iter_rules():
        if "api" in str(rule):
            print(f"   ✅ {rule}")
    print("-" * 50 + "\n")

    # use_reloader=False prevents double-initialization when started from the shell
    app.run(debug=debug, host=host, port=port, use_reloader=False)


def main():
    """
    Main execution block to parse arguments and start the server.
    """
    parser = argparse.ArgumentParser(description="SEO Analyzer API Server")
    parser.add_argument("--port", type=int, default=5000, help="Port to bind the server to")
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host interface to bind to (use 0.0.0.0 for Docker/External access)"
    )
    parser.add_argument("--site-domain", type=str, default=None, help="Domain whose links count as internal")
    parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    app = create_app(AnalyzerConfig(site_domain=args.site_domain))
    run_server(app, args.host, args.port, debug=args.debug)


if __name__ == '__main__':
    main()
