# src/seo_analyzer/server/routers/analyzer_api_router.py
import logging

from flask import Blueprint, current_app, jsonify, request

from ...engine import SEOAnalyzer
from ...exceptions import AnalysisInputError
from ...scoring.registry import get_all_rules

logger = logging.getLogger(__name__)

analyzer_api_router = Blueprint('analyzer_api_router', __name__)


# --- HELPER FUNCTIONS ---

def get_analyzer() -> SEOAnalyzer:
    """Retrieves the analyzer from the Flask application context."""
    analyzer = current_app.config.get('SEO_ANALYZER')
    if not analyzer:
        raise RuntimeError("SEOAnalyzer is not set in app.config['SEO_ANALYZER']")
    return analyzer


def get_json_body():
    """Returns the decoded JSON object of the request, or None if the body is not a JSON object."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else None


# --- API ROUTES ---

@analyzer_api_router.route('/analyze', methods=['POST'])
def analyze_content():
    """
    Scores a piece of content.
    Body: {content, title?, metaDescription?, keyword?, relatedKeywords?, isCornerstone?}
    """
    body = get_json_body()
    if body is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400

    try:
        result = get_analyzer().analyze(body)
        return jsonify(result.model_dump(mode="json", by_alias=True))
    except AnalysisInputError as e:
        logger.info(f"Rejected analysis request: {e}")
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.error(f"Error analyzing content: {e}", exc_info=True)
        return jsonify({"error": str(e)}), 500


@analyzer_api_router.route('/statistics', methods=['POST'])
def content_statistics():
    """Returns the raw content statistics. Body: {content, keyword?}"""
    body = get_json_body()
    if body is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400

    try:
        stats = get_analyzer().analyze_statistics(body.get("content"), body.get("keyword"))
        return jsonify(stats.model_dump(mode="json", by_alias=True))
    except AnalysisInputError as e:
        logger.info(f"Rejected statistics request: {e}")
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.error(f"Error computing statistics: {e}", exc_info=True)
        return jsonify({"error": str(e)}), 500


@analyzer_api_router.route('/rules', methods=['GET'])
def list_rules():
    """Lists the assessment rules in evaluation order."""
    return jsonify([rule.to_dict() for rule in get_all_rules()])
