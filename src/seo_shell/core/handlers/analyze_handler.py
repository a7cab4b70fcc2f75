# src/seo_shell/core/handlers/analyze_handler.py
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from seo_analyzer.exceptions import AnalysisInputError
from seo_analyzer.model import AnalysisResult, ContentStatistics
from seo_shell.core.context.shell_context import ShellContext

logger = logging.getLogger(__name__)

HELP_TEXT = """
  analyze <file|-> [--keyword K] [--title T] [--meta M] [--related a,b] [--cornerstone]
          [--site-domain D] [--json] [--stats-only]
                      Scores one HTML, Markdown or text file ('-' reads stdin).
""".strip()

RATING_ICONS = {"good": "✅", "ok": "⚠️ ", "bad": "❌"}


def read_source(source: str) -> str:
    """Reads the content from a file path, or from stdin when source is '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def split_csv(value: Optional[str]) -> List[str]:
    """'a, b,,c' -> ['a', 'b', 'c']"""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="analyze", description="Score content for SEO and readability.")
    parser.add_argument("source", help="Path to an HTML, Markdown or text file, or '-' for stdin.")
    parser.add_argument("--keyword", "-k", help="Focus keyword.")
    parser.add_argument("--title", "-t", help="SEO title.")
    parser.add_argument("--meta", "-m", help="Meta description.")
    parser.add_argument("--related", help="Comma-separated related keywords.")
    parser.add_argument("--cornerstone", action="store_true", help="Treat as cornerstone content (900+ words).")
    parser.add_argument("--site-domain", help="Domain whose links count as internal.")
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON.")
    parser.add_argument("--stats-only", action="store_true", help="Only compute statistics, no scoring.")
    return parser


def handle_analyze(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """
    Handles the 'analyze' command.

    Args:
        args: Command line arguments after 'analyze'.
        ctx: The shell context providing the analyzer configuration.
        _stdin: Piped content; used instead of reading the source when given.

    Returns:
        0 for success, 1 for errors.
    """
    try:
        parsed_args = build_parser().parse_args(args)
    except SystemExit:
        return 1

    try:
        content = _stdin if _stdin is not None else read_source(parsed_args.source)
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Error: Could not read '{parsed_args.source}': {e}")
        return 1

    analyzer = ctx.create_analyzer(parsed_args.site_domain)

    try:
        if parsed_args.stats_only:
            stats = analyzer.analyze_statistics(content, parsed_args.keyword)
            if parsed_args.json:
                print(stats.model_dump_json(by_alias=True, indent=2))
            else:
                print_statistics(stats)
            return 0

        result = analyzer.analyze({
            "content": content,
            "title": parsed_args.title,
            "meta_description": parsed_args.meta,
            "keyword": parsed_args.keyword,
            "related_keywords": split_csv(parsed_args.related),
            "is_cornerstone": parsed_args.cornerstone,
        })
    except AnalysisInputError as e:
        print(f"❌ Error: {e}")
        return 1

    if parsed_args.json:
        print(result.model_dump_json(by_alias=True, indent=2))
    else:
        print_report(result, analyzer.score_color)
    return 0


# --- Output ---

def print_statistics(stats: ContentStatistics) -> None:
    data = stats.model_dump(by_alias=True, exclude={"sentence_lengths", "paragraph_lengths"})
    print("\n📊 Content statistics")
    print("-" * 50)
    for key, value in data.items():
        if isinstance(value, float):
            value = f"{value:.2f}"
        elif isinstance(value, (dict, list)):
            value = json.dumps(value)
        print(f"  {key:<28} {value}")
    print("-" * 50)


def print_report(result: AnalysisResult, score_color) -> None:
    print("\n" + "=" * 50)
    print(f"🔎  SEO score:         {result.seo_score:>3}/100 ({score_color(result.seo_score)})")
    print(f"📖  Readability score: {result.readability_score:>3}/100 ({score_color(result.readability_score)})")
    print(f"🏁  Overall:           {result.overall_rating}")
    eat = result.eat
    print(f"🧩  Content quality:   {result.content_quality.score:>3}/100")
    print(f"🎓  E-A-T:             {eat.score:>3}/100 "
          f"(expertise {eat.expertise}, authority {eat.authority}, trust {eat.trust})")
    print("=" * 50)

    for label, assessments in (("SEO", result.seo_assessments), ("Readability", result.readability_assessments)):
        print(f"\n{label}:")
        for assessment in assessments:
            print(f"  {RATING_ICONS[assessment.rating]} [{assessment.id}] {assessment.message}")

    if result.recommendations:
        print("\n💡 Recommendations:")
        for rec in result.recommendations:
            print(f"  - ({rec.priority}) {rec.action}")

    stats = result.statistics
    print("-" * 50)
    print(f"  {stats.word_count} words, {stats.sentence_count} sentences, "
          f"{stats.paragraph_count} paragraphs, ~{stats.reading_time_minutes} min read")
