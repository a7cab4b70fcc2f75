# src/seo_shell/core/handlers/batch_handler.py
import argparse
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from tqdm.auto import tqdm

from seo_analyzer.engine import SEOAnalyzer
from seo_shell.core.context.shell_context import ShellContext
from seo_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

HELP_TEXT = """
  batch <dir> [--pattern GLOB] [--keyword K] [--site-domain D] [-o FILE.csv|FILE.xlsx]
                      Scores every matching file in a directory. Relative output
                      paths are saved to the Documents folder.
""".strip()

RESULT_COLUMNS = [
    "file", "seo_score", "readability_score", "overall_rating", "word_count",
    "sentence_count", "keyword_density", "flesch_reading_ease", "failed_rules", "error",
]


def analyze_file(analyzer: SEOAnalyzer, path: Path, keyword: Optional[str]) -> Dict[str, Any]:
    """Analyzes one file and flattens the result into a table row."""
    row: Dict[str, Any] = {"file": str(path)}
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Skipping unreadable file {path}: {e}")
        row["error"] = str(e)
        return row

    result = analyzer.analyze({"content": content, "keyword": keyword})
    stats = result.statistics
    row.update({
        "seo_score": result.seo_score,
        "readability_score": result.readability_score,
        "overall_rating": result.overall_rating,
        "word_count": stats.word_count,
        "sentence_count": stats.sentence_count,
        "keyword_density": stats.keyword_density,
        "flesch_reading_ease": stats.flesch_reading_ease,
        "failed_rules": ", ".join(a.id for a in result.assessments if a.rating == "bad"),
        "error": None,
    })
    return row


def export_results(df: pd.DataFrame, output_file: Path) -> None:
    """Writes the results table as CSV or Excel, based on the file suffix."""
    output_file.parent.mkdir(parents=True, exist_ok=True)
    if output_file.suffix.lower() == ".csv":
        df.to_csv(output_file, index=False)
    else:
        df.to_excel(output_file, index=False, engine="openpyxl")


def handle_batch(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """
    Handles the 'batch' command: analyzes all files matching a glob in a directory.

    Returns:
        0 for success (also when no files matched), 1 for errors.
    """
    manager = ctx.config_manager
    parser = argparse.ArgumentParser(prog="batch", description="Score every matching file in a directory.")
    parser.add_argument("directory", help="Directory containing the content files.")
    parser.add_argument("--pattern", "-p", default=manager.get_nested("batch.pattern", "*.html"),
                        help="Glob pattern, searched recursively (default from settings).")
    parser.add_argument("--keyword", "-k", help="Focus keyword applied to every file.")
    parser.add_argument("--site-domain", help="Domain whose links count as internal.")
    parser.add_argument("--output", "-o", help="Export file (.csv or .xlsx).")

    try:
        parsed_args = parser.parse_args(args)
    except SystemExit:
        return 1

    directory = Path(parsed_args.directory)
    if not directory.is_dir():
        print(f"❌ Error: '{directory}' is not a directory.")
        return 1

    files = sorted(p for p in directory.rglob(parsed_args.pattern) if p.is_file())
    if not files:
        print(f"🤷 No files matching '{parsed_args.pattern}' in {directory}.")
        return 0

    analyzer = ctx.create_analyzer(parsed_args.site_domain)
    rows = []
    for path in tqdm(files, desc="Analyzing", unit="file"):
        rows.append(analyze_file(analyzer, path, parsed_args.keyword))

    df = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    analyzed = df[df["error"].isna()]
    print(f"✅ Analyzed {len(analyzed)} of {len(df)} files.")
    if not analyzed.empty:
        print(f"   Average SEO score: {analyzed['seo_score'].mean():.1f}, "
              f"average readability score: {analyzed['readability_score'].mean():.1f}")

    if not parsed_args.output:
        print(df[["file", "seo_score", "readability_score", "overall_rating"]].to_string(index=False))
        return 0

    default_suffix = f".{manager.get_nested('batch.export_format', 'xlsx')}"
    output_file = PathUtils.resolve_output_path(parsed_args.output, default_suffix)
    try:
        export_results(df, output_file)
    except (OSError, ValueError) as e:
        print(f"❌ Error during export: {e}")
        logger.error(f"Failed to export batch results to {output_file}: {e}", exc_info=True)
        return 1

    print(f"✅ Exported {len(df)} rows to:")
    print(f"   {output_file}")
    return 0
