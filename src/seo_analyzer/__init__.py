from .config import AnalyzerConfig
from .engine import SEOAnalyzer, analyze, analyze_statistics
from .exceptions import AnalysisInputError
from .model import AnalysisInput, AnalysisResult, Assessment, ContentStatistics, Recommendation

__all__ = [
    "AnalysisInput",
    "AnalysisInputError",
    "AnalysisResult",
    "AnalyzerConfig",
    "Assessment",
    "ContentStatistics",
    "Recommendation",
    "SEOAnalyzer",
    "analyze",
    "analyze_statistics",
]
