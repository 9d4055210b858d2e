"""
SEO tooling for editors: keyword analysis and SEO scoring.

    from blog_platform.seo import extract_keywords, calculate_seo_score
"""
from .keywords import (
    DensityCheck,
    KeywordAnalysis,
    KeywordItem,
    KeywordSuggestion,
    KeywordTrend,
    analyze_keyword_trends,
    extract_keywords,
    get_keyword_density_warnings,
    suggest_keywords,
)
from .score import (
    Readability,
    SEOAnalysisInput,
    SEOCheck,
    SEOScoreResult,
    calculate_readability,
    calculate_seo_score,
)

__all__ = [
    # Keywords
    "DensityCheck",
    "KeywordAnalysis",
    "KeywordItem",
    "KeywordSuggestion",
    "KeywordTrend",
    "analyze_keyword_trends",
    "extract_keywords",
    "get_keyword_density_warnings",
    "suggest_keywords",
    # Scoring
    "Readability",
    "SEOAnalysisInput",
    "SEOCheck",
    "SEOScoreResult",
    "calculate_readability",
    "calculate_seo_score",
]
