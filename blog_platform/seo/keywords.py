"""
Keyword extraction and suggestion for article text.

Text is tokenized two ways at once: runs of 2-6 CJK characters are taken
as whole words, and Latin words of three or more letters are lower-cased.
Stop words are dropped and the remaining tokens are counted.

The ``tfidf`` value on each keyword is ``count / sqrt(total_words)``. It is
a single-document ranking score, not TF-IDF: there is no corpus and no
inverse document frequency term. Ranking by it is the same as ranking by
count, with ties kept in first-occurrence order.
"""
import logging
import math
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .stopwords import CHINESE_STOP_WORDS, ENGLISH_STOP_WORDS

logger = logging.getLogger(__name__)

MARKDOWN_PUNCTUATION_RE = re.compile(r"[#*`\[\](){}|]")
URL_RE = re.compile(r"https?://\S+")
NEWLINES_RE = re.compile(r"\n+")
TOKEN_RE = re.compile(r"[\u4e00-\u9fa5]{2,6}|[a-zA-Z]+")
CJK_RE = re.compile(r"[\u4e00-\u9fa5]")

MIN_ENGLISH_WORD_LENGTH = 3
TOP_KEYWORDS_COUNT = 10

SUGGESTION_MIN_COUNT = 2
SUGGESTION_TOP_N = 30

# Thresholds for the target-keyword density check, in percent
DENSITY_LOW = 1
DENSITY_HIGH = 3

TREND_UP_RATIO = 1.2
TREND_DOWN_RATIO = 0.8


def round_half_up(value):
    """Round to the nearest integer, with halves rounded up."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class KeywordItem:
    word: str
    count: int
    density: float
    tfidf: float

    def to_dict(self):
        return {
            "word": self.word,
            "count": self.count,
            "density": self.density,
            "tfidf": self.tfidf,
        }


@dataclass(frozen=True)
class KeywordAnalysis:
    keywords: list = field(default_factory=list)
    total_words: int = 0
    unique_words: int = 0
    top_keywords: list = field(default_factory=list)

    def to_dict(self):
        return {
            "keywords": [item.to_dict() for item in self.keywords],
            "totalWords": self.total_words,
            "uniqueWords": self.unique_words,
            "topKeywords": [item.to_dict() for item in self.top_keywords],
        }


@dataclass(frozen=True)
class KeywordSuggestion:
    keyword: str
    relevance: int
    reason: str

    def to_dict(self):
        return {
            "keyword": self.keyword,
            "relevance": self.relevance,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class DensityCheck:
    status: str
    message: str
    density: float

    def to_dict(self):
        return {
            "status": self.status,
            "message": self.message,
            "density": self.density,
        }


@dataclass(frozen=True)
class KeywordTrend:
    count: int
    trend: str

    def to_dict(self):
        return {"count": self.count, "trend": self.trend}


def clean_content(content):
    """Strip markdown punctuation and URLs, and flatten newlines."""
    cleaned = MARKDOWN_PUNCTUATION_RE.sub(" ", content)
    cleaned = URL_RE.sub(" ", cleaned)
    return NEWLINES_RE.sub(" ", cleaned)


def tokenize(content):
    """
    Return keyword tokens from ``content`` in text order.

    CJK runs longer than six characters are split greedily into six
    character chunks; a trailing single character is dropped.
    """
    tokens = []
    for match in TOKEN_RE.finditer(clean_content(content or "")):
        token = match.group(0)
        if CJK_RE.match(token):
            if token not in CHINESE_STOP_WORDS:
                tokens.append(token)
            continue
        token = token.lower()
        if len(token) >= MIN_ENGLISH_WORD_LENGTH and token not in ENGLISH_STOP_WORDS:
            tokens.append(token)
    return tokens


def extract_keywords(content: str, top_n: int = 20) -> KeywordAnalysis:
    """
    Rank the keywords of ``content``.

    Returns the ``top_n`` best keywords, the first ten of them as
    ``top_keywords``, the number of counted tokens (duplicates included)
    and the number of distinct tokens. Empty input gives an empty analysis.
    """
    tokens = tokenize(content)
    total_words = len(tokens)
    # Counter keeps first-occurrence order, and sorted() is stable
    frequencies = Counter(tokens)

    if total_words:
        root = math.sqrt(total_words)
        ranked = sorted(
            (
                KeywordItem(
                    word=word,
                    count=count,
                    density=count / total_words * 100,
                    tfidf=count / root,
                )
                for word, count in frequencies.items()
            ),
            key=lambda item: item.tfidf,
            reverse=True,
        )
    else:
        ranked = []

    logger.debug(
        "Extracted %d keywords from %d tokens",
        len(frequencies),
        total_words,
    )
    return KeywordAnalysis(
        keywords=ranked[:max(top_n, 0)],
        total_words=total_words,
        unique_words=len(frequencies),
        top_keywords=ranked[:TOP_KEYWORDS_COUNT],
    )


def suggestion_reason(count, density):
    if density > 2:
        return "高頻出現，是文章核心主題"
    if count >= 5:
        return "多次出現，與內容高度相關"
    if count >= 3:
        return "適度出現，可作為輔助關鍵字"
    return "潛在關鍵字，建議考慮添加"


def suggest_keywords(
    content: str,
    existing_tags: Optional[Iterable[str]] = None,
    limit: int = 10,
) -> list:
    """
    Suggest up to ``limit`` new tags for ``content``.

    Only keywords seen at least twice are considered, and keywords that
    match an existing tag (ignoring case) are skipped.
    """
    existing = {tag.lower() for tag in (existing_tags or ())}
    analysis = extract_keywords(content, SUGGESTION_TOP_N)

    suggestions = []
    for item in analysis.keywords:
        if item.count < SUGGESTION_MIN_COUNT or item.word.lower() in existing:
            continue
        relevance = min(100, item.density * 10 + item.count * 5)
        suggestions.append(
            KeywordSuggestion(
                keyword=item.word,
                relevance=round_half_up(relevance),
                reason=suggestion_reason(item.count, item.density),
            )
        )
    return suggestions[:limit]


def get_keyword_density_warnings(content: str, target_keyword: str) -> DensityCheck:
    """
    Check how often ``target_keyword`` appears in ``content``.

    Words are counted by splitting on whitespace, without stop-word
    filtering. Occurrences are counted case-insensitively anywhere in the
    text, so the keyword also matches inside longer words. The keyword is
    matched literally, not as a regular expression.
    """
    total_words = len((content or "").split())
    if total_words == 0:
        return DensityCheck(status="low", message="內容為空", density=0)

    matches = 0
    if target_keyword:
        matches = len(re.findall(re.escape(target_keyword), content, re.IGNORECASE))
    density = matches / total_words * 100

    if DENSITY_LOW <= density <= DENSITY_HIGH:
        return DensityCheck(
            status="good",
            message=f"關鍵字密度 {density:.1f}% 在理想範圍內 (1-3%)",
            density=density,
        )
    if density < DENSITY_LOW:
        return DensityCheck(
            status="low",
            message=f"關鍵字密度 {density:.1f}% 過低，建議增加至 1-3%",
            density=density,
        )
    return DensityCheck(
        status="high",
        message=f"關鍵字密度 {density:.1f}% 過高，可能導致關鍵字堆砌",
        density=density,
    )


def analyze_keyword_trends(posts, top_n=10):
    """
    Compare keyword usage between the two most recent months.

    ``posts`` is any iterable of objects with ``content`` and
    ``created_at`` attributes (a Post queryset works). For each month the
    counts of every post's ``top_n`` keywords are summed. Keywords of the
    latest month are marked ``up`` when their count is above 1.2x the
    previous month's, ``down`` when below 0.8x, else ``stable``.

    Returns an empty dict when fewer than two months have posts.
    """
    monthly = {}
    for post in posts:
        month = post.created_at.strftime("%Y-%m")
        counts = monthly.setdefault(month, Counter())
        for item in extract_keywords(post.content, top_n).keywords:
            counts[item.word] += item.count

    if len(monthly) < 2:
        return {}

    previous_month, current_month = sorted(monthly)[-2:]
    previous = monthly[previous_month]

    trends = {}
    for word, count in monthly[current_month].items():
        previous_count = previous.get(word, 0)
        if count > previous_count * TREND_UP_RATIO:
            trend = "up"
        elif count < previous_count * TREND_DOWN_RATIO:
            trend = "down"
        else:
            trend = "stable"
        trends[word] = KeywordTrend(count=count, trend=trend)
    return trends
