"""
SEO scoring for posts.

``calculate_seo_score`` grades a post on five checks worth 20 points
each: title length, excerpt length, content length, keyword density and
taxonomy (tags and categories). Lengths are counted in characters.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from .keywords import TOP_KEYWORDS_COUNT, extract_keywords, round_half_up

logger = logging.getLogger(__name__)

CHECK_MAX_SCORE = 20

GRADE_THRESHOLDS = [
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
]
FAILING_GRADE = "F"

ALL_GOOD_SUGGESTION = "文章 SEO 表現優秀！繼續保持。"

# Keywords seen only once are not treated as keywords of the article
KEYWORD_MIN_COUNT = 2

SENTENCE_SPLIT_RE = re.compile(r"[。！？.!?]+")


@dataclass
class SEOAnalysisInput:
    title: str = ""
    content: str = ""
    excerpt: Optional[str] = None
    tags: list = field(default_factory=list)
    categories: list = field(default_factory=list)


@dataclass(frozen=True)
class SEOCheck:
    name: str
    passed: bool
    score: int
    max_score: int
    message: str

    def to_dict(self):
        return {
            "name": self.name,
            "passed": self.passed,
            "score": self.score,
            "maxScore": self.max_score,
            "message": self.message,
        }


@dataclass(frozen=True)
class SEOScoreResult:
    score: int
    max_score: int
    percentage: int
    grade: str
    checks: list = field(default_factory=list)
    suggestions: list = field(default_factory=list)

    def to_dict(self):
        return {
            "score": self.score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "grade": self.grade,
            "checks": [check.to_dict() for check in self.checks],
            "suggestions": list(self.suggestions),
        }


def grade_for(percentage):
    """Map a 0-100 percentage to a letter grade."""
    for threshold, grade in GRADE_THRESHOLDS:
        if percentage >= threshold:
            return grade
    return FAILING_GRADE


def check_title(title, suggestions):
    length = len(title)
    if 50 <= length <= 60:
        score = 20
    elif 30 <= length < 50:
        score = 15
        suggestions.append("標題長度建議在 50-60 字符之間，目前稍短")
    elif 60 < length <= 70:
        score = 15
        suggestions.append("標題長度建議在 50-60 字符之間，目前稍長")
    elif length < 30:
        score = 10
        suggestions.append("標題過短，建議增加描述性內容至 50-60 字符")
    else:
        score = 10
        suggestions.append("標題過長，建議縮短至 60 字符以內")

    return SEOCheck(
        name="標題長度",
        passed=score >= 15,
        score=score,
        max_score=CHECK_MAX_SCORE,
        message=f"標題長度 {length} 字符 (建議 50-60)",
    )


def check_excerpt(excerpt, suggestions):
    length = len(excerpt)
    if 150 <= length <= 160:
        score = 20
    elif 120 <= length < 150:
        score = 15
        suggestions.append("描述長度建議在 150-160 字符之間，目前稍短")
    elif 160 < length <= 180:
        score = 15
        suggestions.append("描述長度建議在 150-160 字符之間，目前稍長")
    elif 0 < length < 120:
        score = 10
        suggestions.append("描述過短，建議增加內容至 150-160 字符")
    elif length == 0:
        score = 0
        suggestions.append("缺少描述，建議添加 150-160 字符的描述")
    else:
        score = 10
        suggestions.append("描述過長，建議縮短至 160 字符以內")

    return SEOCheck(
        name="描述長度",
        passed=score >= 15,
        score=score,
        max_score=CHECK_MAX_SCORE,
        message=f"描述長度 {length} 字符 (建議 150-160)" if length else "缺少描述",
    )


def check_content(content, suggestions):
    length = len(content)
    if length >= 1000:
        score = 20
    elif length >= 500:
        score = 15
        suggestions.append("內容長度不錯，但建議達到 1000 字以上以獲得更好排名")
    elif length >= 300:
        score = 10
        suggestions.append("內容稍短，建議擴充至 500-1000 字")
    else:
        score = 5
        suggestions.append("內容過短，建議至少 300 字以上")

    return SEOCheck(
        name="內容長度",
        passed=score >= 15,
        score=score,
        max_score=CHECK_MAX_SCORE,
        message=f"內容長度 {length} 字符 (建議 1000+)",
    )


def keyword_density(content):
    """
    Return the average density, in percent, of the article's keywords.

    The keywords are the top ten extracted keywords that occur at least
    twice. Returns 0 when there are none.
    """
    analysis = extract_keywords(content, TOP_KEYWORDS_COUNT)
    keywords = [item for item in analysis.top_keywords if item.count >= KEYWORD_MIN_COUNT]
    if not keywords:
        return 0
    return sum(item.density for item in keywords) / len(keywords)


def check_keyword_density(content, suggestions):
    density = keyword_density(content)
    if 1 <= density <= 3:
        score = 20
    elif 0.5 <= density < 1:
        score = 15
        suggestions.append("關鍵字密度稍低，建議適度增加主要關鍵字出現次數")
    elif 3 < density <= 5:
        score = 15
        suggestions.append("關鍵字密度稍高，建議避免過度重複關鍵字")
    elif density > 5:
        score = 5
        suggestions.append("關鍵字密度過高，請降低關鍵字使用頻率")
    else:
        score = 10
        suggestions.append("內容缺少明確的關鍵字，建議設定主題關鍵字")

    return SEOCheck(
        name="關鍵字密度",
        passed=score >= 15,
        score=score,
        max_score=CHECK_MAX_SCORE,
        message=f"關鍵字密度 {density:.1f}% (建議 1-3%)",
    )


def check_taxonomy(tags, categories, suggestions):
    has_tags = len(tags) > 0
    has_categories = len(categories) > 0

    if has_tags and has_categories:
        score = 20
        message = f"已設定 {len(tags)} 個標籤和 {len(categories)} 個分類"
    elif has_tags:
        score = 10
        suggestions.append("建議添加分類以改善內容組織")
        message = f"已設定 {len(tags)} 個標籤，缺少分類"
    elif has_categories:
        score = 10
        suggestions.append("建議添加標籤以提升搜尋可見性")
        message = f"已設定 {len(categories)} 個分類，缺少標籤"
    else:
        score = 0
        suggestions.append("缺少標籤和分類，建議添加以提升 SEO")
        message = "缺少標籤和分類"

    return SEOCheck(
        name="標籤與分類",
        passed=score >= 10,
        score=score,
        max_score=CHECK_MAX_SCORE,
        message=message,
    )


def calculate_seo_score(seo_input: SEOAnalysisInput) -> SEOScoreResult:
    """
    Score a post for SEO.

    Missing fields count as empty. The result is a pure function of the
    input.
    """
    title = seo_input.title or ""
    content = seo_input.content or ""
    excerpt = seo_input.excerpt or ""
    tags = list(seo_input.tags or [])
    categories = list(seo_input.categories or [])

    suggestions = []
    checks = [
        check_title(title, suggestions),
        check_excerpt(excerpt, suggestions),
        check_content(content, suggestions),
        check_keyword_density(content, suggestions),
        check_taxonomy(tags, categories, suggestions),
    ]

    score = sum(check.score for check in checks)
    max_score = sum(check.max_score for check in checks)
    percentage = round_half_up(score / max_score * 100)

    if not suggestions:
        suggestions.append(ALL_GOOD_SUGGESTION)

    logger.debug("SEO score %d/%d for %r", score, max_score, title[:60])
    return SEOScoreResult(
        score=score,
        max_score=max_score,
        percentage=percentage,
        grade=grade_for(percentage),
        checks=checks,
        suggestions=suggestions,
    )


@dataclass(frozen=True)
class Readability:
    score: int
    level: str

    def to_dict(self):
        return {"score": self.score, "level": self.level}


def calculate_readability(content):
    """
    Rough readability estimate based on average sentence length.

    Sentences average 10-30 words for a full score; anything outside that
    range loses 20 points.
    """
    sentences = [s for s in SENTENCE_SPLIT_RE.split(content or "") if s.strip()]
    words = (content or "").split()
    if not sentences or not words:
        return Readability(score=0, level="無法評估")

    average = len(words) / len(sentences)
    score = 100
    if average < 10 or average > 30:
        score -= 20

    if score >= 80:
        level = "易讀"
    elif score >= 60:
        level = "適中"
    else:
        level = "較難"
    return Readability(score=max(0, score), level=level)
