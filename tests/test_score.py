"""
Tests for SEO scoring and readability.
"""
import itertools

import pytest

from blog_platform.seo.score import (
    ALL_GOOD_SUGGESTION,
    SEOAnalysisInput,
    calculate_readability,
    calculate_seo_score,
    grade_for,
    keyword_density,
)


def filler_words(count):
    """Distinct five-letter vowel-free words, none of them stop words."""
    words = ("".join(letters) for letters in itertools.product("bcdfg", repeat=5))
    return list(itertools.islice(words, count))


def content_with_keyword(keyword, occurrences, fillers):
    """Spread ``occurrences`` of ``keyword`` evenly through distinct filler words."""
    words = filler_words(fillers)
    step = len(words) // occurrences
    for index in range(occurrences):
        words.insert(index * (step + 1), keyword)
    return " ".join(words)


def check_named(result, name):
    return next(check for check in result.checks if check.name == name)


class TestCalculateSEOScore:
    """Tests for calculate_seo_score."""

    def test_perfect_post(self):
        content = content_with_keyword("django", 4, 196)
        assert len(content) >= 1000
        assert keyword_density(content) == pytest.approx(2.0)

        result = calculate_seo_score(SEOAnalysisInput(
            title="T" * 55,
            content=content,
            excerpt="E" * 155,
            tags=["django"],
            categories=["Web"],
        ))

        assert result.score == 100
        assert result.max_score == 100
        assert result.percentage == 100
        assert result.grade == "A"
        assert result.suggestions == [ALL_GOOD_SUGGESTION]
        assert all(check.passed for check in result.checks)

    def test_empty_post_scores_floor(self):
        result = calculate_seo_score(SEOAnalysisInput(title="", content=""))

        assert [check.score for check in result.checks] == [10, 0, 5, 10, 0]
        assert result.score == 25
        assert result.percentage == 25
        assert result.grade == "F"
        assert len(result.suggestions) == 5

    def test_none_fields_treated_as_empty(self):
        result = calculate_seo_score(SEOAnalysisInput(
            title=None,
            content=None,
            excerpt=None,
            tags=None,
            categories=None,
        ))
        assert result.score == 25

    def test_idempotent(self):
        seo_input = SEOAnalysisInput(
            title="Deterministic scoring",
            content="技術 技術 分享 python python " * 20,
            excerpt="short",
            tags=["a"],
        )
        assert calculate_seo_score(seo_input) == calculate_seo_score(seo_input)

    def test_scores_never_exceed_max(self):
        result = calculate_seo_score(SEOAnalysisInput(title="x" * 200, content="y" * 5000))
        assert result.score <= result.max_score
        for check in result.checks:
            assert 0 <= check.score <= check.max_score

    @pytest.mark.parametrize("length,expected", [
        (0, 10),
        (29, 10),
        (30, 15),
        (49, 15),
        (50, 20),
        (60, 20),
        (61, 15),
        (70, 15),
        (71, 10),
    ])
    def test_title_bands(self, length, expected):
        result = calculate_seo_score(SEOAnalysisInput(title="t" * length))
        assert check_named(result, "標題長度").score == expected

    @pytest.mark.parametrize("length,expected", [
        (0, 0),
        (1, 10),
        (119, 10),
        (120, 15),
        (149, 15),
        (150, 20),
        (160, 20),
        (161, 15),
        (180, 15),
        (181, 10),
    ])
    def test_excerpt_bands(self, length, expected):
        result = calculate_seo_score(SEOAnalysisInput(excerpt="e" * length))
        assert check_named(result, "描述長度").score == expected

    def test_missing_excerpt_message(self):
        result = calculate_seo_score(SEOAnalysisInput())
        assert check_named(result, "描述長度").message == "缺少描述"

    @pytest.mark.parametrize("length,expected", [
        (0, 5),
        (299, 5),
        (300, 10),
        (499, 10),
        (500, 15),
        (999, 15),
        (1000, 20),
    ])
    def test_content_bands(self, length, expected):
        result = calculate_seo_score(SEOAnalysisInput(content="c" * length))
        assert check_named(result, "內容長度").score == expected

    @pytest.mark.parametrize("occurrences,fillers,expected", [
        (4, 196, 20),   # 2%
        (4, 96, 15),    # 4%
        (2, 298, 15),   # 0.67%
        (2, 598, 10),   # 0.33%
        (3, 0, 5),      # 100%
    ])
    def test_keyword_density_bands(self, occurrences, fillers, expected):
        if fillers:
            content = content_with_keyword("django", occurrences, fillers)
        else:
            content = " ".join(["django"] * occurrences)
        result = calculate_seo_score(SEOAnalysisInput(content=content))
        assert check_named(result, "關鍵字密度").score == expected

    def test_no_repeated_keywords(self):
        content = " ".join(filler_words(100))
        assert keyword_density(content) == 0
        result = calculate_seo_score(SEOAnalysisInput(content=content))
        assert check_named(result, "關鍵字密度").score == 10

    @pytest.mark.parametrize("tags,categories,expected", [
        (["a"], ["b"], 20),
        (["a"], [], 10),
        ([], ["b"], 10),
        ([], [], 0),
    ])
    def test_taxonomy(self, tags, categories, expected):
        result = calculate_seo_score(SEOAnalysisInput(tags=tags, categories=categories))
        assert check_named(result, "標籤與分類").score == expected

    def test_to_dict_uses_camel_case(self):
        data = calculate_seo_score(SEOAnalysisInput()).to_dict()
        assert data["maxScore"] == 100
        assert data["checks"][0]["maxScore"] == 20
        assert set(data) == {"score", "maxScore", "percentage", "grade", "checks", "suggestions"}


@pytest.mark.parametrize("percentage,grade", [
    (100, "A"),
    (90, "A"),
    (89, "B"),
    (80, "B"),
    (79, "C"),
    (70, "C"),
    (69, "D"),
    (60, "D"),
    (59, "F"),
    (0, "F"),
])
def test_grade_thresholds(percentage, grade):
    assert grade_for(percentage) == grade


class TestReadability:
    """Tests for calculate_readability."""

    def test_empty(self):
        result = calculate_readability("")
        assert result.score == 0
        assert result.level == "無法評估"

    def test_comfortable_sentence_length(self):
        sentence = " ".join(["word"] * 15) + ". "
        result = calculate_readability(sentence * 3)
        assert result.score == 100
        assert result.level == "易讀"

    def test_short_sentences_lose_points(self):
        result = calculate_readability("Hi. Yo.")
        assert result.score == 80

    def test_long_sentences_lose_points(self):
        result = calculate_readability(" ".join(["word"] * 40) + ".")
        assert result.score == 80
