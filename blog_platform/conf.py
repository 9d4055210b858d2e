"""
Configuration settings for django-blog-platform.

Override these in your Django settings.py:

    BLOG_PLATFORM = {
        'POSTS_PER_PAGE': 10,
        'SITE_URL': 'https://blog.example.com',
        'MAX_ANALYSIS_CONTENT_LENGTH': 100 * 1024,
        ...
    }
"""
from django.conf import settings

DEFAULTS = {
    # Pagination
    "POSTS_PER_PAGE": 10,
    "MAX_POSTS_PER_PAGE": 50,

    # Slugs
    "SLUG_MAX_LENGTH": 100,

    # Keyword analysis
    "KEYWORD_TOP_N": 20,
    "KEYWORD_QUICK_TOP_N": 15,
    "SUGGESTION_LIMIT": 10,
    "MAX_ANALYSIS_CONTENT_LENGTH": 100 * 1024,

    # Public pages
    "RELATED_POSTS_COUNT": 3,

    # Analytics
    "POPULAR_ITEMS_COUNT": 5,
    "ANALYTICS_WINDOW_DAYS": 7,

    # Structured data
    "SITE_NAME": "Blog Platform",
    "SITE_URL": "http://localhost:8000",
    "SITE_DESCRIPTION": "探索最新的技術文章、生活隨筆與深度思考",
}


class BlogPlatformSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blog_platform.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blog_platform setting: {name}")

        user_settings = getattr(settings, "BLOG_PLATFORM", {})
        return user_settings.get(name, DEFAULTS[name])

    @property
    def SITE_URL(self):
        """Return the site URL without a trailing slash."""
        user_settings = getattr(settings, "BLOG_PLATFORM", {})
        return user_settings.get("SITE_URL", DEFAULTS["SITE_URL"]).rstrip("/")


blog_settings = BlogPlatformSettings()
