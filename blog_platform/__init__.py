"""
django-blog-platform - A Django blog platform with built-in SEO tooling.

Features:
- Posts with many-to-many tags and categories
- Public JSON API for published content (list, detail, search, taxonomy)
- Staff-only JSON API for post/tag/category management
- Per-day page-view analytics
- SEO scoring, keyword extraction and keyword suggestions for editors
- schema.org structured data and sitemaps
"""

__version__ = "0.1.0"
