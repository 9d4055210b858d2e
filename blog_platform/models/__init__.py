"""
Models for django-blog-platform.

All models are importable from blog_platform.models:

    from blog_platform.models import Post, Category, Tag, Analytics
"""
from .posts import Category, Tag, Post
from .analytics import Analytics

__all__ = [
    # Posts
    "Category",
    "Tag",
    "Post",
    # Analytics
    "Analytics",
]
