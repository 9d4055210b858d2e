"""
Sitemaps for published content.

Requires ``django.contrib.sitemaps`` (and ``django.contrib.sites`` for
absolute URLs outside a request) in INSTALLED_APPS.
"""
from django.contrib.sitemaps import Sitemap
from django.urls import reverse

from .models import Category, Post, Tag


class StaticViewSitemap(Sitemap):
    changefreq = "daily"
    priority = 1.0

    def items(self):
        return ["blog_platform:post_list", "blog_platform:tag_list", "blog_platform:category_list"]

    def location(self, item):
        return reverse(item)


class PostSitemap(Sitemap):
    changefreq = "weekly"
    priority = 0.9

    def items(self):
        return Post.objects.published().order_by("-created_at")

    def lastmod(self, obj):
        return obj.updated_at


class TagSitemap(Sitemap):
    changefreq = "weekly"
    priority = 0.7

    def items(self):
        return Tag.objects.filter(posts__published=True).distinct().order_by("name")


class CategorySitemap(Sitemap):
    changefreq = "weekly"
    priority = 0.7

    def items(self):
        return Category.objects.filter(posts__published=True).distinct().order_by("name")


sitemaps = {
    "static": StaticViewSitemap,
    "posts": PostSitemap,
    "tags": TagSitemap,
    "categories": CategorySitemap,
}
