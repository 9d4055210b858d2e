"""
URL configuration for django-blog-platform.

Include in your project urls.py:

    path('blog/', include('blog_platform.urls')),
"""
from django.contrib.sitemaps.views import sitemap
from django.urls import path

from . import views
from .sitemaps import sitemaps

app_name = "blog_platform"

urlpatterns = [
    # Public posts
    path("posts/", views.PostListView.as_view(), name="post_list"),
    path("posts/<str:slug>/", views.PostDetailView.as_view(), name="post_detail"),
    path("search/", views.SearchView.as_view(), name="search"),

    # Categories and tags
    path("tags/", views.TagListView.as_view(), name="tag_list"),
    path("tags/<str:slug>/", views.TagDetailView.as_view(), name="tag_detail"),
    path("categories/", views.CategoryListView.as_view(), name="category_list"),
    path("categories/<str:slug>/", views.CategoryDetailView.as_view(), name="category_detail"),

    # Analytics
    path("analytics/track/", views.TrackView.as_view(), name="track_view"),

    # Admin API
    path("admin/posts/", views.AdminPostListView.as_view(), name="admin_post_list"),
    path("admin/posts/<int:pk>/", views.AdminPostDetailView.as_view(), name="admin_post_detail"),
    path("admin/tags/", views.AdminTagListView.as_view(), name="admin_tag_list"),
    path("admin/tags/<int:pk>/", views.AdminTagDetailView.as_view(), name="admin_tag_detail"),
    path("admin/categories/", views.AdminCategoryListView.as_view(), name="admin_category_list"),
    path(
        "admin/categories/<int:pk>/",
        views.AdminCategoryDetailView.as_view(),
        name="admin_category_detail",
    ),
    path("admin/analytics/", views.AdminAnalyticsView.as_view(), name="admin_analytics"),

    # Editor analysis
    path("admin/keywords/", views.KeywordAnalysisView.as_view(), name="keywords"),
    path("admin/seo-score/", views.SEOScoreView.as_view(), name="seo_score"),

    # Sitemap
    path(
        "sitemap.xml",
        sitemap,
        {"sitemaps": sitemaps},
        name="sitemap",
    ),
]
