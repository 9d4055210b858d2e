"""
Django admin configuration for blog_platform.
"""
from django.contrib import admin
from django.db.models import Count

from .models import Analytics, Category, Post, Tag
from .seo import calculate_seo_score


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "num_posts", "created_at"]
    search_fields = ["name", "slug", "description"]
    prepopulated_fields = {"slug": ("name",)}
    readonly_fields = ["created_at", "updated_at"]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(num_posts=Count("posts"))

    @admin.display(description="Posts", ordering="num_posts")
    def num_posts(self, obj):
        return obj.num_posts


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "num_posts", "created_at"]
    search_fields = ["name", "slug"]
    prepopulated_fields = {"slug": ("name",)}
    readonly_fields = ["created_at", "updated_at"]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(num_posts=Count("posts"))

    @admin.display(description="Posts", ordering="num_posts")
    def num_posts(self, obj):
        return obj.num_posts


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = [
        "title_preview",
        "author",
        "published",
        "seo_grade",
        "view_count",
        "created_at",
    ]
    list_filter = ["published", "categories", "tags", "created_at"]
    search_fields = ["title", "content", "author__username"]
    raw_id_fields = ["author"]
    filter_horizontal = ["tags", "categories"]
    date_hierarchy = "created_at"
    readonly_fields = [
        "view_count",
        "created_at",
        "updated_at",
        "published_at",
        "seo_report",
    ]
    prepopulated_fields = {"slug": ("title",)}

    fieldsets = (
        (None, {
            "fields": ("title", "slug", "content", "excerpt", "cover_image", "author")
        }),
        ("Taxonomy", {
            "fields": ("categories", "tags")
        }),
        ("SEO", {
            "fields": ("meta_title", "meta_description", "seo_report"),
        }),
        ("Status", {
            "fields": ("published", "published_at")
        }),
        ("Metadata", {
            "fields": ("view_count", "created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    actions = ["publish_posts", "unpublish_posts"]

    def get_queryset(self, request):
        return super().get_queryset(request).prefetch_related("tags", "categories")

    @admin.display(description="Title")
    def title_preview(self, obj):
        """Truncated title for list display."""
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    @admin.display(description="SEO")
    def seo_grade(self, obj):
        result = calculate_seo_score(obj.seo_input())
        return f"{result.grade} ({result.percentage}%)"

    @admin.display(description="SEO report")
    def seo_report(self, obj):
        if not obj.pk:
            return "-"
        result = calculate_seo_score(obj.seo_input())
        return "\n".join(
            [f"{result.grade} ({result.score}/{result.max_score})"] + result.suggestions
        )

    @admin.action(description="Publish selected posts")
    def publish_posts(self, request, queryset):
        for post in queryset:
            post.publish()
        self.message_user(request, f"{queryset.count()} posts published.")

    @admin.action(description="Unpublish selected posts")
    def unpublish_posts(self, request, queryset):
        for post in queryset:
            post.unpublish()
        self.message_user(request, f"{queryset.count()} posts moved to draft.")


@admin.register(Analytics)
class AnalyticsAdmin(admin.ModelAdmin):
    list_display = ["post", "date", "page_view", "unique_visitor", "referrer", "device", "country"]
    list_filter = ["date", "device", "country"]
    search_fields = ["post__title", "referrer"]
    raw_id_fields = ["post"]
    date_hierarchy = "date"
