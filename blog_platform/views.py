"""
Views for django-blog-platform.

Every view speaks JSON. Public views expose published posts only; admin
views require a staff user. The keyword and SEO score endpoints are pure
analysis of the request body and touch no stored data.
"""
import json
import logging
import math
from datetime import timedelta

from django.db import transaction
from django.db.models import Count, Q, Sum
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404
from django.urls import reverse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .conf import blog_settings
from .forms import (
    AdminPostFilterForm,
    CategoryForm,
    KeywordAnalysisForm,
    PaginationForm,
    PostForm,
    SearchForm,
    SEOScoreForm,
    TagForm,
    TrackViewForm,
)
from .models import Analytics, Category, Post, Tag
from .seo import (
    SEOAnalysisInput,
    analyze_keyword_trends,
    calculate_readability,
    calculate_seo_score,
    extract_keywords,
    get_keyword_density_warnings,
    suggest_keywords,
)
from .seo.structured_data import (
    absolute_url,
    article_schema,
    breadcrumb_schema,
    category_page_schema,
    post_metadata,
    tag_page_schema,
    website_schema,
)
from .serializers import (
    serialize_category,
    serialize_post,
    serialize_post_summary,
    serialize_tag,
)

logger = logging.getLogger(__name__)

KEYWORD_TRENDS_COUNT = 10


def json_error(message, status=400):
    return JsonResponse({"error": message}, status=status)


class PayloadError(Exception):
    """Raised by views when the request cannot be processed as sent."""

    def __init__(self, message, status=400):
        super().__init__(message)
        self.message = message
        self.status = status


def paginate(queryset, page, limit):
    """Slice ``queryset`` for ``page`` and describe the pagination."""
    total = queryset.count()
    offset = (page - 1) * limit
    items = list(queryset[offset:offset + limit])
    return items, {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": math.ceil(total / limit),
    }


class JSONView(View):
    """
    Base view for the JSON API.

    ``Http404`` and ``PayloadError`` raised by handlers become JSON error
    responses.
    """

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except Http404 as exc:
            return json_error(str(exc) or "Not found", status=404)
        except PayloadError as exc:
            return json_error(exc.message, status=exc.status)

    def get_payload(self):
        """Decode the request body as a JSON object."""
        if not self.request.body:
            return {}
        try:
            payload = json.loads(self.request.body)
        except (UnicodeDecodeError, ValueError):
            raise PayloadError("Invalid JSON body")
        if not isinstance(payload, dict):
            raise PayloadError("Expected a JSON object")
        return payload

    def validate(self, form):
        """Return the form's cleaned data, or fail with its first error."""
        if not form.is_valid():
            raise PayloadError(form.first_error())
        return form.cleaned_data


class StaffRequiredMixin:
    """Reject anonymous (401) and non-staff (403) users."""

    def dispatch(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            return json_error("Unauthorized", status=401)
        if not request.user.is_staff:
            return json_error("Forbidden", status=403)
        return super().dispatch(request, *args, **kwargs)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class PostListView(JSONView):
    """List published posts, newest first."""

    def get(self, request):
        params = self.validate(PaginationForm(request.GET))
        posts, pagination = paginate(
            Post.objects.published().with_relations(),
            params["page"],
            params["limit"],
        )
        return JsonResponse({
            "posts": [serialize_post(post, include_content=False) for post in posts],
            "pagination": pagination,
            "jsonLd": website_schema(reverse("blog_platform:search")),
        })


class PostDetailView(JSONView):
    """Display a single published post with its neighbours."""

    def get(self, request, slug):
        post = get_object_or_404(Post.objects.published().with_relations(), slug=slug)
        post.increment_view_count()
        post.refresh_from_db(fields=["view_count"])

        published = Post.objects.published()
        prev_post = published.filter(created_at__lt=post.created_at).order_by("-created_at").first()
        next_post = published.filter(created_at__gt=post.created_at).order_by("created_at").first()

        return JsonResponse({
            "post": serialize_post(post),
            "prevPost": serialize_post_summary(prev_post) if prev_post else None,
            "nextPost": serialize_post_summary(next_post) if next_post else None,
            "relatedPosts": [serialize_post_summary(p) for p in self._get_related_posts(post)],
            "jsonLd": [article_schema(post), self._get_breadcrumbs(post)],
            "meta": post_metadata(post),
        })

    def _get_related_posts(self, post):
        """Get published posts sharing a tag with ``post``."""
        return (
            Post.objects.published()
            .filter(tags__in=post.tags.all())
            .exclude(pk=post.pk)
            .distinct()
            .order_by("-created_at")[:blog_settings.RELATED_POSTS_COUNT]
        )

    def _get_breadcrumbs(self, post):
        items = [(blog_settings.SITE_NAME, absolute_url(reverse("blog_platform:post_list")))]
        category = post.categories.first()
        if category:
            items.append((category.name, absolute_url(category.get_absolute_url())))
        items.append((post.title, None))
        return breadcrumb_schema(items)


class TagListView(JSONView):
    """List tags with their published post counts."""

    def get(self, request):
        tags = Tag.objects.annotate(
            published_posts=Count("posts", filter=Q(posts__published=True)),
        ).order_by("name")
        return JsonResponse({
            "tags": [serialize_tag(tag, tag.published_posts) for tag in tags],
        })


class TagDetailView(JSONView):
    """List published posts with a specific tag."""

    def get(self, request, slug):
        tag = get_object_or_404(Tag, slug=slug)
        params = self.validate(PaginationForm(request.GET))
        posts, pagination = paginate(
            Post.objects.published().filter(tags=tag).with_relations(),
            params["page"],
            params["limit"],
        )
        return JsonResponse({
            "tag": serialize_tag(tag),
            "posts": [serialize_post(post, include_content=False) for post in posts],
            "pagination": pagination,
            "jsonLd": tag_page_schema(tag, pagination["total"]),
        })


class CategoryListView(JSONView):
    """List categories with their published post counts."""

    def get(self, request):
        categories = Category.objects.annotate(
            published_posts=Count("posts", filter=Q(posts__published=True)),
        ).order_by("name")
        return JsonResponse({
            "categories": [
                serialize_category(category, category.published_posts)
                for category in categories
            ],
        })


class CategoryDetailView(JSONView):
    """List published posts in a specific category."""

    def get(self, request, slug):
        category = get_object_or_404(Category, slug=slug)
        params = self.validate(PaginationForm(request.GET))
        posts, pagination = paginate(
            Post.objects.published().filter(categories=category).with_relations(),
            params["page"],
            params["limit"],
        )
        return JsonResponse({
            "category": serialize_category(category),
            "posts": [serialize_post(post, include_content=False) for post in posts],
            "pagination": pagination,
            "jsonLd": category_page_schema(category, pagination["total"]),
        })


class SearchView(JSONView):
    """Case-insensitive search over published titles, excerpts and content."""

    def get(self, request):
        params = self.validate(SearchForm(request.GET))
        query = params["q"]
        page, limit = params["page"], params["limit"]

        if not query:
            return JsonResponse({
                "posts": [],
                "query": query,
                "pagination": {"page": page, "limit": limit, "total": 0, "totalPages": 0},
            })

        posts, pagination = paginate(
            Post.objects.published()
            .filter(
                Q(title__icontains=query)
                | Q(excerpt__icontains=query)
                | Q(content__icontains=query)
            )
            .with_relations(),
            page,
            limit,
        )
        return JsonResponse({
            "posts": [serialize_post(post, include_content=False) for post in posts],
            "query": query,
            "pagination": pagination,
        })


@method_decorator(csrf_exempt, name="dispatch")
class TrackView(JSONView):
    """Record a page view of a published post."""

    def post(self, request):
        data = self.validate(TrackViewForm.from_payload(self.get_payload()))
        post = get_object_or_404(Post.objects.published(), pk=data["post_id"])
        Analytics.record_view(
            post,
            referrer=data["referrer"],
            country=data["country"],
            device=data["device"],
        )
        return JsonResponse({"success": True})


# ---------------------------------------------------------------------------
# Admin API
# ---------------------------------------------------------------------------


class AdminPostListView(StaffRequiredMixin, JSONView):
    """List all posts, drafts included, or create a post."""

    def get(self, request):
        filters = self.validate(AdminPostFilterForm(request.GET))
        posts = Post.objects.with_relations()
        if filters["search"]:
            posts = posts.filter(
                Q(title__icontains=filters["search"]) | Q(content__icontains=filters["search"])
            )
        if filters["published"] is not None:
            posts = posts.filter(published=filters["published"])

        posts, pagination = paginate(posts, filters["page"], filters["limit"])
        return JsonResponse({
            "posts": [serialize_post(post, include_content=False) for post in posts],
            "pagination": pagination,
        })

    def post(self, request):
        form = PostForm.from_payload(self.get_payload())
        self.validate(form)
        with transaction.atomic():
            post = form.save(commit=False)
            post.author = request.user
            post.save()
            form.save_m2m()

        logger.info("Post %s (%s) created by %s", post.pk, post.slug, request.user)
        return JsonResponse(serialize_post(post), status=201)


class AdminPostDetailView(StaffRequiredMixin, JSONView):
    """Retrieve, update or delete any post."""

    def get(self, request, pk):
        post = get_object_or_404(Post.objects.with_relations(), pk=pk)
        return JsonResponse({
            "post": serialize_post(post),
            "seo": calculate_seo_score(post.seo_input()).to_dict(),
            "readability": calculate_readability(post.content).to_dict(),
        })

    def put(self, request, pk):
        post = get_object_or_404(Post, pk=pk)
        form = PostForm.for_update(post, self.get_payload())
        self.validate(form)
        with transaction.atomic():
            post = form.save()

        logger.info("Post %s updated by %s", post.pk, request.user)
        return JsonResponse(serialize_post(post))

    def delete(self, request, pk):
        post = get_object_or_404(Post, pk=pk)
        post.delete()
        logger.info("Post %s deleted by %s", pk, request.user)
        return JsonResponse({"message": "Post deleted successfully"})


class TaxonomyListView(StaffRequiredMixin, JSONView):
    """List or create tags or categories; subclasses set the model."""

    model = None
    form_class = None
    serialize = None
    collection_name = None

    def get(self, request):
        items = self.model.objects.annotate(num_posts=Count("posts")).order_by("name")
        return JsonResponse({
            self.collection_name: [self.serialize(item, item.num_posts) for item in items],
        })

    def post(self, request):
        form = self.form_class.from_payload(self.get_payload())
        self.validate(form)
        item = form.save()
        logger.info(
            "%s %s (%s) created by %s",
            self.model.__name__, item.pk, item.slug, request.user,
        )
        return JsonResponse(self.serialize(item), status=201)


class TaxonomyDetailView(StaffRequiredMixin, JSONView):
    """Retrieve, update or delete a tag or category."""

    model = None
    form_class = None
    serialize = None

    def get(self, request, pk):
        item = get_object_or_404(self.model, pk=pk)
        return JsonResponse(self.serialize(item, item.posts.count()))

    def put(self, request, pk):
        item = get_object_or_404(self.model, pk=pk)
        form = self.form_class.for_update(item, self.get_payload())
        self.validate(form)
        item = form.save()
        logger.info("%s %s updated by %s", self.model.__name__, item.pk, request.user)
        return JsonResponse(self.serialize(item))

    def delete(self, request, pk):
        item = get_object_or_404(self.model, pk=pk)
        item.delete()
        logger.info("%s %s deleted by %s", self.model.__name__, pk, request.user)
        return JsonResponse({"message": f"{self.model.__name__} deleted successfully"})


class AdminTagListView(TaxonomyListView):
    model = Tag
    form_class = TagForm
    serialize = staticmethod(serialize_tag)
    collection_name = "tags"


class AdminTagDetailView(TaxonomyDetailView):
    model = Tag
    form_class = TagForm
    serialize = staticmethod(serialize_tag)


class AdminCategoryListView(TaxonomyListView):
    model = Category
    form_class = CategoryForm
    serialize = staticmethod(serialize_category)
    collection_name = "categories"


class AdminCategoryDetailView(TaxonomyDetailView):
    model = Category
    form_class = CategoryForm
    serialize = staticmethod(serialize_category)


class AdminAnalyticsView(StaffRequiredMixin, JSONView):
    """Site-wide statistics for the admin dashboard."""

    def get(self, request):
        total_posts = Post.objects.count()
        published_posts = Post.objects.published().count()
        total_views = Post.objects.aggregate(total=Sum("view_count"))["total"] or 0

        since = timezone.localdate() - timedelta(days=blog_settings.ANALYTICS_WINDOW_DAYS)
        daily_views = (
            Analytics.objects.filter(date__gte=since)
            .values("date")
            .annotate(page_views=Sum("page_view"))
            .order_by("date")
        )

        popular_count = blog_settings.POPULAR_ITEMS_COUNT
        popular_posts = Post.objects.published().order_by("-view_count", "-created_at")[:popular_count]
        popular_tags = Tag.objects.annotate(num_posts=Count("posts")).order_by(
            "-num_posts", "name",
        )[:popular_count]

        trends = analyze_keyword_trends(Post.objects.published().only("content", "created_at"))
        top_trends = sorted(trends.items(), key=lambda entry: entry[1].count, reverse=True)

        return JsonResponse({
            "overview": {
                "totalPosts": total_posts,
                "publishedPosts": published_posts,
                "draftPosts": total_posts - published_posts,
                "totalTags": Tag.objects.count(),
                "totalViews": total_views,
            },
            "dailyViews": [
                {"date": row["date"].isoformat(), "pageViews": row["page_views"]}
                for row in daily_views
            ],
            "popularPosts": [
                {"id": post.pk, "title": post.title, "slug": post.slug, "viewCount": post.view_count}
                for post in popular_posts
            ],
            "popularTags": [serialize_tag(tag, tag.num_posts) for tag in popular_tags],
            "keywordTrends": [
                {"keyword": word, **trend.to_dict()}
                for word, trend in top_trends[:KEYWORD_TRENDS_COUNT]
            ],
        })


# ---------------------------------------------------------------------------
# Editor analysis
# ---------------------------------------------------------------------------


class ContentAnalysisMixin:
    """Size limit shared by the analysis endpoints."""

    def check_content_size(self, content):
        limit = blog_settings.MAX_ANALYSIS_CONTENT_LENGTH
        if len(content) > limit:
            raise PayloadError(f"Content exceeds {limit} characters", status=413)


@method_decorator(csrf_exempt, name="dispatch")
class KeywordAnalysisView(ContentAnalysisMixin, JSONView):
    """Keyword analysis, tag suggestions and target-keyword density."""

    def post(self, request):
        data = self.validate(KeywordAnalysisForm.from_payload(self.get_payload()))
        content = data["content"]
        self.check_content_size(content)

        try:
            analysis = extract_keywords(content, blog_settings.KEYWORD_TOP_N)
            suggestions = suggest_keywords(
                content,
                data["existing_tags"],
                blog_settings.SUGGESTION_LIMIT,
            )
            density_check = None
            if data["target_keyword"]:
                density_check = get_keyword_density_warnings(content, data["target_keyword"])
        except Exception:
            logger.exception("Keyword analysis failed")
            return json_error("Failed to analyze keywords", status=500)

        return JsonResponse({
            "analysis": analysis.to_dict(),
            "suggestions": [suggestion.to_dict() for suggestion in suggestions],
            "densityCheck": density_check.to_dict() if density_check else None,
        })

    def get(self, request):
        data = self.validate(KeywordAnalysisForm(request.GET))
        content = data["content"]
        self.check_content_size(content)

        try:
            analysis = extract_keywords(content, blog_settings.KEYWORD_QUICK_TOP_N)
        except Exception:
            logger.exception("Keyword analysis failed")
            return json_error("Failed to analyze keywords", status=500)

        return JsonResponse(analysis.to_dict())


@method_decorator(csrf_exempt, name="dispatch")
class SEOScoreView(ContentAnalysisMixin, JSONView):
    """Score a draft for SEO."""

    def post(self, request):
        data = self.validate(SEOScoreForm.from_payload(self.get_payload()))
        self.check_content_size(data["content"])

        try:
            result = calculate_seo_score(SEOAnalysisInput(
                title=data["title"],
                content=data["content"],
                excerpt=data["excerpt"] or None,
                tags=data["tags"],
                categories=data["categories"],
            ))
        except Exception:
            logger.exception("SEO score calculation failed")
            return json_error("Failed to calculate SEO score", status=500)

        return JsonResponse(result.to_dict())
