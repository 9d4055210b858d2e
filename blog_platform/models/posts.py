"""
Post, Category, and Tag models for django-blog-platform.
"""
from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils import timezone
from django.utils.text import slugify

from ..conf import blog_settings
from ..seo.score import SEOAnalysisInput


def unique_slug(model, value, instance_pk=None):
    """
    Slugify ``value`` and append ``-1``, ``-2``... until no other row of
    ``model`` uses it.

    Falls back to ``model_name`` when the value slugifies to nothing
    (for example a title written only in CJK characters).
    """
    base_slug = slugify(value, allow_unicode=True)[:blog_settings.SLUG_MAX_LENGTH]
    if not base_slug:
        base_slug = model._meta.model_name
    slug = base_slug
    counter = 1
    while model.objects.filter(slug=slug).exclude(pk=instance_pk).exists():
        slug = f"{base_slug}-{counter}"
        counter += 1
    return slug


class Category(models.Model):
    """
    Category for organizing posts.

    A post may belong to several categories.
    """

    name = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=100, unique=True, blank=True, allow_unicode=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "Categories"

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(Category, self.name, self.pk)
        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse("blog_platform:category_detail", kwargs={"slug": self.slug})

    @property
    def post_count(self):
        """Return count of published posts in this category."""
        return self.posts.filter(published=True).count()


class Tag(models.Model):
    """Flat tag for posts."""

    name = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=100, unique=True, blank=True, allow_unicode=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(Tag, self.name, self.pk)
        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse("blog_platform:tag_detail", kwargs={"slug": self.slug})

    @property
    def post_count(self):
        """Return count of published posts with this tag."""
        return self.posts.filter(published=True).count()


class PostQuerySet(models.QuerySet):
    def published(self):
        return self.filter(published=True)

    def with_relations(self):
        return self.select_related("author").prefetch_related("tags", "categories")


class Post(models.Model):
    """
    Blog post / article.

    Only published posts are exposed by the public API. Drafts are
    visible to staff through the admin API.
    """

    # Content
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True, allow_unicode=True)
    content = models.TextField()
    excerpt = models.TextField(
        blank=True,
        help_text="Summary shown in listings and used as the meta description.",
    )
    cover_image = models.URLField(max_length=500, blank=True)

    # SEO overrides
    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.TextField(blank=True)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blog_posts",
    )

    # Status
    published = models.BooleanField(default=False, db_index=True)
    published_at = models.DateTimeField(null=True, blank=True, db_index=True)

    # Taxonomy
    tags = models.ManyToManyField(Tag, related_name="posts", blank=True)
    categories = models.ManyToManyField(Category, related_name="posts", blank=True)

    # Engagement stats
    view_count = models.PositiveIntegerField(default=0)

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["published", "-created_at"]),
            models.Index(fields=["author", "-created_at"]),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug and self.title:
            self.slug = unique_slug(Post, self.title, self.pk)

        # Set published_at on first publication
        if self.published and not self.published_at:
            self.published_at = timezone.now()

        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse("blog_platform:post_detail", kwargs={"slug": self.slug})

    @property
    def preview(self):
        """Return the excerpt, or a truncated body when there is none."""
        if self.excerpt:
            return self.excerpt
        if len(self.content) > 280:
            return self.content[:280] + "..."
        return self.content

    def publish(self):
        """Publish the post, keeping the date of its first publication."""
        self.published = True
        if not self.published_at:
            self.published_at = timezone.now()
        self.save(update_fields=["published", "published_at", "updated_at"])

    def unpublish(self):
        """Move the post back to draft."""
        self.published = False
        self.save(update_fields=["published", "updated_at"])

    def increment_view_count(self):
        """Increment view count atomically."""
        Post.objects.filter(pk=self.pk).update(view_count=models.F("view_count") + 1)

    def seo_input(self):
        """Build the SEO scorer input from the stored record."""
        return SEOAnalysisInput(
            title=self.title,
            content=self.content,
            excerpt=self.excerpt or None,
            tags=[tag.name for tag in self.tags.all()],
            categories=[category.name for category in self.categories.all()],
        )
