"""
Page-view analytics for django-blog-platform.
"""
from django.db import IntegrityError, models, transaction
from django.utils import timezone


class Analytics(models.Model):
    """
    Daily page-view counter for a post.

    One row per post per day. The first view of the day creates the row
    with the visitor details; later views only bump ``page_view``.
    """

    post = models.ForeignKey(
        "blog_platform.Post",
        on_delete=models.CASCADE,
        related_name="analytics",
    )
    date = models.DateField(db_index=True)
    page_view = models.PositiveIntegerField(default=0)
    unique_visitor = models.PositiveIntegerField(default=0)
    referrer = models.CharField(max_length=500, blank=True)
    country = models.CharField(max_length=100, blank=True)
    device = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-date"]
        verbose_name_plural = "Analytics"
        constraints = [
            models.UniqueConstraint(fields=["post", "date"], name="unique_post_analytics_per_day"),
        ]

    def __str__(self):
        return f"{self.post} @ {self.date}: {self.page_view} views"

    @classmethod
    def record_view(cls, post, referrer="", country="", device="", date=None):
        """
        Record one page view of ``post``.

        Returns the (possibly new) analytics row for the day.
        """
        date = date or timezone.localdate()
        updated = cls.objects.filter(post=post, date=date).update(
            page_view=models.F("page_view") + 1,
        )
        if not updated:
            try:
                with transaction.atomic():
                    return cls.objects.create(
                        post=post,
                        date=date,
                        page_view=1,
                        unique_visitor=1,
                        referrer=referrer or "",
                        country=country or "",
                        device=device or "",
                    )
            except IntegrityError:
                # Another request created today's row first
                cls.objects.filter(post=post, date=date).update(
                    page_view=models.F("page_view") + 1,
                )
        return cls.objects.get(post=post, date=date)
