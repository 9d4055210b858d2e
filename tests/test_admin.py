"""
Tests for the Django admin configuration.
"""
import datetime

from django.contrib.admin import helpers
from django.urls import reverse
from django.utils import timezone

from blog_platform.models import Post


class TestPostAdmin:
    """Tests for PostAdmin."""

    def test_changelist_shows_seo_grade(self, admin_client, post):
        response = admin_client.get(reverse("admin:blog_platform_post_changelist"))

        assert response.status_code == 200
        assert "F (55%)" in response.content.decode()

    def test_change_form_shows_seo_report(self, admin_client, post):
        response = admin_client.get(reverse("admin:blog_platform_post_change", args=[post.pk]))

        assert response.status_code == 200
        body = response.content.decode()
        assert "F (55/100)" in body
        assert "標題過短" in body

    def test_add_form_has_no_report(self, admin_client, db):
        response = admin_client.get(reverse("admin:blog_platform_post_add"))

        assert response.status_code == 200
        assert "/100)" not in response.content.decode()

    def test_publish_action(self, admin_client, make_post):
        draft = make_post(title="Draft", published=False)
        assert draft.published_at is None

        response = admin_client.post(reverse("admin:blog_platform_post_changelist"), {
            "action": "publish_posts",
            helpers.ACTION_CHECKBOX_NAME: [draft.pk],
        })

        assert response.status_code == 302
        draft.refresh_from_db()
        assert draft.published
        assert draft.published_at is not None

    def test_publish_action_keeps_first_publication_date(self, admin_client, make_post):
        first_published = timezone.now() - datetime.timedelta(days=30)
        live = make_post(title="Live", published_at=first_published)

        admin_client.post(reverse("admin:blog_platform_post_changelist"), {
            "action": "publish_posts",
            helpers.ACTION_CHECKBOX_NAME: [live.pk],
        })

        live.refresh_from_db()
        assert live.published_at == first_published

    def test_unpublish_action(self, admin_client, post):
        response = admin_client.post(reverse("admin:blog_platform_post_changelist"), {
            "action": "unpublish_posts",
            helpers.ACTION_CHECKBOX_NAME: [post.pk],
        })

        assert response.status_code == 302
        post.refresh_from_db()
        assert not post.published
        assert not Post.objects.published().exists()


class TestTaxonomyAdmin:
    """Tests for the tag and category admins."""

    def test_tag_changelist(self, admin_client, post):
        response = admin_client.get(reverse("admin:blog_platform_tag_changelist"))
        assert response.status_code == 200
        assert "django" in response.content.decode()

    def test_category_changelist(self, admin_client, post):
        response = admin_client.get(reverse("admin:blog_platform_category_changelist"))
        assert response.status_code == 200
        assert "Web Development" in response.content.decode()
