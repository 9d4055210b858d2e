"""
Shared fixtures for django-blog-platform tests.
"""
import pytest
from django.contrib.auth import get_user_model

from blog_platform.models import Category, Post, Tag

User = get_user_model()


@pytest.fixture
def user(db):
    """Create a regular (non-staff) user."""
    return User.objects.create_user(
        username="reader",
        email="reader@example.com",
        password="testpass123",
    )


@pytest.fixture
def staff_user(db):
    """Create a staff user allowed to use the admin API."""
    return User.objects.create_user(
        username="editor",
        email="editor@example.com",
        password="testpass123",
        first_name="Ada",
        last_name="Editor",
        is_staff=True,
    )


@pytest.fixture
def staff_client(client, staff_user):
    """Django test client logged in as the staff user."""
    client.force_login(staff_user)
    return client


@pytest.fixture
def category(db):
    """Create a test category."""
    return Category.objects.create(name="Web Development", slug="web-development")


@pytest.fixture
def tag(db):
    """Create a test tag."""
    return Tag.objects.create(name="django", slug="django")


@pytest.fixture
def make_post(db, staff_user):
    """Factory for posts authored by the staff user."""

    def _make_post(title="Test Post", content="This is a test post body.", **kwargs):
        tags = kwargs.pop("tags", [])
        categories = kwargs.pop("categories", [])
        kwargs.setdefault("author", staff_user)
        kwargs.setdefault("published", True)
        post = Post.objects.create(title=title, content=content, **kwargs)
        if tags:
            post.tags.set(tags)
        if categories:
            post.categories.set(categories)
        return post

    return _make_post


@pytest.fixture
def post(make_post, tag, category):
    """Create a published test post with a tag and a category."""
    return make_post(
        title="Test Post",
        slug="test-post",
        excerpt="A short excerpt.",
        tags=[tag],
        categories=[category],
    )
