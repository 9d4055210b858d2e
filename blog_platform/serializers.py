"""
Plain-dict representations of the models for JSON responses.
"""


def serialize_author(user):
    return {
        "id": user.pk,
        "name": user.get_full_name() or user.get_username(),
    }


def serialize_tag(tag, post_count=None):
    data = {
        "id": tag.pk,
        "name": tag.name,
        "slug": tag.slug,
        "description": tag.description,
    }
    if post_count is not None:
        data["postCount"] = post_count
    return data


def serialize_category(category, post_count=None):
    data = {
        "id": category.pk,
        "name": category.name,
        "slug": category.slug,
        "description": category.description,
    }
    if post_count is not None:
        data["postCount"] = post_count
    return data


def serialize_post_summary(post):
    """Fields shown in listings and navigation links."""
    return {
        "id": post.pk,
        "title": post.title,
        "slug": post.slug,
        "excerpt": post.preview,
        "createdAt": post.created_at.isoformat(),
    }


def serialize_post(post, include_content=True):
    data = {
        "id": post.pk,
        "title": post.title,
        "slug": post.slug,
        "excerpt": post.excerpt,
        "coverImage": post.cover_image,
        "metaTitle": post.meta_title,
        "metaDescription": post.meta_description,
        "published": post.published,
        "publishedAt": post.published_at.isoformat() if post.published_at else None,
        "viewCount": post.view_count,
        "author": serialize_author(post.author),
        "tags": [serialize_tag(tag) for tag in post.tags.all()],
        "categories": [serialize_category(category) for category in post.categories.all()],
        "createdAt": post.created_at.isoformat(),
        "updatedAt": post.updated_at.isoformat(),
    }
    if include_content:
        data["content"] = post.content
    return data
