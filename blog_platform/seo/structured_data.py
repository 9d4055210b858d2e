"""
schema.org JSON-LD and page metadata for public pages.

Every builder returns a plain dict ready for ``json.dumps``.
"""
from ..conf import blog_settings

SCHEMA_CONTEXT = "https://schema.org"


def absolute_url(path=""):
    return f"{blog_settings.SITE_URL}{path}"


def article_schema(post, image_url=None):
    """Article schema for a post; keywords are its categories then tags."""
    categories = [category.name for category in post.categories.all()]
    keywords = categories + [tag.name for tag in post.tags.all()]
    author = post.author.get_full_name() or post.author.get_username()
    image_url = image_url or post.cover_image

    schema = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Article",
        "headline": post.title,
        "description": post.excerpt or post.title,
        "datePublished": post.created_at.isoformat(),
        "dateModified": post.updated_at.isoformat(),
        "author": {"@type": "Person", "name": author},
        "publisher": {"@type": "Organization", "name": blog_settings.SITE_NAME},
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": absolute_url(post.get_absolute_url()),
        },
    }
    if image_url:
        schema["image"] = [image_url]
    if categories:
        schema["articleSection"] = categories[0]
    if keywords:
        schema["keywords"] = keywords
    return schema


def breadcrumb_schema(items):
    """
    BreadcrumbList schema.

    ``items`` is a sequence of ``(name, url)`` pairs; ``url`` may be None
    for the current page.
    """
    elements = []
    for position, (name, url) in enumerate(items, start=1):
        element = {"@type": "ListItem", "position": position, "name": name}
        if url:
            element["item"] = url
        elements.append(element)
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": elements,
    }


def website_schema(search_path="/search/"):
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": blog_settings.SITE_NAME,
        "url": blog_settings.SITE_URL,
        "potentialAction": {
            "@type": "SearchAction",
            "target": {
                "@type": "EntryPoint",
                "urlTemplate": absolute_url(f"{search_path}?q={{search_term_string}}"),
            },
            "query-input": "required name=search_term_string",
        },
    }


def tag_page_schema(tag, post_count):
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "CollectionPage",
        "name": f"標籤：{tag.name}",
        "description": f"探索 {post_count} 篇關於 {tag.name} 的文章",
        "url": absolute_url(tag.get_absolute_url()),
    }


def category_page_schema(category, post_count):
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "CollectionPage",
        "name": f"分類：{category.name}",
        "description": f"探索 {post_count} 篇 {category.name} 分類的文章",
        "url": absolute_url(category.get_absolute_url()),
    }


def page_metadata(title, description="", canonical=None, image=None,
                  page_type="website", published_at=None, updated_at=None,
                  author=None, tags=None):
    """
    Title, description, canonical URL and Open Graph / Twitter card fields
    for a page.
    """
    site_name = blog_settings.SITE_NAME
    full_title = title if title == site_name else f"{title} | {site_name}"
    description = description or blog_settings.SITE_DESCRIPTION
    url = canonical or blog_settings.SITE_URL

    open_graph = {
        "title": full_title,
        "description": description,
        "url": url,
        "siteName": site_name,
        "locale": "zh_TW",
        "type": page_type,
    }
    if image:
        open_graph["images"] = [{"url": image, "width": 1200, "height": 630, "alt": full_title}]
    if page_type == "article":
        open_graph.update({
            "publishedTime": published_at,
            "modifiedTime": updated_at,
            "authors": [author] if author else [],
            "tags": tags or [],
        })

    twitter = {
        "card": "summary_large_image",
        "title": full_title,
        "description": description,
    }
    if image:
        twitter["images"] = [image]

    return {
        "title": full_title,
        "description": description,
        "canonical": url,
        "openGraph": open_graph,
        "twitter": twitter,
        "robots": {"index": True, "follow": True},
    }


def post_metadata(post):
    """Page metadata for a post's public page."""
    return page_metadata(
        title=post.meta_title or post.title,
        description=(
            post.meta_description
            or post.excerpt
            or f"閱讀 {post.title} - {blog_settings.SITE_DESCRIPTION}"
        ),
        canonical=absolute_url(post.get_absolute_url()),
        image=post.cover_image or None,
        page_type="article",
        published_at=post.created_at.isoformat(),
        updated_at=post.updated_at.isoformat(),
        author=post.author.get_full_name() or post.author.get_username(),
        tags=[tag.name for tag in post.tags.all()],
    )
