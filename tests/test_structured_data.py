"""
Tests for JSON-LD builders and page metadata.
"""
from blog_platform.seo.structured_data import (
    absolute_url,
    article_schema,
    breadcrumb_schema,
    page_metadata,
    website_schema,
)


def test_absolute_url_strips_trailing_slash():
    assert absolute_url("/blog/") == "https://blog.example.com/blog/"


def test_breadcrumbs_positions():
    schema = breadcrumb_schema([("Home", "https://blog.example.com"), ("Post", None)])

    first, last = schema["itemListElement"]
    assert first == {
        "@type": "ListItem",
        "position": 1,
        "name": "Home",
        "item": "https://blog.example.com",
    }
    assert last == {"@type": "ListItem", "position": 2, "name": "Post"}


def test_website_search_action():
    schema = website_schema("/blog/search/")
    target = schema["potentialAction"]["target"]["urlTemplate"]
    assert target == "https://blog.example.com/blog/search/?q={search_term_string}"


def test_article_schema(db, post):
    schema = article_schema(post, image_url="https://cdn.example.com/cover.png")

    assert schema["headline"] == "Test Post"
    assert schema["description"] == "A short excerpt."
    assert schema["author"] == {"@type": "Person", "name": "Ada Editor"}
    assert schema["image"] == ["https://cdn.example.com/cover.png"]
    assert schema["articleSection"] == "Web Development"


def test_article_schema_without_taxonomy(db, make_post):
    schema = article_schema(make_post(title="Plain"))
    assert schema["description"] == "Plain"
    assert "keywords" not in schema
    assert "image" not in schema


def test_page_metadata_site_title_not_repeated():
    meta = page_metadata("Test Blog")
    assert meta["title"] == "Test Blog"
    assert meta["canonical"] == "https://blog.example.com"
    assert meta["openGraph"]["type"] == "website"
    assert "images" not in meta["twitter"]


def test_page_metadata_article():
    meta = page_metadata(
        "Hello",
        description="Intro",
        image="https://cdn.example.com/a.png",
        page_type="article",
        author="Ada",
        tags=["django"],
    )
    assert meta["title"] == "Hello | Test Blog"
    assert meta["openGraph"]["authors"] == ["Ada"]
    assert meta["openGraph"]["tags"] == ["django"]
    assert meta["twitter"]["images"] == ["https://cdn.example.com/a.png"]
