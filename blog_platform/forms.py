"""
Request validation for the JSON API.

Every endpoint validates its payload with a form before touching the
models or the analysis functions. JSON payloads use camelCase keys;
``JSONForm.from_payload`` maps them onto the snake_case form fields.
"""
from django import forms
from django.core.exceptions import ValidationError

from .conf import blog_settings
from .models import Category, Post, Tag


class StringListField(forms.Field):
    """A JSON array of strings. Missing or null becomes an empty list."""

    default_error_messages = {
        "invalid": "Expected a list of strings.",
    }

    def to_python(self, value):
        if value in self.empty_values:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValidationError(self.error_messages["invalid"], code="invalid")
        if not all(isinstance(item, str) for item in value):
            raise ValidationError(self.error_messages["invalid"], code="invalid")
        return list(value)


class JSONFormMixin:
    """Build a form from a decoded JSON object with camelCase keys."""

    aliases = {}

    @classmethod
    def from_payload(cls, payload, **kwargs):
        data = {cls.aliases.get(key, key): value for key, value in payload.items()}
        return cls(data=data, **kwargs)

    def first_error(self):
        """Return the first validation message, for the error response."""
        for errors in self.errors.values():
            if errors:
                return errors[0]
        return "Invalid request"


class JSONForm(JSONFormMixin, forms.Form):
    pass


class KeywordAnalysisForm(JSONForm):
    aliases = {"existingTags": "existing_tags", "targetKeyword": "target_keyword"}

    content = forms.CharField(
        strip=False,
        error_messages={"required": "Content is required"},
    )
    existing_tags = StringListField(required=False)
    target_keyword = forms.CharField(required=False)


class SEOScoreForm(JSONForm):
    title = forms.CharField(required=False, strip=False)
    content = forms.CharField(required=False, strip=False)
    excerpt = forms.CharField(required=False, strip=False)
    tags = StringListField(required=False)
    categories = StringListField(required=False)


class TrackViewForm(JSONForm):
    aliases = {"postId": "post_id"}

    post_id = forms.IntegerField(error_messages={"required": "postId is required"})
    referrer = forms.CharField(required=False, max_length=500)
    country = forms.CharField(required=False, max_length=100)
    device = forms.CharField(required=False, max_length=100)


class PaginationForm(JSONForm):
    page = forms.IntegerField(required=False, min_value=1)
    limit = forms.IntegerField(required=False, min_value=1)

    def clean_page(self):
        return self.cleaned_data.get("page") or 1

    def clean_limit(self):
        limit = self.cleaned_data.get("limit") or blog_settings.POSTS_PER_PAGE
        return min(limit, blog_settings.MAX_POSTS_PER_PAGE)


class SearchForm(PaginationForm):
    q = forms.CharField(required=False)


class AdminPostFilterForm(PaginationForm):
    search = forms.CharField(required=False)
    published = forms.NullBooleanField(required=False)


class PostForm(JSONFormMixin, forms.ModelForm):
    aliases = {
        "coverImage": "cover_image",
        "metaTitle": "meta_title",
        "metaDescription": "meta_description",
    }

    tags = forms.ModelMultipleChoiceField(queryset=Tag.objects.all(), required=False)
    categories = forms.ModelMultipleChoiceField(
        queryset=Category.objects.all(),
        required=False,
    )

    class Meta:
        model = Post
        fields = [
            "title",
            "slug",
            "content",
            "excerpt",
            "cover_image",
            "meta_title",
            "meta_description",
            "published",
            "tags",
            "categories",
        ]
        error_messages = {
            "title": {"required": "Title is required"},
            "content": {"required": "Content is required"},
        }

    @classmethod
    def for_update(cls, instance, payload):
        """
        Bind a partial update: fields absent from ``payload`` keep their
        stored values.
        """
        data = {
            "title": instance.title,
            "slug": instance.slug,
            "content": instance.content,
            "excerpt": instance.excerpt,
            "cover_image": instance.cover_image,
            "meta_title": instance.meta_title,
            "meta_description": instance.meta_description,
            "published": instance.published,
            "tags": [tag.pk for tag in instance.tags.all()],
            "categories": [category.pk for category in instance.categories.all()],
        }
        data.update({cls.aliases.get(key, key): value for key, value in payload.items()})
        return cls(data=data, instance=instance)


class TagForm(JSONFormMixin, forms.ModelForm):
    class Meta:
        model = Tag
        fields = ["name", "slug", "description"]
        error_messages = {"name": {"required": "Name is required"}}

    @classmethod
    def for_update(cls, instance, payload):
        data = {"name": instance.name, "slug": instance.slug, "description": instance.description}
        data.update(payload)
        return cls(data=data, instance=instance)


class CategoryForm(JSONFormMixin, forms.ModelForm):
    class Meta:
        model = Category
        fields = ["name", "slug", "description"]
        error_messages = {"name": {"required": "Name is required"}}

    @classmethod
    def for_update(cls, instance, payload):
        data = {"name": instance.name, "slug": instance.slug, "description": instance.description}
        data.update(payload)
        return cls(data=data, instance=instance)
