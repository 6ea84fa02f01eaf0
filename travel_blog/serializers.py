"""
JSON representations of posts for django-travel-blog endpoints.
"""
from django.core.exceptions import ObjectDoesNotExist


def author_summary(user):
    try:
        profile = user.blog_profile
    except ObjectDoesNotExist:
        return {
            "name": user.get_full_name() or user.get_username(),
            "image": None,
        }
    return {
        "name": profile.name,
        "image": profile.image or None,
    }


def post_card(post):
    """
    Serialize a post for listings.

    Expects a post loaded through ``PostQuerySet.with_card_data()`` so
    that no extra queries run per post.
    """
    category = None
    if post.category is not None:
        category = {"name": post.category.name, "slug": post.category.slug}

    return {
        "id": post.pk,
        "slug": post.slug,
        "title": post.title,
        "excerpt": post.excerpt,
        "featured_image": post.featured_image or None,
        "published_at": post.display_date,
        "read_time": post.read_time,
        "views": post.views,
        "location": post.location,
        "country": post.country,
        "author": author_summary(post.author),
        "category": category,
        "tags": [{"name": tag.name, "slug": tag.slug} for tag in post.tags.all()],
        "comment_count": getattr(post, "approved_comment_count", 0),
    }
