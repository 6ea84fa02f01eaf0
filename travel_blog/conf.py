"""
Configuration settings for django-travel-blog.

Override these in your Django settings.py:

    TRAVEL_BLOG = {
        'DEFAULT_VISIBILITY': 'PUBLIC',
        'RELATED_POSTS_MAX_LIMIT': 10,
        'RELATED_POSTS_CONCURRENT_QUERIES': True,
        ...
    }
"""
from django.conf import settings

DEFAULTS = {
    # Publication state
    "STATUS_CHOICES": [
        ("DRAFT", "Draft"),
        ("PUBLISHED", "Published"),
        ("SCHEDULED", "Scheduled"),
        ("ARCHIVED", "Archived"),
    ],
    "VISIBILITY_CHOICES": [
        ("PUBLIC", "Public"),
        ("PRIVATE", "Private"),
        ("RESTRICTED", "Restricted"),
    ],
    "DEFAULT_VISIBILITY": "PUBLIC",

    # Comments
    "COMMENT_STATUS_CHOICES": [
        ("PENDING", "Pending"),
        ("APPROVED", "Approved"),
        ("REJECTED", "Rejected"),
        ("SPAM", "Spam"),
    ],
    "COMMENT_MAX_LENGTH": 5000,

    # Posts
    "WORDS_PER_MINUTE": 200,
    "SLUG_MAX_LENGTH": 100,

    # Related posts
    "RELATED_POSTS_DEFAULT_LIMIT": 4,
    "RELATED_POSTS_MAX_LIMIT": 10,
    "RELATED_POSTS_CONCURRENT_QUERIES": False,
}


class BlogSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from travel_blog.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid travel_blog setting: {name}")

        user_settings = getattr(settings, "TRAVEL_BLOG", {})
        return user_settings.get(name, DEFAULTS[name])


blog_settings = BlogSettings()
