"""
Models for django-travel-blog.

All models are importable from travel_blog.models:

    from travel_blog.models import Post, Category, Tag, Comment, AuthorProfile
"""
from .posts import Category, Tag, Post, PostQuerySet
from .authors import AuthorProfile
from .comments import Comment

__all__ = [
    # Posts
    "Category",
    "Tag",
    "Post",
    "PostQuerySet",
    # Authors
    "AuthorProfile",
    # Comments
    "Comment",
]
