"""
Shared fixtures for django-travel-blog tests.
"""
import itertools
from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone

from travel_blog.models import Category, Post, Tag

User = get_user_model()


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        username="other",
        email="other@example.com",
        password="pass",
    )


@pytest.fixture
def category(db):
    """Create a test category."""
    return Category.objects.create(name="Travel", slug="travel")


@pytest.fixture
def make_tag(db):
    def _make(name):
        return Tag.objects.create(name=name)

    return _make


@pytest.fixture
def make_post(db, user):
    """
    Factory for posts.

    Published posts get ``published_at`` set ``days_ago`` days in the past
    so recency ordering is deterministic.
    """
    counter = itertools.count(1)

    def _make(
        title=None,
        author=None,
        category=None,
        tags=(),
        status="PUBLISHED",
        visibility="PUBLIC",
        views=0,
        days_ago=0,
        **kwargs,
    ):
        n = next(counter)
        published_at = None
        if status == "PUBLISHED":
            published_at = timezone.now() - timedelta(days=days_ago, minutes=n)
        post = Post.objects.create(
            title=title or f"Post {n}",
            body="A short travel story.",
            author=author or user,
            category=category,
            status=status,
            visibility=visibility,
            views=views,
            published_at=published_at,
            **kwargs,
        )
        if tags:
            post.tags.set(tags)
        return post

    return _make
