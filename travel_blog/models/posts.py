"""
Post, Category, and Tag models for django-travel-blog.
"""
import math

from django.conf import settings
from django.db import models
from django.db.models import Count, Q
from django.utils import timezone
from django.utils.text import slugify

from ..conf import blog_settings


class Category(models.Model):
    """Top-level grouping for posts (travel, food, worldschooling...)."""

    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "Categories"

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)[:blog_settings.SLUG_MAX_LENGTH]
        super().save(*args, **kwargs)

    @property
    def post_count(self):
        """Return count of published public posts in this category."""
        return self.posts.published().count()


class Tag(models.Model):
    """
    Flat tag for posts.

    Tags are non-hierarchical and can be applied to multiple posts.
    """

    name = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=100, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)[:blog_settings.SLUG_MAX_LENGTH]
        super().save(*args, **kwargs)

    @property
    def post_count(self):
        """Return count of published public posts with this tag."""
        return self.posts.published().count()


class PostQuerySet(models.QuerySet):
    def published(self):
        """Posts that anyone may read: published and public."""
        return self.filter(status="PUBLISHED", visibility="PUBLIC")

    def with_card_data(self):
        """
        Load everything a post card shows in a fixed number of queries.

        Adds ``approved_comment_count`` as an annotation.
        """
        return self.select_related(
            "author",
            "author__blog_profile",
            "category",
        ).prefetch_related(
            "tags",
        ).annotate(
            approved_comment_count=Count(
                "comments",
                filter=Q(comments__status="APPROVED"),
                distinct=True,
            ),
        )

    def due_for_publication(self, now=None):
        """Scheduled posts whose publish time has passed."""
        now = now or timezone.now()
        return self.filter(status="SCHEDULED", scheduled_at__lte=now)


class Post(models.Model):
    """
    Blog post / travel story.

    Popularity is tracked by ``views`` and recency by ``published_at``;
    both feed the related-posts ranking.
    """

    STATUS_CHOICES = blog_settings.STATUS_CHOICES
    VISIBILITY_CHOICES = blog_settings.VISIBILITY_CHOICES

    # Content
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    excerpt = models.TextField(blank=True)
    body = models.TextField()
    featured_image = models.CharField(max_length=500, blank=True)
    read_time = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        help_text="Estimated minutes to read. Calculated from body if blank.",
    )

    # Where the story happened
    location = models.CharField(max_length=255, blank=True)
    country = models.CharField(max_length=100, blank=True)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="travel_posts",
    )

    # Status
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default="DRAFT",
        db_index=True,
    )
    visibility = models.CharField(
        max_length=20,
        choices=VISIBILITY_CHOICES,
        default=blog_settings.DEFAULT_VISIBILITY,
    )
    scheduled_at = models.DateTimeField(
        null=True,
        blank=True,
        db_index=True,
        help_text="Publish automatically at this time",
    )
    published_at = models.DateTimeField(
        null=True,
        blank=True,
        db_index=True,
        help_text="When post was actually published",
    )

    # Taxonomy
    category = models.ForeignKey(
        Category,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="posts",
    )
    tags = models.ManyToManyField(Tag, related_name="posts", blank=True)

    views = models.PositiveIntegerField(default=0)

    # Timestamps
    created_at = models.DateTimeField(db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "visibility", "-published_at"]),
            models.Index(fields=["status", "visibility", "-views"]),
            models.Index(fields=["author", "-published_at"]),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        # Auto-generate a unique slug from title
        if not self.slug:
            base_slug = slugify(self.title)[:blog_settings.SLUG_MAX_LENGTH]
            slug = base_slug
            counter = 1
            while Post.objects.filter(slug=slug).exclude(pk=self.pk).exists():
                slug = f"{base_slug}-{counter}"
                counter += 1
            self.slug = slug

        if not self.created_at:
            self.created_at = timezone.now()

        if not self.read_time and self.body:
            words = len(self.body.split())
            self.read_time = max(1, math.ceil(words / blog_settings.WORDS_PER_MINUTE))

        # Stamp the first publication
        if self.status == "PUBLISHED" and not self.published_at:
            self.published_at = timezone.now()

        super().save(*args, **kwargs)

    @property
    def is_published(self):
        """Check if post is published and visible to everyone."""
        return self.status == "PUBLISHED" and self.visibility == "PUBLIC"

    @property
    def is_scheduled(self):
        """Check if post is waiting for a future publication time."""
        if self.status != "SCHEDULED" or not self.scheduled_at:
            return False
        return self.scheduled_at > timezone.now()

    @property
    def display_date(self):
        return self.published_at or self.created_at

    def publish(self):
        """Publish the post immediately."""
        self.status = "PUBLISHED"
        if not self.published_at:
            self.published_at = timezone.now()
        self.save(update_fields=["status", "published_at", "updated_at"])

    def schedule(self, when):
        """Schedule the post to be published at ``when``."""
        self.status = "SCHEDULED"
        self.scheduled_at = when
        self.save(update_fields=["status", "scheduled_at", "updated_at"])

    def archive(self):
        """Archive the post. Archived posts drop out of every listing."""
        self.status = "ARCHIVED"
        self.save(update_fields=["status", "updated_at"])

    def increment_views(self):
        """Increment view count atomically and return the new value."""
        Post.objects.filter(pk=self.pk).update(views=models.F("views") + 1)
        self.refresh_from_db(fields=["views"])
        return self.views
