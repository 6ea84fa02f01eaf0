"""
Comment model for django-travel-blog.
"""
from django.conf import settings
from django.db import models

from ..conf import blog_settings


class Comment(models.Model):
    """
    Comment on a post.

    Supports:
    - Threaded replies via parent field
    - Moderation workflow (only APPROVED comments are shown or counted)
    - Anonymous commenters by name and email
    """

    STATUS_CHOICES = blog_settings.COMMENT_STATUS_CHOICES

    post = models.ForeignKey(
        "travel_blog.Post",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="travel_comments",
    )
    # For anonymous commenters
    author_name = models.CharField(max_length=100, blank=True)
    author_email = models.EmailField(blank=True)
    parent = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="replies",
    )
    body = models.TextField(max_length=blog_settings.COMMENT_MAX_LENGTH)
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default="PENDING",
    )
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["post", "status", "created_at"]),
        ]

    def __str__(self):
        return f"Comment by {self.display_author} on {self.post}"

    @property
    def display_author(self):
        if self.author:
            return self.author.get_username()
        return self.author_name or "Anonymous"

    @property
    def preview(self):
        """Return truncated body for admin display."""
        if len(self.body) > 100:
            return self.body[:100] + "..."
        return self.body

    @property
    def is_reply(self):
        return self.parent is not None

    @property
    def thread_depth(self):
        """Calculate nesting depth of this comment."""
        depth = 0
        current = self.parent
        while current:
            depth += 1
            current = current.parent
        return depth

    def _set_status(self, status):
        self.status = status
        self.save(update_fields=["status", "updated_at"])

    def approve(self):
        """Approve the comment for display."""
        self._set_status("APPROVED")

    def reject(self):
        self._set_status("REJECTED")

    def mark_spam(self):
        self._set_status("SPAM")
