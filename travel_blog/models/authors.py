"""
Author profile model for django-travel-blog.
"""
from django.conf import settings
from django.db import models


class AuthorProfile(models.Model):
    """
    Public-facing details for a post author.

    Kept separate from the user model so any AUTH_USER_MODEL works.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blog_profile",
    )
    display_name = models.CharField(max_length=150, blank=True)
    image = models.CharField(max_length=500, blank=True)
    bio = models.TextField(blank=True)
    website = models.URLField(blank=True)

    def __str__(self):
        return self.name

    @property
    def name(self):
        if self.display_name:
            return self.display_name
        return self.user.get_full_name() or self.user.get_username()
