"""Django app configuration for travel_blog."""
from django.apps import AppConfig


class TravelBlogConfig(AppConfig):
    """Configuration for the travel blog app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "travel_blog"
    verbose_name = "Travel Blog"
