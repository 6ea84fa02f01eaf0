"""
Exceptions raised by django-travel-blog services.
"""
from django.core.exceptions import ObjectDoesNotExist


class PostNotFound(ObjectDoesNotExist):
    """No published, public post matches the requested identifier."""


class DataAccessFailure(Exception):
    """A database query failed while building a result."""
