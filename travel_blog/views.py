"""
Views for django-travel-blog.
"""
import logging
import re

from django.db import DatabaseError
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .conf import blog_settings
from .exceptions import PostNotFound
from .models import Post
from .related import RelatedPostsRanker
from .serializers import post_card

logger = logging.getLogger(__name__)


LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_limit(raw):
    """
    Read the ``limit`` query parameter, clamped to [1, max].

    Only the leading integer counts, so "7abc" is 7 and "4.5" is 4.
    Values with no leading integer use the default.
    """
    limit = blog_settings.RELATED_POSTS_DEFAULT_LIMIT
    match = LEADING_INT.match(raw) if raw is not None else None
    if match:
        limit = int(match.group(1))
    return min(blog_settings.RELATED_POSTS_MAX_LIMIT, max(1, limit))


class RelatedPostsView(View):
    """Return posts related to a published post as JSON."""

    http_method_names = ["get"]

    def get(self, request, slug):
        limit = parse_limit(request.GET.get("limit"))

        try:
            posts = RelatedPostsRanker().find_related_by_slug(slug, limit)
            payload = [post_card(post) for post in posts]
        except PostNotFound:
            return JsonResponse({"error": "Post not found"}, status=404)
        except Exception:
            logger.exception("Error fetching related posts for %s", slug)
            return JsonResponse({
                "success": False,
                "error": "Internal server error",
                "message": "Failed to fetch related posts",
            }, status=500)

        return JsonResponse({"success": True, "posts": payload})


@method_decorator(csrf_exempt, name="dispatch")
class PostViewCountView(View):
    """Record a page view for a published post."""

    http_method_names = ["post"]

    def post(self, request, slug):
        try:
            post = Post.objects.published().only("id", "views").get(slug=slug)
        except Post.DoesNotExist:
            return JsonResponse(
                {"success": False, "error": "Post not found"},
                status=404,
            )
        except DatabaseError:
            logger.exception("Error loading post %s for view count", slug)
            return self._error()

        try:
            views = post.increment_views()
        except DatabaseError:
            logger.exception("Error updating view count for %s", slug)
            return self._error()

        return JsonResponse({"success": True, "views": views})

    def _error(self):
        return JsonResponse({
            "success": False,
            "error": "Internal server error",
            "views": 0,
        }, status=500)
