"""
Related posts ranking for django-travel-blog.

Candidates are gathered in four priority tiers, then padded with the
most popular posts if the tiers come up short:

    A. same category and at least one shared tag  (most viewed first)
    B. same category                              (newest first)
    C. at least one shared tag                    (most viewed first)
    D. same author                                (newest first)

Tiers A and C need tags, tiers A and B need a category. A missing
category or tag set skips the tier; it never matches everything.

Usage:

    from travel_blog.related import find_related_by_slug

    posts = find_related_by_slug("three-weeks-in-bali", limit=4)
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager

from django.core.exceptions import ValidationError
from django.db import DatabaseError, connections

from .conf import blog_settings
from .exceptions import DataAccessFailure, PostNotFound
from .models import Post

logger = logging.getLogger(__name__)

POPULAR = ("-views", "-pk")
RECENT = ("-published_at", "-pk")
FALLBACK = ("-views", "-published_at", "-pk")


@contextmanager
def _data_access(action):
    """Re-raise database errors as DataAccessFailure."""
    try:
        yield
    except DatabaseError as exc:
        raise DataAccessFailure(f"Failed to {action}") from exc


def _fetch(queryset):
    """Evaluate a queryset on a worker thread and release its connection."""
    try:
        return list(queryset)
    finally:
        connections.close_all()


class RelatedPostsRanker:
    """
    Build the ordered, de-duplicated list of posts related to a source post.

    The ranker only reads. It never touches view counters, so repeated
    calls with the same data return the same list.

    Args:
        concurrent: run tier queries on a thread pool. Defaults to the
            RELATED_POSTS_CONCURRENT_QUERIES setting.
    """

    def __init__(self, concurrent=None):
        if concurrent is None:
            concurrent = blog_settings.RELATED_POSTS_CONCURRENT_QUERIES
        self.concurrent = concurrent

    def find_related(self, post_id, limit):
        """Return up to ``limit`` posts related to the post with ``post_id``."""
        return self._find(limit, pk=post_id)

    def find_related_by_slug(self, slug, limit):
        """Return up to ``limit`` posts related to the post with ``slug``."""
        return self._find(limit, slug=slug)

    def _find(self, limit, **lookup):
        if limit <= 0:
            return []
        limit = min(limit, blog_settings.RELATED_POSTS_MAX_LIMIT)

        source, tag_ids = self._resolve_source(**lookup)
        tiers = self.build_tiers(source, tag_ids, limit)

        with _data_access("fetch related posts"):
            results = self._evaluate([qs for _, qs in tiers])

        related = []
        seen = set()
        for (name, _), posts in zip(tiers, results):
            added = 0
            for post in posts:
                if len(related) >= limit:
                    break
                if post.pk in seen:
                    continue
                seen.add(post.pk)
                related.append(post)
                added += 1
            logger.debug(
                "Related tier %s for post %s: %d fetched, %d added",
                name, source.pk, len(posts), added,
            )

        remaining = limit - len(related)
        if remaining > 0:
            fallback = (
                self._candidates(source)
                .exclude(pk__in=seen)
                .order_by(*FALLBACK)[:remaining]
            )
            with _data_access("fetch fallback posts"):
                padding = list(fallback)
            logger.debug(
                "Related fallback for post %s: %d of %d requested",
                source.pk, len(padding), remaining,
            )
            related.extend(padding)

        return related

    def _resolve_source(self, **lookup):
        with _data_access("load source post"):
            try:
                source = (
                    Post.objects.published()
                    .only("id", "category_id", "author_id")
                    .get(**lookup)
                )
            except (Post.DoesNotExist, ValueError, TypeError, ValidationError):
                # Malformed identifiers can never match a post
                raise PostNotFound("Post not found") from None
            tag_ids = list(source.tags.values_list("pk", flat=True))
        return source, tag_ids

    def _candidates(self, source):
        return Post.objects.published().exclude(pk=source.pk).with_card_data()

    def build_tiers(self, source, tag_ids, limit):
        """
        Return ``(name, queryset)`` pairs in priority order.

        Querysets are lazy; nothing hits the database here.
        """
        base = self._candidates(source)
        tagged = None
        if tag_ids:
            # Subquery keeps the tag join from duplicating rows
            tagged = Post.tags.through.objects.filter(
                tag_id__in=tag_ids,
            ).values("post_id")

        tiers = []
        if source.category_id and tagged is not None:
            tiers.append((
                "category+tag",
                base.filter(category_id=source.category_id, pk__in=tagged)
                .order_by(*POPULAR)[:limit],
            ))
        if source.category_id:
            tiers.append((
                "category",
                base.filter(category_id=source.category_id)
                .order_by(*RECENT)[:limit],
            ))
        if tagged is not None:
            tiers.append((
                "tag",
                base.filter(pk__in=tagged).order_by(*POPULAR)[:limit],
            ))
        tiers.append((
            "author",
            base.filter(author_id=source.author_id).order_by(*RECENT)[:limit],
        ))
        return tiers

    def _evaluate(self, querysets):
        if not self.concurrent:
            return [list(qs) for qs in querysets]
        with ThreadPoolExecutor(max_workers=len(querysets)) as pool:
            return list(pool.map(_fetch, querysets))


def find_related(post_id, limit):
    """Shortcut for ``RelatedPostsRanker().find_related``."""
    return RelatedPostsRanker().find_related(post_id, limit)


def find_related_by_slug(slug, limit):
    """Shortcut for ``RelatedPostsRanker().find_related_by_slug``."""
    return RelatedPostsRanker().find_related_by_slug(slug, limit)
