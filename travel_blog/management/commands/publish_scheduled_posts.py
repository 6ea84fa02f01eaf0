"""
Publish scheduled posts whose publish time has passed.

Run from cron or a task scheduler:

    python manage.py publish_scheduled_posts
"""
import logging

from django.core.management.base import BaseCommand

from travel_blog.models import Post

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Publish scheduled posts that are due."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="List due posts without publishing them.",
        )

    def handle(self, *args, **options):
        due = Post.objects.due_for_publication().order_by("scheduled_at")
        count = 0
        for post in due:
            if options["dry_run"]:
                self.stdout.write(f"Would publish: {post.slug}")
            else:
                post.publish()
                logger.info("Published scheduled post %s", post.slug)
            count += 1

        verb = "due" if options["dry_run"] else "published"
        self.stdout.write(self.style.SUCCESS(f"{count} posts {verb}."))
