"""
Django admin configuration for travel_blog.
"""
from django.contrib import admin

from .models import AuthorProfile, Category, Comment, Post, Tag


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "post_count", "created_at"]
    search_fields = ["name", "slug", "description"]
    prepopulated_fields = {"slug": ("name",)}


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "post_count", "created_at"]
    search_fields = ["name", "slug"]
    prepopulated_fields = {"slug": ("name",)}
    readonly_fields = ["created_at"]


@admin.register(AuthorProfile)
class AuthorProfileAdmin(admin.ModelAdmin):
    list_display = ["name", "user", "website"]
    search_fields = ["display_name", "user__username", "user__email"]
    raw_id_fields = ["user"]


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    fields = ["display_author", "body", "status", "created_at"]
    readonly_fields = ["display_author", "created_at"]
    show_change_link = True


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = [
        "title",
        "author",
        "status",
        "visibility",
        "category",
        "views",
        "published_at",
    ]
    list_filter = ["status", "visibility", "category", "published_at"]
    search_fields = ["title", "excerpt", "body", "location", "country"]
    raw_id_fields = ["author", "category"]
    filter_horizontal = ["tags"]
    date_hierarchy = "created_at"
    inlines = [CommentInline]
    readonly_fields = ["views", "created_at", "updated_at", "published_at"]
    prepopulated_fields = {"slug": ("title",)}

    fieldsets = (
        (None, {
            "fields": ("title", "slug", "excerpt", "body", "featured_image", "author")
        }),
        ("Taxonomy", {
            "fields": ("category", "tags", "location", "country")
        }),
        ("Status", {
            "fields": ("status", "visibility", "scheduled_at", "published_at")
        }),
        ("Metadata", {
            "fields": ("read_time", "views", "created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    actions = ["publish_posts", "archive_posts"]

    @admin.action(description="Publish selected posts")
    def publish_posts(self, request, queryset):
        for post in queryset:
            post.publish()
        self.message_user(request, f"{queryset.count()} posts published.")

    @admin.action(description="Archive selected posts")
    def archive_posts(self, request, queryset):
        for post in queryset:
            post.archive()
        self.message_user(request, f"{queryset.count()} posts archived.")


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["preview", "display_author", "post", "status", "created_at"]
    list_filter = ["status", "created_at"]
    search_fields = ["body", "author__username", "author_name", "post__title"]
    raw_id_fields = ["post", "author", "parent"]
    readonly_fields = ["created_at", "updated_at"]
    actions = ["approve_comments", "reject_comments", "mark_spam"]

    @admin.action(description="Approve selected comments")
    def approve_comments(self, request, queryset):
        for comment in queryset:
            comment.approve()
        self.message_user(request, f"{queryset.count()} comments approved.")

    @admin.action(description="Reject selected comments")
    def reject_comments(self, request, queryset):
        for comment in queryset:
            comment.reject()
        self.message_user(request, f"{queryset.count()} comments rejected.")

    @admin.action(description="Mark selected comments as spam")
    def mark_spam(self, request, queryset):
        for comment in queryset:
            comment.mark_spam()
        self.message_user(request, f"{queryset.count()} comments marked as spam.")
