from django.contrib import admin
from .models import Post


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["short_content", "user", "reaction_count", "comment_count", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["content", "user__email", "user__username"]
    readonly_fields = ["id", "reactions", "comments", "created_at", "updated_at"]

    def short_content(self, obj):
        return obj.content[:60] or "—"
    short_content.short_description = "Content"

    def reaction_count(self, obj):
        return len(obj.reactions)
    reaction_count.short_description = "Reactions"

    def comment_count(self, obj):
        return len(obj.comments)
    comment_count.short_description = "Comments"
