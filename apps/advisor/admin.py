from django.contrib import admin
from .models import ChatMessage


@admin.register(ChatMessage)
class ChatMessageAdmin(admin.ModelAdmin):
    list_display = ['owner', 'role', 'preview', 'created_at']
    list_filter = ['role', 'created_at']
    search_fields = ['owner__email', 'content']
    readonly_fields = ['created_at']
    ordering = ['-created_at']

    def preview(self, obj):
        return obj.content[:80]
    preview.short_description = 'Message'
