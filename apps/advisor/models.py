from django.db import models
from django.conf import settings


class ChatRole(models.TextChoices):
    USER = 'user', 'User'
    MODEL = 'model', 'Coach'


class ChatMessage(models.Model):
    """One turn of the coach conversation."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='chat_messages'
    )
    role = models.CharField(max_length=10, choices=ChatRole.choices)
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'chat_messages'
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='chat_owner_created_idx'),
        ]

    def __str__(self):
        preview = self.content[:40]
        return f"{self.role}: {preview}"
