from django.apps import AppConfig


class TranscriptConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'transcript'
    verbose_name = 'Chat transcripts'
