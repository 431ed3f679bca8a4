from django.apps import AppConfig


class StringAnalyserConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'String_Analyser'
    verbose_name = 'String Analyzer'

    def ready(self):
        from .store import RecordStore

        # one store per process, shared by every view through urls.py
        self.store = RecordStore()
