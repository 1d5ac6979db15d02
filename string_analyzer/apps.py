from django.apps import AppConfig


class StringAnalyzerConfig(AppConfig):
    name = 'string_analyzer'
    verbose_name = 'String Analyzer'

    def ready(self):
        from .repository import StringRepository

        # Single store owned by the app for the lifetime of the process;
        # views receive it through their ``repository`` attribute.
        self.repository = StringRepository()
