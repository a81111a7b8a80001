from django.apps import AppConfig


class TablesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "tables"

    def ready(self):
        # Connect signal receivers decorated with @receiver.
        import tables.signals  # noqa
