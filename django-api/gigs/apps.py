from django.apps import AppConfig


class GigsConfig(AppConfig):
    name = "gigs"
    verbose_name = "Gigs and bookings"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self) -> None:
        from gigs import signals  # noqa: F401
