from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured


class StandingsCoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'leagueboard.standings_core'
    verbose_name = 'League Standings Core'

    def ready(self):
        from leagueboard.standings_core.conf import check_settings
        from leagueboard.standings_core.exceptions import ConfigurationError

        try:
            check_settings()
        except ConfigurationError as e:
            raise ImproperlyConfigured(str(e)) from e
