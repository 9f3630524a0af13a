from django.apps import AppConfig


class CompassConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'compass'
    verbose_name = 'Political Compass'
