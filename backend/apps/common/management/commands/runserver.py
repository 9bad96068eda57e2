from django.conf import settings
from django.core.management.commands.runserver import Command as BaseRunserverCommand


class Command(BaseRunserverCommand):
    """`runserver` whose default port comes from the PORT setting (default 8080)."""

    default_port = str(settings.PORT)
