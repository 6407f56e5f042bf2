"""``runserver`` that listens on the port configured through ``PORT``."""

from __future__ import annotations

from django.conf import settings
from django.core.management.base import CommandError
from django.core.management.commands.runserver import Command as BaseRunserverCommand


class Command(BaseRunserverCommand):
    help = "Starts the catalog API development server on $PORT."

    def handle(self, *args, **options):
        if not options.get("addrport"):
            if not settings.PORT:
                raise CommandError(
                    "PORT is not configured. Set the PORT environment variable "
                    "or pass an explicit address, e.g. 'runserver 0.0.0.0:3000'."
                )
            self.default_port = str(settings.PORT)
        super().handle(*args, **options)

    def on_bind(self, server_port):
        super().on_bind(server_port)
        self.stdout.write(
            f"Swagger docs available at http://{self.addr or 'localhost'}:{server_port}/api-docs/"
        )
