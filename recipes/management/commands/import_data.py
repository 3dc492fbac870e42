"""Management command loading a JSON export through ImportService."""

import json

from django.core.management.base import BaseCommand, CommandError

from recipes.services import ImportService


class Command(BaseCommand):
    help = 'Replaces all data with the users, recipes and reviews of a JSON document'

    def add_arguments(self, parser):
        parser.add_argument("path", help='JSON file shaped {"users": [...], "recipes": [...], "reviews": [...]}')

    def handle(self, *args, **options):
        try:
            with open(options["path"], encoding="utf-8") as handle:
                document = json.load(handle)
        except OSError as exc:
            raise CommandError(f"Cannot read {options['path']}: {exc}")
        except json.JSONDecodeError as exc:
            raise CommandError(f"Invalid JSON in {options['path']}: {exc}")

        missing = [key for key in ("users", "recipes", "reviews") if key not in document]
        if missing:
            raise CommandError(f"Missing keys: {', '.join(missing)}")

        summary = ImportService().import_data(
            reviews=document["reviews"], users=document["users"], recipes=document["recipes"]
        )
        self.stdout.write(self.style.SUCCESS(f"Import complete: {summary}"))
