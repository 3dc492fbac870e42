from django.core.management.base import BaseCommand

from recipes.services import ImportService


class Command(BaseCommand):
    """
    Management command to remove (unseed) all recipe data from the database.

    Complements the `seed` and `import_data` commands: users, follow edges,
    recipes, reviews, likes and tokens are deleted and the id sequences are
    reset, leaving an empty schema.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        ImportService().clear()
        self.stdout.write(self.style.SUCCESS("Removed all users, recipes, reviews and follow edges."))
