"""
Management command to load the default shopping categories.

Creates Carnes, Verduras, Bebidas and Otros with their suggested items.
Existing rows are kept, so the command can be re-run after deploys.

Usage:
    python manage.py seed_categories
"""

from django.core.management.base import BaseCommand

from apps.shopping.catalog import DEFAULT_CATEGORIES
from apps.shopping.services import seed_default_categories


class Command(BaseCommand):
    help = 'Create the default shopping categories and suggested items'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='List what would be created without touching the database',
        )

    def handle(self, *args, **options):
        if options['dry_run']:
            for category in DEFAULT_CATEGORIES:
                names = ', '.join(item.name for item in category.suggested_items)
                self.stdout.write(f'  {category.icon} {category.name}: {names}')
            self.stdout.write(self.style.WARNING('\n--dry-run mode: No changes made.'))
            return

        categories, items = seed_default_categories()

        if categories == 0 and items == 0:
            self.stdout.write(self.style.SUCCESS('Categories already seeded. All good!'))
            return

        self.stdout.write(self.style.SUCCESS(
            f'Created {categories} category(ies) and {items} suggested item(s).'
        ))
