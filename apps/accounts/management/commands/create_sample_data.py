"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data [--year 2024] [--clear]

This creates:
- 4 users (admin, alice, bob, charlie)
- An event for the given year with its 24 calendar days
- Memberships for every user
- One bottle per member plus an unassigned bottle
- Bottles assigned to the first days, with a few tastings and comments
- A settlement for the admin
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from decimal import Decimal
from datetime import date

from apps.accounts.models import User, UserRole
from apps.events.models import Event, EventMembership, EventStatus
from apps.events.services import create_event
from apps.bottles.models import BottleSubmission
from apps.advent.models import CalendarDay, TastingEntry, Comment
from apps.settlements.models import Settlement


BOTTLES = [
    ('alice', {
        'whiskey_name': 'Lagavulin 16',
        'distillery': 'Lagavulin',
        'country': 'Scotland',
        'style': 'Islay Single Malt',
        'abv': Decimal('43.0'),
        'volume': '700ml',
        'price': Decimal('89.90'),
    }),
    ('bob', {
        'whiskey_name': 'Redbreast 12',
        'distillery': 'Midleton',
        'country': 'Ireland',
        'style': 'Single Pot Still',
        'abv': Decimal('40.0'),
        'volume': '700ml',
        'price': Decimal('54.50'),
    }),
    ('charlie', {
        'whiskey_name': 'Yamazaki 12',
        'distillery': 'Yamazaki',
        'country': 'Japan',
        'style': 'Single Malt',
        'abv': Decimal('43.0'),
        'volume': '700ml',
        'price': Decimal('165.00'),
    }),
    ('admin', {
        'whiskey_name': "Booker's Bourbon",
        'distillery': 'Jim Beam',
        'country': 'USA',
        'style': 'Bourbon',
        'abv': Decimal('63.0'),
        'volume': '750ml',
        'price': Decimal('95.00'),
    }),
    (None, {
        'whiskey_name': 'Springbank 10',
        'distillery': 'Springbank',
        'country': 'Scotland',
        'style': 'Campbeltown Single Malt',
        'abv': Decimal('46.0'),
        'volume': '700ml',
    }),
]


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--year',
            type=int,
            default=None,
            help='Event year (defaults to the current year)',
        )
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        year = options['year'] or timezone.localdate().year

        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        event = self.create_event(users['admin'], year)
        bottles = self.create_bottles(users, event)
        self.assign_days(users, event, bottles)

        Settlement.objects.update_or_create(
            event=event,
            user=users['admin'],
            defaults={'has_settled': True}
        )

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (club admin)')
        self.stdout.write('  alice@example.com / password123')
        self.stdout.write('  bob@example.com / password123')
        self.stdout.write('  charlie@example.com / password123')

    def clear_data(self):
        """Clear all club data from the database."""
        Comment.objects.all().delete()
        TastingEntry.objects.all().delete()
        Settlement.objects.all().delete()
        CalendarDay.objects.all().delete()
        BottleSubmission.objects.all().delete()
        EventMembership.objects.all().delete()
        Event.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'name': 'Admin User',
                'role': UserRole.ADMIN,
                'is_staff': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        users = {'admin': admin}
        for key, name in [('alice', 'Alice Peat'), ('bob', 'Bob Barrel'), ('charlie', 'Charlie Cask')]:
            user, _ = User.objects.get_or_create(
                email=f'{key}@example.com',
                defaults={'name': name}
            )
            user.set_password('password123')
            user.save()
            users[key] = user

        return users

    def create_event(self, admin, year):
        """Create the event (and its days) unless it already exists."""
        self.stdout.write(f'  Creating event {year}...')

        event = Event.objects.filter(year=year).first()
        if event is None:
            event = create_event(
                name=f'Whiskey Advent {year}',
                year=year,
                start_date=date(year, 12, 1),
                end_date=date(year, 12, 24),
                created_by=admin,
                description='Twenty-four drams, one per day.',
                status=EventStatus.ACTIVE,
            )

        for user in User.objects.filter(email__endswith='@example.com'):
            EventMembership.objects.get_or_create(event=event, user=user)

        return event

    def create_bottles(self, users, event):
        """Create one bottle per member and one unassigned bottle."""
        self.stdout.write('  Creating bottles...')

        bottles = []
        for owner_key, details in BOTTLES:
            owner = users[owner_key] if owner_key else None
            if owner is not None:
                bottle, _ = BottleSubmission.objects.get_or_create(
                    event=event,
                    user=owner,
                    defaults=details
                )
            else:
                bottle = BottleSubmission.objects.create(event=event, user=None, **details)
            bottles.append(bottle)

        return bottles

    def assign_days(self, users, event, bottles):
        """Put bottles behind the first doors and add a little activity."""
        self.stdout.write('  Assigning days...')

        days = list(event.calendar_days.order_by('day_number')[:len(bottles)])
        for day, bottle in zip(days, bottles):
            day.bottle_submission = bottle
            day.save(update_fields=['bottle_submission'])

        first_day = days[0]
        first_day.is_revealed = True
        first_day.save(update_fields=['is_revealed'])

        tastings = [
            ('alice', 9, 'Smoke, iodine, a long sweet finish.', True),
            ('bob', 7, 'Too peaty for me, but well made.', False),
        ]
        for key, rating, notes, buy_again in tastings:
            TastingEntry.objects.update_or_create(
                calendar_day=first_day,
                user=users[key],
                defaults={
                    'rating': rating,
                    'tasting_notes': notes,
                    'would_buy_again': buy_again,
                }
            )

        if not first_day.comments.exists():
            Comment.objects.create(
                calendar_day=first_day,
                user=users['charlie'],
                content='What a way to open the calendar!'
            )
