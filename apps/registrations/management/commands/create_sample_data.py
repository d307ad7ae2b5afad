"""
Management command to create sample data for testing the API.

Usage:
    python manage.py create_sample_data [--count 40] [--seed 7] [--clear]

This creates:
- 1 bureau admin (admin@example.com)
- 1 group leader per roster group (leader1@example.com ... leader10@example.com)
- Registrations placed by the group balancer
"""

import random

from django.core.management.base import BaseCommand

from apps.accounts.models import User, StaffRole
from apps.registrations.models import (
    AgeRange,
    ConversionYears,
    EducationLevel,
    EmploymentStatus,
    Gender,
    MaritalStatus,
    WorkType,
)
from apps.registrations.services import (
    ROSTER,
    register_youth,
    clear_all_registrations,
    get_group_statistics,
)

FIRST_NAMES = ['Grace', 'Jean', 'Esther', 'Paul', 'Ruth', 'David', 'Marie', 'Samuel', 'Sarah', 'Daniel']
LAST_NAMES = ['Kouassi', 'Mensah', 'Traoré', 'Diallo', 'Koné', 'Yao', 'Bamba', 'Ouattara']
NEIGHBORHOODS = ['Cocody', 'Yopougon', 'Abobo', 'Marcory', 'Treichville', 'Adjamé']


class Command(BaseCommand):
    help = 'Create sample staff accounts and registrations'

    def add_arguments(self, parser):
        parser.add_argument(
            '--count',
            type=int,
            default=40,
            help='Number of registrations to create',
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=None,
            help='Random seed for reproducible data',
        )
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete existing registrations before creating new ones',
        )

    def handle(self, *args, **options):
        rng = random.Random(options['seed'])

        if options['clear']:
            self.stdout.write('Clearing existing registrations...')
            clear_all_registrations()

        self.stdout.write('Creating staff accounts...')
        self.create_staff()

        self.stdout.write(f"Creating {options['count']} registrations...")
        created = self.create_registrations(rng, options['count'])

        self.stdout.write(self.style.SUCCESS(f'Created {created} registrations.'))
        self.stdout.write('')
        for group in get_group_statistics()['groups']:
            self.stdout.write(f"  {group['name']}: {group['total']}")
        self.stdout.write('')
        self.stdout.write('Staff accounts:')
        self.stdout.write('  admin@example.com / admin123 (admin)')
        self.stdout.write('  leader1@example.com ... leader10@example.com / password123')

    def create_staff(self):
        """Create the admin and one leader per group if missing."""
        if not User.objects.filter(email='admin@example.com').exists():
            User.objects.create_superuser(
                email='admin@example.com',
                password='admin123',
                display_name='Bureau Admin',
            )

        for index, group in enumerate(ROSTER, start=1):
            email = f'leader{index}@example.com'
            if User.objects.filter(email=email).exists():
                continue
            User.objects.create_user(
                email=email,
                password='password123',
                display_name=f'Leader {group}',
                role=StaffRole.GROUP_LEADER,
                group_name=group,
            )

    def create_registrations(self, rng, count):
        """Register random youths through the normal registration flow."""
        created = 0

        for index in range(count):
            employment_status = rng.choice(EmploymentStatus.values)
            register_youth(
                full_name=f'{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)} {index + 1}',
                gender=rng.choice(Gender.values),
                marital_status=rng.choice(MaritalStatus.values),
                employment_status=employment_status,
                neighborhood=rng.choice(NEIGHBORHOODS),
                age_range=rng.choice(AgeRange.values),
                contact1=f'07{rng.randint(10000000, 99999999)}',
                work_type=rng.choice(WorkType.values) if employment_status == EmploymentStatus.WORKER else '',
                education_level=rng.choice(EducationLevel.values),
                conversion_years=rng.choice(ConversionYears.values),
                water_baptism=rng.random() < 0.6,
                holy_spirit_baptism=rng.random() < 0.4,
            )
            created += 1

        return created
