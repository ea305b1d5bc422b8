from django.core.management.base import BaseCommand
from apps.districts.constants import DEFAULT_STATE, DISTRICTS_BY_STATE, PERIOD_CHOICES, districts_for_state

class Command(BaseCommand):
    help = 'List the districts and reporting periods offered by the dashboard selectors'

    def add_arguments(self, parser):
        parser.add_argument(
            '--state',
            type=str,
            default=DEFAULT_STATE,
            help=f'State to list districts for (default: {DEFAULT_STATE})',
        )

    def handle(self, *args, **options):
        state = options['state']
        districts = districts_for_state(state)

        if not districts:
            known = ', '.join(sorted(DISTRICTS_BY_STATE))
            self.stdout.write(self.style.WARNING(f"✗ No districts for '{state}' (known states: {known})"))
            return

        self.stdout.write(self.style.SUCCESS(f'\n=== {state}: {len(districts)} districts ===\n'))
        for index, name in enumerate(districts, start=1):
            self.stdout.write(f"  {index:>2}. {name}")

        self.stdout.write(self.style.SUCCESS('\n=== Reporting periods ==='))
        for value, label in PERIOD_CHOICES:
            self.stdout.write(f"  {value:<10} {label}")
