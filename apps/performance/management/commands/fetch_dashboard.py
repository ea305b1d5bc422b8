from django.core.management.base import BaseCommand, CommandError
from apps.districts.constants import DEFAULT_PERIOD, ODISHA_DISTRICTS, PERIOD_CHOICES, is_valid_district
from apps.performance.kpis import build_stat_cards
from apps.performance.services import DashboardDataService
from apps.performance.state import DashboardState, Selection, STATUS_READY
import json
import time
import logging

logger = logging.getLogger(__name__)

class Command(BaseCommand):
    help = 'Fetch the dashboard report for a district from the dashboard API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--district',
            type=str,
            default=None,
            help='District to fetch (required unless --all is given)'
        )
        parser.add_argument(
            '--period',
            type=str,
            default=DEFAULT_PERIOD,
            choices=[value for value, _ in PERIOD_CHOICES],
            help='Reporting period (default: current)'
        )
        parser.add_argument(
            '--all',
            action='store_true',
            help='Fetch every district and print a coverage summary'
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Print the raw payload as JSON'
        )
        parser.add_argument(
            '--delay',
            type=float,
            default=0.5,
            help='Seconds to wait between requests with --all (default: 0.5)'
        )

    def handle(self, *args, **options):
        service = DashboardDataService()
        period = options['period']

        if options['all']:
            self._sweep(service, period, options['delay'])
            return

        district = options['district']
        if not district:
            raise CommandError('Pass --district NAME or --all')
        if not is_valid_district(district):
            raise CommandError(f"Unknown district: {district}")

        state = self._fetch(service, district, period)

        if state.status != STATUS_READY:
            raise CommandError(f"✗ {district}: {state.error}")

        if options['json']:
            self.stdout.write(json.dumps(state.data.to_api(), indent=2, ensure_ascii=False))
            return

        self.stdout.write(self.style.SUCCESS(f'\n=== Report for {district}, {state.selection.state} ({period}) ===\n'))
        for card in build_stat_cards(state.data.kpi):
            line = f"  {card.title:<22} {card.display}"
            if card.change_display:
                line += f"  ({card.change_display} vs. last month)"
            self.stdout.write(line)

        self.stdout.write(
            f"\n  Monthly points: {len(state.data.monthly)}"
            f"\n  Comparison points: {len(state.data.comparison)}"
            f"\n  Fund slices: {len(state.data.funds)}"
        )

    def _fetch(self, service, district, period):
        state = DashboardState()
        return state.select(Selection(district=district, period=period)).run(service)

    def _sweep(self, service, period, delay):
        self.stdout.write(self.style.SUCCESS(f'Fetching {len(ODISHA_DISTRICTS)} districts ({period})...'))

        failures = {}
        ok_count = 0

        for index, district in enumerate(ODISHA_DISTRICTS):
            if index and delay:
                time.sleep(delay)  # Be nice to API

            state = self._fetch(service, district, period)

            if state.status == STATUS_READY:
                ok_count += 1
                self.stdout.write(self.style.SUCCESS(f'  ✓ {district}'))
            else:
                failures[district] = state.error
                self.stdout.write(self.style.WARNING(f'  ✗ {district}: {state.error}'))

        total = len(ODISHA_DISTRICTS)
        pct = ok_count / total * 100 if total else 0
        logger.info(f"Dashboard sweep complete: {ok_count}/{total} districts with data")

        self.stdout.write(
            self.style.SUCCESS(
                f'\n{"="*50}\n'
                f'Districts WITH data: {ok_count}/{total} ({pct:.1f}%)\n'
                f'Districts FAILED: {len(failures)}\n'
                f'{"="*50}'
            )
        )
