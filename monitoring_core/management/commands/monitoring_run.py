"""
Monitoring Run Command

Runs all active monitoring providers and prints a status report.
"""

from django.core.management.base import BaseCommand, CommandError

from monitoring_core.providers.base import CacheableMonitoringProvider
from monitoring_core.registry import get_registry

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2


class Command(BaseCommand):
    help = 'Run all active monitoring providers and report their health'

    def add_arguments(self, parser):
        parser.add_argument(
            '--no-cache',
            action='store_true',
            help='Execute providers directly, bypassing cached results'
        )

        parser.add_argument(
            '--flush',
            action='store_true',
            help='Flush the monitoring cache before running'
        )

    def handle(self, *args, **options):
        registry = get_registry()
        handler = registry.execution_handler

        if options['flush']:
            handler.cache_manager.flush_all()

        results = []
        for provider in registry.providers:
            if not provider.is_active():
                continue

            result = handler.execute_provider_safely(provider, use_cache=not options['no_cache'])
            results.append((provider, result))

        if not results:
            raise CommandError('No active providers available. Skipping.', returncode=EXIT_INVALID)

        self.stdout.write('Checking Monitoring status')

        is_healthy = True
        for provider, result in results:
            healthy = result.is_healthy()
            is_healthy = is_healthy and healthy
            name = result.name

            self.stdout.write('%s %s%s' % (
                ' ✅' if healthy else '🚨',
                self.style.SUCCESS(name) if healthy else self.style.ERROR(name),
                ' (cached)' if isinstance(provider, CacheableMonitoringProvider) else '',
            ))

        self.stdout.write('Monitoring status: ' + ('OK' if is_healthy else 'FAILED'))

        if not is_healthy:
            raise CommandError('Monitoring providers reported failures', returncode=EXIT_FAILURE)
