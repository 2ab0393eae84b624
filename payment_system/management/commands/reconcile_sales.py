import logging

from django.core.management.base import BaseCommand, CommandError

from infrastructure.container import container


logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Marks products sold for completed transactions whose product row was never updated."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Only report what would be fixed",
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS("Starting sale reconciliation..."))

        result = container.sale_service().reconcile_orphaned_sales(dry_run=options["dry_run"])
        if not result.ok:
            raise CommandError(result.error_detail)

        summary = result.value
        verb = "Would fix" if options["dry_run"] else "Fixed"
        self.stdout.write(f"Found {summary['checked']} completed transaction(s) not reflected on their product.")
        self.stdout.write(self.style.SUCCESS(f"{verb} {summary['fixed']} product(s)."))
        if summary["conflicts"]:
            self.stdout.write(
                self.style.WARNING(f"{summary['conflicts']} transaction(s) point at a product sold by another payment.")
            )
