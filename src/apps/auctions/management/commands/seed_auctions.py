from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from src.apps.auctions.models import Auction, Product

DEMO_PRODUCTS = [
    ("Vintage Camera", "35mm rangefinder in working condition.", Decimal("40.00")),
    ("Mechanical Keyboard", "Tenkeyless board with brown switches.", Decimal("25.00")),
    ("Road Bike", "Aluminium frame, 54cm, recently serviced.", Decimal("150.00")),
]


class Command(BaseCommand):
    help = "Create demo products with one open auction each"

    def add_arguments(self, parser):
        parser.add_argument('--copies', type=int, default=1, help='Auctions to create per product')

    def handle(self, *args, **options):
        copies = int(options['copies'])
        created = 0

        with transaction.atomic():
            for name, description, starting_price in DEMO_PRODUCTS:
                product, _ = Product.objects.get_or_create(name=name, defaults={'description': description})
                for i in range(copies):
                    title = name if copies == 1 else f"{name} #{i + 1}"
                    _, was_created = Auction.objects.get_or_create(
                        product=product, title=title,
                        defaults={'starting_price': starting_price},
                    )
                    created += int(was_created)

        self.stdout.write(self.style.SUCCESS(f'✅ {created} auctions created.'))
