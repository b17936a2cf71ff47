from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.products.models import Product

SAMPLE_PRODUCTS: list[tuple[str, Decimal, bool]] = [
    ("Monitor Curvo de 49 pulgadas", Decimal("300.00"), True),
    ("Teclado Mecánico RGB", Decimal("89.90"), True),
    ("Mouse Inalámbrico", Decimal("25.50"), True),
    ("Audífonos con Cancelación de Ruido", Decimal("199.00"), False),
    ("Webcam Full HD", Decimal("59.99"), True),
]


class Command(BaseCommand):
    help = "Load sample catalog products, or wipe the catalog with --clear."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete every product instead of seeding.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["clear"]:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(self.style.SUCCESS(f"Catalog cleared: products={deleted}"))
            return

        self.stdout.write("Seeding catalog products...")
        created = 0
        for name, price, availability in SAMPLE_PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "availability": availability},
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: created={created}, total={Product.objects.count()}"
            )
        )
