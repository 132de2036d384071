from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.utils import timezone

from coupons.models import Coupon

DEFAULT_COUPONS = [
    # code, description, type, value, min order, max discount
    ('WELCOME10', 'Welcome discount for new users', Coupon.PERCENTAGE, '10', '500', '100'),
    ('SAVE20', 'Save 20% on your order', Coupon.PERCENTAGE, '20', '1000', '200'),
    ('FLAT100', 'Flat 100 off on orders above 800', Coupon.FIXED, '100', '800', '100'),
    ('MEGA50', 'Mega sale - 50% off', Coupon.PERCENTAGE, '50', '2000', '500'),
    ('NEWUSER', 'New user special discount', Coupon.FIXED, '200', '1500', '200'),
    ('FESTIVAL25', 'Festival special - 25% off', Coupon.PERCENTAGE, '25', '1200', '300'),
]


class Command(BaseCommand):
    help = 'Create the standard storefront coupons that do not exist yet'

    def add_arguments(self, parser):
        parser.add_argument(
            '--days', type=int, default=365,
            help='Number of days the new coupons stay valid (default: 365)',
        )

    def handle(self, *args, **options):
        now = timezone.now()
        valid_until = now + timedelta(days=options['days'])
        created = 0

        for code, description, discount_type, value, min_order, max_discount in DEFAULT_COUPONS:
            _, was_created = Coupon.objects.get_or_create(
                code=code,
                defaults={
                    'description': description,
                    'discountType': discount_type,
                    'discountValue': Decimal(value),
                    'minOrderAmount': Decimal(min_order),
                    'maxDiscountAmount': Decimal(max_discount),
                    'validFrom': now,
                    'validUntil': valid_until,
                },
            )
            if was_created:
                created += 1
                self.stdout.write(f"Created {code}")
            else:
                self.stdout.write(self.style.WARNING(f"Skipping {code}: already exists"))

        self.stdout.write(self.style.SUCCESS(f"{created} coupon(s) created"))
