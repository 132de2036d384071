from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from coupons.models import Coupon


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_coupon(db):
    """Factory for coupons, defaulting to the SAVE10 example coupon."""
    def _make(**overrides):
        fields = {
            "code": "SAVE10",
            "description": "10% off, up to 20",
            "discountType": Coupon.PERCENTAGE,
            "discountValue": Decimal("10"),
            "minOrderAmount": Decimal("50"),
            "maxDiscountAmount": Decimal("20"),
            "validUntil": timezone.now() + timedelta(days=365),
        }
        fields.update(overrides)
        return Coupon.objects.create(**fields)
    return _make


@pytest.fixture
def save10(make_coupon):
    return make_coupon()
