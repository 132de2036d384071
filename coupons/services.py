import logging
from decimal import Decimal

from django.utils import timezone

from .models import Coupon

logger = logging.getLogger(__name__)

INVALID_CODE_MESSAGE = "Invalid coupon code"

HUNDRED = Decimal(100)


def list_active_coupons():
    return Coupon.objects.active().order_by('-created_at')


def get_active_coupon(code):
    return Coupon.objects.find_active_by_code(code)


def is_coupon_valid(coupon, order_amount, now):
    # validFrom, usageLimit and usedCount are stored but not checked
    return (
        coupon.active
        and order_amount >= coupon.minOrderAmount
        and now < coupon.validUntil
    )


def compute_discount_amount(coupon, order_amount):
    """
    Discount a coupon gives on an order of ``order_amount``.

    Percentage coupons take ``discountValue`` percent of the amount, capped at
    ``maxDiscountAmount`` when one is set. Fixed coupons give ``discountValue``
    whatever the amount. All arithmetic stays in Decimal and is not rounded.
    """
    if coupon.discountType == Coupon.PERCENTAGE:
        raw = order_amount * coupon.discountValue / HUNDRED
        if coupon.maxDiscountAmount is not None:
            return min(raw, coupon.maxDiscountAmount)
        return raw
    return coupon.discountValue


def validate_coupon(code, order_amount, now=None):
    """
    Check ``code`` against an order of ``order_amount`` (a Decimal).

    Unknown or inactive codes give ``{"valid": False, "message": ...}``.
    Otherwise the result carries the coupon and its discount, and the
    discount is filled in even when the coupon does not qualify.
    """
    coupon = get_active_coupon(code)
    if coupon is None:
        logger.info("Validation requested for unknown coupon code: %r", code)
        return {"valid": False, "message": INVALID_CODE_MESSAGE}

    if now is None:
        now = timezone.now()

    valid = is_coupon_valid(coupon, order_amount, now)
    discount = compute_discount_amount(coupon, order_amount)
    logger.debug("Coupon %s on %s: valid=%s discount=%s", coupon.code, order_amount, valid, discount)
    return {
        "valid": valid,
        "coupon": coupon,
        "discount": discount,
    }
