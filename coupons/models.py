from django.db import models


class CouponQuerySet(models.QuerySet):

    def active(self):
        return self.filter(active=True)

    def find_active_by_code(self, code):
        """Return the active coupon with this code, or None."""
        return self.active().filter(code=code).first()


class Coupon(models.Model):
    CODE_MAX = 64
    MONEY_MAX_DIGITS = 12
    MONEY_DECIMAL_PLACES = 2

    PERCENTAGE = 'PERCENTAGE'
    FIXED = 'FIXED'
    DISCOUNT_TYPE_CHOICES = [
        (PERCENTAGE, 'Percentage'),
        (FIXED, 'Fixed Amount'),
    ]

    code = models.CharField(max_length=CODE_MAX, unique=True)
    description = models.CharField(max_length=255, blank=True)
    discountType = models.CharField(max_length=10, choices=DISCOUNT_TYPE_CHOICES)
    discountValue = models.DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)  # percent points or flat amount
    minOrderAmount = models.DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES, default=0)
    maxDiscountAmount = models.DecimalField(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES, null=True, blank=True)
    usageLimit = models.PositiveIntegerField(null=True, blank=True)
    usedCount = models.PositiveIntegerField(default=0)
    validFrom = models.DateTimeField(null=True, blank=True)
    validUntil = models.DateTimeField()
    active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    objects = CouponQuerySet.as_manager()

    def __str__(self):
        return self.code
