from rest_framework import serializers

from .models import Coupon


class CouponSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Coupon
        fields = [
            'id', 'code', 'description',
            'discountType', 'discountValue',
            'minOrderAmount', 'maxDiscountAmount',
            'usageLimit', 'usedCount',
            'validFrom', 'validUntil',
            'active', 'createdAt',
        ]
        read_only_fields = ['id', 'usedCount', 'createdAt']


class ValidateCouponSerializer(serializers.Serializer):
    """Request body of POST /coupons/validate."""
    # looked up verbatim; blank or overlong codes are just unknown
    code = serializers.CharField(trim_whitespace=False, allow_blank=True)
    # same bounds as the model's money fields, so the discount stays exact
    orderAmount = serializers.DecimalField(
        max_digits=Coupon.MONEY_MAX_DIGITS,
        decimal_places=Coupon.MONEY_DECIMAL_PLACES,
    )


class ValidationResultSerializer(serializers.Serializer):
    # keys missing from the result dict are left out of the response
    valid = serializers.BooleanField(read_only=True)
    message = serializers.CharField(read_only=True)
    coupon = CouponSerializer(read_only=True)
    discount = serializers.DecimalField(max_digits=None, decimal_places=None, read_only=True)
