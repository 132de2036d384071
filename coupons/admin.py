from django.contrib import admin
from .models import Coupon


@admin.register(Coupon)
class CouponAdmin(admin.ModelAdmin):
    list_display = (
        'code',
        'discountType',
        'discountValue',
        'minOrderAmount',
        'maxDiscountAmount',
        'active',
        'validUntil',
        'created_at'
    )
    list_filter = ('active', 'discountType')
    search_fields = ('code', 'description')
    readonly_fields = ('usedCount', 'created_at')
