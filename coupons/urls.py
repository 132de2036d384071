from django.urls import path
from . import views

urlpatterns = [
    path('coupons', views.list_coupons, name='list_coupons'),
    path('coupons/validate', views.validate, name='validate_coupon'),
    path('coupons/<str:code>', views.get_coupon, name='get_coupon'),
]
