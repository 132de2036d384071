import pytest
from django.urls import reverse


pytestmark = pytest.mark.django_db


def test_coupon_changelist(admin_client, make_coupon):
    make_coupon(code="SAVE10")
    make_coupon(code="FLAT100", description="Flat 100 off")
    response = admin_client.get(reverse("admin:coupons_coupon_changelist"))
    assert response.status_code == 200
    assert b"SAVE10" in response.content
    assert b"FLAT100" in response.content


def test_coupon_changelist_search(admin_client, make_coupon):
    make_coupon(code="SAVE10")
    make_coupon(code="FLAT100", description="Flat 100 off")
    response = admin_client.get(reverse("admin:coupons_coupon_changelist"), {"q": "flat"})
    assert response.status_code == 200
    assert b"FLAT100" in response.content
    assert b"SAVE10" not in response.content


def test_coupon_changelist_filters(admin_client, make_coupon):
    make_coupon(code="SAVE10")
    make_coupon(code="RETIRED5", active=False)
    response = admin_client.get(reverse("admin:coupons_coupon_changelist"), {"active__exact": "0"})
    assert response.status_code == 200
    assert b"RETIRED5" in response.content


def test_coupon_add_form(admin_client):
    response = admin_client.get(reverse("admin:coupons_coupon_add"))
    assert response.status_code == 200
