from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from .serializers import CouponSerializer, ValidateCouponSerializer, ValidationResultSerializer
from .services import list_active_coupons, get_active_coupon, validate_coupon


def coupon_detail_response(code):
    coupon = get_active_coupon(code)
    if coupon is None:
        return Response(status=status.HTTP_404_NOT_FOUND)
    return Response(CouponSerializer(coupon).data)


@api_view(['GET'])
def list_coupons(request):
    s = CouponSerializer(list_active_coupons(), many=True)
    return Response(s.data)


@api_view(['GET'])
def get_coupon(request, code):
    return coupon_detail_response(code)


@api_view(['GET', 'POST'])
def validate(request):
    """
    Validate a coupon against an order amount.
    Body: { "code": "SAVE10", "orderAmount": "200.00" }

    GET on this path is a plain lookup of the code "validate".
    """
    if request.method == 'GET':
        return coupon_detail_response('validate')

    # malformed bodies are rejected with 400 before the coupon is looked up
    body = ValidateCouponSerializer(data=request.data)
    body.is_valid(raise_exception=True)

    result = validate_coupon(body.validated_data["code"], body.validated_data["orderAmount"])
    return Response(ValidationResultSerializer(result).data, status=status.HTTP_200_OK)
