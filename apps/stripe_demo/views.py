"""
apps.stripe_demo.views
~~~~~~~~~~~~~~~~~~~~~~
Thin DRF API views for the stripe-demo plugin.
All business logic is delegated to :mod:`apps.stripe_demo.services`.

Endpoints
---------
GET  /stripe-demo/config/        – Read the Stripe key (super admin)
PUT  /stripe-demo/config/        – Save the Stripe key (super admin)
GET  /api/v1/stripe-demo/        – Welcome message
POST /api/v1/stripe-demo/pay     – Create a payment intent
"""
from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .policies import IsSuperAdmin
from .serializers import (
    MessageResponseSerializer,
    PaymentIntentRequestSerializer,
    PaymentIntentSerializer,
    SaveStripeConfigRequestSerializer,
    StripeConfigSerializer,
)


class StripeConfigView(APIView):
    """GET / PUT /stripe-demo/config/ – Stripe key, super admins only."""

    permission_classes = [IsSuperAdmin]

    @extend_schema(
        summary="Get Stripe Configuration",
        responses={
            200: StripeConfigSerializer,
            403: OpenApiResponse(description="Caller is not a super administrator."),
        },
        tags=["Stripe Demo Admin"],
    )
    def get(self, request: Request) -> Response:
        return Response({"stripeKey": services.get_stripe_key()})

    @extend_schema(
        summary="Save Stripe Configuration",
        request=SaveStripeConfigRequestSerializer,
        responses={
            200: MessageResponseSerializer,
            400: OpenApiResponse(description="stripeKey missing, empty or not a string."),
            403: OpenApiResponse(description="Caller is not a super administrator."),
        },
        tags=["Stripe Demo Admin"],
    )
    def put(self, request: Request) -> Response:
        serializer = SaveStripeConfigRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.save_stripe_key(serializer.validated_data["stripeKey"])
        return Response({"message": "Stripe key saved successfully"})


class WelcomeView(APIView):
    """GET /api/v1/stripe-demo/ – plugin liveness message."""

    @extend_schema(
        summary="Plugin Welcome",
        responses={200: MessageResponseSerializer},
        tags=["Stripe Demo"],
    )
    def get(self, request: Request) -> Response:
        return Response({"message": services.get_welcome_message()})


class PaymentIntentView(APIView):
    """POST /api/v1/stripe-demo/pay – create a Stripe payment intent."""

    @extend_schema(
        summary="Create Payment Intent",
        request=PaymentIntentRequestSerializer,
        responses={
            201: PaymentIntentSerializer,
            400: OpenApiResponse(description="Amount missing or not positive."),
            502: OpenApiResponse(description="Stripe rejected the key or the request."),
            503: OpenApiResponse(description="No Stripe key configured."),
        },
        tags=["Stripe Demo"],
    )
    def post(self, request: Request) -> Response:
        serializer = PaymentIntentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        intent = services.create_payment_intent(serializer.validated_data["amount"])
        return Response(
            PaymentIntentSerializer(intent).data,
            status=status.HTTP_201_CREATED,
        )
