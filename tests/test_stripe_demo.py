"""
tests.test_stripe_demo
~~~~~~~~~~~~~~~~~~~~~~
stripe-demo plugin server side.

Covers:
- PluginStore                 (DB)
- validators / redaction      (unit, no DB)
- Super-admin policy          (DB)
- Admin config API            (integration, DB)
- Payment intents             (integration, DB, Stripe stubbed)
- Admin configuration page    (integration, DB)
"""
from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace

import pytest
import stripe
from rest_framework import status

from apps.core_store.models import PluginStoreEntry
from apps.core_store.store import PluginStore
from apps.stripe_demo import services
from apps.stripe_demo.policies import is_super_admin
from apps.stripe_demo.redaction import FULL_MASK, mask_secret
from apps.stripe_demo.validators import StripeKeyValidationError, clean_stripe_key

CONFIG_URL = "/stripe-demo/config/"
WELCOME_URL = "/api/v1/stripe-demo/"
PAY_URL = "/api/v1/stripe-demo/pay"
ADMIN_PAGE_URL = "/admin/stripe-demo/config/"

TEST_KEY = "sk_test_51HxYzAbCdEfGh1234"


# ===========================================================================
# TestPluginStore  (DB)
# ===========================================================================

@pytest.mark.django_db
class TestPluginStore:

    def test_get_missing_key_returns_none(self):
        assert PluginStore(name="stripe-demo").get("config") is None

    def test_set_then_get(self):
        store = PluginStore(name="stripe-demo")
        store.set("config", {"stripeKey": TEST_KEY})
        assert store.get("config") == {"stripeKey": TEST_KEY}

    def test_set_overwrites_single_row(self):
        store = PluginStore(name="stripe-demo")
        store.set("config", {"stripeKey": "sk_test_old"})
        store.set("config", {"stripeKey": "sk_live_new"})
        assert store.get("config") == {"stripeKey": "sk_live_new"}
        assert PluginStoreEntry.objects.filter(name="stripe-demo", key="config").count() == 1

    def test_namespaces_are_isolated(self):
        PluginStore(name="stripe-demo").set("config", {"stripeKey": TEST_KEY})
        assert PluginStore(name="other-plugin").get("config") is None
        assert PluginStore(name="stripe-demo", type="core").get("config") is None


# ===========================================================================
# TestStripeKeyRules  (unit — no DB)
# ===========================================================================

class TestStripeKeyRules:

    @pytest.mark.parametrize("candidate", ["", "   ", None])
    def test_empty_is_required_error(self, candidate):
        with pytest.raises(StripeKeyValidationError) as exc_info:
            clean_stripe_key(candidate)
        assert exc_info.value.rule == "required"
        assert exc_info.value.message_id == "config.validation.required"

    @pytest.mark.parametrize("candidate", ["abc123", "pk_test_abc", "sk_prod_abc"])
    def test_unknown_prefix_is_format_error(self, candidate):
        with pytest.raises(StripeKeyValidationError) as exc_info:
            clean_stripe_key(candidate)
        assert exc_info.value.rule == "format"

    def test_valid_keys_are_trimmed(self):
        assert clean_stripe_key("  sk_test_abc  ") == "sk_test_abc"
        assert clean_stripe_key("sk_live_abc") == "sk_live_abc"

    def test_mask_shows_head_and_tail_only(self):
        assert mask_secret(TEST_KEY) == "sk_test_51Hx...1234"

    @pytest.mark.parametrize("value", ["sk_test_abc", "sk_test_12345678"])
    def test_short_values_fully_masked(self, value):
        assert mask_secret(value) == FULL_MASK

    @pytest.mark.parametrize("value", ["", None])
    def test_nothing_to_mask(self, value):
        assert mask_secret(value) is None


# ===========================================================================
# TestSuperAdminPolicy  (DB)
# ===========================================================================

@pytest.mark.django_db
class TestSuperAdminPolicy:

    def test_superuser_allowed(self, super_admin):
        assert is_super_admin(super_admin) is True

    def test_role_member_allowed(self, role_admin):
        assert is_super_admin(role_admin) is True

    def test_staff_without_role_denied(self, editor):
        assert is_super_admin(editor) is False

    def test_anonymous_denied(self):
        from django.contrib.auth.models import AnonymousUser

        assert is_super_admin(AnonymousUser()) is False
        assert is_super_admin(None) is False


# ===========================================================================
# TestConfigAPI  (integration — DB)
# ===========================================================================

@pytest.mark.django_db
class TestConfigAPI:
    """GET / PUT /stripe-demo/config/."""

    def test_get_unset_returns_null(self, super_admin_client):
        resp = super_admin_client.get(CONFIG_URL)
        assert resp.status_code == status.HTTP_200_OK
        assert resp.json() == {"stripeKey": None}

    def test_put_then_get_round_trip(self, super_admin_client):
        resp = super_admin_client.put(CONFIG_URL, data={"stripeKey": TEST_KEY}, format="json")
        assert resp.status_code == status.HTTP_200_OK
        assert resp.json() == {"message": "Stripe key saved successfully"}
        assert super_admin_client.get(CONFIG_URL).json() == {"stripeKey": TEST_KEY}
        assert services.get_stripe_key() == TEST_KEY

    def test_put_does_not_enforce_prefix(self, super_admin_client):
        resp = super_admin_client.put(CONFIG_URL, data={"stripeKey": "rk_live_xyz"}, format="json")
        assert resp.status_code == status.HTTP_200_OK
        assert services.get_stripe_key() == "rk_live_xyz"

    @pytest.mark.parametrize("payload", [{}, {"stripeKey": ""}, {"stripeKey": None}, {"stripeKey": 42}])
    def test_put_invalid_returns_400_with_message(self, super_admin_client, payload):
        resp = super_admin_client.put(CONFIG_URL, data=payload, format="json")
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        body = resp.json()
        assert body["data"] is None
        assert body["error"]["message"] == "Stripe key is required and must be a string"
        assert services.get_stripe_key() is None

    def test_role_member_can_read(self, api_client, role_admin):
        api_client.force_authenticate(user=role_admin)
        assert api_client.get(CONFIG_URL).status_code == status.HTTP_200_OK

    def test_editor_forbidden(self, editor_client):
        resp = editor_client.get(CONFIG_URL)
        assert resp.status_code == status.HTTP_403_FORBIDDEN
        assert resp.json()["error"]["name"] == "ForbiddenError"
        resp = editor_client.put(CONFIG_URL, data={"stripeKey": TEST_KEY}, format="json")
        assert resp.status_code == status.HTTP_403_FORBIDDEN
        assert services.get_stripe_key() is None

    def test_anonymous_rejected(self, api_client):
        resp = api_client.get(CONFIG_URL)
        assert resp.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)
        assert "message" in resp.json()["error"]


# ===========================================================================
# TestPayments  (integration — DB, Stripe stubbed)
# ===========================================================================

@pytest.fixture
def stripe_calls(monkeypatch):
    """Replace ``stripe.PaymentIntent.create`` with a recorder."""
    calls = []

    def fake_create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(
            id="pi_123",
            client_secret="pi_123_secret_456",
            amount=kwargs["amount"],
            currency=kwargs["currency"],
            status="requires_payment_method",
        )

    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)
    return calls


def raise_on_create(monkeypatch, exc):
    def fake_create(**kwargs):
        raise exc

    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)


@pytest.mark.django_db
class TestPayments:

    def test_welcome(self, api_client):
        resp = api_client.get(WELCOME_URL)
        assert resp.status_code == status.HTTP_200_OK
        assert resp.json()["message"] == services.get_welcome_message()

    def test_to_cents_rounds_half_up(self):
        assert services.to_cents(Decimal("10.50")) == 1050
        assert services.to_cents(Decimal("0.015")) == 2
        assert services.to_cents(Decimal("3")) == 300

    def test_pay_creates_intent_with_stored_key(self, api_client, stripe_calls, settings):
        settings.STRIPE_CURRENCY = "usd"
        services.save_stripe_key(TEST_KEY)
        resp = api_client.post(PAY_URL, data={"amount": "10.50"}, format="json")
        assert resp.status_code == status.HTTP_201_CREATED
        body = resp.json()
        assert body["id"] == "pi_123"
        assert body["amount"] == 1050
        assert body["client_secret"] == "pi_123_secret_456"
        assert stripe_calls == [{"amount": 1050, "currency": "usd", "api_key": TEST_KEY}]

    def test_pay_without_key_returns_503(self, api_client, stripe_calls):
        resp = api_client.post(PAY_URL, data={"amount": 5}, format="json")
        assert resp.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert "not configured" in resp.json()["error"]["message"]
        assert stripe_calls == []

    @pytest.mark.parametrize("amount", [0, -1, "abc"])
    def test_pay_invalid_amount_returns_400(self, api_client, stripe_calls, amount):
        services.save_stripe_key(TEST_KEY)
        resp = api_client.post(PAY_URL, data={"amount": amount}, format="json")
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert stripe_calls == []

    def test_pay_authentication_error_reports_invalid_key(self, api_client, monkeypatch):
        services.save_stripe_key(TEST_KEY)
        raise_on_create(monkeypatch, stripe.AuthenticationError("Invalid API Key provided"))
        resp = api_client.post(PAY_URL, data={"amount": 1}, format="json")
        assert resp.status_code == status.HTTP_502_BAD_GATEWAY
        assert resp.json()["error"]["message"].startswith("Invalid Stripe API key")

    def test_pay_expired_key_reports_invalid_key(self, api_client, monkeypatch):
        services.save_stripe_key(TEST_KEY)
        raise_on_create(
            monkeypatch,
            stripe.InvalidRequestError("Expired API Key provided", None, code="api_key_expired"),
        )
        resp = api_client.post(PAY_URL, data={"amount": 1}, format="json")
        assert resp.status_code == status.HTTP_502_BAD_GATEWAY
        assert resp.json()["error"]["message"].startswith("Invalid Stripe API key")

    def test_pay_other_stripe_error_passes_message(self, api_client, monkeypatch):
        services.save_stripe_key(TEST_KEY)
        raise_on_create(monkeypatch, stripe.APIConnectionError("Network down"))
        resp = api_client.post(PAY_URL, data={"amount": 1}, format="json")
        assert resp.status_code == status.HTTP_502_BAD_GATEWAY
        assert "Network down" in resp.json()["error"]["message"]


# ===========================================================================
# TestAdminPage  (integration — DB)
# ===========================================================================

@pytest.mark.django_db
class TestAdminPage:
    """Server-rendered form at /admin/stripe-demo/config/."""

    def test_anonymous_redirected_to_login(self, client):
        resp = client.get(ADMIN_PAGE_URL)
        assert resp.status_code == 302
        assert "/admin/login/" in resp["Location"]

    def test_staff_without_role_forbidden(self, client, editor):
        client.force_login(editor)
        assert client.get(ADMIN_PAGE_URL).status_code == 403

    def test_shows_masked_key_never_full_value(self, client, super_admin):
        services.save_stripe_key(TEST_KEY)
        client.force_login(super_admin)
        resp = client.get(ADMIN_PAGE_URL)
        assert resp.status_code == 200
        content = resp.content.decode()
        assert "sk_test_51Hx...1234" in content
        assert TEST_KEY not in content

    def test_valid_post_saves_trimmed_and_redirects(self, client, super_admin):
        client.force_login(super_admin)
        resp = client.post(ADMIN_PAGE_URL, data={"stripe_key": "  sk_live_abcdefghijklmnop  "})
        assert resp.status_code == 302
        assert resp["Location"] == ADMIN_PAGE_URL
        assert services.get_stripe_key() == "sk_live_abcdefghijklmnop"

        page = client.get(ADMIN_PAGE_URL).content.decode()
        assert "Stripe key saved successfully" in page

    @pytest.mark.parametrize(
        "value, message",
        [
            ("", "Stripe key is required"),
            ("abc123", "Stripe key should start with sk_test_ or sk_live_"),
        ],
    )
    def test_invalid_post_warns_and_keeps_stored_key(self, client, super_admin, value, message):
        services.save_stripe_key(TEST_KEY)
        client.force_login(super_admin)
        resp = client.post(ADMIN_PAGE_URL, data={"stripe_key": value})
        assert resp.status_code == 200
        assert message in resp.content.decode()
        assert services.get_stripe_key() == TEST_KEY
