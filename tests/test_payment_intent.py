import stripe

from app.shared.services.stripe_service import StripeService, get_payment_gateway


def test_returns_client_secret(client, fake_stripe):
    resp = client.post("/create-payment-intent", json={"amountInCents": 500})
    assert resp.status_code == 200
    assert resp.json() == {"clientSecret": "pi_test_123_secret_abc"}

    call = fake_stripe.PaymentIntent.calls[0]
    assert call["amount"] == 500
    assert call["currency"] == "usd"
    assert call["payment_method_types"] == ["card"]
    assert call["api_key"] == "sk_test_123"


def test_no_authorization_required(client, verifier):
    resp = client.post("/create-payment-intent", json={"amountInCents": 500})
    assert resp.status_code == 200
    assert verifier.calls == []


def test_gateway_error_is_500_with_error_field(client, fake_stripe):
    fake_stripe.PaymentIntent.error = stripe.StripeError("Invalid API Key provided")

    resp = client.post("/create-payment-intent", json={"amountInCents": 500})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Invalid API Key provided"}


def test_unconfigured_gateway_is_500(client):
    from app.main import app

    app.dependency_overrides[get_payment_gateway] = lambda: StripeService(secret_key=None)

    resp = client.post("/create-payment-intent", json={"amountInCents": 500})
    assert resp.status_code == 500
    assert "error" in resp.json()
