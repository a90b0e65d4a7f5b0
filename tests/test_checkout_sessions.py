import pytest

from payments_client.contracts import (
    AddressParams,
    CheckoutSessionLineItemParams,
    CheckoutSessionListParams,
    CheckoutSessionMode,
    CheckoutSessionParams,
    CheckoutSessionPaymentIntentDataParams,
    CheckoutSessionSubmitType,
    CheckoutSessionSubscriptionDataItemsParams,
    CheckoutSessionSubscriptionDataParams,
    Params,
    ShippingDetailsParams,
)
from payments_client.errors import NotFoundError


def test_get_checkout_session(client):
    session = client.checkout_sessions.get("cs_123", None)

    assert session.id == "cs_123"
    assert session.object == "checkout.session"
    assert session.mode == CheckoutSessionMode.PAYMENT
    assert session.display_items[0].custom.name == "T-shirt"
    assert session.customer.id == "cus_123"
    assert not session.customer.is_expanded
    assert session.payment_intent.id == "pi_123"


def test_get_checkout_session_expanding_customer_and_payment_intent(client):
    session = client.checkout_sessions.get(
        "cs_123", CheckoutSessionParams(expand=["customer", "payment_intent"])
    )

    assert session.customer.email == "jenny.rosen@example.com"
    assert session.payment_intent.amount == 2000
    # nested reference inside the expanded object stays collapsed
    assert session.payment_intent.customer.id == "cus_123"
    assert session.payment_intent.customer.email is None


def test_new_checkout_session(client, backend):
    session = client.checkout_sessions.new(
        CheckoutSessionParams(
            cancel_url="https://stripe.com/cancel",
            client_reference_id="1234",
            line_items=[
                CheckoutSessionLineItemParams(
                    amount=1234,
                    currency="usd",
                    description="description",
                    images=["https://stripe.com/image1"],
                    name="name",
                    quantity=2,
                )
            ],
            payment_intent_data=CheckoutSessionPaymentIntentDataParams(
                description="description",
                shipping=ShippingDetailsParams(
                    address=AddressParams(line1="line1", city="city"),
                    carrier="carrier",
                    name="name",
                ),
            ),
            payment_method_types=["card"],
            subscription_data=CheckoutSessionSubscriptionDataParams(
                items=[CheckoutSessionSubscriptionDataItemsParams(plan="plan", quantity=2)],
            ),
            success_url="https://stripe.com/success",
            idempotency_key="checkout-1234",
        )
    )

    assert session.id.startswith("cs_test_")
    request = backend.requests[-1]
    assert request.method == "POST"
    assert request.path == "/v1/checkout/sessions"
    assert request.idempotency_key == "checkout-1234"
    assert request.form_dict["line_items"][0]["amount"] == "1234"
    assert request.form_dict["payment_intent_data"]["shipping"]["address"]["city"] == "city"

    # the created session can be retrieved afterwards
    assert client.checkout_sessions.get(session.id).client_reference_id == "1234"


def test_new_checkout_session_round_trips_shared_fields(client):
    params = CheckoutSessionParams(
        cancel_url="https://example.com/cancel",
        client_reference_id="order-2001",
        customer="cus_123",
        customer_email="jenny.rosen@example.com",
        locale="fr",
        mode=CheckoutSessionMode.SUBSCRIPTION,
        payment_method_types=["card", "ideal"],
        submit_type=CheckoutSessionSubmitType.PAY,
        success_url="https://example.com/success",
        metadata={"cart": "c-77"},
    )

    session = client.checkout_sessions.new(params)

    assert session.cancel_url == params.cancel_url
    assert session.client_reference_id == params.client_reference_id
    assert session.customer.id == params.customer
    assert session.customer_email == params.customer_email
    assert session.locale == params.locale
    assert session.mode == params.mode
    assert session.payment_method_types == params.payment_method_types
    assert session.submit_type == params.submit_type
    assert session.success_url == params.success_url
    assert session.metadata == params.metadata


def test_list_checkout_sessions(client):
    i = client.checkout_sessions.list(CheckoutSessionListParams())

    assert i.next() is True
    assert i.err is None
    assert i.checkout_session().id == "cs_123"


def test_list_checkout_sessions_expanding_customer(client):
    sessions = list(client.checkout_sessions.list(CheckoutSessionListParams(expand=["data.customer"])))

    assert len(sessions) == 2
    assert all(session.customer.is_expanded for session in sessions)


def test_get_missing_checkout_session(client):
    with pytest.raises(NotFoundError):
        client.checkout_sessions.get("cs_nope", Params())
