from payments_client.contracts import (
    AddressParams,
    CheckoutSessionLineItemParams,
    CheckoutSessionMode,
    CheckoutSessionParams,
    CheckoutSessionPaymentIntentDataParams,
    CheckoutSessionSubscriptionDataItemsParams,
    CheckoutSessionSubscriptionDataParams,
    ListParams,
    OrderReturnListParams,
    RangeQueryParams,
    ShippingDetailsParams,
)
from payments_client.form import FormValues, decode_form, encode_params, format_scalar


def _checkout_params(**overrides):
    values = dict(
        cancel_url="https://example.com/cancel",
        client_reference_id="1234",
        line_items=[
            CheckoutSessionLineItemParams(
                amount=1234,
                currency="usd",
                description="description",
                images=["https://example.com/image1"],
                name="name",
                quantity=2,
            )
        ],
        mode=CheckoutSessionMode.PAYMENT,
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
            application_fee_percent=12.5,
            items=[CheckoutSessionSubscriptionDataItemsParams(plan="plan", quantity=2)],
            trial_from_plan=True,
        ),
        success_url="https://example.com/success",
        metadata={"order_id": "42"},
        expand=["customer", "payment_intent"],
    )
    values.update(overrides)
    return CheckoutSessionParams(**values)


def test_nested_params_flatten_to_bracket_paths():
    form = encode_params(_checkout_params())

    assert dict(form.to_pairs()) == {
        "expand[0]": "customer",
        "expand[1]": "payment_intent",
        "metadata[order_id]": "42",
        "cancel_url": "https://example.com/cancel",
        "client_reference_id": "1234",
        "line_items[0][amount]": "1234",
        "line_items[0][currency]": "usd",
        "line_items[0][description]": "description",
        "line_items[0][images][0]": "https://example.com/image1",
        "line_items[0][name]": "name",
        "line_items[0][quantity]": "2",
        "mode": "payment",
        "payment_intent_data[description]": "description",
        "payment_intent_data[shipping][address][city]": "city",
        "payment_intent_data[shipping][address][line1]": "line1",
        "payment_intent_data[shipping][carrier]": "carrier",
        "payment_intent_data[shipping][name]": "name",
        "payment_method_types[0]": "card",
        "subscription_data[application_fee_percent]": "12.5",
        "subscription_data[items][0][plan]": "plan",
        "subscription_data[items][0][quantity]": "2",
        "subscription_data[trial_from_plan]": "true",
        "success_url": "https://example.com/success",
    }


def test_header_and_iterator_fields_are_never_encoded():
    params = OrderReturnListParams(limit=5, single=True, idempotency_key="idem-1", stripe_account="acct_1")

    assert encode_params(params).to_pairs() == [("limit", "5")]


def test_none_is_omitted_but_empty_string_is_kept():
    form = encode_params(_checkout_params(customer_email="", locale=None, line_items=None))

    pairs = dict(form.to_pairs())
    assert pairs["customer_email"] == ""
    assert "locale" not in pairs
    assert not any(key.startswith("line_items") for key in pairs)


def test_range_filters_use_bracket_keys():
    form = encode_params(OrderReturnListParams(created=RangeQueryParams(gte=100, lt=200), order="or_123"))

    assert form.to_pairs() == [("created[gte]", "100"), ("created[lt]", "200"), ("order", "or_123")]


def test_encode_none_params_is_empty():
    assert len(encode_params(None)) == 0


def test_format_scalar():
    assert format_scalar(True) == "true"
    assert format_scalar(False) == "false"
    assert format_scalar(CheckoutSessionMode.SETUP) == "setup"
    assert format_scalar(0.5) == "0.5"
    assert format_scalar(1e-07) == "0.0000001"
    assert format_scalar(42) == "42"


def test_form_values_set_replaces_existing_key():
    form = encode_params(ListParams(limit=3, starting_after="orret_1"))

    form.set("starting_after", "orret_9")
    form.set("ending_before", "orret_0")

    assert form.to_pairs() == [("limit", "3"), ("starting_after", "orret_9"), ("ending_before", "orret_0")]
    assert form.get("starting_after") == "orret_9"
    assert form.encode() == "limit=3&starting_after=orret_9&ending_before=orret_0"


def test_form_values_copy_is_independent():
    form = FormValues([("limit", "1")])
    clone = form.copy()
    clone.add("expand[0]", "data.order")

    assert len(form) == 1
    assert len(clone) == 2


def test_decode_form_rebuilds_nested_structure():
    pairs = encode_params(_checkout_params()).to_pairs()

    decoded = decode_form(pairs)

    assert decoded["expand"] == ["customer", "payment_intent"]
    assert decoded["metadata"] == {"order_id": "42"}
    assert decoded["line_items"][0]["images"] == ["https://example.com/image1"]
    assert decoded["payment_intent_data"]["shipping"]["address"] == {"city": "city", "line1": "line1"}
    assert decoded["subscription_data"]["items"] == [{"plan": "plan", "quantity": "2"}]
    assert decoded["mode"] == "payment"
