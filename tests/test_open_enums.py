import pytest

from payments_client.contracts import (
    BalanceTransaction,
    BalanceTransactionStatus,
    CheckoutSession,
    CheckoutSessionMode,
    ReportRun,
    ScheduledQueryRun,
    decode_resource,
)
from payments_client.contracts.checkout_sessions import CheckoutSessionParams
from pydantic import ValidationError


@pytest.mark.parametrize(
    "model_type, raw, field_path, value",
    [
        (CheckoutSession, '{"id": "cs_1", "mode": "embedded_new_mode"}', ("mode",), "embedded_new_mode"),
        (CheckoutSession, '{"id": "cs_1", "submit_type": "subscribe"}', ("submit_type",), "subscribe"),
        (
            CheckoutSession,
            '{"id": "cs_1", "display_items": [{"type": "price", "amount": 100}]}',
            ("display_items", 0, "type"),
            "price",
        ),
        (BalanceTransaction, '{"id": "txn_1", "status": "in_review"}', ("status",), "in_review"),
        (ReportRun, '{"id": "frr_1", "status": "queued"}', ("status",), "queued"),
        (ScheduledQueryRun, '{"id": "sqr_1", "status": "running"}', ("status",), "running"),
    ],
)
def test_unlisted_values_decode_as_plain_strings(model_type, raw, field_path, value):
    obj = decode_resource(model_type, raw)

    for step in field_path:
        obj = obj[step] if isinstance(step, int) else getattr(obj, step)
    assert obj == value


def test_listed_values_still_decode_to_enum_members():
    session = decode_resource(CheckoutSession, '{"id": "cs_1", "mode": "setup"}')
    transaction = decode_resource(BalanceTransaction, '{"id": "txn_1", "status": "pending"}')

    assert session.mode is CheckoutSessionMode.SETUP
    assert transaction.status is BalanceTransactionStatus.PENDING


def test_listing_survives_an_unlisted_status(client, backend):
    backend.add_object(
        "/v1/balance/history",
        {"id": "txn_new", "object": "balance_transaction", "amount": 10, "status": "in_review"},
    )

    statuses = [txn.status for txn in client.balance_transactions.list()]

    assert statuses[-1] == "in_review"
    assert len(statuses) == 4


def test_request_params_still_reject_unlisted_values():
    with pytest.raises(ValidationError):
        CheckoutSessionParams(mode="embedded_new_mode")
