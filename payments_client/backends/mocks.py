"""
Mock backend.

⚠️  In-memory stand-in for the payments API, for development and tests.
    No network calls are made. Every resource endpoint the clients use is
    served from seed data shaped exactly like live API responses:

- GET collection          -> paginated `list` envelope (limit / starting_after / ending_before)
- GET collection/{id}     -> the stored object, or a 404 NotFoundError
- POST collection         -> a new object built from a template plus the posted params
- DELETE .../discount     -> the deleted discount

`expand[]` is honoured for top-level fields that reference a seeded object.
Every request is recorded in `MockBackend.requests` for assertions.
"""

from __future__ import annotations

import copy
import json
import logging
import re
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Type
from urllib.parse import unquote

from pydantic import BaseModel

from payments_client.backends.base import Backend, ResultT
from payments_client.contracts.base import decode_resource
from payments_client.errors import APIError, AuthenticationError, NotFoundError
from payments_client.form import FormValues, decode_form

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_CREATED = 1_561_000_000

_MOCK_REFERENCES: Dict[str, Dict[str, Any]] = {
    "cus_123": {
        "id": "cus_123",
        "object": "customer",
        "created": _CREATED,
        "currency": "usd",
        "email": "jenny.rosen@example.com",
        "livemode": False,
        "metadata": {},
        "name": "Jenny Rosen",
    },
    "pi_123": {
        "id": "pi_123",
        "object": "payment_intent",
        "amount": 2000,
        "capture_method": "automatic",
        "currency": "usd",
        "customer": "cus_123",
        "livemode": False,
        "status": "requires_payment_method",
    },
    "seti_123": {
        "id": "seti_123",
        "object": "setup_intent",
        "customer": "cus_123",
        "livemode": False,
        "status": "requires_payment_method",
        "usage": "off_session",
    },
    "sub_123": {
        "id": "sub_123",
        "object": "subscription",
        "cancel_at_period_end": False,
        "customer": "cus_123",
        "livemode": False,
        "status": "active",
    },
    "or_123": {
        "id": "or_123",
        "object": "order",
        "amount": 1500,
        "amount_returned": 1500,
        "currency": "usd",
        "customer": "cus_123",
        "status": "returned",
    },
    "re_123": {
        "id": "re_123",
        "object": "refund",
        "amount": 1500,
        "charge": "ch_123",
        "currency": "usd",
        "status": "succeeded",
    },
    "file_123": {
        "id": "file_123",
        "object": "file",
        "filename": "file_123.csv",
        "purpose": "finance_report_run",
        "size": 4096,
        "type": "csv",
        "url": "https://files.stripe.com/v1/files/file_123/contents",
    },
    "ch_123": {
        "id": "ch_123",
        "object": "charge",
        "amount": 2000,
        "currency": "usd",
        "paid": True,
    },
}


def _checkout_session(session_id: str, client_reference_id: str) -> Dict[str, Any]:
    return {
        "id": session_id,
        "object": "checkout.session",
        "cancel_url": "https://example.com/cancel",
        "client_reference_id": client_reference_id,
        "customer": "cus_123",
        "customer_email": None,
        "display_items": [
            {
                "amount": 1500,
                "currency": "usd",
                "custom": {"description": "Comfortable cotton t-shirt", "images": [], "name": "T-shirt"},
                "quantity": 2,
                "type": "custom",
            }
        ],
        "livemode": False,
        "locale": None,
        "metadata": {},
        "mode": "payment",
        "payment_intent": "pi_123",
        "payment_method_types": ["card"],
        "setup_intent": None,
        "subscription": None,
        "submit_type": None,
        "success_url": "https://example.com/success",
    }


def _balance_transaction(txn_id: str, amount: int, created: int) -> Dict[str, Any]:
    fee = 30 + amount * 29 // 1000
    return {
        "id": txn_id,
        "object": "balance_transaction",
        "amount": amount,
        "available_on": created + 2 * 86_400,
        "created": created,
        "currency": "usd",
        "description": None,
        "exchange_rate": None,
        "fee": fee,
        "fee_details": [
            {"amount": fee, "application": None, "currency": "usd", "description": "processing fees", "type": "stripe_fee"}
        ],
        "net": amount - fee,
        "reporting_category": "charge",
        "source": "ch_123",
        "status": "available",
        "type": "charge",
    }


def _order_return(return_id: str, amount: int) -> Dict[str, Any]:
    return {
        "id": return_id,
        "object": "order_return",
        "amount": amount,
        "created": _CREATED,
        "currency": "usd",
        "items": [
            {
                "object": "order_item",
                "amount": amount,
                "currency": "usd",
                "description": "T-shirt",
                "parent": "sku_123",
                "quantity": 1,
                "type": "sku",
            }
        ],
        "livemode": False,
        "order": "or_123",
        "refund": "re_123",
    }


def _report_run(run_id: str, report_type: str) -> Dict[str, Any]:
    return {
        "id": run_id,
        "object": "reporting.report_run",
        "created": _CREATED,
        "error": None,
        "livemode": False,
        "parameters": {"interval_end": _CREATED, "interval_start": _CREATED - 30 * 86_400},
        "report_type": report_type,
        "result": "file_123",
        "status": "succeeded",
        "succeeded_at": _CREATED + 60,
    }


def _scheduled_query_run(run_id: str, title: str) -> Dict[str, Any]:
    return {
        "id": run_id,
        "object": "scheduled_query_run",
        "created": _CREATED,
        "data_load_time": _CREATED - 3600,
        "error": None,
        "file": "file_123",
        "livemode": False,
        "result_available_until": _CREATED + 30 * 86_400,
        "sql": "select count(*) from charges",
        "status": "completed",
        "title": title,
    }


def _discount(customer: Optional[str], subscription: Optional[str]) -> Dict[str, Any]:
    return {
        "id": f"di_{uuid.uuid4().hex[:12]}",
        "object": "discount",
        "coupon": {
            "id": "25OFF",
            "object": "coupon",
            "duration": "repeating",
            "duration_in_months": 3,
            "percent_off": 25.0,
            "valid": True,
        },
        "customer": customer,
        "end": None,
        "start": _CREATED,
        "subscription": subscription,
    }


@dataclass
class _Collection:
    object_name: str
    id_prefix: str
    template: Dict[str, Any]
    retrievable: bool = True
    listable: bool = True
    creatable: bool = False
    objects: Dict[str, Dict[str, Any]] = field(default_factory=dict)


def _seed_collections() -> Dict[str, _Collection]:
    collections = {
        "/v1/checkout/sessions": _Collection(
            "checkout.session", "cs_test", _checkout_session("", ""), creatable=True
        ),
        "/v1/balance/history": _Collection(
            "balance_transaction", "txn", _balance_transaction("", 0, _CREATED)
        ),
        "/v1/exchange_rates": _Collection("exchange_rate", "", {"object": "exchange_rate", "rates": {}}),
        "/v1/order_returns": _Collection("order_return", "orret", _order_return("", 0)),
        "/v1/reporting/report_runs": _Collection(
            "reporting.report_run", "frr", _report_run("", ""), creatable=True
        ),
        "/v1/sigma/scheduled_query_runs": _Collection(
            "scheduled_query_run", "sqr", _scheduled_query_run("", "")
        ),
        "/v1/terminal/connection_tokens": _Collection(
            "terminal.connection_token",
            "",
            {"object": "terminal.connection_token", "location": None, "secret": ""},
            retrievable=False,
            listable=False,
            creatable=True,
        ),
    }

    seeds: List[Tuple[str, Dict[str, Any]]] = [
        ("/v1/checkout/sessions", _checkout_session("cs_123", "order-1001")),
        ("/v1/checkout/sessions", _checkout_session("cs_456", "order-1002")),
        ("/v1/balance/history", _balance_transaction("txn_123", 2000, _CREATED)),
        ("/v1/balance/history", _balance_transaction("txn_456", 5000, _CREATED - 86_400)),
        ("/v1/balance/history", _balance_transaction("txn_789", 750, _CREATED - 2 * 86_400)),
        ("/v1/exchange_rates", {"id": "usd", "object": "exchange_rate", "rates": {"eur": 0.89, "gbp": 0.78, "jpy": 108.2}}),
        ("/v1/exchange_rates", {"id": "eur", "object": "exchange_rate", "rates": {"usd": 1.12, "gbp": 0.88}}),
        ("/v1/order_returns", _order_return("orret_123", 1500)),
        ("/v1/order_returns", _order_return("orret_456", 700)),
        ("/v1/order_returns", _order_return("orret_789", 2500)),
        ("/v1/reporting/report_runs", _report_run("frr_123", "balance.summary.1")),
        ("/v1/reporting/report_runs", _report_run("frr_456", "activity.summary.1")),
        ("/v1/sigma/scheduled_query_runs", _scheduled_query_run("sqr_123", "Monthly charge count")),
    ]
    for path, payload in seeds:
        collections[path].objects[payload["id"]] = payload
    return collections


_DISCOUNT_PATH = re.compile(r"^/v1/(customers|subscriptions)/([^/]+)/discount$")


@dataclass
class RecordedRequest:
    method: str
    path: str
    key: Optional[str]
    form: List[Tuple[str, str]]
    idempotency_key: Optional[str] = None
    stripe_account: Optional[str] = None

    @property
    def form_dict(self) -> Dict[str, Any]:
        return decode_form(self.form)


# ---------------------------------------------------------------------------
# Mock backend
# ---------------------------------------------------------------------------

class MockBackend(Backend):
    """
    In-memory payments API.

    Parameters
    ----------
    require_key : bool
        If True, requests without an API key fail like the real backend. Default True.
    default_limit : int
        Page size used when a list request has no `limit`. Default 10.
    """

    def __init__(self, require_key: bool = True, default_limit: int = 10):
        self._require_key = require_key
        self._default_limit = default_limit

        # In-memory stores (reset per instance)
        self._collections = _seed_collections()
        self._references: Dict[str, Dict[str, Any]] = copy.deepcopy(_MOCK_REFERENCES)
        self._discounts: Dict[Tuple[str, str], Dict[str, Any]] = {
            ("customers", "cus_123"): _discount("cus_123", None),
            ("subscriptions", "sub_123"): _discount(None, "sub_123"),
        }
        self.requests: List[RecordedRequest] = []

        logger.info("[MOCK] Payments backend initialised (%d collections)", len(self._collections))

    # ------------------------------------------------------------------
    # Seeding helpers
    # ------------------------------------------------------------------

    def add_object(self, collection_path: str, payload: Dict[str, Any]) -> None:
        """Store `payload` (which must carry an `id`) in a collection."""
        self._collections[collection_path].objects[payload["id"]] = copy.deepcopy(payload)

    def clear(self, collection_path: str) -> None:
        self._collections[collection_path].objects.clear()

    def add_reference(self, payload: Dict[str, Any]) -> None:
        """Make an object available for `expand[]`."""
        self._references[payload["id"]] = copy.deepcopy(payload)

    def add_discount(self, owner: str, owner_id: str) -> None:
        customer = owner_id if owner == "customers" else None
        subscription = owner_id if owner == "subscriptions" else None
        self._discounts[(owner, owner_id)] = _discount(customer, subscription)

    # ------------------------------------------------------------------
    # Backend
    # ------------------------------------------------------------------

    def call_raw(
        self,
        method: str,
        path: str,
        key: Optional[str],
        form: FormValues,
        params: Optional[BaseModel],
        result_type: Type[ResultT],
    ) -> ResultT:
        method = method.upper()
        self.requests.append(
            RecordedRequest(
                method=method,
                path=path,
                key=key,
                form=form.to_pairs(),
                idempotency_key=getattr(params, "idempotency_key", None),
                stripe_account=getattr(params, "stripe_account", None),
            )
        )
        logger.debug("[MOCK] %s %s %s", method, path, form)

        if self._require_key and not key:
            raise AuthenticationError("No API key provided.")

        payload = self._dispatch(method, path, decode_form(form.to_pairs()))
        return decode_resource(result_type, json.dumps(payload))

    def _dispatch(self, method: str, path: str, values: Dict[str, Any]) -> Dict[str, Any]:
        expand = values.pop("expand", None) or []

        discount_match = _DISCOUNT_PATH.match(path)
        if discount_match and method == "DELETE":
            return self._delete_discount(discount_match.group(1), unquote(discount_match.group(2)))

        collection = self._collections.get(path)
        if collection is not None:
            if method == "GET" and collection.listable:
                return self._list(path, collection, values, expand)
            if method == "POST" and collection.creatable:
                return self._expand(self._create(collection, values), expand)

        parent, _, object_id = path.rpartition("/")
        collection = self._collections.get(parent)
        if collection is not None and collection.retrievable and method == "GET":
            stored = collection.objects.get(unquote(object_id))
            if stored is None:
                raise NotFoundError(
                    f"No such {collection.object_name}: '{object_id}'",
                    http_status=404,
                    type="invalid_request_error",
                    code="resource_missing",
                    param="id",
                )
            return self._expand(stored, expand)

        raise NotFoundError(
            f"Unrecognized request URL ({method}: {path})",
            http_status=404,
            type="invalid_request_error",
        )

    def _list(
        self,
        path: str,
        collection: _Collection,
        values: Dict[str, Any],
        expand: List[str],
    ) -> Dict[str, Any]:
        items = list(collection.objects.values())
        try:
            limit = int(values.get("limit") or self._default_limit)
        except ValueError as exc:
            raise APIError(
                "Invalid integer: limit",
                http_status=400,
                type="invalid_request_error",
                param="limit",
            ) from exc

        ids = [item["id"] for item in items]
        starting_after = values.get("starting_after")
        ending_before = values.get("ending_before")
        if ending_before:
            end = self._cursor_index(ids, ending_before, "ending_before")
            start = max(0, end - limit)
            page = items[start:end]
            has_more = start > 0
        else:
            start = self._cursor_index(ids, starting_after, "starting_after") + 1 if starting_after else 0
            page = items[start:start + limit]
            has_more = start + limit < len(items)

        item_expand = [entry[len("data."):] for entry in expand if entry.startswith("data.")]
        return {
            "object": "list",
            "url": path,
            "has_more": has_more,
            "data": [self._expand(item, item_expand) for item in page],
        }

    @staticmethod
    def _cursor_index(ids: List[str], cursor: str, param: str) -> int:
        if cursor not in ids:
            raise APIError(
                f"Invalid {param}: no object with id '{cursor}' in this list",
                http_status=400,
                type="invalid_request_error",
                param=param,
            )
        return ids.index(cursor)

    def _create(self, collection: _Collection, values: Dict[str, Any]) -> Dict[str, Any]:
        created = copy.deepcopy(collection.template)
        created.update(values)
        if collection.object_name == "terminal.connection_token":
            created["secret"] = f"pst_test_{uuid.uuid4().hex}"
        else:
            created["id"] = f"{collection.id_prefix}_{uuid.uuid4().hex[:14]}"
            collection.objects[created["id"]] = created
        logger.info("[MOCK] Created %s %s", collection.object_name, created.get("id", ""))
        return created

    def _delete_discount(self, owner: str, owner_id: str) -> Dict[str, Any]:
        discount = self._discounts.pop((owner, owner_id), None)
        if discount is None:
            raise NotFoundError(
                f"No discount is active on {owner[:-1]} '{owner_id}'",
                http_status=404,
                type="invalid_request_error",
                code="resource_missing",
            )
        return {**discount, "deleted": True}

    def _expand(self, payload: Dict[str, Any], expand: List[str]) -> Dict[str, Any]:
        if not expand:
            return payload
        expanded = copy.deepcopy(payload)
        for field_name in expand:
            value = expanded.get(field_name)
            if isinstance(value, str) and value in self._references:
                expanded[field_name] = copy.deepcopy(self._references[value])
        return expanded
