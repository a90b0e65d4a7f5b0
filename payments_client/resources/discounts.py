"""
Discounts.

Discounts are removed through their owner: a customer
(/v1/customers/{id}/discount) or a subscription (/v1/subscriptions/{id}/discount).
"""

from __future__ import annotations

from typing import Optional

from payments_client.contracts.discounts import Discount, DiscountParams
from payments_client.resources.base import ResourceClient, format_url_path


class DiscountClient(ResourceClient):
    def delete(self, customer_id: str, params: Optional[DiscountParams] = None) -> Discount:
        """Remove the discount applied to a customer."""
        path = format_url_path("/v1/customers/%s/discount", customer_id)
        return self.backend.call("DELETE", path, self.key, params, Discount)

    def delete_subscription(self, subscription_id: str, params: Optional[DiscountParams] = None) -> Discount:
        """Remove the discount applied to a subscription."""
        path = format_url_path("/v1/subscriptions/%s/discount", subscription_id)
        return self.backend.call("DELETE", path, self.key, params, Discount)
