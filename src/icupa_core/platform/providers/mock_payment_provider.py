"""Mock payment provider."""

import logging
from typing import Any, Dict, List, Optional

from ...utils.uuid import generate_uuid_v7
from .preconditions import check_charge

logger = logging.getLogger(__name__)


class MockPaymentProvider:
    """Payment provider that always succeeds and remembers its charges."""

    name = "mock"

    def __init__(self):
        self.charges: List[Dict[str, Any]] = []

    async def charge(
        self,
        amount_cents: int,
        currency: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        check_charge(self.name, amount_cents, currency)

        result = {"id": f"pi_mock_{generate_uuid_v7()}", "status": "succeeded"}
        self.charges.append({
            "amount_cents": amount_cents,
            "currency": currency,
            "metadata": dict(metadata or {}),
            **result,
        })
        logger.debug(f"Mock charge {result['id']} for {amount_cents} {currency}")
        return result
