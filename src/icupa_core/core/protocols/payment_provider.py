"""Payment provider protocol contract."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class PaymentProvider(Protocol):
    """Protocol for charging payments through a gateway."""

    name: str

    async def charge(
        self,
        amount_cents: int,
        currency: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Charge an amount in minor units.

        Returns:
            ``{"id": <provider charge id>, "status": <provider status>}``

        Raises:
            ProviderError: If the gateway is unreachable, unconfigured or
                declines the charge.
        """
        ...
