"""Payment use-cases."""

from ....platform.use_cases import DomainUseCases
from ..entities.payment import Payment


class PaymentUseCases(DomainUseCases[Payment]):
    """Payment ledger records.

    Charges themselves are issued by ``OrderUseCases``; this module only
    records their outcome.
    """
