"""Event Registry Domain Value Objects"""

from src.service.event_registry.domain.value_object.purchase_receipt import (
    AccountTicketHolding,
    PurchaseReceipt,
)

__all__ = ['AccountTicketHolding', 'PurchaseReceipt']
