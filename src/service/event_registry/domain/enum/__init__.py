"""Event Registry Domain Enums"""

from src.service.event_registry.domain.enum.event_sale_status import EventSaleStatus

__all__ = ['EventSaleStatus']
