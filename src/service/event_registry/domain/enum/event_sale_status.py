from enum import StrEnum


class EventSaleStatus(StrEnum):
    """Read-time classification of an event; never stored"""

    ON_SALE = 'on_sale'
    SOLD_OUT = 'sold_out'
    PAST = 'past'  # date has passed
    CANCELLED = 'cancelled'
