"""
Ledger error taxonomy.

Every failure is a rejected single request: validation always runs before
any mutation, so raising one of these leaves the ledgers untouched.
"""

from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
)


# ========== Validation (400) ==========


class InvalidScheduleError(DomainError):
    code = 'InvalidSchedule'

    def __init__(self, message: str = 'Event date must be in the future') -> None:
        super().__init__(message)


class InsufficientPaymentError(DomainError):
    code = 'InsufficientPayment'

    def __init__(self, message: str = 'Insufficient payment') -> None:
        super().__init__(message)


class InvalidEventDataError(DomainError):
    code = 'InvalidEventData'


class InvalidQuantityError(DomainError):
    code = 'InvalidQuantity'

    def __init__(self, message: str = 'Quantity must be greater than 0') -> None:
        super().__init__(message)


class InvalidAddressError(DomainError):
    code = 'InvalidAddress'


class InvalidAmountError(DomainError):
    code = 'InvalidAmount'


# ========== Authorization (403) ==========


class NotOrganizerError(ForbiddenError):
    code = 'NotOrganizer'

    def __init__(self, message: str = 'Only the organizer can cancel this event') -> None:
        super().__init__(message)


class NotAuthorizedError(ForbiddenError):
    code = 'NotAuthorized'

    def __init__(self, message: str = 'Not authorized to mint') -> None:
        super().__init__(message)


class NotOwnerError(ForbiddenError):
    code = 'NotOwner'

    def __init__(self, message: str = 'Only the ledger owner can perform this action') -> None:
        super().__init__(message)


class NotTicketOwnerError(ForbiddenError):
    code = 'NotTicketOwner'

    def __init__(self, message: str = 'Not the ticket owner') -> None:
        super().__init__(message)


# ========== Unknown records (404) ==========


class UnknownEventError(NotFoundError):
    code = 'UnknownEvent'

    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__(f'Event does not exist: {event_id}')


class UnknownTicketError(NotFoundError):
    code = 'UnknownTicket'

    def __init__(self, token_id: int) -> None:
        self.token_id = token_id
        super().__init__(f'Ticket does not exist: {token_id}')


# ========== State conflicts (409) ==========


class EventInactiveError(ConflictError):
    code = 'EventInactive'

    def __init__(self, message: str = 'Event is not active') -> None:
        super().__init__(message)


class SoldOutError(ConflictError):
    code = 'SoldOut'

    def __init__(self, message: str = 'Not enough tickets available') -> None:
        super().__init__(message)


class AlreadyInactiveError(ConflictError):
    code = 'AlreadyInactive'

    def __init__(self, message: str = 'Event is already cancelled') -> None:
        super().__init__(message)
