from typing import List

from pydantic import BaseModel, Field


class EventCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    date: int = Field(..., description='Event start, seconds since epoch')
    ticket_price: str = Field(..., description='Price per ticket in ether, e.g. "0.1"')
    max_tickets: int = Field(..., gt=0)
    venue: str = Field(..., min_length=1)

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Blockchain Summit',
                'description': 'Two days of talks and workshops',
                'date': 1893456000,
                'ticket_price': '0.1',
                'max_tickets': 100,
                'venue': 'Taipei Arena',
            }
        }


class EventResponse(BaseModel):
    id: int
    name: str
    description: str
    date: int
    ticket_price: int  # wei
    ticket_price_ether: str
    max_tickets: int
    tickets_sold: int
    tickets_available: int
    venue: str
    organizer: str
    is_active: bool
    sale_status: str
    created_at: int

    class Config:
        json_schema_extra = {
            'example': {
                'id': 0,
                'name': 'Blockchain Summit',
                'description': 'Two days of talks and workshops',
                'date': 1893456000,
                'ticket_price': 100000000000000000,
                'ticket_price_ether': '0.1',
                'max_tickets': 100,
                'tickets_sold': 2,
                'tickets_available': 98,
                'venue': 'Taipei Arena',
                'organizer': '0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266',
                'is_active': True,
                'sale_status': 'on_sale',
                'created_at': 1760000000,
            }
        }


class EventCountResponse(BaseModel):
    count: int


class TicketPurchaseRequest(BaseModel):
    quantity: int
    payment: int = Field(..., description='Amount paid in wei')

    class Config:
        json_schema_extra = {'example': {'quantity': 2, 'payment': 200000000000000000}}


class TicketPurchaseResponse(BaseModel):
    event_id: int
    buyer: str
    quantity: int
    unit_price: int
    total_cost: int
    refund: int
    token_ids: List[int]


class AccountTicketResponse(BaseModel):
    event: EventResponse
    balance: int
