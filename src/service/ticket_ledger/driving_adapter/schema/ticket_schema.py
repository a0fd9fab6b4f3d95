from typing import List

from pydantic import BaseModel, Field


class TicketResponse(BaseModel):
    token_id: int
    event_id: int
    owner: str
    original_owner: str
    is_used: bool

    class Config:
        json_schema_extra = {
            'example': {
                'token_id': 0,
                'event_id': 0,
                'owner': '0x70997970c51812dc3a010c7d01b50e0d17dc79c8',
                'original_owner': '0x70997970c51812dc3a010c7d01b50e0d17dc79c8',
                'is_used': False,
            }
        }


class TicketBalanceResponse(BaseModel):
    owner: str
    event_id: int
    balance: int


class OwnerTicketsResponse(BaseModel):
    owner: str
    balance: int
    token_ids: List[int]


class TicketTransferRequest(BaseModel):
    to: str = Field(..., min_length=1)

    class Config:
        json_schema_extra = {'example': {'to': '0x3c44cdddb6a900fa2b585dd299e03d12fa4293bc'}}


class TicketTransferResponse(BaseModel):
    token_id: int
    event_id: int
    from_address: str
    to: str


class SetMinterRequest(BaseModel):
    minter: str = Field(..., min_length=1)
    enabled: bool = True

    class Config:
        json_schema_extra = {
            'example': {'minter': '0x000000000000000000000000000000000e7e0001', 'enabled': True}
        }


class SetMinterResponse(BaseModel):
    minter: str
    enabled: bool
