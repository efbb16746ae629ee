"""Buyer profile domain events"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BuyerProfileCreated:
    buyer_id: int
    user_id: int
    company_name: str
