"""Pending bid kept in the session while a bid attempt is blocked."""
from dataclasses import asdict, dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from src.utils.serialization import make_serializable

SESSION_KEY = "bid_data"


@dataclass(frozen=True)
class PendingBid:
    amount: Union[str, Decimal]
    auction_id: int

    @property
    def decimal_amount(self) -> Optional[Decimal]:
        try:
            return Decimal(self.amount)
        except (InvalidOperation, TypeError):
            return None


class BidSession:
    """Typed access to the ``bid_data`` entry of a Django session."""

    def __init__(self, session):
        self.session = session

    def load(self) -> Optional[PendingBid]:
        data = self.session.get(SESSION_KEY)
        if not data:
            return None
        try:
            return PendingBid(amount=data["amount"], auction_id=int(data["auction_id"]))
        except (KeyError, TypeError, ValueError):
            return None

    def store(self, pending: PendingBid) -> None:
        self.session[SESSION_KEY] = make_serializable(asdict(pending))

    def clear(self) -> None:
        self.session.pop(SESSION_KEY, None)

    def pending_for(self, auction_id: int) -> Optional[PendingBid]:
        pending = self.load()
        if pending and pending.auction_id == auction_id:
            return pending
        return None
