import logging
from typing import Tuple

from django.db import transaction

from src.apps.auctions.models import Auction
from .forms import BidForm
from .models import Bid

logger = logging.getLogger(__name__)


class BidService:
    """Validates and saves bids against the auction's current high bid."""

    @staticmethod
    def place_bid(*, user, auction_id: int, amount) -> Tuple[Bid, bool]:
        """Build a bid and try to save it.

        Args:
            user: Bidder
            auction_id: Auction to bid on
            amount: Raw submitted amount

        Returns:
            The bid and whether it was saved
        """
        bid = Bid(auction_id=auction_id, user=user)
        form = BidForm(data={f"{BidForm.prefix}-amount": amount}, instance=bid)

        with transaction.atomic():
            # Lock the auction row so concurrent bids are validated one at a time
            auction = Auction.objects.select_for_update().filter(pk=auction_id).first()
            if auction is None:
                logger.warning("Bid on unknown auction %s rejected", auction_id)
                return bid, False
            bid.auction = auction

            if not form.is_valid():
                logger.info("Bid of %r on auction %s rejected: %s", amount, auction_id, form.errors.get_json_data())
                return bid, False

            form.save()

        logger.info("Bid %s of %s saved on auction %s", bid.pk, bid.amount, auction_id)
        return bid, True
