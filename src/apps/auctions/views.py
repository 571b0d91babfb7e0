from django.shortcuts import get_object_or_404, render

from src.apps.bids.forms import BidForm
from src.apps.bids.session import BidSession
from .models import Auction

RECENT_BIDS = 10


def render_auction(request, auction, bid_form):
    """Auction page with its bid form; shared by the detail view and the bid handler."""
    recent_bids = auction.bids.select_related("user")[:RECENT_BIDS]
    return render(request, "auctions/show.html", {
        "auction": auction,
        "bid_form": bid_form,
        "recent_bids": recent_bids,
        "high_bid": auction.high_bid_amount(),
        "minimum_bid": auction.minimum_bid(),
    })


def auction_list(request):
    auctions = Auction.objects.select_related("product")
    return render(request, "auctions/index.html", {"auctions": auctions})


def auction_detail(request, pk):
    auction = get_object_or_404(Auction.objects.select_related("product"), pk=pk)

    initial = {}
    pending = BidSession(request.session).pending_for(auction.pk)
    if pending:
        initial["amount"] = pending.amount

    return render_auction(request, auction, BidForm(initial=initial))
