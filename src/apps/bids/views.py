import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.paginator import Paginator
from django.http import HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST
import pandas as pd

from src.apps.accounts.models import user_has_valid_payment_method
from src.apps.auctions.models import Auction
from src.apps.auctions.views import render_auction
from .forms import BidForm
from .models import Bid
from .services import BidService
from .session import BidSession, PendingBid

logger = logging.getLogger(__name__)

LOGIN_REQUIRED = "You must log in to bid."
PAYMENT_METHOD_REQUIRED = "Oops, a valid credit card is required before you can submit a bid."
HIGHEST_BIDDER = "You are currently the highest bidder!"
BID_TOO_LOW = "Your bid must be higher than the current bid"

# Message kind; messages.html renders the account edit link for it
PAYMENT_METHOD_REQUIRED_TAG = "payment-method-required"

PER_PAGE = 25


@login_required
def bid_list(request):
    bids_qs = (
        Bid.objects.filter(user=request.user)
        .select_related("auction__product")
        .order_by("-created_at", "-id")
    )

    # Export handling
    if request.GET.get("export") in ["excel", "csv"]:
        return export_bids(bids_qs, request.GET.get("export"))

    paginator = Paginator(bids_qs, PER_PAGE)
    page_obj = paginator.get_page(request.GET.get("page", 1))

    return render(request, "bids/index.html", {
        "bids": page_obj.object_list,
        "page_obj": page_obj,
    })


def export_bids(bids, file_type):
    rows = [{
        "auction": bid.auction.title,
        "product": bid.auction.product.name,
        "amount": str(bid.amount),
        "placed_at": bid.created_at.strftime("%Y-%m-%d %H:%M:%S"),
    } for bid in bids]
    df = pd.DataFrame(rows, columns=["auction", "product", "amount", "placed_at"])

    if file_type == "excel":
        response = HttpResponse(content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet")
        response["Content-Disposition"] = 'attachment; filename="bids.xlsx"'
        df.to_excel(response, index=False)
        return response

    response = HttpResponse(content_type="text/csv")
    response["Content-Disposition"] = 'attachment; filename="bids.csv"'
    df.to_csv(response, index=False)
    return response


@require_POST
def create_bid(request, auction_id):
    bid_session = BidSession(request.session)
    bid_session.clear()

    amount = request.POST.get(f"{BidForm.prefix}-amount", "")
    pending = PendingBid(amount=amount, auction_id=auction_id)

    if not request.user.is_authenticated:
        bid_session.store(pending)
        logger.info("Anonymous bid on auction %s held until login", auction_id)
        messages.warning(request, LOGIN_REQUIRED)
        return redirect("accounts:login")

    if not user_has_valid_payment_method(request.user):
        bid_session.store(pending)
        logger.info("Bid by user %s on auction %s held: no valid payment method", request.user.pk, auction_id)
        auction = get_object_or_404(Auction.objects.select_related("product"), pk=auction_id)
        messages.info(request, PAYMENT_METHOD_REQUIRED, extra_tags=PAYMENT_METHOD_REQUIRED_TAG)
        return render_auction(request, auction, BidForm())

    bid, saved = BidService.place_bid(user=request.user, auction_id=auction_id, amount=amount)
    if saved:
        messages.success(request, HIGHEST_BIDDER)
    else:
        messages.error(request, BID_TOO_LOW)
    return redirect("auctions:show", pk=auction_id)
