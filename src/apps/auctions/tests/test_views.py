from decimal import Decimal

import pytest
from django.core.management import call_command
from django.urls import reverse

from src.apps.auctions.models import Auction, Product
from src.apps.bids.models import Bid


@pytest.mark.django_db
class TestAuctionDetail:

    def test_shows_auction_with_empty_bid_form(self, client, auction):
        response = client.get(reverse("auctions:show", args=[auction.pk]))

        assert response.status_code == 200
        assert response.context["auction"] == auction
        assert response.context["bid_form"].initial == {}
        assert response.context["minimum_bid"] == Decimal("10.00")

    def test_prefills_pending_bid_for_this_auction(self, client, auction):
        session = client.session
        session["bid_data"] = {"amount": "25.00", "auction_id": auction.pk}
        session.save()

        response = client.get(reverse("auctions:show", args=[auction.pk]))

        assert response.context["bid_form"].initial == {"amount": "25.00"}
        # Showing the page never places or clears the pending bid
        assert client.session["bid_data"] == {"amount": "25.00", "auction_id": auction.pk}
        assert not Bid.objects.exists()

    def test_ignores_pending_bid_for_other_auction(self, client, auction):
        session = client.session
        session["bid_data"] = {"amount": "25.00", "auction_id": auction.pk + 1}
        session.save()

        response = client.get(reverse("auctions:show", args=[auction.pk]))

        assert response.context["bid_form"].initial == {}

    def test_unknown_auction_is_404(self, client, db):
        response = client.get(reverse("auctions:show", args=[1234]))

        assert response.status_code == 404

    def test_index_lists_auctions(self, client, auction):
        response = client.get(reverse("auctions:index"))

        assert list(response.context["auctions"]) == [auction]


@pytest.mark.django_db
class TestAuctionModel:

    def test_high_bid_and_minimum_bid(self, auction, user):
        assert auction.high_bid_amount() is None
        assert auction.minimum_bid() == Decimal("10.00")

        Bid.objects.create(auction=auction, user=user, amount=Decimal("12.00"))
        Bid.objects.create(auction=auction, user=user, amount=Decimal("18.50"))

        assert auction.high_bid_amount() == Decimal("18.50")
        assert auction.minimum_bid() == Decimal("18.51")


@pytest.mark.django_db
def test_seed_auctions_is_idempotent():
    call_command("seed_auctions")
    call_command("seed_auctions")

    assert Product.objects.count() == 3
    assert Auction.objects.count() == 3


@pytest.mark.django_db
def test_seed_auctions_copies():
    call_command("seed_auctions", copies=2)

    assert Auction.objects.count() == 6
    assert Auction.objects.filter(title="Road Bike #2").exists()
