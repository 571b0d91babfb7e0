from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone

from src.apps.accounts.models import Profile
from src.apps.auctions.models import Auction, Product


@pytest.fixture
def product(db):
    return Product.objects.create(name="Vintage Camera", description="35mm rangefinder")


@pytest.fixture
def auction(product):
    return Auction.objects.create(product=product, title="Camera auction", starting_price=Decimal("10.00"))


@pytest.fixture
def make_user(db):
    def _make_user(username="bidder", with_card=False):
        user = get_user_model().objects.create_user(username=username, password="secret-pass-123")
        if with_card:
            Profile.objects.create(
                user=user,
                card_last4="4242",
                card_expires_on=timezone.localdate() + timedelta(days=365),
            )
        return user
    return _make_user


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def card_user(make_user):
    return make_user(username="card-holder", with_card=True)
