from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from src.apps.auctions.models import Auction


class Bid(models.Model):
    auction = models.ForeignKey(Auction, on_delete=models.CASCADE, related_name='bids')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='bids')
    amount = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.01'))])
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.amount} on {self.auction_id} by {self.user_id}"

    def clean(self):
        # The new bid has to beat the current high bid at save time
        super().clean()
        if self.amount is None or self.auction_id is None:
            return

        high = self.auction.high_bid_amount()
        if high is None:
            if self.amount < self.auction.starting_price:
                raise ValidationError(
                    {'amount': f"Bid must be at least the starting price ({self.auction.starting_price})."}
                )
        elif self.amount <= high:
            raise ValidationError({'amount': f"Bid must be higher than the current bid ({high})."})
