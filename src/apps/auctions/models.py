from decimal import Decimal
from typing import Optional

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Max


class TimeStampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    class Meta:
        abstract = True


class Product(TimeStampedModel):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    def __str__(self):
        return self.name


class Auction(TimeStampedModel):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='auctions')
    title = models.CharField(max_length=255)
    starting_price = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0.01'),
        validators=[MinValueValidator(Decimal('0.01'))],
    )

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.product})"

    def high_bid_amount(self) -> Optional[Decimal]:
        """Current leading bid amount, or None while nobody has bid."""
        return self.bids.aggregate(high=Max('amount'))['high']

    def minimum_bid(self) -> Decimal:
        high = self.high_bid_amount()
        if high is None:
            return self.starting_price
        return high + Decimal('0.01')
