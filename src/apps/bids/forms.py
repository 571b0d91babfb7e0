from django import forms

from .models import Bid


class BidForm(forms.ModelForm):
    """Amount field of a bid; auction and bidder are set on the instance."""

    prefix = 'bid'

    class Meta:
        model = Bid
        fields = ['amount']
        widgets = {
            'amount': forms.NumberInput(attrs={'step': '0.01', 'min': '0.01'}),
        }
