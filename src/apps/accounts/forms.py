from django import forms

from .models import Profile


class ProfileForm(forms.ModelForm):
    class Meta:
        model = Profile
        fields = ['card_last4', 'card_expires_on']
        labels = {
            'card_last4': 'Card (last 4 digits)',
            'card_expires_on': 'Card expires on',
        }
        widgets = {
            'card_expires_on': forms.DateInput(attrs={'type': 'date'}),
        }
