from django.apps import AppConfig


class BidsAppConfig(AppConfig):
    name = 'src.apps.bids'
    label = 'bids'
    verbose_name = 'Bids'
