from django.apps import AppConfig


class AuctionsAppConfig(AppConfig):
    name = 'src.apps.auctions'
    label = 'auctions'
    verbose_name = 'Auctions'
