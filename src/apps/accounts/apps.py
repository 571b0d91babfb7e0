from django.apps import AppConfig


class AccountsAppConfig(AppConfig):
    name = 'src.apps.accounts'
    label = 'accounts'
    verbose_name = 'Accounts'
