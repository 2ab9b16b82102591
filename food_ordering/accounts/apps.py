from django.apps import AppConfig


class AccountsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "food_ordering.accounts"
    label = "food_accounts"
    verbose_name = "Accounts"
