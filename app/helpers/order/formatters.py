from decimal import Decimal
from babel.numbers import format_currency as babel_format_currency

from app.configuration.settings import Configuration

configuration = Configuration()

def format_currency(value: Decimal, currency: str = None, locale_str: str = None) -> str:
    return babel_format_currency(
        value,
        currency or configuration.currency_code,
        locale=locale_str or configuration.currency_locale,
    )
