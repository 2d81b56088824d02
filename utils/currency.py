from decimal import Decimal
from typing import Dict

# Stripeで小数部を持たない通貨
ZERO_DECIMAL_CURRENCIES = {
    'bif', 'clp', 'djf', 'gnf', 'jpy', 'kmf', 'krw', 'mga',
    'pyg', 'rwf', 'ugx', 'vnd', 'vuv', 'xaf', 'xof', 'xpf',
}

CURRENCY_SYMBOLS: Dict[str, str] = {
    'usd': '$',
    'eur': '€',
    'gbp': '£',
    'jpy': '¥',
    'aud': 'A$',
    'cad': 'CA$',
    'nzd': 'NZ$',
    'hkd': 'HK$',
    'mxn': 'MX$',
    'brl': 'R$',
    'inr': '₹',
    'krw': '₩',
    'cny': 'CN¥',
    'ils': '₪',
    'vnd': '₫',
}


def to_major_units(amount: int, currency: str) -> Decimal:
    if currency.lower() in ZERO_DECIMAL_CURRENCIES:
        return Decimal(amount)
    return Decimal(amount) / 100


def format_currency(amount: int, currency: str = 'usd') -> str:
    """最小通貨単位の金額を表示用の文字列にする (例: 1500, 'usd' -> '$15.00')"""
    code = (currency or 'usd').lower()
    value = to_major_units(amount, code)
    digits = 0 if code in ZERO_DECIMAL_CURRENCIES else 2
    number = f"{value:,.{digits}f}"
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{number} {code.upper()}"
    if value < 0:
        return f"-{symbol}{number[1:]}"
    return f"{symbol}{number}"
