"""Quickstart example for minorunit.

This example demonstrates converting checkout amounts to minor units and
formatting stored prices for display.

Note: Localized output depends on the installed Babel/CLDR version;
the plain formatters are stable across versions.
"""

from decimal import Decimal

from minorunit import (
    Interval,
    PriceItem,
    format_amount,
    format_localized,
    format_plain,
    format_with_code,
    format_with_interval,
    from_minor_units,
    get_config,
    render,
    to_minor_units,
)
from minorunit.locale_utils import get_system_locale

# Example 1: Amounts for a payment API
print("=" * 50)
print("Example 1: Decimal -> Minor Units")
print("=" * 50)

print(to_minor_units(19.99, "USD"))
# Output: 1999
print(to_minor_units(500, "JPY"))
# Output: 500
print(to_minor_units(Decimal("9.999"), "KWD"))
# Output: 9999
print(from_minor_units(1999, "USD"))
# Output: 19.99

# Example 2: Plain formatting
print("\n" + "=" * 50)
print("Example 2: Plain Formatting")
print("=" * 50)

print(format_amount(9999, "USD"))
# Output: $99.99
print(format_amount(9999, "JPY"))
# Output: ¥9,999
print(format_plain(123456789, "EUR"))
# Output: 1,234,567.89
print(format_with_code(9999, "gbp"))
# Output: 99.99 GBP
print(format_amount(-500, "USD"))
# Output: -$5.00

# Example 3: Subscriptions
print("\n" + "=" * 50)
print("Example 3: Recurring Prices")
print("=" * 50)

print(format_with_interval(999, "USD", Interval.MONTH))
# Output: $9.99 per month
print(format_with_interval(4999, "EUR", "month", 3))
# Output: €49.99 every 3 months

# Example 4: Locale-aware formatting
print("\n" + "=" * 50)
print("Example 4: Locale-Aware Formatting")
print("=" * 50)

print(format_localized(123456, "EUR"))
# Output: 1.234,56 € (currency's default locale, de_DE)
print(format_localized(123456, "EUR", "en-US"))
# Output: €1,234.56
print(format_localized(123456, "USD", "en_US", currency_display="name"))
# Output: 1,234.56 US dollars

host_locale = get_system_locale()
print(f"{host_locale}: {format_localized(123456, 'EUR', host_locale)}")

# Example 5: HTML rendering from a priced item
print("\n" + "=" * 50)
print("Example 5: HTML Rendering")
print("=" * 50)

plan = PriceItem(currency="gbp", recurring_interval="year")
print(render(12000, plan))
# Output: <span class="price">£120.00 per year</span>
print(render("n/a", plan))
# Output: None

# Example 6: Registry lookups
print("\n" + "=" * 50)
print("Example 6: Registry")
print("=" * 50)

config = get_config("kwd")
print(config)
# Output: CurrencyConfig(code='KWD', name='Kuwaiti Dinar', symbol='KD', decimals=3, locale='ar_KW')
print(format_amount(1000, "ZZZ"))
# Output: ZZZ1000 (unknown codes never raise)
