"""Default currency detection from the client's locale."""

from django.conf import settings

# Checked in order against the uppercased locale tag
LOCALE_CURRENCIES = (
    (('GB',), 'GBP'),
    (('EU', 'DE', 'FR', 'ES', 'IT'), 'EUR'),
    (('JP',), 'JPY'),
    (('IN',), 'INR'),
    (('CA',), 'CAD'),
    (('AU',), 'AUD'),
)


def locale_from_accept_language(header):
    """Return the first language tag of an Accept-Language header."""
    if not header:
        return 'en-US'
    first = header.split(',')[0].split(';')[0].strip()
    return first or 'en-US'


def detect_currency(locale):
    """
    Map a locale such as 'en-GB' or 'de-DE' to a currency code.

    Matching is by substring, so 'fr-CA' resolves to EUR before CAD.
    Unknown locales fall back to settings.DEFAULT_CURRENCY.
    """
    tag = (locale or '').upper()
    for markers, currency in LOCALE_CURRENCIES:
        if any(marker in tag for marker in markers):
            return currency
    return settings.DEFAULT_CURRENCY
