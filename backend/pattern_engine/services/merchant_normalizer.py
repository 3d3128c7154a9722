"""Merchant name cleanup for raw bank transaction descriptions."""

import re

# Payment-channel tags banks prepend to the merchant, e.g. "POS DEBIT ", "ATM #"
CHANNEL_PREFIX = re.compile(
    r'^(?:(?:debit|credit|pos|atm|ach|checkcard|check\s+card)\b(?:\s+card)?(?:\s+purchase)?[\s:#*-]*)+',
    re.IGNORECASE,
)

# Trailing "MM/DD" or "MM-DD" posting date
DATE_SUFFIX = re.compile(r'\s+\d{1,2}[/-]\d{1,2}\s*$')

# Trailing store / reference numbers: "#412", "# 0042", " 000123"
REFERENCE_SUFFIX = re.compile(r'(?:\s*#\s*\d+|(?:^|\s+)\d{3,})\s*$')

ENTITY_SUFFIXES = frozenset({
    'inc', 'llc', 'corp', 'ltd', 'co',
    'store', 'shop', 'market', 'pharmacy', 'gas', 'station',
})


def extract_merchant_name(description: str) -> str:
    """
    Turn a raw description into a display name.

    "POS DEBIT WHOLE FOODS MARKET #412" -> "Whole Foods Market"
    """
    name = CHANNEL_PREFIX.sub('', description.strip())

    # Suffixes can stack ("NETFLIX 123456 10/02"), strip until stable
    previous = None
    while previous != name:
        previous = name
        name = DATE_SUFFIX.sub('', name)
        name = REFERENCE_SUFFIX.sub('', name)

    return ' '.join(word.capitalize() for word in name.split())


def normalize_for_comparison(name: str) -> str:
    """
    Fold a merchant name for fuzzy matching.

    Lowercases, drops punctuation (accented letters are kept) and
    business-entity words:
    "Whole Foods Market, Inc." -> "whole foods"
    """
    folded = re.sub(r'[^\w\s]|_', '', name.lower())
    words = [w for w in folded.split() if w not in ENTITY_SUFFIXES]
    return ' '.join(words)
