"""Business ID generation.

Record ids are random 32-char hex strings. Invoice ids follow the
storefront format ``INV-NNNNNN`` (6 digits, first digit non-zero).
"""

import secrets
import uuid

INVOICE_PREFIX = "INV"


def generate_id() -> str:
    return uuid.uuid4().hex


def generate_invoice_id() -> str:
    number = 100_000 + secrets.randbelow(900_000)
    return f"{INVOICE_PREFIX}-{number}"
