"""Accessor names generated for declared dependencies."""

from __future__ import annotations

import re

_VALID_NAME = re.compile(r"^[a-z0-9_]+$")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(name: str) -> str:
    """Convert ``CamelCase`` (dotted for nesting) into ``snake_case``.

    >>> underscore("Billing.InvoiceHTTPClient")
    'billing_invoice_http_client'
    """

    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.replace(".", "_").replace("-", "_").lower()


def derive_accessor_name(klass: type) -> str:
    """Return the default accessor name for ``klass``.

    Classes created inside functions drop their ``<locals>`` prefix, so only
    the nesting below the defining function contributes to the name.
    """

    qualname = getattr(klass, "__qualname__", "") or ""
    qualname = qualname.rpartition("<locals>.")[2]
    return underscore(qualname)


def is_valid_accessor_name(name: str) -> bool:
    return bool(_VALID_NAME.match(name))
