"""Platform application identifier derivation."""

from __future__ import annotations

from typing import Optional

from .models import DerivedIdentifiers


def _normalize_identifier(identifier: str) -> str:
    return identifier.replace("_", "").lower()


def derive_identifiers(organization_identifier: Optional[str]) -> DerivedIdentifiers:
    """Derive the Android and iOS application identifiers.

    Both platforms currently share one rule: every underscore is removed and
    the result is lower-cased.  An absent or empty source yields empty
    identifiers for both platforms, which downstream generation treats as
    "omit identifier-dependent content".

    Examples::

        derive_identifiers("com_example_app").android -> "comexampleapp"
        derive_identifiers("Com.Example.My_App").ios  -> "com.example.myapp"
    """
    if not organization_identifier:
        return DerivedIdentifiers(android="", ios="")
    return DerivedIdentifiers(
        android=_normalize_identifier(organization_identifier),
        ios=_normalize_identifier(organization_identifier),
    )
