"""Membership checks over the fixed set of domain codes.

All functions here are pure and never raise: a value that is not a
registered code is simply "not found".
"""

from __future__ import annotations

from commdomain.domain.types import Domain

DOMAIN_CODES: frozenset[int] = frozenset(int(d) for d in Domain)

_BY_CODE: dict[int, Domain] = {int(d): d for d in Domain}
_BY_NAME: dict[str, Domain] = {d.label: d for d in Domain}


def _as_code(value: object) -> int | None:
    # bool is an int subclass but never a domain code
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return int(value)


def is_valid_domain(code: object) -> bool:
    """Return True if *code* is an integer equal to a registered domain code.

    Negative and out-of-range integers, bools, and non-integers are all False.
    """
    value = _as_code(code)
    return value is not None and value in DOMAIN_CODES


def lookup_domain(code: object) -> Domain | None:
    """Return the :class:`Domain` for *code*, or None if it is not registered."""
    value = _as_code(code)
    if value is None:
        return None
    return _BY_CODE.get(value)


def domain_for_name(name: str) -> Domain | None:
    """Case-insensitive lookup by symbolic name (``"chat"``, ``" INFO "``)."""
    return _BY_NAME.get(name.strip().lower())


def iter_domains() -> tuple[Domain, ...]:
    """All registered domains in ascending code order."""
    return tuple(sorted(Domain))
