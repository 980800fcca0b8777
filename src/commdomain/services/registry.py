"""RegistryService — the policy layer above the domain registry.

The registry itself only answers membership questions. Treating an
unrecognized domain as a failure is a caller decision, exposed here as
the ``strict`` flag of :meth:`RegistryService.verify`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from commdomain.domain.registry import (
    domain_for_name,
    is_valid_domain,
    iter_domains,
    lookup_domain,
)
from commdomain.domain.types import Domain
from commdomain.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"^[+-]?\d+$")
_HEX = re.compile(r"^[+-]?0[xX][0-9a-fA-F]+$")
# Numerals longer than this are unparsable; str(int) has a digit limit.
_MAX_DIGITS = 64


def parse_reference(text: str) -> int | Domain | None:
    """Parse a user-supplied domain reference.

    Accepts decimal (``"4"``, ``"-1"``), hex (``"0xfa"``) or a domain name
    (``"chat"``). Numeric text is returned as a plain int whether or not it
    is registered; an unknown name, garbage, or a numeral longer than
    ``_MAX_DIGITS`` characters returns None.
    """
    raw = text.strip()
    if _HEX.match(raw) or _DECIMAL.match(raw):
        if len(raw) > _MAX_DIGITS:
            return None
        return int(raw, 0 if _HEX.match(raw) else 10)
    return domain_for_name(raw)


def _domain_row(domain: Domain) -> dict[str, Any]:
    return {"name": domain.label, "code": int(domain), "hex": domain.hex}


class RegistryService:
    """Stateless operations over the closed set of communication domains."""

    def verify(self, refs: Iterable[str], *, strict: bool = False) -> ServiceResult:
        """Check each reference against the registry.

        Non-strict mode always succeeds and reports per-reference validity.
        Strict mode fails with ``UNKNOWN_DOMAIN`` if any reference is invalid.
        """
        inputs = list(refs)
        if not inputs:
            return ServiceResult(
                ok=False,
                op="verify",
                error=ServiceError(code="NO_INPUT", message="No domain references given"),
            )

        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        for ref in inputs:
            parsed = parse_reference(ref)
            if parsed is None:
                warnings.append(f"Not a domain code or name: {ref!r}")
                items.append({"input": ref, "code": None, "valid": False, "name": None})
                continue
            domain = lookup_domain(int(parsed))
            items.append(
                {
                    "input": ref,
                    "code": int(parsed),
                    "valid": is_valid_domain(int(parsed)),
                    "name": domain.label if domain else None,
                }
            )

        rejected = [row["input"] for row in items if not row["valid"]]
        for warning in warnings:
            logger.debug(warning)
        logger.debug(
            "verify: %d refs, %d invalid (strict=%s)", len(items), len(rejected), strict
        )

        if strict and rejected:
            return ServiceResult(
                ok=False,
                op="verify",
                warnings=warnings,
                error=ServiceError(
                    code="UNKNOWN_DOMAIN",
                    message=f"Unrecognized domain: {', '.join(rejected)}",
                    detail={"rejected": rejected},
                ),
            )

        return ServiceResult(
            ok=True,
            op="verify",
            data={
                "items": items,
                "count": len(items),
                "valid_count": len(items) - len(rejected),
                "invalid_count": len(rejected),
            },
            warnings=warnings,
        )

    def list_domains(self) -> ServiceResult:
        """Return every registered domain in code order."""
        items = [_domain_row(d) for d in iter_domains()]
        logger.debug("list_domains: %d domains", len(items))
        return ServiceResult(
            ok=True,
            op="list_domains",
            data={"items": items, "count": len(items)},
        )

    def show(self, ref: str) -> ServiceResult:
        """Describe the domain named or numbered by *ref*."""
        parsed = parse_reference(ref)
        domain = lookup_domain(int(parsed)) if parsed is not None else None
        if domain is None:
            logger.debug("show: %r not found", ref)
            return ServiceResult(
                ok=False,
                op="show",
                error=ServiceError(
                    code="UNKNOWN_DOMAIN",
                    message=f"Unrecognized domain: {ref}",
                    detail={"input": ref},
                ),
            )
        logger.debug("show: %r -> %s", ref, domain.label)
        return ServiceResult(ok=True, op="show", data=_domain_row(domain))
