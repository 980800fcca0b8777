"""Tests for domain membership and lookup."""

import pytest

from commdomain.domain.registry import (
    DOMAIN_CODES,
    domain_for_name,
    is_valid_domain,
    iter_domains,
    lookup_domain,
)
from commdomain.domain.types import Domain


class TestIsValidDomain:
    @pytest.mark.parametrize("code", [0x01, 0x02, 0x03, 0x04, 0xFA])
    def test_registered_codes(self, code: int) -> None:
        assert is_valid_domain(code) is True

    @pytest.mark.parametrize("code", [0x00, 0x05, 0x99, 0xF9, 0xFB, 0xFF, -1, 0x100, 0x1FA, 10**20])
    def test_unregistered_codes(self, code: int) -> None:
        assert is_valid_domain(code) is False

    def test_gap_between_chat_and_info(self) -> None:
        """Nothing between 0x05 and 0xf9 is a domain."""
        assert not any(is_valid_domain(c) for c in range(0x05, 0xFA))

    @pytest.mark.parametrize("value", [True, False, 1.0, 250.0, "1", "0xfa", None, b"\x01"])
    def test_non_integers_are_never_members(self, value: object) -> None:
        assert is_valid_domain(value) is False

    def test_accepts_enum_members(self) -> None:
        assert is_valid_domain(Domain.GAME) is True

    def test_idempotent(self) -> None:
        results = {is_valid_domain(0x04) for _ in range(10)}
        assert results == {True}
        assert is_valid_domain(0x05) is False
        assert is_valid_domain(0x04) is True


class TestLookup:
    def test_lookup_by_code(self) -> None:
        assert lookup_domain(0xFA) is Domain.INFO

    def test_lookup_unknown(self) -> None:
        assert lookup_domain(0x05) is None
        assert lookup_domain(-1) is None
        assert lookup_domain(True) is None

    @pytest.mark.parametrize("name", ["chat", "CHAT", "Chat", "  chat  "])
    def test_name_case_insensitive(self, name: str) -> None:
        assert domain_for_name(name) is Domain.CHAT

    def test_unknown_name(self) -> None:
        assert domain_for_name("lobby") is None
        assert domain_for_name("") is None

    def test_iter_domains_ordered(self) -> None:
        assert [int(d) for d in iter_domains()] == [0x01, 0x02, 0x03, 0x04, 0xFA]

    def test_domain_codes_frozen(self) -> None:
        assert DOMAIN_CODES == frozenset({0x01, 0x02, 0x03, 0x04, 0xFA})
        assert isinstance(DOMAIN_CODES, frozenset)
