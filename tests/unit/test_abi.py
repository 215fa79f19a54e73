"""
Tests for the ABI codec and registry binding.

Tests cover:
1. Function selectors
2. Static and dynamic argument encoding
3. Return value decoding
4. Registry function table
"""

import pytest

from ens_registrar.contract import (
    REGISTRY_ABI,
    AbiError,
    decode_values,
    encode_arguments,
    encode_call,
    function_selector,
    function_signature,
    split_call,
)
from ens_registrar.crypto import ZERO_ADDRESS, keccak256


OWNER = "0x5834eb6b2acac5b0bfff8413622704d890f80e9e"


class TestSelectors:
    """Tests for function selectors."""

    def test_known_selector(self):
        """transfer(address,uint256) has the well-known selector a9059cbb."""
        assert function_selector("transfer(address,uint256)").hex() == "a9059cbb"

    def test_signature_formatting(self):
        assert function_signature("entries", ["bytes32"]) == "entries(bytes32)"
        assert function_signature("unsealBid", ["bytes32", "address", "uint256", "bytes32"]) == \
            "unsealBid(bytes32,address,uint256,bytes32)"

    def test_registry_selectors_are_unique(self):
        selectors = [fn.selector for fn in REGISTRY_ABI.values()]
        assert len(set(selectors)) == len(selectors)


class TestEncoding:
    """Tests for argument encoding."""

    def test_bytes32(self):
        h = keccak256(b"foobarbaz")
        assert encode_arguments(["bytes32"], [h]) == h

    def test_bytes32_from_hex(self):
        h = keccak256(b"foobarbaz")
        assert encode_arguments(["bytes32"], ["0x" + h.hex()]) == h

    def test_bytes32_wrong_length(self):
        with pytest.raises(AbiError):
            encode_arguments(["bytes32"], [b"\x01" * 31])

    def test_address_left_padded(self):
        encoded = encode_arguments(["address"], [OWNER])
        assert encoded == b"\x00" * 12 + bytes.fromhex(OWNER[2:])

    def test_bad_address(self):
        with pytest.raises(AbiError):
            encode_arguments(["address"], ["0x1234"])

    def test_uint(self):
        assert encode_arguments(["uint256"], [1]) == b"\x00" * 31 + b"\x01"

    @pytest.mark.parametrize("value", [-1, 2**256, "1", True])
    def test_uint_out_of_range(self, value):
        with pytest.raises(AbiError):
            encode_arguments(["uint256"], [value])

    def test_uint8_range(self):
        encode_arguments(["uint8"], [255])
        with pytest.raises(AbiError):
            encode_arguments(["uint8"], [256])

    def test_string_is_dynamic(self):
        """Head holds the tail offset; tail holds length and padded bytes."""
        encoded = encode_arguments(["string"], ["foo"])
        assert len(encoded) == 96
        assert int.from_bytes(encoded[:32], "big") == 32
        assert int.from_bytes(encoded[32:64], "big") == 3
        assert encoded[64:67] == b"foo"
        assert encoded[67:] == b"\x00" * 29

    def test_mixed_static_and_dynamic(self):
        encoded = encode_arguments(["uint256", "string"], [7, "foobarbaz"])
        assert int.from_bytes(encoded[:32], "big") == 7
        assert int.from_bytes(encoded[32:64], "big") == 64

    def test_arity_mismatch(self):
        with pytest.raises(AbiError):
            encode_arguments(["bytes32", "address"], [b"\x00" * 32])

    def test_unsupported_type(self):
        with pytest.raises(AbiError):
            encode_arguments(["bytes"], [b""])

    def test_encode_call_prefixes_selector(self):
        data = encode_call("entries(bytes32)", ["bytes32"], [b"\x00" * 32])
        assert data[:4] == function_selector("entries(bytes32)")
        assert len(data) == 36


class TestDecoding:
    """Tests for return value decoding."""

    def test_entries_tuple(self):
        outputs = REGISTRY_ABI["entries"].outputs
        data = encode_arguments(outputs, [1, OWNER, 1_500_000_000, 10, 20])
        assert decode_values(outputs, data) == (1, OWNER, 1_500_000_000, 10, 20)

    def test_zero_address(self):
        data = b"\x00" * 32
        assert decode_values(["address"], data) == (ZERO_ADDRESS,)

    def test_hex_input(self):
        assert decode_values(["uint256"], "0x" + "00" * 31 + "2a") == (42,)

    def test_string(self):
        data = encode_arguments(["string"], ["foobarbaz"])
        assert decode_values(["string"], data) == ("foobarbaz",)

    def test_bool(self):
        assert decode_values(["bool"], b"\x00" * 31 + b"\x01") == (True,)
        with pytest.raises(AbiError):
            decode_values(["bool"], b"\x00" * 31 + b"\x02")

    def test_truncated(self):
        with pytest.raises(AbiError):
            decode_values(["uint256", "uint256"], b"\x00" * 40)

    def test_dirty_address_padding(self):
        with pytest.raises(AbiError):
            decode_values(["address"], b"\x01" + b"\x00" * 31)

    def test_uint8_overflow(self):
        with pytest.raises(AbiError):
            decode_values(["uint8"], (256).to_bytes(32, "big"))

    def test_split_call(self):
        data = encode_call("startAuction(bytes32)", ["bytes32"], [b"\x11" * 32])
        selector, args = split_call(data)
        assert selector == REGISTRY_ABI["startAuction"].selector
        assert decode_values(["bytes32"], args) == (b"\x11" * 32,)

    def test_split_call_too_short(self):
        with pytest.raises(AbiError):
            split_call(b"\x00\x01")


class TestRegistryAbi:
    """Tests for the registry function table."""

    def test_bid_is_only_payable_entry_point(self):
        payable = {name for name, fn in REGISTRY_ABI.items() if fn.payable}
        assert payable == {"newBid"}

    def test_getters_are_constant(self):
        constant = {name for name, fn in REGISTRY_ABI.items() if fn.constant}
        assert constant == {"entries", "sealedBids", "shaBid"}

    def test_unseal_signature(self):
        assert REGISTRY_ABI["unsealBid"].signature == "unsealBid(bytes32,address,uint256,bytes32)"
