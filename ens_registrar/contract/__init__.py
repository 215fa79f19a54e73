"""
Registry contract bindings.

ABI codec, transport interface and the registry's function surface.
"""

from ens_registrar.contract.abi import (
    AbiError,
    function_signature,
    function_selector,
    encode_arguments,
    encode_call,
    decode_values,
    split_call,
)

from ens_registrar.contract.transport import (
    Transport,
    TxParams,
)

from ens_registrar.contract.registry import (
    RegistryFunction,
    RegistryContract,
    REGISTRY_ABI,
)

__all__ = [
    # ABI
    "AbiError",
    "function_signature",
    "function_selector",
    "encode_arguments",
    "encode_call",
    "decode_values",
    "split_call",
    # Transport
    "Transport",
    "TxParams",
    # Registry
    "RegistryFunction",
    "RegistryContract",
    "REGISTRY_ABI",
]
