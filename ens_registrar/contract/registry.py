"""
Registry binding - the registry contract's ABI surface over a Transport.

Reads return raw tuples; interpreting them is the job of the entry
decoder. Writes return the transport's transaction id.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from ens_registrar.contract.abi import decode_values, encode_call, function_selector, function_signature
from ens_registrar.contract.transport import Transport, TxParams
from ens_registrar.crypto import normalize_address
from ens_registrar.utils.logger import get_logger

logger = get_logger("contract")


@dataclass(frozen=True)
class RegistryFunction:
    """One entry point of the registry ABI."""
    name: str
    inputs: Tuple[str, ...]
    outputs: Tuple[str, ...] = ()
    constant: bool = False
    payable: bool = False

    @property
    def signature(self) -> str:
        return function_signature(self.name, self.inputs)

    @property
    def selector(self) -> bytes:
        return function_selector(self.signature)


REGISTRY_ABI: Dict[str, RegistryFunction] = {
    fn.name: fn
    for fn in (
        # Getters
        RegistryFunction(
            "entries", ("bytes32",),
            outputs=("uint8", "address", "uint256", "uint256", "uint256"),
            constant=True,
        ),
        RegistryFunction("sealedBids", ("bytes32",), outputs=("address",), constant=True),
        RegistryFunction(
            "shaBid", ("bytes32", "address", "uint256", "bytes32"),
            outputs=("bytes32",), constant=True,
        ),
        # Auction lifecycle
        RegistryFunction("startAuction", ("bytes32",)),
        RegistryFunction("newBid", ("bytes32",), payable=True),
        RegistryFunction("unsealBid", ("bytes32", "address", "uint256", "bytes32")),
        RegistryFunction("finalizeAuction", ("bytes32",)),
        RegistryFunction("cancelBid", ("address", "bytes32")),
        # Ownership
        RegistryFunction("transfer", ("bytes32", "address")),
        RegistryFunction("releaseDeed", ("bytes32",)),
        RegistryFunction("invalidateName", ("string",)),
    )
}


class RegistryContract:
    """
    Typed access to a deployed registry.

    Attributes:
        transport: Network collaborator
        address: Registry contract address
    """

    def __init__(self, transport: Transport, address: str, default_gas: Optional[int] = None):
        self.transport = transport
        self.address = normalize_address(address)
        self.default_gas = default_gas

    @staticmethod
    def function(name: str) -> RegistryFunction:
        try:
            return REGISTRY_ABI[name]
        except KeyError:
            raise ValueError(f"Registry has no function {name!r}") from None

    def encode(self, name: str, args: Sequence[Any]) -> bytes:
        fn = self.function(name)
        return encode_call(fn.signature, fn.inputs, args)

    async def call(self, name: str, *args: Any) -> Tuple[Any, ...]:
        """
        Call a constant registry function.

        Returns:
            Raw decoded output tuple
        """
        fn = self.function(name)
        if not fn.constant:
            raise ValueError(f"{name} is not a constant function; use transact()")

        data = self.encode(name, args)
        result = await self.transport.call(self.address, data)
        return decode_values(fn.outputs, result)

    async def transact(
        self,
        name: str,
        args: Sequence[Any],
        params: Union[TxParams, Mapping[str, Any], None] = None,
    ) -> str:
        """
        Send a state-changing registry transaction.

        Returns:
            Transaction id as reported by the transport
        """
        fn = self.function(name)
        if fn.constant:
            raise ValueError(f"{name} is a constant function; use call()")

        params = TxParams.coerce(params)
        data = self.encode(name, args)
        tx = params.to_transaction(self.address, data, default_gas=self.default_gas)
        logger.debug(f"Sending {fn.signature} to {self.address} (value={tx['value']})")

        tx_id = await self.transport.send_transaction(tx)
        logger.info(f"{fn.name} submitted: {tx_id}")
        return tx_id


__all__ = [
    "RegistryFunction",
    "RegistryContract",
    "REGISTRY_ABI",
]
