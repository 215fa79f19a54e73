"""
Transport - the boundary to the network collaborator.

The registrar client never signs, submits, retries or times out anything
itself. It hands encoded requests to a Transport and reports whatever
the transport returns or raises.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ens_registrar.crypto import bytes_to_hex, normalize_address


class Transport(ABC):
    """
    Network collaborator interface.

    Implementations wrap a JSON-RPC provider, a signing wallet, or an
    in-process test double. Errors (reverts, timeouts, rejected
    signatures) are raised by the implementation and pass through the
    client unchanged.
    """

    @abstractmethod
    async def call(self, to: str, data: bytes) -> bytes:
        """
        Execute a read-only call against a contract.

        Args:
            to: Contract address
            data: ABI-encoded call data (selector + arguments)

        Returns:
            ABI-encoded return data
        """

    @abstractmethod
    async def send_transaction(self, transaction: Dict[str, Any]) -> str:
        """
        Submit a state-changing transaction.

        Args:
            transaction: {"from", "to", "value", "gas", "gasPrice", "data"};
                optional keys are omitted when unset

        Returns:
            Transaction identifier
        """


class TxParams(BaseModel):
    """
    Caller-supplied transaction options.

    Accepts both the wire spelling ("from", "gasPrice") and the Python
    spelling (sender, gas_price).
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    sender: Optional[str] = Field(default=None, alias="from")
    value: Optional[int] = Field(default=None, ge=0)
    gas: Optional[int] = Field(default=None, gt=0)
    gas_price: Optional[int] = Field(default=None, ge=0, alias="gasPrice")

    @field_validator("sender")
    @classmethod
    def _normalize_sender(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return normalize_address(v)

    @classmethod
    def coerce(cls, opts: Union["TxParams", Mapping[str, Any], None]) -> "TxParams":
        """Accept TxParams, a mapping, or None."""
        if opts is None:
            return cls()
        if isinstance(opts, cls):
            return opts
        return cls.model_validate(dict(opts))

    def to_transaction(self, to: str, data: bytes, default_gas: Optional[int] = None) -> Dict[str, Any]:
        """Build the {from, to, value, gas, gasPrice, data} request for the transport."""
        tx: Dict[str, Any] = {
            "to": to,
            "value": self.value or 0,
            "data": bytes_to_hex(data),
        }
        if self.sender is not None:
            tx["from"] = self.sender
        gas = self.gas if self.gas is not None else default_gas
        if gas is not None:
            tx["gas"] = gas
        if self.gas_price is not None:
            tx["gasPrice"] = self.gas_price
        return tx


__all__ = [
    "Transport",
    "TxParams",
]
