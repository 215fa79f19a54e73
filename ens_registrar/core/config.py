"""
Client configuration for the registrar.

Holds the registry address and the protocol constants the client needs
to validate requests locally.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import dotenv_values

from ens_registrar.crypto import is_valid_address

# Registry minimum label length (in canonical characters)
DEFAULT_MIN_NAME_LENGTH = 7

ENV_REGISTRY_ADDRESS = "REGISTRAR_ADDRESS"
ENV_MIN_NAME_LENGTH = "REGISTRAR_MIN_NAME_LENGTH"
ENV_DEFAULT_GAS = "REGISTRAR_DEFAULT_GAS"


@dataclass(frozen=True)
class RegistrarConfig:
    """Per-client configuration parameters"""

    registry_address: str
    min_name_length: int = DEFAULT_MIN_NAME_LENGTH
    default_gas: Optional[int] = None  # Applied when a call supplies no gas

    def __post_init__(self):
        if not is_valid_address(self.registry_address):
            raise ValueError(f"Invalid registry address: {self.registry_address!r}")
        if self.min_name_length < 1:
            raise ValueError(f"min_name_length must be >= 1, got {self.min_name_length}")
        if self.default_gas is not None and self.default_gas <= 0:
            raise ValueError(f"default_gas must be positive, got {self.default_gas}")


def load_config(env_file: Optional[str] = None) -> RegistrarConfig:
    """
    Load configuration from a .env file and the process environment.

    Process environment variables take precedence over the file.

    Args:
        env_file: Optional path to a .env file

    Returns:
        RegistrarConfig instance

    Raises:
        ValueError: If no registry address is configured or a value is malformed
    """
    values = {}
    if env_file:
        values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    values.update(os.environ)

    address = values.get(ENV_REGISTRY_ADDRESS)
    if not address:
        raise ValueError(f"{ENV_REGISTRY_ADDRESS} is not set")

    min_length = values.get(ENV_MIN_NAME_LENGTH)
    default_gas = values.get(ENV_DEFAULT_GAS)

    return RegistrarConfig(
        registry_address=address,
        min_name_length=int(min_length) if min_length else DEFAULT_MIN_NAME_LENGTH,
        default_gas=int(default_gas) if default_gas else None,
    )
