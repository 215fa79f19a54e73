"""
ens_registrar

Client library for a sealed-bid, commit-reveal name auction registry:
- Name validation and canonical normalization
- Name hashes and sealed-bid commitments (Keccak-256)
- Typed decoding of registry entries
- Offline bid construction
- Async registrar client over a pluggable transport
"""

__version__ = "0.1.0"
