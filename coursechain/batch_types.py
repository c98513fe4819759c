"""Certificate data, error codes and mint results of the batch-minting contract."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

METADATA_HASH_LENGTH = 32


class CertificateType(IntEnum):
    """Tier of a certificate; the integer value is its wire representation."""

    STANDARD = 0
    PREMIUM = 1
    GOLD = 2


@dataclass(frozen=True)
class CertificateData:
    """A certificate as stored by the batch-minting contract."""

    id: int
    metadata_hash: bytes
    valid_from: int
    valid_until: int
    revocable: bool
    cert_type: CertificateType

    def __post_init__(self) -> None:
        if not isinstance(self.metadata_hash, bytes) or len(self.metadata_hash) != METADATA_HASH_LENGTH:
            raise ValueError(f"metadata_hash must be {METADATA_HASH_LENGTH} bytes")

    def validate(self, now: int) -> bool:
        """True if the validity window is well ordered and ends after ``now``."""
        return self.valid_from < self.valid_until and self.valid_until > now


class BatchErrorCode(IntEnum):
    UNAUTHORIZED = 1
    ALREADY_INITIALIZED = 2
    NOT_INITIALIZED = 3

    INVALID_INPUT = 100
    DUPLICATE_CERTIFICATE = 101
    STORAGE_ERROR = 102
    BATCH_SIZE_TOO_LARGE = 103
    INVALID_TIME_RANGE = 104
    BATCH_SIZE_EXCEEDED = 105

    CERTIFICATE_NOT_FOUND = 200
    CERTIFICATE_ALREADY_REVOKED = 201
    CERTIFICATE_NOT_REVOCABLE = 202


_MESSAGES = {
    BatchErrorCode.UNAUTHORIZED: "caller is not authorized",
    BatchErrorCode.ALREADY_INITIALIZED: "contract has already been initialized",
    BatchErrorCode.NOT_INITIALIZED: "contract has not been initialized",
    BatchErrorCode.INVALID_INPUT: "invalid input",
    BatchErrorCode.DUPLICATE_CERTIFICATE: "certificate already exists",
    BatchErrorCode.STORAGE_ERROR: "storage error",
    BatchErrorCode.BATCH_SIZE_TOO_LARGE: "batch size is larger than allowed",
    BatchErrorCode.INVALID_TIME_RANGE: "invalid validity time range",
    BatchErrorCode.BATCH_SIZE_EXCEEDED: "batch size exceeded",
    BatchErrorCode.CERTIFICATE_NOT_FOUND: "certificate not found",
    BatchErrorCode.CERTIFICATE_ALREADY_REVOKED: "certificate has already been revoked",
    BatchErrorCode.CERTIFICATE_NOT_REVOCABLE: "certificate is not revocable",
}


class BatchError(Exception):
    """Error raised by the batch-minting contract, carrying a numeric code."""

    def __init__(self, code: BatchErrorCode) -> None:
        self.code = BatchErrorCode(code)
        super().__init__(_MESSAGES[self.code])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BatchError):
            return self.code == other.code
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.code)


@dataclass(frozen=True)
class MintResult:
    """Outcome of minting one certificate of a batch; ``error`` is None on success."""

    certificate_id: int
    error: BatchErrorCode | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None