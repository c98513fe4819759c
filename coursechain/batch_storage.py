"""Storage and authorisation helpers of the batch-minting contract."""

from __future__ import annotations

from dataclasses import replace

from .batch_types import BatchError, BatchErrorCode, CertificateData
from .env import Env

MAX_BATCH_SIZE_KEY = "MAX_BS"
DEFAULT_MAX_BATCH_SIZE = 10


class BatchStorage:
    """Keeps admin, configuration, issuers, certificates and ownership lists."""

    def __init__(self, env: Env) -> None:
        self.env = env
        self._admin: str | None = None
        self._initialized = False
        self._config: dict[str, int] = {}
        self._issuers: list[str] = []
        self._certificates: dict[int, CertificateData] = {}
        self._owners: dict[str, list[int]] = {}

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise BatchError(BatchErrorCode.NOT_INITIALIZED)

    def initialize(self, admin: str, max_batch_size: int) -> None:
        if self._initialized:
            raise BatchError(BatchErrorCode.ALREADY_INITIALIZED)
        self._admin = admin
        self._config = {MAX_BATCH_SIZE_KEY: max_batch_size}
        self._initialized = True

    def is_initialized(self) -> bool:
        return self._initialized

    def get_admin(self) -> str:
        if self._admin is None:
            raise BatchError(BatchErrorCode.NOT_INITIALIZED)
        return self._admin

    def get_max_batch_size(self) -> int:
        self._require_initialized()
        return self._config.get(MAX_BATCH_SIZE_KEY, DEFAULT_MAX_BATCH_SIZE)

    def is_issuer(self, address: str) -> bool:
        self._require_initialized()
        return address in self._issuers

    def add_issuer(self, address: str) -> None:
        self._require_initialized()
        if address not in self._issuers:
            self._issuers.append(address)

    def remove_issuer(self, address: str) -> None:
        self._require_initialized()
        if address in self._issuers:
            self._issuers.remove(address)

    def certificate_exists(self, certificate_id: int) -> bool:
        self._require_initialized()
        return certificate_id in self._certificates

    def save_certificate(self, owner: str, certificate: CertificateData) -> None:
        """Store a new certificate and append it to its owner's list."""
        self._require_initialized()
        if self.certificate_exists(certificate.id):
            raise BatchError(BatchErrorCode.DUPLICATE_CERTIFICATE)
        self._certificates[certificate.id] = certificate
        self._owners.setdefault(owner, []).append(certificate.id)

    def get_certificate(self, certificate_id: int) -> CertificateData | None:
        self._require_initialized()
        return self._certificates.get(certificate_id)

    def get_owner_certificates(self, owner: str) -> list[int]:
        self._require_initialized()
        return list(self._owners.get(owner, ()))

    def revoke_certificate(self, certificate_id: int) -> None:
        """End a revocable certificate's validity at the current ledger time."""
        self._require_initialized()
        certificate = self._certificates.get(certificate_id)
        if certificate is None:
            raise BatchError(BatchErrorCode.CERTIFICATE_NOT_FOUND)
        if not certificate.revocable:
            raise BatchError(BatchErrorCode.CERTIFICATE_NOT_REVOCABLE)
        self._certificates[certificate_id] = replace(certificate, valid_until=self.env.timestamp)


def is_admin(storage: BatchStorage, address: str) -> bool:
    """True if ``address`` is the contract admin; fails if not initialised."""
    if not storage.is_initialized():
        raise BatchError(BatchErrorCode.NOT_INITIALIZED)
    return storage.get_admin() == address


def is_issuer(storage: BatchStorage, address: str) -> bool:
    """True if ``address`` is an authorised issuer; fails if not initialised."""
    if not storage.is_initialized():
        raise BatchError(BatchErrorCode.NOT_INITIALIZED)
    return storage.is_issuer(address)