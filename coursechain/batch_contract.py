"""Contract that mints course certificates singly or in batches."""

from __future__ import annotations

from . import batch_events as events
from .batch_storage import BatchStorage, is_admin, is_issuer
from .batch_types import BatchError, BatchErrorCode, CertificateData, MintResult
from .env import Env


class BatchCertificateContract:
    """Lets an admin appoint issuers, who mint and revoke certificates."""

    def __init__(self, env: Env | None = None) -> None:
        self.env = env if env is not None else Env()
        self.storage = BatchStorage(self.env)

    def initialize(self, admin: str, max_batch_size: int) -> None:
        if self.storage.is_initialized():
            raise BatchError(BatchErrorCode.ALREADY_INITIALIZED)
        self.storage.initialize(admin, max_batch_size)
        events.emit_contract_initialized(self.env, admin, max_batch_size)

    def _require_admin(self, admin: str) -> None:
        self.env.require_auth(admin)
        if not is_admin(self.storage, admin):
            raise BatchError(BatchErrorCode.UNAUTHORIZED)

    def _require_issuer(self, issuer: str) -> None:
        self.env.require_auth(issuer)
        if not is_issuer(self.storage, issuer):
            raise BatchError(BatchErrorCode.UNAUTHORIZED)

    def add_issuer(self, admin: str, issuer: str) -> None:
        self._require_admin(admin)
        self.storage.add_issuer(issuer)
        events.emit_issuer_added(self.env, admin, issuer)

    def remove_issuer(self, admin: str, issuer: str) -> None:
        self._require_admin(admin)
        self.storage.remove_issuer(issuer)
        events.emit_issuer_removed(self.env, admin, issuer)

    def mint_single_certificate(self, issuer: str, owner: str, certificate: CertificateData) -> None:
        """Mint one certificate for ``owner``; the issuer must be authorised."""
        self._require_issuer(issuer)
        if not certificate.validate(self.env.timestamp):
            raise BatchError(BatchErrorCode.INVALID_TIME_RANGE)
        if self.storage.certificate_exists(certificate.id):
            raise BatchError(BatchErrorCode.DUPLICATE_CERTIFICATE)
        self.storage.save_certificate(owner, certificate)
        events.emit_certificate_minted(self.env, issuer, owner, certificate)

    def mint_batch_certificates(
        self, issuer: str, owners: list[str], certificates: list[CertificateData]
    ) -> list[MintResult]:
        """Mint each certificate for the owner at the same position.

        A certificate that fails is reported in the results without stopping
        the batch; a bad issuer, oversized batch or length mismatch fails it all.
        """
        self._require_issuer(issuer)
        batch_size = len(certificates)
        if batch_size > self.storage.get_max_batch_size():
            raise BatchError(BatchErrorCode.BATCH_SIZE_TOO_LARGE)
        if batch_size != len(owners):
            raise BatchError(BatchErrorCode.INVALID_INPUT)

        results: list[MintResult] = []
        for owner, certificate in zip(owners, certificates):
            try:
                self.mint_single_certificate(issuer, owner, certificate)
            except BatchError as error:
                results.append(MintResult(certificate.id, error.code))
            else:
                results.append(MintResult(certificate.id))

        successes = sum(result.succeeded for result in results)
        events.emit_batch_mint_completed(
            self.env, issuer, batch_size, successes, batch_size - successes
        )
        return results

    def revoke_certificate(self, issuer: str, certificate_id: int) -> None:
        self._require_issuer(issuer)
        self.storage.revoke_certificate(certificate_id)
        events.emit_certificate_revoked(self.env, issuer, certificate_id)

    def get_certificate(self, certificate_id: int) -> CertificateData | None:
        return self.storage.get_certificate(certificate_id)

    def get_owner_certificates(self, owner: str) -> list[int]:
        return self.storage.get_owner_certificates(owner)

    def is_issuer(self, address: str) -> bool:
        return self.storage.is_issuer(address)