"""Events published by the batch-minting contract."""

from __future__ import annotations

from .batch_types import CertificateData
from .env import Env

CERTIFICATE_MINTED = "CERTIFICATE_MINTED"
CERTIFICATE_REVOKED = "CERTIFICATE_REVOKED"
BATCH_MINT_COMPLETED = "BATCH_MINT_COMPLETED"
ISSUER_ADDED = "ISSUER_ADDED"
ISSUER_REMOVED = "ISSUER_REMOVED"
CONTRACT_INITIALIZED = "CONTRACT_INITIALIZED"


def emit_certificate_minted(env: Env, issuer: str, owner: str, certificate: CertificateData) -> None:
    env.publish(
        (CERTIFICATE_MINTED, issuer, owner, certificate.id),
        (
            certificate.id,
            certificate.metadata_hash,
            certificate.valid_from,
            certificate.valid_until,
            certificate.revocable,
            int(certificate.cert_type),
        ),
    )


def emit_certificate_revoked(env: Env, revoker: str, certificate_id: int) -> None:
    env.publish((CERTIFICATE_REVOKED, revoker, certificate_id), ())


def emit_batch_mint_completed(
    env: Env, issuer: str, total_count: int, success_count: int, failure_count: int
) -> None:
    env.publish((BATCH_MINT_COMPLETED, issuer), (total_count, success_count, failure_count))


def emit_issuer_added(env: Env, admin: str, issuer: str) -> None:
    env.publish((ISSUER_ADDED, admin), issuer)


def emit_issuer_removed(env: Env, admin: str, issuer: str) -> None:
    env.publish((ISSUER_REMOVED, admin), issuer)


def emit_contract_initialized(env: Env, admin: str, max_batch_size: int) -> None:
    env.publish((CONTRACT_INITIALIZED, admin), max_batch_size)