"""Events published by the certificate contract."""

from __future__ import annotations

from .certificate_types import CertificateMetadata, Role
from .env import Env


def emit_contract_initialized(env: Env, admin: str) -> None:
    env.publish(("contract_initialized",), admin)


def emit_role_added(env: Env, user: str, role: Role) -> None:
    env.publish(("role_added", user), (role.can_issue, role.can_revoke))


def emit_role_removed(env: Env, user: str) -> None:
    env.publish(("role_removed", user), ())


def emit_role_updated(env: Env, user: str, new_role: Role) -> None:
    env.publish(("role_updated", user), (new_role.can_issue, new_role.can_revoke))


def emit_certificate_minted(
    env: Env,
    certificate_id: bytes,
    metadata: CertificateMetadata,
    student: str,
    issuer: str,
    token_id: bytes,
) -> None:
    env.publish(
        ("nft_certificate_minted", certificate_id),
        (metadata, student, issuer, token_id),
    )


def emit_certificate_revoked(
    env: Env,
    certificate_id: bytes,
    metadata: CertificateMetadata,
    revoker: str,
    timestamp: int,
) -> None:
    env.publish(
        ("nft_certificate_revoked", certificate_id),
        (metadata, revoker, timestamp),
    )


def emit_certificate_transferred(env: Env, certificate_id: bytes, from_: str, to: str) -> None:
    env.publish(("certificate_transferred", certificate_id), (from_, to))


def emit_metadata_updated(
    env: Env,
    certificate_id: bytes,
    updater: str,
    old_uri: str,
    new_uri: str,
) -> None:
    env.publish(
        ("metadata_updated", certificate_id),
        (updater, old_uri, new_uri, env.timestamp),
    )