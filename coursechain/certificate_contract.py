"""Certificate contract: roles, minting, verification, revocation and URI history."""

from __future__ import annotations

from . import certificate_events as events
from .certificate_storage import CertificateStorage
from .certificate_types import (
    CertificateError,
    CertificateErrorCode,
    CertificateMetadata,
    CertificateStatus,
    MetadataUpdateEntry,
    MintCertificateParams,
    Permission,
    Role,
)
from .env import Env


class CertificateContract:
    """Issues and manages course certificates held as non-transferable tokens."""

    def __init__(self, env: Env | None = None) -> None:
        self.env = env if env is not None else Env()
        self.storage = CertificateStorage()

    def _require_initialized(self) -> None:
        if not self.storage.is_initialized():
            raise CertificateError(CertificateErrorCode.NOT_INITIALIZED)

    def _require_admin_auth(self) -> None:
        self._require_initialized()
        self.env.require_auth(self.storage.get_admin())

    def initialize(self, admin: str) -> None:
        """Set the admin; fails if the contract is already initialised."""
        if self.storage.is_initialized():
            raise CertificateError(CertificateErrorCode.ALREADY_INITIALIZED)
        self.env.require_auth(admin)
        self.storage.set_admin(admin)
        self.storage.set_initialized()
        events.emit_contract_initialized(self.env, admin)

    def get_admin(self) -> str:
        self._require_initialized()
        return self.storage.get_admin()

    def grant_role(self, user: str, role: Role) -> None:
        """Give a user a role; requires the admin's authorisation."""
        self._require_admin_auth()
        self.storage.set_role(user, role)
        events.emit_role_added(self.env, user, role)

    def update_role(self, user: str, new_role: Role) -> None:
        """Replace an existing role; requires the admin's authorisation."""
        self._require_admin_auth()
        if self.storage.get_role(user) is None:
            raise CertificateError(CertificateErrorCode.ROLE_NOT_FOUND)
        self.storage.set_role(user, new_role)
        events.emit_role_updated(self.env, user, new_role)

    def revoke_role(self, user: str) -> None:
        """Remove an existing role; requires the admin's authorisation."""
        self._require_admin_auth()
        if self.storage.get_role(user) is None:
            raise CertificateError(CertificateErrorCode.ROLE_NOT_FOUND)
        self.storage.remove_role(user)
        events.emit_role_removed(self.env, user)

    def get_role(self, user: str) -> Role | None:
        return self.storage.get_role(user)

    def has_permission(self, user: str, permission: Permission) -> bool:
        role = self.storage.get_role(user)
        return role is not None and role.has(permission)

    def mint_certificate(self, issuer: str, params: MintCertificateParams) -> None:
        """Create a certificate for a student; the issuer needs the Issue permission."""
        self._require_initialized()
        if not self.has_permission(issuer, Permission.ISSUE):
            raise CertificateError(CertificateErrorCode.UNAUTHORIZED)
        if not (params.title and params.description and params.metadata_uri and params.course_id):
            raise CertificateError(CertificateErrorCode.INVALID_METADATA)
        if self.storage.has_certificate(params.certificate_id):
            raise CertificateError(CertificateErrorCode.CERTIFICATE_ALREADY_EXISTS)

        token_id = params.certificate_id
        metadata = CertificateMetadata(
            course_id=params.course_id,
            student_id=params.student,
            instructor_id=issuer,
            issue_date=self.env.timestamp,
            metadata_uri=params.metadata_uri,
            token_id=token_id,
            title=params.title,
            description=params.description,
            status=CertificateStatus.ACTIVE,
            expiry_date=params.expiry_date,
        )
        self.storage.set_certificate(params.certificate_id, metadata)
        self.storage.add_user_certificate(params.student, params.certificate_id)
        events.emit_certificate_minted(
            self.env, params.certificate_id, metadata, params.student, issuer, token_id
        )

    def is_certificate_expired(self, certificate_id: bytes) -> bool:
        """True if the certificate is past its expiry date or does not exist.

        An expiry date of zero means the certificate never expires.
        """
        metadata = self.storage.get_certificate(certificate_id)
        if metadata is None:
            return True
        if metadata.expiry_date == 0:
            return False
        return metadata.expiry_date < self.env.timestamp

    def _load(self, certificate_id: bytes) -> CertificateMetadata:
        metadata = self.storage.get_certificate(certificate_id)
        if metadata is None:
            raise CertificateError(CertificateErrorCode.CERTIFICATE_NOT_FOUND)
        return metadata

    def verify_certificate(self, certificate_id: bytes) -> CertificateMetadata:
        """Return the metadata of an active, unexpired certificate."""
        metadata = self._load(certificate_id)
        if metadata.status is CertificateStatus.REVOKED:
            raise CertificateError(CertificateErrorCode.CERTIFICATE_REVOKED)
        if self.is_certificate_expired(certificate_id):
            raise CertificateError(CertificateErrorCode.CERTIFICATE_EXPIRED)
        return metadata

    def revoke_certificate(self, revoker: str, certificate_id: bytes) -> None:
        """Mark a certificate revoked; the revoker needs the Revoke permission."""
        self._require_initialized()
        if not self.has_permission(revoker, Permission.REVOKE):
            raise CertificateError(CertificateErrorCode.UNAUTHORIZED)
        metadata = self._load(certificate_id)
        from dataclasses import replace

        metadata = replace(metadata, status=CertificateStatus.REVOKED)
        self.storage.set_certificate(certificate_id, metadata)
        events.emit_certificate_revoked(
            self.env, certificate_id, metadata, revoker, self.env.timestamp
        )

    def track_certificates(self, user_address: str) -> list[bytes]:
        return self.storage.get_user_certificates(user_address)

    def add_user_certificate(self, user_address: str, certificate_id: bytes) -> None:
        if not self.storage.has_certificate(certificate_id):
            raise CertificateError(CertificateErrorCode.CERTIFICATE_NOT_FOUND)
        self.storage.add_user_certificate(user_address, certificate_id)

    def is_valid_certificate(self, certificate_id: bytes) -> tuple[bool, CertificateMetadata]:
        """Return whether the certificate is active and unexpired, with its metadata."""
        metadata = self._load(certificate_id)
        is_valid = (
            metadata.status is CertificateStatus.ACTIVE
            and not self.is_certificate_expired(certificate_id)
        )
        return is_valid, metadata

    def update_certificate_uri(self, updater: str, certificate_id: bytes, new_uri: str) -> None:
        """Change a certificate's metadata URI; only its issuer or the admin may."""
        self._require_initialized()
        self.env.require_auth(updater)
        if not new_uri:
            raise CertificateError(CertificateErrorCode.INVALID_URI)
        metadata = self._load(certificate_id)
        admin = self.storage.get_admin()
        if updater != metadata.instructor_id and updater != admin:
            raise CertificateError(CertificateErrorCode.UNAUTHORIZED)

        old_uri = metadata.metadata_uri
        entry = MetadataUpdateEntry(
            updater=updater,
            timestamp=self.env.timestamp,
            old_uri=old_uri,
            new_uri=new_uri,
        )
        self.storage.add_metadata_history(certificate_id, entry)
        from dataclasses import replace

        self.storage.set_certificate(certificate_id, replace(metadata, metadata_uri=new_uri))
        events.emit_metadata_updated(self.env, certificate_id, updater, old_uri, new_uri)

    def get_metadata_history(self, certificate_id: bytes) -> list[MetadataUpdateEntry]:
        return self.storage.get_metadata_history(certificate_id)