"""Instance storage of the certificate contract."""

from __future__ import annotations

from .certificate_types import (
    CertificateError,
    CertificateErrorCode,
    CertificateMetadata,
    MetadataUpdateEntry,
    Role,
)


class CertificateStorage:
    """Keeps admin, roles, certificates, ownership lists and metadata history."""

    def __init__(self) -> None:
        self._admin: str | None = None
        self._initialized = False
        self._roles: dict[str, Role] = {}
        self._certificates: dict[bytes, CertificateMetadata] = {}
        self._user_certificates: dict[str, list[bytes]] = {}
        self._metadata_history: dict[bytes, list[MetadataUpdateEntry]] = {}

    def set_admin(self, admin: str) -> None:
        self._admin = admin

    def get_admin(self) -> str:
        if self._admin is None:
            raise CertificateError(CertificateErrorCode.NOT_INITIALIZED)
        return self._admin

    def set_initialized(self) -> None:
        self._initialized = True

    def is_initialized(self) -> bool:
        return self._initialized

    def set_role(self, user: str, role: Role) -> None:
        self._roles[user] = role

    def get_role(self, user: str) -> Role | None:
        return self._roles.get(user)

    def remove_role(self, user: str) -> None:
        self._roles.pop(user, None)

    def set_certificate(self, certificate_id: bytes, metadata: CertificateMetadata) -> None:
        self._certificates[certificate_id] = metadata

    def get_certificate(self, certificate_id: bytes) -> CertificateMetadata | None:
        return self._certificates.get(certificate_id)

    def has_certificate(self, certificate_id: bytes) -> bool:
        return certificate_id in self._certificates

    def get_user_certificates(self, user: str) -> list[bytes]:
        return list(self._user_certificates.get(user, ()))

    def set_user_certificates(self, user: str, certificate_ids: list[bytes]) -> None:
        self._user_certificates[user] = list(certificate_ids)

    def add_user_certificate(self, user: str, certificate_id: bytes) -> None:
        """Append a certificate to the user's list unless it is already there."""
        certificates = self.get_user_certificates(user)
        if certificate_id in certificates:
            return
        certificates.append(certificate_id)
        self.set_user_certificates(user, certificates)

    def remove_user_certificate(self, user: str, certificate_id: bytes) -> None:
        """Remove the first occurrence of a certificate from the user's list."""
        certificates = self.get_user_certificates(user)
        if certificate_id in certificates:
            certificates.remove(certificate_id)
            self.set_user_certificates(user, certificates)

    def get_metadata_history(self, certificate_id: bytes) -> list[MetadataUpdateEntry]:
        return list(self._metadata_history.get(certificate_id, ()))

    def add_metadata_history(self, certificate_id: bytes, entry: MetadataUpdateEntry) -> None:
        history = self.get_metadata_history(certificate_id)
        history.append(entry)
        self._metadata_history[certificate_id] = history