"""Data types and errors of the certificate contract."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

CERTIFICATE_ID_LENGTH = 32


def _check_id(value: bytes, name: str) -> None:
    if not isinstance(value, bytes) or len(value) != CERTIFICATE_ID_LENGTH:
        raise ValueError(f"{name} must be {CERTIFICATE_ID_LENGTH} bytes")


class CertificateStatus(Enum):
    ACTIVE = "active"
    REVOKED = "revoked"


class Permission(Enum):
    ISSUE = "issue"
    REVOKE = "revoke"


@dataclass(frozen=True)
class Role:
    """Set of permissions held by a user."""

    can_issue: bool
    can_revoke: bool

    def has(self, permission: Permission) -> bool:
        if permission is Permission.ISSUE:
            return self.can_issue
        return self.can_revoke


@dataclass(frozen=True)
class CertificateMetadata:
    course_id: str
    student_id: str
    instructor_id: str
    issue_date: int
    metadata_uri: str
    token_id: bytes
    title: str
    description: str
    status: CertificateStatus
    expiry_date: int

    def __post_init__(self) -> None:
        _check_id(self.token_id, "token_id")


@dataclass(frozen=True)
class MetadataUpdateEntry:
    """One change of a certificate's metadata URI."""

    updater: str
    timestamp: int
    old_uri: str
    new_uri: str


@dataclass(frozen=True)
class MintCertificateParams:
    certificate_id: bytes
    course_id: str
    student: str
    title: str
    description: str
    metadata_uri: str
    expiry_date: int

    def __post_init__(self) -> None:
        _check_id(self.certificate_id, "certificate_id")


class CertificateErrorCode(IntEnum):
    ALREADY_INITIALIZED = 1
    CERTIFICATE_ALREADY_EXISTS = 2
    CERTIFICATE_NOT_FOUND = 3
    NOT_INITIALIZED = 4
    UNAUTHORIZED = 5
    NOT_INSTRUCTOR = 6
    INVALID_TOKEN_ID = 7
    INVALID_METADATA = 8
    CERTIFICATE_REVOKED = 9
    TRANSFER_NOT_ALLOWED = 10
    ROLE_NOT_FOUND = 11
    CERTIFICATE_EXPIRED = 12
    INVALID_URI = 13


_MESSAGES = {
    CertificateErrorCode.ALREADY_INITIALIZED: "contract has already been initialized",
    CertificateErrorCode.CERTIFICATE_ALREADY_EXISTS: "certificate already exists",
    CertificateErrorCode.CERTIFICATE_NOT_FOUND: "certificate not found",
    CertificateErrorCode.NOT_INITIALIZED: "contract has not been initialized",
    CertificateErrorCode.UNAUTHORIZED: "user is not authorized to perform this action",
    CertificateErrorCode.NOT_INSTRUCTOR: "user is not the instructor for this certificate",
    CertificateErrorCode.INVALID_TOKEN_ID: "invalid token id",
    CertificateErrorCode.INVALID_METADATA: "invalid certificate metadata",
    CertificateErrorCode.CERTIFICATE_REVOKED: "certificate has been revoked",
    CertificateErrorCode.TRANSFER_NOT_ALLOWED: "transfer of this certificate is not allowed",
    CertificateErrorCode.ROLE_NOT_FOUND: "role not found",
    CertificateErrorCode.CERTIFICATE_EXPIRED: "certificate has expired",
    CertificateErrorCode.INVALID_URI: "invalid URI",
}


class CertificateError(Exception):
    """Error raised by the certificate contract, carrying a numeric code."""

    def __init__(self, code: CertificateErrorCode) -> None:
        self.code = CertificateErrorCode(code)
        super().__init__(_MESSAGES[self.code])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CertificateError):
            return self.code == other.code
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.code)