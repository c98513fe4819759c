import dataclasses

import pytest

from coursechain.certificate_types import (
    CertificateError,
    CertificateErrorCode,
    CertificateMetadata,
    CertificateStatus,
    MintCertificateParams,
    Permission,
    Role,
)


def _cert_id(n):
    return n.to_bytes(4, "big") + bytes(28)


@pytest.mark.parametrize(
    "role, issue, revoke",
    [
        (Role(can_issue=True, can_revoke=False), True, False),
        (Role(can_issue=False, can_revoke=True), False, True),
        (Role(can_issue=True, can_revoke=True), True, True),
        (Role(can_issue=False, can_revoke=False), False, False),
    ],
)
def test_role_has(role, issue, revoke):
    assert role.has(Permission.ISSUE) is issue
    assert role.has(Permission.REVOKE) is revoke


@pytest.mark.parametrize(
    "number, code",
    [
        (1, CertificateErrorCode.ALREADY_INITIALIZED),
        (11, CertificateErrorCode.ROLE_NOT_FOUND),
        (13, CertificateErrorCode.INVALID_URI),
    ],
)
def test_error_codes_match_contract_values(number, code):
    assert CertificateError(number).code is code


def test_certificate_error_carries_code():
    with pytest.raises(CertificateError) as info:
        raise CertificateError(CertificateErrorCode.CERTIFICATE_REVOKED)
    assert info.value.code is CertificateErrorCode.CERTIFICATE_REVOKED
    assert info.value == CertificateError(CertificateErrorCode.CERTIFICATE_REVOKED)
    assert info.value != CertificateError(CertificateErrorCode.CERTIFICATE_EXPIRED)


def test_error_from_integer_code():
    assert CertificateError(4).code is CertificateErrorCode.NOT_INITIALIZED


def test_mint_params_reject_short_id():
    with pytest.raises(ValueError):
        MintCertificateParams(b"\x01", "CS101", "student", "T", "D", "ipfs://x", 0)


def test_metadata_replace_keeps_other_fields():
    metadata = CertificateMetadata(
        course_id="CS101",
        student_id="student",
        instructor_id="issuer",
        issue_date=0,
        metadata_uri="ipfs://certificate-metadata-uri",
        token_id=_cert_id(1),
        title="Intro to Computer Science",
        description="Fundamentals of Computer Science",
        status=CertificateStatus.ACTIVE,
        expiry_date=0,
    )
    revoked = dataclasses.replace(metadata, status=CertificateStatus.REVOKED)
    assert revoked.status is CertificateStatus.REVOKED
    assert metadata.status is CertificateStatus.ACTIVE
    assert dataclasses.replace(revoked, status=CertificateStatus.ACTIVE) == metadata