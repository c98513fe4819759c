from coursechain import certificate_events as events
from coursechain.certificate_types import CertificateMetadata, CertificateStatus, Role
from coursechain.env import Env, Event


def _cert_id(n):
    return n.to_bytes(4, "big") + bytes(28)


def _metadata(env):
    return CertificateMetadata(
        course_id="CS101",
        student_id=env.generate_address(),
        instructor_id=env.generate_address(),
        issue_date=env.timestamp,
        metadata_uri="ipfs://certificate-metadata-uri",
        token_id=_cert_id(1),
        title="Intro to Computer Science",
        description="Fundamentals of Computer Science",
        status=CertificateStatus.ACTIVE,
        expiry_date=0,
    )


def test_contract_initialized():
    env = Env()
    admin = env.generate_address()
    events.emit_contract_initialized(env, admin)
    assert env.events == [Event(("contract_initialized",), admin)]


def test_role_events():
    env = Env()
    user = env.generate_address()
    events.emit_role_added(env, user, Role(can_issue=True, can_revoke=False))
    events.emit_role_updated(env, user, Role(can_issue=False, can_revoke=True))
    events.emit_role_removed(env, user)
    assert env.events == [
        Event(("role_added", user), (True, False)),
        Event(("role_updated", user), (False, True)),
        Event(("role_removed", user), ()),
    ]


def test_certificate_minted():
    env = Env()
    metadata = _metadata(env)
    cert_id = _cert_id(1)
    events.emit_certificate_minted(
        env, cert_id, metadata, metadata.student_id, metadata.instructor_id, cert_id
    )
    assert env.events == [
        Event(
            ("nft_certificate_minted", cert_id),
            (metadata, metadata.student_id, metadata.instructor_id, cert_id),
        )
    ]


def test_certificate_revoked():
    env = Env()
    metadata = _metadata(env)
    revoker = env.generate_address()
    events.emit_certificate_revoked(env, _cert_id(1), metadata, revoker, 2000)
    assert env.events == [
        Event(("nft_certificate_revoked", _cert_id(1)), (metadata, revoker, 2000))
    ]


def test_certificate_transferred():
    env = Env()
    sender, receiver = env.generate_address(), env.generate_address()
    events.emit_certificate_transferred(env, _cert_id(2), sender, receiver)
    assert env.events == [
        Event(("certificate_transferred", _cert_id(2)), (sender, receiver))
    ]


def test_metadata_updated_uses_ledger_time():
    env = Env(timestamp=2000)
    updater = env.generate_address()
    events.emit_metadata_updated(
        env, _cert_id(1), updater, "ipfs://original-metadata", "ipfs://updated-metadata-v1"
    )
    assert env.events == [
        Event(
            ("metadata_updated", _cert_id(1)),
            (updater, "ipfs://original-metadata", "ipfs://updated-metadata-v1", env.timestamp),
        )
    ]