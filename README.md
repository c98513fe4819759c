# coursechain

This package holds the ledgers of a learning platform in memory. It has
ledgers for course progress, course-completion certificates, batch-issued
certificates and a simple reward token. Each contract works inside an `Env`.
The `Env` supplies addresses, authorization checks, a ledger timestamp and an
event log. Contracts can share one `Env`, or each can create its own.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `coursechain.env`
  - `Env(timestamp=0)` holds the ledger time in `timestamp` and the list of
    published `Event`s in `events`. It also keeps, in `auths`, every address
    whose authorization was checked successfully.
  - `generate_address()` returns a fresh address.
  - `require_auth(address)` raises `AuthorizationError` unless the address is
    authorized.
  - No address is authorized until you call `mock_all_auths()` or
    `mock_auths(addresses)`. The latter replaces any earlier mock.
- `coursechain.certificate_contract`
  - `CertificateContract` manages roles with `grant_role`, `update_role`,
    `revoke_role`, `get_role` and `has_permission`, using `Role` and
    `Permission` from `coursechain.certificate_types`. Each of the three
    changing calls needs the admin's authorization.
  - A user with the issue permission mints certificates with
    `mint_certificate(issuer, MintCertificateParams(...))`. Certificate ids are
    32-byte `bytes` values.
  - Other calls: `verify_certificate`, `is_valid_certificate`,
    `is_certificate_expired` (an expiry date of 0 never expires),
    `revoke_certificate`, `track_certificates` and `add_user_certificate`.
  - The issuer or the admin can change a certificate's metadata URI with
    `update_certificate_uri`. The changes are listed by
    `get_metadata_history`.
  - Failures raise `CertificateError`, whose `code` is a
    `CertificateErrorCode`.
- `coursechain.batch_contract`
  - `BatchCertificateContract` lets the admin appoint and remove issuers with
    `add_issuer` and `remove_issuer`.
  - Issuers mint `CertificateData` one at a time with
    `mint_single_certificate`. They can also mint in batches, up to the
    maximum size given to `initialize`, with `mint_batch_certificates`. That
    call returns one `MintResult` per certificate. A failed certificate has
    its `BatchErrorCode` in `error` and does not stop the batch.
  - `revoke_certificate` ends a revocable certificate's validity at the
    current ledger time.
  - Failures raise `BatchError`.
- `coursechain.progress`
  - `ProgressContract` registers courses with a module count.
  - It records per-user completion of modules, numbered from 1. It rejects
    completing a module twice and un-completing one.
  - `get_completion_percentage` reports a whole-number percentage.
  - Failures raise `ProgressError`.
- `coursechain.token`
  - `TokenContract` supports admin-only `mint`, `balance` and `transfer`.
  - Failures raise `TokenError`.
- `coursechain.courses`
  - `Course`, `Module`, `ModuleStatus` and `CourseRegistry` are a small model
    of course completion.
  - `Course.mark_course_completed()` succeeds only when every module is
    completed. It prints what happened and returns whether it succeeded.

## Example

```python
from coursechain.env import Env
from coursechain.progress import ProgressContract

env = Env()
env.mock_all_auths()
progress = ProgressContract(env)
admin = env.generate_address()
student = env.generate_address()

progress.initialize(admin)
progress.add_course("RUST101", 10)
progress.update_progress(student, "RUST101", 1, True)
progress.update_progress(student, "RUST101", 2, True)
print(progress.get_completion_percentage(student, "RUST101"))  # 20
```

## Demo

```
coursechain-demo
```

The demo registers a course that has one unfinished module and tries to mark
it complete, which fails. It then finishes the last module and tries again,
which succeeds. Each step prints a message.

## What it does not do

- All state lives in Python objects for the life of the process. Nothing is
  saved to disk or to a database.
- There is no network access and no server.
- Addresses are plain strings made by `Env.generate_address()`, not keys.
- Authorization is whatever the `Env` has been told to grant.
- Events are only appended to `Env.events`.