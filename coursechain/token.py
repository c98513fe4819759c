"""Minimal fungible token: admin minting, balances and transfers."""

from __future__ import annotations

from enum import IntEnum

from .env import Env

I128_MAX = 2**127 - 1


class TokenErrorCode(IntEnum):
    ALREADY_INITIALIZED = 1
    NOT_INITIALIZED = 2
    INVALID_AMOUNT = 3
    INSUFFICIENT_BALANCE = 4


_MESSAGES = {
    TokenErrorCode.ALREADY_INITIALIZED: "contract has already been initialized",
    TokenErrorCode.NOT_INITIALIZED: "contract has not been initialized",
    TokenErrorCode.INVALID_AMOUNT: "amount must be positive",
    TokenErrorCode.INSUFFICIENT_BALANCE: "insufficient balance",
}


class TokenError(Exception):
    """Error raised by the token contract, carrying a numeric code."""

    def __init__(self, code: TokenErrorCode) -> None:
        self.code = TokenErrorCode(code)
        super().__init__(_MESSAGES[self.code])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenError):
            return self.code == other.code
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.code)


class TokenContract:
    """Keeps a balance per address; only the admin may mint."""

    def __init__(self, env: Env | None = None) -> None:
        self.env = env if env is not None else Env()
        self._admin: str | None = None
        self._balances: dict[str, int] = {}

    def _set_balance(self, address: str, amount: int) -> None:
        if amount > I128_MAX:
            raise OverflowError("balance exceeds the 128-bit limit")
        self._balances[address] = amount

    def initialize(self, admin: str) -> None:
        if self._admin is not None:
            raise TokenError(TokenErrorCode.ALREADY_INITIALIZED)
        self.env.require_auth(admin)
        self._admin = admin

    def mint(self, to: str, amount: int) -> None:
        """Create ``amount`` new tokens for ``to``; requires the admin's authorisation."""
        if self._admin is None:
            raise TokenError(TokenErrorCode.NOT_INITIALIZED)
        self.env.require_auth(self._admin)
        if amount <= 0:
            raise TokenError(TokenErrorCode.INVALID_AMOUNT)
        self._set_balance(to, self.balance(to) + amount)

    def balance(self, address: str) -> int:
        return self._balances.get(address, 0)

    def transfer(self, from_: str, to: str, amount: int) -> None:
        """Move ``amount`` tokens; requires the sender's authorisation."""
        self.env.require_auth(from_)
        if amount <= 0:
            raise TokenError(TokenErrorCode.INVALID_AMOUNT)
        from_balance = self.balance(from_)
        if from_balance < amount:
            raise TokenError(TokenErrorCode.INSUFFICIENT_BALANCE)
        self._set_balance(from_, from_balance - amount)
        self._set_balance(to, self.balance(to) + amount)