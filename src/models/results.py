"""Structured results returned by ledger operations."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from .exceptions import (
    AccountNotFoundError,
    InsufficientBalanceError,
    OverdraftLimitExceededError,
)


class OperationStatus(str, Enum):
    """Outcome of a deposit, withdrawal, interest or transfer operation."""

    SUCCESS = "success"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    OVERDRAFT_LIMIT_EXCEEDED = "overdraft_limit_exceeded"
    ACCOUNT_NOT_FOUND = "account_not_found"

    @property
    def ok(self) -> bool:
        return self is OperationStatus.SUCCESS


_STATUS_ERRORS = {
    OperationStatus.INSUFFICIENT_FUNDS: InsufficientBalanceError,
    OperationStatus.OVERDRAFT_LIMIT_EXCEEDED: OverdraftLimitExceededError,
    OperationStatus.ACCOUNT_NOT_FOUND: AccountNotFoundError,
}


@dataclass(frozen=True)
class OperationResult:
    """Result of a single-account deposit or withdrawal."""

    status: OperationStatus
    account_no: str
    amount: Decimal
    balance: Decimal | None = None

    @property
    def ok(self) -> bool:
        return self.status.ok

    def raise_for_status(self) -> None:
        """
        Raise the matching BankError if the operation failed.

        Raises:
            AccountNotFoundError: If the account did not exist
            InsufficientBalanceError: If the account could not cover the amount
            OverdraftLimitExceededError: If a checking overdraft would be exceeded
        """
        if self.ok:
            return
        error = _STATUS_ERRORS[self.status]
        raise error(f"{self.status.value} for account {self.account_no} ({self.amount})")


@dataclass(frozen=True)
class InterestResult:
    """Result of applying interest to an account."""

    status: OperationStatus
    account_no: str
    interest: Decimal
    balance: Decimal | None = None
    accrued: bool = False
    rate: Decimal | None = None

    @property
    def ok(self) -> bool:
        return self.status.ok


@dataclass(frozen=True)
class TransferResult:
    """Result of moving money between two accounts."""

    status: OperationStatus
    from_account: str
    to_account: str
    amount: Decimal

    @property
    def ok(self) -> bool:
        return self.status.ok

    def raise_for_status(self) -> None:
        """Raise the matching BankError if the transfer failed."""
        if self.ok:
            return
        error = _STATUS_ERRORS[self.status]
        raise error(
            f"Transfer of {self.amount} from {self.from_account} "
            f"to {self.to_account} failed: {self.status.value}"
        )


@dataclass(frozen=True)
class AccountSummary:
    """Read-only snapshot of an account used for listings."""

    owner: str
    account_no: str
    balance: Decimal
    kind: str
