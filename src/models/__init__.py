"""Data models for the banking ledger."""

from .account import Account, CheckingAccount, SavingsAccount
from .exceptions import (
    BankError,
    AccountNotFoundError,
    AccountAlreadyExistsError,
    InsufficientBalanceError,
    OverdraftLimitExceededError,
    InvalidAmountError,
)
from .results import (
    AccountSummary,
    InterestResult,
    OperationResult,
    OperationStatus,
    TransferResult,
)

__all__ = [
    "Account",
    "SavingsAccount",
    "CheckingAccount",
    "AccountSummary",
    "InterestResult",
    "OperationResult",
    "OperationStatus",
    "TransferResult",
    "BankError",
    "AccountNotFoundError",
    "AccountAlreadyExistsError",
    "InsufficientBalanceError",
    "OverdraftLimitExceededError",
    "InvalidAmountError",
]
