"""Custom exceptions for the banking ledger."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class AccountNotFoundError(BankError):
    """Raised when an account cannot be found."""
    pass


class AccountAlreadyExistsError(BankError):
    """Raised when registering an account whose number is already taken."""
    pass


class InsufficientBalanceError(BankError):
    """Raised when an account has insufficient balance for a withdrawal."""
    pass


class OverdraftLimitExceededError(InsufficientBalanceError):
    """Raised when a checking withdrawal would go past the overdraft limit."""
    pass


class InvalidAmountError(BankError):
    """Raised when an invalid amount is provided (e.g., negative amount)."""
    pass
