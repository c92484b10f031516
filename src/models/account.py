"""Account data models.

``Account`` holds the behaviour shared by every account kind. The kinds are
a closed set: ``SavingsAccount`` earns interest and may never go negative,
``CheckingAccount`` earns nothing but may overdraw up to its limit.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal

from .exceptions import InvalidAmountError
from .money import ZERO, as_decimal, ensure_non_negative, guarded_arithmetic
from .results import InterestResult, OperationStatus

logger = logging.getLogger(__name__)


class Account(ABC):
    """Represents a bank account."""

    kind: str

    def __init__(self, account_no: str, owner: str, balance):
        self._account_no = account_no
        self._owner = owner
        self._balance = as_decimal(balance)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._account_no!r}, owner={self._owner!r}, balance={self._balance})"

    @property
    def account_no(self) -> str:
        return self._account_no

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def available_funds(self) -> Decimal:
        """Largest amount a withdrawal may take right now."""
        return self._balance

    def _insufficient_status(self) -> OperationStatus:
        return OperationStatus.INSUFFICIENT_FUNDS

    def deposit(self, amount) -> Decimal:
        """
        Add funds to the account.

        Args:
            amount: The amount to deposit (must not be negative)

        Returns:
            The new balance

        Raises:
            InvalidAmountError: If the amount is negative or the new balance
                cannot be represented
        """
        amount = ensure_non_negative(amount, "Deposit amount")
        with guarded_arithmetic():
            balance = self._balance + amount
        self._balance = balance
        logger.info("Deposited %s into %s, new balance %s", amount, self._account_no, self._balance)
        return self._balance

    def withdraw(self, amount) -> OperationStatus:
        """
        Take funds out of the account.

        The withdrawal succeeds only if the amount does not exceed
        ``available_funds``; otherwise the balance is left unchanged.

        Args:
            amount: The amount to withdraw (must not be negative)

        Returns:
            OperationStatus.SUCCESS, or the account's failure status

        Raises:
            InvalidAmountError: If the amount is negative
        """
        amount = ensure_non_negative(amount, "Withdrawal amount")
        with guarded_arithmetic():
            covered = amount <= self.available_funds
            balance = self._balance - amount
        if not covered:
            status = self._insufficient_status()
            logger.warning(
                "Withdrawal of %s from %s rejected: %s (balance %s)",
                amount, self._account_no, status.value, self._balance,
            )
            return status
        self._balance = balance
        logger.info("Withdrew %s from %s, new balance %s", amount, self._account_no, self._balance)
        return OperationStatus.SUCCESS

    @abstractmethod
    def apply_interest(self) -> InterestResult:
        """Apply this account kind's interest policy."""


class SavingsAccount(Account):
    """Interest-bearing account that cannot be overdrawn."""

    kind = "savings"

    def __init__(self, account_no: str, owner: str, balance, interest_rate):
        balance = as_decimal(balance)
        if balance < ZERO:
            raise InvalidAmountError(f"Savings account cannot open with a negative balance: {balance}")
        super().__init__(account_no, owner, balance)
        self._interest_rate = ensure_non_negative(interest_rate, "Interest rate")

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    def apply_interest(self) -> InterestResult:
        with guarded_arithmetic():
            interest = self._balance * self._interest_rate
        self.deposit(interest)
        logger.info("Applied %s interest to %s: %s", self._interest_rate, self._account_no, interest)
        return InterestResult(
            status=OperationStatus.SUCCESS,
            account_no=self._account_no,
            interest=interest,
            balance=self._balance,
            accrued=True,
            rate=self._interest_rate,
        )


class CheckingAccount(Account):
    """Account that earns no interest but may overdraw up to a limit."""

    kind = "checking"

    def __init__(self, account_no: str, owner: str, balance, overdraft_limit):
        limit = ensure_non_negative(overdraft_limit, "Overdraft limit")
        balance = as_decimal(balance)
        if balance < -limit:
            raise InvalidAmountError(
                f"Opening balance {balance} is below the overdraft limit of {limit}"
            )
        super().__init__(account_no, owner, balance)
        self._overdraft_limit = limit

    @property
    def overdraft_limit(self) -> Decimal:
        return self._overdraft_limit

    @property
    def available_funds(self) -> Decimal:
        return self._balance + self._overdraft_limit

    def _insufficient_status(self) -> OperationStatus:
        return OperationStatus.OVERDRAFT_LIMIT_EXCEEDED

    def apply_interest(self) -> InterestResult:
        logger.info("Checking account %s does not accrue interest", self._account_no)
        return InterestResult(
            status=OperationStatus.SUCCESS,
            account_no=self._account_no,
            interest=ZERO,
            balance=self._balance,
            accrued=False,
        )
