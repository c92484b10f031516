"""Bank service for business logic layer."""

import logging
from threading import RLock

from src.models.account import Account, CheckingAccount, SavingsAccount
from src.models.money import ZERO, as_decimal
from src.models.results import (
    AccountSummary,
    InterestResult,
    OperationResult,
    OperationStatus,
    TransferResult,
)
from src.repositories.account_repo import AccountRepository

logger = logging.getLogger(__name__)


class BankService:
    """Service layer for banking operations.

    The service owns the account registry and orchestrates operations that
    span accounts. Business outcomes (unknown account, insufficient funds)
    come back as result values; only contract violations such as a
    duplicate account number or a negative amount raise.
    """

    def __init__(self, account_repo: AccountRepository | None = None):
        """
        Initialize the BankService with a repository.

        Args:
            account_repo: Repository for account data access (a new empty one by default)
        """
        self._account_repo = account_repo if account_repo is not None else AccountRepository()
        self._lock = RLock()

    def add_account(self, account: Account) -> Account:
        """
        Register an existing account object with the bank.

        Args:
            account: The account to register

        Returns:
            The registered account

        Raises:
            AccountAlreadyExistsError: If the account number is already taken
        """
        with self._lock:
            self._account_repo.create(account)
        logger.info("Opened %s account %s for %s", account.kind, account.account_no, account.owner)
        return account

    def create_savings_account(
        self, account_no: str, owner: str, initial_balance, interest_rate
    ) -> SavingsAccount:
        """
        Open a savings account.

        Args:
            account_no: Unique account number
            owner: The account holder's name
            initial_balance: Opening balance (must not be negative)
            interest_rate: Fractional rate, e.g. 0.05 for 5%

        Returns:
            The created SavingsAccount

        Raises:
            AccountAlreadyExistsError: If the account number is already taken
            InvalidAmountError: If the balance or rate is negative
        """
        account = SavingsAccount(account_no, owner, initial_balance, interest_rate)
        return self.add_account(account)

    def create_checking_account(
        self, account_no: str, owner: str, initial_balance, overdraft_limit
    ) -> CheckingAccount:
        """
        Open a checking account.

        Args:
            account_no: Unique account number
            owner: The account holder's name
            initial_balance: Opening balance (may be negative down to -overdraft_limit)
            overdraft_limit: How far below zero the balance may go

        Returns:
            The created CheckingAccount

        Raises:
            AccountAlreadyExistsError: If the account number is already taken
            InvalidAmountError: If the limit is negative or the balance is below it
        """
        account = CheckingAccount(account_no, owner, initial_balance, overdraft_limit)
        return self.add_account(account)

    def find_account(self, account_no: str) -> Account | None:
        """Return the account with this number, or None."""
        return self._account_repo.find_by_account_no(account_no)

    def list_accounts(self) -> list[AccountSummary]:
        """
        Snapshot every account in the order it was opened.

        Returns:
            A list of AccountSummary records
        """
        with self._lock:
            return [
                AccountSummary(
                    owner=account.owner,
                    account_no=account.account_no,
                    balance=account.balance,
                    kind=account.kind,
                )
                for account in self._account_repo.find_all()
            ]

    def deposit(self, account_no: str, amount) -> OperationResult:
        """
        Deposit funds into an account.

        Args:
            account_no: The account to deposit to
            amount: The amount to deposit (must not be negative)

        Returns:
            OperationResult with status SUCCESS or ACCOUNT_NOT_FOUND

        Raises:
            InvalidAmountError: If the amount is negative
        """
        amount = as_decimal(amount)
        with self._lock:
            account = self._account_repo.find_by_account_no(account_no)
            if account is None:
                logger.warning("Deposit to unknown account %s", account_no)
                return OperationResult(OperationStatus.ACCOUNT_NOT_FOUND, account_no, amount)
            balance = account.deposit(amount)
        return OperationResult(OperationStatus.SUCCESS, account_no, amount, balance)

    def withdraw(self, account_no: str, amount) -> OperationResult:
        """
        Withdraw funds from an account.

        The account's own withdrawal policy decides whether the amount can
        be covered, so checking accounts may dip into their overdraft.

        Args:
            account_no: The account to withdraw from
            amount: The amount to withdraw (must not be negative)

        Returns:
            OperationResult carrying the withdrawal status and resulting balance

        Raises:
            InvalidAmountError: If the amount is negative
        """
        amount = as_decimal(amount)
        with self._lock:
            account = self._account_repo.find_by_account_no(account_no)
            if account is None:
                logger.warning("Withdrawal from unknown account %s", account_no)
                return OperationResult(OperationStatus.ACCOUNT_NOT_FOUND, account_no, amount)
            status = account.withdraw(amount)
            return OperationResult(status, account_no, amount, account.balance)

    def apply_interest(self, account_no: str) -> InterestResult:
        """
        Apply interest to an account according to its kind.

        Args:
            account_no: The account to credit

        Returns:
            InterestResult; ``accrued`` is False for accounts that earn no interest
        """
        with self._lock:
            account = self._account_repo.find_by_account_no(account_no)
            if account is None:
                logger.warning("Interest requested for unknown account %s", account_no)
                return InterestResult(OperationStatus.ACCOUNT_NOT_FOUND, account_no, ZERO)
            return account.apply_interest()

    def transfer(self, from_account_no: str, to_account_no: str, amount) -> TransferResult:
        """
        Transfer funds from one account to another.

        Both accounts must exist before anything is touched. The source's
        withdrawal policy decides the outcome; the destination is credited
        only when the withdrawal succeeded. Transferring to the same account
        withdraws and re-deposits, leaving the balance unchanged.

        Args:
            from_account_no: The account to debit
            to_account_no: The account to credit
            amount: The amount to transfer (must not be negative)

        Returns:
            TransferResult with status SUCCESS, ACCOUNT_NOT_FOUND, or the
            source account's withdrawal failure

        Raises:
            InvalidAmountError: If the amount is negative
        """
        amount = as_decimal(amount)
        with self._lock:
            source = self._account_repo.find_by_account_no(from_account_no)
            destination = self._account_repo.find_by_account_no(to_account_no)
            if source is None or destination is None:
                logger.warning(
                    "Transfer %s -> %s rejected: account not found", from_account_no, to_account_no
                )
                return TransferResult(
                    OperationStatus.ACCOUNT_NOT_FOUND, from_account_no, to_account_no, amount
                )

            status = source.withdraw(amount)
            if not status.ok:
                logger.warning(
                    "Transfer of %s from %s to %s failed: %s",
                    amount, from_account_no, to_account_no, status.value,
                )
                return TransferResult(status, from_account_no, to_account_no, amount)

            destination.deposit(amount)
        logger.info("Transferred %s from %s to %s", amount, from_account_no, to_account_no)
        return TransferResult(OperationStatus.SUCCESS, from_account_no, to_account_no, amount)
