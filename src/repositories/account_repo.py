"""Account repository backed by an in-memory registry."""

from src.models.account import Account
from src.models.exceptions import AccountAlreadyExistsError


class AccountRepository:
    """Repository for Account data access operations.

    Accounts are kept in insertion order so listings come back in the
    order the accounts were opened.
    """

    def __init__(self):
        """Initialize an empty repository."""
        self._accounts: dict[str, Account] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def find_by_account_no(self, account_no: str) -> Account | None:
        """
        Find an account by account number.

        Args:
            account_no: The account number to search for

        Returns:
            Account object if found, None otherwise
        """
        return self._accounts.get(account_no)

    def create(self, account: Account) -> None:
        """
        Register a new account.

        Args:
            account: The Account object to store

        Raises:
            AccountAlreadyExistsError: If an account with the same account_no already exists
        """
        if account.account_no in self._accounts:
            raise AccountAlreadyExistsError(f"Account {account.account_no} already exists")
        self._accounts[account.account_no] = account

    def exists(self, account_no: str) -> bool:
        """
        Check if an account exists.

        Args:
            account_no: The account number to check

        Returns:
            True if the account exists, False otherwise
        """
        return account_no in self._accounts

    def find_all(self) -> list[Account]:
        """Return every account in insertion order."""
        return list(self._accounts.values())
