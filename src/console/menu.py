"""Console menu for the banking ledger.

The menu only reads input, calls ``BankService`` and renders what comes
back. Input and output functions are injectable so a session can be
scripted.
"""

import logging
from decimal import Decimal

from tabulate import tabulate

from config.settings import Settings
from src.models.exceptions import BankError
from src.models.money import parse_amount
from src.models.results import OperationStatus
from src.services.bank_service import BankService

logger = logging.getLogger(__name__)

MENU = """
=== BANK MENU ===
1. Create savings account
2. Create checking account
3. Deposit
4. Withdraw
5. Apply interest
6. List accounts
7. Transfer money
8. Exit"""

FAILURE_MESSAGES = {
    OperationStatus.INSUFFICIENT_FUNDS: "Insufficient funds.",
    OperationStatus.OVERDRAFT_LIMIT_EXCEEDED: "Overdraft limit exceeded.",
    OperationStatus.ACCOUNT_NOT_FOUND: "Account not found.",
}


class BankMenu:
    def __init__(self, bank: BankService, settings: Settings | None = None, read=None, write=None):
        self.bank = bank
        self.settings = settings or Settings()
        self._read = read or input
        self._write = write or print
        self._running = False
        self._commands = {
            '1': self.create_savings,
            '2': self.create_checking,
            '3': self.deposit,
            '4': self.withdraw,
            '5': self.apply_interest,
            '6': self.list_accounts,
            '7': self.transfer,
            '8': self.exit,
        }

    # ---------- formatting ----------
    def money(self, amount: Decimal) -> str:
        places = self.settings.display_places
        sign = '-' if amount < 0 else ''
        return f"{sign}{self.settings.currency_symbol}{abs(amount):,.{places}f}"

    @staticmethod
    def percent(rate: Decimal) -> str:
        return f"{rate:.2%}"

    # ---------- input ----------
    def _ask(self, prompt: str) -> str:
        return self._read(prompt).strip()

    def read_amount(self, prompt: str) -> Decimal:
        """Prompt until the input parses as a number."""
        while True:
            value = parse_amount(self._read(prompt))
            if value is not None:
                return value
            self._write("Invalid input. Please enter a valid number (e.g. 1000.50).")

    # ---------- commands ----------
    def create_savings(self) -> None:
        account_no = self._ask("Account number: ")
        owner = self._ask("Owner name: ")
        balance = self.read_amount("Initial balance: ")
        rate = self.read_amount("Interest rate (e.g. 0.05 = 5%): ")
        self.bank.create_savings_account(account_no, owner, balance, rate)
        self._write("Savings account created successfully.")

    def create_checking(self) -> None:
        account_no = self._ask("Account number: ")
        owner = self._ask("Owner name: ")
        balance = self.read_amount("Initial balance: ")
        limit = self.read_amount("Overdraft limit: ")
        self.bank.create_checking_account(account_no, owner, balance, limit)
        self._write("Checking account created successfully.")

    def deposit(self) -> None:
        account_no = self._ask("Account number: ")
        if self.bank.find_account(account_no) is None:
            self._write(FAILURE_MESSAGES[OperationStatus.ACCOUNT_NOT_FOUND])
            return
        amount = self.read_amount("Amount to deposit: ")
        result = self.bank.deposit(account_no, amount)
        if result.ok:
            self._write(f"Deposited {self.money(amount)}. New balance: {self.money(result.balance)}")
        else:
            self._write(FAILURE_MESSAGES[result.status])

    def withdraw(self) -> None:
        account_no = self._ask("Account number: ")
        if self.bank.find_account(account_no) is None:
            self._write(FAILURE_MESSAGES[OperationStatus.ACCOUNT_NOT_FOUND])
            return
        amount = self.read_amount("Amount to withdraw: ")
        result = self.bank.withdraw(account_no, amount)
        if not result.ok:
            self._write(FAILURE_MESSAGES[result.status])
        elif result.balance < 0:
            self._write(f"Withdrew {self.money(amount)} (overdraft). New balance: {self.money(result.balance)}")
        else:
            self._write(f"Withdrew {self.money(amount)}. New balance: {self.money(result.balance)}")

    def apply_interest(self) -> None:
        account_no = self._ask("Account number: ")
        result = self.bank.apply_interest(account_no)
        if not result.ok:
            self._write(FAILURE_MESSAGES[result.status])
        elif result.accrued:
            self._write(
                f"Interest applied to savings account ({self.percent(result.rate)}): "
                f"{self.money(result.interest)}. New balance: {self.money(result.balance)}"
            )
        else:
            self._write("Checking accounts do not accrue interest.")

    def list_accounts(self) -> None:
        summaries = self.bank.list_accounts()
        self._write("\n=== Accounts ===")
        if not summaries:
            self._write("No accounts yet.")
            return
        header = ['Owner', 'Account', 'Type', 'Balance']
        rows = [[s.owner, s.account_no, s.kind, self.money(s.balance)] for s in summaries]
        self._write(tabulate(rows, headers=header, stralign='right', numalign='right'))

    def transfer(self) -> None:
        from_no = self._ask("Source account number: ")
        to_no = self._ask("Destination account number: ")
        amount = self.read_amount("Amount to transfer: ")
        result = self.bank.transfer(from_no, to_no, amount)
        if result.ok:
            self._write(f"Transfer of {self.money(amount)} completed successfully.")
        elif result.status is OperationStatus.ACCOUNT_NOT_FOUND:
            self._write("One of the accounts does not exist.")
        else:
            self._write(f"The transfer could not be completed ({FAILURE_MESSAGES[result.status].rstrip('.').lower()}).")

    def exit(self) -> None:
        self._running = False
        self._write("Thank you for using the banking system.")

    # ---------- loop ----------
    def handle(self, choice: str) -> None:
        """Run one menu command, reporting errors raised by the ledger."""
        command = self._commands.get(choice.strip())
        if command is None:
            self._write("Invalid option. Please try again.")
            return
        try:
            command()
        except BankError as err:
            logger.warning("Command %s failed: %s", choice, err)
            self._write(str(err))

    def run(self) -> None:
        self._running = True
        while self._running:
            self._write(MENU)
            try:
                self.handle(self._read("Select an option: "))
            except (EOFError, KeyboardInterrupt):
                self._write("")
                self._running = False
