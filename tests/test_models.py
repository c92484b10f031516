"""Tests for data models and exceptions."""

from decimal import Decimal

import pytest

from src.models.account import Account, CheckingAccount, SavingsAccount
from src.models.exceptions import (
    BankError,
    AccountNotFoundError,
    AccountAlreadyExistsError,
    InsufficientBalanceError,
    OverdraftLimitExceededError,
    InvalidAmountError,
)
from src.models.results import OperationResult, OperationStatus, TransferResult


def test_account_is_abstract():
    """Account cannot be instantiated without an interest policy."""
    with pytest.raises(TypeError):
        Account("A1", "Ana", Decimal("10"))


def test_savings_account_creation():
    """Test creating a SavingsAccount and verifying its fields."""
    account = SavingsAccount("S1", "Ana", "1000", "0.05")

    assert account.account_no == "S1"
    assert account.owner == "Ana"
    assert account.balance == Decimal("1000")
    assert account.interest_rate == Decimal("0.05")
    assert account.kind == "savings"


def test_checking_account_creation():
    """Test creating a CheckingAccount and verifying its fields."""
    account = CheckingAccount("C1", "Luis", 0, 200)

    assert account.account_no == "C1"
    assert account.owner == "Luis"
    assert account.balance == Decimal("0")
    assert account.overdraft_limit == Decimal("200")
    assert account.available_funds == Decimal("200")
    assert account.kind == "checking"


def test_identity_is_read_only():
    """account_no, owner and balance cannot be reassigned."""
    account = SavingsAccount("S1", "Ana", 100, 0)

    with pytest.raises(AttributeError):
        account.account_no = "S2"
    with pytest.raises(AttributeError):
        account.owner = "Bob"
    with pytest.raises(AttributeError):
        account.balance = Decimal("1000000")


def test_savings_rejects_negative_opening_values():
    """Negative opening balance or rate is an invalid amount."""
    with pytest.raises(InvalidAmountError):
        SavingsAccount("S1", "Ana", "-1", "0.05")
    with pytest.raises(InvalidAmountError):
        SavingsAccount("S1", "Ana", "100", "-0.01")


def test_checking_opening_balance_bounded_by_overdraft():
    """A checking account may open overdrawn, but not past its limit."""
    account = CheckingAccount("C1", "Luis", "-200", "200")
    assert account.balance == Decimal("-200")

    with pytest.raises(InvalidAmountError):
        CheckingAccount("C2", "Luis", "-200.01", "200")
    with pytest.raises(InvalidAmountError):
        CheckingAccount("C3", "Luis", "0", "-5")


def test_deposit_adds_to_balance():
    """Deposit returns and stores balance + amount."""
    account = SavingsAccount("S1", "Ana", "10.10", 0)

    assert account.deposit(Decimal("0.20")) == Decimal("10.30")
    assert account.balance == Decimal("10.30")


def test_deposit_float_goes_through_str():
    """Floats are converted via their repr, not their binary value."""
    account = CheckingAccount("C1", "Luis", 0, 0)
    account.deposit(0.1)
    account.deposit(0.2)

    assert account.balance == Decimal("0.3")


def test_deposit_negative_amount_rejected():
    """Negative deposits raise and leave the balance untouched."""
    account = SavingsAccount("S1", "Ana", 100, 0)

    with pytest.raises(InvalidAmountError):
        account.deposit(-5)
    assert account.balance == Decimal("100")


def test_savings_withdraw_policy():
    """Savings withdrawals succeed only up to the balance."""
    account = SavingsAccount("S1", "Ana", 100, 0)

    assert account.withdraw(100) is OperationStatus.SUCCESS
    assert account.balance == Decimal("0")
    assert account.withdraw("0.01") is OperationStatus.INSUFFICIENT_FUNDS
    assert account.balance == Decimal("0")


def test_checking_withdraw_policy():
    """Checking withdrawals may go negative down to -overdraft_limit."""
    account = CheckingAccount("C1", "Luis", 0, 200)

    assert account.withdraw(150) is OperationStatus.SUCCESS
    assert account.balance == Decimal("-150")
    assert account.withdraw(100) is OperationStatus.OVERDRAFT_LIMIT_EXCEEDED
    assert account.balance == Decimal("-150")
    assert account.withdraw(50) is OperationStatus.SUCCESS
    assert account.balance == Decimal("-200")


def test_zero_withdrawal_succeeds():
    """A zero withdrawal is a success, not a failure."""
    account = SavingsAccount("S1", "Ana", 0, 0)

    assert account.withdraw(0) is OperationStatus.SUCCESS
    assert account.balance == Decimal("0")


def test_savings_interest():
    """Interest is balance * rate and is deposited into the account."""
    account = SavingsAccount("S1", "Ana", "1000", "0.05")

    result = account.apply_interest()

    assert result.ok
    assert result.accrued is True
    assert result.interest == Decimal("50.00")
    assert result.rate == Decimal("0.05")
    assert account.balance == Decimal("1050.00")
    assert result.balance == Decimal("1050.00")


def test_checking_interest_is_noop():
    """Checking accounts never accrue interest."""
    account = CheckingAccount("C1", "Luis", "-150", "200")

    result = account.apply_interest()

    assert result.ok
    assert result.accrued is False
    assert result.interest == Decimal("0")
    assert account.balance == Decimal("-150")


def test_operation_status_ok():
    """Only SUCCESS counts as ok."""
    assert OperationStatus.SUCCESS.ok
    assert not OperationStatus.INSUFFICIENT_FUNDS.ok
    assert not OperationStatus.OVERDRAFT_LIMIT_EXCEEDED.ok
    assert not OperationStatus.ACCOUNT_NOT_FOUND.ok


def test_raise_for_status():
    """Failed results convert into the matching BankError."""
    OperationResult(OperationStatus.SUCCESS, "S1", Decimal("1")).raise_for_status()

    with pytest.raises(InsufficientBalanceError):
        OperationResult(OperationStatus.INSUFFICIENT_FUNDS, "S1", Decimal("1")).raise_for_status()
    with pytest.raises(OverdraftLimitExceededError):
        OperationResult(OperationStatus.OVERDRAFT_LIMIT_EXCEEDED, "C1", Decimal("1")).raise_for_status()
    with pytest.raises(AccountNotFoundError):
        TransferResult(OperationStatus.ACCOUNT_NOT_FOUND, "X", "Y", Decimal("1")).raise_for_status()


def test_exception_hierarchy():
    """Test that all custom exceptions inherit from BankError."""
    assert issubclass(AccountNotFoundError, BankError)
    assert issubclass(AccountAlreadyExistsError, BankError)
    assert issubclass(InsufficientBalanceError, BankError)
    assert issubclass(OverdraftLimitExceededError, InsufficientBalanceError)
    assert issubclass(InvalidAmountError, BankError)
    assert issubclass(BankError, Exception)


def test_exception_messages():
    """Test that exceptions can be raised with custom messages."""
    with pytest.raises(AccountAlreadyExistsError, match="Account S1 already exists"):
        raise AccountAlreadyExistsError("Account S1 already exists")


def test_kind_is_declared_by_each_account_type():
    """Only concrete account types carry a kind value."""
    assert "kind" not in vars(Account)
    assert Account.__annotations__["kind"] is str
    assert SavingsAccount.kind == "savings"
    assert CheckingAccount.kind == "checking"
