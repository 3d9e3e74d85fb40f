"""Finance service - transaction processors and savings account demo."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, Optional

from inventory.models.domain import Transaction
from inventory.models.dto import TransactionRecord
from inventory.repositories.exceptions import RepositoryError
from inventory.repositories.typed_repository import TypedRepository
from inventory.services.config_service import ConfigService, get_config_service
from inventory.services.exceptions import InsufficientFundsError


class TransactionProcessor(ABC):
    """Hands a transaction to a payment channel."""

    label: str = ""
    channel: str = ""

    @abstractmethod
    def process(self, transaction: Transaction) -> None:
        pass

    def _report(self, transaction: Transaction) -> None:
        print(
            f"[{self.label}] Processing ${transaction.amount:.2f} for "
            f"{transaction.category} (ID: {transaction.id})"
        )
        print(f"{self.channel} completed on {transaction.date:%Y-%m-%d}")
        print()


class BankTransferProcessor(TransactionProcessor):
    label = "BANK TRANSFER"
    channel = "Bank transfer"

    def process(self, transaction: Transaction) -> None:
        self._report(transaction)


class MobileMoneyProcessor(TransactionProcessor):
    label = "MOBILE MONEY"
    channel = "Mobile money transfer"

    def process(self, transaction: Transaction) -> None:
        self._report(transaction)


class CryptoWalletProcessor(TransactionProcessor):
    label = "CRYPTO WALLET"
    channel = "Cryptocurrency transaction"

    def process(self, transaction: Transaction) -> None:
        self._report(transaction)


PROCESSORS: Dict[str, TransactionProcessor] = {
    "bank": BankTransferProcessor(),
    "mobile": MobileMoneyProcessor(),
    "crypto": CryptoWalletProcessor(),
}


class Account:
    """Plain account; every transaction is deducted, even past zero."""

    def __init__(self, account_number: str, initial_balance: Decimal):
        self.account_number = account_number
        self._balance = Decimal(initial_balance)

    @property
    def balance(self) -> Decimal:
        return self._balance

    def apply_transaction(self, transaction: Transaction) -> Decimal:
        """Deduct the transaction amount. Returns the new balance."""
        self._balance -= transaction.amount
        print(f"Transaction applied to account {self.account_number}. New balance: ${self._balance:.2f}")
        return self._balance


class SavingsAccount(Account):
    """Account that refuses to go below zero."""

    def apply_transaction(self, transaction: Transaction) -> Decimal:
        """
        Deduct the transaction amount.

        Raises:
            InsufficientFundsError: Amount exceeds the balance; balance unchanged
        """
        if transaction.amount > self._balance:
            raise InsufficientFundsError(self.account_number, transaction.amount, self._balance)

        self._balance -= transaction.amount
        print(f"Deducted ${transaction.amount:.2f} from savings account {self.account_number}")
        print(f"Updated balance: ${self._balance:.2f}")
        return self._balance


class FinanceService:
    """
    Service for the finance demo.

    Each transaction goes through its payment processor, is applied to the
    account, and is then kept in the transaction repository.
    """

    def __init__(
        self,
        account: Optional[Account] = None,
        transactions: Optional[TypedRepository[Transaction]] = None,
        config_service: Optional[ConfigService] = None,
    ):
        self.config_service = config_service or get_config_service()
        if account is None:
            settings = self.config_service.get_finance_account()
            account = SavingsAccount(settings["accountNumber"], Decimal(settings["initialBalance"]))
        self.account = account
        self.transactions = transactions if transactions is not None else TypedRepository(TransactionRecord)

    def submit(self, transaction: Transaction, processor: TransactionProcessor) -> bool:
        """
        Process, apply and record one transaction.

        Returns:
            False if the account refused it (it is still recorded)
        """
        processor.process(transaction)
        applied = True
        try:
            self.account.apply_transaction(transaction)
        except InsufficientFundsError as e:
            print("Insufficient funds")
            print(e)
            applied = False
        print()

        self.transactions.add(transaction)
        return applied

    def total_amount(self) -> Decimal:
        """Sum of all recorded transaction amounts."""
        return sum((t.amount for t in self.transactions.get_all()), Decimal("0"))

    def print_summary(self) -> None:
        print("--- Transaction Summary ---")
        transactions = self.transactions.get_all()
        print(f"Total transactions processed: {len(transactions)}")
        for t in transactions:
            print(f"ID {t.id}: ${t.amount:.2f} ({t.category}) - {t.date:%Y-%m-%d}")
        print(f"Total amount processed: ${self.total_amount():.2f}")
        print(f"Final account balance: ${self.account.balance:.2f}")

    def run(self) -> None:
        """Submit the configured sample transactions and print a summary."""
        print("=== Finance Management System ===")
        print()
        print(
            f"Created savings account {self.account.account_number} "
            f"with initial balance: ${self.account.balance:.2f}"
        )
        print()

        print("--- Processing Transactions ---")
        now = datetime.now()
        try:
            for row in self.config_service.get_seed("transactions"):
                transaction = Transaction(
                    id=row["id"],
                    date=now - timedelta(days=row.get("daysAgo", 0)),
                    amount=Decimal(row["amount"]),
                    category=row["category"],
                )
                self.submit(transaction, PROCESSORS[row["processor"]])
        except RepositoryError as e:
            print(f"Error recording transaction: {e}")

        self.print_summary()
