"""In-memory ledger of lockable vaults and owner balances."""

from __future__ import annotations

from dataclasses import dataclass

from checked_calculator.base import BaseComponent
from checked_calculator.errors import (
    InsufficientBalanceError,
    UnknownVaultError,
    VaultExistsError,
    VaultLockedError,
)
from checked_calculator.integers import checked_u64


@dataclass(slots=True)
class Vault:
    """Balance held on behalf of a single authority."""

    authority: str
    balance: int = 0
    locked: bool = False

    @property
    def address(self) -> str:
        """Return the identifier of the vault derived from its authority."""
        return f"vault:{self.authority}"


@dataclass(frozen=True, slots=True)
class WithdrawEvent:
    """Notification emitted after a successful withdrawal."""

    amount: int
    vault_authority: str
    vault: str


class Ledger(BaseComponent):
    """Track vaults, owner balances and withdrawal notifications."""

    def __init__(self) -> None:
        """Create an empty ledger."""
        super().__init__()
        self._vaults: dict[str, Vault] = {}
        self._balances: dict[str, int] = {}
        self._events: list[WithdrawEvent] = []

    @property
    def events(self) -> tuple[WithdrawEvent, ...]:
        """Return the emitted withdrawal events in order."""
        return tuple(self._events)

    def open_vault(self, authority: str, *, deposit: int = 0) -> Vault:
        """Create the vault owned by ``authority`` with an initial balance."""
        if authority in self._vaults:
            message = f"Authority '{authority}' already owns a vault"
            raise VaultExistsError(message)
        vault = Vault(authority=authority, balance=checked_u64(deposit))
        self._vaults[authority] = vault
        self.logger.info("Vault opened", authority=authority, balance=vault.balance)
        return vault

    def vault(self, authority: str) -> Vault:
        """Return the vault owned by ``authority``."""
        try:
            return self._vaults[authority]
        except KeyError:
            message = f"No vault registered for authority '{authority}'"
            raise UnknownVaultError(message) from None

    def vault_balance(self, authority: str) -> int:
        """Return the current balance of the authority's vault."""
        return self.vault(authority).balance

    def balance_of(self, owner: str) -> int:
        """Return the balance held directly by ``owner``."""
        return self._balances.get(owner, 0)

    def lock(self, authority: str) -> None:
        """Prevent withdrawals from the authority's vault."""
        self.vault(authority).locked = True
        self.logger.info("Vault locked", authority=authority)

    def unlock(self, authority: str) -> None:
        """Allow withdrawals from the authority's vault again."""
        self.vault(authority).locked = False
        self.logger.info("Vault unlocked", authority=authority)

    def deposit(self, authority: str, amount: int) -> int:
        """Add ``amount`` to the vault and return the new balance."""
        vault = self.vault(authority)
        checked_u64(amount)
        vault.balance = checked_u64(vault.balance + amount)
        self.logger.debug("Vault deposit", authority=authority, amount=amount)
        return vault.balance

    def withdraw(self, authority: str, amount: int) -> WithdrawEvent:
        """Move ``amount`` from the vault to its authority.

        Raises:
            VaultLockedError: If the vault is locked.
            InsufficientBalanceError: If ``amount`` exceeds the vault balance.
            ArithmeticOverflowError: If either balance leaves the u64 range.

        """
        vault = self.vault(authority)
        if vault.locked:
            self.logger.warning("Withdrawal from locked vault", authority=authority)
            message = f"Vault for '{authority}' is locked"
            raise VaultLockedError(message)

        checked_u64(amount)
        if amount > vault.balance:
            self.logger.warning(
                "Withdrawal exceeds vault balance",
                authority=authority,
                amount=amount,
                balance=vault.balance,
            )
            message = (
                f"Cannot withdraw {amount} from vault holding {vault.balance}"
            )
            raise InsufficientBalanceError(message)

        # Both balances are computed before either is written.
        new_vault_balance = checked_u64(vault.balance - amount)
        new_authority_balance = checked_u64(self.balance_of(authority) + amount)
        vault.balance = new_vault_balance
        self._balances[authority] = new_authority_balance

        event = WithdrawEvent(
            amount=amount,
            vault_authority=authority,
            vault=vault.address,
        )
        self._events.append(event)
        self.logger.info("Withdrawal completed", authority=authority, amount=amount)
        return event


__all__ = ["Ledger", "Vault", "WithdrawEvent"]
