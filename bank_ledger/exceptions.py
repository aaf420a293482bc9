"""Custom exception hierarchy for bank-ledger."""


class BankLedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class TransactionRejectedError(BankLedgerError):
    """Raised when a balance-affecting operation is refused."""


class InvalidAmountError(TransactionRejectedError):
    """Raised when an amount is not a positive number."""


class InsufficientFundsError(TransactionRejectedError):
    """Raised when a withdrawal exceeds the available balance."""


class OverdraftExceededError(InsufficientFundsError):
    """Raised when a withdrawal exceeds balance plus the overdraft limit."""


class AuthenticationError(BankLedgerError):
    """Raised when a login attempt fails."""


class AccountNotFoundError(AuthenticationError):
    """Raised when a referenced account number does not exist."""


class InvalidCredentialError(AuthenticationError):
    """Raised when a secret does not match the stored credential hash."""


class InvalidAccountKindError(BankLedgerError):
    """Raised when an account kind token is not recognised."""


class UnsupportedOperationError(BankLedgerError):
    """Raised when an operation is not available for the account kind."""


class CredentialHashingError(BankLedgerError):
    """Raised when the credential hashing primitive is unavailable."""


class ConfigurationError(BankLedgerError):
    """Raised when configuration is invalid or missing."""


class SinkError(BankLedgerError):
    """Raised when a sink operation fails."""
