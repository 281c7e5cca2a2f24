class ByzopError(Exception):
    """Base exception type"""


# -----------------------------------------------------
# Top-level error categories
# use these as a mixin with another base exception type
# -----------------------------------------------------


class ConfigError(ByzopError):
    """Base config error type"""


class ValidationError(ByzopError):
    """Base error type for arguments rejected before reaching the chain"""


class ContractError(ByzopError):
    """Base contract interaction error type"""


# --------------------------------------------------
# Actual error types you should use
# --------------------------------------------------


class UnsupportedChainError(ConfigError, ValueError):
    """
    No network configuration exists for the requested chain id
    """


class ContractNotConfiguredError(ConfigError, ValueError):
    """
    The requested contract has no (or a zero) address on this chain
    """


class SignerMissingError(ConfigError, RuntimeError):
    """
    A state-changing method was called without an account to sign with
    """


class InvalidAddressError(ValidationError, ValueError):
    """
    A string is not a well-formed ethereum address
    """


class InvalidOperatorNameError(ValidationError, ValueError):
    """
    Operator names must be non-empty
    """


class InvalidOperatorFeeError(ValidationError, ValueError):
    """
    Operator fees are integers between 0 and 1000 (0% and 10%)
    """


class InvalidOperatorIndexError(ValidationError, ValueError):
    """
    Operator indices are 32-byte identifiers
    """


class TransactionRevertedError(ContractError, RuntimeError):
    """
    A mined transaction has a failed status in its receipt
    """
