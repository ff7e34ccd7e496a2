from __future__ import annotations


class CdlFixerError(Exception):
    """Base error for cdl_fixer."""


class ContractError(CdlFixerError):
    """Raised when an operator contract is violated."""


class ValidationError(ContractError):
    """Raised when an operator input fails validation."""


class OperatorError(CdlFixerError):
    """Raised when an operator fails to execute correctly."""


class ModuleFileError(CdlFixerError):
    """Raised when a module description (.soc_mod) file cannot be read."""
