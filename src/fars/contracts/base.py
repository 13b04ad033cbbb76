"""Base contract enforcement utilities.

require() is the single enforcement mechanism for all contracts.
"""

from fars.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Enforce a stage contract.

    Parameters
    ----------
    condition : bool
        The invariant that must be true.
    message : str
        Explanation used as the ContractViolation message.

    Raises
    ------
    ContractViolation
        If condition is False.

    Examples
    --------
    >>> require("MONTH" in df.columns, "Year table contract: missing 'MONTH'")
    """
    if not condition:
        raise ContractViolation(message)
