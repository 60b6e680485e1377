"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException, ValueError):
    """Operation argument is out of range; the account was not modified"""

    def __init__(self, param_name: str, value: float, reason: str = "out of range"):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        super().__init__(f"{param_name} out of range: {reason} (got {value!r})")
