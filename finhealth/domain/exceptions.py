"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ConfigurationError(DomainException):
    """Benchmark table is inconsistent (weights, cutoffs or tier ordering)"""

    pass
