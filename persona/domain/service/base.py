"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span repositories, such as keeping
    one primary identity per account while writing the audit trail.
    """

    pass
