"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several entities: the
    engagement ledger, reply bookkeeping and feed pagination.
    """

    pass
