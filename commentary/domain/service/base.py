"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the threading rules that span more than one
    comment (placement, counters, tree assembly) and translate missing
    records into domain errors.
    """

    pass
