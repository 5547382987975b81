"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the rules that span several entities or repositories,
    such as threading comments or counting likes.
    """

    pass
