"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class BackendLinkError(ServiceError):
    """Raised inside a backend link when a request cannot be delivered."""


class MalformedReply(ServiceError):
    """Raised inside a backend link when a reply body cannot be used."""
