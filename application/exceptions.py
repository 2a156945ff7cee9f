"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class RepositoryError(Exception):
    """Error talking to the persistence backend.

    Raised by repository implementations when a query or update fails
    (network error, PostgREST error response, misconfigured table).
    Services catch it and degrade to an empty result; it is never
    retried.
    """

    pass


class PermissionDeniedError(Exception):
    """The current user may not view the requested data.

    Raised by services when a role check fails. Routers map it to 403.
    """

    pass
