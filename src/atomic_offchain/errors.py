"""
Explorer Errors

Failure reasons carried by ``Result.failure`` across the field discovery
and asset filter operations.
"""


class ExplorerError(Exception):
    """Base exception for explorer query errors"""

    pass


class LookupFailure(ExplorerError):
    """The explorer API could not be reached or answered with an error"""

    pass


class EmptyResultError(ExplorerError):
    """No schemas were found for a collection"""

    pass


class MalformedResultError(ExplorerError):
    """The explorer API returned an empty or non-list payload where assets were expected"""

    pass
