"""
Errors raised by the upstream agriculture data client
Both are recovered locally; neither reaches the rendering layer.
"""

class AgricultureDataError(Exception):
    """Base class for upstream data failures"""

class DatasetUnavailable(AgricultureDataError):
    """The region dataset could not be fetched or parsed"""

class DetailFetchFailed(AgricultureDataError):
    """The country detail payload could not be fetched or was unsuccessful"""
