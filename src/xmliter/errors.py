"""Exception classes raised by xmliter.

Errors reported by lxml itself (``XMLSyntaxError``, I/O errors) are not
wrapped and reach the caller unchanged.
"""


class XmlIterError(Exception):
    """Base class of all xmliter errors."""


class InvalidSequenceState(XmlIterError):
    """A cursor was asked for an element it has not confirmed to exist.
    """


class ToolkitConfigurationError(XmlIterError):
    """The toolkit options are invalid or an engine is unavailable.
    """


class QueryError(XmlIterError):
    """Base class of query errors.

    The failing expression is available as ``expression``.
    """
    def __init__(self, message, expression=None):
        XmlIterError.__init__(self, message)
        self.expression = expression


class QueryCompileError(QueryError):
    pass


class QueryEvaluationFailed(QueryError):
    pass
