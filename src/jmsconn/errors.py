""" Exceptions raised by the connector. Transport-specific exceptions live
    in :mod:`jmsconn.transport.base`.
"""


class JmsError(Exception):
    """Base class for all connector errors."""


class ConfigurationError(JmsError):
    """The supplied configuration cannot be used as-is."""


class MessageNotCreatedError(JmsError):
    """A message handle was used before a native message was attached."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
