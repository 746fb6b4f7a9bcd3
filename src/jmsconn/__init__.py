""" Python implementation of a JMS-style broker connector. This includes
    normalization of connector configuration, consuming service
    declarations, and access to in-flight messages, plus an AMQP transport
    that consumes the normalized configuration.
"""

# Vocabulary and errors.

from . import fields
from . import errors
from .errors import ConfigurationError, JmsError, MessageNotCreatedError

# Configuration normalization.

from . import properties
from . import broker
from . import config
normalize = config.normalize

from .descriptor import Descriptor, configure, descriptor_of

# Consuming endpoints and messages.

from .service import Service, extract_handler, handler
from .message import MessageHandle

# Transport, last: it consumes everything above.

from . import transport
from .transport import amqp

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
