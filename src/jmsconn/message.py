""" A thin handle around a transport-native message, giving access to its
    header fields, properties, and text body.
"""

import logging

from . import fields
from .errors import MessageNotCreatedError
from .transport.base import TransportError


logger = logging.getLogger(__name__)


class MessageHandle:
    """ The :class:`MessageHandle` is what a service handler receives for
        each delivered message, and what a producer sends. The *native*
        message is created by the transport; a handle without one can be
        constructed, but any access to it raises
        :class:`MessageNotCreatedError`.

        Reads propagate transport errors. Writes rejected by the transport
        are logged as warnings and otherwise ignored, so that optional
        headers can be set on a best-effort basis.
    """

    def __init__(self, native=None):
        self.native = native


    def __repr__(self):
        if self.native is None:
            return 'MessageHandle(<not created>)'
        return 'MessageHandle(' + repr(self.native) + ')'


    def unwrap(self):
        """ Return the native message, or raise
            :class:`MessageNotCreatedError` if there is none.
        """

        native = self.native

        if native is None:
            raise MessageNotCreatedError('JMS message has not been created.')

        return native


    def _write(self, what, method, *args):

        write = getattr(self.unwrap(), method)

        try:
            write(*args)
        except TransportError as e:
            logger.warning(
                "jms_message_write_rejected",
                extra={'field': what, 'error': str(e)},
            )
            return

        logger.debug("jms_message_write", extra={'field': what})


    def get_header(self, field):
        """ Return the value of the header *field*, one of the names in
            :data:`jmsconn.fields.HEADERS`.
        """

        if field not in fields.HEADERS:
            raise KeyError('unknown header field: ' + repr(field))

        return self.unwrap().get_header(field)


    def set_header(self, field, value):
        """ Assign *value* to the header *field*. The redelivered flag is
            assigned by the transport and cannot be set.
        """

        if field not in fields.HEADERS or field == fields.REDELIVERED:
            raise KeyError('header field is not settable: ' + repr(field))

        self._write(field, 'set_header', field, value)


    def get_text(self):
        return self.unwrap().get_text()


    def set_text(self, text):
        self._write('text', 'set_text', text)


    def get_property(self, name):
        return self.unwrap().get_property(name)


    def set_property(self, name, value):
        self._write(name, 'set_property', name, value)


    def clear_properties(self):
        self.unwrap().clear_properties()


    # Named accessors for the individual header fields.

    def get_correlation_id(self):
        return self.get_header(fields.CORRELATION_ID)

    def set_correlation_id(self, value):
        self.set_header(fields.CORRELATION_ID, value)

    def get_delivery_mode(self):
        return self.get_header(fields.DELIVERY_MODE)

    def set_delivery_mode(self, value):
        self.set_header(fields.DELIVERY_MODE, value)

    def get_expiration(self):
        return self.get_header(fields.EXPIRATION)

    def set_expiration(self, value):
        self.set_header(fields.EXPIRATION, value)

    def get_message_id(self):
        return self.get_header(fields.MESSAGE_ID)

    def set_message_id(self, value):
        self.set_header(fields.MESSAGE_ID, value)

    def get_message_type(self):
        return self.get_header(fields.MESSAGE_TYPE)

    def set_message_type(self, value):
        self.set_header(fields.MESSAGE_TYPE, value)

    def get_priority(self):
        return self.get_header(fields.PRIORITY)

    def set_priority(self, value):
        self.set_header(fields.PRIORITY, value)

    def get_redelivered(self):
        return self.get_header(fields.REDELIVERED)

    def get_reply_to(self):
        return self.get_header(fields.REPLY_TO)

    def set_reply_to(self, value):
        self.set_header(fields.REPLY_TO, value)

    def get_timestamp(self):
        return self.get_header(fields.TIMESTAMP)

    def set_timestamp(self, value):
        self.set_header(fields.TIMESTAMP, value)


# end of class MessageHandle


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
