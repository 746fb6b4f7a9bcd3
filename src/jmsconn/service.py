""" Consuming endpoints. A :class:`Service` declares exactly one message
    handler, marked with the :func:`handler` decorator::

        class Orders(Service):

            @handler
            def on_message(self, message):
                ...

    The handler is located once, by :func:`extract_handler`, when the
    service is bound to a consumer.
"""

from .errors import ConfigurationError


_marker = '__jms_handler__'


def handler(method):
    """ Mark *method* as the message handler of a :class:`Service`.
    """

    setattr(method, _marker, True)
    return method


class Service:
    """ Base class for consuming endpoints. The *name* is used in error
        messages, and defaults to the name of the class.
    """

    name = None

    def __init__(self, name=None):

        if name is not None:
            self.name = name
        elif self.name is None:
            self.name = type(self).__name__


    def handlers(self):
        """ Return the bound methods marked with :func:`handler`, in the
            order they are first defined, base classes first. A method
            overridden without the marker is not a handler.
        """

        names = list()

        for cls in reversed(type(self).__mro__):
            for attribute in vars(cls):
                if attribute not in names:
                    names.append(attribute)

        found = list()

        for attribute in names:
            value = getattr(type(self), attribute, None)
            if getattr(value, _marker, False):
                found.append(getattr(self, attribute))

        return found


# end of class Service



def extract_handler(endpoint):
    """ Return the single message handler declared by *endpoint*. Anything
        other than exactly one handler is a :class:`ConfigurationError`.
    """

    handlers = list(endpoint.handlers())

    if len(handlers) == 0:
        raise ConfigurationError('No resources found to handle the JMS message in ' + str(endpoint.name))

    if len(handlers) > 1:
        raise ConfigurationError('More than one resources found in JMS service ' + str(endpoint.name) + '. JMS Service should only have one resource')

    return handlers[0]


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
