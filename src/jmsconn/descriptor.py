""" Statically declared connector configuration. A :class:`Descriptor` is
    attached to a consuming service class with the :func:`configure`
    decorator, and later read back by the normalizer.
"""

from .errors import ConfigurationError


class Descriptor:
    """ A read-only set of named attributes. Keyword arguments use
        underscores where the attribute names use hyphens, so
        ``provider_url='tcp://x'`` declares the ``provider-url`` attribute.
        A mapping of already-hyphenated names may be supplied as the
        positional *attributes* argument; keyword arguments win.

        Scalar attributes are reported as strings. The ``properties``
        attribute is reported as a tuple of strings.
    """

    def __init__(self, attributes=None, **kwargs):

        merged = dict()

        if attributes is not None:
            merged.update(attributes)

        for name,value in kwargs.items():
            merged[name.replace('_', '-')] = value

        self._attributes = merged


    def __contains__(self, name):
        return self._attributes.get(name) is not None


    def __repr__(self):
        names = ', '.join(sorted(self._attributes))
        return 'Descriptor(' + names + ')'


    def get_attribute(self, name):
        """ Return the string value of the attribute *name*, or None if it
            was not declared or was declared as None.
        """

        value = self._attributes.get(name)

        if value is None:
            return None

        return str(value)


    def get_attribute_array(self, name):
        """ Return the attribute *name* as a tuple of strings, or None if
            it was not declared. A bare string is treated as an array
            with a single entry.
        """

        value = self._attributes.get(name)

        if value is None:
            return None

        if isinstance(value, str):
            return (value,)

        return tuple(str(entry) for entry in value)


# end of class Descriptor



_attribute = '__jms_descriptor__'


def configure(attributes=None, **kwargs):
    """ Class decorator attaching a :class:`Descriptor` to a consuming
        service class. The arguments are those of :class:`Descriptor`::

            @configure(initial_context_factory='wso2mbInitialContextFactory',
                       config_file_path='/etc/jms.properties',
                       destination='orders',
                       properties=('transport.jms.CacheLevel=consumer',))
            class Orders(Service):
                ...
    """

    descriptor = Descriptor(attributes, **kwargs)

    def decorate(cls):
        setattr(cls, _attribute, descriptor)
        return cls

    return decorate


def descriptor_of(target):
    """ Return the :class:`Descriptor` attached to *target*, which may be a
        class or an instance of one.
    """

    try:
        return getattr(target, _attribute)
    except AttributeError:
        if isinstance(target, type):
            name = target.__name__
        else:
            name = type(target).__name__
        raise ConfigurationError('no JMS configuration declared on ' + name)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
