""" Normalization of user-supplied connector configuration into the flat
    property set the transport consumes. There are two sources: a declared
    :class:`~jmsconn.descriptor.Descriptor` (or anything else offering the
    same two accessors), and a plain mapping built at runtime. Both end in
    the same pipeline::

        source -> store -> broker rewrite -> rename -> transport

    Every call builds and returns a new dictionary; the source is never
    modified.
"""

import collections.abc
import logging

from . import broker
from . import fields
from . import properties


logger = logging.getLogger(__name__)

parse_properties = properties.parse
rewrite = broker.rewrite


def from_descriptor(descriptor):
    """ Return the normalized property set for a declared *descriptor*.
        Each recognized scalar attribute is copied if present; entries in
        the ``properties`` array are applied afterwards and override any
        scalar attribute with the same key.
    """

    store = dict()

    for name in fields.RECOGNIZED:
        value = descriptor.get_attribute(name)
        if value is not None:
            store[name] = value

    entries = descriptor.get_attribute_array(fields.PROPERTIES)
    if entries is not None:
        properties.apply(entries, store)

    return _finish(store)


def from_mapping(mapping):
    """ Return the normalized property set for a runtime *mapping*. Every
        key is retained; values are represented as strings.
    """

    store = dict()

    for key,value in mapping.items():
        store[key] = str(value)

    return _finish(store)


def normalize(source):
    """ Dispatch to :func:`from_descriptor` or :func:`from_mapping`
        depending on the shape of *source*.
    """

    if hasattr(source, 'get_attribute') and hasattr(source, 'get_attribute_array'):
        return from_descriptor(source)

    if isinstance(source, collections.abc.Mapping):
        return from_mapping(source)

    raise TypeError('cannot normalize configuration from ' + type(source).__name__)


def rename(store):
    """ Move every key in *store* that has an entry in the rename table to
        its internal name. This is a single pass: a renamed key is not
        looked up in the table again.
    """

    renamed = dict()

    for key in tuple(store):
        try:
            internal = fields.RENAME[key]
        except KeyError:
            continue

        renamed[internal] = store.pop(key)

    store.update(renamed)
    return store


def _finish(store):

    broker.rewrite(store)
    rename(store)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("jms_config_normalized", extra={'keys': list(store)})
    return store


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
