""" Parsing for the free-form ``properties`` array, where each entry is a
    single ``key=value`` string.
"""

from . import fields
from .errors import ConfigurationError


def parse(entries):
    """ Return a dictionary of the key/value pairs in *entries*. The key
        is everything before the first '=', the value is everything after
        it; both are stripped of surrounding whitespace. Later entries
        win over earlier entries with the same key.

        A :class:`ConfigurationError` is raised on the first entry that
        has no separator; nothing after it is examined.
    """

    parsed = dict()

    for entry in entries:
        key, separator, value = entry.partition('=')

        if separator == '':
            raise ConfigurationError('invalid ' + fields.PROPERTIES + ' entry ' + repr(entry) + ': key value pair is not separated by an \'=\'')

        parsed[key.strip()] = value.strip()

    return parsed


def apply(entries, store):
    """ Parse *entries* and write every pair into *store*, overwriting any
        existing values. The store is untouched if any entry is malformed.
    """

    store.update(parse(entries))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
