""" Compatibility rewrites for brokers that expect a different shape of
    configuration than the one users write. The only such broker is the
    WSO2 Message Broker, which locates its connection factory through a
    properties-file naming context.
"""

import logging

from . import fields
from .errors import ConfigurationError


logger = logging.getLogger(__name__)


def is_wso2mb(store):
    """ Return True if the configured initial context factory is the
        WSO2 Message Broker alias. The comparison is case-insensitive.
    """

    factory = store.get(fields.INITIAL_CONTEXT_FACTORY)

    if factory is None:
        return False

    return factory.lower() == fields.MB_ICF_ALIAS.lower()


def rewrite(store):
    """ Rewrite *store* in place if it targets the WSO2 Message Broker;
        otherwise leave it alone.

        The alias is replaced with the canonical factory class. A provider
        URL is moved to a ``connectionfactory.<name>`` key, which requires
        the connection factory name to be set; failing that, a config file
        path becomes the provider URL. A :class:`ConfigurationError` is
        raised before any change is made if the factory name is needed
        and missing.
    """

    if not is_wso2mb(store):
        return store

    factory_name = store.get(fields.CONNECTION_FACTORY_NAME)
    provider_url = store.get(fields.PROVIDER_URL)

    if provider_url is not None:
        if factory_name is None or factory_name.strip() == '':
            raise ConfigurationError(fields.CONNECTION_FACTORY_NAME + ' property should be set')

    store[fields.INITIAL_CONTEXT_FACTORY] = fields.MB_ICF_NAME

    if provider_url is not None:
        synthesized = fields.MB_CF_NAME_PREFIX + factory_name
        store[synthesized] = provider_url
        del store[fields.PROVIDER_URL]
    elif fields.CONFIG_FILE_PATH in store:
        store[fields.PROVIDER_URL] = store.pop(fields.CONFIG_FILE_PATH)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("wso2mb_rewrite", extra={'keys': list(store)})
    return store


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
