""" Configuration vocabulary.

    Keep these in one place to avoid stringly-typed configuration handling.
    Public keys are what users write; internal keys are what the transport
    reads once normalization is complete.
"""

import types


# Public keys.

INITIAL_CONTEXT_FACTORY = 'initial-context-factory'
PROVIDER_URL = 'provider-url'
CONNECTION_FACTORY_TYPE = 'connection-factory-type'
CONNECTION_FACTORY_NAME = 'connection-factory-name'
DESTINATION = 'destination'
CLIENT_ID = 'client-id'
DURABLE_SUBSCRIBER_ID = 'durable-subscriber-id'
ACKNOWLEDGMENT_MODE = 'acknowledgment-mode'
CONFIG_FILE_PATH = 'config-file-path'
CONCURRENT_CONSUMERS = 'concurrent-consumers'
CONNECTION_USERNAME = 'connection-username'
CONNECTION_PASSWORD = 'connection-password'

PROPERTIES = 'properties'


# Scalar attributes read from a declared descriptor, in the order they
# are applied.

RECOGNIZED = (
    INITIAL_CONTEXT_FACTORY,
    PROVIDER_URL,
    CONNECTION_FACTORY_TYPE,
    CONNECTION_FACTORY_NAME,
    DESTINATION,
    CLIENT_ID,
    DURABLE_SUBSCRIBER_ID,
    ACKNOWLEDGMENT_MODE,
    CONFIG_FILE_PATH,
    CONCURRENT_CONSUMERS,
    CONNECTION_USERNAME,
    CONNECTION_PASSWORD,
)


# Internal keys.

NAMING_FACTORY_INITIAL = 'java.naming.factory.initial'
NAMING_PROVIDER_URL = 'java.naming.provider.url'
JMS_CONNECTION_FACTORY_TYPE = 'transport.jms.ConnectionFactoryType'
JMS_CONNECTION_FACTORY_JNDI_NAME = 'transport.jms.ConnectionFactoryJNDIName'
JMS_DESTINATION = 'transport.jms.Destination'
JMS_CLIENT_ID = 'transport.jms.ClientId'
JMS_DURABLE_SUBSCRIBER_NAME = 'transport.jms.DurableSubscriberName'
JMS_SESSION_ACKNOWLEDGEMENT = 'transport.jms.SessionAcknowledgement'
JMS_CONCURRENT_CONSUMERS = 'transport.jms.ConcurrentConsumers'
JMS_CONNECTION_USERNAME = 'transport.jms.ConnectionUsername'
JMS_CONNECTION_PASSWORD = 'transport.jms.ConnectionPassword'


# A single, non-transitive substitution from public to internal keys.
# The config file path is deliberately absent; it is only meaningful to
# the broker rewrite.

RENAME = types.MappingProxyType({
    INITIAL_CONTEXT_FACTORY: NAMING_FACTORY_INITIAL,
    PROVIDER_URL: NAMING_PROVIDER_URL,
    CONNECTION_FACTORY_TYPE: JMS_CONNECTION_FACTORY_TYPE,
    CONNECTION_FACTORY_NAME: JMS_CONNECTION_FACTORY_JNDI_NAME,
    DESTINATION: JMS_DESTINATION,
    CLIENT_ID: JMS_CLIENT_ID,
    DURABLE_SUBSCRIBER_ID: JMS_DURABLE_SUBSCRIBER_NAME,
    ACKNOWLEDGMENT_MODE: JMS_SESSION_ACKNOWLEDGEMENT,
    CONCURRENT_CONSUMERS: JMS_CONCURRENT_CONSUMERS,
    CONNECTION_USERNAME: JMS_CONNECTION_USERNAME,
    CONNECTION_PASSWORD: JMS_CONNECTION_PASSWORD,
})


# WSO2 Message Broker.

MB_ICF_ALIAS = 'wso2mbInitialContextFactory'
MB_ICF_NAME = 'org.wso2.andes.jndi.PropertiesFileInitialContextFactory'
MB_CF_NAME_PREFIX = 'connectionfactory.'


# Message header fields.

CORRELATION_ID = 'correlation_id'
DELIVERY_MODE = 'delivery_mode'
EXPIRATION = 'expiration'
MESSAGE_ID = 'message_id'
MESSAGE_TYPE = 'message_type'
PRIORITY = 'priority'
REDELIVERED = 'redelivered'
REPLY_TO = 'reply_to'
TIMESTAMP = 'timestamp'

HEADERS = frozenset((
    CORRELATION_ID,
    DELIVERY_MODE,
    EXPIRATION,
    MESSAGE_ID,
    MESSAGE_TYPE,
    PRIORITY,
    REDELIVERED,
    REPLY_TO,
    TIMESTAMP,
))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
