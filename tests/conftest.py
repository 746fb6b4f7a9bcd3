import jmsconn
import pytest


class FakeNative(jmsconn.transport.NativeMessage):
    """ A native message that accepts anything except values it has been
        told to reject.
    """

    def __init__(self, reject=()):
        self.headers = dict()
        self.props = dict()
        self.text = None
        self.reject = set(reject)

    def _check(self, name):
        if name in self.reject:
            raise jmsconn.transport.TransportError('rejected: ' + name)

    def get_header(self, field):
        return self.headers.get(field)

    def set_header(self, field, value):
        self._check(field)
        self.headers[field] = value

    def get_text(self):
        return self.text

    def set_text(self, text):
        self._check('text')
        self.text = text

    def get_property(self, name):
        return self.props.get(name)

    def set_property(self, name, value):
        self._check(name)
        self.props[name] = value

    def clear_properties(self):
        self.props.clear()


@pytest.fixture
def fake_native():
    return FakeNative


@pytest.fixture
def wso2mb():
    """ A runtime configuration targeting the WSO2 Message Broker, before
        normalization.
    """

    config = dict()
    config['initial-context-factory'] = 'wso2mbInitialContextFactory'
    config['provider-url'] = 'tcp://x'
    config['connection-factory-name'] = 'qcf'
    config['destination'] = 'orders'
    return config


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
