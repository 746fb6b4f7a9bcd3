import jmsconn
import pytest


class Empty(jmsconn.Service):
    pass


class Single(jmsconn.Service):

    @jmsconn.handler
    def on_message(self, message):
        return message


class Double(Single):

    @jmsconn.handler
    def on_other_message(self, message):
        pass


def test_no_handler():

    with pytest.raises(jmsconn.ConfigurationError) as excinfo:
        jmsconn.extract_handler(Empty())

    message = str(excinfo.value)
    assert 'No resources found' in message
    assert 'Empty' in message


def test_more_than_one_handler():

    with pytest.raises(jmsconn.ConfigurationError) as excinfo:
        jmsconn.extract_handler(Double(name='invoices'))

    message = str(excinfo.value)
    assert 'More than one' in message
    assert 'invoices' in message


def test_single_handler():

    service = Single()
    found = jmsconn.extract_handler(service)

    assert found == service.on_message
    assert found('hello') == 'hello'


def test_unmarked_override():

    class Override(Double):
        def on_other_message(self, message):
            pass

    service = Override()
    assert service.handlers() == [service.on_message]


def test_names():

    assert Single().name == 'Single'
    assert Single('orders').name == 'orders'

    class Named(jmsconn.Service):
        name = 'named'

    assert Named().name == 'named'


def test_duck_typed_endpoint():

    class Endpoint:
        name = 'endpoint'
        def handlers(self):
            return (print, print)

    with pytest.raises(jmsconn.ConfigurationError):
        jmsconn.extract_handler(Endpoint())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
