import jmsconn
import pytest

fields = jmsconn.fields


def test_other_vendor_untouched():

    store = {'initial-context-factory': 'org.apache.activemq.jndi.ActiveMQInitialContextFactory',
             'provider-url': 'tcp://x'}
    original = dict(store)

    jmsconn.broker.rewrite(store)
    assert store == original

    jmsconn.broker.rewrite(store)
    assert store == original


def test_no_factory_untouched():

    store = {'provider-url': 'tcp://x'}
    jmsconn.broker.rewrite(store)
    assert store == {'provider-url': 'tcp://x'}


def test_provider_url(wso2mb):

    jmsconn.broker.rewrite(wso2mb)

    assert 'provider-url' not in wso2mb
    assert wso2mb['connectionfactory.qcf'] == 'tcp://x'
    assert wso2mb['initial-context-factory'] == fields.MB_ICF_NAME
    assert wso2mb['connection-factory-name'] == 'qcf'


def test_alias_case_insensitive(wso2mb):

    wso2mb['initial-context-factory'] = 'WSO2MBINITIALCONTEXTFACTORY'
    jmsconn.broker.rewrite(wso2mb)

    assert wso2mb['initial-context-factory'] == fields.MB_ICF_NAME


@pytest.mark.parametrize('name', (None, '', '   '))
def test_provider_url_without_factory_name(wso2mb, name):

    if name is None:
        del wso2mb['connection-factory-name']
    else:
        wso2mb['connection-factory-name'] = name

    original = dict(wso2mb)

    with pytest.raises(jmsconn.ConfigurationError) as excinfo:
        jmsconn.broker.rewrite(wso2mb)

    assert 'connection-factory-name property should be set' in str(excinfo.value)
    assert wso2mb == original


def test_config_file_path():

    store = {'initial-context-factory': 'wso2mbInitialContextFactory',
             'config-file-path': '/etc/jms.props'}

    jmsconn.broker.rewrite(store)

    assert store['provider-url'] == '/etc/jms.props'
    assert 'config-file-path' not in store
    assert store['initial-context-factory'] == fields.MB_ICF_NAME


def test_provider_url_wins_over_config_file_path(wso2mb):

    wso2mb['config-file-path'] = '/etc/jms.props'
    jmsconn.broker.rewrite(wso2mb)

    assert wso2mb['connectionfactory.qcf'] == 'tcp://x'
    assert wso2mb['config-file-path'] == '/etc/jms.props'
    assert 'provider-url' not in wso2mb


def test_neither_url_nor_path():

    store = {'initial-context-factory': 'wso2mbInitialContextFactory'}
    jmsconn.broker.rewrite(store)

    assert store == {'initial-context-factory': fields.MB_ICF_NAME}


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
