import re

from coordtransform.utils.logging import LOGGER, warn_once


def test_logger_name():
    assert LOGGER.name == 'coordtransform'


def test_warn_once(caplog):
    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1

    warn_once('another')
    assert 'another' in caplog.text
