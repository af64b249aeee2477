# -*- coding: utf-8 -*-
import logging

import pytest

from restrack.configuration import AppConfig, ConfigError, coerce_config, coerce_options
from restrack.configuration.utils import get_partial_dict
from restrack.support.converters import asbool, aslist


def test_get_partial_dict():
    assert get_partial_dict('prefix', {'prefix.xyz':1, 'prefix.zyx':2, 'xy':3}) == {'xyz':1,'zyx':2}

def test_get_partial_dict_missing():
    with pytest.raises(AttributeError):
        get_partial_dict('prefix', {'xy': 3})

def test_coerce_options():
    opts = {'ATRUE': 'true', 'AFALSE': 'false', 'ALIST': 'a, b'}
    conv = {'ATRUE': asbool, 'AFALSE': asbool, 'ALIST': aslist, 'MISSING': aslist}
    assert coerce_options(opts, conv) == {'ATRUE': True, 'AFALSE': False, 'ALIST': ['a', 'b']}

def test_coerce_options_invalid():
    with pytest.raises(ConfigError):
        coerce_options({'debug': 'maybe'}, {'debug': asbool})

def test_coerce_config():
    conf = coerce_config({'json.isodates': 'true', 'json.indent': 2, 'debug': True},
                         'json.', {'isodates': asbool})
    assert conf == {'isodates': True, 'indent': 2}


class TestAppConfig(object):
    def test_defaults(self):
        conf = AppConfig()
        assert conf['debug'] is False
        assert conf.default_resource is None
        assert conf['json.allow_lists'] is True

    def test_options(self):
        conf = AppConfig({'debug': 'true'}, default_resource='widgets')
        assert conf.debug == 'true'
        assert conf.default_resource == 'widgets'

    def test_attribute_access(self):
        conf = AppConfig()
        conf.default_resource = 'widgets'
        assert conf['default_resource'] == 'widgets'
        del conf.default_resource
        assert 'default_resource' not in conf
        with pytest.raises(AttributeError):
            del conf.default_resource

    def test_prefix_access(self):
        conf = AppConfig()
        conf['json.isodates'] = True
        assert conf.json == {'isodates': True, 'allow_lists': True}

    def test_missing_attribute(self):
        with pytest.raises(AttributeError):
            AppConfig().nothing_like_this

    def test_coerce(self):
        conf = AppConfig(debug='on', root_resource_deny='a, b',
                         request_log='restrack.test.log').coerce()
        assert conf.debug is True
        assert conf.root_resource_deny == ['a', 'b']
        assert conf.request_log is logging.getLogger('restrack.test.log')
        assert isinstance(conf, AppConfig)

    def test_coerce_leaves_original(self):
        conf = AppConfig(debug='on')
        conf.coerce()
        assert conf.debug == 'on'

    def test_json_options(self):
        conf = AppConfig({'json.isodates': 'yes', 'json.sort_keys': True})
        assert conf.json_options() == {'isodates': True, 'allow_lists': True,
                                       'sort_keys': True}

    def test_defaults_are_not_shared(self):
        first = AppConfig()
        first['root_resource_deny'].append('widgets')
        assert AppConfig()['root_resource_deny'] == []
