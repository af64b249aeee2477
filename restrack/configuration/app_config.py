"""Configuration of a RESTRack web service."""
import logging
from copy import deepcopy

from ..support.converters import asbool, aslist, aslogger
from .utils import coerce_config, coerce_options, get_partial_dict

log = logging.getLogger(__name__)


class AppConfig(dict):
    """Dictionary of options a :class:`.WebService` is configured with.

    Options can be read and written both as keys and as attributes,
    accessing an attribute which is not an option but a prefix of
    some options returns them as a dictionary::

        conf = AppConfig(default_resource='widgets')
        conf['json.isodates'] = True
        conf.json  # {'isodates': True, 'allow_lists': True}

    Supported options:

        - ``debug`` -> unexpected errors are raised instead of being answered
          with a *500 Internal Server Error*.
        - ``default_resource`` -> resource that serves requests for ``/``.
        - ``root_resource_accept`` -> when provided, only the listed resources
          can be requested at the root of the url, others can only be reached
          through relationships.
        - ``root_resource_deny`` -> resources which can't be requested at the
          root of the url.
        - ``dispatch_path_translator`` -> translate ``-`` and ``.`` into ``_``
          in the resource name, so ``/foo-bar`` reaches ``foo_bar``.
        - ``request_log`` -> logger (or logger name) requests are logged on.
        - ``request_hook`` -> object providing ``pre_processor`` and/or
          ``post_processor`` methods, called with the resource request
          before and after dispatch.
        - ``json.*`` -> options of the :class:`.JSONEncoder`.

    """
    CONFIG_OPTIONS = {
        'debug': asbool,
        'root_resource_accept': aslist,
        'root_resource_deny': aslist,
        'dispatch_path_translator': asbool,
        'request_log': aslogger
    }

    JSON_OPTIONS = {
        'isodates': asbool,
        'allow_lists': asbool
    }

    DEFAULTS = {
        'debug': False,
        'default_resource': None,
        'root_resource_accept': [],
        'root_resource_deny': [],
        'dispatch_path_translator': True,
        'request_log': 'restrack.requests',
        'request_hook': None,
        'json.isodates': False,
        'json.allow_lists': True
    }

    def __init__(self, *args, **kwargs):
        super(AppConfig, self).__init__(deepcopy(self.DEFAULTS))
        self.update(*args, **kwargs)

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            return get_partial_dict(name, self)

    def __setattr__(self, name, value):
        self[name] = value

    def __delattr__(self, name):
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name)

    def coerce(self):
        """Returns a copy of the configuration with options converted to expected types."""
        conf = AppConfig(self)
        conf.update(coerce_options(conf, self.CONFIG_OPTIONS))
        return conf

    def json_options(self):
        """Options for the :class:`.JSONEncoder` stripped of their ``json.`` prefix."""
        return coerce_config(self, 'json.', self.JSON_OPTIONS)

    def make_wsgi_app(self, registry=None):
        """Create a :class:`.WebService` serving the controllers of ``registry``.

        When no registry is provided the global one
        (:data:`restrack.controllers.registry.controllers`) is used.

        """
        from ..wsgiapp import WebService
        log.debug('Creating WebService with options %s', sorted(self.keys()))
        return WebService(self, registry)
