import logging

from webob.exc import HTTPInternalServerError

from .configuration import AppConfig
from .controllers.registry import controllers as default_registry
from .exceptions import Forbidden, HTTPException, NotFound
from .jsonify import JSONEncoder
from .request import Request, ResourceRequest
from .support.responses import package
from .support.urlchain import UrlChain

log = logging.getLogger(__name__)

_PATH_TRANSLATION = str.maketrans('-.', '__')


class WebService(object):
    def __init__(self, config=None, registry=None, **kwargs):
        """Initialize a RESTRack WSGI application

        Given an application configuration and the registry of the
        controllers to serve creates the WSGI application for them.
        Options provided as keyword arguments override the ones
        in ``config``.

        The registry is frozen, no controller can be registered
        after the web service is created.
        """
        config = AppConfig(config or {}, **kwargs)
        self.config = config = config.coerce()

        if registry is None:
            registry = default_registry
        registry.freeze()
        self.registry = registry

        self.debug = config['debug']
        self.default_resource = config['default_resource']
        self.root_resource_accept = config['root_resource_accept']
        self.root_resource_deny = config['root_resource_deny']
        self.path_translator = config['dispatch_path_translator']
        self.request_log = config['request_log']
        self.request_hook = config['request_hook']
        self.json_encoder = JSONEncoder(**config.json_options())

    def __call__(self, environ, start_response):
        """Serve a WSGI Request"""
        request = Request(environ)
        self.request_log.info('{%s} %s %s requested from %s', request.request_id,
                              request.method, request.quoted_path_info, request.client_addr)

        try:
            response = self._dispatch(request)
        except HTTPException as httpe:
            response = httpe
        except Exception:
            if self.debug:
                raise
            log.exception('{%s} Unexpected error while serving %s', request.request_id,
                          request.quoted_path_info)
            response = HTTPInternalServerError()

        self.request_log.info('{%s} %s', request.request_id, response.status)
        return response(environ, start_response)

    def _dispatch(self, request):
        url_chain = UrlChain.from_path(request.dispatch_path)
        resource_name = self._root_resource(url_chain.shift())

        resource_request = ResourceRequest(request, self.registry, resource_name, url_chain)

        hook = self.request_hook
        if hook is not None and hasattr(hook, 'pre_processor'):
            hook.pre_processor(resource_request)

        output = resource_request.fulfill()
        response = package(output, self.json_encoder)
        resource_request.response = response

        if hook is not None and hasattr(hook, 'post_processor'):
            hook.post_processor(resource_request)

        return resource_request.response

    def _root_resource(self, resource_name):
        """Resource requested at the root of the url, checked against access rules."""
        if resource_name is None:
            resource_name = self.default_resource
            if resource_name is None:
                raise NotFound('No resource requested.')
        elif self.path_translator:
            resource_name = resource_name.translate(_PATH_TRANSLATION)

        if resource_name not in self.registry:
            raise NotFound('Resource %s does not exist.' % resource_name)

        if self.root_resource_accept and resource_name not in self.root_resource_accept:
            raise Forbidden('Resource %s is not accessible at the root.' % resource_name)

        if resource_name in self.root_resource_deny:
            raise Forbidden('Resource %s is not accessible at the root.' % resource_name)

        return resource_name
