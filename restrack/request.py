"""Request objects RESTRack dispatch works on."""
import json
import logging
import uuid
from urllib.parse import quote as url_quote

from webob import Request as WebObRequest
from webob.request import PATH_SAFE

from .exceptions import BadRequest
from .support.urlchain import UrlChain

log = logging.getLogger(__name__)


class Request(WebObRequest):
    """WebOb Request subclass

    Adds the identifier each request is logged with and access
    to the body parameters whatever the format they were sent in.

    """

    @property
    def request_id(self):
        """Identifier of the request, from the ``X-Request-Id`` header when provided."""
        request_id = self.environ.get('restrack.request_id')
        if request_id is None:
            request_id = self.headers.get('X-Request-Id') or uuid.uuid4().hex
            self.environ['restrack.request_id'] = request_id
        return request_id

    @property
    def dispatch_path(self):
        """Decoded PATH_INFO, the url controllers are dispatched on."""
        try:
            return self.path_info
        except UnicodeDecodeError:
            raise BadRequest('Request path is not valid %s.' % self.url_encoding)

    @property
    def quoted_path_info(self):
        """PATH_INFO as sent by the client, still percent encoded."""
        bpath = self.environ.get('PATH_INFO', '').encode('latin-1')
        return url_quote(bpath, PATH_SAFE)

    def body_params(self):
        """Parameters sent in the request body.

        JSON bodies are decoded, form submissions are returned as
        a dictionary with lists for repeated fields.
        """
        if self.content_type == 'application/json' or self.content_type.endswith('+json'):
            if not self.body:
                return {}
            try:
                return json.loads(self.text)
            except ValueError as e:
                raise BadRequest('Request body is not valid JSON: %s' % e)
        return self.POST.mixed()


class ResourceRequest(object):
    """State of the dispatch of a single request.

    Holds the url chain still to be consumed by controllers and the
    parameters of the request. A new one is created for each request
    and it's discarded when the response is sent.

    """

    def __init__(self, request, registry, resource_name=None, url_chain=None):
        self.request = request
        self.registry = registry
        self.request_id = request.request_id

        if url_chain is None:
            url_chain = UrlChain.from_path(request.dispatch_path)
        self.url_chain = url_chain
        self.resource_name = resource_name
        self.response = None

        self.get_params = request.GET.mixed()
        self.post_params = request.body_params()
        self.params = dict(self.get_params)
        if isinstance(self.post_params, dict):
            self.params.update(self.post_params)

    def fulfill(self):
        """Dispatch the request to the controller of the requested resource."""
        return self.call_controller(self.resource_name)

    def call_controller(self, resource_name):
        """Hand over the rest of the url chain to the controller of ``resource_name``."""
        return self.registry.dispatch(resource_name, self)

    def __repr__(self):
        return '<ResourceRequest {%s} %s %s %r>' % (self.request_id, self.request.method,
                                                    self.resource_name, self.url_chain)
