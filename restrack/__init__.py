"""RESTRack maps RESTful urls onto resource controllers.

Each resource of a web service is served by a controller, a subclass of
:class:`.ResourceController` registered under the resource name. The
action performed on the resource is derived from the url and the HTTP
verb::

    GET    /widgets       -> WidgetsController.index()
    GET    /widgets/42    -> WidgetsController.show('42')
    PUT    /widgets/42    -> WidgetsController.update('42')
    POST   /widgets/42/publish -> WidgetsController.publish('42')

Controllers can declare relationships to other resources, so that
``/widgets/42/parts/3`` is served by the controller of ``parts`` for the
third part of widget 42.

"""

from .configuration import AppConfig, ConfigError
from .controllers import (ControllerRegistry, ResourceController, controllers,
                          has_defined_relationships_to, has_direct_relationship_to,
                          has_mapped_relationships_to, has_relationship_to,
                          has_relationships_to, pass_through_to, register)
from .exceptions import (BadRequest, Forbidden, InvalidIdentifier, MethodNotAllowed,
                         NotFound, ServerMisconfiguration)
from .jsonify import encode as json_encode
from .request import Request, ResourceRequest
from .support.responses import ErrorList
from .support.urlchain import UrlChain
from .wsgiapp import WebService

__all__ = (
    "AppConfig",
    "ConfigError",
    "ControllerRegistry",
    "ResourceController",
    "controllers",
    "register",
    "has_relationship_to",
    "has_direct_relationship_to",
    "has_relationships_to",
    "has_defined_relationships_to",
    "has_mapped_relationships_to",
    "pass_through_to",
    "BadRequest",
    "Forbidden",
    "InvalidIdentifier",
    "MethodNotAllowed",
    "NotFound",
    "ServerMisconfiguration",
    "json_encode",
    "Request",
    "ResourceRequest",
    "ErrorList",
    "UrlChain",
    "WebService",
)
