"""http exceptions for RESTRack

RESTRack http exceptions are inherited from WebOb http exceptions, so
they can be raised anywhere during dispatch and returned as they are
to the WSGI server.
"""
from webob.exc import (HTTPBadRequest, HTTPException, HTTPForbidden,
                       HTTPInternalServerError, HTTPMethodNotAllowed,
                       HTTPNotFound)


class MethodNotAllowed(HTTPMethodNotAllowed):
    """
    No action can be resolved for the verb and path, or the resolved
    action is not provided by the controller.

    code: 405, title: Method Not Allowed
    """


class BadRequest(HTTPBadRequest):
    """
    A path segment required by a relationship is missing or can't
    be parsed.

    code: 400, title: Bad Request
    """


class InvalidIdentifier(HTTPBadRequest):
    """
    An identifier could not be converted to the key type of the
    controller it was addressed to.

    code: 400, title: Bad Request
    """


class NotFound(HTTPNotFound):
    """
    A resolved identifier is not part of the collection, set or map
    it was looked up in.

    code: 404, title: Not Found
    """


class Forbidden(HTTPForbidden):
    """
    The resource can't be reached from the root of the service.

    code: 403, title: Forbidden
    """


class ServerMisconfiguration(HTTPInternalServerError):
    """
    Invalid key type declaration or reference to a resource which
    was never registered. This is a defect of the service, not an
    error in the request.

    code: 500, title: Internal Server Error
    """


__all__ = ['HTTPException', 'MethodNotAllowed', 'BadRequest', 'InvalidIdentifier',
           'NotFound', 'Forbidden', 'ServerMisconfiguration']
