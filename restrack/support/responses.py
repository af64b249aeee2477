from webob import Response

from ..jsonify import encode as json_encode

#: Status used to report an :class:`ErrorList`, the one ActiveResource
#: expects for attribute validation failures.
VALIDATION_FAILURE_STATUS = 422


class ErrorList(list):
    """Errors returned by a controller action.

    An action that returns an ``ErrorList`` (usually through
    :meth:`.ResourceController.package_errors`) is answered with
    a *422 Unprocessable Entity* status and the errors reported
    in JSON format as response body.

    """


def validation_errors_response(errors, encoder=None):
    """Returns a :class:`webob.Response` reporting ``errors``."""
    if not isinstance(errors, ErrorList):
        errors = ErrorList(errors)

    return Response(status=VALIDATION_FAILURE_STATUS,
                    content_type='application/json',
                    charset='utf-8',
                    body=json_encode(dict(errors=list(errors)), encoder).encode('utf-8'))


def package(output, encoder=None):
    """Convert the value returned by a controller action into a response.

    - an :class:`ErrorList` is reported with a 422 status code.
    - ``None`` leads to a *204 No Content* response.
    - a :class:`webob.Response` returned by the action is used as is.
    - anything else is encoded in JSON.

    """
    if isinstance(output, ErrorList):
        return validation_errors_response(output, encoder)

    if isinstance(output, Response):
        # Controller returned the response itself, so we need to do nothing.
        return output

    if output is None:
        response = Response(status=204)
        response.content_type = None
        return response

    return Response(content_type='application/json',
                    charset='utf-8',
                    body=json_encode(output, encoder).encode('utf-8'))


__all__ = ('ErrorList', 'package', 'validation_errors_response',
           'VALIDATION_FAILURE_STATUS')
