# -*- coding: utf-8 -*-
import pytest
from webob.exc import HTTPException

from restrack.exceptions import (BadRequest, Forbidden, InvalidIdentifier, MethodNotAllowed,
                                 NotFound, ServerMisconfiguration)


@pytest.mark.parametrize('exc_class, code', [
    (MethodNotAllowed, 405),
    (BadRequest, 400),
    (InvalidIdentifier, 400),
    (NotFound, 404),
    (Forbidden, 403),
    (ServerMisconfiguration, 500),
])
def test_status_codes(exc_class, code):
    exc = exc_class('something went wrong')
    assert isinstance(exc, HTTPException)
    assert exc.code == code
    assert exc.detail == 'something went wrong'


def test_invalid_identifier_is_not_bad_request():
    assert not issubclass(InvalidIdentifier, BadRequest)
