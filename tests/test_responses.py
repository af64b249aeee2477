# -*- coding: utf-8 -*-
import json

from webob import Response

from restrack import ErrorList
from restrack.jsonify import JSONEncoder
from restrack.support.responses import package, validation_errors_response


class TestPackage(object):
    def test_value(self):
        response = package({'foo': 'bar', 'baz': 123})
        assert response.status_int == 200
        assert response.content_type == 'application/json'
        assert json.loads(response.text) == {'foo': 'bar', 'baz': 123}

    def test_errors(self):
        response = package(ErrorList(['name is required']))
        assert response.status_int == 422
        assert json.loads(response.text) == {'errors': ['name is required']}

    def test_structured_errors(self):
        response = package(ErrorList([{'field': 'name', 'message': 'required'}]))
        assert response.status_int == 422
        assert json.loads(response.text) == {'errors': [{'field': 'name',
                                                         'message': 'required'}]}

    def test_none(self):
        response = package(None)
        assert response.status_int == 204
        assert response.body == b''
        assert 'Content-Type' not in response.headers

    def test_response(self):
        original = Response(body=b'hello', content_type='text/plain', charset='utf-8')
        assert package(original) is original

    def test_encoder(self):
        response = package({'b': 1, 'a': 2}, JSONEncoder(sort_keys=True))
        assert response.text == '{"a": 2, "b": 1}'


def test_validation_errors_response_from_list():
    response = validation_errors_response(['broken'])
    assert response.status == '422 Unprocessable Entity'
    assert json.loads(response.text) == {'errors': ['broken']}
