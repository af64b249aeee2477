# -*- coding: utf-8 -*-
"""Sample web service used by the test suite."""
from restrack import (ControllerRegistry, ResourceController, has_defined_relationships_to,
                      has_direct_relationship_to, has_mapped_relationships_to,
                      has_relationships_to, pass_through_to)
from webob import Response

registry = ControllerRegistry()


def related_baz(id):
    if id == '144':
        return '777'
    return '666'


@registry.register('foo_bar')
class FooBarController(ResourceController):
    relationships = (
        has_direct_relationship_to('baz', related_baz),
        has_direct_relationship_to('bat', related_baz, as_='slugger'),
        has_relationships_to('baza', lambda id: [1, 2, 3, 4, 5, 6, 7, 8, 9], as_='children'),
        has_mapped_relationships_to('bazu', lambda id: {'first': 1, 'second': 2, 'third': 3},
                                    as_='maps'),
        pass_through_to('bat', as_='bats'),
    )

    def index(self):
        return [1, 2, 3, 4, 5, 6, 7]

    def create(self):
        return {'success': True}

    def replace(self):
        return {'success': True}

    def drop(self):
        return {'success': True}

    def show(self, id):
        return {'foo': 'bar', 'baz': 123}

    def update(self, id):
        return {'success': True}

    def destroy(self, id):
        return {'success': True}

    def add(self, id):
        return {'success': True}

    def delete(self, id):
        return {'deleted': id}


@registry.register('baz')
class BazController(ResourceController):
    def show(self, id):
        return {'BAZ': id}


@registry.register('bat')
class BatController(ResourceController):
    def index(self):
        return ['bat']

    def show(self, id):
        return {'BAT': id}


@registry.register('baza')
class BazaController(ResourceController):
    key_type = int

    def show(self, id):
        return {'BAZA': id}


@registry.register('bazu')
class BazuController(ResourceController):
    key_type = int

    def show(self, id):
        return {'BAZU': id}


@registry.register('widgets')
class WidgetsController(ResourceController):
    key_type = int
    relationships = (
        has_defined_relationships_to('parts', lambda id: [1, 2, 3]),
        has_relationships_to('parts', lambda id: [10, 20, 30], as_='part_list'),
    )

    def index(self):
        return [{'id': 1}, {'id': 2}]

    def show(self, id):
        return {'id': id, 'params': self.params}

    def create(self):
        if not self.params.get('name'):
            return self.package_errors(['name is required'])
        return {'created': self.params['name']}

    def drop(self):
        return None

    def publish(self, id):
        return {'published': id}

    def raw(self, id):
        return Response(body=('widget %s' % id).encode('utf-8'),
                        content_type='text/plain', charset='utf-8')

    def explode(self, id):
        raise RuntimeError('boom')


@registry.register('parts')
class PartsController(ResourceController):
    key_type = int

    def show(self, id):
        return {'part': id}

    def _default(self, action, *args):
        return {'fallback': action, 'args': list(args)}
