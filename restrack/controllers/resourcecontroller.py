# -*- coding: utf-8 -*-
"""
This module defines the base class of resource controllers and
the resolution of the action a request is meant to perform on them.
"""
import inspect
import logging

from ..exceptions import InvalidIdentifier, MethodNotAllowed, ServerMisconfiguration
from ..support.converters import coerce_identifier
from ..support.responses import ErrorList
from .relationships import Relationship, RelationshipBinder

log = logging.getLogger(__name__)

#: Actions performed when the url provides none, by HTTP verb
#: and whether an identifier was provided or not.
VERB_ACTIONS = {
    'GET': ('index', 'show'),
    'PUT': ('replace', 'update'),
    'POST': ('create', 'add'),
    'DELETE': ('drop', 'destroy')
}


class _ResourceControllerMeta(type):
    def __init__(cls, name, bases, attrs):
        super(_ResourceControllerMeta, cls).__init__(name, bases, attrs)

        if not hasattr(cls, '_reserved_names'):
            # ResourceController itself, its public methods are never actions.
            cls._reserved_names = frozenset(attrs)
            cls._actions = {}
            cls._relationships = {}
            return

        relationships = {}
        for base in reversed(bases):
            relationships.update(getattr(base, '_relationships', {}))
        for relationship in attrs.get('relationships', ()):
            if not isinstance(relationship, Relationship):
                raise ServerMisconfiguration('%s declares %r which is not a relationship'
                                             % (name, relationship))
            relationships[relationship.name] = relationship

        actions = {}
        for attr_name in dir(cls):
            if attr_name.startswith('_') or attr_name in cls._reserved_names:
                continue
            value = getattr(cls, attr_name)
            if inspect.isroutine(value):
                actions[attr_name] = value

        clashing = set(actions) & set(relationships)
        if clashing:
            raise ServerMisconfiguration('%s declares relationships named as its actions: %s'
                                         % (name, ', '.join(sorted(clashing))))

        cls._actions = actions
        cls._relationships = relationships


class ResourceController(object, metaclass=_ResourceControllerMeta):
    """Base class of all the resource controllers.

    Controllers provide the actions of a resource as methods. Which one
    is called depends on the url and on the HTTP verb::

                           HTTP Verb: |    GET    |   PUT     |   POST    |   DELETE
        Collection URI (/widgets/):   |   index   |   replace |   create  |   drop
        Element URI   (/widgets/42):  |   show    |   update  |   add     |   destroy

    Any other public method is an action too and can be requested
    explicitly as ``/widgets/42/publish`` or ``/widgets/publish``.

    Methods of actions on elements receive the identifier as their only
    argument, identifiers are strings unless ``key_type`` is set to
    ``int`` or ``float``.

    A ``_default(action, *args)`` method, when provided, is called for
    resolved actions the controller doesn't implement.

    """
    #: Type identifiers of this resource are converted to.
    key_type = str

    #: Relationships to other resources, see :mod:`restrack.controllers.relationships`
    relationships = ()

    _binder = RelationshipBinder()

    def __init__(self, resource_request):
        self.resource_request = resource_request
        self.request = resource_request.request
        self.params = resource_request.params
        self.post_params = resource_request.post_params
        self.get_params = resource_request.get_params
        self.action = None
        self.id = None

    @classmethod
    def format_string_id(cls, id):
        """Convert an identifier coming from the url to the ``key_type`` of the resource."""
        return coerce_identifier(id, cls.key_type)

    @classmethod
    def is_action(cls, term):
        """Whenever ``term`` names an action or relationship of the controller."""
        return isinstance(term, str) and (term in cls._actions or term in cls._relationships)

    def call(self):
        """Run the action requested to the controller and return its output."""
        self.determine_action()

        relationship = self._relationships.get(self.action)
        if relationship is not None:
            return self._binder.follow(self, relationship)

        args = []
        if self.id is not None:
            args.append(self.id)

        if self.action in self._actions:
            return getattr(self, self.action)(*args)

        fallback = getattr(self, '_default', None)
        if fallback is not None:
            return fallback(self.action, *args)

        raise MethodNotAllowed('Method not provided on controller.')

    def determine_action(self):
        """Find the action, and id if relevant, that the controller must call."""
        url_chain = self.resource_request.url_chain

        action = None
        term = url_chain.shift()
        if term is None:
            id = None
        elif self.is_action(term):
            action = term
            id = None if self.is_action(url_chain.peek()) else url_chain.shift()
        else:
            # id terms which are not strings can be pushed on the url chain by relationships
            try:
                self.format_string_id(term)
            except InvalidIdentifier:
                # not a valid id, so this is a request for an action that doesn't exist
                raise MethodNotAllowed('Action not provided or found and unknown HTTP request method.')
            id = term
            term = url_chain.shift()
            if term is not None:
                if not self.is_action(term):
                    raise MethodNotAllowed('Action not provided or found and unknown HTTP request method.')
                action = term

        self.id = self.format_string_id(id)
        if action is None:
            action = self._action_from_context()
        self.action = action

        log.debug('%s resolved action %s with id %r', self.__class__.__name__,
                  self.action, self.id)
        return self.action, self.id

    def _action_from_context(self):
        try:
            collection_action, element_action = VERB_ACTIONS[self.request.method]
        except KeyError:
            raise MethodNotAllowed('Action not provided or found and unknown HTTP request method.')
        return collection_action if self.id is None else element_action

    def package_errors(self, errors):
        """Report ``errors`` as the result of the action.

        The errors are answered with a *422 Unprocessable Entity* status,
        which is what ActiveResource expects for attribute input errors::

            def create(self):
                if 'name' not in self.params:
                    return self.package_errors(['name is required'])

        """
        return ErrorList(errors)

    def package_error(self, error):
        errors = [error] if isinstance(error, str) else error
        return self.package_errors(errors)


__all__ = ['ResourceController', 'VERB_ACTIONS']
