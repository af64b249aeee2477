"""Relationships between resources.

A controller declares the resources it is related to in its
``relationships`` attribute::

    class WidgetsController(ResourceController):
        key_type = int
        relationships = (
            has_relationship_to('makers', lambda id: Widget.get(id).maker_id,
                                as_='maker'),
            has_relationships_to('parts', lambda id: Widget.get(id).part_ids),
        )

Each relationship is exposed as an action of the controller named after
the related resource (or the ``as_`` argument). When a request reaches
the action, like ``GET /widgets/42/parts/3``, the related identifier is
resolved from the widget id, pushed back on the url chain and dispatch
starts again on the related controller.

+------------------------------+------------------------+------------------------------+
| Declaration                  | Resolver returns       | Url                          |
+==============================+========================+==============================+
| has_relationship_to          | the related id         | /widgets/42/maker            |
+------------------------------+------------------------+------------------------------+
| has_relationships_to         | list of ids            | /widgets/42/parts/<index>    |
+------------------------------+------------------------+------------------------------+
| has_defined_relationships_to | list of ids            | /widgets/42/parts/<id>       |
+------------------------------+------------------------+------------------------------+
| has_mapped_relationships_to  | dictionary key -> id   | /widgets/42/parts/<key>      |
+------------------------------+------------------------+------------------------------+
| pass_through_to              | nothing                | /widgets/42/parts/...        |
+------------------------------+------------------------+------------------------------+

"""
import logging

from ..exceptions import BadRequest, NotFound

log = logging.getLogger(__name__)

SINGLE = 'single'
INDEXED = 'indexed'
VALIDATED = 'validated'
MAPPED = 'mapped'
PASS_THROUGH = 'pass_through'

KINDS = (SINGLE, INDEXED, VALIDATED, MAPPED, PASS_THROUGH)


class Relationship(object):
    """Declaration of a relationship from a controller to a resource.

    ``resource`` is the name the related controller is registered with,
    ``name`` is the action the relationship is exposed as and ``resolver``
    is called with the identifier of the calling resource to get the
    related identifier(s).

    """
    __slots__ = ('resource', 'name', 'kind', 'resolver')

    def __init__(self, resource, kind, resolver=None, name=None):
        if kind not in KINDS:
            raise ValueError('Unknown relationship kind: %r' % (kind,))
        if resolver is None and kind != PASS_THROUGH:
            raise ValueError('%s relationship to %s requires a resolver' % (kind, resource))

        self.resource = resource
        self.kind = kind
        self.resolver = resolver
        self.name = name or resource

    def __repr__(self):
        return '<Relationship %s %s -> %s>' % (self.kind, self.name, self.resource)


def has_relationship_to(resource, resolver, as_=None):
    """A single link to a member of ``resource``.

    ``resolver`` receives the calling resource id and returns the
    id of the related resource.

    """
    return Relationship(resource, SINGLE, resolver, as_)

has_direct_relationship_to = has_relationship_to


def has_relationships_to(resource, resolver, as_=None):
    """Links to members of ``resource`` addressed by their position.

    ``resolver`` returns a list of ids, the url segment after the
    relationship is the index of the related resource in the list.

    """
    return Relationship(resource, INDEXED, resolver, as_)


def has_defined_relationships_to(resource, resolver, as_=None):
    """Links to members of ``resource`` addressed by their id.

    ``resolver`` returns the list of ids that are related, the url
    segment after the relationship must be one of them.

    """
    return Relationship(resource, VALIDATED, resolver, as_)


def has_mapped_relationships_to(resource, resolver, as_=None):
    """Links to members of ``resource`` addressed by name.

    ``resolver`` returns a dictionary from names to ids, the url
    segment after the relationship is the name.

    """
    return Relationship(resource, MAPPED, resolver, as_)


def pass_through_to(resource, as_=None):
    """Access ``resource`` under the calling one without linking to a member."""
    return Relationship(resource, PASS_THROUGH, None, as_)


class RelationshipBinder(object):
    """Follows relationships during dispatch.

    Each kind of relationship takes what it needs from the url chain,
    pushes the identifier it resolved in front of it and delegates the
    request to the related controller.

    """

    def __init__(self):
        self._steps = {
            SINGLE: self._follow_single,
            INDEXED: self._follow_indexed,
            VALIDATED: self._follow_validated,
            MAPPED: self._follow_mapped,
            PASS_THROUGH: self._follow_pass_through
        }

    def follow(self, controller, relationship):
        log.debug('Following %r from %s(%r)', relationship,
                  controller.__class__.__name__, controller.id)
        step = self._steps[relationship.kind]
        return step(controller, relationship)

    def _delegate(self, controller, relationship, related_id):
        resource_request = controller.resource_request
        resource_request.url_chain.unshift(related_id)
        return resource_request.call_controller(relationship.resource)

    def _follow_single(self, controller, relationship):
        related_id = relationship.resolver(controller.id)
        if related_id is None:
            raise NotFound('Relation %s has no %s.' % (relationship.name, relationship.resource))
        return self._delegate(controller, relationship, related_id)

    def _follow_indexed(self, controller, relationship):
        related_ids = relationship.resolver(controller.id)

        index = controller.resource_request.url_chain.shift()
        try:
            index = int(index)
        except (TypeError, ValueError):
            raise BadRequest('You requested an item by index and the index '
                             'was not a valid number.')

        if not 0 <= index < len(related_ids):
            raise NotFound("You requested an item by index and the index was larger "
                           "than this item's list of relations' length.")

        return self._delegate(controller, relationship, related_ids[index])

    def _follow_validated(self, controller, relationship):
        related_ids = relationship.resolver(controller.id)

        resource_request = controller.resource_request
        candidate = resource_request.url_chain.shift()
        if candidate is None:
            raise BadRequest('No ID provided for %s relationship.' % relationship.name)

        if isinstance(candidate, str):
            related_controller = resource_request.registry.resolve(relationship.resource)
            candidate = related_controller.format_string_id(candidate)

        if candidate not in related_ids:
            raise NotFound('Relation entity does not belong to referring resource.')

        return self._delegate(controller, relationship, candidate)

    def _follow_mapped(self, controller, relationship):
        related_ids = relationship.resolver(controller.id)

        key = controller.resource_request.url_chain.shift()
        if key is None:
            raise BadRequest('No key provided for %s relationship.' % relationship.name)

        try:
            related_id = related_ids[key]
        except (KeyError, TypeError):
            related_id = None

        if related_id is None:
            raise NotFound('%s is not a known %s of this resource.' % (key, relationship.name))

        return self._delegate(controller, relationship, related_id)

    def _follow_pass_through(self, controller, relationship):
        return controller.resource_request.call_controller(relationship.resource)


__all__ = ['Relationship', 'RelationshipBinder', 'has_relationship_to',
           'has_direct_relationship_to', 'has_relationships_to',
           'has_defined_relationships_to', 'has_mapped_relationships_to',
           'pass_through_to', 'KINDS']
