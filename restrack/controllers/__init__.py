from .registry import ControllerRegistry, controllers, register
from .relationships import (Relationship, has_defined_relationships_to,
                            has_direct_relationship_to, has_mapped_relationships_to,
                            has_relationship_to, has_relationships_to, pass_through_to)
from .resourcecontroller import ResourceController

__all__ = [
    "ControllerRegistry",
    "Relationship",
    "ResourceController",
    "controllers",
    "register",
    "has_relationship_to",
    "has_direct_relationship_to",
    "has_relationships_to",
    "has_defined_relationships_to",
    "has_mapped_relationships_to",
    "pass_through_to",
]
