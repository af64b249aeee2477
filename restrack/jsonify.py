"""JSON encoding functions."""

import datetime
import decimal
import types
import uuid

from json import JSONEncoder as _JSONEncoder

from webob.multidict import MultiDict

import logging
log = logging.getLogger(__name__)


class JsonEncodeError(Exception):
    """JSON Encode error"""


class JSONEncoder(_JSONEncoder):
    """RESTRack custom JSONEncoder.

    Provides support for encoding objects commonly returned by resource
    controllers, like:

        - Dates
        - Decimals
        - UUIDs
        - Sets
        - Generators

    Support for additional types is provided through the ``__json__`` method
    that will be called on the object by the JSONEncoder when provided and through
    the ability to register custom encoder for specific types using
    :meth:`.JSONEncoder.register_custom_encoder`.

    """
    def __init__(self, **kwargs):
        self._registered_types_map = {}
        self._registered_types_list = tuple()

        kwargs = self.configure(**kwargs)
        super(JSONEncoder, self).__init__(**kwargs)

    def configure(self, isodates=False, custom_encoders=None, allow_lists=True, **kwargs):
        """JSON encoder can be configured through :class:`.AppConfig`
        using the following options:

        - ``json.isodates`` -> encode dates using ISO8601 format
        - ``json.custom_encoders`` -> Dictionary of ``type: encode_func`` to register
          custom encoders for specific types.
        - ``json.allow_lists`` -> Allows top level lists to be encoded. Collections
          returned by ``index`` actions are lists, so this is enabled unless
          protection against JSON hijacking is required.

        """
        self._isodates = isodates
        self._allow_lists = allow_lists
        if custom_encoders is not None:
            for type_, encoder in custom_encoders.items():
                self.register_custom_encoder(type_, encoder)
        return kwargs

    def register_custom_encoder(self, objtype, encoder):
        """Register a custom encoder for the given type.

        Instead of using standard behavior for encoding the given type to JSON, the
        ``encoder`` will used instead. ``encoder`` must be a callable that takes
        the object as argument and returns an object that can be encoded in JSON (usually a dict).

        """
        if objtype in self._registered_types_map:
            log.warning('%s type already registered for a custom encoder, replacing it', objtype)

        self._registered_types_map[objtype] = encoder
        # Append to head, so we find first the last registered types
        self._registered_types_list = (objtype, ) + self._registered_types_list

    def default(self, obj):
        if isinstance(obj, self._registered_types_list):
            for type_, encoder in self._registered_types_map.items():
                if isinstance(obj, type_):
                    return encoder(obj)
        elif hasattr(obj, '__json__') and callable(obj.__json__):
            return obj.__json__()
        elif isinstance(obj, (datetime.date, datetime.datetime, datetime.time)):
            if self._isodates:
                if isinstance(obj, (datetime.datetime, datetime.time)):
                    obj = obj.replace(microsecond=0)
                return obj.isoformat()
            else:
                return str(obj)
        elif isinstance(obj, decimal.Decimal):
            return float(obj)
        elif isinstance(obj, uuid.UUID):
            return str(obj)
        elif isinstance(obj, (set, frozenset)):
            return list(obj)
        elif isinstance(obj, MultiDict):
            return obj.mixed()
        elif isinstance(obj, types.GeneratorType):
            return list(obj)
        return _JSONEncoder.default(self, obj)


_default_encoder = JSONEncoder()


def encode(obj, encoder=None):
    """Return a JSON string representation of a Python object."""
    if encoder is None:
        encoder = _default_encoder

    if encoder._allow_lists is False and isinstance(obj, (list, tuple, types.GeneratorType)):
        raise JsonEncodeError('Your Encoded object must be dict-like.')

    return encoder.encode(obj)
