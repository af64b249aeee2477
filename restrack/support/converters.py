# (c) 2005 Ian Bicking and contributors; written for Paste (http://pythonpaste.org)
# Licensed under the MIT license: http://www.opensource.org/licenses/mit-license.php
#
# Adapted to RESTRack
import logging
import math

from ..exceptions import InvalidIdentifier, ServerMisconfiguration


def asbool(obj):
    if isinstance(obj, str):
        obj = obj.strip().lower()
        if obj in ["true", "yes", "on", "y", "t", "1"]:
            return True
        elif obj in ["false", "no", "off", "n", "f", "0"]:
            return False
        else:
            raise ValueError("String is not true/false: %r" % obj)
    return bool(obj)


def aslist(obj, sep=',', strip=True):
    if isinstance(obj, str):
        lst = obj.split(sep)
        if strip:
            lst = [v.strip() for v in lst]
        return [v for v in lst if v]
    elif isinstance(obj, (list, tuple, set, frozenset)):
        return list(obj)
    elif obj is None:
        return []
    else:
        return [obj]


def aslogger(val):
    if isinstance(val, logging.Logger):
        return val

    if not isinstance(val, str):
        raise ValueError("Logger names must be strings")

    return logging.getLogger(val)


def coerce_identifier(raw, key_type):
    """Convert an identifier coming from the url to ``key_type``.

    Only strings are converted, identifiers pushed on the url chain by
    relationships already have their final type and are returned as they are.
    ``str`` keys (or no key type at all) leave the identifier untouched,
    ``int`` and ``float`` keys parse it.

    """
    if raw is None or not isinstance(raw, str):
        return raw

    if key_type is None:
        return raw

    if not isinstance(key_type, type) or issubclass(key_type, bool):
        raise ServerMisconfiguration('Invalid key identifier type %r specified on resource.'
                                     % (key_type,))

    if issubclass(key_type, str):
        return raw

    if issubclass(key_type, (int, float)):
        try:
            value = key_type(raw)
        except (TypeError, ValueError):
            raise InvalidIdentifier('Identifier %r is not a valid %s.'
                                    % (raw, key_type.__name__))

        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidIdentifier('Identifier %r is not a valid %s.'
                                    % (raw, key_type.__name__))
        return value

    raise ServerMisconfiguration('Invalid key identifier type %s specified on resource.'
                                 % key_type.__name__)
