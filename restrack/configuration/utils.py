class ConfigError(Exception):pass


def coerce_options(options, converters):
    """Convert some configuration options to expected types.

    To replace given options with the converted values
    in a dictionary you might do::

        conf.update(coerce_options(conf, {
            'debug': asbool,
            'root_resource_deny': aslist
        }))
    """
    converted_options = {}
    for option, converter in converters.items():
        if option in options:
            try:
                converted_options[option] = converter(options[option])
            except ValueError as e:
                raise ConfigError('Invalid value for option %s: %s' % (option, e))
    return converted_options


def coerce_config(configuration, prefix, converters):
    """Extracts a set of options with a common prefix and converts them.

    To extract all options starting with ``json.`` from
    the ``conf`` dictionary and convert them::

        json_config = coerce_config(conf, 'json.', {
            'isodates': asbool,
            'allow_lists': asbool
        })
    """

    options = dict((key[len(prefix):], configuration[key])
                    for key in configuration if key.startswith(prefix))
    options.update(coerce_options(options, converters))
    return options


def get_partial_dict(prefix, dictionary, container_type=dict):
    """Given a dictionary and a prefix, return a dictionary
    with just items that start with prefix

    The returned dictionary will have 'prefix.' stripped so::

        get_partial_dict('prefix', {'prefix.xyz':1, 'prefix.zyx':2, 'xy':3})

    would return::

        {'xyz':1,'zyx':2}
    """

    match = prefix + "."
    n = len(match)

    new_dict = container_type(((key[n:], dictionary[key])
                                for key in dictionary
                                if key.startswith(match)))
    if new_dict:
        return new_dict
    else:
        raise AttributeError(prefix)
