"""
Registry of the resource controllers of a web service.

Controllers are registered by resource name when the application
starts. Dispatch looks them up for the resource requested at the root
of the url and for every relationship it follows, so after startup the
registry is frozen and only read.
"""
import logging

from ..configuration.utils import ConfigError
from ..exceptions import ServerMisconfiguration
from .resourcecontroller import ResourceController

log = logging.getLogger(__name__)


class ControllerRegistry(object):
    """Maps resource names to the controller classes serving them."""

    def __init__(self, controllers=None):
        self._controllers = {}
        self._frozen = False
        for resource_name, controller in (controllers or {}).items():
            self.register(resource_name, controller)

    @property
    def frozen(self):
        return self._frozen

    def register(self, resource_name, controller=None):
        """Register ``controller`` as the one serving ``resource_name``.

        Can also be used as a class decorator::

            @registry.register('widgets')
            class WidgetsController(ResourceController):
                ...

        """
        if controller is None:
            def _register(controller):
                self.register(resource_name, controller)
                return controller
            return _register

        if self._frozen:
            raise ConfigError('Cannot register %s, controllers registry is already in use'
                              % resource_name)

        if not (isinstance(controller, type) and issubclass(controller, ResourceController)):
            raise ConfigError('%r is not a ResourceController' % (controller,))

        if resource_name in self._controllers:
            raise ConfigError('Resource %s is already served by %s'
                              % (resource_name, self._controllers[resource_name].__name__))

        log.debug('Registering %s for resource %s', controller.__name__, resource_name)
        self._controllers[resource_name] = controller
        return controller

    def freeze(self):
        """Prevent further registrations, done when the web service is created."""
        self._frozen = True

    def resolve(self, resource_name):
        try:
            return self._controllers[resource_name]
        except (KeyError, TypeError):
            raise ServerMisconfiguration('No controller registered for resource %s.'
                                         % (resource_name,))

    def dispatch(self, resource_name, resource_request):
        """Create the controller of ``resource_name`` and call it for ``resource_request``."""
        controller = self.resolve(resource_name)
        log.debug('Dispatching %s to %s, remaining %r', resource_name,
                  controller.__name__, resource_request.url_chain)
        return controller(resource_request).call()

    def __contains__(self, resource_name):
        return resource_name in self._controllers

    def __iter__(self):
        return iter(self._controllers)

    def __len__(self):
        return len(self._controllers)


#: The registry used by web services which are not given one explicitly.
controllers = ControllerRegistry()
register = controllers.register


__all__ = ['ControllerRegistry', 'controllers', 'register']
