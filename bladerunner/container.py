"""
Service Container
Laravel-style container holding keyed bindings for the view layer
"""
import inspect
from typing import Dict, List, Any, Optional

from bladerunner.exceptions import BindingResolutionException
from bladerunner.logging import getLogger

logger = getLogger(__name__)


class Container:
    """
    Application container

    Bindings are stored as dicts:
        {'type': 'singleton' | 'factory', 'factory': callable | None,
         'instance': object | None, 'resolved': bool}

    Example:
        app = Container()
        app.singleton('files', Filesystem)
        app.bind('clock', lambda app: datetime.now())
        files = app['files']
    """

    _instance: Optional['Container'] = None

    def __init__(self):
        self.bindings: Dict[str, Dict[str, Any]] = {}
        self._build_stack: List[str] = []

    @classmethod
    def get_instance(cls) -> 'Container':
        """Get the globally available container, creating it on first use"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_instance(cls, container: Optional['Container'] = None) -> Optional['Container']:
        """Replace (or clear, with None) the globally available container"""
        cls._instance = container
        return container

    def bind(self, abstract, concrete=None, shared: bool = False):
        """
        Register a binding

        Args:
            abstract: Binding key (a string, or a class used as its own key)
            concrete: Factory taking the container, a class, or None to build `abstract`
            shared: Cache the first resolved instance
        """
        key = self._key(abstract)
        if concrete is None:
            concrete = abstract

        if not callable(concrete):
            raise BindingResolutionException(
                f"Binding [{key}] must be a class or a factory callable."
            )

        self.bindings[key] = {
            'type': 'singleton' if shared else 'factory',
            'factory': self._wrap(concrete),
            'instance': None,
            'resolved': False,
        }
        logger.debug("Bound [%s] (%s)", key, self.bindings[key]['type'])

    def bind_if(self, abstract, concrete=None, shared: bool = False) -> bool:
        """Register a binding only if the key is not already bound"""
        if self.bound(abstract):
            return False
        self.bind(abstract, concrete, shared)
        return True

    def singleton(self, abstract, factory_or_instance=None):
        """
        Register a shared binding
        If factory or class: built once on first make() and cached
        If instance: stored directly
        """
        if factory_or_instance is None or callable(factory_or_instance):
            self.bind(abstract, factory_or_instance, shared=True)
        else:
            self.instance(abstract, factory_or_instance)

    def singleton_if(self, abstract, factory_or_instance=None) -> bool:
        """Register a shared binding only if the key is not already bound"""
        if self.bound(abstract):
            return False
        self.singleton(abstract, factory_or_instance)
        return True

    def instance(self, abstract, instance):
        """Store an already built instance"""
        key = self._key(abstract)
        self.bindings[key] = {'type': 'singleton', 'factory': None, 'instance': instance, 'resolved': True}
        logger.debug("Stored instance for [%s]", key)
        return instance

    def make(self, abstract) -> Any:
        """Resolve a binding from the container"""
        key = self._key(abstract)

        if key not in self.bindings:
            raise BindingResolutionException(f"Target [{key}] is not bound.")

        binding = self.bindings[key]

        if binding['type'] == 'singleton' and binding['resolved']:
            return binding['instance']

        if key in self._build_stack:
            chain = ' -> '.join(self._build_stack + [key])
            raise BindingResolutionException(
                f"Circular dependency while resolving [{key}]: {chain}"
            )

        self._build_stack.append(key)
        try:
            obj = binding['factory'](self)
        finally:
            self._build_stack.pop()

        if binding['type'] == 'singleton':
            binding['instance'] = obj
            binding['resolved'] = True
            logger.debug("Resolved shared instance for [%s]", key)

        return obj

    def bound(self, abstract) -> bool:
        """Check if a binding exists in the container"""
        return self._key(abstract) in self.bindings

    has = bound

    def resolved(self, abstract) -> bool:
        """Check if a shared binding has already been built"""
        binding = self.bindings.get(self._key(abstract))
        return bool(binding) and binding['type'] == 'singleton' and binding['resolved']

    def forget_instance(self, abstract):
        """Drop a cached shared instance (the binding itself stays)"""
        binding = self.bindings.get(self._key(abstract))
        if binding and binding['factory'] is not None:
            binding['instance'] = None
            binding['resolved'] = False

    def forget_instances(self):
        for key in self.bindings:
            self.forget_instance(key)

    def forget(self, abstract):
        """Remove a binding entirely"""
        self.bindings.pop(self._key(abstract), None)

    def flush(self):
        """Remove every binding"""
        self.bindings.clear()
        self._build_stack.clear()

    def get_bindings(self) -> Dict[str, Dict[str, Any]]:
        """
        Get all container bindings
        """
        result = {}
        for key, binding in self.bindings.items():
            result[key] = {
                'type': binding['type'],
                'instantiated': binding['resolved'] if binding['type'] == 'singleton' else None
            }
        return result

    def list_bindings(self) -> str:
        """
        Get a formatted list of all container bindings
        """
        bindings = self.get_bindings()

        if not bindings:
            return "No bindings registered in container."

        singletons = []
        factories = []

        for key, info in bindings.items():
            if info['type'] == 'singleton':
                status = '✓ instantiated' if info['instantiated'] else '○ lazy'
                singletons.append(f"  {key:<30} [{status}]")
            else:
                factories.append(f"  {key:<30} [new instance each call]")

        output = []

        if singletons:
            output.append("Singletons:")
            output.extend(sorted(singletons))

        if factories:
            if output:
                output.append("")
            output.append("Factories (bind):")
            output.extend(sorted(factories))

        return "\n".join(output)

    def __getitem__(self, abstract):
        return self.make(abstract)

    def __setitem__(self, abstract, value):
        if callable(value):
            self.bind(abstract, value)
        else:
            self.instance(abstract, value)

    def __delitem__(self, abstract):
        self.forget(abstract)

    def __contains__(self, abstract) -> bool:
        return self.bound(abstract)

    @staticmethod
    def _key(abstract) -> str:
        if inspect.isclass(abstract):
            return f"{abstract.__module__}.{abstract.__qualname__}"
        return abstract

    @staticmethod
    def _wrap(concrete):
        # Classes are built with no arguments, everything else receives the container
        if inspect.isclass(concrete):
            return lambda app: concrete()
        return concrete
