"""Namespace enumeration over importable Python packages.

Uses the pkgutil + importlib pattern: the namespace is imported, walked
recursively with ``pkgutil.walk_packages``, and every module found is
imported so its classes can be inspected.
"""

import importlib
import inspect
import logging
import pkgutil
import sys
from types import ModuleType
from typing import Iterator, NoReturn, Type

from interface_processor.domain import DiscoveryError, INamespaceEnumerator

logger = logging.getLogger(__name__)


class ModuleWalker(INamespaceEnumerator):
    """Lists the classes declared under a dotted package name.

    Only classes whose ``__module__`` is the module being inspected are
    listed, so re-exported names are reported once, by their own module.
    """

    def list_types(self, namespace: str) -> Iterator[Type]:
        for module in self._walk(namespace):
            for _, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ == module.__name__:
                    yield obj

    def _walk(self, namespace: str) -> Iterator[ModuleType]:
        root = self._import(namespace, namespace)
        yield root

        package_path = getattr(root, "__path__", None)
        if package_path is None:
            return

        def onerror(module_name: str) -> NoReturn:
            # walk_packages calls this from inside its except block
            cause = sys.exc_info()[1]
            raise DiscoveryError(namespace, f"cannot import package {module_name}: {cause}") from cause

        for _, module_name, _ in pkgutil.walk_packages(package_path, prefix=f"{namespace}.", onerror=onerror):
            yield self._import(module_name, namespace)

    @staticmethod
    def _import(module_name: str, namespace: str) -> ModuleType:
        try:
            module = importlib.import_module(module_name)
        except Exception as e:
            raise DiscoveryError(namespace, f"cannot import module {module_name}: {e}") from e
        logger.debug(f"Imported module {module_name}")
        return module
