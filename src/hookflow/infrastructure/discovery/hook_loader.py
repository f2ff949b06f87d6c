"""Hook discovery from Python modules and files.

Imports the given modules (by dotted name) or source files (by path, a
single ``.py`` file or every ``.py`` file in a directory), instantiates
the HookDefinition subclasses each one defines, and returns them for
registration. Nothing is registered here.

Failures to import a module or to instantiate a hook class are recorded
in the result rather than raised, so one broken plugin does not hide
the others.
"""

import importlib
import importlib.util
import inspect
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType

from hookflow.core.hooks.hook_definition import HookDefinition
from hookflow.core.logging import get_logger

logger = get_logger(__name__)

# Parent name for modules loaded from files, so they never shadow real imports
PLUGIN_NAMESPACE = "hookflow_plugins"


@dataclass
class DiscoveryResult:
    """Hooks found by a HookLoader.

    Attributes:
        hooks: Instantiated hooks, in discovery order.
        errors: Messages for modules or classes that could not be loaded.
        skipped: Class names skipped because their identifier was already seen.
    """

    hooks: list[HookDefinition] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def merge(self, other: "DiscoveryResult") -> None:
        """Append another result's hooks, errors and skips."""
        self.hooks.extend(other.hooks)
        self.errors.extend(other.errors)
        self.skipped.extend(other.skipped)


class HookLoader:
    """Loads hook definitions from modules and source files.

    Args:
        skip_duplicates: Skip hooks whose identifier was already
            discovered by this loader. Validation turns this off so that
            duplicates can be reported.

    Example:
        loader = HookLoader()
        result = loader.load(modules=["myapp.hooks"], paths=["plugins/"])
        registry.register_many(result.hooks)
    """

    def __init__(self, skip_duplicates: bool = True) -> None:
        self.skip_duplicates = skip_duplicates
        self._seen_identifiers: set[str] = set()

    def load(
        self,
        modules: Iterable[str] = (),
        paths: Iterable[str | Path] = (),
    ) -> DiscoveryResult:
        """Load hooks from modules and paths.

        Args:
            modules: Dotted module names.
            paths: Python files or directories.

        Returns:
            Combined discovery result.
        """
        result = DiscoveryResult()
        for module_name in modules:
            result.merge(self.load_module(module_name))
        for path in paths:
            result.merge(self.load_path(path))

        logger.info(
            "Hook discovery finished",
            hook_count=len(result.hooks),
            error_count=len(result.errors),
            skipped_count=len(result.skipped),
        )
        return result

    def load_module(self, module_name: str) -> DiscoveryResult:
        """Import a module by dotted name and collect its hooks."""
        try:
            module = importlib.import_module(module_name)
        except Exception as e:
            return self._failed(f"Failed to import module {module_name}: {e}", module_name)

        return self.collect(module)

    def load_path(self, path: str | Path) -> DiscoveryResult:
        """Load hooks from a Python file or every Python file in a directory.

        Files in a directory are loaded in name order; files whose name
        starts with an underscore are ignored.
        """
        path = Path(path)

        if path.is_dir():
            logger.info("Scanning directory", directory=str(path))
            result = DiscoveryResult()
            for file_path in sorted(path.glob("*.py")):
                if file_path.name.startswith("_"):
                    continue
                result.merge(self.load_file(file_path, root=path))
            return result

        if path.is_file() and path.suffix == ".py":
            return self.load_file(path)

        if not path.exists():
            return self._failed(f"Path not found: {path}", str(path))
        return self._failed(f"Not a Python file: {path}", str(path))

    def load_file(self, file_path: Path, root: Path | None = None) -> DiscoveryResult:
        """Import a single Python source file and collect its hooks.

        The module is named after the file's path relative to ``root``
        (its own directory by default), so classes keep the same module,
        and hooks the same default identifier, wherever the plugin
        directory lives.
        """
        file_path = file_path.resolve()
        module_name = _module_name_for(file_path, (root or file_path.parent).resolve())

        try:
            spec = importlib.util.spec_from_file_location(module_name, file_path)
            if spec is None or spec.loader is None:
                return self._failed(f"Failed to process file {file_path}", str(file_path))

            module = importlib.util.module_from_spec(spec)
            sys.modules[module_name] = module
            try:
                spec.loader.exec_module(module)
            except BaseException:
                sys.modules.pop(module_name, None)
                raise
        except Exception as e:
            return self._failed(f"Failed to process file {file_path}: {e}", str(file_path))

        logger.debug("Processed file", file=str(file_path))
        return self.collect(module)

    def collect(self, module: ModuleType) -> DiscoveryResult:
        """Instantiate every HookDefinition subclass defined in a module.

        Classes imported into the module from elsewhere are ignored.
        """
        result = DiscoveryResult()

        for _, hook_class in inspect.getmembers(module, inspect.isclass):
            if not issubclass(hook_class, HookDefinition) or hook_class is HookDefinition:
                continue
            if hook_class.__module__ != module.__name__:
                continue
            if inspect.isabstract(hook_class):
                continue

            class_name = f"{hook_class.__module__}.{hook_class.__qualname__}"
            try:
                hook = hook_class()
                identifier = hook.identifier
            except Exception as e:
                result.errors.append(f"Failed to instantiate hook {class_name}: {e}")
                logger.warning("Hook instantiation failed", hook_class=class_name, error=str(e))
                continue

            if self.skip_duplicates and identifier in self._seen_identifiers:
                result.skipped.append(class_name)
                logger.warning(
                    "Skipping duplicate hook identifier",
                    hook_identifier=identifier,
                    hook_class=class_name,
                )
                continue

            self._seen_identifiers.add(identifier)
            result.hooks.append(hook)
            logger.debug("Added hook", hook_identifier=identifier, hook_class=class_name)

        return result

    def _failed(self, message: str, source: str) -> DiscoveryResult:
        logger.warning("Hook source could not be loaded", source=source, error=message)
        return DiscoveryResult(errors=[message])


def _module_name_for(file_path: Path, root: Path) -> str:
    relative = file_path.relative_to(root).with_suffix("")
    return ".".join((PLUGIN_NAMESPACE, *relative.parts))
