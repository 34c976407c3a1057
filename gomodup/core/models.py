"""
Domain models for gomodup.

A Module mirrors one record of ``go list -m -u -json all``. Records are
immutable; a reload produces a brand new tuple of modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from .exceptions import ModuleDataError


@dataclass(frozen=True)
class ModuleUpdate:
    """An available newer version of a module."""
    path: str
    version: str


@dataclass(frozen=True)
class Module:
    """A dependency module with its resolved version and optional update."""
    path: str
    version: str = ""
    update: Optional[ModuleUpdate] = None
    main: bool = False
    indirect: bool = False

    @property
    def is_updatable(self) -> bool:
        """True when the module should appear in the update list."""
        return not self.main and self.update is not None

    @property
    def target(self) -> str:
        """The ``path@version`` argument passed to ``go get``."""
        if self.update is None:
            raise ModuleDataError(f"Module {self.path} has no available update")
        return f"{self.update.path}@{self.update.version}"

    @classmethod
    def from_record(cls, record: Any) -> Module:
        """
        Build a Module from a decoded ``go list`` JSON object.

        Args:
            record: Decoded JSON value for a single module

        Returns:
            Module instance

        Raises:
            ModuleDataError: If the record does not have the expected shape
        """
        if not isinstance(record, dict):
            raise ModuleDataError(f"Expected a JSON object, got {type(record).__name__}")

        path = record.get("Path")
        if not isinstance(path, str) or not path:
            raise ModuleDataError("Module record is missing 'Path'")

        update = None
        raw_update = record.get("Update")
        if raw_update is not None:
            if not isinstance(raw_update, dict):
                raise ModuleDataError(f"Module {path} has a malformed 'Update' field")
            update = ModuleUpdate(
                path=raw_update.get("Path") or path,
                version=raw_update.get("Version") or "",
            )
            if not update.version:
                raise ModuleDataError(f"Module {path} update is missing 'Version'")

        return cls(
            path=path,
            version=record.get("Version") or "",
            update=update,
            main=bool(record.get("Main", False)),
            indirect=bool(record.get("Indirect", False)),
        )

    def to_record(self) -> Dict[str, Any]:
        """Serialize back to the ``go list`` field names."""
        data: Dict[str, Any] = {"Path": self.path, "Version": self.version}
        if self.update is not None:
            data["Update"] = {"Path": self.update.path, "Version": self.update.version}
        if self.main:
            data["Main"] = True
        if self.indirect:
            data["Indirect"] = True
        return data


def module_sort_key(module: Module) -> Tuple[bool, str]:
    # direct modules first, then by path
    return (module.indirect, module.path)


def sort_modules(modules: Iterable[Module]) -> Tuple[Module, ...]:
    """Order modules with direct dependencies first, each group by path."""
    return tuple(sorted(modules, key=module_sort_key))


def updatable_modules(modules: Iterable[Module]) -> Tuple[Module, ...]:
    """Filter to non-main modules with an update and apply the list ordering."""
    return sort_modules(m for m in modules if m.is_updatable)
