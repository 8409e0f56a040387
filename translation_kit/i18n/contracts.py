"""Protocol implemented by every source of translation lines."""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class Loader(Protocol):
    """Source of translation groups, e.g. files on disk or a database."""

    def load(
        self, locale: str, group: str, namespace: Optional[str] = None
    ) -> Dict[str, Any]: ...

    def add_namespace(self, namespace: str, hint: str) -> None: ...

    def add_json_path(self, path: str) -> None: ...

    def namespaces(self) -> Dict[str, str]: ...


__all__ = ["Loader"]
