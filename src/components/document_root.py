"""
Document Root Component - Host Abstraction Layer

The class list on the page's root element. The theme service toggles the
"dark" marker here; the stylesheet does the rest.
"""

from typing import Iterable, Protocol, Set, Tuple


class DocumentRoot(Protocol):
    def add(self, class_name: str) -> None: ...

    def remove(self, class_name: str) -> None: ...

    def contains(self, class_name: str) -> bool: ...


class RootClassList:
    """In-memory root class list (add/remove are idempotent, like DOMTokenList)"""

    def __init__(self, classes: Iterable[str] = ()):
        self._classes: Set[str] = set(classes)

    def add(self, class_name: str) -> None:
        self._classes.add(class_name)

    def remove(self, class_name: str) -> None:
        self._classes.discard(class_name)

    def contains(self, class_name: str) -> bool:
        return class_name in self._classes

    @property
    def classes(self) -> Tuple[str, ...]:
        return tuple(sorted(self._classes))
