"""FunctionRegistry class."""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Iterator, Mapping, TypeVar

from funcgrid.types import IncompleteCatalogError, UnknownFunctionTag

E = TypeVar("E", bound=Enum)


class FunctionRegistry(Generic[E]):
    """Maps every member of a closed tag enum to exactly one pure evaluator.

    The catalog is fixed at construction. Building a registry that leaves a
    tag without an evaluator, or that registers a tag from another enum,
    raises IncompleteCatalogError.
    """

    def __init__(self, tags: type[E], functions: Mapping[E, Callable[..., Any]]) -> None:
        self._tags = tags
        self._functions: dict[E, Callable[..., Any]] = {}
        for tag, fn in functions.items():
            self._register(tag, fn)

        missing = [tag.name for tag in tags if tag not in self._functions]
        if missing:
            raise IncompleteCatalogError(
                f"{tags.__name__} has no evaluator for: {', '.join(missing)}"
            )

    def _register(self, tag: E, fn: Callable[..., Any]) -> None:
        if not isinstance(tag, self._tags):
            raise IncompleteCatalogError(
                f"{tag!r} is not a member of {self._tags.__name__}"
            )
        if tag in self._functions:
            raise IncompleteCatalogError(f"Duplicate evaluator for {tag!r}")
        if not callable(fn):
            raise IncompleteCatalogError(f"Evaluator for {tag!r} is not callable")
        self._functions[tag] = fn

    @property
    def tags(self) -> type[E]:
        return self._tags

    def get(self, tag: E) -> Callable[..., Any]:
        """Look up an evaluator. Raises UnknownFunctionTag for foreign tags."""
        fn = self._functions.get(tag) if isinstance(tag, self._tags) else None
        if fn is None:
            raise UnknownFunctionTag(
                tag, f"Unknown {self._tags.__name__} tag: {tag!r}"
            )
        return fn

    def evaluate(self, tag: E, *inputs: float) -> Any:
        return self.get(tag)(*inputs)

    def resolve(self, tag: E | str) -> E:
        """Return the enum member for a member, its name or its value."""
        if isinstance(tag, self._tags):
            return tag
        if isinstance(tag, str):
            key = tag.strip().lower()
            for member in self._tags:
                if key == member.name.lower() or key == str(member.value).lower():
                    return member
        raise UnknownFunctionTag(
            tag, f"Unknown {self._tags.__name__} tag: {tag!r}"
        )

    def first(self) -> E:
        return next(iter(self._tags))

    def next_after(self, tag: E) -> E:
        """Return the tag following ``tag`` in declaration order, wrapping around."""
        members = list(self._tags)
        index = members.index(self.resolve(tag))
        return members[(index + 1) % len(members)]

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, self._tags) and tag in self._functions

    def __iter__(self) -> Iterator[E]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)
