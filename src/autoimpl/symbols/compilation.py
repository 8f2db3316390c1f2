"""In-memory compilation snapshot used by hosts without a live compiler."""

from __future__ import annotations

from collections.abc import Iterable

from autoimpl.symbols.model import NamedTypeSymbol
from autoimpl.syntax.model import CompilationUnit


class InMemoryCompilation:
    """Read-only program view: source files plus the type symbols they declare.

    A metadata name declared by more than one symbol is ambiguous and does not
    resolve, the same way a compiler refuses to pick between duplicates.
    """

    def __init__(
        self,
        syntax_trees: Iterable[CompilationUnit] = (),
        symbols: Iterable[NamedTypeSymbol] = (),
    ) -> None:
        self._syntax_trees = tuple(syntax_trees)
        self._symbols = tuple(symbols)
        index: dict[str, list[NamedTypeSymbol]] = {}
        for symbol in self._symbols:
            index.setdefault(symbol.metadata_name, []).append(symbol)
        self._index = {name: tuple(found) for name, found in index.items()}

    @property
    def syntax_trees(self) -> tuple[CompilationUnit, ...]:
        return self._syntax_trees

    @property
    def symbols(self) -> tuple[NamedTypeSymbol, ...]:
        return self._symbols

    def get_type_by_metadata_name(self, metadata_name: str) -> NamedTypeSymbol | None:
        found = self._index.get(metadata_name, ())
        if len(found) != 1:
            return None
        return found[0]

    def with_syntax_trees(self, syntax_trees: Iterable[CompilationUnit]) -> InMemoryCompilation:
        """Return a new snapshot with the given files and the same symbols."""
        return InMemoryCompilation(syntax_trees=syntax_trees, symbols=self._symbols)
