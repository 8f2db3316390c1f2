"""Interface resolution against the host symbol oracle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from autoimpl.cancellation import CancellationToken, observe
from autoimpl.models import Found, NotFound, Resolution
from autoimpl.symbols.model import NamedTypeSymbol, SymbolResolver


def candidate_names(name: str, imports: Sequence[str]) -> Iterator[str]:
    """Yield the bare name first, then one import-qualified name per import."""
    yield name
    for import_path in imports:
        yield f"{import_path}.{name}"


def resolve_interface(
    name: str,
    imports: Sequence[str],
    resolver: SymbolResolver,
    cancellation: CancellationToken | None = None,
) -> Resolution[NamedTypeSymbol]:
    """Resolve a requested interface name the way the compiler's own lookup would.

    The first candidate that names an interface wins. Anything else, including
    a candidate that names a class, counts as a miss and probing continues.
    """
    if not name.strip():
        return NotFound(name=name, reason="empty")

    for candidate in candidate_names(name, imports):
        observe(cancellation, "resolve_interface")
        symbol = resolver.get_type_by_metadata_name(candidate)
        if symbol is not None and symbol.is_interface:
            return Found(symbol)
    return NotFound(name=name)
