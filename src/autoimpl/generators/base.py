"""Shared discovery, transform, and execute driver for all strategies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import ClassVar, Protocol

from autoimpl.cancellation import CancellationToken, observe
from autoimpl.compiler import MarkerTarget, emit_marker_declaration, emit_source, hint_name
from autoimpl.config import GeneratorConfig, Strategy, TypeRendering
from autoimpl.models import (
    GenerationResult,
    GenerationTarget,
    GenerationUnit,
    NotFound,
    ResolvedInterface,
)
from autoimpl.observability import StructuredLogger
from autoimpl.pipeline import (
    ReferenceDiscovery,
    annotated_declaration,
    project_interface,
    resolve_interface,
)
from autoimpl.symbols.model import Compilation, NamedTypeSymbol, SymbolResolver
from autoimpl.syntax.model import CompilationUnit, TypeDeclaration


class SourceGenerator(Protocol):
    strategy: ClassVar[Strategy]

    def marker_unit(self) -> GenerationUnit:
        """Return the marker attribute unit emitted once per pass."""

    def is_candidate(self, declaration: TypeDeclaration) -> bool:
        """Cheap syntactic filter applied before any symbol lookup."""

    def transform(
        self,
        declaration: TypeDeclaration,
        unit: CompilationUnit,
        resolver: SymbolResolver,
        cancellation: CancellationToken | None = None,
    ) -> GenerationTarget:
        """Resolve one candidate declaration into emission-ready records."""

    def execute(self, targets: Iterable[GenerationTarget]) -> tuple[GenerationUnit, ...]:
        """Render one unit per (target, interface) pair."""

    def generate(
        self,
        compilation: Compilation,
        cancellation: CancellationToken | None = None,
    ) -> GenerationResult:
        """Run a full generation pass over a compilation snapshot."""


@dataclass(slots=True)
class GeneratorBase:
    """Driver shared by the three strategies.

    Subclasses pick a ``ReferenceDiscovery``, may narrow which resolved symbols
    qualify, and decide whether the partial declaration restates the interface.
    """

    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    logger: StructuredLogger = field(default_factory=StructuredLogger)

    strategy: ClassVar[Strategy]
    discovery: ClassVar[ReferenceDiscovery]
    marker_target: ClassVar[MarkerTarget]
    implement: ClassVar[bool]

    @property
    def rendering(self) -> TypeRendering:
        return self.config.rendering_for(self.strategy)

    def is_candidate(self, declaration: TypeDeclaration) -> bool:
        return self.discovery.is_candidate(declaration, self.config)

    def accepts(self, symbol: NamedTypeSymbol) -> bool:
        return True

    def marker_unit(self) -> GenerationUnit:
        return emit_marker_declaration(self.config, self.marker_target)

    def transform(
        self,
        declaration: TypeDeclaration,
        unit: CompilationUnit,
        resolver: SymbolResolver,
        cancellation: CancellationToken | None = None,
    ) -> GenerationTarget:
        observe(cancellation, "transform")
        references = self.discovery.references(declaration, self.config)
        annotated = annotated_declaration(declaration, unit, references)
        rendering = self.rendering

        interfaces: list[ResolvedInterface] = []
        skipped: list[NotFound] = []
        seen: set[str] = set()
        for reference in annotated.references:
            observe(cancellation, "transform")
            resolution = resolve_interface(reference, annotated.imports, resolver, cancellation)
            if isinstance(resolution, NotFound):
                skipped.append(resolution)
                continue
            symbol = resolution.value
            if not self.accepts(symbol):
                skipped.append(NotFound(name=reference, reason="not_marked"))
                continue
            if symbol.metadata_name in seen:
                skipped.append(NotFound(name=reference, reason="duplicate"))
                continue
            seen.add(symbol.metadata_name)
            interfaces.append(project_interface(reference, symbol, rendering, cancellation))

        return GenerationTarget(
            declaration=annotated,
            interfaces=tuple(interfaces),
            skipped=tuple(skipped),
        )

    def execute(self, targets: Iterable[GenerationTarget]) -> tuple[GenerationUnit, ...]:
        rendering = self.rendering
        emitted: set[tuple[str, str]] = set()
        taken: set[str] = set()
        units: list[GenerationUnit] = []
        for target in targets:
            declaration = target.declaration
            for interface in target.interfaces:
                identity = (declaration.metadata_name, interface.metadata_name)
                if identity in emitted:
                    # Another part of the same partial type already implements it.
                    self.logger.log(
                        "dropped",
                        operation="execute",
                        strategy=self.strategy,
                        target=declaration.display_name,
                        interface=interface.name,
                        message="Dropped duplicate unit for a type declared in several parts.",
                        extra={"interface": interface.metadata_name},
                    )
                    continue
                unit = emit_source(
                    declaration,
                    interface,
                    config=self.config,
                    rendering=rendering,
                    implement=self.implement,
                )
                if unit.hint_name in taken:
                    unit = replace(
                        unit,
                        hint_name=hint_name(
                            declaration.metadata_name,
                            interface.metadata_name,
                            self.config.generated_suffix,
                        ),
                    )
                emitted.add(identity)
                taken.add(unit.hint_name)
                units.append(unit)
                self.logger.log(
                    "emitted",
                    operation="execute",
                    strategy=self.strategy,
                    target=declaration.display_name,
                    interface=interface.name,
                    message="Emitted generated unit.",
                    extra={"hint_name": unit.hint_name, "properties": len(interface.properties)},
                )
        return tuple(units)

    def generate(
        self,
        compilation: Compilation,
        cancellation: CancellationToken | None = None,
    ) -> GenerationResult:
        targets: list[GenerationTarget] = []
        for unit in compilation.syntax_trees:
            for declaration in unit.declarations:
                observe(cancellation, "discover")
                if not self.is_candidate(declaration):
                    continue
                target = self.transform(declaration, unit, compilation, cancellation)
                self._log_target(target, path=unit.path)
                targets.append(target)

        units = (self.marker_unit(), *self.execute(targets))
        return GenerationResult(strategy=self.strategy, units=units)

    def _log_target(self, target: GenerationTarget, *, path: str) -> None:
        name = target.declaration.display_name
        self.logger.log(
            "candidate",
            operation="transform",
            strategy=self.strategy,
            target=name,
            interface=None,
            message="Discovered generation candidate.",
            extra={
                "path": path,
                "references": list(target.declaration.references),
                "resolved": [interface.metadata_name for interface in target.interfaces],
            },
        )
        for miss in target.skipped:
            self.logger.log(
                "skipped",
                operation="transform",
                strategy=self.strategy,
                target=name,
                interface=miss.name,
                message="Skipped interface reference.",
                extra={"reason": miss.reason},
            )
