"""Conversion of host syntax into per-pass declaration records."""

from __future__ import annotations

from autoimpl.models import AnnotatedDeclaration
from autoimpl.pipeline.imports import extract_imports
from autoimpl.syntax.model import CompilationUnit, TypeDeclaration


def annotated_declaration(
    declaration: TypeDeclaration,
    unit: CompilationUnit,
    references: tuple[str, ...],
) -> AnnotatedDeclaration:
    return AnnotatedDeclaration(
        namespace=declaration.namespace_name,
        name=declaration.name,
        references=references,
        imports=extract_imports(unit),
        kind=declaration.kind,
        containing_types=declaration.containing_types,
        type_parameters=declaration.type_parameters,
    )
