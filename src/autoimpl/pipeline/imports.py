"""Import context extraction from a file's using directives."""

from __future__ import annotations

from autoimpl.syntax.model import CompilationUnit, UsingDirective


def import_path(directive: UsingDirective) -> str:
    """Get 'System' from 'using System;'.

    Aliased and static directives keep only their target path, so
    ``using Json = System.Text.Json;`` yields ``System.Text.Json``.
    """
    text = directive.text.strip().rstrip(";")
    if "=" in text:
        return text.partition("=")[2].strip()
    tokens = text.split()
    if len(tokens) < 2:
        return ""
    return tokens[-1]


def extract_imports(unit: CompilationUnit) -> tuple[str, ...]:
    """Return the distinct import paths of a file in declaration order."""
    seen: set[str] = set()
    imports: list[str] = []
    for directive in unit.usings:
        path = import_path(directive)
        if not path or path in seen:
            continue
        seen.add(path)
        imports.append(path)
    return tuple(imports)


def extract_import_directives(unit: CompilationUnit) -> tuple[str, ...]:
    """Return the file's using directives as normalized source lines."""
    seen: set[str] = set()
    directives: list[str] = []
    for directive in unit.usings:
        text = " ".join(directive.text.split())
        if not text:
            continue
        if not text.endswith(";"):
            text = f"{text};"
        if text in seen:
            continue
        seen.add(text)
        directives.append(text)
    return tuple(directives)
