"""Shared test fixtures."""

from __future__ import annotations

import pytest

from autoimpl.symbols import (
    InMemoryCompilation,
    MethodSymbol,
    NamedTypeSymbol,
    PropertySymbol,
    TypeRef,
)
from autoimpl.syntax import AttributeSyntax, CompilationUnit, TypeDeclaration

INT = TypeRef.keyword("int")
STRING = TypeRef.keyword("string")
STRING_LIST = TypeRef(
    display="List<string>",
    qualified="global::System.Collections.Generic.List<string>",
)


def marker(*arguments: str) -> AttributeSyntax:
    return AttributeSyntax(name="AutoImplement", arguments=arguments)


def quoted(name: str) -> str:
    return f'"{name}"'


@pytest.fixture
def contracts_unit() -> CompilationUnit:
    return CompilationUnit.with_usings(
        "Contracts/IBar.cs",
        "using System;",
        declarations=(TypeDeclaration(name="IBar", kind="interface", namespace=("MyNs",)),),
    )


@pytest.fixture
def ibar(contracts_unit: CompilationUnit) -> NamedTypeSymbol:
    return NamedTypeSymbol(
        name="IBar",
        namespace="MyNs",
        members=(
            PropertySymbol(name="Id", type=INT, has_setter=True),
            PropertySymbol(name="Name", type=STRING),
        ),
        declaring_units=(contracts_unit,),
    )


@pytest.fixture
def ibaz() -> NamedTypeSymbol:
    unit = CompilationUnit.with_usings(
        "Contracts/IBaz.cs",
        "using System;",
        "using System.Collections.Generic;",
    )
    return NamedTypeSymbol(
        name="IBaz",
        namespace="MyNs",
        members=(
            PropertySymbol(name="Tags", type=STRING_LIST),
            MethodSymbol(name="Refresh"),
            PropertySymbol(name="this[]", type=STRING, is_indexer=True),
        ),
        declaring_units=(unit,),
    )


@pytest.fixture
def foo_unit() -> CompilationUnit:
    return CompilationUnit.with_usings(
        "App/Foo.cs",
        "using MyNs;",
        declarations=(
            TypeDeclaration(
                name="Foo",
                namespace=("App",),
                attributes=(marker(quoted("IBar")),),
            ),
        ),
    )


@pytest.fixture
def compilation(
    contracts_unit: CompilationUnit,
    foo_unit: CompilationUnit,
    ibar: NamedTypeSymbol,
    ibaz: NamedTypeSymbol,
) -> InMemoryCompilation:
    return InMemoryCompilation(syntax_trees=(contracts_unit, foo_unit), symbols=(ibar, ibaz))
