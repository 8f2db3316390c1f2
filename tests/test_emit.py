from autoimpl.compiler import emit_marker_declaration, emit_source, hint_name, required_usings
from autoimpl.config import GeneratorConfig
from autoimpl.models import AnnotatedDeclaration, InterfaceProperty, ResolvedInterface
from autoimpl.syntax import ContainingType

IBAR = ResolvedInterface(
    name="IBar",
    namespace="MyNs",
    metadata_name="MyNs.IBar",
    import_directives=("using System;",),
    properties=(
        InterfaceProperty(type="int", name="Id", has_setter=True),
        InterfaceProperty(type="string", name="Name", has_setter=False),
    ),
)

FOO = AnnotatedDeclaration(namespace="App", name="Foo", references=("IBar",), imports=("MyNs",))


def test_worked_example_renders_partial_implementation() -> None:
    unit = emit_source(FOO, IBAR, config=GeneratorConfig(), rendering="display", implement=True)

    assert unit.hint_name == "Foo_IBar.g.cs"
    assert unit.target_name == "Foo"
    assert unit.target_namespace == "App"
    assert unit.interface_name == "IBar"
    assert unit.source == (
        "// <auto-generated/>\n"
        "using System;\n"
        "using MyNs;\n"
        "\n"
        "namespace App;\n"
        "\n"
        "partial class Foo : IBar\n"
        "{\n"
        "    public int Id { get; set; }\n"
        "    public string Name { get; }\n"
        "}\n"
    )


def test_qualified_rendering_has_no_usings_and_global_base() -> None:
    interface = ResolvedInterface(
        name="IBar",
        namespace="MyNs",
        metadata_name="MyNs.IBar",
        properties=(
            InterfaceProperty(
                type="global::System.Collections.Generic.List<string>",
                name="Tags",
                has_setter=True,
            ),
        ),
    )

    config = GeneratorConfig()
    unit = emit_source(FOO, interface, config=config, rendering="qualified", implement=True)

    assert unit.source == (
        "// <auto-generated/>\n"
        "namespace App;\n"
        "\n"
        "partial class Foo : global::MyNs.IBar\n"
        "{\n"
        "    public global::System.Collections.Generic.List<string> Tags { get; set; }\n"
        "}\n"
    )


def test_augmenting_declaration_omits_base_clause() -> None:
    unit = emit_source(FOO, IBAR, config=GeneratorConfig(), rendering="display", implement=False)

    assert "partial class Foo\n{" in unit.source
    assert ": IBar" not in unit.source


def test_global_namespace_nested_generic_target() -> None:
    declaration = AnnotatedDeclaration(
        namespace="",
        name="Inner",
        kind="record",
        containing_types=(ContainingType(name="Outer", kind="struct"),),
        type_parameters=("T",),
    )
    interface = ResolvedInterface(
        name="IBar",
        namespace="",
        metadata_name="IBar",
        properties=(InterfaceProperty(type="T", name="Value", has_setter=False),),
    )
    config = GeneratorConfig(auto_generated_header=False, visibility="internal")

    unit = emit_source(declaration, interface, config=config, rendering="display", implement=True)

    assert unit.source == (
        "partial struct Outer\n"
        "{\n"
        "    partial record Inner<T> : IBar\n"
        "    {\n"
        "        internal T Value { get; }\n"
        "    }\n"
        "}\n"
    )


def test_interface_without_properties_renders_empty_body() -> None:
    interface = ResolvedInterface(name="IEmpty", namespace="MyNs", metadata_name="MyNs.IEmpty")

    config = GeneratorConfig()
    unit = emit_source(FOO, interface, config=config, rendering="display", implement=True)

    assert unit.source.endswith("partial class Foo : IEmpty\n{\n}\n")


def test_required_usings_skip_global_and_duplicate_directives() -> None:
    interface = ResolvedInterface(
        name="IBar",
        namespace="MyNs",
        metadata_name="MyNs.IBar",
        import_directives=("global using Shared;", "using MyNs;", "using System;"),
    )

    assert required_usings(interface, "display") == ("using MyNs;", "using System;")
    assert required_usings(interface, "qualified") == ()


def test_hint_names_are_file_safe() -> None:
    assert hint_name("Foo", "MyNs.IBar", ".g.cs") == "Foo_MyNs.IBar.g.cs"
    assert hint_name("Foo", "global::MyNs.IBar", ".g.cs") == "Foo_MyNs.IBar.g.cs"
    assert hint_name("Foo", "IRepo<Order>", ".g.cs") == "Foo_IRepo_Order_.g.cs"
    assert hint_name("App.Box`1", "MyNs.IBar", ".g.cs") == "App.Box_1_MyNs.IBar.g.cs"


def test_marker_declaration_targets_types_or_interfaces() -> None:
    config = GeneratorConfig()

    for_types = emit_marker_declaration(config, "type")
    for_interfaces = emit_marker_declaration(config, "interface")

    assert for_types.hint_name == "AutoImplementAttribute.g.cs"
    assert for_types.kind == "marker"
    assert for_types.source == (
        "// <auto-generated/>\n"
        "using System;\n"
        "\n"
        "namespace AttributeGenerator;\n"
        "\n"
        "[AttributeUsage(AttributeTargets.Class | AttributeTargets.Struct, "
        "Inherited = false, AllowMultiple = false)]\n"
        "sealed class AutoImplementAttribute : Attribute\n"
        "{\n"
        "    public string[] InterfacesNames { get; }\n"
        "\n"
        "    public AutoImplementAttribute(params string[] interfacesNames)\n"
        "    {\n"
        "        InterfacesNames = interfacesNames;\n"
        "    }\n"
        "}\n"
    )
    assert "[AttributeUsage(AttributeTargets.Interface, " in for_interfaces.source


def test_marker_declaration_uses_configured_names() -> None:
    config = GeneratorConfig(attribute_namespace="Gen.Attrs", attribute_name="Fill")

    unit = emit_marker_declaration(config, "type")

    assert unit.hint_name == "FillAttribute.g.cs"
    assert "namespace Gen.Attrs;" in unit.source
    assert "public FillAttribute(params string[] interfacesNames)" in unit.source


def test_import_relative_reference_implements_simple_name() -> None:
    interface = ResolvedInterface(
        name="Sub.IBar",
        namespace="MyNs.Sub",
        metadata_name="MyNs.Sub.IBar",
        properties=(InterfaceProperty(type="int", name="Id", has_setter=False),),
    )

    config = GeneratorConfig()
    unit = emit_source(FOO, interface, config=config, rendering="display", implement=True)

    assert unit.hint_name == "Foo_Sub.IBar.g.cs"
    assert "using MyNs.Sub;\n" in unit.source
    assert "partial class Foo : IBar\n" in unit.source
