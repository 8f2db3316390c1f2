from autoimpl.config import GeneratorConfig
from autoimpl.models import InterfaceProperty
from autoimpl.pipeline import is_marker_eligible, project_interface
from autoimpl.symbols import NamedTypeSymbol, PropertySymbol, TypeRef


def test_properties_follow_member_order_and_setter_presence(ibar: NamedTypeSymbol) -> None:
    resolved = project_interface("IBar", ibar, "display")

    assert resolved.name == "IBar"
    assert resolved.namespace == "MyNs"
    assert resolved.metadata_name == "MyNs.IBar"
    assert resolved.properties == (
        InterfaceProperty(type="int", name="Id", has_setter=True),
        InterfaceProperty(type="string", name="Name", has_setter=False),
    )


def test_display_rendering_carries_interface_file_imports(ibaz: NamedTypeSymbol) -> None:
    resolved = project_interface("IBaz", ibaz, "display")

    assert resolved.import_directives == ("using System;", "using System.Collections.Generic;")
    assert resolved.properties == (
        InterfaceProperty(type="List<string>", name="Tags", has_setter=False),
    )


def test_qualified_rendering_needs_no_imports(ibaz: NamedTypeSymbol) -> None:
    resolved = project_interface("IBaz", ibaz, "qualified")

    assert resolved.import_directives == ()
    assert resolved.properties[0].type == "global::System.Collections.Generic.List<string>"


def test_keyword_types_keep_source_spelling_in_both_policies(ibar: NamedTypeSymbol) -> None:
    display = project_interface("IBar", ibar, "display")
    qualified = project_interface("IBar", ibar, "qualified")

    assert [prop.type for prop in display.properties] == ["int", "string"]
    assert [prop.type for prop in qualified.properties] == ["int", "string"]


def test_static_members_and_non_properties_are_not_projected() -> None:
    symbol = NamedTypeSymbol(
        name="ICounter",
        members=(
            PropertySymbol(name="Default", type=TypeRef.keyword("int"), is_static=True),
            PropertySymbol(name="Count", type=TypeRef.keyword("int")),
        ),
    )

    resolved = project_interface("ICounter", symbol, "display")

    assert [prop.name for prop in resolved.properties] == ["Count"]
    assert resolved.import_directives == ()


def test_eligibility_matches_marker_by_simple_name() -> None:
    config = GeneratorConfig()
    marked = NamedTypeSymbol(name="IBar", attributes=("AutoImplementAttribute",))
    short = NamedTypeSymbol(name="IBar", attributes=("Obsolete", "AutoImplement"))
    plain = NamedTypeSymbol(name="IBar", attributes=("Obsolete",))

    assert is_marker_eligible(marked, config)
    assert is_marker_eligible(short, config)
    assert not is_marker_eligible(plain, config)
