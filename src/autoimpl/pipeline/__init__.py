"""Pure discovery, resolution, and projection stages."""

from .declarations import annotated_declaration
from .eligibility import is_marker_eligible
from .imports import extract_import_directives, extract_imports, import_path
from .project import project_interface, project_property, render_type
from .references import (
    AttributeDiscovery,
    BaseListDiscovery,
    ReferenceDiscovery,
    extract_attribute_references,
    extract_base_list_references,
    find_marker_attribute,
    interface_name_from_argument,
    interface_name_from_base,
    is_annotated_candidate,
    is_base_list_candidate,
    is_marker_attribute,
)
from .resolve import candidate_names, resolve_interface

__all__ = [
    "AttributeDiscovery",
    "BaseListDiscovery",
    "ReferenceDiscovery",
    "annotated_declaration",
    "candidate_names",
    "extract_attribute_references",
    "extract_base_list_references",
    "extract_import_directives",
    "extract_imports",
    "find_marker_attribute",
    "import_path",
    "interface_name_from_argument",
    "interface_name_from_base",
    "is_annotated_candidate",
    "is_base_list_candidate",
    "is_marker_attribute",
    "is_marker_eligible",
    "project_interface",
    "project_property",
    "render_type",
    "resolve_interface",
]
