"""Export module for companiongen - converts CaseClassDecl to plain data."""

from companiongen.core.export.decl_exporter import dump_declaration, export_declaration

__all__ = ["dump_declaration", "export_declaration"]
