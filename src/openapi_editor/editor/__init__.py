"""Removal of operations and the components they leave unused."""

from openapi_editor.editor.core import OpenApiEditor

__all__ = ["OpenApiEditor"]
