"""Editor configuration."""

import os
from dataclasses import dataclass

# Method slots of a path item, in enumeration order.
HTTP_METHODS = ("get", "post", "put", "delete", "patch", "options", "head", "trace")

OUTPUT_FORMATS = ("auto", "yaml", "json")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class EditorConfig:
    """Settings for OpenApiEditor and the CLI.

    sweep_cycles: also remove unreferenced schemas that only reference each
        other in a cycle (left in place by default).
    output_format: format used when writing the edited document; "auto"
        keeps the input format.
    """
    methods: tuple[str, ...] = HTTP_METHODS
    sweep_cycles: bool = False
    output_format: str = "auto"

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output_format!r}"
            )

    @classmethod
    def from_env(cls) -> "EditorConfig":
        """Build a config from OPENAPI_EDITOR_* environment variables."""
        return cls(
            sweep_cycles=os.getenv("OPENAPI_EDITOR_SWEEP_CYCLES", "").strip().lower() in _TRUTHY,
            output_format=os.getenv("OPENAPI_EDITOR_OUTPUT_FORMAT", "auto").strip().lower() or "auto",
        )
