"""Graph file exceptions."""


class SchemaError(Exception):
    """Base exception for a graph file that cannot be turned into a graph."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)

    def describe(self) -> list[str]:
        """Get the lines reported to the user for this error."""
        where = f" in {self.path}" if self.path else ""
        return [f"{self}{where}"]


class SchemaLoadError(SchemaError):
    """Raised when a graph file cannot be read or is not a YAML mapping."""


class SchemaValidationError(SchemaError):
    """Raised when a graph file does not match the graph schema.

    ``errors`` holds one ``{"loc", "msg", "type"}`` entry per problem, with
    ``loc`` dotted, e.g. ``nodes.0.edges.1``.
    """

    def __init__(
        self, message: str, errors: list[dict] | None = None, path: str | None = None
    ):
        self.errors = errors or []
        super().__init__(message, path)

    def describe(self) -> list[str]:
        return super().describe() + [
            f"  - {err['loc']}: {err['msg']}" for err in self.errors
        ]
