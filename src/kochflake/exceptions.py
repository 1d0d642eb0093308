"""Exception hierarchy for Kochflake."""


class KochflakeError(Exception):
    """Base exception for all Kochflake errors."""

    pass


class GeometryError(KochflakeError):
    """Errors in geometric calculations."""

    pass


class DegenerateEdgeError(GeometryError):
    """An edge cannot be subdivided into an equilateral bump."""

    def __init__(self, edge_index: int, reason: str) -> None:
        self.edge_index = edge_index
        self.reason = reason
        super().__init__(f"Degenerate edge {edge_index}: {reason}")


class RenderError(KochflakeError):
    """Errors related to rasterization or presentation."""

    pass


class RasterizationError(RenderError):
    """Invalid rasterization request."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Rasterization failed: {reason}")


class DisplayError(RenderError):
    """The display surface could not be created or used."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Display error: {reason}")


class ConfigurationError(KochflakeError):
    """Invalid configuration value."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for '{field}': {reason}")
