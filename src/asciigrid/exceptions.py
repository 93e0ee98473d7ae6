"""Exception hierarchy for asciigrid."""


class AsciiGridError(Exception):
    """Base exception for all asciigrid errors."""

    pass


class ShapeError(AsciiGridError):
    """Errors related to shape construction or outline traversal."""

    pass


class InvalidShapeError(ShapeError, ValueError):
    """Shape parameters are invalid (raised at construction)."""

    def __init__(self, shape: str, reason: str) -> None:
        self.shape = shape
        self.reason = reason
        super().__init__(f"Invalid {shape}: {reason}")


class InvalidShapeStateError(ShapeError, RuntimeError):
    """Traversal attempted on a shape that cannot produce an outline."""

    def __init__(self, shape: str, reason: str) -> None:
        self.shape = shape
        self.reason = reason
        super().__init__(f"Invalid {shape} state: {reason}")


class InvalidCursorError(ShapeError, ValueError):
    """Cursor passed to next() is not a point of the shape's outline."""

    def __init__(self, shape: str, cursor: object) -> None:
        self.shape = shape
        self.cursor = cursor
        super().__init__(f"Bad cursor for {shape}: {cursor}")


class OutlineInvariantError(ShapeError, RuntimeError):
    """Outline traversal reached a state that correct usage never produces."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class FrameError(AsciiGridError):
    """Errors related to bounding frame computation."""

    pass


class EmptyPointSetError(FrameError, ValueError):
    """Frame requested for an empty point sequence."""

    def __init__(self) -> None:
        super().__init__("Cannot compute a frame of an empty point sequence")


class InvalidFrameError(FrameError, ValueError):
    """Frame corners are not ordered (aa must not exceed bb)."""

    def __init__(self, aa: object, bb: object) -> None:
        self.aa = aa
        self.bb = bb
        super().__init__(f"Frame corners out of order: aa={aa}, bb={bb}")


class CanvasError(AsciiGridError):
    """Errors related to canvas allocation or painting."""

    pass


class PointOutOfFrameError(CanvasError, ValueError):
    """Paint requested for a point outside the canvas frame."""

    def __init__(self, point: object, frame: object) -> None:
        self.point = point
        self.frame = frame
        super().__init__(f"Point {point} lies outside frame {frame}")


class InvalidCharError(CanvasError, ValueError):
    """Fill or mark character is not a single printable character."""

    def __init__(self, char: object) -> None:
        self.char = char
        super().__init__(f"Expected a single printable character, got {char!r}")


class SceneError(AsciiGridError):
    """Errors related to reading shape descriptions."""

    pass


class ShapeSpecError(SceneError):
    """A shape description could not be parsed."""

    def __init__(self, spec: object, reason: str) -> None:
        self.spec = spec
        self.reason = reason
        super().__init__(f"Bad shape spec {spec!r}: {reason}")


class SceneLoadError(SceneError):
    """A scene file could not be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load scene '{path}': {reason}")
