"""Conversion between shape descriptions and domain shapes.

Two description formats are supported:

- Dictionaries (as found in JSON scene files)::

    {"type": "dot", "point": [x, y]}
    {"type": "vline", "start": [x, y], "end": [x, y]}
    {"type": "square", "lower_left": [x, y], "side": n}
    {"type": "rect", "position": [x, y], "width": w, "height": h}
    {"type": "rect", "a": [x, y], "b": [x, y]}

- Compact command-line specs::

    dot:X,Y
    vline:X1,Y1,X2,Y2
    square:X,Y,SIDE
    rect:X1,Y1,X2,Y2
    rect:X,Y,WxH
"""

from typing import Any

from asciigrid.domain import Dot, Point, Rect, Shape, ShapeKind, Square, VerticalLine
from asciigrid.exceptions import ShapeError, ShapeSpecError


def _point(value: Any, spec: object) -> Point:
    """Read a point from [x, y], (x, y) or {"x": .., "y": ..}."""
    try:
        if isinstance(value, dict):
            x, y = value["x"], value["y"]
        elif isinstance(value, str):
            raise ValueError(value)
        else:
            x, y = value
    except (TypeError, ValueError, KeyError) as e:
        raise ShapeSpecError(spec, f"bad point {value!r}") from e
    return Point(_int(x, "x", spec), _int(y, "y", spec))


def _int(value: Any, name: str, spec: object) -> int:
    # int() would truncate 1.7 and accept True
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ShapeSpecError(spec, f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ShapeSpecError(spec, f"{name} must be an integer, got {value!r}") from e


def shape_from_dict(data: dict[str, Any]) -> Shape:
    """Build a shape from its dictionary description.

    Args:
        data: Dictionary with a "type" key and the shape's parameters

    Returns:
        The described shape

    Raises:
        ShapeSpecError: If the description is malformed
        InvalidShapeError: If the parameters are geometrically invalid
    """
    if not isinstance(data, dict):
        raise ShapeSpecError(data, "shape description must be an object")

    try:
        kind = ShapeKind(str(data.get("type", "")).lower())
    except ValueError:
        raise ShapeSpecError(data, f"unknown shape type {data.get('type')!r}") from None

    try:
        if kind is ShapeKind.DOT:
            return Dot(_point(data["point"], data))
        if kind is ShapeKind.VERTICAL_LINE:
            return VerticalLine(_point(data["start"], data), _point(data["end"], data))
        if kind is ShapeKind.SQUARE:
            return Square(
                _point(data["lower_left"], data),
                _int(data["side"], "side", data),
            )
        if "a" in data or "b" in data:
            return Rect(_point(data["a"], data), _point(data["b"], data))
        return Rect(
            _point(data["position"], data),
            _int(data["width"], "width", data),
            _int(data["height"], "height", data),
        )
    except KeyError as e:
        raise ShapeSpecError(data, f"missing field {e.args[0]!r}") from None


def shape_to_dict(shape: Shape) -> dict[str, Any]:
    """Describe a shape as a dictionary (inverse of shape_from_dict)."""
    return shape.to_dict()


def parse_shape_spec(spec: str) -> Shape:
    """Build a shape from a compact ``kind:args`` spec.

    Examples:
        >>> parse_shape_spec("dot:2,2")
        Dot(point=Point(x=2, y=2))
        >>> parse_shape_spec("rect:0,0,2x1").bb
        Point(x=2, y=1)

    Raises:
        ShapeSpecError: If the spec is malformed
        InvalidShapeError: If the parameters are geometrically invalid
    """
    kind_part, sep, args_part = spec.partition(":")
    if not sep:
        raise ShapeSpecError(spec, "expected KIND:ARGS")

    try:
        kind = ShapeKind(kind_part.strip().lower())
    except ValueError:
        raise ShapeSpecError(spec, f"unknown shape type {kind_part!r}") from None

    args = [a.strip() for a in args_part.split(",")]

    if kind is ShapeKind.RECT and len(args) == 3 and "x" in args[2].lower():
        w, _, h = args[2].lower().partition("x")
        args = [args[0], args[1], w, h]
        sized = True
    else:
        sized = False

    expected = {
        ShapeKind.DOT: 2,
        ShapeKind.VERTICAL_LINE: 4,
        ShapeKind.SQUARE: 3,
        ShapeKind.RECT: 4,
    }[kind]
    if len(args) != expected:
        raise ShapeSpecError(spec, f"{kind.value} takes {expected} numbers, got {len(args)}")

    values = [_int(a, "coordinate", spec) for a in args]

    if kind is ShapeKind.DOT:
        return Dot(Point(values[0], values[1]))
    if kind is ShapeKind.VERTICAL_LINE:
        return VerticalLine(Point(values[0], values[1]), Point(values[2], values[3]))
    if kind is ShapeKind.SQUARE:
        return Square(Point(values[0], values[1]), values[2])
    if sized:
        return Rect(Point(values[0], values[1]), values[2], values[3])
    return Rect(Point(values[0], values[1]), Point(values[2], values[3]))


def parse_shape_specs(specs: list[str]) -> list[Shape]:
    """Parse several specs, keeping their order."""
    shapes: list[Shape] = []
    for spec in specs:
        try:
            shapes.append(parse_shape_spec(spec))
        except ShapeError as e:
            raise ShapeSpecError(spec, str(e)) from e
    return shapes
