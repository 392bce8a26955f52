"""Basic cssgradient usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import warnings

from cssgradient import (
    ColorValue,
    ColorRGBAINT,
    Degrees,
    DirectionKeywords,
    GradientFunction,
    Keyword,
    Length,
    LengthContext,
    LinearGradient,
    Percentage,
    resolve_linear_gradient,
)


def demonstrate_positions() -> None:
    # linear-gradient(to right, red, blue 10px, orange, yellow, black 100px, purple)
    params = [
        Keyword("to"), Keyword("right"),
        Keyword("red"),
        Keyword("blue"), Length(10, "px"),
        Keyword("orange"),
        Keyword("yellow"),
        Keyword("black"), Length(100, "px"),
        Keyword("purple"),
    ]
    spec = resolve_linear_gradient(params, box_width=300)
    print("Legacy angle:", spec.angle)
    for stop in spec.stops:
        print(f"  {stop.color} @ {stop.position:g}px")

    css = resolve_linear_gradient(params, box_width=300, direction_keywords=DirectionKeywords.CSS)
    print("CSS angle:", css.angle)


def demonstrate_units() -> None:
    # linear-gradient(45deg, #336699 1em, gold 50%) at 200dpi
    gradient = LinearGradient()
    function = GradientFunction(
        "linear-gradient",
        [Degrees(45), Keyword("#336699"), Length(1, "em"), ColorValue(ColorRGBAINT((255, 215, 0))), Percentage(50)],
    )
    spec = gradient.from_function(function, box_width=400, context=LengthContext(font_size=12, dpi=200))
    print("Positions:", spec.positions)
    print("Colors (float RGBA):\n", spec.colors)
    start, end = spec.gradient_line(400, 100)
    print("Gradient line:", start, "->", end)


def demonstrate_lenient_mode() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        spec = resolve_linear_gradient(
            [Percentage(10), Keyword("red"), Keyword("mauve")],
            box_width=100,
            unknown_colors="warn",
        )
    print("Lenient result:", spec)
    for warning in caught:
        print("  warning:", warning.message)


if __name__ == "__main__":
    demonstrate_positions()
    demonstrate_units()
    demonstrate_lenient_mode()
