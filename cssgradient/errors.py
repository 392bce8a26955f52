"""Exceptions and warnings raised while resolving gradients."""


class GradientError(ValueError):
    """Base class for all gradient resolution failures."""


class UnsupportedAngleSyntax(GradientError):
    """The leading parameter is neither a direction nor an angle."""


class InsufficientStops(GradientError):
    """The parameter list holds no color stops."""


class DegenerateGradientRange(GradientError):
    """An interior stop sits between two anchors with no room to divide."""


class InvalidStopSyntax(GradientError):
    """A non-color token appears where a color stop is expected."""


class UnknownColor(InvalidStopSyntax):
    """A color keyword the color resolver does not know."""


class UnsupportedGradientFunction(GradientError):
    """The function is not ``linear-gradient``."""


class InvalidLength(GradientError):
    """A length that cannot be converted to absolute units."""


class GradientWarning(UserWarning):
    """A recoverable problem for which a lenient default was used."""
