class ThemeError(Exception):
    """Base class for every failure raised while compiling a theme."""


class ColorRangeError(ThemeError, ValueError):
    """A numeric component lies outside its valid interval."""


class ColorFormatError(ThemeError, ValueError):
    """A hex literal or color expression is malformed."""


class ColorReferenceError(ThemeError, LookupError):
    """A palette entry or hue name could not be found."""


class ThemeStructureError(ThemeError):
    """The shape of a theme value is wrong (argument or token counts, flags)."""


class ThemeConfigError(ThemeError):
    """A top-level theme setting is invalid."""


class ThemeNotFoundError(ThemeError, FileNotFoundError):
    """The theme description does not exist."""


# Range


class HueOutOfRange(ColorRangeError):
    def __init__(self, found):
        self.found = found
        super().__init__(f"Invalid hue value (expected 0-360, got {found!r})")


class SaturationOutOfRange(ColorRangeError):
    def __init__(self, found):
        self.found = found
        super().__init__(f"Invalid saturation value (expected 0-1, got {found!r})")


class LightnessOutOfRange(ColorRangeError):
    def __init__(self, found):
        self.found = found
        super().__init__(f"Invalid lightness value (expected 0-1, got {found!r})")


class InvalidMixWeight(ColorRangeError):
    def __init__(self, found):
        self.found = found
        super().__init__(f"Invalid mix weight (expected 0-1, got {found!r})")


# Format


class InvalidHexFormat(ColorFormatError):
    def __init__(self, found):
        self.found = found
        super().__init__(f"Invalid hex format {found!r} (expected #rrggbb)")


class InvalidColorExpression(ColorFormatError):
    def __init__(self, expression, reason=None):
        self.expression = expression
        message = f"Invalid color format {expression!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidNumber(InvalidColorExpression):
    def __init__(self, expression, value):
        self.value = value
        super().__init__(expression, f"{value!r} is not a number")


class ArgumentCountMismatch(InvalidColorExpression, ThemeStructureError):
    def __init__(self, expression, expected, found):
        self.expected = expected
        self.found = found
        super().__init__(
            expression, f"expected {expected} arguments, got {found}"
        )


class UnknownColorFunction(InvalidColorExpression, ThemeStructureError):
    def __init__(self, expression, function):
        self.function = function
        super().__init__(expression, f"unknown function {function!r}")


# Reference


class UnknownColorReference(ColorReferenceError):
    def __init__(self, color):
        self.color = color
        super().__init__(f"Referenced color {color!r} is not present in palette")


class UnknownHue(ColorReferenceError):
    def __init__(self, hue):
        self.hue = hue
        super().__init__(f"Referenced hue {hue!r} is not present in hues table")


class MissingHueTable(ColorReferenceError):
    def __init__(self, hue):
        self.hue = hue
        super().__init__(f"Can't lookup hue {hue!r} because the hues table is missing")


# Structure


class InvalidHighlightDirective(ThemeStructureError):
    def __init__(self, group, directive):
        self.group = group
        self.directive = directive
        super().__init__(
            f"Invalid highlight {directive!r} for group {group!r} "
            "(expected 1-4 space separated values)"
        )


class UnknownStyleFlag(ThemeStructureError):
    def __init__(self, flag):
        self.flag = flag
        super().__init__(f"Unknown style option {flag!r}")


class NonStringValue(ThemeStructureError):
    def __init__(self, section, key, value):
        self.section = section
        self.key = key
        self.value = value
        super().__init__(
            f"Value of {section}.{key} must be a string, got {type(value).__name__}"
        )


class UnsafeName(ThemeStructureError):
    def __init__(self, kind, name):
        self.kind = kind
        self.name = name
        super().__init__(f"Invalid {kind} {name!r} (quotes and backslashes are not allowed)")


# Config


class InvalidBackground(ThemeConfigError):
    def __init__(self, background):
        self.background = background
        super().__init__(
            f"Invalid background {background!r} (expected 'dark' or 'light')"
        )


class MissingField(ThemeConfigError):
    def __init__(self, field, path=None):
        self.field = field
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"Missing required field {field!r}{where}")


class InvalidThemeDocument(ThemeConfigError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse theme file {str(path)!r}: {reason}")


class UnsupportedThemeFormat(ThemeConfigError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Unsupported theme file {str(path)!r} (expected .toml or .json)")


# Not found


class ThemeFileNotFound(ThemeNotFoundError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"File {str(path)!r} not found")
