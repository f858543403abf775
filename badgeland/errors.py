"""Exceptions raised by badgeland."""


class BadgeError(Exception):
    """Base class for every error badgeland raises on purpose."""


class FontLoadError(BadgeError):
    """The metric font could not be read or parsed."""


class SizeError(BadgeError, ValueError):
    def __init__(self, value: str):
        super().__init__(f"Invalid Size: '{value}'")
        self.value = value


class StyleError(BadgeError, ValueError):
    def __init__(self, value: str):
        super().__init__(f"Invalid Style: '{value}'")
        self.value = value


class DataError(BadgeError, ValueError):
    """
    A comma separated series contained an empty or non-numeric element.
    """

    def __init__(self, text: str, position: int):
        super().__init__(f"Invalid data at element {position} of '{text}'")
        self.text = text
        self.position = position
