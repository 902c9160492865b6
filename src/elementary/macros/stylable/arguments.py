"""Reading ``@Stylable(...)`` arguments."""

from __future__ import annotations

from enum import Enum

from elementary.model.syntax import MacroArgument


class Argument(Enum):
    """Argument labels understood by ``@Stylable``."""

    STYLE_PROTOCOL = "styleProtocol"
    CONFIGURATIONS = "configurations"
    ENVIRONMENT_KEY = "environmentKey"
    ACCESS_LEVEL = "accessLevel"

    @property
    def labels(self) -> tuple[str, ...]:
        if self is Argument.STYLE_PROTOCOL:
            return (self.value, "style")
        return (self.value,)


class ArgumentFactory:
    """Looks up argument values, falling back to computed defaults.

    The first argument carrying a matching label wins. Unknown labels are
    ignored and an empty value counts as absent.
    """

    def __init__(self, arguments: list[MacroArgument] | None):
        self.arguments = list(arguments or [])

    def argument(self, key: Argument, default: str | None = None) -> str | None:
        for argument in self.arguments:
            if argument.label in key.labels:
                return argument.value or default
        return default


def lower_camel(name: str) -> str:
    """Lower-case the leading capitals of *name*.

    ``MyViewStyle`` -> ``myViewStyle``; an acronym keeps the capital that
    starts the next word: ``URLStyle`` -> ``urlStyle``.
    """
    run = 0
    while run < len(name) and name[run].isupper():
        run += 1
    if run == 0:
        return name
    if run == 1 or run == len(name):
        return name[:run].lower() + name[run:]
    if name[run].islower():
        run -= 1
    return name[:run].lower() + name[run:]
