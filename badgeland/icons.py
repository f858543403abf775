from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Icon:
    """
    A named vector icon.

    ``symbol`` is a complete ``<symbol id="{name}" ...>...</symbol>`` element.
    It is inlined verbatim into the badge ``<defs>`` and referenced with
    ``<use xlink:href="#{name}">``. Looking icons up by name is the caller's job.
    """

    name: str
    symbol: str
