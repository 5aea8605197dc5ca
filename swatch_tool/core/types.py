"""Shared types for swatch-tool: Colour, ColourCount, Technique, Report, InvalidInput."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from swatch_tool.core.palette import RGB_MASK, pack, rgb_string, rgb_to_hex, unpack


class InvalidInput(ValueError):
    """Raised when a grid or image is absent, unreadable, or a parameter is out of contract."""


@dataclass(frozen=True)
class Colour:
    """An exact 8-bit-per-channel colour. `a` is None when alpha is not part of identity."""

    r: int
    g: int
    b: int
    a: int | None = None

    @classmethod
    def from_int(cls, value: int, include_alpha: bool = False) -> Colour:
        r, g, b, a = unpack(value)
        return cls(r, g, b, a if include_alpha else None)

    def to_int(self) -> int:
        """Packed value; RGB-only colours pack with alpha 0 so they sort by RGB."""
        if self.a is None:
            return pack(self.r, self.g, self.b) & RGB_MASK
        return pack(self.r, self.g, self.b, self.a)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return rgb_to_hex(self.r, self.g, self.b)

    @property
    def rgb_string(self) -> str:
        return rgb_string(self.r, self.g, self.b)


@dataclass(frozen=True)
class ColourCount:
    """A colour and the number of pixels exactly equal to it."""

    colour: Colour
    count: int

    @property
    def hex(self) -> str:
        return self.colour.hex

    @property
    def rgb(self) -> str:
        return self.colour.rgb_string

    def to_dict(self, total: int | None = None) -> dict[str, Any]:
        d: dict[str, Any] = {
            'hex': self.hex,
            'rgb': self.rgb,
            'r': self.colour.r,
            'g': self.colour.g,
            'b': self.colour.b,
            'count': self.count,
        }
        if self.colour.a is not None:
            d['a'] = self.colour.a
        if total:
            d['pct'] = round(self.count / total * 100, 1)
        return d


class Technique:
    """A self-registering analysis technique.

    Usage in a technique module:

        technique = Technique(name='top', help='Rank the most frequent colours')

        @technique.run
        def run(grid, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, grid: Any, report: Report, args: Any) -> None:
        if self._run_fn is None:
            raise RuntimeError(f'Technique {self.name} has no run function')
        self._run_fn(grid, report, args)


@dataclass
class Report:
    """Accumulates results from techniques for text/JSON output."""

    source: str = ''
    image_width: int = 0
    image_height: int = 0
    top_n: int = 20
    include_alpha: bool = False
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)

    @property
    def total_pixels(self) -> int:
        return self.image_width * self.image_height

    def add(self, technique_name: str, data: dict[str, Any]) -> None:
        """Add (or replace) the results of one technique."""
        self.sections[technique_name] = data
