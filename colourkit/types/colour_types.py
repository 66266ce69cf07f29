from __future__ import annotations
from typing import Tuple, Union

ARGBTuple = Tuple[int, int, int, int]
RGBTuple = Tuple[int, int, int]
UnitRGBTuple = Tuple[float, float, float]
HSBTuple = Tuple[float, float, float]
AlphaValue = Union[int, float]
