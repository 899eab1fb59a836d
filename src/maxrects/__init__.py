"""MaxRects rectangle packing.

Packs rectangular boxes into a fixed set of bins using the Maximal
Rectangles heuristic:

```python
from maxrects import Bin, Box, MaxRectsPacker

packer = MaxRectsPacker([Box(5, 6), Box(4, 4)], [Bin(10, 20, bin_id=1)])
placed, remaining, bins = packer.run()
```
"""

from maxrects.application.scoring import ScorerFactory
from maxrects.contracts import PlacementScorer, Score
from maxrects.domain import (
    BestAreaFitScorer,
    BestLongSideFitScorer,
    BestShortSideFitScorer,
    Bin,
    BottomLeftScorer,
    Box,
    InvalidDimensionError,
    MaxRectsPacker,
    NoBinsError,
    PackingError,
    PlacedItem,
    PlacementResult,
    Rectangle,
    calculate_packed_percentage,
)

__version__ = "0.1.0"

__all__ = [
    "BestAreaFitScorer",
    "BestLongSideFitScorer",
    "BestShortSideFitScorer",
    "Bin",
    "BottomLeftScorer",
    "Box",
    "InvalidDimensionError",
    "MaxRectsPacker",
    "NoBinsError",
    "PackingError",
    "PlacedItem",
    "PlacementResult",
    "PlacementScorer",
    "Rectangle",
    "Score",
    "ScorerFactory",
    "calculate_packed_percentage",
]
