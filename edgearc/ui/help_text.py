"""
Reusable help strings for UI tooltips and glossary.
"""

# Short one-liners for widget help=
TOOLTIP_ARC_LENGTH = "Depth of the arc (sagitta) measured from the edge. Clamped to half the edge length."
TOOLTIP_FILL_LENGTH = "Ignore arc length and use the full rect dimension across the edge as depth."
TOOLTIP_CLEAR_BLEND = "On: fill the rect and cut the arc out of it. Off: stroke the arc band in the fill colour."
TOOLTIP_LOCATION = "Edge the arc spans: top/bottom span the width, left/right span the height."
TOOLTIP_SCALE = "1x, 2x or 4x PNG resolution."

GLOSSARY_MD = """
### Sagitta (arc length)
Distance from the middle of the edge to the deepest point of the arc. This is the visual depth of the bulge.

### Span / cross dimension
The span is the side the arc runs along (width for top/bottom, height for left/right). The cross dimension is the other side.

### Clear blend
The rect is painted with the fill colour and the arc is stroked as an eraser, leaving a transparent cut-out.

### Nothing drawn
A zero or negative arc length, or a rect with a zero side, draws nothing.
"""
