"""
Amount Converter — turn a free-form amount into its "other" reading.

Architecture: Classify (marker + payload) → Parse → Dispatch → Format
Philosophy:  Detect the marker with ordered rules. Do the arithmetic in Decimal.
"""

__version__ = "1.0.0"
