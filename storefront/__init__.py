"""Storefront product discovery engine.

Category hierarchy handling and faceted filter / sort / pagination
over a storefront product catalog.
"""

__version__ = "0.1.0"
