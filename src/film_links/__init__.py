"""Film Links.

Movie and actor lookups that cross-reference TMDb credits against a
title suggestion service, reshaped into a small Film/Actor view model.
"""

__version__ = "0.1.0"
