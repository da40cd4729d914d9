"""Garden Monitor: houseplant watering tracker."""

__version__ = "0.1.0"
