"""Lead intake service: consultation requests and tracking events."""

__version__ = "0.1.0"
