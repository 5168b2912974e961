"""JSON serialization with configurable indentation, plus logging and text-location helpers."""

__version__ = "2.8.0"

__all__ = ["logger", "location", "serializer", "serializerrunnable"]