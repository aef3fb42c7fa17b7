"""Protocol interfaces between the metadata core and its collaborators."""

from exifdeck.app.ports.metadata import ToolRunner

__all__ = ["ToolRunner"]
