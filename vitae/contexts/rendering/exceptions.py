"""Custom exceptions for rendering context."""

from pathlib import Path
from typing import Iterable, Optional


class UnknownEngineError(ValueError):
    """
    Exception raised when a layout names an output engine that does not exist.

    Attributes:
        engine: The requested engine
        available: Engines that do exist
    """

    def __init__(self, engine: Optional[str], available: Iterable[str] = ()):
        self.engine = engine
        self.available = sorted(available)

        message = f"Unknown rendering engine: {engine!r}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"

        super().__init__(message)


class UnsupportedExtensionError(ValueError):
    """
    Exception raised when an output path's extension maps to no engine.

    Attributes:
        path: The output path
        extension: Its extension
    """

    def __init__(self, path: Path, extensions: Iterable[str] = ()):
        self.path = Path(path)
        self.extension = self.path.suffix
        supported = ", ".join(sorted(extensions))

        message = f"Unsupported output extension '{self.extension}' for {self.path}"
        if supported:
            message += f". Supported: {supported}"

        super().__init__(message)


class LayoutNotFoundError(IndexError):
    """
    Exception raised when a layout index selects no layout of the resume.

    Attributes:
        layout_index: The requested index
        layout_count: Number of layouts the resume has
    """

    def __init__(self, layout_index: int, layout_count: int):
        self.layout_index = layout_index
        self.layout_count = layout_count
        super().__init__(
            f"Layout index {layout_index} not found: resume has {layout_count} layout(s)"
        )


class TemplateRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        template_name: Name of the template being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.template_path = template_path
        self.original_error = original_error

        # Build enhanced error message
        parts = [message]

        if template_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Name: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
