"""Custom exceptions for the schema context with catalog references."""

from typing import Any, Iterable, Optional


class ElementFormatError(ValueError):
    """
    Exception raised when a persisted canvas object cannot be turned into an element.

    Attributes:
        message: Error description
        object_type: The persisted ``type`` value that was not understood
        payload: The offending persisted object
    """

    def __init__(
        self,
        message: str,
        object_type: Optional[str] = None,
        payload: Optional[dict] = None,
    ):
        self.message = message
        self.object_type = object_type
        self.payload = payload

        parts = [message]

        if object_type is not None:
            parts.append(f"Object type: {object_type!r}")

        if payload:
            keys = ", ".join(sorted(str(k) for k in payload.keys()))
            parts.append(f"Object keys: {keys}")

        super().__init__("\n".join(parts))


class UnknownPresetError(ValueError):
    """
    Exception raised when a style preset or layout type is not in the catalog.

    Attributes:
        message: Error description
        category: Preset category (e.g., 'palettes', 'sizes', 'layout_type')
        preset_name: The name that was requested
        available: Names that would have been accepted
    """

    def __init__(
        self,
        message: str,
        category: Optional[str] = None,
        preset_name: Optional[str] = None,
        available: Optional[Iterable[Any]] = None,
    ):
        self.message = message
        self.category = category
        self.preset_name = preset_name
        self.available = sorted(str(a) for a in available) if available else []

        parts = [message]

        if category and preset_name:
            parts.append(f"Requested {category}: {preset_name}")

        if self.available:
            parts.append(f"Available: {', '.join(self.available)}")

        super().__init__("\n".join(parts))


class TemplateNotFoundError(KeyError):
    """
    Exception raised when a template id is not in the template catalog.

    Attributes:
        template_id: The id that was requested
        available: Template ids in the catalog
    """

    def __init__(self, template_id: str, available: Optional[Iterable[str]] = None):
        self.template_id = template_id
        self.available = sorted(available) if available else []

        parts = [f"Template '{template_id}' not found"]
        if self.available:
            parts.append(f"Available templates: {', '.join(self.available)}")

        super().__init__("\n".join(parts))

    def __str__(self) -> str:
        # KeyError quotes its argument by default
        return self.args[0]
