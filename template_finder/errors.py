class InvalidConfiguration(ValueError):
    """Raised at construction time for bad limits or a malformed catalog."""


class TemplateNotFound(KeyError):
    """Raised when an edit or a selection names a template the catalog does not have."""
