"""Base mixin for termlist widgets."""


class TermlistMixin:
    """Mixin for widgets that render controlled content.

    Suppresses Textual's default link processing: list rows are rendered by
    caller callbacks and must not turn into clickable links by accident.
    """

    auto_links = False
