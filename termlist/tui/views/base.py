"""Base classes for list views."""

from __future__ import annotations


class BaseView:
    """Base class for all termlist views.

    Provides testable interface for view rendering without a running terminal.
    """

    def get_render_lines(self, width: int, height: int | None = None) -> list[str]:
        """Return lines this view would render (testable without Textual).

        Args:
            width: Terminal width
            height: Terminal height, when known

        Returns:
            List of strings representing rendered output
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement get_render_lines()")
