"""Diagnostics and error reporting for unittesting.

Provides detailed error messages with actionable suggestions.
"""

from dataclasses import dataclass, field


@dataclass
class SearchAttempt:
    """Record of a single search attempt during resolution."""

    location: str  # What was searched (module path, attribute, etc.)
    found: bool
    reason: str | None = None  # Why it failed (if not found)


@dataclass
class DiagnosticContext:
    """Accumulated context during a resolution attempt."""

    target: str  # What we're trying to resolve
    searches: list[SearchAttempt] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def add_search(self, location: str, found: bool, reason: str | None = None) -> None:
        """Record a search attempt."""
        self.searches.append(SearchAttempt(location, found, reason))

    def add_suggestion(self, suggestion: str) -> None:
        """Add a suggested fix."""
        self.suggestions.append(suggestion)

    def format_error(self, summary: str) -> str:
        """Format a detailed error message.

        Args:
            summary: The main error message.

        Returns:
            Formatted error with search history and suggestions.
        """
        lines = [summary, ""]

        if self.searches:
            lines.append("Searched:")
            for attempt in self.searches:
                icon = "✓" if attempt.found else "✗"
                line = f"  {icon} {attempt.location}"
                if attempt.reason:
                    line += f" ({attempt.reason})"
                lines.append(line)
            lines.append("")

        if self.suggestions:
            lines.append("Suggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                lines.append(f"  {i}. {suggestion}")

        return "\n".join(lines)


class ResolutionError(Exception):
    """Raised when a dotted path cannot be resolved.

    Includes diagnostic context about what was searched.
    """

    def __init__(self, message: str, context: DiagnosticContext | None = None):
        self.context = context
        if context:
            message = context.format_error(message)
        super().__init__(message)


class LaunchError(Exception):
    """Raised when the application host is launched more than once."""


class ConstructionError(Exception):
    """Raised when a delegate class cannot be instantiated.

    Includes diagnostic context about the constructors tried.
    """

    def __init__(self, message: str, context: DiagnosticContext | None = None):
        self.context = context
        if context:
            message = context.format_error(message)
        super().__init__(message)


def suggest_delegate_class(class_name: str, module_path: str) -> str:
    """Generate a suggestion for defining an application delegate.

    Args:
        class_name: Name of the delegate class that was not found.
        module_path: Module the class was expected in (e.g., "myapp.delegates").

    Returns:
        Formatted suggestion with example code.
    """
    return f"""Define the delegate class:

  # {module_path.replace(".", "/")}.py
  class {class_name}:
      def did_finish_launching(self, options: dict | None) -> bool:
          return True
"""
