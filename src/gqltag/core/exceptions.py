"""Errors and warnings raised by gqltag."""

import warnings


class GqlTagError(Exception):
    """Base class for gqltag errors."""


class ParseError(GqlTagError):
    """Source text could not be turned into a GraphQL document.

    Raised for syntax errors and for parser results that are not a
    document. Failures are never cached.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class DocumentCycleError(ParseError):
    """The parser returned an AST containing a reference cycle."""


class FragmentConflictWarning(UserWarning):
    """A fragment name was registered with a second, different body."""

    def __init__(self, fragment_name: str) -> None:
        super().__init__(
            f"Warning: fragment with name {fragment_name} already exists.\n"
            "gqltag enforces all fragment names across your application "
            "to be unique."
        )
        self.fragment_name = fragment_name


# Every conflict is reported, not just the first per call site. Appended,
# so filters set by the application or -W still take precedence.
warnings.filterwarnings("always", category=FragmentConflictWarning, append=True)
