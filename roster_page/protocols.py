"""Protocol definitions for dependency injection."""

from typing import Protocol


class OutputSink(Protocol):
    """Destination for rendered output.

    Anything with a text ``write`` method qualifies: ``io.StringIO``,
    an open text file, or a response body adapter.
    """

    def write(self, chunk: str, /) -> object:
        """Write one chunk of rendered output.

        Args:
            chunk: Rendered text

        Raises:
            OSError: If the underlying stream can no longer accept data
        """
        ...
