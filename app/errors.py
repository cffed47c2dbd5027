from typing import List


class SummarizerError(Exception):
    """Base class for errors that abort a summary request."""


class ExtractionError(SummarizerError):
    """The uploaded document could not be turned into text."""


class InvalidRangeError(ExtractionError):
    def __init__(self, start_page, stop_page, total_pages=None):
        self.start_page = start_page
        self.stop_page = stop_page
        self.total_pages = total_pages
        detail = f"Invalid page range: {start_page}-{stop_page}"
        if total_pages is not None:
            detail += f" (document has {total_pages} pages)"
        super().__init__(detail)


class AllProvidersExhaustedError(SummarizerError):
    """Every configured provider reported itself unavailable."""

    def __init__(self, outcomes: List):
        self.outcomes = list(outcomes)
        reasons = "; ".join(f"{o.provider.value}: {o.reason}" for o in self.outcomes)
        super().__init__(f"All summary providers failed ({reasons})")
