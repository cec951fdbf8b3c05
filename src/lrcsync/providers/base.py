from abc import ABC, abstractmethod

from ..models import LyricsSource


class LyricsProvider(ABC):
    """Abstract base class for lyrics providers."""

    @abstractmethod
    def fetch(self, title: str, artist: str) -> tuple[str, str]:
        """Query the provider and return ``(raw_response, url)``.

        Raises FetchError on HTTP-level failures.
        """

    @abstractmethod
    def extract(self, payload: str, url: str) -> LyricsSource:
        """Decode a raw response into a :class:`LyricsSource`.

        Raises ParseError if the response is not in the expected shape.
        """

    def lookup(self, title: str, artist: str) -> LyricsSource:
        """Convenience method: fetch + extract."""
        payload, url = self.fetch(title, artist)
        return self.extract(payload, url)
