"""Abstract interface for media inspection."""

from abc import ABC, abstractmethod

from domain import VideoDimensions


class MediaProbe(ABC):
    """Abstract base class for tools that report video stream dimensions."""

    @abstractmethod
    def probe(self, file_path: str) -> VideoDimensions:
        """
        Inspects a media file on disk.

        Args:
            file_path: Path to the media file.

        Returns:
            The dimensions of the first video stream.

        Raises:
            MediaProbeError: If the file cannot be inspected.
        """
        pass
