"""moviepy implementation of the MediaProbe interface."""

import moviepy
from tubely_common.logging import setup_logging

from domain import VideoDimensions
from exceptions import MediaProbeError
from interfaces import MediaProbe

logger = setup_logging()


class MoviepyMediaProbe(MediaProbe):
    """Reads video dimensions in-process with moviepy instead of spawning ffprobe."""

    def probe(self, file_path: str) -> VideoDimensions:
        try:
            video = moviepy.VideoFileClip(file_path, audio=False)
            try:
                width, height = video.size
            finally:
                video.close()
            dimensions = VideoDimensions(width=width, height=height)
        except Exception as e:
            logger.exception("moviepy probe failed", extra={"file_path": file_path})
            raise MediaProbeError(file_path, e) from e

        logger.info(
            "Media probed",
            extra={"file_path": file_path, "width": width, "height": height},
        )
        return dimensions
