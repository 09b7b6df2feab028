"""ffprobe implementation of the MediaProbe interface."""

import subprocess

from pydantic import BaseModel, ValidationError
from tubely_common.logging import setup_logging

from domain import VideoDimensions
from exceptions import MediaProbeError
from interfaces import MediaProbe

logger = setup_logging()


class ProbeStream(BaseModel):
    width: int = 0
    height: int = 0


class ProbeOutput(BaseModel):
    streams: list[ProbeStream] = []


class FFprobeMediaProbe(MediaProbe):
    """Runs ``ffprobe`` as a subprocess and reads its JSON stream listing."""

    def __init__(self, binary: str = "ffprobe", timeout_seconds: float = 30.0):
        self._binary = binary
        self._timeout_seconds = timeout_seconds

    def probe(self, file_path: str) -> VideoDimensions:
        command = [
            self._binary,
            "-v",
            "error",
            "-print_format",
            "json",
            "-show_streams",
            file_path,
        ]
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                check=True,
                timeout=self._timeout_seconds,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.exception("ffprobe failed", extra={"file_path": file_path})
            raise MediaProbeError(file_path, e) from e

        try:
            output = ProbeOutput.model_validate_json(result.stdout)
        except ValidationError as e:
            logger.exception("Unreadable ffprobe output", extra={"file_path": file_path})
            raise MediaProbeError(file_path, e) from e

        # Audio and data streams report no dimensions.
        for stream in output.streams:
            if stream.width > 0 and stream.height > 0:
                logger.info(
                    "Media probed",
                    extra={
                        "file_path": file_path,
                        "width": stream.width,
                        "height": stream.height,
                    },
                )
                return VideoDimensions(width=stream.width, height=stream.height)

        raise MediaProbeError(file_path, ValueError("No video stream found"))
