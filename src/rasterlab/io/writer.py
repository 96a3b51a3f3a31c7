"""Canvas writer for saving rendered images.

This module provides the CanvasWriter class, which saves a Canvas as a
Netpbm pixmap (PPM). Binary P6 is the default; ASCII P3 is available for
images that need to be diffed or read by eye.
"""

from pathlib import Path

from rasterlab.domain import Canvas
from rasterlab.exceptions import OutputError

PPM_MAX_VALUE = 255

# Values per line in ASCII output (the format asks for lines under 70 chars)
P3_VALUES_PER_LINE = 12


def encode_ppm(canvas: Canvas, binary: bool = True) -> bytes:
    """Encode a canvas as PPM data.

    Args:
        canvas: Canvas to encode
        binary: P6 (raw bytes) when True, P3 (decimal text) otherwise

    Returns:
        The complete image file contents

    Examples:
        >>> canvas = Canvas(1, 1, background=(1, 2, 3))
        >>> encode_ppm(canvas, binary=False)
        b'P3\\n1 1\\n255\\n1 2 3\\n'
    """
    magic = "P6" if binary else "P3"
    header = f"{magic}\n{canvas.width} {canvas.height}\n{PPM_MAX_VALUE}\n".encode("ascii")

    if binary:
        body = bytearray()
        for row in canvas.rows():
            for r, g, b in row:
                body.extend((r, g, b))
        return header + bytes(body)

    values = [str(channel) for row in canvas.rows() for pixel in row for channel in pixel]
    lines = [
        " ".join(values[i : i + P3_VALUES_PER_LINE])
        for i in range(0, len(values), P3_VALUES_PER_LINE)
    ]
    return header + ("\n".join(lines) + "\n").encode("ascii")


class CanvasWriter:
    """Writes a canvas to disk as a PPM image.

    Example:
        writer = CanvasWriter(canvas, Path("circle.ppm"))
        writer.save()
    """

    def __init__(self, canvas: Canvas, output_path: Path) -> None:
        """Initialize the canvas writer.

        Args:
            canvas: Canvas to save
            output_path: Path where the image will be saved
        """
        self._canvas = canvas
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Destination of the image."""
        return self._output_path

    def save(self, binary: bool = True) -> Path:
        """Save the canvas to the output path.

        Args:
            binary: Write P6 (default) or P3 when False

        Returns:
            The path written

        Raises:
            OutputError: If the file cannot be written
        """
        data = encode_ppm(self._canvas, binary=binary)
        try:
            self._output_path.write_bytes(data)
        except OSError as e:
            raise OutputError(str(self._output_path), str(e)) from e
        return self._output_path

    @staticmethod
    def get_image_path(input_path: Path) -> Path:
        """Generate the image path for a scene file.

        Converts: scene.json -> scene.ppm

        Args:
            input_path: Scene file path

        Returns:
            Path with a .ppm extension next to the input
        """
        return input_path.with_suffix(".ppm")
