#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/utils/io_utils.py
"""I/O utilities for writing rendered pages to their destination."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from notion2md.exceptions import OutputWriteError


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: Union[str, bytes], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered content to a file path or file-like object.

    Parameters
    ----------
    content : str or bytes
        Rendered content. Bytes are UTF-8 encoded text.
    output : str, Path, IO[bytes] or IO[str]
        Destination path or stream. Text streams receive decoded text,
        binary streams receive bytes.

    Raises
    ------
    OutputWriteError
        If the destination file cannot be written
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = StringIO()
        >>> write_content(b"# Title", buffer)
        >>> buffer.getvalue()
        '# Title'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            if isinstance(content, str):
                output_path.write_text(content, encoding="utf-8")
            else:
                output_path.write_bytes(content)
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        binary_output = cast(IO[bytes], output)
        binary_output.write(content.encode("utf-8") if isinstance(content, str) else content)
    else:
        text_output = cast(IO[str], output)
        text_output.write(content.decode("utf-8") if isinstance(content, bytes) else content)


__all__ = ["write_content"]
