import os


def write_text(stream, text: str) -> None:
    """Write ``text`` to ``stream``, passing undecodable path bytes through.

    Paths from ``os.scandir`` carry surrogate escapes for bytes that are not
    valid in the filesystem encoding; they are written back as the raw bytes.
    Streams without a binary buffer (``io.StringIO``) get the text as-is.
    """
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text)
        return
    stream.flush()
    buffer.write(os.fsencode(text))
    buffer.flush()
