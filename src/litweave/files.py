# topmark:header:start
#
#   project      : LitWeave
#   file         : files.py
#   file_relpath : src/litweave/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reading sources and writing generated documents.

Writes are atomic: data goes to a temporary file in the destination directory
which is then moved over the destination with `os.replace`. A failing run
therefore never leaves a truncated document behind.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from litweave.config.logging import get_logger
from litweave.constants import CSS_NAME
from litweave.errors import InputError, OutputError, SourceEncodingError
from litweave.languages.registry import resolve_language
from litweave.weave.assembler import generate_docs

if TYPE_CHECKING:
    from litweave.config.logging import WeaveLogger
    from litweave.config.model import Config
    from litweave.languages.base import Language
    from litweave.resources import Resources

logger: WeaveLogger = get_logger(__name__)

OUTPUT_MODE: int = 0o644


def output_path(source: Path, config: Config) -> Path:
    """Return the output path for ``source``: ``<outdir>/<stem>.<html|md>``."""
    return config.outdir / f"{source.stem}.{config.output_format.extension}"


def write_atomic(dst: Path, data: bytes) -> None:
    """Atomically write ``data`` to ``dst`` with mode 0644.

    Args:
        dst (Path): Destination file.
        data (bytes): Content to write.

    Raises:
        OutputError: If the file cannot be written.
    """
    tmp_name: str | None = None
    try:
        dst.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=dst.parent, prefix=f".{dst.name}.", suffix=".tmp")
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.chmod(tmp_name, OUTPUT_MODE)
        os.replace(tmp_name, dst)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputError(f"Cannot write {dst}: {exc}") from exc
    logger.debug("Wrote %d bytes to %s", len(data), dst)


def copy_file(dst: Path, src: Path) -> None:
    """Atomically copy ``src`` to ``dst``.

    Raises:
        OutputError: If ``src`` cannot be read or ``dst`` cannot be written.
    """
    try:
        data: bytes = src.read_bytes()
    except OSError as exc:
        raise OutputError(f"Cannot read {src}: {exc}") from exc
    write_atomic(dst, data)


def copy_css_file(config: Config, resources: Resources) -> Path | None:
    """Copy the stylesheet to ``<outdir>/<csspath>/litweave.css``.

    Nothing is copied for the Markdown target, for inlined CSS, or when the
    source and destination are the same file.

    Args:
        config (Config): Runtime configuration.
        resources (Resources): Loaded resources.

    Returns:
        Path | None: The written stylesheet path, or None if nothing was copied.

    Raises:
        OutputError: If the stylesheet cannot be copied.
    """
    src = resources.css_source
    if config.is_markdown or config.inline_css or src is None:
        return None

    dst: Path = config.outdir / config.csspath / CSS_NAME
    if isinstance(src, Path):
        try:
            if dst.exists() and dst.samefile(src):
                logger.debug("Stylesheet already in place: %s", dst)
                return None
        except OSError as exc:
            raise OutputError(f"Cannot access {dst}: {exc}") from exc
        copy_file(dst, src)
    else:
        try:
            data: bytes = src.read_bytes()
        except OSError as exc:
            raise OutputError(f"Cannot read {src}: {exc}") from exc
        write_atomic(dst, data)
    logger.info("Copied stylesheet to %s", dst)
    return dst


def read_source(path: Path) -> str:
    """Read a source file as UTF-8 text with universal newlines.

    Raises:
        InputError: If the file cannot be read.
        SourceEncodingError: If the file is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SourceEncodingError(f"Cannot decode {path} as UTF-8: {exc}") from exc
    except OSError as exc:
        raise InputError(f"Cannot read {path}: {exc}") from exc


def process_file(path: Path, config: Config, resources: Resources) -> str | Path:
    """Weave one source file.

    Args:
        path (Path): Source file.
        config (Config): Runtime configuration.
        resources (Resources): Loaded resources.

    Returns:
        str | Path: The document text when ``config.to_stdout`` is set, otherwise the
            path of the written document.

    Raises:
        WeaveError: If reading, rendering or writing fails.
    """
    language: Language = resolve_language(path, config)
    logger.info("Weaving %s (%s)", path, language.name)
    source: str = read_source(path)
    text: str = generate_docs(
        path.name,
        source,
        config=config,
        resources=resources,
        language=language,
    )
    if config.to_stdout:
        return text
    dst: Path = output_path(path, config)
    write_atomic(dst, text.encode("utf-8"))
    return dst
