# topmark:header:start
#
#   project      : LitWeave
#   file         : model.py
#   file_relpath : src/litweave/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot, built once at start-up and passed
      explicitly to every step that needs it.
    - `MutableConfig`: a mutable builder used while merging defaults, config
      files and CLI overrides; it is frozen into a `Config` and can be thawed back.

Precedence (lowest to highest):
    1. built-in defaults,
    2. discovered config files (root-most first, nearest last),
    3. config files given explicitly (``--config``),
    4. CLI overrides.

Path semantics:
    - ``outdir`` and ``resdir`` declared in a config file are resolved against
      that file's directory.
    - CLI paths are taken relative to the invocation CWD.
    - ``csspath`` is a relative path below ``outdir`` and is also used as the
      ``<link>`` href prefix, so it is kept as a string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from litweave.config.io import (
    LITWEAVE_TOML,
    PYPROJECT_TOML,
    Toml,
    extract_litweave_table,
    get_bool_value_or_none,
    get_string_value_or_none,
    load_toml_dict,
)
from litweave.config.logging import get_logger
from litweave.config.types import OutputFormat
from litweave.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from litweave.config.io import TomlTable
    from litweave.config.logging import WeaveLogger
    from litweave.config.types import ArgsLike

logger: WeaveLogger = get_logger(__name__)

DEFAULT_LANGUAGE: str = "go"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        outdir (Path): Directory receiving generated documents and the stylesheet.
        resdir (Path | None): Directory holding a custom template and stylesheet; None
            selects the bundled resources.
        csspath (str): Stylesheet location relative to ``outdir``; also the prefix of the
            ``<link>`` href.
        output_format (OutputFormat): HTML or Markdown.
        bare (bool): Emit only the HTML body fragment instead of a full page.
        inline_css (bool): Embed the stylesheet into the page instead of linking it.
        intro_only (bool): Keep only the leading comment block of each file.
        language (str | None): Force this language for every input; None selects by extension.
        default_language (str): Language used for unknown extensions.
        to_stdout (bool): Print the document instead of writing a file.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    outdir: Path = Path(".")
    resdir: Path | None = None
    csspath: str = ""
    output_format: OutputFormat = OutputFormat.HTML
    bare: bool = False
    inline_css: bool = False
    intro_only: bool = False
    language: str | None = None
    default_language: str = DEFAULT_LANGUAGE
    to_stdout: bool = False
    config_files: tuple[Path, ...] = ()

    @property
    def full_page(self) -> bool:
        """Whether a full HTML page (as opposed to a body fragment) is generated."""
        return not self.bare

    @property
    def is_markdown(self) -> bool:
        """Whether the Markdown target is selected."""
        return self.output_format is OutputFormat.MARKDOWN

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            outdir=self.outdir,
            resdir=self.resdir,
            csspath=self.csspath,
            output_format=self.output_format,
            bare=self.bare,
            inline_css=self.inline_css,
            intro_only=self.intro_only,
            language=self.language,
            default_language=self.default_language,
            to_stdout=self.to_stdout,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every field is optional: ``None`` means *inherit* from the layer below.
    `freeze` fills the remaining gaps with the `Config` defaults.
    """

    outdir: Path | None = None
    resdir: Path | None = None
    csspath: str | None = None
    output_format: OutputFormat | None = None
    bare: bool | None = None
    inline_css: bool | None = None
    intro_only: bool | None = None
    language: str | None = None
    default_language: str | None = None
    to_stdout: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------

    def sanitize(self) -> None:
        """Resolve contradictory settings.

        Inline CSS needs the page ``<head>``, which a bare body fragment lacks,
        so ``inline_css`` is dropped when ``bare`` is set.
        """
        if self.bare and self.inline_css:
            logger.warning("Ignoring inline CSS: it cannot be combined with bare output")
            self.inline_css = False

    def freeze(self) -> Config:
        """Sanitize and freeze this builder into an immutable `Config`."""
        self.sanitize()
        defaults = Config()
        return Config(
            outdir=self.outdir if self.outdir is not None else defaults.outdir,
            resdir=self.resdir,
            csspath=self.csspath if self.csspath is not None else defaults.csspath,
            output_format=self.output_format or defaults.output_format,
            bare=bool(self.bare),
            inline_css=bool(self.inline_css),
            intro_only=bool(self.intro_only),
            language=self.language or None,
            default_language=self.default_language or defaults.default_language,
            to_stdout=bool(self.to_stdout),
            config_files=tuple(self.config_files),
        )

    # ---------------------------- Sources ----------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return Config().thaw()

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a LitWeave TOML table.

        Args:
            data (TomlTable): The ``litweave.toml`` document or ``[tool.litweave]`` table.
            config_file (Path | None): File the table came from; relative paths are
                resolved against its directory.

        Returns:
            MutableConfig: The draft (unset keys stay None).
        """
        base: Path = config_file.parent if config_file is not None else Path.cwd()

        for key in data:
            if key not in Toml.ALL:
                logger.warning("Unknown config key '%s' in %s", key, config_file or "<dict>")

        draft = cls()

        outdir: str | None = get_string_value_or_none(data, Toml.KEY_OUTDIR)
        if outdir is not None:
            draft.outdir = base / outdir
        resdir: str | None = get_string_value_or_none(data, Toml.KEY_RESDIR)
        if resdir is not None:
            draft.resdir = base / resdir

        draft.csspath = get_string_value_or_none(data, Toml.KEY_CSSPATH)

        fmt_name: str | None = get_string_value_or_none(data, Toml.KEY_FORMAT)
        if fmt_name is not None:
            draft.output_format = OutputFormat.from_name(fmt_name)
            if draft.output_format is None:
                logger.warning("Ignoring unknown output format '%s'", fmt_name)

        draft.bare = get_bool_value_or_none(data, Toml.KEY_BARE)
        draft.inline_css = get_bool_value_or_none(data, Toml.KEY_INLINE)
        draft.intro_only = get_bool_value_or_none(data, Toml.KEY_INTRO_ONLY)
        draft.language = get_string_value_or_none(data, Toml.KEY_LANGUAGE)
        draft.default_language = get_string_value_or_none(data, Toml.KEY_DEFAULT_LANGUAGE)

        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Build a draft from a config file.

        Args:
            path (Path): ``litweave.toml`` (any name) or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The draft, or None if a ``pyproject.toml`` carries no
                ``[tool.litweave]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Loading config from %s", path)
        table: TomlTable | None = extract_litweave_table(load_toml_dict(path), path)
        if table is None:
            logger.debug("No [tool.litweave] table in %s", path)
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found by walking upward from ``start``.

        Files are returned root-most first, nearest last, so a later merge gives
        precedence to the nearest file. Within one directory ``pyproject.toml``
        comes before ``litweave.toml``. A file setting ``root = true`` stops the
        walk after its directory.

        Args:
            start (Path): Directory (or file) where discovery starts.

        Returns:
            list[Path]: Discovered config files in merge order.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            stop_here = False
            entries: list[Path] = []
            for name in (PYPROJECT_TOML, LITWEAVE_TOML):
                p: Path = cur / name
                if not p.is_file():
                    continue
                try:
                    table: TomlTable | None = extract_litweave_table(load_toml_dict(p), p)
                except ConfigError as exc:
                    # Discovery is best-effort; explicit --config files are strict.
                    logger.warning("Skipping unreadable config file %s: %s", p, exc)
                    continue
                if table is None:
                    continue
                entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if bool(table.get(Toml.KEY_ROOT, False)):
                    stop_here = True
            if entries:
                per_dir.append(entries)
            if stop_here:
                logger.debug("Stopping config discovery at %s (root = true)", cur)
                break
            if cur.parent == cur:
                break
            cur = cur.parent

        ordered: list[Path] = []
        for entries in reversed(per_dir):
            ordered.extend(entries)
        return ordered

    # ---------------------------- Merging ----------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay ``other`` onto this draft (``other`` wins where it is set).

        Args:
            other (MutableConfig): Higher-precedence draft.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        for name in (
            "outdir",
            "resdir",
            "csspath",
            "output_format",
            "bare",
            "inline_css",
            "intro_only",
            "language",
            "default_language",
            "to_stdout",
        ):
            value: Any = getattr(other, name)
            if value is not None:
                setattr(self, name, value)
        self.config_files.extend(p for p in other.config_files if p not in self.config_files)
        return self

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Overlay CLI (or API) arguments onto this draft.

        Recognized keys: ``outdir``, ``resdir``, ``csspath``, ``output_format``,
        ``bare``, ``inline``, ``intro_only``, ``language``, ``stdout``. Missing keys
        and ``None`` values leave the draft untouched; flags only ever switch
        features on.

        Args:
            args (ArgsLike): Parsed arguments.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if args.get("outdir") is not None:
            self.outdir = Path(args["outdir"])
        if args.get("resdir") is not None:
            self.resdir = Path(args["resdir"])
        if args.get("csspath") is not None:
            self.csspath = str(args["csspath"])
        fmt: Any = args.get("output_format")
        if fmt is not None:
            self.output_format = fmt if isinstance(fmt, OutputFormat) else OutputFormat(fmt)
        for arg_key, attr in (
            ("bare", "bare"),
            ("inline", "inline_css"),
            ("intro_only", "intro_only"),
            ("stdout", "to_stdout"),
        ):
            if args.get(arg_key):
                setattr(self, attr, True)
        if args.get("language"):
            self.language = str(args["language"])
        return self

    @classmethod
    def load_merged(
        cls,
        args: ArgsLike | None = None,
        *,
        extra_config_files: Iterable[Path] = (),
        start: Path | None = None,
        discover: bool = True,
    ) -> MutableConfig:
        """Merge defaults, config files, and CLI arguments into one draft.

        Args:
            args (ArgsLike | None): CLI/API overrides (highest precedence).
            extra_config_files (Iterable[Path]): Config files given explicitly.
            start (Path | None): Anchor for config discovery (defaults to the CWD).
            discover (bool): Whether to look for ``litweave.toml`` / ``pyproject.toml``.

        Returns:
            MutableConfig: The merged draft, ready to be frozen.

        Raises:
            ConfigError: If an explicitly given config file cannot be used.
        """
        draft: MutableConfig = cls.from_defaults()

        if discover:
            for path in cls.discover_local_config_files(start or Path.cwd()):
                layer: MutableConfig | None = cls.from_toml_file(path)
                if layer is not None:
                    draft.merge_with(layer)

        for path in extra_config_files:
            if not path.is_file():
                raise ConfigError(f"Config file not found: {path}")
            layer = cls.from_toml_file(path)
            if layer is None:
                raise ConfigError(f"No [tool.litweave] table in {path}")
            draft.merge_with(layer)

        if args:
            draft.apply_cli_args(args)
        logger.debug("Merged config: %s", draft)
        return draft
