# topmark:header:start
#
#   project      : LitWeave
#   file         : builtins.py
#   file_relpath : src/litweave/languages/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in language definitions.

Two comment families are covered:

* the *slash* family (``//`` line comments and ``/* ... */`` block comments):
  Go, C, C++, C#, Java, JavaScript, TypeScript, Kotlin, Rust, Scala, Swift;
* the *pound* family (``#`` line comments, no block comments): Python, shell,
  Ruby, TOML, YAML.

Exports:
    SLASH (CommentSyntax): Generic C-style syntax without directives.
    GO_SYNTAX (CommentSyntax): C-style syntax plus Go compiler/tool directives.
    POUND (CommentSyntax): ``#`` syntax dropping shebangs and coding cookies.
    LANGUAGES (list[Language]): All built-in languages, Go first.
"""

from __future__ import annotations

from litweave.languages.base import CommentSyntax, Language

SLASH = CommentSyntax(line_marker="//", block_open="/*", block_close="*/")

# `//go:generate`, `//go:build`, `//go:embed`, `//line`, cgo's `//export`
# and `//extern`, and the legacy `// +build` constraint.
GO_SYNTAX = CommentSyntax(
    line_marker="//",
    block_open="/*",
    block_close="*/",
    directive_patterns=(
        r"go:\S",
        r"line ",
        r"export ",
        r"extern ",
        r" ?\+build\b",
    ),
)

POUND = CommentSyntax(
    line_marker="#",
    directive_patterns=(
        r"!",
        r".*-\*-.*coding[:=]",
    ),
)

LANGUAGES: list[Language] = [
    Language(
        name="go",
        extensions=(".go",),
        description="Go sources (*.go)",
        syntax=GO_SYNTAX,
        aliases=("golang",),
    ),
    Language(
        name="c",
        extensions=(".c", ".h"),
        description="C sources and headers (*.c, *.h)",
        syntax=SLASH,
    ),
    Language(
        name="cpp",
        extensions=(".cc", ".cxx", ".cpp", ".hh", ".hpp", ".hxx"),
        description="C++ sources and headers (*.cc, *.cxx, *.cpp, *.hh, *.hpp, *.hxx)",
        syntax=SLASH,
        aliases=("c++",),
    ),
    Language(
        name="csharp",
        extensions=(".cs",),
        description="C# sources (*.cs)",
        syntax=SLASH,
        aliases=("cs", "c#"),
    ),
    Language(
        name="java",
        extensions=(".java",),
        description="Java sources (*.java)",
        syntax=SLASH,
    ),
    Language(
        name="javascript",
        extensions=(".js", ".mjs", ".cjs"),
        description="JavaScript sources (*.js, *.mjs, *.cjs)",
        syntax=SLASH,
        aliases=("js",),
    ),
    Language(
        name="typescript",
        extensions=(".ts", ".mts", ".cts"),
        description="TypeScript sources (*.ts, *.mts, *.cts)",
        syntax=SLASH,
        aliases=("ts",),
    ),
    Language(
        name="kotlin",
        extensions=(".kt", ".kts"),
        description="Kotlin sources and scripts (*.kt, *.kts)",
        syntax=SLASH,
    ),
    Language(
        name="rust",
        extensions=(".rs",),
        description="Rust sources (*.rs)",
        syntax=SLASH,
    ),
    Language(
        name="scala",
        extensions=(".scala", ".sc"),
        description="Scala sources (*.scala, *.sc)",
        syntax=SLASH,
    ),
    Language(
        name="swift",
        extensions=(".swift",),
        description="Swift sources (*.swift)",
        syntax=SLASH,
    ),
    Language(
        name="python",
        extensions=(".py", ".pyi"),
        description="Python sources and stubs (*.py, *.pyi)",
        syntax=POUND,
        aliases=("py",),
    ),
    Language(
        name="shell",
        extensions=(".sh", ".bash", ".zsh"),
        description="Shell scripts (*.sh, *.bash, *.zsh)",
        syntax=POUND,
        fence="sh",
        lexer="bash",
        aliases=("sh", "bash"),
    ),
    Language(
        name="ruby",
        extensions=(".rb",),
        description="Ruby sources (*.rb)",
        syntax=POUND,
        aliases=("rb",),
    ),
    Language(
        name="toml",
        extensions=(".toml",),
        description="TOML documents (*.toml)",
        syntax=POUND,
    ),
    Language(
        name="yaml",
        extensions=(".yaml", ".yml"),
        description="YAML documents (*.yaml, *.yml)",
        syntax=POUND,
    ),
]
