"""Shared constants for the vibe-score application.

For environment-based configuration (sample sizes, seeds, etc.), use the env module:
    from common.env import env
    sample = env.sample_commits()
"""

import re

# Source file extensions considered for snippet extraction
CODE_EXTENSIONS: set[str] = {
    # JavaScript/TypeScript
    ".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs", ".vue", ".svelte", ".astro",
    # Python
    ".py", ".pyw", ".pyx", ".pxd", ".pxi",
    # Go, Rust
    ".go", ".rs",
    # Java/Kotlin/Scala
    ".java", ".kt", ".kts", ".scala", ".sc",
    # C/C++/Objective-C
    ".c", ".cpp", ".cc", ".cxx", ".h", ".hpp", ".hxx", ".m", ".mm",
    # C#/F#
    ".cs", ".fs", ".fsx",
    # Ruby, PHP, Swift, Dart, Lua
    ".rb", ".rake", ".gemspec", ".php", ".phtml", ".swift", ".dart", ".lua",
    # Shell, Perl, R
    ".sh", ".bash", ".zsh", ".fish", ".pl", ".pm", ".r",
    # Elixir/Erlang, Haskell, Clojure
    ".ex", ".exs", ".erl", ".hrl", ".hs", ".lhs", ".clj", ".cljs", ".cljc", ".edn",
    # Zig, Nim, V, OCaml, SQL, Groovy
    ".zig", ".nim", ".v", ".ml", ".mli", ".sql", ".groovy", ".gradle",
}

# Generated, minified, vendored and compiled paths are never quizzed
IGNORED_PATH_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"\.min\."),
    re.compile(r"\.bundle\."),
    re.compile(r"\.generated\."),
    re.compile(r"node_modules"),
    re.compile(r"vendor/"),
    re.compile(r"dist/"),
    re.compile(r"build/"),
    re.compile(r"target/"),
    re.compile(r"\.d\.ts$"),
    re.compile(r"__pycache__"),
    re.compile(r"\.pyc$"),
]

# Snippet sizing
MIN_SNIPPET_LINES = 4
MAX_SNIPPET_LINES = 12
WINDOW_RATIO = 0.7

# Line classification thresholds
CONTEXT_WINDOW = 5
COMMENT_CONTEXT_LINES = 2
MIN_COMMENT_LENGTH = 15  # comment lines must be longer than this
MIN_COMMENT_LINE_GATE = 20  # at least one comment line longer than this
MIN_CODE_LINE_LENGTH = 8

# Deduplication
FINGERPRINT_LENGTH = 200
SIMILARITY_THRESHOLD = 0.8

# Velocity
HIGH_OUTPUT_LINES = 500
VELOCITY_TOP_N = 10

# Question sampling
SELF_SHARE = 0.6
MIN_QUESTIONS = 3

# Score weights
FORGET_WEIGHT = 50
FUZZY_WEIGHT = 30
FALSE_MEMORY_WEIGHT = 20
CODE_TRACK_WEIGHT = 0.5
COMMENT_TRACK_WEIGHT = 0.35
VELOCITY_BONUS_PER_DAY = 3
VELOCITY_BONUS_CAP = 15
MAX_SCORE = 100
