"""Shared constants: date formats, content locations and limits."""

# ===== Formats ===== #
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
POST_DATE_FORMAT = "%B %-d, %Y"

# ===== Generator ===== #
GENERATOR_DIR = "generator"
PROCESS_REHYPE_PRISM_PLUS_FILENAME = "process-rehype-prism-plus.mjs"

# ===== App ===== #
ABOUT_OUT_DIR = ".data/about"
ABOUT_OUT_FILENAME = "default.json"
ABOUT_SRC_DIR = "domain/src/data/about"
ABOUT_SRC_FILENAME = "default.md"
BLOG_OUT_DIR = ".data/blog"
BLOG_SRC_DIR = "domain/src/data/blog"
ROOT_OUT_DIR = ".data"

# ===== Posts ===== #
MAX_POSTS_PER_PAGE = 5

# ===== Theme ===== #
THEME_LOCAL_STORAGE_KEY = "theme"