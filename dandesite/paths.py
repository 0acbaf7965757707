"""Absolute locations of content sources and generated data."""

from __future__ import annotations

import os
from pathlib import Path

from dandesite.constants import (
    ABOUT_OUT_DIR,
    ABOUT_OUT_FILENAME,
    ABOUT_SRC_DIR,
    ABOUT_SRC_FILENAME,
    BLOG_OUT_DIR,
    BLOG_SRC_DIR,
    GENERATOR_DIR,
    PROCESS_REHYPE_PRISM_PLUS_FILENAME,
    ROOT_OUT_DIR,
)

PROJECT_ROOT_ENV = "DANDESITE_ROOT"


def project_root() -> Path:
    """Return the project root.

    The ``DANDESITE_ROOT`` environment variable wins when set; otherwise the
    directory that contains this package is used.
    """
    override = os.environ.get(PROJECT_ROOT_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent


# ===== Generator ===== #
def absolute_generator_dir() -> Path:
    return project_root() / GENERATOR_DIR


def absolute_process_rehype_prism_plus_filename() -> Path:
    return absolute_generator_dir() / PROCESS_REHYPE_PRISM_PLUS_FILENAME


# ===== App ===== #
def absolute_about_out_dir() -> Path:
    return project_root() / ABOUT_OUT_DIR


def absolute_about_out_filename() -> Path:
    return absolute_about_out_dir() / ABOUT_OUT_FILENAME


def absolute_about_src_dir() -> Path:
    return project_root() / ABOUT_SRC_DIR


def absolute_about_src_filename() -> Path:
    return absolute_about_src_dir() / ABOUT_SRC_FILENAME


def absolute_post_root_dir() -> Path:
    return project_root() / ROOT_OUT_DIR


def absolute_blog_out_dir() -> Path:
    return project_root() / BLOG_OUT_DIR


def absolute_blog_src_dir() -> Path:
    return project_root() / BLOG_SRC_DIR