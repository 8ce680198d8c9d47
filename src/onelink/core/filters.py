"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/filters.py
Regex-driven decisions about which directory entries take part in a run.
"""

import re
from typing import Optional

from onelink.core.interfaces import PathFilter
from onelink.core.models import LinkParams, SkipReason


class PathFilterImpl(PathFilter):
    """
    Applies the three configured patterns with search semantics:
    a pattern matches anywhere unless it anchors itself.

    Attributes:
        extension_pattern: Allowed lowercase extensions (leading dot included)
        skip_file_pattern: File base names to ignore
        skip_dir_pattern: Directory base names whose whole subtree is ignored
    """

    def __init__(
        self,
        extension_pattern: re.Pattern,
        skip_file_pattern: re.Pattern,
        skip_dir_pattern: re.Pattern
    ):
        self.extension_pattern = extension_pattern
        self.skip_file_pattern = skip_file_pattern
        self.skip_dir_pattern = skip_dir_pattern

    @classmethod
    def from_params(cls, params: LinkParams) -> 'PathFilterImpl':
        return cls(params.extension_pattern, params.skip_file_pattern, params.skip_dir_pattern)

    def check_dir(self, name: str) -> Optional[SkipReason]:
        if self.skip_dir_pattern.search(name):
            return SkipReason.SKIP_DIR
        return None

    def check_file(self, name: str, extension: str) -> Optional[SkipReason]:
        """
        Extension is checked before the file name.
        Args:
            name: Base name of the file
            extension: Lowercase extension, e.g. ".jpg" (empty when absent)
        Returns:
            The reason to skip, or None to accept the file
        """
        if not self.extension_pattern.search(extension.lower()):
            return SkipReason.EXTENSION
        if self.skip_file_pattern.search(name):
            return SkipReason.SKIP_FILE
        return None
