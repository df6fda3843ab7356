"""File filtering policy for directory listings and document scans

Following Sandi Metz principles:
- Single Responsibility: Only handles entry exclusion logic
- Small methods: Each method under 5 lines where possible
- Tell, Don't Ask: Policy makes decisions, doesn't expose internals
"""
from pathlib import PurePosixPath
from typing import Iterable


class FileFilterPolicy:
    """Determines which directory entries are visible to clients

    Hidden entries, ignored directory names and sidecar metadata files are
    never shown. Files must also carry an allowed extension.
    """

    def __init__(self, extensions: Iterable[str], ignored_directories: Iterable[str] = (),
                 sidecar_filenames: Iterable[str] = ()):
        self.extensions = {ext.lower() for ext in extensions}
        self.ignored_directories = set(ignored_directories)
        self.sidecar_filenames = set(sidecar_filenames)

    def should_include_directory(self, name: str) -> bool:
        """Check if a sub-directory is listed and scanned"""
        return not self._is_hidden(name) and name not in self.ignored_directories

    def should_include_file(self, name: str) -> bool:
        """Check if a file is listed"""
        if self._is_hidden(name) or name in self.sidecar_filenames:
            return False
        return self.extension_of(name) in self.extensions

    @staticmethod
    def extension_of(name: str) -> str:
        """Lower-case extension including the dot ('' if none)"""
        return PurePosixPath(name).suffix.lower()

    @staticmethod
    def _is_hidden(name: str) -> bool:
        """Hidden and system entries start with a dot"""
        return name.startswith('.')
