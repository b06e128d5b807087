"""sitemanager - provision local nginx virtual hosts for the current directory.

By default, the package's internal logging is disabled when used as a library.
Library users can enable logging by calling sitemanager.enable_logging().
"""

from sitemanager.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
