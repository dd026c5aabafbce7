"""clientstate - configuration and session persistence for a chat client.

By default, clientstate's internal logging is disabled when used as a library.
Library users can enable logging by calling clientstate.enable_logging().
"""

from clientstate.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
