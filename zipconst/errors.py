"""
Copyright 2025 DNAi inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
Custom exception classes for zipconst.

This module defines specific exception types for the error conditions
that can occur when using the format vocabulary and the legacy text codec.
"""


class ZipError(Exception):
    """Base exception class for all ZIP-related errors."""

    pass


class ZipFormatError(ZipError):
    """Raised when binary data or a length argument is invalid.

    This exception is raised when:
    - A length argument is negative or larger than the buffer
    - A buffer is too short to hold a signature or integer field
    """

    pass


class ZipUnsupportedFeature(ZipError):
    """Raised when encountering an unsupported ZIP feature.

    This exception is raised when:
    - A compression method identifier is unknown
    - A known compression method is not supported (Deflate64, BZip2, WinZip AES)
    """

    pass


class ZipCodePageError(ZipError, LookupError):
    """Raised when a code page identifier has no matching text codec.

    The default code page is never validated when set, so this surfaces
    on the first conversion that uses it.
    """

    def __init__(self, code_page: int):
        super().__init__(f"Unknown code page: {code_page}")
        self.code_page = code_page

