"""Core components."""

from .enums import (
    UNKNOWN_VARIANT,
    CompatibilityMode,
    CoreApiStatus,
    CoreStatus,
    FileRelationType,
    FileReleaseType,
    FileStatus,
    HashAlgorithm,
    ModLoaderType,
    ProjectStatus,
    SearchSort,
    SortOrder,
    ViolationPolicy,
)
from .exceptions import (
    ConfigurationError,
    CurseForgeError,
    DecodeError,
    FetchError,
    ProtocolViolationError,
    ProtocolViolationWarning,
    ResponseDecodeError,
    StatusError,
    TransportError,
    format_field_path,
)

__all__ = [
    "UNKNOWN_VARIANT",
    "CompatibilityMode",
    "ViolationPolicy",
    "CoreStatus",
    "CoreApiStatus",
    "ProjectStatus",
    "FileReleaseType",
    "FileStatus",
    "HashAlgorithm",
    "FileRelationType",
    "ModLoaderType",
    "SearchSort",
    "SortOrder",
    "CurseForgeError",
    "ConfigurationError",
    "DecodeError",
    "FetchError",
    "TransportError",
    "StatusError",
    "ResponseDecodeError",
    "ProtocolViolationError",
    "ProtocolViolationWarning",
    "format_field_path",
]
