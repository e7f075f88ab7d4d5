"""Filesystem locations and process identity for the jank toolchain."""

__version__ = "0.1.0"

from jankenv.config import (  # noqa: E402
    binary_cache_dir,
    resource_dir,
    user_cache_dir,
    user_config_dir,
    user_home_dir,
)
from jankenv.errors import (  # noqa: E402
    DirectoryCreationError,
    JankEnvError,
    ProcessIntrospectionError,
    TempFileCreationError,
    UnresolvableLocationError,
)
from jankenv.flags import add_system_flags  # noqa: E402
from jankenv.process import process_dir, process_path  # noqa: E402
from jankenv.tempfiles import make_temp_file  # noqa: E402
from jankenv.version import binary_version  # noqa: E402

__all__ = [
    "DirectoryCreationError",
    "JankEnvError",
    "ProcessIntrospectionError",
    "TempFileCreationError",
    "UnresolvableLocationError",
    "__version__",
    "add_system_flags",
    "binary_cache_dir",
    "binary_version",
    "make_temp_file",
    "process_dir",
    "process_path",
    "resource_dir",
    "user_cache_dir",
    "user_config_dir",
    "user_home_dir",
]
