__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'brief'
__author__ = 'Brief contributors'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .aliases import *
from .brief import *
from .faults import *
from .guard import *
from .provider import *
from .store import *
from .workers import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the container
__all__ += brief.__all__  # type: ignore[attr-defined]
# Load the exposed API of the storage layers
__all__ += aliases.__all__  # type: ignore[attr-defined]
__all__ += guard.__all__  # type: ignore[attr-defined]
__all__ += store.__all__  # type: ignore[attr-defined]
__all__ += workers.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the provider
__all__ += provider.__all__  # type: ignore[attr-defined]
